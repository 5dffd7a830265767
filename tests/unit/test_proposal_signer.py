"""HMAC proposal signatures."""

from taskboard.application.dtos.assistant import TaskOperationsProposal
from taskboard.application.services.proposal_signer import ProposalSigner


def _proposal(title: str, due_date=None) -> TaskOperationsProposal:
    updates = {"title": title}
    if due_date is not None or title == "cleared":
        updates["dueDate"] = due_date
    return TaskOperationsProposal.model_validate(
        {
            "action": "PROPOSE_TASK_OPERATIONS",
            "operations": [{"type": "UPDATE", "taskIdentifier": "abc", "updates": updates}],
        }
    )


def test_sign_and_verify() -> None:
    signer = ProposalSigner("secret")
    signature = signer.sign(_proposal("A"))
    assert len(signature) == 64
    assert signer.verify(_proposal("A"), signature)
    assert not signer.verify(_proposal("B"), signature)
    assert not signer.verify(_proposal("A"), None)
    assert not ProposalSigner("other").verify(_proposal("A"), signature)


def test_explicit_null_is_part_of_the_signature() -> None:
    signer = ProposalSigner("secret")
    cleared = _proposal("cleared")
    assert '"dueDate":null' in signer.canonical_json(cleared)
    assert signer.sign(cleared) != signer.sign(
        TaskOperationsProposal.model_validate(
            {
                "action": "PROPOSE_TASK_OPERATIONS",
                "operations": [
                    {"type": "UPDATE", "taskIdentifier": "abc", "updates": {"title": "cleared"}}
                ],
            }
        )
    )
