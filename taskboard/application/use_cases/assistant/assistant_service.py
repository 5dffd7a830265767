"""Conversational entry point: every pipeline failure becomes a normal reply."""

from __future__ import annotations

from typing import TYPE_CHECKING

from taskboard.application.use_cases.assistant.confirmation_gate import ChatReply
from taskboard.core.constants import (
    MALFORMED_REPLY,
    NO_PENDING_PROPOSAL_REPLY,
    PROPOSAL_PENDING_REPLY,
    SIGNATURE_INVALID_REPLY,
    UPSTREAM_FAILURE_REPLY,
)
from taskboard.domain.exceptions import (
    AssistantException,
    MalformedCompletion,
    NoPendingProposal,
    ProposalPending,
    ProposalSignatureInvalid,
    UpstreamError,
    UpstreamUnavailable,
)
from taskboard.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from taskboard.application.use_cases.assistant.confirmation_gate import (
        ChatTurn,
        ConfirmationGate,
    )

logger = get_logger(__name__)


def reply_for_error(exc: AssistantException, turn: ChatTurn) -> ChatReply:
    """Map an assistant failure to the reply shown in the chat."""
    if isinstance(exc, (UpstreamUnavailable, UpstreamError)):
        return ChatReply(response_text=UPSTREAM_FAILURE_REPLY)
    if isinstance(exc, MalformedCompletion):
        return ChatReply(response_text=MALFORMED_REPLY, debug_raw_output=exc.raw_text or None)
    if isinstance(exc, ProposalPending):
        # Hand the untouched proposal back so the client keeps awaiting confirmation.
        proposal = turn.pending_proposal
        return ChatReply(
            response_text=PROPOSAL_PENDING_REPLY,
            action=proposal.action if proposal else None,
            proposal=proposal,
            proposal_signature=turn.proposal_signature,
        )
    if isinstance(exc, NoPendingProposal):
        return ChatReply(response_text=NO_PENDING_PROPOSAL_REPLY)
    if isinstance(exc, ProposalSignatureInvalid):
        return ChatReply(response_text=SIGNATURE_INVALID_REPLY)
    return ChatReply(response_text=exc.message)


class AssistantService:
    """Run one chat turn through the confirmation gate."""

    def __init__(self, gate: ConfirmationGate) -> None:
        self.gate = gate

    async def chat(self, turn: ChatTurn) -> ChatReply:
        try:
            return await self.gate.handle(turn)
        except AssistantException as e:
            logger.warning("Assistant turn failed (%s): %s", e.error_code, e.message)
            return reply_for_error(e, turn)
