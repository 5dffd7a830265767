"""Assistant chat API schemas (camelCase on the wire, as the chat client sends them)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taskboard.application.dtos.assistant import ActionProposal, to_wire
from taskboard.application.use_cases.assistant import ChatReply
from taskboard.domain.enums import OperationType


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatRequest(_CamelModel):
    """Body of POST /assistant/chat.

    message is free text or a confirm/cancel sentinel; proposalToConfirm is the
    proposal from the previous reply, echoed back while it awaits confirmation.
    """

    message: str = Field(..., max_length=8000)
    current_user: str | None = Field(default=None, max_length=255)
    proposal_to_confirm: ActionProposal | None = None
    proposal_signature: str | None = Field(default=None, max_length=128)


class OperationResultResponse(_CamelModel):
    success: bool
    message: str
    operation: OperationType | None = None
    task_id: str | None = None


class ChatResponse(_CamelModel):
    """Conversational reply. Always HTTP 200; failures are described in responseText."""

    response_text: str
    action: str | None = None
    proposal: dict[str, Any] | None = None
    proposal_signature: str | None = None
    operations_processed: bool | None = None
    all_successful: bool | None = None
    results: list[OperationResultResponse] | None = None
    debug_raw_output: str | None = None

    @classmethod
    def from_reply(cls, reply: ChatReply) -> "ChatResponse":
        return cls(
            response_text=reply.response_text,
            action=reply.action,
            proposal=to_wire(reply.proposal) if reply.proposal is not None else None,
            proposal_signature=reply.proposal_signature,
            operations_processed=reply.operations_processed,
            all_successful=reply.all_successful,
            results=[
                OperationResultResponse(
                    success=r.success,
                    message=r.message,
                    operation=r.operation,
                    task_id=r.task_id,
                )
                for r in reply.results
            ]
            or None,
            debug_raw_output=reply.debug_raw_output,
        )

    def to_content(self) -> dict[str, Any]:
        """JSON body without null fields; the proposal is passed through as-is.

        The proposal keeps explicit nulls (e.g. a cleared due date) so that the
        echoed copy verifies against its signature.
        """
        content = self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude={"proposal"}
        )
        if self.proposal is not None:
            content["proposal"] = self.proposal
        return content
