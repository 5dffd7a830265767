"""Proposal/confirmation gate for the conversational assistant.

The server keeps no session: the pending proposal travels with the client and
comes back on the next turn, so the gate state is derived from each request.

    Idle + message                  -> interpret; proposal => AwaitingConfirmation
    AwaitingConfirmation + confirm  -> Idle, execute exactly once
    AwaitingConfirmation + cancel   -> Idle, fixed acknowledgement, nothing runs
    AwaitingConfirmation + text     -> ProposalPending (proposal kept)
    Idle + confirm                  -> NoPendingProposal
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from taskboard.application.dtos.assistant import (
    ConfigurationChangeProposal,
    GeneralChatAction,
    OperationResult,
    QueryTasksAction,
    TaskOperationsProposal,
)
from taskboard.application.services.task_query import summarize
from taskboard.core.constants import (
    CANCEL_SENTINEL,
    CANCELLED_REPLY_TEMPLATE,
    CONFIRM_SENTINEL,
    FALLBACK_CHAT_REPLY,
)
from taskboard.domain.exceptions import (
    NoPendingProposal,
    ProposalPending,
    ProposalSignatureInvalid,
)
from taskboard.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from taskboard.application.services.proposal_signer import ProposalSigner
    from taskboard.application.services.task_query import TaskQueryService
    from taskboard.application.use_cases.assistant.message_interpreter import (
        MessageInterpreter,
    )
    from taskboard.application.use_cases.assistant.operation_executor import (
        OperationExecutor,
    )

logger = get_logger(__name__)

Proposal = TaskOperationsProposal | ConfigurationChangeProposal


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class AwaitingConfirmation:
    proposal: Proposal
    signature: str | None = None


GateState = Idle | AwaitingConfirmation


@dataclass(frozen=True)
class ChatTurn:
    """One inbound chat message plus whatever proposal the client is holding."""

    message: str
    speaking_user: str
    pending_proposal: Proposal | None = None
    proposal_signature: str | None = None

    @property
    def state(self) -> GateState:
        if self.pending_proposal is None:
            return Idle()
        return AwaitingConfirmation(self.pending_proposal, self.proposal_signature)


@dataclass
class ChatReply:
    response_text: str
    action: str | None = None
    proposal: Proposal | None = None
    proposal_signature: str | None = None
    operations_processed: bool | None = None
    all_successful: bool | None = None
    results: list[OperationResult] = field(default_factory=list)
    debug_raw_output: str | None = None


class ConfirmationGate:
    """Route a turn through interpretation or execution according to gate state."""

    def __init__(
        self,
        interpreter: MessageInterpreter,
        executor: OperationExecutor,
        query_service: TaskQueryService,
        signer: ProposalSigner | None = None,
    ) -> None:
        self.interpreter = interpreter
        self.executor = executor
        self.query_service = query_service
        self.signer = signer

    async def handle(self, turn: ChatTurn) -> ChatReply:
        """Raises AssistantException subclasses; callers turn them into replies."""
        state = turn.state
        message = turn.message.strip()

        if message == CONFIRM_SENTINEL:
            if not isinstance(state, AwaitingConfirmation):
                raise NoPendingProposal()
            return await self._confirm(state, turn.speaking_user)

        if message == CANCEL_SENTINEL:
            if isinstance(state, AwaitingConfirmation):
                logger.info("Proposal %s cancelled", state.proposal.action)
            return ChatReply(
                response_text=CANCELLED_REPLY_TEMPLATE.format(user=turn.speaking_user),
                action=GeneralChatAction().action,
            )

        if isinstance(state, AwaitingConfirmation):
            raise ProposalPending()

        action = await self.interpreter.interpret(message, turn.speaking_user)
        if isinstance(action, (TaskOperationsProposal, ConfigurationChangeProposal)):
            return ChatReply(
                response_text=action.response_text or "Shall I go ahead?",
                action=action.action,
                proposal=action,
                proposal_signature=self.signer.sign(action) if self.signer else None,
            )
        if isinstance(action, QueryTasksAction):
            tasks = await self.query_service.query(
                action.params.to_filter(), self.interpreter.today()
            )
            return ChatReply(response_text=summarize(tasks), action=action.action)
        return ChatReply(
            response_text=action.response_text or FALLBACK_CHAT_REPLY,
            action=action.action,
        )

    async def _confirm(self, state: AwaitingConfirmation, speaking_user: str) -> ChatReply:
        if self.signer and not self.signer.verify(state.proposal, state.signature):
            raise ProposalSignatureInvalid()
        summary = await self.executor.execute(state.proposal, speaking_user)
        return ChatReply(
            response_text=summary.summary_text(),
            operations_processed=True,
            all_successful=summary.all_successful,
            results=summary.results,
        )
