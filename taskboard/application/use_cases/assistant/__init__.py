"""Assistant use cases: interpretation, confirmation gate, execution."""

from taskboard.application.use_cases.assistant.assistant_service import (
    AssistantService,
    reply_for_error,
)
from taskboard.application.use_cases.assistant.confirmation_gate import (
    AwaitingConfirmation,
    ChatReply,
    ChatTurn,
    ConfirmationGate,
    Idle,
)
from taskboard.application.use_cases.assistant.message_interpreter import (
    MessageInterpreter,
)
from taskboard.application.use_cases.assistant.operation_executor import (
    OperationExecutor,
)

__all__ = [
    "AssistantService",
    "AwaitingConfirmation",
    "ChatReply",
    "ChatTurn",
    "ConfirmationGate",
    "Idle",
    "MessageInterpreter",
    "OperationExecutor",
    "reply_for_error",
]
