"""Application DTOs (no ORM dependency)."""

from taskboard.application.dtos.assistant import (
    ActionProposal,
    AssistantAction,
    ConfigurationChangeProposal,
    CreateOperation,
    DeleteOperation,
    DirectResponse,
    ExecutionSummary,
    GeneralChatAction,
    OperationResult,
    QueryTasksAction,
    TaskDetails,
    TaskFields,
    TaskOperation,
    TaskOperationsProposal,
    TaskQueryParams,
    UpdateOperation,
    to_wire,
)
from taskboard.application.dtos.task import (
    TASK_PATCH_FIELDS,
    TaskCreate,
    TaskFilter,
    TaskResult,
)

__all__ = [
    "ActionProposal",
    "AssistantAction",
    "ConfigurationChangeProposal",
    "CreateOperation",
    "DeleteOperation",
    "DirectResponse",
    "ExecutionSummary",
    "GeneralChatAction",
    "OperationResult",
    "QueryTasksAction",
    "TASK_PATCH_FIELDS",
    "TaskCreate",
    "TaskDetails",
    "TaskFields",
    "TaskFilter",
    "TaskOperation",
    "TaskOperationsProposal",
    "TaskQueryParams",
    "TaskResult",
    "UpdateOperation",
    "to_wire",
]
