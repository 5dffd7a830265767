"""Domain enumerations for the taskboard application.

Enums represent the closed action grammar exchanged with the completion
service and the chat client.
"""

from enum import Enum


class ActionType(str, Enum):
    """Action tags the completion service may emit.

    PROPOSE_* tags become proposals held for confirmation; QUERY_TASKS and
    GENERAL_CHAT are answered directly.
    """

    PROPOSE_TASK_OPERATIONS = "PROPOSE_TASK_OPERATIONS"
    PROPOSE_CONFIGURATION_CHANGE = "PROPOSE_CONFIGURATION_CHANGE"
    QUERY_TASKS = "QUERY_TASKS"
    GENERAL_CHAT = "GENERAL_CHAT"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid action tags as strings.

        Returns:
            List of enum value strings (e.g. for prompt text or validation).
        """
        return [action.value for action in cls]


# Older single-task proposal tag; normalized into PROPOSE_TASK_OPERATIONS.
LEGACY_PROPOSE_TASK_CREATION = "PROPOSE_TASK_CREATION"


class OperationType(str, Enum):
    """Mutation kinds inside a task-operations proposal."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class ConfigChangeType(str, Enum):
    """Direction of a configuration-change proposal."""

    ADD = "ADD"
    REMOVE = "REMOVE"


class ConfigTarget(str, Enum):
    """Taxonomy list a configuration-change proposal targets."""

    PRODUCT_AREA = "PRODUCT_AREA"
    ASSIGNEE = "ASSIGNEE"
