"""Domain exceptions for the taskboard application.

Defines domain-level exceptions that represent business rule violations and
assistant pipeline failures. These exceptions are independent of
infrastructure concerns. The presentation layer maps them to HTTP responses
(REST) or to conversational replies (assistant chat).
"""

from typing import Any


class TaskboardException(Exception):
    """Base exception for all taskboard application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskboardException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(TaskboardException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class CircularDependencyException(TaskboardException):
    """Raised when adding a dependency edge would close a cycle in the task graph."""

    def __init__(self, task_id: str, dependency_id: str) -> None:
        super().__init__(
            "Circular dependency detected; the prerequisite was not added.",
            "CIRCULAR_DEPENDENCY",
            {"task_id": task_id, "dependency_id": dependency_id},
        )


class DataAccessError(TaskboardException):
    """Raised when a persistence operation fails. Message is the driver's message."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        details = {"operation": operation} if operation else {}
        super().__init__(message, "DATA_ACCESS_ERROR", details)


class SqlNotConfiguredException(TaskboardException):
    """Raised when an operation requires the SQL database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )


# ---- Assistant pipeline ----


class AssistantException(TaskboardException):
    """Base for failures of the conversational pipeline.

    Never surfaced as an HTTP error: the chat endpoint turns these into
    conversational replies.
    """


class UpstreamUnavailable(AssistantException):
    """Raised when the completion service cannot be reached (transport, quota, not configured)."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Completion service unavailable: {reason}",
            "UPSTREAM_UNAVAILABLE",
            {"reason": reason},
        )


class UpstreamError(AssistantException):
    """Raised when the completion service answered but with an unusable reply."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        details: dict[str, Any] = {"reason": reason}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(f"Completion service error: {reason}", "UPSTREAM_ERROR", details)


class MalformedCompletion(AssistantException):
    """Raised when no single JSON object can be located in the completion text."""

    def __init__(self, reason: str, raw_text: str = "") -> None:
        self.raw_text = raw_text
        super().__init__(
            f"Completion is not a JSON object: {reason}",
            "MALFORMED_COMPLETION",
            {"reason": reason},
        )


class UnknownAction(MalformedCompletion):
    """Raised when the action discriminator matches no known action tag."""

    def __init__(self, action: Any, raw_text: str = "") -> None:
        super().__init__(f"unknown action {action!r}", raw_text)
        self.error_code = "UNKNOWN_ACTION"
        self.details["action"] = action


class MissingRequiredField(MalformedCompletion):
    """Raised when an action or operation lacks its identifying fields or has a bad shape."""

    def __init__(self, field: str, reason: str = "missing", raw_text: str = "") -> None:
        super().__init__(f"field {field!r} {reason}", raw_text)
        self.error_code = "MISSING_REQUIRED_FIELD"
        self.details["field"] = field


class ProposalPending(AssistantException):
    """Raised when free text arrives while a proposal still awaits confirmation."""

    def __init__(self) -> None:
        super().__init__(
            "A proposal is awaiting confirmation.",
            "PROPOSAL_PENDING",
        )


class NoPendingProposal(AssistantException):
    """Raised when a confirm signal arrives without a proposal to confirm."""

    def __init__(self) -> None:
        super().__init__("No proposal to confirm.", "NO_PENDING_PROPOSAL")


class ProposalSignatureInvalid(AssistantException):
    """Raised when an echoed proposal does not match its signature."""

    def __init__(self) -> None:
        super().__init__(
            "The proposal was modified or its signature is missing.",
            "PROPOSAL_SIGNATURE_INVALID",
        )
