"""Tests for domain exceptions (error_code, message, details)."""

from taskboard.domain.exceptions import (
    AssistantException,
    CircularDependencyException,
    DataAccessError,
    MalformedCompletion,
    MissingRequiredField,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    TaskboardException,
    UnknownAction,
    UpstreamError,
    UpstreamUnavailable,
    ValidationException,
)


def test_taskboard_exception_default_error_code() -> None:
    """Base TaskboardException uses class name as error_code when not provided."""
    exc = TaskboardException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "TaskboardException"
    assert exc.details == {}


def test_taskboard_exception_to_dict() -> None:
    exc = TaskboardException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception_with_field() -> None:
    exc = ValidationException("Title is required", field="title")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "title"}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("task", "abc")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "task not found: abc"
    assert exc.details == {"resource_type": "task", "resource_id": "abc"}


def test_circular_dependency_exception() -> None:
    exc = CircularDependencyException("a", "b")
    assert exc.error_code == "CIRCULAR_DEPENDENCY"
    assert "Circular dependency" in exc.message
    assert exc.details == {"task_id": "a", "dependency_id": "b"}


def test_data_access_error_keeps_driver_message() -> None:
    exc = DataAccessError("duplicate key value", "create task")
    assert exc.message == "duplicate key value"
    assert exc.details == {"operation": "create task"}


def test_sql_not_configured_is_service_unavailable() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_upstream_errors_are_assistant_exceptions() -> None:
    assert isinstance(UpstreamUnavailable("timeout"), AssistantException)
    err = UpstreamError("HTTP 400", 400)
    assert err.details == {"reason": "HTTP 400", "status_code": 400}


def test_malformed_completion_subclasses_carry_raw_text() -> None:
    unknown = UnknownAction("DANCE", raw_text='{"action": "DANCE"}')
    assert isinstance(unknown, MalformedCompletion)
    assert unknown.error_code == "UNKNOWN_ACTION"
    assert unknown.details["action"] == "DANCE"
    assert unknown.raw_text == '{"action": "DANCE"}'

    missing = MissingRequiredField("operations", raw_text="{}")
    assert isinstance(missing, MalformedCompletion)
    assert missing.error_code == "MISSING_REQUIRED_FIELD"
    assert missing.details["field"] == "operations"
