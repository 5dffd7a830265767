"""Parsing completion JSON into the action grammar."""

import pytest

from taskboard.application.dtos.assistant import (
    ConfigurationChangeProposal,
    CreateOperation,
    DeleteOperation,
    GeneralChatAction,
    QueryTasksAction,
    TaskOperationsProposal,
    UpdateOperation,
    to_wire,
)
from taskboard.application.services.action_normalizer import normalize, parse_action
from taskboard.domain.enums import ConfigChangeType, ConfigTarget
from taskboard.domain.exceptions import MissingRequiredField, UnknownAction


def test_create_without_reporter_gets_speaking_user() -> None:
    action = normalize(
        {
            "action": "PROPOSE_TASK_OPERATIONS",
            "operations": [
                {"type": "CREATE", "taskDetails": {"title": "Write docs"}},
                {"type": "CREATE", "taskDetails": {"title": "Review", "reporter": "Bob"}},
            ],
            "responseText": "Create two tasks?",
        },
        "Alice",
    )
    assert isinstance(action, TaskOperationsProposal)
    assert [op.task_details.reporter for op in action.operations] == ["Alice", "Bob"]
    # The injected reporter is part of the proposal the client will echo back.
    assert to_wire(action)["operations"][0]["taskDetails"]["reporter"] == "Alice"


def test_mixed_operations_keep_order() -> None:
    action = normalize(
        {
            "action": "PROPOSE_TASK_OPERATIONS",
            "operations": [
                {"type": "update", "taskIdentifier": "docs", "updates": {"status": "Done"}},
                {"type": "DELETE", "taskIdentifier": "abc123"},
                {"type": "CREATE", "taskDetails": {"title": "Next"}},
            ],
        },
        "Alice",
    )
    assert [type(op) for op in action.operations] == [
        UpdateOperation,
        DeleteOperation,
        CreateOperation,
    ]
    assert action.operations[0].updates.patch() == {"status": "Done"}


def test_legacy_creation_tag_is_upgraded() -> None:
    action = normalize(
        {
            "action": "PROPOSE_TASK_CREATION",
            "taskDetails": {"title": "Legacy"},
            "responseText": "Create it?",
        },
        "Alice",
    )
    assert isinstance(action, TaskOperationsProposal)
    assert len(action.operations) == 1
    assert action.operations[0].task_details.title == "Legacy"
    assert action.response_text == "Create it?"


def test_lowercase_tag_is_accepted() -> None:
    action = parse_action({"action": "general_chat", "responseText": "Hello"})
    assert isinstance(action, GeneralChatAction)


def test_configuration_change() -> None:
    action = parse_action(
        {
            "action": "PROPOSE_CONFIGURATION_CHANGE",
            "changeType": "ADD",
            "target": "PRODUCT_AREA",
            "itemName": "Billing",
        }
    )
    assert isinstance(action, ConfigurationChangeProposal)
    assert action.change_type == ConfigChangeType.ADD
    assert action.target == ConfigTarget.PRODUCT_AREA


def test_query_params_are_loose() -> None:
    action = parse_action(
        {
            "action": "QUERY_TASKS",
            "params": {"assigneesIncludeAny": "Bob", "dueDateBefore": "", "isOverdue": True},
        }
    )
    assert isinstance(action, QueryTasksAction)
    criteria = action.params.to_filter()
    assert criteria.assignees_include_any == ["Bob"]
    assert criteria.due_date_before is None
    assert criteria.is_overdue is True


@pytest.mark.parametrize("payload", [{}, {"action": "DANCE"}, {"action": 3}])
def test_unknown_action(payload: dict) -> None:
    with pytest.raises(UnknownAction):
        parse_action(payload, raw_text="raw")


def test_operations_without_list_is_missing_field() -> None:
    with pytest.raises(MissingRequiredField) as exc_info:
        parse_action({"action": "PROPOSE_TASK_OPERATIONS"})
    assert exc_info.value.details["field"].endswith("operations")


def test_create_without_title_is_missing_field() -> None:
    with pytest.raises(MissingRequiredField):
        parse_action(
            {
                "action": "PROPOSE_TASK_OPERATIONS",
                "operations": [{"type": "CREATE", "taskDetails": {"title": "  "}}],
            }
        )


def test_update_without_identifier_is_missing_field() -> None:
    with pytest.raises(MissingRequiredField):
        parse_action(
            {
                "action": "PROPOSE_TASK_OPERATIONS",
                "operations": [{"type": "UPDATE", "updates": {"status": "Done"}}],
            }
        )


def test_unknown_operation_type_is_rejected() -> None:
    with pytest.raises(MissingRequiredField):
        parse_action(
            {
                "action": "PROPOSE_TASK_OPERATIONS",
                "operations": [{"type": "ARCHIVE", "taskIdentifier": "x"}],
            }
        )


def test_empty_operations_is_rejected() -> None:
    with pytest.raises(MissingRequiredField):
        parse_action({"action": "PROPOSE_TASK_OPERATIONS", "operations": []})
