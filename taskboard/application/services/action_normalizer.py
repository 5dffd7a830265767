"""Parse extracted completion JSON into the closed action grammar.

Exhaustive over ActionType: an unknown tag is a typed error, never a silent
default. Shape errors anywhere in the payload become MissingRequiredField.
Taxonomy membership is not checked here; the operation executor does that.
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

from taskboard.application.dtos.assistant import (
    AssistantAction,
    ConfigurationChangeProposal,
    CreateOperation,
    GeneralChatAction,
    QueryTasksAction,
    TaskOperationsProposal,
)
from taskboard.domain.enums import LEGACY_PROPOSE_TASK_CREATION, ActionType
from taskboard.domain.exceptions import MissingRequiredField, UnknownAction
from taskboard.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_action_adapter: TypeAdapter[Any] = TypeAdapter(AssistantAction)

NormalizedAction = (
    TaskOperationsProposal | ConfigurationChangeProposal | QueryTasksAction | GeneralChatAction
)


def _upgrade_legacy(payload: dict[str, Any]) -> dict[str, Any]:
    """Rewrite a single-task PROPOSE_TASK_CREATION into PROPOSE_TASK_OPERATIONS."""
    return {
        "action": ActionType.PROPOSE_TASK_OPERATIONS.value,
        "operations": [{"type": "CREATE", "taskDetails": payload.get("taskDetails")}],
        "responseText": payload.get("responseText", ""),
    }


def _canonical_operation_types(payload: dict[str, Any]) -> dict[str, Any]:
    operations = payload.get("operations")
    if not isinstance(operations, list):
        return payload
    fixed = []
    for op in operations:
        if isinstance(op, dict) and isinstance(op.get("type"), str):
            op = {**op, "type": op["type"].strip().upper()}
        fixed.append(op)
    return {**payload, "operations": fixed}


def _field_path(error: dict[str, Any]) -> str:
    return ".".join(str(part) for part in error.get("loc", ())) or "action"


def parse_action(payload: dict[str, Any], raw_text: str = "") -> NormalizedAction:
    """Validate payload against the action grammar without applying defaults.

    Raises:
        UnknownAction: action is missing or not a known tag.
        MissingRequiredField: the payload does not match the tag's shape.
    """
    action = payload.get("action")
    if not isinstance(action, str):
        raise UnknownAction(action, raw_text)
    tag = action.strip().upper()
    if tag == LEGACY_PROPOSE_TASK_CREATION:
        payload = _upgrade_legacy(payload)
    elif tag in ActionType.values():
        payload = {**payload, "action": tag}
    else:
        raise UnknownAction(action, raw_text)
    payload = _canonical_operation_types(payload)
    try:
        return _action_adapter.validate_python(payload)
    except ValidationError as e:
        first = e.errors()[0]
        raise MissingRequiredField(_field_path(first), first.get("msg", "invalid"), raw_text) from e


def normalize(
    json_value: dict[str, Any], speaking_user: str, raw_text: str = ""
) -> NormalizedAction:
    """Parse json_value into a proposal or a direct response and fill defaults.

    Every CREATE without a reporter gets speaking_user.
    """
    action = parse_action(json_value, raw_text)
    if isinstance(action, TaskOperationsProposal):
        for op in action.operations:
            if isinstance(op, CreateOperation) and not op.task_details.reporter:
                op.task_details.reporter = speaking_user
    logger.debug("Normalized completion to action %s", action.action)
    return action
