"""DTOs for the conversational assistant: the action grammar and execution results.

The action grammar is the JSON the completion service must emit and the
proposal shape the chat client echoes back on confirmation. It is a closed
discriminated union on "action" (and on "type" for task operations); field
names on the wire are camelCase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from taskboard.application.dtos.task import TaskFilter
from taskboard.domain.enums import ConfigChangeType, ConfigTarget, OperationType


class _WireModel(BaseModel):
    """camelCase on the wire, snake_case in Python; unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _as_list(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


# Model output often sends "" for an unknown date and a bare string for a one-item list.
LooseDate = Annotated[date | None, BeforeValidator(_blank_to_none)]
LooseList = Annotated[list[str] | None, BeforeValidator(_as_list)]


class TaskFields(_WireModel):
    """Optional task fields; used as an UPDATE patch (only set fields apply)."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    assignees: LooseList = None
    start_date: LooseDate = None
    due_date: LooseDate = None
    effort: str | None = None
    product_area: str | None = None
    depends_on: LooseList = None
    reporter: str | None = None
    parent_id: str | None = None
    tags: LooseList = None

    def patch(self) -> dict[str, Any]:
        """Return only the fields the model explicitly set (snake_case keys)."""
        return self.model_dump(exclude_unset=True)


class TaskDetails(TaskFields):
    """Full details for a CREATE operation. title is required."""

    title: str = Field(min_length=1)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class CreateOperation(_WireModel):
    type: Literal["CREATE"] = "CREATE"
    task_details: TaskDetails


class UpdateOperation(_WireModel):
    type: Literal["UPDATE"] = "UPDATE"
    task_identifier: str = Field(min_length=1)
    updates: TaskFields = Field(default_factory=TaskFields)


class DeleteOperation(_WireModel):
    type: Literal["DELETE"] = "DELETE"
    task_identifier: str = Field(min_length=1)


TaskOperation = Annotated[
    Union[CreateOperation, UpdateOperation, DeleteOperation],
    Field(discriminator="type"),
]


class TaskOperationsProposal(_WireModel):
    """Ordered create/update/delete operations awaiting confirmation."""

    action: Literal["PROPOSE_TASK_OPERATIONS"] = "PROPOSE_TASK_OPERATIONS"
    operations: list[TaskOperation] = Field(min_length=1)
    response_text: str = ""


class ConfigurationChangeProposal(_WireModel):
    """Add/remove a product area or assignee; never applied automatically."""

    action: Literal["PROPOSE_CONFIGURATION_CHANGE"] = "PROPOSE_CONFIGURATION_CHANGE"
    change_type: ConfigChangeType
    target: ConfigTarget
    item_name: str = Field(min_length=1)
    response_text: str = ""


ActionProposal = Annotated[
    Union[TaskOperationsProposal, ConfigurationChangeProposal],
    Field(discriminator="action"),
]


class TaskQueryParams(_WireModel):
    status: str | None = None
    priority: str | None = None
    assignee: str | None = None
    assignees_include_any: LooseList = None
    due_date_equals: LooseDate = None
    due_date_before: LooseDate = None
    due_date_after: LooseDate = None
    start_date_equals: LooseDate = None
    title_contains: str | None = None
    description_contains: str | None = None
    product_area: str | None = None
    is_overdue: bool = False

    def to_filter(self) -> TaskFilter:
        return TaskFilter(
            status=self.status,
            priority=self.priority,
            assignee=self.assignee,
            assignees_include_any=list(self.assignees_include_any or []),
            due_date_equals=self.due_date_equals,
            due_date_before=self.due_date_before,
            due_date_after=self.due_date_after,
            start_date_equals=self.start_date_equals,
            title_contains=self.title_contains,
            description_contains=self.description_contains,
            product_area=self.product_area,
            is_overdue=self.is_overdue,
        )


class QueryTasksAction(_WireModel):
    action: Literal["QUERY_TASKS"] = "QUERY_TASKS"
    params: TaskQueryParams = Field(default_factory=TaskQueryParams)
    response_text: str = ""


class GeneralChatAction(_WireModel):
    action: Literal["GENERAL_CHAT"] = "GENERAL_CHAT"
    response_text: str = ""


DirectResponse = Union[QueryTasksAction, GeneralChatAction]

AssistantAction = Annotated[
    Union[
        TaskOperationsProposal,
        ConfigurationChangeProposal,
        QueryTasksAction,
        GeneralChatAction,
    ],
    Field(discriminator="action"),
]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one operation in a confirmed proposal."""

    success: bool
    message: str
    operation: OperationType | None = None
    task_id: str | None = None


@dataclass
class ExecutionSummary:
    """Per-operation results of a confirmed proposal, in submission order."""

    results: list[OperationResult] = field(default_factory=list)

    @property
    def all_successful(self) -> bool:
        return all(r.success for r in self.results)

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.results]

    def summary_text(self) -> str:
        header = (
            "All operations completed successfully:"
            if self.all_successful
            else "Some operations could not be completed:"
        )
        return "\n".join([header, *(f"- {m}" for m in self.messages)])


def to_wire(model: BaseModel) -> dict[str, Any]:
    """JSON-ready camelCase dict of the fields the model actually carries.

    Explicit nulls in an UPDATE patch survive; unset fields are omitted, so a
    proposal echoed back by a client dumps to the same dict.
    """
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)
