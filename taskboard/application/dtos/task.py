"""DTOs for board tasks (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

# Fields a partial update may touch (snake_case, as stored).
TASK_PATCH_FIELDS = frozenset(
    {
        "title",
        "description",
        "status",
        "priority",
        "assignees",
        "start_date",
        "due_date",
        "effort",
        "product_area",
        "order",
        "depends_on",
        "reporter",
        "parent_id",
        "tags",
    }
)


@dataclass(frozen=True)
class TaskResult:
    """Task as read from the store."""

    id: str
    title: str
    status: str
    priority: str
    description: str = ""
    assignees: list[str] = field(default_factory=list)
    start_date: date | None = None
    due_date: date | None = None
    effort: str | None = None
    product_area: str | None = None
    order: int = 0
    depends_on: list[str] = field(default_factory=list)
    reporter: str | None = None
    parent_id: str | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class TaskCreate:
    """Values for a new task. order is assigned by the task service."""

    title: str
    status: str
    priority: str
    description: str = ""
    assignees: list[str] = field(default_factory=list)
    start_date: date | None = None
    due_date: date | None = None
    effort: str | None = None
    product_area: str | None = None
    order: int = 0
    depends_on: list[str] = field(default_factory=list)
    reporter: str | None = None
    parent_id: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TaskFilter:
    """Independent predicates for task queries; unset fields do not filter."""

    status: str | None = None
    priority: str | None = None
    assignee: str | None = None
    assignees_include_any: list[str] = field(default_factory=list)
    due_date_equals: date | None = None
    due_date_before: date | None = None
    due_date_after: date | None = None
    start_date_equals: date | None = None
    title_contains: str | None = None
    description_contains: str | None = None
    product_area: str | None = None
    is_overdue: bool = False
