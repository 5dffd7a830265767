"""Task query handling: filter predicates, due-date ordering and text summary."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import TYPE_CHECKING

from taskboard.core.constants import NO_TASKS_FOUND_REPLY, SHORT_ID_LENGTH

if TYPE_CHECKING:
    from taskboard.application.dtos.task import TaskFilter, TaskResult
    from taskboard.application.interfaces.repositories import ITaskRepository

DEFAULT_CLOSED_STATUSES = frozenset({"Completed", "Done"})
SUMMARY_HEADER = "Here are the tasks I found:"


def _same(a: str | None, b: str) -> bool:
    return a is not None and a.casefold() == b.casefold()


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle.casefold() in haystack.casefold()


def is_overdue(
    task: TaskResult, today: date, closed_statuses: frozenset[str] = DEFAULT_CLOSED_STATUSES
) -> bool:
    """Due strictly before today and not in a closed status."""
    return (
        task.due_date is not None
        and task.due_date < today
        and task.status not in closed_statuses
    )


def matches(
    task: TaskResult,
    criteria: TaskFilter,
    today: date,
    closed_statuses: frozenset[str] = DEFAULT_CLOSED_STATUSES,
) -> bool:
    """Return True when task satisfies every set predicate in criteria."""
    if criteria.status and not _same(task.status, criteria.status):
        return False
    if criteria.priority and not _same(task.priority, criteria.priority):
        return False
    if criteria.assignee and not any(_same(a, criteria.assignee) for a in task.assignees):
        return False
    if criteria.assignees_include_any and not any(
        _same(a, wanted) for a in task.assignees for wanted in criteria.assignees_include_any
    ):
        return False
    if criteria.due_date_equals and task.due_date != criteria.due_date_equals:
        return False
    if criteria.due_date_before and (
        task.due_date is None or task.due_date > criteria.due_date_before
    ):
        return False
    if criteria.due_date_after and (
        task.due_date is None or task.due_date < criteria.due_date_after
    ):
        return False
    if criteria.start_date_equals and task.start_date != criteria.start_date_equals:
        return False
    if criteria.title_contains and not _contains(task.title, criteria.title_contains):
        return False
    if criteria.description_contains and not _contains(
        task.description, criteria.description_contains
    ):
        return False
    if criteria.product_area and not _same(task.product_area, criteria.product_area):
        return False
    if criteria.is_overdue and not is_overdue(task, today, closed_statuses):
        return False
    return True


def sort_by_due_date(tasks: Iterable[TaskResult]) -> list[TaskResult]:
    """Due date ascending; tasks without a due date last (stable otherwise)."""
    return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or date.min))


def summarize_task(task: TaskResult) -> str:
    line = f'- "{task.title}" (ID: {task.id[:SHORT_ID_LENGTH]})'
    if task.status:
        line += f", Status: {task.status}"
    if task.priority:
        line += f", Priority: {task.priority}"
    if task.due_date:
        line += f", Due: {task.due_date.isoformat()}"
    if task.assignees:
        line += f", Assignees: {', '.join(task.assignees)}"
    return line


def summarize(tasks: list[TaskResult]) -> str:
    """Render query results as fixed-format text lines for the chat reply."""
    if not tasks:
        return NO_TASKS_FOUND_REPLY
    return "\n".join([SUMMARY_HEADER, *(summarize_task(t) for t in tasks)])


class TaskQueryService:
    """Apply a TaskFilter to the task collection."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        closed_statuses: frozenset[str] = DEFAULT_CLOSED_STATUSES,
    ) -> None:
        self.task_repo = task_repo
        self.closed_statuses = closed_statuses

    async def query(self, criteria: TaskFilter, today: date) -> list[TaskResult]:
        tasks = await self.task_repo.list_all()
        selected = (t for t in tasks if matches(t, criteria, today, self.closed_statuses))
        return sort_by_due_date(selected)
