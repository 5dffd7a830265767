"""Task repository for board tasks."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING, Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.application.dtos.task import TASK_PATCH_FIELDS, TaskResult
from taskboard.infrastructure.persistence.models.task import Task
from taskboard.infrastructure.persistence.repositories.base import BaseRepository

if TYPE_CHECKING:
    from taskboard.application.dtos.task import TaskCreate


def _to_result(t: Task) -> TaskResult:
    """Map Task ORM to TaskResult DTO."""
    return TaskResult(
        id=t.id,
        title=t.title,
        description=t.description or "",
        status=t.status,
        priority=t.priority,
        assignees=list(t.assignees or []),
        start_date=t.start_date,
        due_date=t.due_date,
        effort=t.effort,
        product_area=t.product_area,
        order=t.order,
        depends_on=list(t.depends_on or []),
        reporter=t.reporter,
        parent_id=t.parent_id,
        tags=list(t.tags or []),
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class TaskRepository(BaseRepository[Task]):
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Task)

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        task = await self._get(task_id)
        return _to_result(task) if task else None

    async def search_by_title(self, fragment: str) -> list[TaskResult]:
        """Case-insensitive substring match on title (LIKE wildcards escaped)."""
        pattern = f"%{_escape_like(fragment)}%"
        result = await self._execute(
            select(Task).where(Task.title.ilike(pattern, escape="\\")).order_by(Task.created_at)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def list_all(self) -> list[TaskResult]:
        return [_to_result(t) for t in await self._get_all()]

    async def list_by_status(self, status: str) -> list[TaskResult]:
        result = await self._execute(
            select(Task).where(Task.status == status).order_by(Task.order)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def list_children(self, parent_id: str) -> list[TaskResult]:
        result = await self._execute(
            select(Task).where(Task.parent_id == parent_id).order_by(Task.order)
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def max_order_in_status(self, status: str) -> int | None:
        result = await self._execute(
            select(func.max(Task.order)).where(Task.status == status)
        )
        return result.scalar_one_or_none()

    async def create(self, data: TaskCreate) -> TaskResult:
        """Create a task and return the result DTO."""
        task = await self._add(Task(**asdict(data)))
        return _to_result(task)

    async def update(self, task_id: str, patch: dict[str, Any]) -> TaskResult | None:
        task = await self._get(task_id)
        if not task:
            return None
        for key, value in patch.items():
            if key in TASK_PATCH_FIELDS:
                setattr(task, key, value)
        return _to_result(await self._save(task))

    async def delete(self, task_id: str) -> bool:
        task = await self._get(task_id)
        if not task:
            return False
        await self._remove(task)
        return True

    async def detach_references(self, task_id: str) -> int:
        """Drop task_id from other tasks' depends_on and clear parent_id on children."""
        touched = 0
        for task in await self._get_all():
            if task.id == task_id:
                continue
            changed = False
            if task_id in (task.depends_on or []):
                task.depends_on = [d for d in task.depends_on if d != task_id]
                changed = True
            if task.parent_id == task_id:
                task.parent_id = None
                changed = True
            touched += changed
        if touched:
            await self._flush("update")
        return touched
