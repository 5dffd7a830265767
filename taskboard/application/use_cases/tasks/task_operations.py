"""Task operations: create, get, update, delete, dependencies, move, completion.

Delegates storage to ITaskRepository. Lane order, dependency-cycle checks,
self-parent checks and reference pruning on delete live here so the REST
endpoints and the assistant executor share them.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from taskboard.application.dtos.task import TASK_PATCH_FIELDS, TaskCreate, TaskResult
from taskboard.domain.entities import DependencyGraph
from taskboard.domain.exceptions import (
    CircularDependencyException,
    ResourceNotFoundException,
    ValidationException,
)
from taskboard.shared.telemetry.logging import get_logger

if TYPE_CHECKING:
    from taskboard.application.interfaces.repositories import ITaskRepository
    from taskboard.domain.value_objects import Taxonomy

logger = get_logger(__name__)


class TaskService:
    """Create, mutate and query board tasks.

    With enforce_taxonomy, status/priority/effort/product area must be
    configured values (ValidationException otherwise).
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        taxonomy: Taxonomy,
        enforce_taxonomy: bool = True,
    ) -> None:
        self.task_repo = task_repo
        self.taxonomy = taxonomy
        self.enforce_taxonomy = enforce_taxonomy

    def _check_taxonomy(self, values: dict[str, Any]) -> None:
        if not self.enforce_taxonomy:
            return
        allowed = {
            "status": self.taxonomy.statuses,
            "priority": self.taxonomy.priorities,
            "effort": self.taxonomy.effort_sizes,
            "product_area": self.taxonomy.product_areas,
        }
        for field, options in allowed.items():
            value = values.get(field)
            if value is not None and value not in options:
                raise ValidationException(
                    f"{value!r} is not a configured {field.replace('_', ' ')}",
                    field=field,
                )

    async def next_order(self, status: str) -> int:
        """Next position in a status lane: max existing order + 1, or 0 when empty."""
        current = await self.task_repo.max_order_in_status(status)
        return 0 if current is None else current + 1

    async def _require(self, task_id: str) -> TaskResult:
        task = await self.task_repo.get_by_id(task_id)
        if not task:
            raise ResourceNotFoundException("task", task_id)
        return task

    async def _check_references(
        self, task_id: str | None, parent_id: str | None, depends_on: list[str]
    ) -> None:
        if parent_id is not None:
            if parent_id == task_id:
                raise ValidationException("A task cannot be its own parent", field="parent_id")
            if not await self.task_repo.get_by_id(parent_id):
                raise ValidationException(f"Parent task not found: {parent_id}", field="parent_id")
        for dep_id in depends_on:
            if dep_id == task_id:
                raise CircularDependencyException(task_id, dep_id)
            if not await self.task_repo.get_by_id(dep_id):
                raise ValidationException(f"Dependency not found: {dep_id}", field="depends_on")

    async def create_task(self, data: TaskCreate) -> TaskResult:
        """Insert a task at the end of its status lane."""
        title = (data.title or "").strip()
        if not title:
            raise ValidationException("Title is required", field="title")
        self._check_taxonomy(vars(data))
        depends_on = list(dict.fromkeys(data.depends_on))
        await self._check_references(None, data.parent_id, depends_on)
        order = await self.next_order(data.status)
        created = await self.task_repo.create(
            replace(data, title=title, order=order, depends_on=depends_on)
        )
        logger.info("Created task %s in %s at order %d", created.id, created.status, order)
        return created

    async def get_task(self, task_id: str) -> TaskResult:
        return await self._require(task_id)

    async def list_subtasks(self, task_id: str) -> list[TaskResult]:
        await self._require(task_id)
        return await self.task_repo.list_children(task_id)

    async def update_task(self, task_id: str, patch: dict[str, Any]) -> TaskResult:
        """Apply a partial patch; unknown keys are ignored.

        New depends_on edges are cycle-checked against the current graph before
        anything is written. A status change without an explicit order moves
        the task to the end of its new lane.
        """
        task = await self._require(task_id)
        values = {k: v for k, v in patch.items() if k in TASK_PATCH_FIELDS}
        if not values:
            return task
        if "title" in values:
            title = (values["title"] or "").strip()
            if not title:
                raise ValidationException("Title cannot be empty", field="title")
            values["title"] = title
        for list_field in ("assignees", "depends_on", "tags"):
            if list_field in values and values[list_field] is None:
                values[list_field] = []
        for required in ("status", "priority"):
            if required in values and values[required] is None:
                raise ValidationException(f"{required} cannot be empty", field=required)
        self._check_taxonomy(values)

        if "depends_on" in values:
            values["depends_on"] = list(dict.fromkeys(values["depends_on"]))
            added = [d for d in values["depends_on"] if d not in task.depends_on]
            await self._check_references(task_id, None, added)
            graph = DependencyGraph.from_tasks(await self.task_repo.list_all())
            for dep_id in added:
                if graph.would_create_cycle(task_id, dep_id):
                    raise CircularDependencyException(task_id, dep_id)
                graph.add_edge(task_id, dep_id)
        if values.get("parent_id") is not None:
            await self._check_references(task_id, values["parent_id"], [])

        if "status" in values and values["status"] != task.status and "order" not in values:
            values["order"] = await self.next_order(values["status"])

        updated = await self.task_repo.update(task_id, values)
        if not updated:
            raise ResourceNotFoundException("task", task_id)
        return updated

    async def delete_task(self, task_id: str) -> TaskResult:
        """Delete a task and prune references to it (depends_on, parent_id)."""
        task = await self._require(task_id)
        touched = await self.task_repo.detach_references(task_id)
        if not await self.task_repo.delete(task_id):
            raise ResourceNotFoundException("task", task_id)
        logger.info("Deleted task %s (pruned %d references)", task_id, touched)
        return task

    async def add_dependency(self, task_id: str, dependency_id: str) -> TaskResult:
        """Make task_id depend on dependency_id; rejected (graph unchanged) if it closes a cycle."""
        task = await self._require(task_id)
        await self._require(dependency_id)
        if dependency_id in task.depends_on:
            return task
        graph = DependencyGraph.from_tasks(await self.task_repo.list_all())
        if graph.would_create_cycle(task_id, dependency_id):
            raise CircularDependencyException(task_id, dependency_id)
        updated = await self.task_repo.update(
            task_id, {"depends_on": [*task.depends_on, dependency_id]}
        )
        if not updated:
            raise ResourceNotFoundException("task", task_id)
        return updated

    async def remove_dependency(self, task_id: str, dependency_id: str) -> TaskResult:
        task = await self._require(task_id)
        if dependency_id not in task.depends_on:
            return task
        updated = await self.task_repo.update(
            task_id, {"depends_on": [d for d in task.depends_on if d != dependency_id]}
        )
        if not updated:
            raise ResourceNotFoundException("task", task_id)
        return updated

    async def move_task(self, task_id: str, status: str, order: int | None = None) -> TaskResult:
        """Move to a status lane; without order the task goes to the end of the new lane."""
        patch: dict[str, Any] = {"status": status}
        if order is not None:
            patch["order"] = order
        return await self.update_task(task_id, patch)

    async def toggle_completion(self, task_id: str) -> TaskResult:
        """Completed status <-> first configured status."""
        task = await self._require(task_id)
        completed = self.taxonomy.completed_status
        new_status = self.taxonomy.statuses[0] if task.status == completed else completed
        return await self.update_task(task_id, {"status": new_status})
