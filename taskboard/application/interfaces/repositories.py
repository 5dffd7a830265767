"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskboard.application.dtos.task import TaskCreate, TaskResult


# Task repository interface
class ITaskRepository(Protocol):
    """Protocol for task repository (DIP).

    Write methods raise DataAccessError with the driver message on failure.
    """

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        """Return task by exact id."""

    async def search_by_title(self, fragment: str) -> list[TaskResult]:
        """Return tasks whose title contains fragment (case-insensitive)."""

    async def list_all(self) -> list[TaskResult]:
        """Return every task (unordered)."""

    async def list_by_status(self, status: str) -> list[TaskResult]:
        """Return tasks in one status lane ordered by order."""

    async def list_children(self, parent_id: str) -> list[TaskResult]:
        """Return direct subtasks of parent_id."""

    async def max_order_in_status(self, status: str) -> int | None:
        """Return highest order in the status lane, or None for an empty lane."""

    async def create(self, data: TaskCreate) -> TaskResult:
        """Insert a task and return the stored record."""

    async def update(self, task_id: str, patch: dict[str, Any]) -> TaskResult | None:
        """Apply a partial patch; return updated record or None if missing."""

    async def delete(self, task_id: str) -> bool:
        """Delete by id; return False if the task did not exist."""

    async def detach_references(self, task_id: str) -> int:
        """Remove task_id from depends_on and parent_id of other tasks; return rows touched."""

    def savepoint(self) -> AbstractAsyncContextManager[Any]:
        """Scope in which a failed write rolls back without ending the outer transaction."""
