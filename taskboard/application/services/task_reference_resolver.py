"""Resolve a user-supplied task reference (id or partial title) to tasks.

Exact id match always wins and short-circuits the title search. Otherwise the
identifier is matched case-insensitively as a substring of task titles; more
than one hit is reported back for disambiguation, never silently picked.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from taskboard.core.constants import SHORT_ID_LENGTH

if TYPE_CHECKING:
    from taskboard.application.dtos.task import TaskResult
    from taskboard.application.interfaces.repositories import ITaskRepository


@dataclass(frozen=True)
class SingleMatch:
    task: TaskResult


@dataclass(frozen=True)
class NoMatch:
    identifier: str

    def message(self) -> str:
        return f'Could not find a task matching "{self.identifier}".'


@dataclass(frozen=True)
class AmbiguousMatch:
    identifier: str
    candidates: tuple[TaskResult, ...]

    def message(self) -> str:
        names = ", ".join(
            f'"{t.title}" ({t.id[:SHORT_ID_LENGTH]})' for t in self.candidates
        )
        return (
            f'Found multiple tasks matching "{self.identifier}" ({names}). '
            "Please provide the task ID or a more specific title."
        )


Resolution = SingleMatch | NoMatch | AmbiguousMatch


class TaskReferenceResolver:
    """Resolve identifiers against the task repository."""

    def __init__(self, task_repo: ITaskRepository) -> None:
        self.task_repo = task_repo

    async def resolve(self, identifier: str) -> Resolution:
        ref = identifier.strip()
        if not ref:
            return NoMatch(identifier)
        by_id = await self.task_repo.get_by_id(ref)
        if by_id is not None:
            return SingleMatch(by_id)
        matches = await self.task_repo.search_by_title(ref)
        if not matches:
            return NoMatch(ref)
        if len(matches) == 1:
            return SingleMatch(matches[0])
        return AmbiguousMatch(ref, tuple(matches))
