"""Pytest configuration and fixtures for taskboard.

Uses taskboard.main:app for HTTP tests. Unit and API tests run against an
in-memory task repository and a scripted completion client; repository
integration tests need Postgres (DATABASE_URL) and are marked requires_db.
"""

from collections.abc import Callable
from contextlib import asynccontextmanager
from dataclasses import asdict, replace
from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from taskboard.api.v1.dependencies import (
    get_completion_client,
    get_task_repo,
    get_task_repo_for_read,
)
from taskboard.application.dtos.task import TASK_PATCH_FIELDS, TaskCreate, TaskResult
from taskboard.application.use_cases.tasks import TaskService
from taskboard.core.limiter import limiter
from taskboard.domain.exceptions import DataAccessError
from taskboard.domain.value_objects import Taxonomy
from taskboard.infrastructure.persistence import database
from taskboard.main import app


class FakeTaskRepository:
    """In-memory ITaskRepository. savepoint() restores the snapshot on error."""

    def __init__(self) -> None:
        self.tasks: dict[str, TaskResult] = {}
        self.fail_on_create: set[str] = set()
        self.fail_on_search: set[str] = set()
        self._seq = 0

    def add(self, task: TaskResult) -> TaskResult:
        self.tasks[task.id] = task
        return task

    async def get_by_id(self, task_id: str) -> TaskResult | None:
        return self.tasks.get(task_id)

    async def search_by_title(self, fragment: str) -> list[TaskResult]:
        if fragment in self.fail_on_search:
            raise DataAccessError("connection reset by peer", "read")
        needle = fragment.casefold()
        return [t for t in self.tasks.values() if needle in t.title.casefold()]

    async def list_all(self) -> list[TaskResult]:
        return list(self.tasks.values())

    async def list_by_status(self, status: str) -> list[TaskResult]:
        return sorted(
            (t for t in self.tasks.values() if t.status == status), key=lambda t: t.order
        )

    async def list_children(self, parent_id: str) -> list[TaskResult]:
        return [t for t in self.tasks.values() if t.parent_id == parent_id]

    async def max_order_in_status(self, status: str) -> int | None:
        orders = [t.order for t in self.tasks.values() if t.status == status]
        return max(orders) if orders else None

    async def create(self, data: TaskCreate) -> TaskResult:
        if data.title in self.fail_on_create:
            raise DataAccessError("insert rejected by store", "create task")
        self._seq += 1
        return self.add(TaskResult(id=f"task{self._seq:04d}", **asdict(data)))

    async def update(self, task_id: str, patch: dict[str, Any]) -> TaskResult | None:
        task = self.tasks.get(task_id)
        if task is None:
            return None
        values = {k: v for k, v in patch.items() if k in TASK_PATCH_FIELDS}
        return self.add(replace(task, **values))

    async def delete(self, task_id: str) -> bool:
        return self.tasks.pop(task_id, None) is not None

    async def detach_references(self, task_id: str) -> int:
        touched = 0
        for task in list(self.tasks.values()):
            if task_id in task.depends_on or task.parent_id == task_id:
                self.add(
                    replace(
                        task,
                        depends_on=[d for d in task.depends_on if d != task_id],
                        parent_id=None if task.parent_id == task_id else task.parent_id,
                    )
                )
                touched += 1
        return touched

    @asynccontextmanager
    async def savepoint(self):
        snapshot = dict(self.tasks)
        try:
            yield
        except Exception:
            self.tasks = snapshot
            raise


class FakeCompletionClient:
    """ICompletionClient that replays scripted replies (an Exception is raised)."""

    def __init__(self, *replies: str | Exception) -> None:
        self.replies: list[str | Exception] = list(replies)
        self.prompts: list[str] = []

    def queue(self, *replies: str | Exception) -> None:
        self.replies.extend(replies)

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture(autouse=True)
def _reset_rate_limits() -> None:
    """Rate-limit counters are process-wide; start every test from zero."""
    limiter.reset()


@pytest.fixture
def taxonomy() -> Taxonomy:
    return Taxonomy(
        statuses=("New", "To Do", "In Progress", "Done", "Completed"),
        priorities=("High", "Medium", "Low"),
        product_areas=("API", "Portal"),
        effort_sizes=("S", "M", "L"),
        team_members=("Alice", "Bob", "Zonaid"),
        closed_statuses=frozenset({"Done", "Completed"}),
        preferred_default_status="To Do",
        default_priority="Medium",
    )


@pytest.fixture
def make_task() -> Callable[..., TaskResult]:
    """Factory for TaskResult with sensible defaults."""

    def _make(
        task_id: str,
        title: str,
        status: str = "To Do",
        priority: str = "Medium",
        order: int = 0,
        due_date: date | None = None,
        **kwargs: Any,
    ) -> TaskResult:
        return TaskResult(
            id=task_id,
            title=title,
            status=status,
            priority=priority,
            order=order,
            due_date=due_date,
            **kwargs,
        )

    return _make


@pytest.fixture
def task_repo() -> FakeTaskRepository:
    return FakeTaskRepository()


@pytest.fixture
def task_service(task_repo: FakeTaskRepository, taxonomy: Taxonomy) -> TaskService:
    return TaskService(task_repo, taxonomy)


@pytest.fixture
def completion() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def api_client(
    task_repo: FakeTaskRepository, completion: FakeCompletionClient
) -> AsyncClient:
    """HTTP client with the task store and completion service replaced by fakes."""
    app.dependency_overrides[get_task_repo] = lambda: task_repo
    app.dependency_overrides[get_task_repo_for_read] = lambda: task_repo
    app.dependency_overrides[get_completion_client] = lambda: completion
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncSession:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL (postgresql+asyncpg://...) with migrations applied.
    Skips (pytest.skip) when it is not configured. Run without DB via:
    pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
