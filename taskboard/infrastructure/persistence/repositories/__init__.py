"""Repositories (ITaskRepository implementation)."""

from taskboard.infrastructure.persistence.repositories.task_repo import TaskRepository

__all__ = ["TaskRepository"]
