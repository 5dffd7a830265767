"""Task use cases."""

from taskboard.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]
