"""Application interfaces (ports)."""

from taskboard.application.interfaces.repositories import ITaskRepository
from taskboard.application.interfaces.services import ICompletionClient

__all__ = ["ICompletionClient", "ITaskRepository"]
