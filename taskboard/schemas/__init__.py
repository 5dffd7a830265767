"""Pydantic request/response schemas for the API."""

from taskboard.schemas.assistant import ChatRequest, ChatResponse
from taskboard.schemas.health import HealthResponse
from taskboard.schemas.task import TaskCreateRequest, TaskResponse, TaskUpdate
from taskboard.schemas.taxonomy import TaxonomyResponse

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
    "TaskCreateRequest",
    "TaskResponse",
    "TaskUpdate",
    "TaxonomyResponse",
]
