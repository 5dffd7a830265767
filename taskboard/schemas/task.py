"""Task API schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _check_date_range(start: date | None, due: date | None) -> None:
    if start is not None and due is not None and due < start:
        raise ValueError("due_date must be on or after start_date")


class TaskCreateRequest(BaseModel):
    """Request body for creating a task. Missing status/priority use the taxonomy defaults."""

    title: str = Field(..., min_length=1, max_length=500)
    description: str = Field(default="")
    status: str | None = Field(default=None, max_length=64)
    priority: str | None = Field(default=None, max_length=64)
    assignees: list[str] = Field(default_factory=list)
    start_date: date | None = None
    due_date: date | None = None
    effort: str | None = Field(default=None, max_length=32)
    product_area: str | None = Field(default=None, max_length=128)
    depends_on: list[str] = Field(default_factory=list)
    reporter: str | None = Field(default=None, max_length=255)
    parent_id: str | None = None
    tags: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _dates_in_order(self) -> "TaskCreateRequest":
        _check_date_range(self.start_date, self.due_date)
        return self


class TaskUpdate(BaseModel):
    """Request body for updating a task (partial; only sent fields change)."""

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    status: str | None = Field(default=None, max_length=64)
    priority: str | None = Field(default=None, max_length=64)
    assignees: list[str] | None = None
    start_date: date | None = None
    due_date: date | None = None
    effort: str | None = Field(default=None, max_length=32)
    product_area: str | None = Field(default=None, max_length=128)
    order: int | None = Field(default=None, ge=0)
    depends_on: list[str] | None = None
    reporter: str | None = Field(default=None, max_length=255)
    parent_id: str | None = None
    tags: list[str] | None = None

    @model_validator(mode="after")
    def _dates_in_order(self) -> "TaskUpdate":
        _check_date_range(self.start_date, self.due_date)
        return self

    def patch(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TaskMoveRequest(BaseModel):
    """Move a task to a status lane, optionally at a given order."""

    status: str = Field(..., min_length=1, max_length=64)
    order: int | None = Field(default=None, ge=0)


class DependencyRequest(BaseModel):
    dependency_id: str = Field(..., min_length=1)


class TaskResponse(BaseModel):
    """Task response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: str
    priority: str
    assignees: list[str]
    start_date: date | None = None
    due_date: date | None = None
    effort: str | None = None
    product_area: str | None = None
    order: int
    depends_on: list[str]
    reporter: str | None = None
    parent_id: str | None = None
    tags: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None
