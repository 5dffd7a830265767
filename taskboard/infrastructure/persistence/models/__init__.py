"""ORM models. Import here so Alembic autogenerate sees every table."""

from taskboard.infrastructure.persistence.models.task import Task

__all__ = ["Task"]
