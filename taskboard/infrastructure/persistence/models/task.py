"""Task ORM model. Board task with lane order, dependencies and optional parent."""

from datetime import date

from sqlalchemy import JSON, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.infrastructure.persistence.database import Base
from taskboard.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Task(CuidMixin, TimestampMixin, Base):
    """Board task. Table: task.

    depends_on and parent_id hold task ids without foreign keys; deletes prune
    them in the repository.
    """

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    priority: Mapped[str] = mapped_column(String(64), nullable=False)
    assignees: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True, index=True)
    effort: Mapped[str | None] = mapped_column(String(32), nullable=True)
    product_area: Mapped[str | None] = mapped_column(String(128), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    depends_on: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    reporter: Mapped[str | None] = mapped_column(String(255), nullable=True)
    parent_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    __table_args__ = (Index("ix_task_status_order", "status", "order"),)
