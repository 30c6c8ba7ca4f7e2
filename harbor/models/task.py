"""Task model."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, ForeignKey, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from harbor.services.database import Base

if TYPE_CHECKING:
    from harbor.models.engagement import Engagement


class TaskStatus(str, Enum):
    """Task status."""

    OPEN = "OPEN"
    DONE = "DONE"


class Task(Base):
    """A to-do attached (optionally) to an engagement."""

    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(500))
    status: Mapped[TaskStatus] = mapped_column(
        SQLEnum(TaskStatus, name="taskstatus", values_callable=lambda x: [e.value for e in x]),
        default=TaskStatus.OPEN,
        index=True,
    )
    due_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)

    engagement_id: Mapped[int | None] = mapped_column(
        ForeignKey("engagements.id"), nullable=True, index=True
    )
    engagement: Mapped["Engagement"] = relationship(back_populates="tasks")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (
        Index("ix_tasks_status_due", "status", "due_at"),
    )
