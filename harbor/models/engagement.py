"""Engagement model: one lead, deal or account relationship."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, Text, Boolean, ForeignKey, Enum as SQLEnum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from harbor.services.database import Base

if TYPE_CHECKING:
    from harbor.models.company import Company
    from harbor.models.contact import Contact
    from harbor.models.task import Task


class Bucket(str, Enum):
    """Top-level engagement classification."""

    LEAD = "LEAD"
    DEAL = "DEAL"
    ACCOUNT = "ACCOUNT"


class DealStage(str, Enum):
    """Pipeline stage, only meaningful for DEAL engagements."""

    DISCOVERY = "DISCOVERY"
    DEMO = "DEMO"
    PROPOSAL = "PROPOSAL"
    ON_HOLD = "ON_HOLD"
    CLOSED_WON = "CLOSED_WON"
    CLOSED_LOST = "CLOSED_LOST"


class AccountStatus(str, Enum):
    """Account status, only meaningful for ACCOUNT engagements."""

    ACTIVE = "ACTIVE"
    FORMER = "FORMER"


class Engagement(Base):
    """Relationship instance tied to one company and one primary contact."""

    __tablename__ = "engagements"

    id: Mapped[int] = mapped_column(primary_key=True)

    bucket: Mapped[Bucket] = mapped_column(
        SQLEnum(Bucket, name="engagementbucket", values_callable=lambda x: [e.value for e in x]),
        index=True,
    )

    # Identity references
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id"), index=True)
    company: Mapped["Company"] = relationship(back_populates="engagements")
    primary_contact_id: Mapped[int] = mapped_column(ForeignKey("contacts.id"), index=True)
    primary_contact: Mapped["Contact"] = relationship()

    # Common fields
    product: Mapped[str | None] = mapped_column(String(255), nullable=True)
    source: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    next_step: Mapped[str | None] = mapped_column(Text, nullable=True)
    follow_up_required: Mapped[bool] = mapped_column(Boolean, default=False)
    last_touch_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Bucket-scoped fields (not enforced by the schema)
    deal_stage: Mapped[DealStage | None] = mapped_column(
        SQLEnum(DealStage, name="dealstage", values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    account_status: Mapped[AccountStatus | None] = mapped_column(
        SQLEnum(AccountStatus, name="accountstatus", values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    billing_schedule: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, index=True
    )

    tasks: Mapped[list["Task"]] = relationship(back_populates="engagement")

    __table_args__ = (
        Index("ix_engagements_bucket_stage", "bucket", "deal_stage"),
    )
