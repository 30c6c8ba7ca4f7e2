"""Company model."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from harbor.services.database import Base

if TYPE_CHECKING:
    from harbor.models.contact import Contact
    from harbor.models.engagement import Engagement


class Company(Base):
    """An organisation the team sells to or services."""

    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Matched by exact name on import; deliberately not unique
    name: Mapped[str] = mapped_column(String(255), index=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    # Relationships
    contacts: Mapped[list["Contact"]] = relationship(back_populates="company")
    engagements: Mapped[list["Engagement"]] = relationship(back_populates="company")
