"""Contact model."""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from harbor.services.database import Base

if TYPE_CHECKING:
    from harbor.models.company import Company


class Contact(Base):
    """A person at a company."""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(primary_key=True)
    full_name: Mapped[str] = mapped_column(String(255))
    # Not unique at the schema level; the importer de-dupes on it
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    # Owning company
    company_id: Mapped[int] = mapped_column(ForeignKey("companies.id"), index=True)
    company: Mapped["Company"] = relationship(back_populates="contacts")

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (
        Index("ix_contacts_company_name", "company_id", "full_name"),
    )
