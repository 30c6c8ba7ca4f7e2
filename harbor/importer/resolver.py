"""Find-or-create resolution of companies and contacts.

Each lookup is awaited and each create committed before returning, so a
sequential import never creates two identities for the same key. There is no
cross-call atomicity: two concurrent imports can still race between the
lookup and the create.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from harbor.models.company import Company
from harbor.models.contact import Contact

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Map incoming company and contact references onto persisted identities."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def resolve_company(self, name: str) -> Company:
        """Return the first company with exactly this name, creating it if needed."""
        result = await self.db.execute(
            select(Company).where(Company.name == name).order_by(Company.id).limit(1)
        )
        company = result.scalars().first()
        if company:
            return company

        company = Company(name=name)
        self.db.add(company)
        await self.db.commit()
        await self.db.refresh(company)

        logger.debug(f"Created company {company.id} ({name!r})")
        return company

    async def resolve_contact(
        self,
        full_name: str,
        email: str | None,
        company_id: int,
    ) -> Contact:
        """Return a matching contact, creating it if needed.

        A non-blank email is a global identity: any contact with that email is
        reused regardless of name or company. Without an email, contacts are
        matched on name within the given company only.
        """
        if email and email.strip():
            query = select(Contact).where(Contact.email == email)
        else:
            query = select(Contact).where(
                Contact.full_name == full_name,
                Contact.company_id == company_id,
            )
            email = None

        result = await self.db.execute(query.order_by(Contact.id).limit(1))
        existing = result.scalars().first()
        if existing:
            return existing

        contact = Contact(full_name=full_name, email=email, company_id=company_id)
        self.db.add(contact)
        await self.db.commit()
        await self.db.refresh(contact)

        logger.debug(f"Created contact {contact.id} ({full_name!r}) for company {company_id}")
        return contact
