"""Test find-or-create identity resolution."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from harbor.importer.resolver import IdentityResolver
from harbor.models.company import Company
from harbor.models.contact import Contact


async def count_rows(db: AsyncSession, model) -> int:
    result = await db.execute(select(func.count()).select_from(model))
    return result.scalar()


@pytest.mark.asyncio
async def test_resolve_company_creates_once(db_session: AsyncSession):
    """Resolving the same name twice returns the same company."""
    resolver = IdentityResolver(db_session)

    first = await resolver.resolve_company("Acme")
    second = await resolver.resolve_company("Acme")

    assert first.id == second.id
    assert await count_rows(db_session, Company) == 1


@pytest.mark.asyncio
async def test_resolve_company_exact_match_only(db_session: AsyncSession):
    """Names differing in case are separate companies."""
    resolver = IdentityResolver(db_session)

    acme = await resolver.resolve_company("Acme")
    upper = await resolver.resolve_company("ACME")

    assert acme.id != upper.id
    assert await count_rows(db_session, Company) == 2


@pytest.mark.asyncio
async def test_resolve_company_first_duplicate_wins(db_session: AsyncSession):
    """With pre-existing duplicates the earliest company is reused."""
    older = Company(name="Acme")
    db_session.add(older)
    await db_session.commit()
    db_session.add(Company(name="Acme"))
    await db_session.commit()

    company = await IdentityResolver(db_session).resolve_company("Acme")

    assert company.id == older.id
    assert await count_rows(db_session, Company) == 2


@pytest.mark.asyncio
async def test_contact_email_is_global_identity(db_session: AsyncSession):
    """A matching email is reused across different names and companies."""
    resolver = IdentityResolver(db_session)
    c1 = await resolver.resolve_company("C1")
    c2 = await resolver.resolve_company("C2")

    first = await resolver.resolve_contact("A", "x@y.com", c1.id)
    second = await resolver.resolve_contact("B", "x@y.com", c2.id)

    assert first.id == second.id
    assert second.full_name == "A"
    assert second.company_id == c1.id
    assert await count_rows(db_session, Contact) == 1


@pytest.mark.asyncio
async def test_contact_created_with_email(db_session: AsyncSession):
    """A new email creates a contact carrying it."""
    resolver = IdentityResolver(db_session)
    company = await resolver.resolve_company("Acme")

    contact = await resolver.resolve_contact("Jo", "jo@acme.com", company.id)

    assert contact.id is not None
    assert contact.email == "jo@acme.com"
    assert contact.company_id == company.id


@pytest.mark.asyncio
async def test_contact_without_email_scoped_per_company(db_session: AsyncSession):
    """The same name without email in two companies gives two contacts."""
    resolver = IdentityResolver(db_session)
    c1 = await resolver.resolve_company("C1")
    c2 = await resolver.resolve_company("C2")

    first = await resolver.resolve_contact("Sam", None, c1.id)
    second = await resolver.resolve_contact("Sam", None, c2.id)

    assert first.id != second.id
    assert await count_rows(db_session, Contact) == 2


@pytest.mark.asyncio
async def test_contact_without_email_reused_within_company(db_session: AsyncSession):
    """Name matches within one company reuse the contact."""
    resolver = IdentityResolver(db_session)
    company = await resolver.resolve_company("Acme")

    first = await resolver.resolve_contact("Sam", None, company.id)
    second = await resolver.resolve_contact("Sam", "", company.id)

    assert first.id == second.id
    assert await count_rows(db_session, Contact) == 1


@pytest.mark.asyncio
async def test_blank_email_falls_back_to_name(db_session: AsyncSession):
    """A whitespace-only email is treated as absent and not stored."""
    resolver = IdentityResolver(db_session)
    company = await resolver.resolve_company("Acme")

    contact = await resolver.resolve_contact("Sam", "   ", company.id)

    assert contact.email is None


@pytest.mark.asyncio
async def test_email_match_ignores_nameless_contacts(db_session: AsyncSession):
    """An emailed contact is not matched by name to an email-less one."""
    resolver = IdentityResolver(db_session)
    company = await resolver.resolve_company("Acme")

    plain = await resolver.resolve_contact("Sam", None, company.id)
    emailed = await resolver.resolve_contact("Sam", "sam@acme.com", company.id)

    assert plain.id != emailed.id
