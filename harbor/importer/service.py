"""Classify legacy prototype records into engagement buckets and persist them."""

import logging
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from harbor.config import get_settings
from harbor.importer.normalize import map_account_status, map_deal_stage, parse_loose_date
from harbor.importer.resolver import IdentityResolver
from harbor.models.engagement import Bucket, Engagement
from harbor.schemas.seed import LegacyRecord, SeedPayload

settings = get_settings()
logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    """Counts discovered in the seed and engagements created per bucket."""

    found: dict[str, int]
    created: dict[Bucket, int] = field(default_factory=lambda: {bucket: 0 for bucket in Bucket})

    @property
    def total_created(self) -> int:
        return sum(self.created.values())


class PrototypeImporter:
    """Import accounts, deals and leads as engagements.

    Records are processed one at a time in a fixed category order. Every
    write is committed on its own; a failure aborts the run and leaves the
    rows created so far in place.
    """

    def __init__(self, db: AsyncSession, import_tag: str | None = None):
        self.db = db
        self.resolver = IdentityResolver(db)
        self.import_tag = settings.import_tag if import_tag is None else import_tag

    async def import_seed(self, seed: SeedPayload) -> ImportSummary:
        summary = ImportSummary(found=seed.counts())

        categories = (
            (Bucket.ACCOUNT, seed.accounts),
            (Bucket.DEAL, seed.deals),
            (Bucket.LEAD, seed.leads),
        )
        for bucket, records in categories:
            for record in records:
                await self.import_record(bucket, record)
                summary.created[bucket] += 1
            logger.info(f"Imported {summary.created[bucket]} {bucket.value} engagements")

        return summary

    async def import_record(self, bucket: Bucket, record: LegacyRecord) -> Engagement:
        """Resolve identities for one record and create its engagement."""
        company = await self.resolver.resolve_company(record.name)
        contact = await self.resolver.resolve_contact(
            full_name=record.contact or "Unknown",
            email=record.email or None,
            company_id=company.id,
        )

        engagement = Engagement(
            bucket=bucket,
            company_id=company.id,
            primary_contact_id=contact.id,
            product=record.product or None,
            source=record.source or None,
            notes=self.build_notes(record.notes),
            **self.bucket_fields(bucket, record),
        )
        self.db.add(engagement)
        await self.db.commit()
        await self.db.refresh(engagement)

        logger.debug(f"Created {bucket.value} engagement {engagement.id} for {record.name!r}")
        return engagement

    def build_notes(self, notes: str | None) -> str:
        return "\n".join(part for part in (notes, self.import_tag) if part)

    def bucket_fields(self, bucket: Bucket, record: LegacyRecord) -> dict[str, Any]:
        """Fields populated only for the given bucket."""
        if bucket == Bucket.ACCOUNT:
            return {
                "next_step": record.next_step or None,
                "follow_up_required": bool(record.follow_up_required),
                "last_touch_at": parse_loose_date(record.last_contact),
                "account_status": map_account_status(record.status),
                "billing_schedule": record.billing_schedule or None,
            }
        if bucket == Bucket.DEAL:
            return {
                "next_step": record.next_step or None,
                "follow_up_required": bool(record.follow_up_required),
                "last_touch_at": parse_loose_date(record.last_contact),
                "deal_stage": map_deal_stage(record.stage),
            }
        return {}
