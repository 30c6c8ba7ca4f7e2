"""Engagement schemas.

JSON keys are camelCase to match the clients written against the prototype.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from harbor.models.engagement import AccountStatus, Bucket, DealStage


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class CompanySummary(CamelModel):
    id: int
    name: str


class ContactSummary(CamelModel):
    id: int
    full_name: str
    email: str | None = None
    company_id: int


class EngagementResponse(CamelModel):
    """Engagement with its company and primary contact embedded."""

    id: int
    bucket: Bucket
    company_id: int
    primary_contact_id: int
    product: str | None = None
    source: str | None = None
    notes: str | None = None
    next_step: str | None = None
    follow_up_required: bool
    last_touch_at: datetime | None = None
    deal_stage: DealStage | None = None
    account_status: AccountStatus | None = None
    billing_schedule: str | None = None
    created_at: datetime
    updated_at: datetime

    company: CompanySummary
    primary_contact: ContactSummary


class EngagementEnvelope(CamelModel):
    engagement: EngagementResponse


class EngagementListResponse(CamelModel):
    engagements: list[EngagementResponse]
