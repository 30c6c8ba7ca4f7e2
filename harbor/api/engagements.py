"""Engagement API endpoints."""

from datetime import datetime
from typing import Annotated, Any
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from harbor.config import get_settings
from harbor.models.engagement import AccountStatus, Bucket, DealStage, Engagement
from harbor.schemas.engagement import EngagementEnvelope, EngagementListResponse, EngagementResponse
from harbor.services.database import get_db

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)

# Request key -> model attribute. Anything else in the body is ignored.
ALLOWED_FIELDS: dict[str, str] = {
    "source": "source",
    "product": "product",
    "nextStep": "next_step",
    "notes": "notes",
    "followUpRequired": "follow_up_required",
    "lastTouchAt": "last_touch_at",
    "bucket": "bucket",
    "dealStage": "deal_stage",
    "accountStatus": "account_status",
}


def json_error(message: str, status_code: int, details: Any = None) -> JSONResponse:
    """Build an error response; details are withheld in production."""
    content: dict[str, Any] = {"error": message}
    if details and not settings.is_production:
        content["details"] = details
    return JSONResponse(content, status_code=status_code)


def engagement_query():
    return select(Engagement).options(
        selectinload(Engagement.company),
        selectinload(Engagement.primary_contact),
    )


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


@router.get("", response_model=EngagementListResponse)
async def list_engagements(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EngagementListResponse:
    """List the most recently updated engagements."""
    query = (
        engagement_query()
        .order_by(Engagement.updated_at.desc(), Engagement.id.desc())
        .limit(settings.engagement_list_limit)
    )
    result = await db.execute(query)
    engagements = result.scalars().all()

    return EngagementListResponse(
        engagements=[EngagementResponse.model_validate(e) for e in engagements]
    )


@router.patch("/{engagement_id}", response_model=EngagementEnvelope)
async def update_engagement(
    engagement_id: str,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Update allow-listed fields of an engagement."""
    try:
        record_id = int(engagement_id)
    except ValueError:
        return json_error("Engagement not found", 404, {"id": engagement_id})

    try:
        body = await request.json()
    except ValueError:
        return json_error("Invalid JSON body", 400)

    if not isinstance(body, dict):
        return json_error("Invalid JSON body", 400)

    data = {ALLOWED_FIELDS[key]: value for key, value in body.items() if key in ALLOWED_FIELDS}
    if not data:
        return json_error("No valid fields to update", 400, {"allowed": list(ALLOWED_FIELDS)})

    last_touch_at = data.get("last_touch_at")
    if isinstance(last_touch_at, str):
        parsed = parse_timestamp(last_touch_at)
        if parsed is None:
            return json_error("Invalid lastTouchAt", 400)
        data["last_touch_at"] = parsed
    elif last_touch_at is not None:
        return json_error("Invalid lastTouchAt", 400)

    if "follow_up_required" in data and not isinstance(data["follow_up_required"], bool):
        return json_error("Invalid followUpRequired", 400)

    # Enum guardrails; bucket may not be cleared, the others may
    if "bucket" in data:
        if data["bucket"] not in [b.value for b in Bucket]:
            return json_error("Invalid bucket", 400)
        data["bucket"] = Bucket(data["bucket"])

    if data.get("deal_stage") is not None:
        if data["deal_stage"] not in [s.value for s in DealStage]:
            return json_error("Invalid dealStage", 400)
        data["deal_stage"] = DealStage(data["deal_stage"])

    if data.get("account_status") is not None:
        if data["account_status"] not in [s.value for s in AccountStatus]:
            return json_error("Invalid accountStatus", 400)
        data["account_status"] = AccountStatus(data["account_status"])

    try:
        result = await db.execute(select(Engagement).where(Engagement.id == record_id))
        engagement = result.scalar_one_or_none()
        if not engagement:
            return json_error("Engagement not found", 404, {"id": record_id})

        for field, value in data.items():
            setattr(engagement, field, value)
        await db.commit()

        result = await db.execute(
            engagement_query()
            .where(Engagement.id == record_id)
            .execution_options(populate_existing=True)
        )
        engagement = result.scalar_one()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.exception(f"Failed to update engagement {record_id}")
        return json_error("Update failed", 500, {"message": str(e), "type": type(e).__name__})

    return EngagementEnvelope(engagement=EngagementResponse.model_validate(engagement))
