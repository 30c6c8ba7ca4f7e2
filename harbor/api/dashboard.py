"""Dashboard API endpoints."""

from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import select, func, and_, or_
from sqlalchemy.ext.asyncio import AsyncSession

from harbor.config import get_settings
from harbor.models.engagement import Bucket, DealStage, Engagement
from harbor.models.task import Task, TaskStatus
from harbor.schemas.dashboard import BucketCounts, DashboardSummary, DealStageCount, TaskSummary
from harbor.services.database import get_db

router = APIRouter()
settings = get_settings()

STAGE_LABELS: dict[DealStage, str] = {
    DealStage.DISCOVERY: "Discovery",
    DealStage.DEMO: "Demo",
    DealStage.PROPOSAL: "Proposal",
    DealStage.ON_HOLD: "On Hold",
    DealStage.CLOSED_WON: "Closed Won",
    DealStage.CLOSED_LOST: "Closed Lost",
}


async def count(db: AsyncSession, model, *criteria) -> int:
    result = await db.execute(select(func.count()).select_from(model).where(*criteria))
    return result.scalar() or 0


@router.get("/summary", response_model=DashboardSummary)
async def get_dashboard_summary(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DashboardSummary:
    """Snapshot of the pipeline and open task workload."""
    now = datetime.utcnow()
    today_start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    today_end = today_start + timedelta(days=1)

    buckets = BucketCounts(
        leads=await count(db, Engagement, Engagement.bucket == Bucket.LEAD),
        deals=await count(db, Engagement, Engagement.bucket == Bucket.DEAL),
        accounts=await count(db, Engagement, Engagement.bucket == Bucket.ACCOUNT),
    )
    follow_up_required = await count(db, Engagement, Engagement.follow_up_required.is_(True))

    # Deal stage distribution (DEAL bucket only)
    result = await db.execute(
        select(Engagement.deal_stage, func.count())
        .where(Engagement.bucket == Bucket.DEAL)
        .group_by(Engagement.deal_stage)
    )
    stage_counts = {stage: total for stage, total in result.all()}
    deals_by_stage = [
        DealStageCount(stage=stage.value, label=label, count=stage_counts.get(stage, 0))
        for stage, label in STAGE_LABELS.items()
    ]

    # Task overview
    tasks = TaskSummary(
        overdue=await count(
            db, Task, Task.status == TaskStatus.OPEN, Task.due_at < today_start
        ),
        due_today=await count(
            db,
            Task,
            and_(Task.status == TaskStatus.OPEN, Task.due_at >= today_start, Task.due_at < today_end),
        ),
        open=await count(db, Task, Task.status == TaskStatus.OPEN),
    )

    # Deals with no touch inside the stale window
    stale_cutoff = datetime.now(timezone.utc) - timedelta(days=settings.stale_deal_days)
    stale_deals = await count(
        db,
        Engagement,
        Engagement.bucket == Bucket.DEAL,
        or_(Engagement.last_touch_at < stale_cutoff, Engagement.last_touch_at.is_(None)),
    )

    return DashboardSummary(
        buckets=buckets,
        follow_up_required=follow_up_required,
        deals_by_stage=deals_by_stage,
        unknown_stage_deals=stage_counts.get(None, 0),
        tasks=tasks,
        stale_deals=stale_deals,
        stale_after_days=settings.stale_deal_days,
        generated_at=datetime.utcnow(),
    )
