"""Dashboard schemas."""

from datetime import datetime

from harbor.schemas.engagement import CamelModel


class BucketCounts(CamelModel):
    """Engagement counts per bucket."""

    leads: int
    deals: int
    accounts: int


class DealStageCount(CamelModel):
    stage: str
    label: str
    count: int


class TaskSummary(CamelModel):
    """Open task workload."""

    overdue: int
    due_today: int
    open: int


class DashboardSummary(CamelModel):
    """Pipeline and workload snapshot."""

    buckets: BucketCounts
    follow_up_required: int
    deals_by_stage: list[DealStageCount]
    unknown_stage_deals: int
    tasks: TaskSummary
    stale_deals: int
    stale_after_days: int

    # Metadata
    generated_at: datetime
