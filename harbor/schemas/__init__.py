"""Pydantic schemas for API validation."""

from harbor.schemas.engagement import (
    CamelModel,
    CompanySummary,
    ContactSummary,
    EngagementResponse,
    EngagementEnvelope,
    EngagementListResponse,
)
from harbor.schemas.dashboard import DashboardSummary, BucketCounts, DealStageCount, TaskSummary
from harbor.schemas.seed import LegacyRecord, SeedPayload

__all__ = [
    "CamelModel",
    "CompanySummary",
    "ContactSummary",
    "EngagementResponse",
    "EngagementEnvelope",
    "EngagementListResponse",
    "DashboardSummary",
    "BucketCounts",
    "DealStageCount",
    "TaskSummary",
    "LegacyRecord",
    "SeedPayload",
]
