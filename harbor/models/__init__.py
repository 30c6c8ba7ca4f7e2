"""Database models."""

from harbor.models.company import Company
from harbor.models.contact import Contact
from harbor.models.engagement import Engagement, Bucket, DealStage, AccountStatus
from harbor.models.task import Task, TaskStatus

__all__ = [
    "Company",
    "Contact",
    "Engagement",
    "Bucket",
    "DealStage",
    "AccountStatus",
    "Task",
    "TaskStatus",
]
