"""Normalization of loose, hand-authored legacy field values.

Every function here is total: unrecognized input yields ``None`` (or the
documented default) instead of raising, so one bad value never aborts an
import.
"""

import re
from datetime import datetime, timezone
from typing import Any

from harbor.models.engagement import AccountStatus, DealStage

_FULL_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_YEAR_MONTH = re.compile(r"[0-9]{4}-[0-9]{2}")
_YEAR = re.compile(r"[0-9]{4}")

DEAL_STAGE_LABELS: dict[str, DealStage] = {
    "discovery": DealStage.DISCOVERY,
    "demo": DealStage.DEMO,
    "proposal": DealStage.PROPOSAL,
    "on hold": DealStage.ON_HOLD,
    "closed won": DealStage.CLOSED_WON,
    "closed lost": DealStage.CLOSED_LOST,
}

ACCOUNT_STATUS_LABELS: dict[str, AccountStatus] = {
    "active": AccountStatus.ACTIVE,
    "former": AccountStatus.FORMER,
}


def parse_loose_date(value: Any) -> datetime | None:
    """Parse ``YYYY-MM-DD``, ``YYYY-MM`` or ``YYYY`` to midnight UTC.

    Partial dates resolve to the first day of the month or year. Any other
    shape, and impossible dates such as ``2024-13-40``, return ``None``.
    """
    if not value or not isinstance(value, str):
        return None

    try:
        if _FULL_DATE.fullmatch(value):
            year, month, day = (int(part) for part in value.split("-"))
            return datetime(year, month, day, tzinfo=timezone.utc)
        if _YEAR_MONTH.fullmatch(value):
            year, month = (int(part) for part in value.split("-"))
            return datetime(year, month, 1, tzinfo=timezone.utc)
        if _YEAR.fullmatch(value):
            return datetime(int(value), 1, 1, tzinfo=timezone.utc)
    except ValueError:
        return None

    return None


def _label(value: Any) -> str:
    return value.lower().strip() if isinstance(value, str) else ""


def map_deal_stage(value: Any) -> DealStage | None:
    """Map a free-text stage label to a DealStage, or None if unrecognized."""
    return DEAL_STAGE_LABELS.get(_label(value))


def map_account_status(value: Any) -> AccountStatus:
    """Map a free-text status label to an AccountStatus.

    Unlike deal stages, unrecognized or missing statuses default to ACTIVE.
    """
    return ACCOUNT_STATUS_LABELS.get(_label(value), AccountStatus.ACTIVE)
