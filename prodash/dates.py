from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

ISO_FORMAT = "%Y-%m-%d"


def to_iso(day: date) -> str:
    return day.isoformat()


def parse_iso(value: str) -> date:
    raw = str(value).strip()
    parsed = datetime.strptime(raw, ISO_FORMAT).date()
    # strptime tolerates missing zero padding
    if to_iso(parsed) != raw:
        raise ValueError(f"Not a yyyy-MM-dd date: {value!r}")
    return parsed


def is_iso_date(value) -> bool:
    try:
        parse_iso(value)
    except (TypeError, ValueError):
        return False
    return True


def today(tz_name: str | None = None) -> date:
    if not tz_name:
        return date.today()
    try:
        return datetime.now(ZoneInfo(tz_name)).date()
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using local date", tz_name)
        return date.today()


def month_key(day: date) -> str:
    return day.strftime("%Y-%m")


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()
