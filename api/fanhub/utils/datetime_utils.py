"""Datetime helpers for the API layer.

DATE CONVENTION:
Upstream game times are UTC (ISO 8601 with a trailing "Z"). Responses carry
UTC ISO 8601 strings. Wall-clock questions ("is this prime time?", "is this
a weekend game?") are answered in the team's local timezone.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_utc() -> datetime:
    """Get the current time in UTC, timezone-aware."""
    return datetime.now(timezone.utc)


def today_utc() -> date:
    """Return the current date in UTC timezone."""
    return now_utc().date()


def to_local(value: datetime, tz_name: str) -> datetime:
    """Convert an aware datetime to the named timezone."""
    return value.astimezone(ZoneInfo(tz_name))


def parse_iso_datetime(value: str | None) -> datetime | None:
    """Parse an ISO 8601 date or datetime string into an aware UTC datetime.

    Bare dates ("2024-10-09") are taken as midnight UTC. Returns None when
    the value is empty or unparseable.
    """
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_published_at(value: str | None) -> datetime:
    """Parse a feed/article timestamp (ISO 8601 or RFC 822).

    Missing or unparseable values map to the Unix epoch so they sort oldest.
    """
    if not value:
        return EPOCH
    parsed = parse_iso_datetime(value)
    if parsed is not None:
        return parsed
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_utc(value: datetime) -> str:
    """Format an aware datetime as an ISO 8601 UTC string with a Z suffix."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def season_id(today: date | None = None) -> str:
    """Return the NHL season id (e.g. "20242025") for the given date.

    Seasons begin in October; January through September belong to the
    season that started the previous year.
    """
    today = today or today_utc()
    start_year = today.year if today.month >= 10 else today.year - 1
    return f"{start_year}{start_year + 1}"


def calculate_age(birth: date, today: date | None = None) -> int:
    """Age in whole years, accounting for whether the birthday has passed."""
    today = today or today_utc()
    before_birthday = (today.month, today.day) < (birth.month, birth.day)
    return today.year - birth.year - (1 if before_birthday else 0)


def parse_date(value: str | None) -> date | None:
    """Parse a YYYY-MM-DD string, returning None when invalid."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
