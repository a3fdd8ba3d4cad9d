# File: utils/dt_utils.py
"""Date and time utilities for Daily Quest.

Pure Python date/time functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

The ledger is keyed by the *local* calendar day. The integration pushes Home
Assistant's configured time zone in with ``set_default_timezone`` during setup.

Functions:
    - set_default_timezone / get_default_timezone
    - dt_now_utc: Current UTC datetime (the default clock)
    - date_key: Local calendar day of a datetime as "YYYY-MM-DD"
    - parse_date_key: Parse a "YYYY-MM-DD" key, None when malformed
    - is_date_key: Validate a date key
    - shift_date_key: Add days to a date key
    - recent_date_keys: The last N date keys ending at a given key
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

# Mirrors const.DATE_KEY_FORMAT (kept local for purity)
DATE_KEY_FORMAT = "%Y-%m-%d"


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Call this during integration setup to configure the user's timezone.
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Return the configured default timezone."""
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware)."""
    return datetime.now(UTC)


# ==============================================================================
# Date Keys
# ==============================================================================


def date_key(dt_obj: datetime | date, tz: ZoneInfo | None = None) -> str:
    """Return the local calendar day of ``dt_obj`` as "YYYY-MM-DD".

    Aware datetimes are converted to the local timezone first. Naive datetimes
    are taken as already local. Plain dates are formatted as-is.

    Example:
        date_key(datetime(2026, 10, 19, 23, 30, tzinfo=UTC), ZoneInfo("Europe/Paris"))
        → "2026-10-20"
    """
    if isinstance(dt_obj, datetime):
        if dt_obj.tzinfo is not None:
            dt_obj = dt_obj.astimezone(tz or DEFAULT_TIME_ZONE)
        return dt_obj.date().strftime(DATE_KEY_FORMAT)
    return dt_obj.strftime(DATE_KEY_FORMAT)


def parse_date_key(key: str | None) -> date | None:
    """Parse a "YYYY-MM-DD" key into a date, or None when malformed."""
    if not key or not isinstance(key, str):
        return None
    try:
        return datetime.strptime(key, DATE_KEY_FORMAT).date()
    except ValueError:
        return None


def is_date_key(key: object) -> bool:
    """Return True when ``key`` is a well-formed, real calendar date key."""
    return isinstance(key, str) and len(key) == 10 and parse_date_key(key) is not None


def shift_date_key(key: str, days: int) -> str:
    """Return the date key ``days`` days after ``key`` (negative for before).

    Raises:
        ValueError: If ``key`` is not a valid date key.
    """
    parsed = parse_date_key(key)
    if parsed is None:
        raise ValueError(f"Invalid date key: {key!r}")
    return (parsed + timedelta(days=days)).strftime(DATE_KEY_FORMAT)


def recent_date_keys(end_key: str, count: int) -> list[str]:
    """Return ``count`` consecutive date keys, oldest first, ending at ``end_key``.

    Example:
        recent_date_keys("2026-10-19", 3) → ["2026-10-17", "2026-10-18", "2026-10-19"]
    """
    return [shift_date_key(end_key, -offset) for offset in range(count - 1, -1, -1)]
