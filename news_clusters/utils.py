"""Utility functions for the news clustering engine."""

from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import Any

from .logging import get_logger

logger = get_logger(__name__)

# Sentinel for unknown publish times: sorts as the oldest possible article
UNKNOWN_DATETIME = datetime.min.replace(tzinfo=UTC)


def parse_date_string(date_str: str) -> datetime | None:
    """Parse various date string formats.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed timezone-aware datetime or None if parsing fails
    """
    if not date_str:
        return None

    date_str = date_str.strip()
    if not date_str:
        return None

    # ISO 8601 first (what most JSON APIs return)
    try:
        return _ensure_utc(datetime.fromisoformat(date_str))
    except ValueError:
        pass

    # RFC 2822 format (common in RSS feeds)
    # Example: "Thu, 17 Jul 2025 23:17:14 GMT"
    try:
        return _ensure_utc(parsedate_to_datetime(date_str))
    except (ValueError, TypeError, IndexError):
        pass

    formats = [
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%d %H:%M:%S",
        "%d/%m/%Y",
        "%m/%d/%Y",
        "%B %d, %Y",
        "%b %d, %Y",
        "%d %B %Y",
        "%d %b %Y",
        "%a, %d %b %Y %H:%M:%S %Z",
        "%a, %d %b %Y %H:%M:%S",
    ]

    for fmt in formats:
        try:
            return _ensure_utc(datetime.strptime(date_str, fmt))
        except ValueError:
            continue

    logger.debug("Failed to parse date string", date_string=date_str)
    return None


def to_utc(value: Any) -> datetime | None:
    """Coerce a raw publish time into an aware UTC datetime.

    Accepts datetimes and date strings; anything else is unknown.
    """
    if isinstance(value, datetime):
        return _ensure_utc(value)
    if isinstance(value, str):
        return parse_date_string(value)
    return None


def _ensure_utc(dt: datetime) -> datetime | None:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    try:
        return dt.astimezone(UTC)
    except OverflowError:
        # Offset pushes the instant outside the representable range
        logger.debug("Date out of range after UTC conversion", date=dt.isoformat())
        return None


def format_datetime_iso(dt: datetime) -> str:
    """Format datetime as ISO string.

    Args:
        dt: Datetime to format

    Returns:
        ISO formatted datetime string
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.isoformat()

