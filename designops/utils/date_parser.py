"""Date parsing and duration formatting for job and artwork log records.

Forms submit dates in whatever shape the date picker produced ("2024-01-01",
"2024-01-01T10:00:00Z", "01/02/2024 10:00"). Everything is normalised to a
timezone-aware UTC datetime before it is stored.
"""

from datetime import date, datetime, timezone

from dateutil import parser

INVALID_RANGE = "Invalid range"


def parse_timestamp(value: str | date | datetime) -> datetime:
    """Parse a form date value into a datetime.

    Args:
        value: ISO-8601 string, free-form date string, date or datetime

    Returns:
        datetime (naive values are left naive; see ``to_utc``)

    Raises:
        ValueError: If the value cannot be parsed

    Examples:
        >>> parse_timestamp("2024-01-01T10:00:00Z")
        datetime(2024, 1, 1, 10, 0, tzinfo=tzutc())
        >>> parse_timestamp(date(2024, 1, 1))
        datetime(2024, 1, 1, 0, 0)
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Date cannot be empty")

    try:
        return parser.isoparse(value.strip())
    except ValueError:
        pass

    try:
        return parser.parse(value.strip())
    except (ValueError, OverflowError, parser.ParserError):
        raise ValueError(f"Cannot parse date: '{value}'")


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def format_time_spent(start: datetime | None, end: datetime | None) -> str | None:
    """Human-readable duration between two timestamps.

    Returns None while the work is still open (no end), and ``INVALID_RANGE``
    rather than a negative duration when end precedes start. Seconds are
    truncated.

    Examples:
        >>> format_time_spent(t("10:00"), t("10:45"))
        '45 min'
        >>> format_time_spent(t("10:00"), t("12:30"))
        '2 hr 30 min'
    """
    if start is None or end is None:
        return None

    delta = to_utc(end) - to_utc(start)
    if delta.total_seconds() < 0:
        return INVALID_RANGE

    total_minutes = int(delta.total_seconds() // 60)
    hours, minutes = divmod(total_minutes, 60)

    if hours == 0:
        return f"{minutes} min"
    if minutes == 0:
        return f"{hours} hr"
    return f"{hours} hr {minutes} min"
