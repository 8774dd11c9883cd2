"""
DateTime Normalizer Module

Callers mix machine-generated ISO timestamps with typed phrases such as
"today 8pm" or "Friday 5pm" in the same field. This module turns either form
into one canonical, timezone-naive local value that the rest of the server
compares and sends to the Calendar API.

Recognised phrases, first match wins (case-insensitive):

    today / tomorrow / yesterday
    in N days, N day(s)
    sunday .. saturday        next occurrence strictly after today

An optional time of day ("8pm", "2:30 p.m.", "14:00") is applied to the
resolved date. Anything else, ISO-8601 included, is passed through unchanged,
so normalizing an already canonical value is a no-op.
"""

import re
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser
from pydantic import BaseModel

from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


class CanonicalTime(BaseModel):
    """
    Result of normalization.

    ``value`` is ``YYYY-MM-DD`` when ``is_all_day`` is true, otherwise
    ``YYYY-MM-DDTHH:MM:SS`` (or an ISO value passed through as given).
    """
    value: str
    is_all_day: bool


ISO_DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}"
    r"(?:T\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?$"
)
OFFSET_SUFFIX_PATTERN = re.compile(r"(?:Z|[+-]\d{2}:?\d{2})$")

TODAY_PATTERN = re.compile(r"\btoday\b")
TOMORROW_PATTERN = re.compile(r"\btomorrow\b")
YESTERDAY_PATTERN = re.compile(r"\byesterday\b")
RELATIVE_DAYS_PATTERN = re.compile(r"\b(?:in\s+)?(\d+)\s+days?\b")

# Indexed like datetime.weekday(): Monday is 0
WEEKDAY_NAMES = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]
WEEKDAY_PATTERN = re.compile(r"\b(" + "|".join(WEEKDAY_NAMES) + r")\b")

TIME_OF_DAY_PATTERN = re.compile(
    r"(?<!\d)(\d{1,2})(?::(\d{2}))?(?:\s*(am|pm|a\.m\.|p\.m\.)(?![a-z]))?(?![\d:])"
)


def get_zone(timezone: Optional[str]) -> tzinfo:
    """
    Resolve an IANA timezone name, falling back to UTC.

    Args:
        timezone (Optional[str]): IANA name such as "America/New_York".

    Returns:
        tzinfo: The zone, or UTC if the name is empty or unknown.
    """
    if not timezone:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone '{timezone}', falling back to UTC")
        return ZoneInfo("UTC")


def is_iso_datetime(value: str) -> bool:
    """Return True if value is an ISO-8601 date or datetime (optionally with an offset)."""
    return bool(ISO_DATETIME_PATTERN.match(value.strip()))


def _current_date(timezone: str, now: Optional[datetime]) -> date:
    zone = get_zone(timezone)
    if now is None:
        return datetime.now(zone).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(zone).date()


def _next_weekday(current: date, weekday: int) -> date:
    days_ahead = (weekday - current.weekday()) % 7
    # Same-day phrasing always means next week's occurrence
    if days_ahead == 0:
        days_ahead = 7
    return current + timedelta(days=days_ahead)


def _extract_time_of_day(text: str) -> Optional[tuple]:
    """
    Find the first "H(:MM)? (am|pm)?" in text.

    Returns:
        Optional[tuple]: (hours, minutes) in 24-hour form, or None when no valid time is present.
    """
    match = TIME_OF_DAY_PATTERN.search(text)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2)) if match.group(2) else 0
    meridiem = match.group(3)

    if meridiem and 1 <= hours <= 12:
        if meridiem.startswith("p"):
            if hours != 12:
                hours += 12
        elif hours == 12:
            hours = 0

    if hours > 23 or minutes > 59:
        return None

    return hours, minutes


def _resolve_anchor(text: str, current: date) -> Optional[tuple]:
    """
    Match the anchor phrases in recognition order.

    Returns:
        Optional[tuple]: (anchor date, text with the anchor phrase removed), or None.
    """
    for pattern, offset in (
        (TODAY_PATTERN, 0),
        (TOMORROW_PATTERN, 1),
        (YESTERDAY_PATTERN, -1),
    ):
        match = pattern.search(text)
        if match:
            return current + timedelta(days=offset), text[:match.start()] + " " + text[match.end():]

    match = RELATIVE_DAYS_PATTERN.search(text)
    if match:
        anchor = current + timedelta(days=int(match.group(1)))
        return anchor, text[:match.start()] + " " + text[match.end():]

    match = WEEKDAY_PATTERN.search(text)
    if match:
        anchor = _next_weekday(current, WEEKDAY_NAMES.index(match.group(1)))
        return anchor, text[:match.start()] + " " + text[match.end():]

    return None


def normalize_datetime(
    expression: str,
    timezone: str = "UTC",
    now: Optional[datetime] = None
) -> CanonicalTime:
    """
    Normalize an ISO or natural-language time expression.

    This never raises: unrecognised input is returned unchanged, with
    ``is_all_day`` true when it has no literal "T". Callers that need strict
    validation should check ``is_iso_datetime`` on the result.

    Args:
        expression (str): e.g. "today 8pm", "in 3 days", "Friday", "2024-01-20T10:00:00".
        timezone (str): IANA timezone used to decide what "today" is. Defaults to "UTC".
        now (Optional[datetime]): Reference time, mainly for tests. Defaults to the current time.

    Returns:
        CanonicalTime: The canonical value and its all-day flag.

    Examples:
        >>> normalize_datetime("today 8pm", now=datetime(2024, 1, 15, 10, 0))
        CanonicalTime(value='2024-01-15T20:00:00', is_all_day=False)

        >>> normalize_datetime("2024-01-20")
        CanonicalTime(value='2024-01-20', is_all_day=True)
    """
    text = expression.strip().lower()

    resolved = _resolve_anchor(text, _current_date(timezone, now))
    if resolved is None:
        return CanonicalTime(value=expression, is_all_day="T" not in expression)

    anchor, remainder = resolved
    time_of_day = _extract_time_of_day(remainder)

    if time_of_day is None:
        return CanonicalTime(value=anchor.isoformat(), is_all_day=True)

    hours, minutes = time_of_day
    return CanonicalTime(
        value=f"{anchor.isoformat()}T{hours:02d}:{minutes:02d}:00",
        is_all_day=False
    )


def to_datetime(value: str, timezone: str = "UTC") -> Optional[datetime]:
    """
    Parse a canonical or ISO value into an aware datetime for comparisons.

    Bare dates become local midnight and naive datetimes are localized in
    ``timezone``. Values with an offset keep it.

    Returns:
        Optional[datetime]: The aware datetime, or None if value is not ISO-shaped.
    """
    if not value or not is_iso_datetime(value):
        return None

    try:
        parsed = date_parser.isoparse(value.strip())
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=get_zone(timezone))
    return parsed


def build_time_object(value: str, timezone: str = "UTC") -> Dict[str, Any]:
    """
    Format a canonical value for the Google Calendar API.

    Args:
        value (str): A canonical value from normalize_datetime.
        timezone (str): IANA timezone for naive datetimes.

    Returns:
        Dict[str, Any]: {"date": ...} for all-day values, otherwise {"dateTime": ...}
            with a "timeZone" when the value carries no offset of its own.
    """
    value = value.strip()
    if "T" not in value:
        return {"date": value}
    if OFFSET_SUFFIX_PATTERN.search(value):
        return {"dateTime": value}
    return {"dateTime": value, "timeZone": timezone}
