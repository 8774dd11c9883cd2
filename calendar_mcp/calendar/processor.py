"""
Calendar Processing Module

This module provides helpers for building Calendar API request bodies, looking
up calendar timezones and shaping API resources and detection results into
the dictionaries returned by the MCP tools.
"""

import re
import uuid
from datetime import datetime, timedelta
from typing import Dict, Any, List, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from calendar_mcp.calendar.datetime_normalizer import build_time_object, normalize_datetime, to_datetime
from calendar_mcp.conflict.models import DetectionReport, MatchResult
from calendar_mcp.utils.config import get_config
from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)


# Color mapping for Google Calendar
# Google Calendar uses event color IDs 1-11
CALENDAR_COLOR_MAPPING = {
    "lavender": "1",
    "sage": "2",
    "grape": "3",
    "flamingo": "4",
    "banana": "5",
    "tangerine": "6",
    "peacock": "7",
    "graphite": "8",
    "blueberry": "9",
    "basil": "10",
    "tomato": "11",

    # Aliases for easier reference
    "light blue": "1",
    "green": "2",
    "purple": "3",
    "pink": "4",
    "yellow": "5",
    "orange": "6",
    "turquoise": "7",
    "gray": "8",
    "blue": "9",
    "dark green": "10",
    "red": "11",
}

# Custom event IDs: 5-1024 characters of base32hex (a-v, 0-9)
EVENT_ID_PATTERN = re.compile(r"^[a-v0-9]{5,1024}$")


def get_color_id_from_name(color_name: Optional[str]) -> Optional[str]:
    """
    Get the event color ID from a color name or ID.

    Args:
        color_name (Optional[str]): A color name (e.g. "tomato", "red") or an ID ("1"-"11").

    Returns:
        Optional[str]: The color ID, or None if the input is empty or unknown.
    """
    if not color_name:
        return None

    normalized_name = color_name.lower().strip()

    if normalized_name.isdigit() and 1 <= int(normalized_name) <= 11:
        return normalized_name

    return CALENDAR_COLOR_MAPPING.get(normalized_name)


def validate_event_id(event_id: str) -> None:
    """
    Validate a caller-supplied event ID.

    Raises:
        ValueError: If the ID is not 5-1024 characters of lowercase a-v and digits.
    """
    if not EVENT_ID_PATTERN.match(event_id):
        raise ValueError(
            "Event ID must be 5-1024 characters long and use base32hex encoding "
            "(lowercase letters a-v and digits 0-9 only)"
        )


def parse_reminder(reminder: Union[str, Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Parse a reminder such as "30 minutes by email" into Google Calendar reminder format.

    Supports formats like:
    - "30 minutes" or "30 minutes before"
    - "1 hour", "1 day before", "2 weeks"
    - "30 minutes by email"
    - {"method": "popup", "minutes": 30}  (dict passthrough)

    Returns:
        Optional[Dict[str, Any]]: Dict with "method" and "minutes" keys, or None if parsing fails.
    """
    if isinstance(reminder, dict):
        if "minutes" in reminder:
            return {"method": reminder.get("method", "popup"), "minutes": int(reminder["minutes"])}
        return None

    text = str(reminder).lower().strip()

    method = "popup"
    if "email" in text:
        method = "email"
        text = text.replace("by email", "").replace("email", "").strip()

    text = text.replace("before", "").strip()

    patterns = [
        (r"(\d+)\s*minutes?", 1),
        (r"(\d+)\s*hours?", 60),
        (r"(\d+)\s*days?", 60 * 24),
        (r"(\d+)\s*weeks?", 60 * 24 * 7),
    ]

    for pattern, multiplier in patterns:
        match = re.search(pattern, text)
        if match:
            return {"method": method, "minutes": int(match.group(1)) * multiplier}

    return None


def parse_reminders(reminders: List[Any]) -> List[Dict[str, Any]]:
    """Parse a list of reminders, skipping the ones that cannot be understood."""
    parsed = []
    for r in reminders:
        reminder = parse_reminder(r)
        if reminder:
            parsed.append(reminder)
        else:
            logger.warning(f"Ignoring unrecognised reminder: {r}")
    return parsed


def get_calendar_timezone(service: Resource, calendar_id: str = "primary") -> str:
    """
    Get a calendar's default timezone.

    Args:
        service (Resource): Calendar API service.
        calendar_id (str): The calendar to look up.

    Returns:
        str: The calendar's timezone (e.g. "America/New_York"), or the configured
            default timezone if it cannot be read.
    """
    default_timezone = get_config().get("default_timezone") or "UTC"
    try:
        calendar = service.calendars().get(calendarId=calendar_id).execute()
        return calendar.get("timeZone") or default_timezone
    except HttpError as e:
        logger.warning(f"Failed to get timezone for calendar {calendar_id}: {e}")
        return default_timezone


def resolve_timezone(service: Resource, calendar_id: str = "primary", time_zone: Optional[str] = None) -> str:
    """
    Pick the timezone a tool call works in: the requested one, else the calendar's.

    Raises:
        ValueError: If time_zone is given but is not a known IANA name.
    """
    if time_zone:
        try:
            ZoneInfo(time_zone)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Invalid timezone: {time_zone}")
        return time_zone
    return get_calendar_timezone(service, calendar_id)


def fetch_calendar_list(service: Resource) -> List[Dict[str, Any]]:
    """Return every entry of the user's calendar list, following pagination."""
    calendars: List[Dict[str, Any]] = []
    page_token = None
    while True:
        result = service.calendarList().list(pageToken=page_token).execute()
        calendars.extend(result.get("items", []))
        page_token = result.get("nextPageToken")
        if not page_token:
            return calendars


def resolve_calendar_ids(service: Resource, entries: List[str]) -> List[str]:
    """
    Map calendar names such as "Work" to calendar IDs.

    Entries that are "primary" or contain "@" are taken as IDs. Anything else
    is matched against the calendar list by ID, then by display name
    (summaryOverride or summary, ignoring case). Unmatched entries are kept
    as given. The result is order-preserving and free of repeats.

    Args:
        service (Resource): Calendar API service.
        entries (List[str]): Calendar IDs or names.

    Returns:
        List[str]: Calendar IDs.
    """
    calendars: Optional[List[Dict[str, Any]]] = None
    resolved: List[str] = []

    for entry in entries:
        calendar_id = entry
        if entry != "primary" and "@" not in entry:
            if calendars is None:
                calendars = fetch_calendar_list(service)
            calendar_id = _match_calendar(calendars, entry) or entry
            if calendar_id != entry:
                logger.debug(f"Resolved calendar name '{entry}' to {calendar_id}")
        if calendar_id not in resolved:
            resolved.append(calendar_id)

    return resolved


def _match_calendar(calendars: List[Dict[str, Any]], entry: str) -> Optional[str]:
    for cal in calendars:
        if cal.get("id") == entry:
            return entry

    wanted = entry.strip().casefold()
    for cal in calendars:
        names = (cal.get("summaryOverride"), cal.get("summary"))
        if any(name and name.strip().casefold() == wanted for name in names):
            return cal.get("id")
    return None


def get_primary_email(service: Resource) -> Optional[str]:
    """
    The authenticated user's email, read from the ID of their primary calendar.

    Returns:
        Optional[str]: The email, or None if it cannot be read.
    """
    try:
        calendar = service.calendars().get(calendarId="primary").execute()
    except HttpError as e:
        logger.warning(f"Failed to read the primary calendar: {e}")
        return None
    calendar_id = calendar.get("id")
    return calendar_id if isinstance(calendar_id, str) and "@" in calendar_id else None


def add_self_attendee(attendees: List[Dict[str, Any]], email: Optional[str]) -> List[Dict[str, Any]]:
    """Append the organizer as ``{"email", "self": True}`` unless already listed."""
    if not email:
        return attendees
    if any((a.get("email") or "").casefold() == email.casefold() for a in attendees):
        return attendees
    return attendees + [{"email": email, "self": True}]


def build_conference_data(
    conference_data: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None
) -> Dict[str, Any]:
    """
    Conference data for a new event.

    Existing conference data with a ``conferenceId`` is used as given;
    otherwise a Google Meet link is requested. Inserting it requires
    ``conferenceDataVersion=1``.
    """
    if conference_data and conference_data.get("conferenceId"):
        return conference_data
    return {
        "createRequest": {
            "requestId": request_id or uuid.uuid4().hex,
            "conferenceSolutionKey": {"type": "hangoutsMeet"},
        }
    }


def parse_time_bound(value: str, timezone: str = "UTC", end_of_day: bool = False) -> Optional[datetime]:
    """
    Turn a query bound such as "tomorrow" or "2024-01-15T09:00:00" into an aware datetime.

    Args:
        value (str): ISO or natural-language expression.
        timezone (str): IANA timezone for naive values.
        end_of_day (bool): For a bare date, return the end of that day instead of its start.

    Returns:
        Optional[datetime]: The bound, or None if the value cannot be understood.
    """
    canonical = normalize_datetime(value, timezone)
    bound = to_datetime(canonical.value, timezone)
    if bound is not None and end_of_day and canonical.is_all_day:
        bound += timedelta(days=1)
    return bound


def build_event_body(
    summary: Optional[str] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    timezone: str = "UTC",
    description: Optional[str] = None,
    location: Optional[str] = None,
    attendees: Optional[List[str]] = None,
    color: Optional[str] = None,
    reminders: Optional[List[Any]] = None,
    recurrence: Optional[List[str]] = None,
    transparency: Optional[str] = None,
    visibility: Optional[str] = None,
    event_id: Optional[str] = None,
    guests_can_invite_others: Optional[bool] = None,
    guests_can_modify: Optional[bool] = None,
    guests_can_see_other_guests: Optional[bool] = None,
    anyone_can_add_self: Optional[bool] = None,
    conference_data: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Build a Calendar API event body from tool arguments.

    Only the arguments that were supplied end up in the body, so the same
    function serves both insert and patch requests. Start and end are
    normalized first, so natural-language times are accepted.

    Returns:
        Dict[str, Any]: The event resource.
    """
    body: Dict[str, Any] = {}

    if event_id:
        validate_event_id(event_id)
        body["id"] = event_id
    if summary is not None:
        body["summary"] = summary
    if description is not None:
        body["description"] = description
    if location is not None:
        body["location"] = location
    if start:
        body["start"] = build_time_object(normalize_datetime(start, timezone).value, timezone)
    if end:
        body["end"] = build_time_object(normalize_datetime(end, timezone).value, timezone)
    if attendees is not None:
        body["attendees"] = [{"email": email} for email in attendees]
    if color:
        color_id = get_color_id_from_name(color)
        if color_id is None:
            raise ValueError(f"Unknown color '{color}'")
        body["colorId"] = color_id
    if reminders is not None:
        body["reminders"] = {"useDefault": False, "overrides": parse_reminders(reminders)}
    if recurrence:
        body["recurrence"] = list(recurrence)
    if transparency:
        body["transparency"] = transparency
    if visibility:
        body["visibility"] = visibility

    guest_flags = {
        "guestsCanInviteOthers": guests_can_invite_others,
        "guestsCanModify": guests_can_modify,
        "guestsCanSeeOtherGuests": guests_can_see_other_guests,
        "anyoneCanAddSelf": anyone_can_add_self,
    }
    body.update({key: value for key, value in guest_flags.items() if value is not None})
    if conference_data is not None:
        body["conferenceData"] = conference_data

    return body


def format_event(event: Dict[str, Any], calendar_id: str) -> Dict[str, Any]:
    """
    Shape a Calendar API event resource for tool output.

    Args:
        event (Dict[str, Any]): The API resource.
        calendar_id (str): The calendar it came from.

    Returns:
        Dict[str, Any]: Structured event with a direct event link.
    """
    start = event.get("start", {})
    end = event.get("end", {})
    is_all_day = "date" in start

    return {
        "id": event.get("id", ""),
        "calendar_id": calendar_id,
        "summary": event.get("summary", "Untitled"),
        "description": event.get("description", ""),
        "location": event.get("location", ""),
        "start": start.get("date") if is_all_day else start.get("dateTime", ""),
        "end": end.get("date") if is_all_day else end.get("dateTime", ""),
        "time_zone": start.get("timeZone", ""),
        "is_all_day": is_all_day,
        "status": event.get("status", ""),
        "color_id": event.get("colorId"),
        "attendees": [
            {
                "email": attendee.get("email", ""),
                "response_status": attendee.get("responseStatus", "needsAction"),
            }
            for attendee in event.get("attendees", [])
        ],
        "recurrence": event.get("recurrence", []),
        "event_link": event.get("htmlLink", ""),
        "meet_link": event.get("hangoutLink", ""),
    }


def format_match(match: MatchResult) -> Dict[str, Any]:
    """Shape a conflict or duplicate match for tool output."""
    existing = match.existing_event
    formatted = {
        "event_id": existing.id,
        "calendar_id": existing.calendar_id,
        "summary": existing.title or "Untitled",
        "start": existing.start,
        "end": existing.end,
        "is_all_day": existing.is_all_day,
        "event_link": existing.url or "",
    }
    if match.kind == "conflict":
        formatted["overlap_minutes"] = round(match.overlap_minutes)
    else:
        formatted["similarity"] = round(match.similarity * 100)
        formatted["suggestion"] = match.suggestion
    return formatted


def build_warnings(report: DetectionReport) -> List[str]:
    """
    Turn a detection report into short, non-fatal warning messages.

    Returns:
        List[str]: One message per conflict and per duplicate.
    """
    warnings = []
    for match in report.conflicts:
        warnings.append(
            f"Overlaps with \"{match.existing_event.title or 'Untitled'}\" "
            f"({match.existing_event.start} - {match.existing_event.end}) "
            f"on calendar {match.existing_event.calendar_id}"
        )
    for match in report.duplicates:
        warnings.append(match.suggestion or f"Possible duplicate of \"{match.existing_event.title}\"")
    return warnings
