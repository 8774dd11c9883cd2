"""
Calendar MCP Type Definitions

This module provides TypedDict definitions for the tool return types,
enabling better IDE support and type checking.
"""

from typing import TypedDict, List, Optional, Dict, Any, NotRequired


# =============================================================================
# Common Types
# =============================================================================

class ErrorResponse(TypedDict):
    """Standard error response from tools."""
    success: bool
    error: str
    requires_auth: NotRequired[bool]


# =============================================================================
# Calendar Types
# =============================================================================

class CalendarInfo(TypedDict):
    """A calendar from the user's calendar list."""
    id: str
    summary: str
    description: str
    primary: bool
    access_role: str
    time_zone: str
    background_color: str
    selected: bool


class ListCalendarsResponse(TypedDict):
    """Response from list_calendars."""
    success: bool
    count: int
    calendars: List[CalendarInfo]


class ListColorsResponse(TypedDict):
    """Response from list_colors."""
    success: bool
    event_colors: Dict[str, Dict[str, str]]
    calendar_colors: Dict[str, Dict[str, str]]


class CurrentTimeResponse(TypedDict):
    """Response from get_current_time."""
    success: bool
    time_zone: str
    current_time: str
    utc_time: str
    date: str
    day_of_week: str


# =============================================================================
# Event Types
# =============================================================================

class EventAttendee(TypedDict):
    """Calendar event attendee."""
    email: str
    response_status: str


class EventInfo(TypedDict):
    """Structured calendar event."""
    id: str
    calendar_id: str
    summary: str
    description: str
    location: str
    start: str
    end: str
    time_zone: str
    is_all_day: bool
    status: str
    color_id: Optional[str]
    attendees: List[EventAttendee]
    recurrence: List[str]
    event_link: str
    meet_link: str


class ListEventsResponse(TypedDict):
    """Response from list_events and search_events."""
    success: bool
    count: int
    events: List[EventInfo]
    calendars_queried: List[str]
    failed_calendars: NotRequired[List[str]]


class GetEventResponse(TypedDict):
    """Response from get_event."""
    success: bool
    event: EventInfo


# =============================================================================
# Conflict Detection Types
# =============================================================================

class ConflictInfo(TypedDict):
    """An existing event overlapping the new or updated event."""
    event_id: str
    calendar_id: str
    summary: str
    start: str
    end: str
    is_all_day: bool
    event_link: str
    overlap_minutes: int


class DuplicateInfo(TypedDict):
    """An existing event that looks like the same real-world event."""
    event_id: str
    calendar_id: str
    summary: str
    start: str
    end: str
    is_all_day: bool
    event_link: str
    similarity: int
    suggestion: str


class CreateEventResponse(TypedDict):
    """Response from create_event."""
    success: bool
    message: str
    event: EventInfo
    conflicts: List[ConflictInfo]
    duplicates: List[DuplicateInfo]
    warnings: List[str]


class BlockedDuplicateResponse(TypedDict):
    """Response from create_event when creation was refused as a duplicate."""
    success: bool
    error: str
    duplicate: DuplicateInfo


class UpdateEventResponse(TypedDict):
    """Response from update_event."""
    success: bool
    message: str
    event: EventInfo
    conflicts: NotRequired[List[ConflictInfo]]
    warnings: NotRequired[List[str]]


class DeleteEventResponse(TypedDict):
    """Response from delete_event."""
    success: bool
    message: str
    event_id: str


# =============================================================================
# Free/Busy Types
# =============================================================================

class BusyPeriod(TypedDict):
    """A busy interval."""
    start: str
    end: str


class CalendarFreeBusy(TypedDict):
    """Free/busy information for one calendar."""
    busy: List[BusyPeriod]
    errors: NotRequired[List[Dict[str, Any]]]


class FreeBusyResponse(TypedDict):
    """Response from get_freebusy."""
    success: bool
    time_min: str
    time_max: str
    calendars: Dict[str, CalendarFreeBusy]
