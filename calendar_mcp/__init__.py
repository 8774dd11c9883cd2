"""
Calendar MCP - Model Context Protocol server for Google Calendar.

Exposes calendar tools to MCP clients on behalf of many users, each
identified by user_id and provider.

Features:
- Calendar listing, colors and current time
- Event listing, search and retrieval across calendars
- Event creation with conflict & duplicate detection
- Event updates with conflict warnings, and deletion
- Free/busy queries
- Natural-language times ("tomorrow 3pm", "Friday")

Example:
    from calendar_mcp.mcp.tools import setup_tools
    from calendar_mcp.auth.token_fetcher import get_authenticated_credentials
    from calendar_mcp.utils.services import get_calendar_service
"""

__version__ = "1.0.0"
__author__ = "Calendar MCP Contributors"

# Re-export key types for convenient access
from calendar_mcp.types import (
    # Common types
    ErrorResponse,

    # Calendar types
    CalendarInfo,
    ListCalendarsResponse,
    ListColorsResponse,
    CurrentTimeResponse,

    # Event types
    EventAttendee,
    EventInfo,
    ListEventsResponse,
    GetEventResponse,

    # Conflict detection types
    ConflictInfo,
    DuplicateInfo,
    CreateEventResponse,
    BlockedDuplicateResponse,
    UpdateEventResponse,
    DeleteEventResponse,

    # Free/busy types
    BusyPeriod,
    CalendarFreeBusy,
    FreeBusyResponse,
)

__all__ = [
    "__version__",
    "ErrorResponse",
    "CalendarInfo",
    "ListCalendarsResponse",
    "ListColorsResponse",
    "CurrentTimeResponse",
    "EventAttendee",
    "EventInfo",
    "ListEventsResponse",
    "GetEventResponse",
    "ConflictInfo",
    "DuplicateInfo",
    "CreateEventResponse",
    "BlockedDuplicateResponse",
    "UpdateEventResponse",
    "DeleteEventResponse",
    "BusyPeriod",
    "CalendarFreeBusy",
    "FreeBusyResponse",
]
