"""Custom exceptions for the Calendar MCP server."""

from typing import Any, Optional


class CalendarMCPError(Exception):
    """Base exception for Calendar MCP errors."""

    pass


class AuthenticationError(CalendarMCPError):
    """Raised when a tool call cannot be authenticated for the given user and provider."""

    def __init__(self, message: str, requires_auth: bool = False) -> None:
        super().__init__(message)
        self.requires_auth = requires_auth


class ValidationError(CalendarMCPError):
    """Raised when a candidate event is malformed (e.g. end before start)."""

    pass


class DetectionUnavailable(CalendarMCPError):
    """Raised when none of the target calendars could be queried."""

    def __init__(self, message: str, failed_calendars: Optional[list] = None) -> None:
        super().__init__(message)
        self.failed_calendars = failed_calendars or []


class BlockedDuplicate(CalendarMCPError):
    """
    Raised when event creation is refused because a near-identical event exists.

    This is the only detection outcome meant to reach an end user verbatim.
    """

    def __init__(self, match: Any) -> None:
        self.match = match
        percentage = round(match.similarity * 100)
        super().__init__(
            f"Duplicate event detected ({percentage}% similar). "
            f"Event \"{match.existing_event.title}\" already exists. "
            f"To create anyway, set allow_duplicates to true."
        )
