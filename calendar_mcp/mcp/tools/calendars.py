"""
Calendar Tools Module

Handles calendar-level lookups: list calendars, list colors, current time.
"""

from datetime import datetime, timezone
from typing import Dict, Any, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from mcp.server.fastmcp import FastMCP
from googleapiclient.errors import HttpError

from calendar_mcp.exceptions import AuthenticationError
from calendar_mcp.utils.logger import get_logger
from calendar_mcp.utils.services import get_calendar_service
from calendar_mcp.auth.token_fetcher import get_authenticated_credentials
from calendar_mcp.calendar.processor import fetch_calendar_list, get_calendar_timezone

logger = get_logger(__name__)


def setup_calendar_tools(mcp: FastMCP) -> None:
    """Set up calendar lookup tools on the FastMCP application."""

    @mcp.tool()
    def list_calendars(user_id: str, provider: Literal["google", "microsoft"]) -> Dict[str, Any]:
        """
        List all calendars accessible to the user.

        Returns the primary calendar plus shared and subscribed calendars.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")

        Returns:
            Dict[str, Any]: List of calendars with IDs, access roles and timezones
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)

            calendars = fetch_calendar_list(service)

            formatted_calendars = []
            for cal in calendars:
                formatted_calendars.append({
                    "id": cal.get("id"),
                    "summary": cal.get("summaryOverride") or cal.get("summary", ""),
                    "description": cal.get("description", ""),
                    "primary": cal.get("primary", False),
                    "access_role": cal.get("accessRole", ""),
                    "time_zone": cal.get("timeZone", ""),
                    "background_color": cal.get("backgroundColor", ""),
                    "selected": cal.get("selected", True),
                })

            return {
                "success": True,
                "count": len(formatted_calendars),
                "calendars": formatted_calendars
            }

        except HttpError as e:
            logger.error(f"Google Calendar API error listing calendars: {e}")
            return {"success": False, "error": "Failed to list calendars: Calendar API error"}
        except Exception as e:
            logger.error(f"Failed to list calendars: {e}")
            return {"success": False, "error": "Failed to list calendars"}

    @mcp.tool()
    def list_colors(user_id: str, provider: Literal["google", "microsoft"]) -> Dict[str, Any]:
        """
        List available color IDs and their meanings for calendar events.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")

        Returns:
            Dict[str, Any]: Event and calendar color palettes keyed by color ID
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            colors = service.colors().get().execute()

            return {
                "success": True,
                "event_colors": colors.get("event", {}),
                "calendar_colors": colors.get("calendar", {}),
            }

        except Exception as e:
            logger.error(f"Failed to list colors: {e}")
            return {"success": False, "error": "Failed to list colors"}

    @mcp.tool()
    def get_current_time(
        user_id: str,
        provider: Literal["google", "microsoft"],
        time_zone: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Get the current time in the primary calendar's timezone, or in a requested timezone.

        Use this before creating events with relative dates so that "today" and
        "tomorrow" mean the same thing to you and to the calendar.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            time_zone (str, optional): IANA timezone (e.g. "America/Los_Angeles").
                                       Defaults to the primary calendar's timezone.

        Returns:
            Dict[str, Any]: Current local time, UTC time, date and day of week
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            if not time_zone:
                service = get_calendar_service(credentials)
                time_zone = get_calendar_timezone(service, "primary")

            try:
                zone = ZoneInfo(time_zone)
            except (ZoneInfoNotFoundError, ValueError):
                return {"success": False, "error": f"Invalid timezone: {time_zone}"}

            now_utc = datetime.now(timezone.utc)
            now_local = now_utc.astimezone(zone)

            return {
                "success": True,
                "time_zone": time_zone,
                "current_time": now_local.isoformat(timespec="seconds"),
                "utc_time": now_utc.isoformat(timespec="seconds"),
                "date": now_local.date().isoformat(),
                "day_of_week": now_local.strftime("%A"),
            }

        except Exception as e:
            logger.error(f"Failed to get current time: {e}")
            return {"success": False, "error": "Failed to get current time"}
