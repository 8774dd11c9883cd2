"""
Free/Busy Tools Module

Handles availability queries across calendars.
"""

from typing import Dict, Any, List, Literal, Optional

from dateutil.relativedelta import relativedelta
from mcp.server.fastmcp import FastMCP
from googleapiclient.errors import HttpError

from calendar_mcp.exceptions import AuthenticationError
from calendar_mcp.utils.logger import get_logger
from calendar_mcp.utils.services import get_calendar_service
from calendar_mcp.auth.token_fetcher import get_authenticated_credentials
from calendar_mcp.calendar.processor import parse_time_bound, resolve_timezone

logger = get_logger(__name__)

# Longest range the freebusy endpoint accepts
MAX_FREEBUSY_RANGE = relativedelta(months=3)

# The API rejects more than 50 calendars per query
MAX_FREEBUSY_CALENDARS = 50


def setup_freebusy_tools(mcp: FastMCP) -> None:
    """Set up free/busy tools on the FastMCP application."""

    @mcp.tool()
    def get_freebusy(
        user_id: str,
        provider: Literal["google", "microsoft"],
        calendars: List[str],
        time_min: str,
        time_max: str,
        time_zone: Optional[str] = None,
        group_expansion_max: Optional[int] = None,
        calendar_expansion_max: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Query busy periods for one or more calendars.

        Use this to find when people are available. The range may span at most 3 months.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            calendars (List[str]): Calendar IDs or email addresses to query
            time_min (str): Start of the range, ISO format or natural language ("today", "monday 9am")
            time_max (str): End of the range; a bare date includes that whole day
            time_zone (str, optional): IANA timezone for the response.
                                       Defaults to the primary calendar's timezone.
            group_expansion_max (int, optional): Maximum calendars expanded per group
            calendar_expansion_max (int, optional): Maximum calendars returned per query

        Returns:
            Dict[str, Any]: Busy periods keyed by calendar ID. A calendar that
                could not be read carries an "errors" list instead.
        """
        if not calendars:
            return {"success": False, "error": "At least one calendar is required"}
        if len(calendars) > MAX_FREEBUSY_CALENDARS:
            return {"success": False, "error": f"At most {MAX_FREEBUSY_CALENDARS} calendars can be queried at once"}

        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            timezone = resolve_timezone(service, "primary", time_zone)

            lower = parse_time_bound(time_min, timezone)
            if lower is None:
                return {"success": False, "error": f"Could not parse time_min: {time_min}"}
            upper = parse_time_bound(time_max, timezone, end_of_day=True)
            if upper is None:
                return {"success": False, "error": f"Could not parse time_max: {time_max}"}

            if upper <= lower:
                return {"success": False, "error": "time_max must be after time_min"}
            if upper > lower + MAX_FREEBUSY_RANGE:
                return {"success": False, "error": "The time range cannot exceed 3 months"}

            body: Dict[str, Any] = {
                "timeMin": lower.isoformat(),
                "timeMax": upper.isoformat(),
                "timeZone": timezone,
                "items": [{"id": cal} for cal in calendars],
            }
            if group_expansion_max is not None:
                body["groupExpansionMax"] = group_expansion_max
            if calendar_expansion_max is not None:
                body["calendarExpansionMax"] = calendar_expansion_max

            result = service.freebusy().query(body=body).execute()

            formatted = {}
            for cal_id, info in result.get("calendars", {}).items():
                entry: Dict[str, Any] = {
                    "busy": [
                        {"start": period.get("start", ""), "end": period.get("end", "")}
                        for period in info.get("busy", [])
                    ]
                }
                if info.get("errors"):
                    entry["errors"] = info["errors"]
                formatted[cal_id] = entry

            return {
                "success": True,
                "time_min": body["timeMin"],
                "time_max": body["timeMax"],
                "time_zone": timezone,
                "calendars": formatted,
            }

        except HttpError as e:
            logger.error(f"Google Calendar API error querying free/busy: {e}")
            return {"success": False, "error": "Failed to query free/busy: Calendar API error"}
        except ValueError as e:
            return {"success": False, "error": str(e)}
        except Exception as e:
            logger.error(f"Failed to query free/busy: {e}")
            return {"success": False, "error": "Failed to query free/busy"}
