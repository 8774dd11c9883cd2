"""
Calendar Event Source Module

Reads existing events from Google Calendar for the conflict detector.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import httplib2
import google_auth_httplib2
from google.oauth2.credentials import Credentials
from googleapiclient.discovery import Resource

from calendar_mcp.conflict.models import ExistingEvent
from calendar_mcp.utils.logger import get_logger

logger = get_logger(__name__)

# Calendar API maximum page size for events().list()
PAGE_SIZE = 250


def to_existing_event(item: Dict[str, Any], calendar_id: str) -> ExistingEvent:
    """
    Convert a Calendar API event resource into an ExistingEvent.

    Args:
        item (Dict[str, Any]): Event resource from events().list() or events().get().
        calendar_id (str): The calendar the event was read from.

    Returns:
        ExistingEvent: The plain-value event.
    """
    start = item.get("start", {})
    end = item.get("end", {})
    is_all_day = "date" in start

    return ExistingEvent(
        id=item.get("id", ""),
        title=item.get("summary", ""),
        start=start.get("date") if is_all_day else start.get("dateTime", ""),
        end=end.get("date") if is_all_day else end.get("dateTime", ""),
        calendar_id=calendar_id,
        is_all_day=is_all_day,
        location=item.get("location"),
        url=item.get("htmlLink"),
    )


class GoogleCalendarEventSource:
    """
    Fetches events that intersect a time window from one Google calendar at a time.

    The detector calls fetch_events from several threads at once. httplib2 is not
    thread-safe, so when credentials are given each request runs on its own
    authorized Http object instead of the one bound to the shared service.
    """

    def __init__(
        self,
        service: Resource,
        credentials: Optional[Credentials] = None,
        timezone: str = "UTC"
    ) -> None:
        self.service = service
        self.credentials = credentials
        self.timezone = timezone

    def _execute(self, request: Any) -> Dict[str, Any]:
        if self.credentials is None:
            return request.execute()
        http = google_auth_httplib2.AuthorizedHttp(self.credentials, http=httplib2.Http())
        return request.execute(http=http)

    def fetch_events(self, calendar_id: str, time_min: datetime, time_max: datetime) -> List[ExistingEvent]:
        """
        List the events on a calendar that intersect [time_min, time_max].

        Errors from the API propagate to the caller; the detector decides what a
        failed calendar means.

        Args:
            calendar_id (str): Calendar to query.
            time_min (datetime): Aware lower bound.
            time_max (datetime): Aware upper bound.

        Returns:
            List[ExistingEvent]: Events ordered by start time, cancelled events excluded.
        """
        events: List[ExistingEvent] = []
        page_token = None

        while True:
            params = {
                "calendarId": calendar_id,
                "timeMin": time_min.isoformat(),
                "timeMax": time_max.isoformat(),
                "singleEvents": True,
                "orderBy": "startTime",
                "maxResults": PAGE_SIZE,
                "timeZone": self.timezone,
            }
            if page_token:
                params["pageToken"] = page_token

            result = self._execute(self.service.events().list(**params))

            for item in result.get("items", []):
                if item.get("status") == "cancelled":
                    continue
                events.append(to_existing_event(item, calendar_id))

            page_token = result.get("nextPageToken")
            if not page_token:
                break

        logger.debug(f"Fetched {len(events)} events from calendar {calendar_id}")
        return events
