"""
Event Tools Module

Handles event operations: list, search, get, create, update and delete.
Creation and rescheduling run the conflict & duplicate detector first.
"""

import json
from datetime import datetime
from typing import Dict, Any, List, Literal, Optional, Tuple, Union

from mcp.server.fastmcp import FastMCP
from googleapiclient.discovery import Resource
from googleapiclient.errors import HttpError

from calendar_mcp.exceptions import (
    AuthenticationError,
    BlockedDuplicate,
    DetectionUnavailable,
    ValidationError,
)
from calendar_mcp.utils.logger import get_logger
from calendar_mcp.utils.services import get_calendar_service
from calendar_mcp.auth.token_fetcher import get_authenticated_credentials
from calendar_mcp.calendar.datetime_normalizer import to_datetime
from calendar_mcp.calendar.event_source import GoogleCalendarEventSource
from calendar_mcp.calendar.processor import (
    add_self_attendee,
    build_conference_data,
    build_event_body,
    build_warnings,
    format_event,
    format_match,
    get_primary_email,
    parse_time_bound,
    resolve_calendar_ids,
    resolve_timezone,
)
from calendar_mcp.conflict import (
    CandidateEvent,
    ConflictDetector,
    DetectionOptions,
    enforce_blocking_policy,
    load_detection_config,
)

logger = get_logger(__name__)

SendUpdates = Literal["all", "externalOnly", "none"]

# Upper bound on calendars queried by one list or search call
MAX_CALENDARS = 50


def _http_status(error: HttpError) -> Optional[int]:
    return getattr(error.resp, "status", None)


def _parse_calendar_ids(calendar_id: Union[str, List[str]]) -> List[str]:
    """
    Accept one calendar, a list, or a JSON array string such as '["Work", "Personal"]'.

    Raises:
        ValueError: On an empty entry, a repeated entry or more than MAX_CALENDARS entries.
    """
    if isinstance(calendar_id, str):
        text = calendar_id.strip()
        if text.startswith("["):
            try:
                parsed = json.loads(text)
            except json.JSONDecodeError:
                raise ValueError("calendar_id is not a valid JSON array")
            if not isinstance(parsed, list) or not all(isinstance(c, str) for c in parsed):
                raise ValueError("calendar_id JSON array must contain only strings")
            entries = parsed
        else:
            entries = [text]
    else:
        entries = list(calendar_id)

    entries = [entry.strip() for entry in entries]
    if not entries or not all(entries):
        raise ValueError("At least one calendar_id is required")
    if len(entries) > MAX_CALENDARS:
        raise ValueError(f"Maximum {MAX_CALENDARS} calendars allowed per request")
    if len(set(entries)) != len(entries):
        raise ValueError("Duplicate calendar IDs are not allowed")
    return entries


def _query_events(
    service: Resource,
    calendar_ids: List[str],
    timezone: str,
    time_min: Optional[datetime],
    time_max: Optional[datetime],
    max_results: int,
    query: Optional[str] = None
) -> Tuple[List[Dict[str, Any]], List[str]]:
    """
    List events from several calendars and merge them by start time.

    A calendar that errors is skipped and reported in the second element.
    """
    events: List[Dict[str, Any]] = []
    failed: List[str] = []

    for cal in calendar_ids:
        params: Dict[str, Any] = {
            "calendarId": cal,
            "singleEvents": True,
            "orderBy": "startTime",
            "maxResults": max_results,
            "timeZone": timezone,
        }
        if time_min:
            params["timeMin"] = time_min.isoformat()
        if time_max:
            params["timeMax"] = time_max.isoformat()
        if query:
            params["q"] = query

        try:
            result = service.events().list(**params).execute()
        except HttpError as e:
            logger.warning(f"Failed to list events for calendar {cal}: {e}")
            failed.append(cal)
            continue

        for item in result.get("items", []):
            if item.get("status") == "cancelled":
                continue
            events.append(format_event(item, cal))

    def sort_key(event: Dict[str, Any]) -> tuple:
        start = to_datetime(event["start"], timezone)
        # Unparseable starts go last
        return (start is None, start.timestamp() if start else 0.0, event["calendar_id"], event["id"])

    events.sort(key=sort_key)
    return events, failed


def _list_response(
    service: Resource,
    calendar_id: Union[str, List[str]],
    time_min: Optional[str],
    time_max: Optional[str],
    time_zone: Optional[str],
    max_results: int,
    query: Optional[str] = None
) -> Dict[str, Any]:
    if max_results < 1:
        return {"success": False, "error": "max_results must be at least 1"}

    calendar_ids = resolve_calendar_ids(service, _parse_calendar_ids(calendar_id))

    timezone = resolve_timezone(service, calendar_ids[0], time_zone)

    lower = upper = None
    if time_min:
        lower = parse_time_bound(time_min, timezone)
        if lower is None:
            return {"success": False, "error": f"Could not parse time_min: {time_min}"}
    if time_max:
        upper = parse_time_bound(time_max, timezone, end_of_day=True)
        if upper is None:
            return {"success": False, "error": f"Could not parse time_max: {time_max}"}
    if lower and upper and upper < lower:
        return {"success": False, "error": "time_max must not be before time_min"}

    events, failed = _query_events(service, calendar_ids, timezone, lower, upper, max_results, query)

    if len(failed) == len(calendar_ids):
        return {"success": False, "error": "Failed to list events: Calendar API error"}

    response: Dict[str, Any] = {
        "success": True,
        "count": len(events),
        "time_zone": timezone,
        "events": events,
        "calendars_queried": [cal for cal in calendar_ids if cal not in failed],
    }
    if failed:
        response["failed_calendars"] = failed
    return response


def setup_event_tools(mcp: FastMCP) -> None:
    """Set up event tools on the FastMCP application."""

    @mcp.tool()
    def list_events(
        user_id: str,
        provider: Literal["google", "microsoft"],
        calendar_id: Union[str, List[str]] = "primary",
        time_min: Optional[str] = None,
        time_max: Optional[str] = None,
        time_zone: Optional[str] = None,
        max_results: int = 50
    ) -> Dict[str, Any]:
        """
        List events from one or more calendars.

        Recurring events are expanded into single instances. Results from all
        calendars are merged and sorted by start time.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            calendar_id (str or List[str]): Calendar ID or name ("Work"), a list of them, or a JSON
                array string. At most 50, no repeats. Defaults to "primary".
            time_min (str, optional): Lower bound, ISO format or natural language ("today", "monday 9am")
            time_max (str, optional): Upper bound; a bare date includes that whole day
            time_zone (str, optional): IANA timezone for the query and results.
                                       Defaults to the first calendar's timezone.
            max_results (int): Maximum number of events per calendar (default: 50)

        Returns:
            Dict[str, Any]: Events with IDs, times and links. Calendars that
                could not be read are listed under "failed_calendars".

        Example usage:
            list_events(user_id="u1", provider="google", calendar_id=["primary", "work@example.com"],
                        time_min="today", time_max="friday")
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            return _list_response(service, calendar_id, time_min, time_max, time_zone, max_results)
        except ValueError as e:
            return {"success": False, "error": str(e)}
        except Exception as e:
            logger.error(f"Failed to list events: {e}")
            return {"success": False, "error": "Failed to list events"}

    @mcp.tool()
    def search_events(
        user_id: str,
        provider: Literal["google", "microsoft"],
        query: str,
        calendar_id: Union[str, List[str]] = "primary",
        time_min: Optional[str] = None,
        time_max: Optional[str] = None,
        time_zone: Optional[str] = None,
        max_results: int = 50
    ) -> Dict[str, Any]:
        """
        Search events by free text across one or more calendars.

        Matches summary, description, location, attendee names and emails.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            query (str): Free-text search terms
            calendar_id (str or List[str]): Calendar ID or name ("Work"), a list of them, or a JSON
                array string. At most 50, no repeats. Defaults to "primary".
            time_min (str, optional): Lower bound
            time_max (str, optional): Upper bound
            time_zone (str, optional): IANA timezone for the query and results
            max_results (int): Maximum number of events per calendar (default: 50)

        Returns:
            Dict[str, Any]: Matching events sorted by start time
        """
        if not query or not query.strip():
            return {"success": False, "error": "query must not be empty"}

        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            response = _list_response(
                service, calendar_id, time_min, time_max, time_zone, max_results, query=query.strip()
            )
            if response.get("success"):
                response["query"] = query.strip()
            return response
        except ValueError as e:
            return {"success": False, "error": str(e)}
        except Exception as e:
            logger.error(f"Failed to search events: {e}")
            return {"success": False, "error": "Failed to search events"}

    @mcp.tool()
    def get_event(
        user_id: str,
        provider: Literal["google", "microsoft"],
        event_id: str,
        calendar_id: str = "primary"
    ) -> Dict[str, Any]:
        """
        Get a single event by ID.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            event_id (str): The ID of the event
            calendar_id (str): The calendar holding the event. Defaults to "primary".

        Returns:
            Dict[str, Any]: The event details
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            event = service.events().get(calendarId=calendar_id, eventId=event_id).execute()
            return {"success": True, "event": format_event(event, calendar_id)}

        except HttpError as e:
            if _http_status(e) in (404, 410):
                return {"success": False, "error": f"Event not found: {event_id}"}
            logger.error(f"Google Calendar API error getting event: {e}")
            return {"success": False, "error": "Failed to get event: Calendar API error"}
        except Exception as e:
            logger.error(f"Failed to get event: {e}")
            return {"success": False, "error": "Failed to get event"}

    @mcp.tool()
    def create_event(
        user_id: str,
        provider: Literal["google", "microsoft"],
        summary: str,
        start: str,
        end: str,
        calendar_id: str = "primary",
        description: Optional[str] = None,
        location: Optional[str] = None,
        attendees: Optional[List[str]] = None,
        time_zone: Optional[str] = None,
        color: Optional[str] = None,
        reminders: Optional[List] = None,
        recurrence: Optional[List[str]] = None,
        transparency: Optional[Literal["opaque", "transparent"]] = None,
        visibility: Optional[Literal["default", "public", "private", "confidential"]] = None,
        event_id: Optional[str] = None,
        send_updates: Optional[SendUpdates] = None,
        guests_can_invite_others: Optional[bool] = None,
        guests_can_modify: Optional[bool] = None,
        guests_can_see_other_guests: Optional[bool] = None,
        anyone_can_add_self: Optional[bool] = None,
        add_meet_link: bool = True,
        conference_data: Optional[Dict[str, Any]] = None,
        calendars_to_check: Optional[List[str]] = None,
        duplicate_similarity_threshold: Optional[float] = None,
        allow_duplicates: bool = False
    ) -> Dict[str, Any]:
        """
        Create a new calendar event, checking for conflicts and duplicates first.

        Overlapping events are reported as conflicts and never stop creation.
        If an existing event is a near-certain duplicate (95% or more similar),
        the event is NOT created unless allow_duplicates is true.

        The authenticated user is always added as an attendee, and a Google Meet
        link is created unless add_meet_link is false or conference_data already
        carries a conferenceId.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            summary (str): The title of the event
            start (str): Start time, ISO format (2024-01-15T09:00:00) or natural language ("tomorrow 2pm")
            end (str): End time in the same formats. A bare date makes an all-day event.
            calendar_id (str): Target calendar. Defaults to "primary".
            description (str, optional): Notes for the event
            location (str, optional): Location of the event
            attendees (List[str], optional): Email addresses of attendees
            time_zone (str, optional): IANA timezone. Defaults to the calendar's timezone.
            color (str, optional): Color name ("tomato", "red") or ID ("1"-"11")
            reminders (List, optional): ["30 minutes", "1 day before by email"] or
                                        [{"method": "popup", "minutes": 30}]
            recurrence (List[str], optional): RRULE lines, e.g. ["RRULE:FREQ=WEEKLY;COUNT=4"]
            transparency (str, optional): "opaque" (busy) or "transparent" (free)
            visibility (str, optional): "default", "public", "private" or "confidential"
            event_id (str, optional): Custom ID, 5-1024 characters of a-v and 0-9
            send_updates (str, optional): "all", "externalOnly" or "none"
            guests_can_invite_others (bool, optional): Let attendees invite others
            guests_can_modify (bool, optional): Let attendees edit the event
            guests_can_see_other_guests (bool, optional): Let attendees see the guest list
            anyone_can_add_self (bool, optional): Let anyone add themselves
            add_meet_link (bool): Request a new Google Meet link (default: true)
            conference_data (dict, optional): Existing conference data; kept as is when it has a conferenceId
            calendars_to_check (List[str], optional): Calendars to scan. Defaults to the target calendar.
            duplicate_similarity_threshold (float, optional): 0-1, similarity at which an
                                        existing event is reported as a duplicate (default 0.7)
            allow_duplicates (bool): Create even when a near-identical event exists

        Returns:
            Dict[str, Any]: The created event plus "conflicts", "duplicates" and "warnings".
                When creation is refused, "error" explains why and "duplicate"
                describes the existing event.

        Example usage:
            create_event(user_id="u1", provider="google", summary="Team Sync",
                         start="tomorrow 10am", end="tomorrow 11am",
                         calendars_to_check=["primary", "work@example.com"])
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            timezone = resolve_timezone(service, calendar_id, time_zone)
            conference = build_conference_data(conference_data, event_id) if add_meet_link else conference_data

            event_body = build_event_body(
                summary=summary,
                start=start,
                end=end,
                timezone=timezone,
                description=description,
                location=location,
                attendees=attendees,
                color=color,
                reminders=reminders,
                recurrence=recurrence,
                transparency=transparency,
                visibility=visibility,
                event_id=event_id,
                guests_can_invite_others=guests_can_invite_others,
                guests_can_modify=guests_can_modify,
                guests_can_see_other_guests=guests_can_see_other_guests,
                anyone_can_add_self=anyone_can_add_self,
                conference_data=conference,
            )

            attendee_list = add_self_attendee(event_body.get("attendees", []), get_primary_email(service))
            if attendee_list:
                event_body["attendees"] = attendee_list

            candidate = CandidateEvent(
                title=summary,
                start=start,
                end=end,
                calendar_id=calendar_id,
                timezone=timezone,
                description=description,
                location=location,
                attendees=attendees or [],
                calendars_to_check=calendars_to_check,
            )
            options = DetectionOptions(
                calendars_to_check=calendars_to_check,
                duplicate_similarity_threshold=duplicate_similarity_threshold,
            )
            detector = ConflictDetector(
                GoogleCalendarEventSource(service, credentials, timezone),
                load_detection_config(),
            )

            report = None
            warnings: List[str] = []
            try:
                report = detector.detect(candidate, options)
            except DetectionUnavailable as e:
                if not allow_duplicates:
                    logger.warning(f"Refusing to create event, detection unavailable: {e.failed_calendars}")
                    return {
                        "success": False,
                        "error": "Could not check the calendar for conflicts or duplicates. "
                                 "Try again later, or set allow_duplicates to true to create anyway.",
                    }
                warnings.append("Conflict and duplicate checks were skipped: calendars unavailable")

            if report is not None:
                enforce_blocking_policy(report, allow_duplicates)
                warnings.extend(build_warnings(report))

            insert_params: Dict[str, Any] = {"calendarId": calendar_id, "body": event_body}
            if send_updates:
                insert_params["sendUpdates"] = send_updates
            if "conferenceData" in event_body:
                insert_params["conferenceDataVersion"] = 1
            created_event = service.events().insert(**insert_params).execute()

            logger.info(f"Created event {created_event.get('id')} on calendar {calendar_id}")

            return {
                "success": True,
                "message": "Event created successfully.",
                "event": format_event(created_event, calendar_id),
                "conflicts": [format_match(m) for m in report.conflicts] if report else [],
                "duplicates": [format_match(m) for m in report.duplicates] if report else [],
                "warnings": warnings,
            }

        except BlockedDuplicate as e:
            logger.info(f"Blocked duplicate of event {e.match.existing_event.id}")
            return {"success": False, "error": str(e), "duplicate": format_match(e.match)}
        except ValidationError as e:
            return {"success": False, "error": str(e)}
        except HttpError as e:
            if _http_status(e) == 409 and event_id:
                return {
                    "success": False,
                    "error": f"Event ID already exists: {event_id}. Choose a different ID or omit it.",
                }
            logger.error(f"Google Calendar API error creating event: {e}")
            return {"success": False, "error": "Failed to create event: Calendar API error"}
        except ValueError as e:
            return {"success": False, "error": f"Invalid input: {e}"}
        except Exception as e:
            logger.error(f"Failed to create event: {e}")
            return {"success": False, "error": "Failed to create event"}

    @mcp.tool()
    def update_event(
        user_id: str,
        provider: Literal["google", "microsoft"],
        event_id: str,
        calendar_id: str = "primary",
        summary: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        description: Optional[str] = None,
        location: Optional[str] = None,
        attendees: Optional[List[str]] = None,
        time_zone: Optional[str] = None,
        color: Optional[str] = None,
        reminders: Optional[List] = None,
        recurrence: Optional[List[str]] = None,
        transparency: Optional[Literal["opaque", "transparent"]] = None,
        visibility: Optional[Literal["default", "public", "private", "confidential"]] = None,
        send_updates: Optional[SendUpdates] = None,
        guests_can_invite_others: Optional[bool] = None,
        guests_can_modify: Optional[bool] = None,
        guests_can_see_other_guests: Optional[bool] = None,
        anyone_can_add_self: Optional[bool] = None,
        check_conflicts: bool = True,
        calendars_to_check: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Update an existing event. Only the fields given are changed.

        When the time changes and check_conflicts is true, overlapping events
        are returned as warnings; they never stop the update.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            event_id (str): The ID of the event to update
            calendar_id (str): The calendar holding the event. Defaults to "primary".
            summary (str, optional): New title
            start (str, optional): New start time
            end (str, optional): New end time
            description (str, optional): New description
            location (str, optional): New location
            attendees (List[str], optional): Replacement attendee list
            time_zone (str, optional): IANA timezone for the new times
            color (str, optional): New color name or ID
            reminders (List, optional): Replacement reminders
            recurrence (List[str], optional): Replacement RRULE lines
            transparency (str, optional): "opaque" or "transparent"
            visibility (str, optional): "default", "public", "private" or "confidential"
            send_updates (str, optional): "all", "externalOnly" or "none"
            guests_can_invite_others, guests_can_modify, guests_can_see_other_guests,
            anyone_can_add_self (bool, optional): Guest permission flags to change
            check_conflicts (bool): Check the new time for overlaps (default: True)
            calendars_to_check (List[str], optional): Calendars to scan for overlaps

        Returns:
            Dict[str, Any]: The updated event, plus "conflicts" and "warnings" when checked
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)
            timezone = resolve_timezone(service, calendar_id, time_zone)

            patch_body = build_event_body(
                summary=summary,
                start=start,
                end=end,
                timezone=timezone,
                description=description,
                location=location,
                attendees=attendees,
                color=color,
                reminders=reminders,
                recurrence=recurrence,
                transparency=transparency,
                visibility=visibility,
                guests_can_invite_others=guests_can_invite_others,
                guests_can_modify=guests_can_modify,
                guests_can_see_other_guests=guests_can_see_other_guests,
                anyone_can_add_self=anyone_can_add_self,
            )
            if not patch_body:
                return {"success": False, "error": "No fields to update"}

            report = None
            warnings: List[str] = []
            if check_conflicts and (start or end):
                current = format_event(
                    service.events().get(calendarId=calendar_id, eventId=event_id).execute(),
                    calendar_id,
                )
                candidate = CandidateEvent(
                    title=summary if summary is not None else current["summary"],
                    start=start or current["start"],
                    end=end or current["end"],
                    calendar_id=calendar_id,
                    timezone=timezone,
                    location=location if location is not None else current["location"],
                    calendars_to_check=calendars_to_check,
                )
                detector = ConflictDetector(
                    GoogleCalendarEventSource(service, credentials, timezone),
                    load_detection_config(),
                )
                try:
                    report = detector.detect(candidate, DetectionOptions(
                        calendars_to_check=calendars_to_check,
                        check_duplicates=False,
                        exclude_event_id=event_id,
                    ))
                    warnings.extend(build_warnings(report))
                except DetectionUnavailable:
                    warnings.append("Conflict check was skipped: calendars unavailable")

            patch_params: Dict[str, Any] = {"calendarId": calendar_id, "eventId": event_id, "body": patch_body}
            if send_updates:
                patch_params["sendUpdates"] = send_updates
            updated_event = service.events().patch(**patch_params).execute()

            logger.info(f"Updated event {event_id} on calendar {calendar_id}")

            response: Dict[str, Any] = {
                "success": True,
                "message": "Event updated successfully.",
                "event": format_event(updated_event, calendar_id),
            }
            if check_conflicts and (start or end):
                response["conflicts"] = [format_match(m) for m in report.conflicts] if report else []
                response["warnings"] = warnings
            return response

        except ValidationError as e:
            return {"success": False, "error": str(e)}
        except HttpError as e:
            if _http_status(e) in (404, 410):
                return {"success": False, "error": f"Event not found: {event_id}"}
            logger.error(f"Google Calendar API error updating event: {e}")
            return {"success": False, "error": "Failed to update event: Calendar API error"}
        except ValueError as e:
            return {"success": False, "error": f"Invalid input: {e}"}
        except Exception as e:
            logger.error(f"Failed to update event: {e}")
            return {"success": False, "error": "Failed to update event"}

    @mcp.tool()
    def delete_event(
        user_id: str,
        provider: Literal["google", "microsoft"],
        event_id: str,
        calendar_id: str = "primary",
        send_updates: Optional[SendUpdates] = None
    ) -> Dict[str, Any]:
        """
        Delete an event.

        Args:
            user_id (str): User ID to identify which user's OAuth tokens to use
            provider (str): OAuth provider name ("google" or "microsoft")
            event_id (str): The ID of the event to delete
            calendar_id (str): The calendar holding the event. Defaults to "primary".
            send_updates (str, optional): "all", "externalOnly" or "none"

        Returns:
            Dict[str, Any]: Result of the operation
        """
        try:
            credentials = get_authenticated_credentials(user_id, provider)
        except AuthenticationError as e:
            return {"success": False, "error": str(e), "requires_auth": e.requires_auth}

        try:
            service = get_calendar_service(credentials)

            delete_params: Dict[str, Any] = {"calendarId": calendar_id, "eventId": event_id}
            if send_updates:
                delete_params["sendUpdates"] = send_updates
            service.events().delete(**delete_params).execute()

            logger.info(f"Deleted event {event_id} from calendar {calendar_id}")

            return {
                "success": True,
                "message": "Event deleted successfully.",
                "event_id": event_id
            }

        except HttpError as e:
            if _http_status(e) in (404, 410):
                return {"success": False, "error": f"Event not found or already deleted: {event_id}"}
            logger.error(f"Google Calendar API error deleting event: {e}")
            return {"success": False, "error": "Failed to delete event: Calendar API error"}
        except Exception as e:
            logger.error(f"Failed to delete event: {e}")
            return {"success": False, "error": "Failed to delete event"}
