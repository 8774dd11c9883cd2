"""
Tests for calendar/processor.py - request bodies and response shaping
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

import httplib2
from googleapiclient.errors import HttpError

from calendar_mcp.calendar.processor import (
    add_self_attendee,
    build_conference_data,
    build_event_body,
    build_warnings,
    fetch_calendar_list,
    format_event,
    format_match,
    get_calendar_timezone,
    get_color_id_from_name,
    get_primary_email,
    parse_reminder,
    parse_time_bound,
    resolve_calendar_ids,
    resolve_timezone,
    validate_event_id,
)
from calendar_mcp.conflict.models import DetectionReport, ExistingEvent, MatchResult


class TestColors:
    """Tests for get_color_id_from_name."""

    @pytest.mark.parametrize("name,expected", [
        ("tomato", "11"),
        ("Red", "11"),
        (" lavender ", "1"),
        ("dark green", "10"),
        ("7", "7"),
        ("12", None),
        ("chartreuse", None),
        (None, None),
    ])
    def test_lookup(self, name, expected):
        assert get_color_id_from_name(name) == expected


class TestEventIds:
    """Tests for validate_event_id."""

    @pytest.mark.parametrize("event_id", ["abcde", "0123456789", "v" * 1024])
    def test_valid(self, event_id):
        validate_event_id(event_id)

    @pytest.mark.parametrize("event_id", ["abcd", "ABCDE", "wxyz1", "abc-def", "v" * 1025])
    def test_invalid(self, event_id):
        with pytest.raises(ValueError):
            validate_event_id(event_id)


class TestReminders:
    """Tests for parse_reminder."""

    @pytest.mark.parametrize("reminder,expected", [
        ("30 minutes", {"method": "popup", "minutes": 30}),
        ("1 hour before", {"method": "popup", "minutes": 60}),
        ("1 day before by email", {"method": "email", "minutes": 1440}),
        ("2 weeks", {"method": "popup", "minutes": 20160}),
        ({"method": "email", "minutes": "15"}, {"method": "email", "minutes": 15}),
        ({"minutes": 5}, {"method": "popup", "minutes": 5}),
    ])
    def test_parse(self, reminder, expected):
        assert parse_reminder(reminder) == expected

    def test_unparseable(self):
        assert parse_reminder("whenever") is None
        assert parse_reminder({"method": "popup"}) is None


class TestTimezones:
    """Tests for timezone lookup."""

    def test_calendar_timezone(self):
        service = MagicMock()
        service.calendars.return_value.get.return_value.execute.return_value = {"timeZone": "Asia/Tokyo"}
        assert get_calendar_timezone(service, "primary") == "Asia/Tokyo"

    def test_calendar_timezone_falls_back_to_default(self):
        service = MagicMock()
        service.calendars.return_value.get.return_value.execute.side_effect = HttpError(
            httplib2.Response({"status": 404}), b"Not Found"
        )
        assert get_calendar_timezone(service, "gone") == "UTC"

    def test_requested_timezone_wins(self):
        service = MagicMock()
        assert resolve_timezone(service, "primary", "Europe/Paris") == "Europe/Paris"
        service.calendars.assert_not_called()

    def test_invalid_requested_timezone(self):
        with pytest.raises(ValueError, match="Invalid timezone"):
            resolve_timezone(MagicMock(), "primary", "Nowhere/Special")


class TestTimeBounds:
    """Tests for parse_time_bound."""

    def test_date_start_and_end_of_day(self):
        assert parse_time_bound("2024-01-15", "UTC") == datetime(2024, 1, 15, tzinfo=timezone.utc)
        assert parse_time_bound("2024-01-15", "UTC", end_of_day=True) == datetime(2024, 1, 16, tzinfo=timezone.utc)

    def test_datetime_unaffected_by_end_of_day(self):
        bound = parse_time_bound("2024-01-15T09:30:00", "UTC", end_of_day=True)
        assert bound == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

    def test_unparseable(self):
        assert parse_time_bound("whenever", "UTC") is None


class TestBuildEventBody:
    """Tests for build_event_body."""

    def test_all_day_event(self):
        body = build_event_body(summary="Offsite", start="2024-01-15", end="2024-01-16")
        assert body == {
            "summary": "Offsite",
            "start": {"date": "2024-01-15"},
            "end": {"date": "2024-01-16"},
        }

    def test_full_event(self):
        body = build_event_body(
            summary="Team Sync",
            start="2024-01-15T10:00:00",
            end="2024-01-15T11:00:00-05:00",
            timezone="America/New_York",
            description="Weekly",
            location="Room A",
            attendees=["a@example.com"],
            color="blue",
            reminders=["10 minutes", "garbage"],
            recurrence=["RRULE:FREQ=WEEKLY;COUNT=4"],
            transparency="transparent",
            visibility="private",
            event_id="abcdef01",
        )

        assert body["id"] == "abcdef01"
        assert body["start"] == {"dateTime": "2024-01-15T10:00:00", "timeZone": "America/New_York"}
        assert body["end"] == {"dateTime": "2024-01-15T11:00:00-05:00"}
        assert body["colorId"] == "9"
        assert body["reminders"] == {"useDefault": False, "overrides": [{"method": "popup", "minutes": 10}]}
        assert body["recurrence"] == ["RRULE:FREQ=WEEKLY;COUNT=4"]
        assert body["transparency"] == "transparent"
        assert body["visibility"] == "private"

    def test_empty_patch(self):
        assert build_event_body() == {}

    def test_empty_strings_are_kept_for_clearing(self):
        assert build_event_body(description="", location="") == {"description": "", "location": ""}


class TestFormatting:
    """Tests for format_event, format_match and build_warnings."""

    def test_format_event(self):
        formatted = format_event({
            "id": "evt1",
            "start": {"dateTime": "2024-01-15T10:00:00+01:00", "timeZone": "Europe/Paris"},
            "end": {"dateTime": "2024-01-15T11:00:00+01:00"},
            "attendees": [{"email": "a@example.com", "responseStatus": "accepted"}],
            "htmlLink": "https://calendar.google.com/event?eid=evt1",
        }, "primary")

        assert formatted["summary"] == "Untitled"
        assert formatted["time_zone"] == "Europe/Paris"
        assert formatted["is_all_day"] is False
        assert formatted["attendees"] == [{"email": "a@example.com", "response_status": "accepted"}]
        assert formatted["event_link"].endswith("evt1")

    def _existing(self):
        return ExistingEvent(
            id="evt1", title="Team Sync", start="2024-01-15T10:00:00Z",
            end="2024-01-15T11:00:00Z", calendar_id="work",
        )

    def test_format_conflict(self):
        match = MatchResult(existing_event=self._existing(), similarity=0.5, kind="conflict", overlap_minutes=29.6)
        formatted = format_match(match)
        assert formatted["overlap_minutes"] == 30
        assert "similarity" not in formatted
        assert formatted["event_link"] == ""

    def test_format_duplicate(self):
        match = MatchResult(
            existing_event=self._existing(), similarity=0.9234, kind="duplicate", suggestion="Consider it",
        )
        formatted = format_match(match)
        assert formatted["similarity"] == 92
        assert formatted["suggestion"] == "Consider it"
        assert "overlap_minutes" not in formatted

    def test_build_warnings(self):
        existing = self._existing()
        report = DetectionReport(
            conflicts=[MatchResult(existing_event=existing, similarity=0.0, kind="conflict", overlap_minutes=60)],
            duplicates=[MatchResult(existing_event=existing, similarity=0.8, kind="duplicate", suggestion="Hint")],
        )
        warnings = build_warnings(report)
        assert warnings == [
            'Overlaps with "Team Sync" (2024-01-15T10:00:00Z - 2024-01-15T11:00:00Z) on calendar work',
            "Hint",
        ]


class TestCalendarResolution:
    """Tests for resolve_calendar_ids and fetch_calendar_list."""

    def _service(self, *pages):
        service = MagicMock()
        service.calendarList.return_value.list.return_value.execute.side_effect = list(pages)
        return service

    def test_names_ids_and_unknown_entries(self):
        service = self._service({"items": [
            {"id": "team9@group.calendar.google.com", "summary": "Team"},
            {"id": "holidays", "summary": "Holidays"},
        ]})

        resolved = resolve_calendar_ids(service, ["primary", " team ", "holidays", "nowhere"])

        assert resolved == ["primary", "team9@group.calendar.google.com", "holidays", "nowhere"]
        service.calendarList.return_value.list.assert_called_once()

    def test_name_and_id_for_same_calendar_collapse(self):
        service = self._service({"items": [{"id": "team9@group.calendar.google.com", "summary": "Team"}]})
        assert resolve_calendar_ids(service, ["Team", "team9@group.calendar.google.com"]) == [
            "team9@group.calendar.google.com"
        ]

    def test_calendar_list_is_paged(self):
        service = self._service(
            {"items": [{"id": "a@example.com"}], "nextPageToken": "p2"},
            {"items": [{"id": "b@example.com"}]},
        )

        calendars = fetch_calendar_list(service)

        assert [c["id"] for c in calendars] == ["a@example.com", "b@example.com"]
        assert service.calendarList.return_value.list.call_args.kwargs == {"pageToken": "p2"}


class TestOrganizerAndConference:
    """Tests for get_primary_email, add_self_attendee and build_conference_data."""

    def test_primary_email(self):
        service = MagicMock()
        service.calendars.return_value.get.return_value.execute.return_value = {"id": "me@example.com"}
        assert get_primary_email(service) == "me@example.com"

    def test_primary_email_unavailable(self):
        service = MagicMock()
        service.calendars.return_value.get.return_value.execute.side_effect = HttpError(
            httplib2.Response({"status": 403}), b"Forbidden"
        )
        assert get_primary_email(service) is None

    def test_self_attendee(self):
        assert add_self_attendee([], "me@example.com") == [{"email": "me@example.com", "self": True}]
        assert add_self_attendee([{"email": "Me@Example.com"}], "me@example.com") == [{"email": "Me@Example.com"}]
        assert add_self_attendee([{"email": "a@example.com"}], None) == [{"email": "a@example.com"}]

    def test_meet_request(self):
        conference = build_conference_data(request_id="abcdef01")
        assert conference == {
            "createRequest": {"requestId": "abcdef01", "conferenceSolutionKey": {"type": "hangoutsMeet"}}
        }

    def test_meet_request_gets_unique_id(self):
        first = build_conference_data()["createRequest"]["requestId"]
        second = build_conference_data()["createRequest"]["requestId"]
        assert first and first != second

    def test_existing_conference_kept(self):
        existing = {"conferenceId": "abc-defg-hij"}
        assert build_conference_data(existing, "abcdef01") is existing

    def test_conference_without_id_is_replaced(self):
        conference = build_conference_data({"notes": "dial in"}, "abcdef01")
        assert "createRequest" in conference

    def test_guest_flags_in_body(self):
        body = build_event_body(guests_can_invite_others=False, anyone_can_add_self=True)
        assert body == {"guestsCanInviteOthers": False, "anyoneCanAddSelf": True}
