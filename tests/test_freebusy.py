"""
Tests for mcp/tools/freebusy.py - availability queries
"""

import pytest
from unittest.mock import Mock, patch


def get_tool(mcp, name):
    for tool in mcp._tool_manager._tools.values():
        if tool.name == name:
            return tool.fn
    raise AssertionError(f"{name} tool not found")


@pytest.fixture
def freebusy(mcp_app, mock_calendar_service):
    with patch("calendar_mcp.mcp.tools.freebusy.get_authenticated_credentials") as mock_creds, \
         patch("calendar_mcp.mcp.tools.freebusy.get_calendar_service") as mock_service:
        mock_creds.return_value = Mock()
        mock_service.return_value = mock_calendar_service
        yield get_tool(mcp_app, "get_freebusy"), mock_calendar_service


class TestGetFreeBusy:
    """Tests for get_freebusy."""

    def test_busy_periods(self, freebusy):
        get_freebusy, service = freebusy
        service.freebusy.return_value.query.return_value.execute.return_value = {
            "calendars": {
                "primary": {"busy": [{"start": "2024-01-15T10:00:00Z", "end": "2024-01-15T11:00:00Z"}]},
                "bob@example.com": {"busy": [], "errors": [{"domain": "global", "reason": "notFound"}]},
            }
        }

        result = get_freebusy(
            user_id="user-1",
            provider="google",
            calendars=["primary", "bob@example.com"],
            time_min="2024-01-15",
            time_max="2024-01-15",
        )

        assert result["success"] is True
        assert result["time_min"] == "2024-01-15T00:00:00+00:00"
        assert result["time_max"] == "2024-01-16T00:00:00+00:00"
        assert result["calendars"]["primary"]["busy"][0]["start"] == "2024-01-15T10:00:00Z"
        assert result["calendars"]["bob@example.com"]["errors"][0]["reason"] == "notFound"

        body = service.freebusy.return_value.query.call_args.kwargs["body"]
        assert body["items"] == [{"id": "primary"}, {"id": "bob@example.com"}]
        assert body["timeZone"] == "UTC"
        assert "groupExpansionMax" not in body

    def test_expansion_limits_passed(self, freebusy):
        get_freebusy, service = freebusy
        service.freebusy.return_value.query.return_value.execute.return_value = {"calendars": {}}

        get_freebusy(
            user_id="user-1", provider="google", calendars=["primary"],
            time_min="2024-01-15T09:00:00", time_max="2024-01-15T17:00:00",
            group_expansion_max=10, calendar_expansion_max=5,
        )

        body = service.freebusy.return_value.query.call_args.kwargs["body"]
        assert body["groupExpansionMax"] == 10
        assert body["calendarExpansionMax"] == 5

    def test_range_over_three_months_rejected(self, freebusy):
        get_freebusy, service = freebusy

        result = get_freebusy(
            user_id="user-1", provider="google", calendars=["primary"],
            time_min="2024-01-01", time_max="2024-04-02",
        )

        assert result == {"success": False, "error": "The time range cannot exceed 3 months"}
        service.freebusy.assert_not_called()

    def test_exactly_three_months_allowed(self, freebusy):
        get_freebusy, service = freebusy
        service.freebusy.return_value.query.return_value.execute.return_value = {"calendars": {}}

        result = get_freebusy(
            user_id="user-1", provider="google", calendars=["primary"],
            time_min="2024-01-01T00:00:00", time_max="2024-04-01T00:00:00",
        )

        assert result["success"] is True

    def test_inverted_range(self, freebusy):
        get_freebusy, _ = freebusy
        result = get_freebusy(
            user_id="user-1", provider="google", calendars=["primary"],
            time_min="2024-01-15T12:00:00", time_max="2024-01-15T09:00:00",
        )
        assert result == {"success": False, "error": "time_max must be after time_min"}

    def test_no_calendars(self, freebusy):
        get_freebusy, _ = freebusy
        result = get_freebusy(
            user_id="user-1", provider="google", calendars=[],
            time_min="today", time_max="tomorrow",
        )
        assert result["success"] is False
