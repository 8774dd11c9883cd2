"""
Pytest configuration and fixtures for Calendar MCP tests.

IMPORTANT: Patches must target functions WHERE THEY ARE USED (imported), not
where they are defined. Each tool module imports its helpers at module level,
so patch the import location:

    For calendar tools:
        @patch("calendar_mcp.mcp.tools.calendars.get_authenticated_credentials")
        @patch("calendar_mcp.mcp.tools.calendars.get_calendar_service")

    For event tools:
        @patch("calendar_mcp.mcp.tools.events.get_authenticated_credentials")
        @patch("calendar_mcp.mcp.tools.events.get_calendar_service")

    For free/busy tools:
        @patch("calendar_mcp.mcp.tools.freebusy.get_authenticated_credentials")
        @patch("calendar_mcp.mcp.tools.freebusy.get_calendar_service")
"""

import pytest
from unittest.mock import Mock, MagicMock

from mcp.server.fastmcp import FastMCP


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """
    Point configuration at a missing file and reset singletons.

    Every test sees the built-in defaults, a test encryption key and a token
    store under tmp_path.
    """
    monkeypatch.setenv("TOKEN_ENCRYPTION_KEY", "test_encryption_key_for_pytest")
    monkeypatch.delenv("GOOGLE_CLIENT_ID", raising=False)
    monkeypatch.delenv("GOOGLE_CLIENT_SECRET", raising=False)
    monkeypatch.delenv("MCP_TRANSPORT", raising=False)

    import calendar_mcp.utils.config as config_module
    monkeypatch.setattr(config_module, "CONFIG_FILE_PATH", str(tmp_path / "missing-config.yaml"))
    config_module.clear_config_cache()

    import calendar_mcp.auth.token_store as store_module
    store_module._instance = None

    yield

    store_module._instance = None
    config_module.clear_config_cache()


@pytest.fixture(autouse=True)
def clear_service_cache_fixture():
    """Clear the service cache before each test to prevent test pollution."""
    from calendar_mcp.utils.services import clear_service_cache
    clear_service_cache()
    yield
    clear_service_cache()


def create_mock_calendar_service():
    """Create a mock Calendar API service."""
    service = MagicMock()
    service.calendars.return_value.get.return_value.execute.return_value = {"timeZone": "UTC"}
    service.calendarList.return_value.list.return_value.execute.return_value = {"items": []}
    return service


@pytest.fixture
def mcp_app():
    """A FastMCP application with every tool registered."""
    from calendar_mcp.mcp.tools import setup_tools

    mcp = FastMCP(name="Test")
    setup_tools(mcp)
    return mcp


@pytest.fixture
def mock_credentials():
    """Fixture providing mock credentials."""
    return Mock()


@pytest.fixture
def mock_calendar_service():
    """Fixture providing a mock Calendar service."""
    return create_mock_calendar_service()
