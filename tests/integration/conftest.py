"""Fixtures for integration tests.

These tests drive a real headless Chromium against the local fixture pages
served by MockServer. They are skipped when the Playwright browser is not
installed (``playwright install chromium``).
"""

import socket
from pathlib import Path

import pytest
from dotenv import load_dotenv

from portalcheck.core.browser import PortalBrowser
from portalcheck.services.mock import MockServer
from portalcheck.services.portal import SiteProfile
from portalcheck.utils.config import AppConfig
from portalcheck.utils.exceptions import BrowserLaunchError

# Load .env file at test startup
load_dotenv(Path(__file__).parent.parent.parent / ".env")


def get_free_port() -> int:
    """Get a free port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("localhost", 0))
        return s.getsockname()[1]


@pytest.fixture
def mock_server(mock_pages_dir: Path):
    """Start mock server for integration tests."""
    server = MockServer(mock_pages_dir, port=get_free_port())
    server.start()
    yield server
    server.stop()


@pytest.fixture
def mock_config(tmp_path: Path) -> AppConfig:
    """Configuration for the local fixture site."""
    return AppConfig(
        headless=True,
        action_timeout=3000,
        probe_timeout=300,
        navigation_timeout=10000,
        max_retries=1,
        output_dir=tmp_path / "events",
        target="mock",
    )


@pytest.fixture
async def browser():
    """Launched Chromium, skipped when it is not installed."""
    portal_browser = PortalBrowser(headless=True)
    try:
        await portal_browser.launch()
    except BrowserLaunchError as e:
        pytest.skip(str(e))
    yield portal_browser
    await portal_browser.close()


@pytest.fixture
async def portal(browser: PortalBrowser, mock_server: MockServer, mock_config, request):
    """Session on the fixture home page, released after the test."""
    site = SiteProfile(target="mock", mock_port=mock_server.port)
    async with browser.session(
        mock_config, site=site, scenario=request.node.name
    ) as session:
        yield session
