"""Shared pytest fixtures for portalcheck tests.

This module provides common fixtures used across unit, integration, and e2e
tests. Fixtures include the test configuration, the site profile, an
in-memory page (see ``tests.fakes``) and a Session built on top of it.
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from portalcheck.core.session import Session
from portalcheck.services import get_mock_pages_dir
from portalcheck.services.portal import SiteProfile
from portalcheck.utils.config import AppConfig
from portalcheck.utils.events import EventLog
from tests.fakes import FakePage


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Test configuration.

    Creates an AppConfig with short timeouts so absent-element probes
    resolve quickly.

    Args:
        tmp_path: Pytest fixture providing a temporary directory.

    Returns:
        AppConfig: A configuration object for testing.
    """
    return AppConfig(
        base_url="http://localhost:8000",
        action_timeout=1000,
        probe_timeout=100,
        navigation_timeout=5000,
        max_retries=2,
        output_dir=tmp_path / "output",
        target="mock",
    )


@pytest.fixture
def site() -> SiteProfile:
    """USA.gov site profile pointing at the mock server."""
    return SiteProfile(target="mock")


@pytest.fixture
def fake_page() -> FakePage:
    """Empty in-memory page."""
    return FakePage()


@pytest.fixture
def fake_context() -> MagicMock:
    """Browser context mock with an async close."""
    context = MagicMock()
    context.close = AsyncMock()
    return context


@pytest.fixture
def session(
    fake_page: FakePage,
    fake_context: MagicMock,
    app_config: AppConfig,
    site: SiteProfile,
) -> Session:
    """Session over FakePage, already in the ``loaded`` state."""
    s = Session(
        page=fake_page,  # type: ignore[arg-type]
        context=fake_context,
        config=app_config,
        site=site,
        events=EventLog("unit"),
        base_url="http://localhost:8000",
    )
    s.state.load()
    return s


@pytest.fixture
def mock_pages_dir() -> Path:
    """Path to the portal fixture pages served by MockServer."""
    return get_mock_pages_dir()
