"""Fixtures for live-site scenarios.

Skipped unless PORTALCHECK_LIVE=1. Configuration comes from the environment
(and .env), so PORTALCHECK_BASE_URL, PORTALCHECK_BROWSER and friends apply.
"""

import os

import pytest

from portalcheck.core.browser import with_session
from portalcheck.utils.config import ConfigLoader
from portalcheck.utils.exceptions import BrowserLaunchError


def pytest_collection_modifyitems(config, items):
    if os.environ.get("PORTALCHECK_LIVE") == "1":
        return
    skip_live = pytest.mark.skip(reason="set PORTALCHECK_LIVE=1 to run live scenarios")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
async def live(request):
    """Session on the live portal home page."""
    config = ConfigLoader.load()
    config.target = "live"
    try:
        async with with_session(config, scenario=request.node.name) as session:
            yield session
    except BrowserLaunchError as e:
        pytest.skip(str(e))
