"""Unit tests for Session."""

from unittest.mock import AsyncMock

import pytest
from playwright.async_api import Error as PlaywrightError

from portalcheck.core.session import Session
from portalcheck.utils.exceptions import NavigationError


class TestSessionInit:
    """Tests for Session wiring."""

    def test_components_share_config(self, session: Session, app_config):
        assert session.locator.probe_timeout == app_config.probe_timeout
        assert session.executor.timeout == app_config.action_timeout
        assert session.executor.settle_mode == app_config.settle

    def test_url_comes_from_page(self, session, fake_page):
        fake_page.url = "http://localhost:8000/benefits"
        assert session.url == "http://localhost:8000/benefits"


class TestGoto:
    """Tests for navigation."""

    @pytest.mark.asyncio
    async def test_relative_path_joined_to_base_url(self, session, fake_page):
        await session.goto("/benefits")
        fake_page.goto.assert_awaited_once_with(
            "http://localhost:8000/benefits",
            wait_until="domcontentloaded",
            timeout=5000,
        )
        assert session.state.loaded.is_active
        assert session.state.settled is True
        assert session.events.events("navigated")[-1]["fields"]["url"] == (
            "http://localhost:8000/benefits"
        )

    @pytest.mark.asyncio
    async def test_failure_raises_navigation_error(self, session, fake_page):
        fake_page.goto = AsyncMock(side_effect=PlaywrightError("net::ERR_FAILED"))
        with pytest.raises(NavigationError, match="localhost:8000"):
            await session.goto("/")


class TestClose:
    """Tests for release."""

    @pytest.mark.asyncio
    async def test_closes_page_then_context(self, session, fake_page, fake_context):
        order = []
        fake_page.close = AsyncMock(side_effect=lambda: order.append("page"))
        fake_context.close = AsyncMock(side_effect=lambda: order.append("context"))

        await session.close()

        assert order == ["page", "context"]
        assert session.is_closed

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self, session, fake_page):
        await session.close()
        await session.close()
        fake_page.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_release_errors_are_swallowed(self, session, fake_page, fake_context):
        fake_page.close = AsyncMock(side_effect=PlaywrightError("Target closed"))

        await session.close()

        fake_context.close.assert_awaited_once()
        failures = session.events.events("release_failed")
        assert failures[0]["fields"]["resource"] == "page"
        assert session.is_closed
