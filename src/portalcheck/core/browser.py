"""Playwright browser lifecycle and scoped session acquisition.

This module owns the process-level resources (Playwright driver and browser
instance) and hands out Sessions as scoped acquisitions. Every exit path of a
``session()`` block, including a failed assertion, releases the page and
then the context. ``with_session`` additionally launches and stops the
browser around a single scenario.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

from playwright.async_api import (
    Browser,
    Playwright,
    async_playwright,
)
from playwright.async_api import (
    Error as PlaywrightError,
)
from playwright_stealth import Stealth

from portalcheck.core.session import Session
from portalcheck.services.portal import SiteProfile
from portalcheck.utils.config import BROWSERS, AppConfig, ConfigLoader
from portalcheck.utils.events import EventLog
from portalcheck.utils.exceptions import (
    BrowserLaunchError,
    ConfigurationError,
    TransientError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PortalBrowser:
    """Playwright browser that hands out isolated Sessions.

    One PortalBrowser can serve many Sessions. Each Session gets its own
    browser context, so cookies and storage never leak between scenarios.

    Attributes:
        browser_name: Engine to launch ("chromium", "firefox" or "webkit").
        headless: Whether to run without a visible window.
        stealth: Whether to apply playwright-stealth to new pages.

    Example:
        >>> browser = PortalBrowser(headless=True)
        >>> await browser.launch()
        >>> async with browser.session(config, scenario="search") as session:
        ...     await perform_search(session, "passport")
        >>> await browser.close()
    """

    def __init__(
        self,
        browser_name: str = "chromium",
        headless: bool = True,
        stealth: bool = False,
    ) -> None:
        """Initialize the browser wrapper.

        Args:
            browser_name: Playwright engine to launch.
            headless: Whether to run browser in headless mode.
            stealth: Apply playwright-stealth evasions to each new page.

        Raises:
            ConfigurationError: If browser_name is not a Playwright engine.
        """
        if browser_name not in BROWSERS:
            raise ConfigurationError(
                f"Unknown browser '{browser_name}' "
                f"(expected one of: {', '.join(BROWSERS)})"
            )
        self.browser_name = browser_name
        self.headless = headless
        self.stealth = stealth
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    @classmethod
    def from_config(cls, config: AppConfig) -> PortalBrowser:
        return cls(
            browser_name=config.browser,
            headless=config.headless,
            stealth=config.stealth,
        )

    @property
    def is_launched(self) -> bool:
        return self._browser is not None

    async def launch(self) -> None:
        """Start Playwright and launch the browser engine.

        Raises:
            BrowserLaunchError: If the engine cannot be started.
        """
        self._playwright = await async_playwright().start()
        engine = getattr(self._playwright, self.browser_name)
        try:
            self._browser = await engine.launch(headless=self.headless)
        except PlaywrightError as e:
            await self._playwright.stop()
            self._playwright = None
            raise BrowserLaunchError(self.browser_name) from e
        logger.info(f"Launched {self.browser_name} (headless={self.headless})")

    async def new_session(
        self,
        config: AppConfig,
        site: SiteProfile | None = None,
        scenario: str = "scenario",
    ) -> Session:
        """Open a context/page pair and navigate to the start page.

        The initial navigation is retried on transient failures, up to
        ``config.max_retries`` attempts. If it still fails, the half-built
        session is released before the error propagates.

        Args:
            config: Application configuration.
            site: Site profile. Defaults to a profile for ``config.target``.
            scenario: Scenario name used for the event log.

        Returns:
            A Session in the ``loaded`` state.

        Raises:
            RuntimeError: If the browser has not been launched.
            NavigationError: If the start page cannot be loaded.
        """
        if not self._browser:
            raise RuntimeError("Browser not launched")

        site = site or SiteProfile(target=config.target)
        base_url = site.entry_url if config.target == "mock" else config.base_url
        events = EventLog(scenario, output_dir=config.output_dir)

        context = await self._browser.new_context(base_url=base_url)
        context.set_default_timeout(config.action_timeout)
        try:
            page = await context.new_page()
            if self.stealth:
                await Stealth().apply_stealth_async(page)
        except BaseException:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Error closing context: {e}")
            raise

        session = Session(
            page=page,
            context=context,
            config=config,
            site=site,
            events=events,
            base_url=base_url,
        )
        session.emit(
            "session_started",
            base_url=base_url,
            browser=self.browser_name,
            headless=self.headless,
        )
        try:
            await with_retry(
                lambda: session.goto("/"),
                max_retries=max(config.max_retries, 1),
            )
        except BaseException:
            await session.close()
            raise
        return session

    @asynccontextmanager
    async def session(
        self,
        config: AppConfig,
        site: SiteProfile | None = None,
        scenario: str = "scenario",
    ) -> AsyncIterator[Session]:
        """Scoped Session acquisition.

        The scenario outcome is recorded on the event log, and the session is
        released on every exit path.
        """
        session = await self.new_session(config, site=site, scenario=scenario)
        try:
            yield session
        except BaseException as e:
            session.events.complete("failed", error=f"{type(e).__name__}: {e}")
            raise
        else:
            session.events.complete("passed")
        finally:
            await session.close()

    async def close(self) -> None:
        """Close the browser and stop Playwright. Safe to call repeatedly."""
        if self._browser:
            try:
                await self._browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        if self._playwright:
            await self._playwright.stop()
        self._browser = None
        self._playwright = None


@asynccontextmanager
async def with_session(
    config: AppConfig | None = None,
    site: SiteProfile | None = None,
    scenario: str = "scenario",
) -> AsyncIterator[Session]:
    """Launch a browser, open a Session, and tear both down afterwards.

    Args:
        config: Configuration. Loaded from the environment when None.
        site: Site profile override.
        scenario: Scenario name for the event log.

    Example:
        >>> async with with_session(scenario="nav") as session:
        ...     labels = await list_primary_nav_labels(session)
    """
    config = config or ConfigLoader.load()
    browser = PortalBrowser.from_config(config)
    await browser.launch()
    try:
        async with browser.session(config, site=site, scenario=scenario) as session:
            yield session
    finally:
        await browser.close()


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    retry_on: tuple[type[Exception], ...] = (TransientError,),
    backoff: float = 1.0,
) -> T:
    """Execute operation with retry for transient failures.

    Implements exponential backoff between retries.

    Args:
        operation: Async callable to execute.
        max_retries: Maximum number of attempts.
        retry_on: Tuple of exception types to retry on.
        backoff: Base delay in seconds (doubled after each failed attempt).

    Returns:
        The result of the operation.

    Raises:
        The last exception if all retries fail.
    """
    last_error: Exception | None = None
    for attempt in range(max_retries):
        try:
            return await operation()
        except retry_on as e:
            last_error = e
            logger.warning(f"Attempt {attempt + 1}/{max_retries} failed: {e}")
            if attempt + 1 < max_retries:
                await asyncio.sleep(backoff * 2**attempt)
    if last_error:
        raise last_error
    raise RuntimeError("No retries attempted")
