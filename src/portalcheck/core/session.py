"""Browser session owned by a single test scenario.

A Session is one Playwright context/page pair plus everything helpers need to
act on it: the site profile, the element locator, the action executor, the
navigation state machine and the scenario event log. Helpers take a Session
and never create their own page handles.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any, Literal, cast
from urllib.parse import urljoin

from playwright.async_api import Error as PlaywrightError

from portalcheck.core.executor import ActionExecutor
from portalcheck.core.locator import ElementLocator
from portalcheck.core.states import SessionStateMachine
from portalcheck.utils.exceptions import NavigationError

if TYPE_CHECKING:
    from playwright.async_api import BrowserContext, Page

    from portalcheck.services.portal import SiteProfile
    from portalcheck.utils.config import AppConfig
    from portalcheck.utils.events import EventLog

logger = logging.getLogger(__name__)

LoadState = Literal["load", "domcontentloaded", "networkidle"]


class Session:
    """One page/context pair owned exclusively by a scenario.

    Not reentrant: steps against one Session must be awaited one at a time.

    Attributes:
        page: The Playwright page.
        context: The Playwright browser context owning the page.
        config: Application configuration.
        site: Site profile supplying selectors and copy.
        events: Scenario event log.
        base_url: URL the session starts from.
        state: Navigation state machine.
        locator: Element locator bound to ``page``.
        executor: Action executor bound to ``page``.
    """

    def __init__(
        self,
        page: Page,
        context: BrowserContext,
        config: AppConfig,
        site: SiteProfile,
        events: EventLog,
        base_url: str,
    ) -> None:
        self.page = page
        self.context = context
        self.config = config
        self.site = site
        self.events = events
        self.base_url = base_url
        self.state = SessionStateMachine()
        self.locator = ElementLocator(page, probe_timeout=config.probe_timeout)
        self.executor = ActionExecutor(
            page,
            timeout=config.action_timeout,
            settle_timeout=config.navigation_timeout,
            settle_mode=config.settle,
            on_event=self.emit,
        )

    @property
    def is_closed(self) -> bool:
        return bool(self.state.closed.is_active)

    @property
    def url(self) -> str:
        """Current page URL."""
        return self.page.url

    def emit(self, name: str, **fields: Any) -> None:
        """Record a scenario event through the session's event log."""
        self.events.emit(name, **fields)

    async def goto(
        self,
        path: str = "/",
        readiness: str | None = None,
        timeout: int | None = None,
    ) -> None:
        """Navigate to ``path`` (relative to ``base_url``) or an absolute URL.

        Args:
            path: Path or absolute URL.
            readiness: Load state to wait for. Defaults to ``config.readiness``.
            timeout: Navigation bound in milliseconds. Defaults to
                ``config.navigation_timeout``.

        Raises:
            NavigationError: If navigation fails or times out.
        """
        url = urljoin(self.base_url, path)
        wait_until = readiness or self.config.readiness
        bound = self.config.navigation_timeout if timeout is None else timeout
        started = time.monotonic()
        try:
            await self.page.goto(
                url, wait_until=cast(LoadState, wait_until), timeout=bound
            )
        except PlaywrightError as e:
            raise NavigationError(f"Failed to navigate to {url}: {e}") from e
        self.state.load()
        self.state.mark_settled()
        self.emit(
            "navigated",
            url=url,
            readiness=wait_until,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )

    async def await_settled(
        self, mode: str | None = None, timeout: int | None = None
    ) -> None:
        """Wait for the page to settle and record it on the state machine."""
        await self.executor.await_settled(mode=mode, timeout=timeout)
        self.state.mark_settled()

    async def title(self) -> str:
        return await self.page.title()

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Evaluate a JavaScript expression or function in the page."""
        return await self.page.evaluate(script, arg)

    async def close(self) -> None:
        """Release the page, then the context.

        Safe to call more than once. Release failures (for example an
        already-closed page) are logged and recorded, never raised.
        """
        if self.is_closed:
            return
        for name, resource in (("page", self.page), ("context", self.context)):
            try:
                await resource.close()
            except Exception as e:
                logger.warning(f"Error closing {name}: {e}")
                self.emit("release_failed", resource=name, error=str(e))
        self.state.teardown()
        self.emit("session_closed", steps=self.state.step)
