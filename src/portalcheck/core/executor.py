"""Action execution against located elements.

ActionExecutor performs the mutating operations (fill, click, check, ...)
against a LocatorHandle. Playwright already waits for an element to be
attached, visible and enabled before acting. The executor bounds that wait
and converts an expired wait into portalcheck's Timeout so callers can decide
whether to swallow it or let it fail the scenario.

Settling after navigation is never implicit. Callers invoke
``await_settled`` when an action is expected to load new content.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal, cast

from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from portalcheck.core.protocols import ActionResult
from portalcheck.utils.exceptions import Timeout

if TYPE_CHECKING:
    from playwright.async_api import Page

    from portalcheck.core.protocols import LocatorHandle

logger = logging.getLogger(__name__)

LoadState = Literal["load", "domcontentloaded", "networkidle"]
EventHook = Callable[..., Any]

MUTATING_ACTIONS = (
    "fill",
    "click",
    "check",
    "uncheck",
    "clear",
    "press_key",
    "set_input_files",
)


class ActionExecutor:
    """Performs bounded actions on located elements.

    Attributes:
        timeout: Actionability wait for each action, in milliseconds.
        settle_timeout: Default bound for ``await_settled``, in milliseconds.
        settle_mode: Default load state for ``await_settled``.
    """

    def __init__(
        self,
        page: Page,
        timeout: int = 5000,
        settle_timeout: int = 30000,
        settle_mode: str = "networkidle",
        on_event: EventHook | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            page: The page actions run against.
            timeout: Actionability wait per action in milliseconds.
            settle_timeout: Default settle bound in milliseconds.
            settle_mode: Default load state waited for by ``await_settled``.
            on_event: Optional callback ``(name, **fields)`` receiving an
                event for each action. The owning Session supplies it.
        """
        self._page = page
        self.timeout = timeout
        self.settle_timeout = settle_timeout
        self.settle_mode = settle_mode
        self._on_event = on_event or (lambda name, **fields: None)

    async def fill(self, handle: LocatorHandle, text: str) -> None:
        """Replace the value of an input with ``text``."""
        await self._perform(
            "fill", handle, lambda t: handle.locator.fill(text, timeout=t)
        )

    async def click(self, handle: LocatorHandle) -> None:
        await self._perform("click", handle, lambda t: handle.locator.click(timeout=t))

    async def check(self, handle: LocatorHandle) -> None:
        await self._perform("check", handle, lambda t: handle.locator.check(timeout=t))

    async def uncheck(self, handle: LocatorHandle) -> None:
        await self._perform(
            "uncheck", handle, lambda t: handle.locator.uncheck(timeout=t)
        )

    async def clear(self, handle: LocatorHandle) -> None:
        await self._perform("clear", handle, lambda t: handle.locator.clear(timeout=t))

    async def press_key(self, handle: LocatorHandle, key: str) -> None:
        """Focus the element and press ``key`` (e.g. "Enter", "Tab")."""
        await self._perform(
            "press", handle, lambda t: handle.locator.press(key, timeout=t), key=key
        )

    async def set_input_files(
        self, handle: LocatorHandle, files: str | Path | Sequence[str | Path]
    ) -> None:
        """Attach one or more files to a file input."""
        await self._perform(
            "upload",
            handle,
            lambda t: handle.locator.set_input_files(files, timeout=t),
        )

    async def input_value(self, handle: LocatorHandle) -> str:
        """Read the current value of an input, select or textarea."""
        return await self._perform(
            "input_value", handle, lambda t: handle.locator.input_value(timeout=t)
        )

    async def attempt(
        self, action: str, handle: LocatorHandle, *args: Any
    ) -> ActionResult:
        """Run a named action and report the outcome instead of raising.

        Example:
            >>> result = await executor.attempt("fill", handle, "passport")
            >>> if not result:
            ...     print(result.error)
        """
        if action not in MUTATING_ACTIONS:
            raise ValueError(f"Unknown action: {action}")
        method = getattr(self, action)
        try:
            await method(handle, *args)
        except Timeout as e:
            return ActionResult(False, action, handle.describe(), error=str(e))
        return ActionResult(True, action, handle.describe())

    async def await_settled(
        self, mode: str | None = None, timeout: int | None = None
    ) -> None:
        """Wait for the page to reach a load state.

        Args:
            mode: "networkidle", "domcontentloaded" or "load". Defaults to
                ``settle_mode``.
            timeout: Bound in milliseconds. Defaults to ``settle_timeout``.

        Raises:
            Timeout: If the state is not reached in time.
        """
        state = mode or self.settle_mode
        bound = self.settle_timeout if timeout is None else timeout
        started = time.monotonic()
        try:
            await self._page.wait_for_load_state(cast(LoadState, state), timeout=bound)
        except PlaywrightTimeoutError as e:
            raise Timeout(
                f"Page did not reach '{state}' within {bound}ms", target=state
            ) from e
        elapsed_ms = int((time.monotonic() - started) * 1000)
        self._on_event("settled", mode=state, elapsed_ms=elapsed_ms)

    async def _perform(
        self,
        action: str,
        handle: LocatorHandle,
        call: Callable[[int], Awaitable[Any]],
        **fields: Any,
    ) -> Any:
        target = handle.describe()
        try:
            result = await call(self.timeout)
        except PlaywrightTimeoutError as e:
            logger.debug(f"{action} timed out on {target}: {e}")
            self._on_event("action", action=action, target=target, ok=False, **fields)
            raise Timeout(
                f"{action} on {target} timed out after {self.timeout}ms",
                target=target,
            ) from e
        self._on_event("action", action=action, target=target, ok=True, **fields)
        return result
