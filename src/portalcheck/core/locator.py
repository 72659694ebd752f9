"""Element resolution on top of Playwright locators.

ElementLocator turns ElementQuery values and SelectorConfig chains into
Playwright locators. It never raises for "zero matches". Only ``resolve``
treats absence as an error, for callers that cannot proceed without the
element.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from playwright.async_api import Error as PlaywrightError

from portalcheck.core.protocols import (
    Cardinality,
    ElementQuery,
    LocatorHandle,
    Strategy,
)
from portalcheck.core.selectors import SelectorConfig
from portalcheck.utils.exceptions import ElementNotFound

if TYPE_CHECKING:
    from playwright.async_api import Locator, Page

logger = logging.getLogger(__name__)

Target = ElementQuery | SelectorConfig


class ElementLocator:
    """Resolves semantic queries against the current page.

    Attributes:
        probe_timeout: Default bound, in milliseconds, for visibility probes
            and for waiting on late-rendered elements in ``resolve``.
    """

    def __init__(self, page: Page, probe_timeout: int = 2000) -> None:
        self._page = page
        self.probe_timeout = probe_timeout

    def locate(self, query: ElementQuery) -> LocatorHandle:
        """Build a lazy locator for ``query``.

        Cardinality is applied here (FIRST → ``.first``, NTH → ``.nth(i)``).
        ALL and COUNT keep the multi-element locator.
        """
        scope: Page | Locator = (
            self._page.locator(query.within) if query.within else self._page
        )

        if query.strategy is Strategy.ROLE:
            name = query.pattern(query.name) if query.name is not None else None
            # Playwright types role as a Literal; any ARIA role string is accepted
            locator = scope.get_by_role(
                cast(Any, query.value), name=name, exact=query.exact
            )
        elif query.strategy is Strategy.CSS:
            locator = scope.locator(query.value)
        elif query.strategy is Strategy.TEXT:
            locator = scope.get_by_text(query.pattern(query.value), exact=query.exact)
        elif query.strategy is Strategy.LABEL:
            locator = scope.get_by_label(query.pattern(query.value), exact=query.exact)
        else:
            locator = scope.get_by_alt_text(
                query.pattern(query.value), exact=query.exact
            )

        if query.cardinality is Cardinality.FIRST:
            locator = locator.first
        elif query.cardinality is Cardinality.NTH:
            locator = locator.nth(query.index)
        return LocatorHandle(query=query, locator=locator)

    async def first_visible(
        self, target: Target, timeout: int | None = None
    ) -> LocatorHandle | None:
        """Return the first alternative of ``target`` that becomes visible.

        Each alternative gets its own bounded wait, in priority order. Any
        failure (absent, detached, timed out) moves on to the next one.

        Args:
            target: A query or a selector chain.
            timeout: Per-alternative wait in milliseconds. Defaults to
                ``probe_timeout``.

        Returns:
            The visible handle, or None.
        """
        bound = self.probe_timeout if timeout is None else timeout
        for query in _queries(target):
            if query.cardinality in (Cardinality.ALL, Cardinality.COUNT):
                query = query.first()
            handle = self.locate(query)
            try:
                await handle.locator.wait_for(state="visible", timeout=bound)
                return handle
            except PlaywrightError:
                logger.debug(f"Not visible within {bound}ms: {query.describe()}")
                continue
        return None

    async def exists(self, target: Target, timeout: int | None = None) -> bool:
        """Bounded visibility probe that never raises.

        Returns:
            True if an alternative of ``target`` became visible in time.
        """
        return await self.first_visible(target, timeout=timeout) is not None

    async def count(self, query: ElementQuery) -> int:
        """Count matches for ``query``. Returns 0 when the page cannot answer."""
        try:
            return await self.locate(query.count()).locator.count()
        except PlaywrightError:
            return 0

    async def texts(self, query: ElementQuery, limit: int | None = None) -> list[str]:
        """Text content of each match, in document order.

        Elements without text content contribute an empty string.
        """
        locator = self.locate(query.all()).locator
        total = await locator.count()
        if limit is not None:
            total = min(total, limit)
        return [(await locator.nth(i).text_content()) or "" for i in range(total)]

    async def attributes(
        self, query: ElementQuery, name: str, limit: int | None = None
    ) -> list[str | None]:
        """Value of attribute ``name`` on each match, in document order.

        Missing attributes are reported as None, so positions line up with
        the matched elements.
        """
        locator = self.locate(query.all()).locator
        total = await locator.count()
        if limit is not None:
            total = min(total, limit)
        return [await locator.nth(i).get_attribute(name) for i in range(total)]

    async def resolve_optional(
        self, target: Target, timeout: int | None = None
    ) -> LocatorHandle | None:
        """Return the first alternative that matches at least one element.

        Alternatives are checked in priority order. When none matches right
        away, waits up to ``timeout`` for any of them to attach and then
        checks again in priority order, so a late-rendered CSS match never
        beats an ARIA match that is also present.

        Args:
            target: A query or a selector chain.
            timeout: Wait in milliseconds for late-rendered elements. 0 skips
                the wait. Defaults to ``probe_timeout``.

        Returns:
            The matching handle, or None.
        """
        handles = [self.locate(q) for q in _queries(target)]
        for handle in handles:
            if await _has_match(handle):
                return handle

        bound = self.probe_timeout if timeout is None else timeout
        if bound <= 0:
            return None

        combined = handles[0].locator
        for handle in handles[1:]:
            combined = combined.or_(handle.locator)
        try:
            await combined.first.wait_for(state="attached", timeout=bound)
        except PlaywrightError:
            return None

        for handle in handles:
            if await _has_match(handle):
                return handle
        return None

    async def resolve(self, target: Target, timeout: int | None = None) -> LocatorHandle:
        """Strict variant of ``resolve_optional``.

        Raises:
            ElementNotFound: If no alternative matches. The message lists
                every query that was tried.
        """
        handle = await self.resolve_optional(target, timeout=timeout)
        if handle is None:
            tried = [q.describe() for q in _queries(target)]
            raise ElementNotFound(f"Element not found. Tried: {tried}", queries=tried)
        return handle


def _queries(target: Target) -> tuple[ElementQuery, ...]:
    if isinstance(target, SelectorConfig):
        return target.queries()
    return (target,)


async def _has_match(handle: LocatorHandle) -> bool:
    try:
        return await handle.locator.count() > 0
    except PlaywrightError:
        return False
