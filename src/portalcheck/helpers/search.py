"""Search box helpers.

The search box is resolved through the site profile's ``search_box`` chain
(ARIA searchbox first, then CSS). ``perform_search`` is strict: a page with no
search box fails the scenario. The other read helpers are permissive.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from portalcheck.core.protocols import ElementQuery
from portalcheck.helpers.base import permissive

if TYPE_CHECKING:
    from portalcheck.core.session import Session


@permissive(False)
async def is_search_box_visible(session: Session) -> bool:
    return await session.locator.exists(session.site.selectors.search_box)


@permissive("")
async def get_search_value(session: Session) -> str:
    """Current value of the search box, or "" when there is none."""
    handle = await session.locator.resolve_optional(
        session.site.selectors.search_box
    )
    if handle is None:
        return ""
    return await session.executor.input_value(handle)


async def perform_search(session: Session, query: str) -> None:
    """Fill the search box, submit, and wait for the results to settle.

    Submission clicks the first visible submit control. When none is
    visible, Enter is pressed in the search box instead.

    Raises:
        ElementNotFound: If the page has no search box.
        Timeout: If filling, submitting or settling times out.
    """
    selectors = session.site.selectors
    box = await session.locator.resolve(selectors.search_box)
    await session.executor.fill(box, query)

    submit = await session.locator.first_visible(selectors.search_submit)
    if submit is not None:
        await session.executor.click(submit)
    else:
        await session.executor.press_key(box, "Enter")

    session.state.search()
    await session.await_settled()


async def submit_search_with_enter(session: Session, query: str) -> None:
    """Like ``perform_search`` but always submits with the Enter key."""
    box = await session.locator.resolve(session.site.selectors.search_box)
    await session.executor.fill(box, query)
    await session.executor.press_key(box, "Enter")
    session.state.search()
    await session.await_settled()


async def clear_search(session: Session) -> None:
    """Empty the search box.

    Raises:
        ElementNotFound: If the page has no search box.
    """
    box = await session.locator.resolve(session.site.selectors.search_box)
    await session.executor.clear(box)


@permissive(False)
async def search_input_accepts_text(session: Session, text: str) -> bool:
    """Type ``text``, read it back, then clear the box again."""
    box = await session.locator.resolve(session.site.selectors.search_box)
    await session.executor.fill(box, text)
    value = await session.executor.input_value(box)
    await session.executor.clear(box)
    return value == text


@permissive(False)
async def search_results_displayed(session: Session) -> bool:
    return await session.locator.exists(session.site.selectors.search_results)


@permissive(0)
async def count_search_results(session: Session) -> int:
    handle = await session.locator.resolve_optional(
        session.site.selectors.search_results, timeout=0
    )
    if handle is None:
        return 0
    return await session.locator.count(handle.query)


@permissive(False)
async def no_results_shown(session: Session) -> bool:
    """True when the page shows one of the site's "no results" messages."""
    phrases = session.site.config.text_indicators.get("no_results", [])
    if not phrases:
        return False
    pattern = "|".join(re.escape(p) for p in phrases)
    return await session.locator.exists(ElementQuery.text(pattern, regex=True))
