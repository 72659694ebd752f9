"""Result listing helpers: filters, pagination and file uploads.

Listing pages show one ``job_titles`` element per result and an optional
``next_page`` link. Filters are a toggle that reveals an input plus a submit
button, identified by CSS selectors.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from portalcheck.core.protocols import ElementQuery
from portalcheck.helpers.base import permissive

if TYPE_CHECKING:
    from portalcheck.core.session import Session

logger = logging.getLogger(__name__)


@permissive([])
async def list_result_titles(session: Session) -> list[str]:
    """Titles of the results on the current listing page, stripped."""
    handle = await session.locator.resolve_optional(
        session.site.selectors.job_titles, timeout=0
    )
    if handle is None:
        return []
    texts = await session.locator.texts(handle.query)
    return [t.strip() for t in texts]


async def apply_filter(
    session: Session,
    toggle: str,
    field: str,
    value: str,
    submit: str,
) -> None:
    """Open a filter, fill its input and apply it.

    Args:
        session: Active session.
        toggle: CSS selector of the control revealing the filter, e.g.
            ``#filterLocation``.
        field: CSS selector of the filter input, e.g. ``#locationInput``.
        value: Filter value. An empty string clears the filter.
        submit: CSS selector of the apply button, e.g. ``#applyFilter``.

    Raises:
        ElementNotFound: If any of the three controls is missing.
    """
    locator, executor = session.locator, session.executor
    await executor.click(await locator.resolve(ElementQuery.css(toggle)))
    await executor.fill(await locator.resolve(ElementQuery.css(field)), value)
    await executor.click(await locator.resolve(ElementQuery.css(submit)))
    session.state.apply_filter()
    await session.await_settled()


async def iter_result_pages(
    session: Session, max_pages: int = 10
) -> AsyncIterator[list[str]]:
    """Yield result titles page by page, following the "next" link.

    Stops when no next link is visible or after ``max_pages`` pages.

    Example:
        >>> async for titles in iter_result_pages(session, max_pages=3):
        ...     assert titles
    """
    for page_number in range(1, max_pages + 1):
        yield await list_result_titles(session)
        if page_number == max_pages:
            logger.info(f"Stopped paging after {max_pages} pages")
            return
        next_link = await session.locator.first_visible(
            session.site.selectors.next_page
        )
        if next_link is None:
            return
        await session.executor.click(next_link)
        session.state.navigate()
        await session.await_settled()


async def upload_files(
    session: Session, selector: str, files: Sequence[str | Path]
) -> None:
    """Attach ``files`` to the file input matched by ``selector``.

    Raises:
        ElementNotFound: If there is no such input.
    """
    handle = await session.locator.resolve(ElementQuery.css(selector))
    await session.executor.set_input_files(handle, list(files))
