"""Accessibility checks: landmarks, skip link, alt text, headings, lang.

Heading hierarchy rule: levels are walked in document order starting from
an implicit level 0. A heading may go down any number of levels but may go
up at most one level at a time. That means the first heading must be an h1,
[1, 3] and [2, 1, 4] are invalid, and a page without headings is valid.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from portalcheck.core.protocols import ElementQuery
from portalcheck.helpers.base import css_string, permissive
from portalcheck.utils.exceptions import AssertionFailed

if TYPE_CHECKING:
    from portalcheck.core.session import Session

logger = logging.getLogger(__name__)

KEYBOARD_SAMPLE = 5


async def _missing_landmarks(session: Session) -> list[str]:
    missing = []
    for selector in session.site.landmarks:
        if not await session.locator.exists(ElementQuery.css(selector)):
            missing.append(selector)
    return missing


@permissive(False)
async def has_main_landmarks(session: Session) -> bool:
    """True when every landmark of the site profile is visible."""
    return not await _missing_landmarks(session)


async def assert_main_landmarks(session: Session) -> None:
    """Strict landmark check.

    Raises:
        AssertionFailed: Naming every landmark that is not visible.
    """
    missing = await _missing_landmarks(session)
    if missing:
        raise AssertionFailed(f"Landmarks not visible: {missing}")


@permissive(False)
async def has_skip_link(session: Session) -> bool:
    return await session.locator.exists(session.site.selectors.skip_link)


@permissive(0)
async def count_images_missing_alt(session: Session) -> int:
    """Number of <img> elements with no alt attribute at all.

    An empty ``alt=""`` marks a decorative image and is not counted.
    """
    return await session.locator.count(session.site.queries.images_missing_alt)


@permissive(False)
async def main_images_have_alt_text(session: Session) -> bool:
    """Stricter variant: every image in <main> has a non-empty alt."""
    alts = await session.locator.attributes(session.site.queries.main_images, "alt")
    return all(alts)


def levels_are_hierarchical(levels: Sequence[int]) -> bool:
    """Check heading levels against the hierarchy rule in the module docstring."""
    previous = 0
    for level in levels:
        if level > previous + 1:
            return False
        previous = level
    return True


@permissive([])
async def heading_levels(session: Session) -> list[int]:
    """Levels (1-6) of the headings inside <main>, in document order."""
    locator = session.locator.locate(session.site.queries.main_headings).locator
    total = await locator.count()
    levels = []
    for i in range(total):
        tag = await locator.nth(i).evaluate("el => el.tagName")
        levels.append(int(str(tag)[1]))
    return levels


@permissive(False)
async def heading_hierarchy_valid(session: Session) -> bool:
    return levels_are_hierarchical(await heading_levels(session))


@permissive(None)
async def get_lang_attribute(session: Session) -> str | None:
    values = await session.locator.attributes(ElementQuery.css("html"), "lang", 1)
    return values[0] if values else None


@permissive(False)
async def has_lang_attribute(session: Session) -> bool:
    return await get_lang_attribute(session) is not None


@permissive(False)
async def form_inputs_have_labels(session: Session) -> bool:
    """True when every text-like form input has a visible label or aria-label."""
    query = session.site.queries.labelled_inputs
    ids = await session.locator.attributes(query, "id")
    aria_labels = await session.locator.attributes(query, "aria-label")
    for input_id, aria_label in zip(ids, aria_labels):
        if aria_label:
            continue
        if not input_id:
            return False
        label = ElementQuery.css(f"label[for={css_string(input_id)}]")
        if not await session.locator.exists(label):
            return False
    return True


@permissive(False)
async def links_keyboard_accessible(session: Session) -> bool:
    """True unless one of the first few main links is removed from tab order."""
    tabindexes = await session.locator.attributes(
        session.site.queries.main_links, "tabindex", limit=KEYBOARD_SAMPLE
    )
    return all(t != "-1" for t in tabindexes)


@permissive(False)
async def has_readable_text(session: Session) -> bool:
    """True when <main> contains paragraph, list or inline text elements."""
    return await session.locator.count(session.site.queries.main_text) > 0


class ConsoleErrorCollector:
    """Collects browser console errors while attached to a session.

    Each error is also recorded as a ``console_error`` event on the session.

    Example:
        >>> with ConsoleErrorCollector(session) as collector:
        ...     await perform_search(session, "passport")
        >>> assert collector.errors == []
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self.errors: list[str] = []
        self._attached = False

    def _on_console(self, message: Any) -> None:
        if message.type == "error":
            self.errors.append(message.text)
            self._session.emit("console_error", text=message.text)

    def start(self) -> None:
        if not self._attached:
            self._session.page.on("console", self._on_console)
            self._attached = True

    def stop(self) -> None:
        if self._attached:
            self._session.page.remove_listener("console", self._on_console)
            self._attached = False
            logger.debug(f"Collected {len(self.errors)} console errors")

    def __enter__(self) -> ConsoleErrorCollector:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()
