"""Page content helpers: title, URL, topics and headings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portalcheck.core.protocols import ElementQuery
from portalcheck.core.selectors import SelectorConfig
from portalcheck.helpers.base import permissive

if TYPE_CHECKING:
    from portalcheck.core.session import Session


def _topic_link(name: str) -> SelectorConfig:
    return SelectorConfig(aria=("link", name))


@permissive("")
async def get_title(session: Session) -> str:
    return await session.title()


async def get_url(session: Session) -> str:
    return session.url


async def wait_until_loaded(session: Session) -> None:
    """Wait for DOMContentLoaded on the current page."""
    await session.await_settled(mode="domcontentloaded")


@permissive(0)
async def count_topic_links(session: Session) -> int:
    return await session.locator.count(session.site.queries.topic_links)


@permissive(0)
async def count_headings(session: Session) -> int:
    return await session.locator.count(session.site.queries.headings)


@permissive(False)
async def topic_exists(session: Session, name: str) -> bool:
    return await session.locator.exists(_topic_link(name))


async def click_topic(session: Session, name: str) -> None:
    """Click the topic link named ``name`` and wait for the page.

    Raises:
        ElementNotFound: If no such link exists.
    """
    handle = await session.locator.resolve(_topic_link(name))
    await session.executor.click(handle)
    session.state.navigate()
    await session.await_settled()


@permissive(False)
async def is_main_heading_visible(session: Session) -> bool:
    return await session.locator.exists(session.site.selectors.main_heading)


@permissive("")
async def get_main_heading_text(session: Session) -> str:
    handle = await session.locator.resolve_optional(
        session.site.selectors.main_heading
    )
    if handle is None:
        return ""
    text = await handle.locator.text_content()
    return (text or "").strip()


@permissive(False)
async def page_contains_text(session: Session, text: str) -> bool:
    return await session.locator.exists(ElementQuery.text(text))
