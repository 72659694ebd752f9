"""Primary navigation, logo and footer helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from portalcheck.core.protocols import ElementQuery
from portalcheck.core.selectors import SelectorConfig
from portalcheck.helpers.base import permissive

if TYPE_CHECKING:
    from portalcheck.core.session import Session


def _non_blank(texts: list[str]) -> list[str]:
    return [t.strip() for t in texts if t.strip()]


def _nav_link(label: str) -> SelectorConfig:
    """Link in any <nav> whose accessible name contains ``label``."""
    return SelectorConfig(aria=("link", label), within="nav")


@permissive([])
async def list_primary_nav_labels(session: Session) -> list[str]:
    """Labels of the primary navigation links, in order, blanks dropped."""
    texts = await session.locator.texts(session.site.queries.primary_nav_links)
    return _non_blank(texts)


@permissive(0)
async def count_primary_nav_items(session: Session) -> int:
    return await session.locator.count(session.site.queries.primary_nav_links)


@permissive(False)
async def all_nav_items_have_href(session: Session) -> bool:
    """True when the primary nav has links and none has a blank href."""
    hrefs = await session.locator.attributes(
        session.site.queries.primary_nav_links, "href"
    )
    if not hrefs:
        return False
    return all(href and href.strip() for href in hrefs)


@permissive(False)
async def nav_item_exists(session: Session, label: str) -> bool:
    return await session.locator.exists(_nav_link(label))


async def click_nav_item(session: Session, label: str) -> None:
    """Click the navigation link named ``label`` and wait for the page.

    Raises:
        ElementNotFound: If no navigation link matches.
    """
    handle = await session.locator.resolve(_nav_link(label))
    await session.executor.click(handle)
    session.state.navigate()
    await session.await_settled()


async def click_logo(session: Session) -> None:
    """Click the site logo (home link) and wait for the page."""
    handle = await session.locator.resolve(session.site.selectors.logo)
    await session.executor.click(handle)
    session.state.navigate()
    await session.await_settled()


@permissive([])
async def list_footer_nav_labels(session: Session) -> list[str]:
    texts = await session.locator.texts(session.site.queries.footer_links)
    return _non_blank(texts)


@permissive(0)
async def count_footer_links(session: Session) -> int:
    return await session.locator.count(session.site.queries.footer_links)


@permissive(False)
async def is_footer_present(session: Session) -> bool:
    return await session.locator.exists(session.site.selectors.footer)


@permissive(False)
async def link_points_to(session: Session, label: str, path: str) -> bool:
    """True when the first link named ``label`` has an href containing ``path``."""
    hrefs = await session.locator.attributes(
        ElementQuery.role("link", label), "href", limit=1
    )
    return bool(hrefs) and hrefs[0] is not None and path in hrefs[0]
