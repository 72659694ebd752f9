"""Link checks for the main content area."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from portalcheck.helpers.base import permissive

if TYPE_CHECKING:
    from portalcheck.core.session import Session

LINK_SAMPLE = 10
VALID_PROTOCOL = re.compile(r"^(https?://|/)")


def has_valid_protocol(href: str | None) -> bool:
    """True for http(s) URLs and site-relative paths."""
    return href is not None and VALID_PROTOCOL.match(href) is not None


@permissive(0)
async def count_main_links(session: Session) -> int:
    return await session.locator.count(session.site.queries.main_links)


@permissive(False)
async def all_links_have_text(session: Session) -> bool:
    """True when the first main links all have visible text (False if none)."""
    texts = await session.locator.texts(
        session.site.queries.main_links, limit=LINK_SAMPLE
    )
    if not texts:
        return False
    return all(t.strip() for t in texts)


@permissive(False)
async def all_links_have_href(session: Session) -> bool:
    """True when the first main links all carry a non-empty href (False if none)."""
    hrefs = await session.locator.attributes(
        session.site.queries.main_links, "href", limit=LINK_SAMPLE
    )
    if not hrefs:
        return False
    return all(hrefs)


@permissive([])
async def collect_hrefs(session: Session, limit: int = 20) -> list[str | None]:
    """Hrefs of the first ``limit`` main links, in document order.

    A link without an href yields None at its position.
    """
    return await session.locator.attributes(
        session.site.queries.main_links, "href", limit=limit
    )


@permissive(False)
async def internal_links_valid(session: Session, limit: int = 20) -> bool:
    """True when every collected href is an http(s) URL or a site path."""
    hrefs = [h for h in await collect_hrefs(session, limit) if h is not None]
    return all(has_valid_protocol(h) for h in hrefs)


@permissive(0)
async def count_external_links(session: Session, limit: int = 20) -> int:
    hrefs = await collect_hrefs(session, limit)
    return sum(1 for h in hrefs if h is not None and h.startswith("http"))
