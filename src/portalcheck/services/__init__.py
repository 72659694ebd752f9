"""Services module: target site profiles and the local fixture server."""

from pathlib import Path

from portalcheck.services.mock import MockServer
from portalcheck.services.portal import (
    SiteConfig,
    SiteProfile,
    SiteQueries,
    SiteSelectors,
)


def get_mock_pages_dir() -> Path:
    """Get the directory holding the portal fixture pages.

    Returns:
        Path to mock_pages/portal at the project root.
    """
    return Path(__file__).resolve().parents[3] / "mock_pages" / "portal"


__all__ = [
    "MockServer",
    "SiteConfig",
    "SiteProfile",
    "SiteQueries",
    "SiteSelectors",
    "get_mock_pages_dir",
]
