"""Site profile for the USA.gov portal.

Everything that depends on the target site's markup or copy lives here, so
helpers never embed site-specific literals. A different portal can be
targeted by building another SiteProfile.
"""

from dataclasses import dataclass, field

from portalcheck.core.protocols import ElementQuery
from portalcheck.core.selectors import SelectorConfig


@dataclass(frozen=True)
class SiteSelectors:
    """Selectors for site elements, each with its own fallback chain."""

    search_box: SelectorConfig
    search_submit: SelectorConfig
    search_results: SelectorConfig
    primary_nav: SelectorConfig
    footer: SelectorConfig
    logo: SelectorConfig
    skip_link: SelectorConfig
    main_heading: SelectorConfig
    job_titles: SelectorConfig
    next_page: SelectorConfig


@dataclass(frozen=True)
class SiteQueries:
    """Multi-element queries used for counting and collection."""

    main_links: ElementQuery
    topic_links: ElementQuery
    headings: ElementQuery
    main_headings: ElementQuery
    images_missing_alt: ElementQuery
    main_images: ElementQuery
    primary_nav_links: ElementQuery
    footer_links: ElementQuery
    labelled_inputs: ElementQuery
    main_text: ElementQuery


@dataclass(frozen=True)
class SiteConfig:
    """Configuration for a target portal."""

    name: str
    entry_url: str
    mock_entry_url: str
    selectors: SiteSelectors
    queries: SiteQueries
    landmarks: tuple[str, ...]
    text_indicators: dict[str, list[str]] = field(default_factory=dict)


class SiteProfile:
    """USA.gov site profile."""

    def __init__(self, target: str = "live", mock_port: int = 8000):
        """Initialize the site profile.

        Args:
            target: "live" for the real site, "mock" for the local fixture
                pages served by MockServer.
            mock_port: Port of the local mock server.
        """
        self.target = target
        primary_nav = 'nav[aria-label="Primary navigation"]'
        self._config = SiteConfig(
            name="USA.gov",
            entry_url="https://www.usa.gov",
            mock_entry_url=f"http://localhost:{mock_port}",
            selectors=SiteSelectors(
                search_box=SelectorConfig(
                    aria=("searchbox", "Search"),
                    css=(
                        "input[type='search']",
                        "#search-field-en-small",
                        "input[name='query']",
                    ),
                ),
                search_submit=SelectorConfig(
                    aria=("button", "Search"),
                    css=(
                        "form[role='search'] button[type='submit']",
                        "[role='search'] input[type='submit']",
                    ),
                ),
                search_results=SelectorConfig(
                    css=(
                        "[data-test*='search-result']",
                        ".search-result",
                        "[class*='result']",
                    ),
                ),
                primary_nav=SelectorConfig(
                    aria=("navigation", "Primary navigation"),
                    css=(primary_nav,),
                ),
                footer=SelectorConfig(
                    aria=("contentinfo", None),
                    css=("footer",),
                ),
                logo=SelectorConfig(
                    css=(
                        "img[alt='USAGov Logo']",
                        "img[alt='USA.gov logo']",
                        "a[href='/']",
                    ),
                ),
                skip_link=SelectorConfig(
                    aria=("link", "Skip to main content"),
                    text=r"skip.*main|main.*content",
                ),
                main_heading=SelectorConfig(css=("main h1", "h1")),
                job_titles=SelectorConfig(css=(".jobTitle", "[data-test='job-title']")),
                next_page=SelectorConfig(
                    aria=("link", "Next"),
                    css=("a.next", "a[rel='next']"),
                ),
            ),
            queries=SiteQueries(
                main_links=ElementQuery.css("a", within="main").all(),
                topic_links=ElementQuery.css("a[href*='/topics/']").all(),
                headings=ElementQuery.css("h1, h2, h3, h4, h5, h6").all(),
                main_headings=ElementQuery.css(
                    "h1, h2, h3, h4, h5, h6", within="main"
                ).all(),
                images_missing_alt=ElementQuery.css("img:not([alt])").all(),
                main_images=ElementQuery.css("img", within="main").all(),
                primary_nav_links=ElementQuery.css("a", within=primary_nav).all(),
                footer_links=ElementQuery.css("a", within="footer").all(),
                labelled_inputs=ElementQuery.css(
                    'input[type="text"], input[type="email"], '
                    'input[type="search"], textarea',
                    within="form",
                ).all(),
                main_text=ElementQuery.css("p, li, span", within="main").all(),
            ),
            landmarks=("main", primary_nav, "footer"),
            text_indicators={
                "home_title": ["Making government services easier to find"],
                "main_heading": ["Making government services easier to find"],
                "no_results": ["no results", "did not match"],
            },
        )

    @property
    def config(self) -> SiteConfig:
        """Get site configuration."""
        return self._config

    @property
    def entry_url(self) -> str:
        """Get entry URL based on target."""
        if self.target == "mock":
            return self._config.mock_entry_url
        return self._config.entry_url

    @property
    def selectors(self) -> SiteSelectors:
        """Get site selectors."""
        return self._config.selectors

    @property
    def queries(self) -> SiteQueries:
        """Get multi-element site queries."""
        return self._config.queries

    @property
    def landmarks(self) -> tuple[str, ...]:
        """CSS selectors of the landmarks every page must show."""
        return self._config.landmarks

    @property
    def name(self) -> str:
        """Get site name."""
        return self._config.name
