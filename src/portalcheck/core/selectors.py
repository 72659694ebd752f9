"""Selector configuration types for element lookup.

This module provides the SelectorConfig dataclass for defining a prioritized
chain of element queries. Alternatives are always tried in the same order:
ARIA role+name first, then each CSS selector as listed, then the text
pattern.
"""

from dataclasses import dataclass

from portalcheck.core.protocols import ElementQuery


@dataclass(frozen=True)
class SelectorConfig:
    """Configuration for an element with ARIA, CSS and text alternatives.

    Attributes:
        css: CSS selectors to try in order after the ARIA query.
        aria: Optional tuple of (role, name) tried first.
              Example: ("button", "Search") matches elements with role="button"
              and an accessible name containing "Search".
        text: Optional visible-text regex tried last.
        within: Optional CSS scope applied to every alternative.
    """

    css: tuple[str, ...] = ()
    aria: tuple[str, str | None] | None = None
    text: str | None = None
    within: str | None = None

    def __post_init__(self) -> None:
        """Validate that at least one alternative is configured."""
        if not self.css and self.aria is None and self.text is None:
            raise ValueError("selector needs at least one of css, aria or text")

    def queries(self) -> tuple[ElementQuery, ...]:
        """Return the alternatives as queries, in priority order."""
        chain: list[ElementQuery] = []
        if self.aria is not None:
            role, name = self.aria
            chain.append(ElementQuery.role(role, name, within=self.within))
        chain.extend(ElementQuery.css(sel, within=self.within) for sel in self.css)
        if self.text is not None:
            chain.append(ElementQuery.text(self.text, regex=True, within=self.within))
        return tuple(chain)
