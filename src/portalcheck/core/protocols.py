"""Core data types for portalcheck.

This module defines the value types that the locator, executor and helpers
share. It includes:
- Strategy and Cardinality enums describing how a query resolves
- ElementQuery, the immutable semantic description of target elements
- LocatorHandle, a resolved (but still lazy) Playwright locator
- ActionResult, the normalized outcome of a mutating action
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playwright.async_api import Locator


class Strategy(Enum):
    """How an ElementQuery finds its elements."""

    ROLE = auto()
    CSS = auto()
    TEXT = auto()
    LABEL = auto()
    ALT_TEXT = auto()


class Cardinality(Enum):
    """Which of the matched elements an action applies to."""

    FIRST = auto()
    NTH = auto()
    ALL = auto()
    COUNT = auto()


@dataclass(frozen=True)
class ElementQuery:
    """Semantic description of one or more DOM elements.

    Queries are immutable and resolved lazily against the page at the moment
    of use, so the same query can be reused after the DOM has changed.

    Attributes:
        strategy: Resolution strategy (role, css, text, label, alt text).
        value: ARIA role for ROLE, selector for CSS, or the text to match.
        name: Accessible name for ROLE queries.
        regex: Treat ``value`` (TEXT/LABEL/ALT_TEXT) or ``name`` (ROLE) as a
            case-insensitive regular expression.
        exact: Require a whole-string, case-sensitive match.
        within: Optional CSS selector scoping the search (e.g. "main").
        cardinality: FIRST, NTH, ALL or COUNT.
        index: Element index used when cardinality is NTH.

    Example:
        >>> ElementQuery.role("searchbox", "Search")
        >>> ElementQuery.css("a", within="main").all()
        >>> ElementQuery.text(r"skip.*main|main.*content", regex=True)
    """

    strategy: Strategy
    value: str
    name: str | None = None
    regex: bool = False
    exact: bool = False
    within: str | None = None
    cardinality: Cardinality = Cardinality.FIRST
    index: int = 0

    def __post_init__(self) -> None:
        """Validate the query."""
        if not self.value:
            raise ValueError("query value cannot be empty")
        if self.index < 0:
            raise ValueError(f"index must be non-negative: {self.index}")

    @classmethod
    def role(
        cls,
        role: str,
        name: str | None = None,
        *,
        regex: bool = False,
        exact: bool = False,
        within: str | None = None,
    ) -> ElementQuery:
        """Query by ARIA role and optional accessible name."""
        return cls(
            Strategy.ROLE, role, name=name, regex=regex, exact=exact, within=within
        )

    @classmethod
    def css(cls, selector: str, *, within: str | None = None) -> ElementQuery:
        """Query by CSS selector."""
        return cls(Strategy.CSS, selector, within=within)

    @classmethod
    def text(
        cls,
        text: str,
        *,
        regex: bool = False,
        exact: bool = False,
        within: str | None = None,
    ) -> ElementQuery:
        """Query by visible text."""
        return cls(Strategy.TEXT, text, regex=regex, exact=exact, within=within)

    @classmethod
    def label(cls, text: str, *, exact: bool = False) -> ElementQuery:
        """Query a form control by its label text."""
        return cls(Strategy.LABEL, text, exact=exact)

    @classmethod
    def alt_text(cls, text: str, *, exact: bool = False) -> ElementQuery:
        """Query an image (or image link) by its alt text."""
        return cls(Strategy.ALT_TEXT, text, exact=exact)

    def first(self) -> ElementQuery:
        return replace(self, cardinality=Cardinality.FIRST, index=0)

    def nth(self, index: int) -> ElementQuery:
        return replace(self, cardinality=Cardinality.NTH, index=index)

    def all(self) -> ElementQuery:
        return replace(self, cardinality=Cardinality.ALL, index=0)

    def count(self) -> ElementQuery:
        return replace(self, cardinality=Cardinality.COUNT, index=0)

    def pattern(self, text: str) -> str | re.Pattern[str]:
        """Return ``text`` compiled as a case-insensitive regex if requested."""
        if self.regex:
            return re.compile(text, re.IGNORECASE)
        return text

    def describe(self) -> str:
        """Return a human-readable description used in errors and events.

        Returns:
            String such as "role=button name='Search'" or "css=main a [all]".
        """
        if self.strategy is Strategy.ROLE:
            desc = f"role={self.value}"
            if self.name is not None:
                desc += f" name='{self.name}'"
        else:
            desc = f"{self.strategy.name.lower()}={self.value}"
        if self.regex:
            desc += " (regex)"
        if self.within:
            desc = f"{self.within} >> {desc}"
        if self.cardinality is Cardinality.NTH:
            desc += f" [nth={self.index}]"
        elif self.cardinality is not Cardinality.FIRST:
            desc += f" [{self.cardinality.name.lower()}]"
        return desc


@dataclass(frozen=True)
class LocatorHandle:
    """A query paired with the Playwright locator built from it.

    The locator itself is lazy. Nothing touches the page until an action
    or read is awaited on it.

    Attributes:
        query: The query the locator was built from.
        locator: The Playwright locator.
    """

    query: ElementQuery
    locator: Locator

    def describe(self) -> str:
        return self.query.describe()


@dataclass
class ActionResult:
    """Normalized outcome of a mutating action.

    Attributes:
        success: Whether the action completed.
        action: Action name (e.g., "fill", "click").
        target: Description of the element acted on.
        error: Error message when the action failed.
    """

    success: bool
    action: str
    target: str
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success
