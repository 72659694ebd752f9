"""Tests for SelectorConfig fallback chains."""

import pytest

from portalcheck.core.protocols import Strategy
from portalcheck.core.selectors import SelectorConfig


class TestSelectorConfig:
    """Tests for SelectorConfig validation and ordering."""

    def test_requires_an_alternative(self):
        with pytest.raises(ValueError, match="at least one"):
            SelectorConfig()

    def test_priority_order_is_aria_css_text(self):
        selector = SelectorConfig(
            css=("input[type='search']", "#search"),
            aria=("searchbox", "Search"),
            text="search",
        )
        queries = selector.queries()
        assert [q.strategy for q in queries] == [
            Strategy.ROLE,
            Strategy.CSS,
            Strategy.CSS,
            Strategy.TEXT,
        ]
        assert [q.value for q in queries[1:3]] == ["input[type='search']", "#search"]

    def test_order_is_deterministic(self):
        selector = SelectorConfig(css=("a", "b"), aria=("link", "Home"))
        assert selector.queries() == selector.queries()

    def test_aria_without_name(self):
        (query,) = SelectorConfig(aria=("contentinfo", None)).queries()
        assert query.name is None

    def test_text_alternative_is_regex(self):
        (query,) = SelectorConfig(text=r"skip.*main").queries()
        assert query.regex is True

    def test_within_applies_to_every_alternative(self):
        selector = SelectorConfig(css=("a",), aria=("link", "Benefits"), within="nav")
        assert all(q.within == "nav" for q in selector.queries())
