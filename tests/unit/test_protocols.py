"""Tests for ElementQuery, LocatorHandle and ActionResult."""

import re
from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest

from portalcheck.core.protocols import (
    ActionResult,
    Cardinality,
    ElementQuery,
    LocatorHandle,
    Strategy,
)


class TestElementQueryBuilders:
    """Tests for the builder classmethods."""

    def test_role_query(self):
        query = ElementQuery.role("button", "Search")
        assert query.strategy is Strategy.ROLE
        assert query.value == "button"
        assert query.name == "Search"
        assert query.cardinality is Cardinality.FIRST

    def test_css_query_with_scope(self):
        query = ElementQuery.css("a", within="main")
        assert query.strategy is Strategy.CSS
        assert query.within == "main"

    def test_empty_value_rejected(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ElementQuery.css("")

    def test_negative_index_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            ElementQuery.css("a").nth(-1)

    def test_queries_are_frozen(self):
        query = ElementQuery.css("a")
        with pytest.raises(FrozenInstanceError):
            query.value = "b"  # type: ignore[misc]


class TestElementQueryModifiers:
    """Tests for cardinality modifiers."""

    def test_modifiers_return_new_queries(self):
        base = ElementQuery.css("h2")
        assert base.all().cardinality is Cardinality.ALL
        assert base.count().cardinality is Cardinality.COUNT
        assert base.nth(3).index == 3
        assert base.cardinality is Cardinality.FIRST

    def test_first_resets_index(self):
        query = ElementQuery.css("li").nth(4).first()
        assert query.cardinality is Cardinality.FIRST
        assert query.index == 0


class TestElementQueryPattern:
    """Tests for regex handling."""

    def test_plain_text_passes_through(self):
        assert ElementQuery.text("Skip").pattern("Skip") == "Skip"

    def test_regex_is_case_insensitive(self):
        pattern = ElementQuery.text(r"skip.*main", regex=True).pattern(r"skip.*main")
        assert isinstance(pattern, re.Pattern)
        assert pattern.search("Skip to MAIN content")


class TestElementQueryDescribe:
    """Tests for describe()."""

    def test_role_with_name(self):
        assert ElementQuery.role("button", "Search").describe() == (
            "role=button name='Search'"
        )

    def test_scoped_all(self):
        assert ElementQuery.css("a", within="main").all().describe() == (
            "main >> css=a [all]"
        )

    def test_nth_and_regex(self):
        query = ElementQuery.text("next", regex=True).nth(2)
        assert query.describe() == "text=next (regex) [nth=2]"


class TestLocatorHandleAndResult:
    """Tests for LocatorHandle and ActionResult."""

    def test_handle_describes_its_query(self):
        handle = LocatorHandle(ElementQuery.css("#q"), MagicMock())
        assert handle.describe() == "css=#q"

    def test_action_result_truthiness(self):
        assert ActionResult(True, "click", "css=#go")
        assert not ActionResult(False, "click", "css=#go", error="timed out")
