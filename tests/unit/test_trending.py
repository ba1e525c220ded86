"""Unit tests for the trending listing query."""

from __future__ import annotations

import itertools

import pytest

from plugin_query.search.parser import ParseOutcome
from plugin_query.search.trending import SORT_CLAUSES, TrendingAttributes, TrendingQuery

# ---------------------------------------------------------------------------
# Tag toggle semantics
# ---------------------------------------------------------------------------


class TestTags:
    def test_include(self) -> None:
        q = TrendingQuery.from_string("tag:Database")
        assert q.tags == {"Database"}
        assert q.exclude_tags == frozenset()

    def test_exclude(self) -> None:
        q = TrendingQuery.from_string("-tag:Paid")
        assert q.tags == frozenset()
        assert q.exclude_tags == {"Paid"}

    def test_include_then_exclude_cancels(self) -> None:
        q = TrendingQuery.from_string("tag:a -tag:a")
        assert "a" not in q.tags
        assert "a" not in q.exclude_tags

    def test_exclude_then_include_cancels(self) -> None:
        q = TrendingQuery.from_string("-tag:a tag:a")
        assert q.tags == frozenset()
        assert q.exclude_tags == frozenset()

    def test_repeated_include_is_idempotent(self) -> None:
        q = TrendingQuery.from_string("tag:a tag:a")
        assert q.tags == {"a"}

    def test_cancel_then_reinclude(self) -> None:
        q = TrendingQuery.from_string("tag:a -tag:a tag:a")
        assert q.tags == {"a"}
        assert q.exclude_tags == frozenset()

    def test_mixed_tags(self) -> None:
        q = TrendingQuery.from_string('tag:Database -tag:Paid tag:"Code tools"')
        assert q.tags == {"Database", "Code tools"}
        assert q.exclude_tags == {"Paid"}


@pytest.mark.parametrize(
    "calls",
    list(itertools.product([("a", False), ("a", True), ("b", False), ("b", True)], repeat=4)),
)
def test_tags_and_exclude_tags_stay_disjoint(calls: tuple[tuple[str, bool], ...]) -> None:
    attributes = TrendingAttributes()
    for value, invert in calls:
        attributes.handle_attribute("tag", value, invert)
        assert attributes.tags.isdisjoint(attributes.exclude_tags)


# ---------------------------------------------------------------------------
# Other attributes
# ---------------------------------------------------------------------------


class TestOtherAttributes:
    def test_sort_by_last_wins(self) -> None:
        q = TrendingQuery.from_string("sort_by:rating sort_by:name")
        assert q.sort_by == "name"

    def test_sort_by_ignores_invert(self) -> None:
        q = TrendingQuery.from_string("-sort_by:downloads")
        assert q.sort_by == "downloads"

    def test_unquoted_url_value_is_split_at_colon(self) -> None:
        q = TrendingQuery.from_string("repository:https://repo.example.org/plugins.xml")
        assert q.repository == "https:"

    def test_quoted_repository(self) -> None:
        q = TrendingQuery.from_string('repository:"https://repo.example.org/plugins.xml"')
        assert q.repository == "https://repo.example.org/plugins.xml"

    def test_unknown_attribute_is_ignored(self) -> None:
        q = TrendingQuery.from_string("vendor:acme kotlin")
        assert q.search_query == "kotlin"
        assert q.tags == frozenset()
        assert q.sort_by is None
        assert q.repository is None

    def test_outcome_is_recorded(self) -> None:
        assert TrendingQuery.from_string("").outcome is ParseOutcome.EMPTY
        assert TrendingQuery.from_string("kotlin").outcome is ParseOutcome.CLEAN
        assert TrendingQuery.from_string("dark theme").outcome is ParseOutcome.FALLBACK

    def test_tags_survive_fallback(self) -> None:
        q = TrendingQuery.from_string("tag:Theme dark theme")
        assert q.tags == {"Theme"}
        assert q.search_query == "tag:Theme dark theme"


# ---------------------------------------------------------------------------
# URL query serialization
# ---------------------------------------------------------------------------


class TestUrlQuery:
    def test_empty(self) -> None:
        assert TrendingQuery.from_string("").url_query() == ""

    def test_search_only(self) -> None:
        assert TrendingQuery.from_string("kotlin").url_query() == "search=kotlin"

    @pytest.mark.parametrize(("sort_by", "clause"), list(SORT_CLAUSES.items()))
    def test_sort_clauses(self, sort_by: str, clause: str) -> None:
        assert TrendingQuery.from_string(f"sort_by:{sort_by}").url_query() == clause

    def test_update_date_clause_is_literal(self) -> None:
        assert TrendingQuery(sort_by="updates").url_query() == "orderBy=update+date"

    def test_unknown_sort_contributes_nothing(self) -> None:
        q = TrendingQuery.from_string("sort_by:popular kotlin")
        assert q.url_query() == "search=kotlin"

    def test_full_order(self) -> None:
        q = TrendingQuery.from_string("kotlin tag:Database sort_by:updates tag:Code")
        assert q.url_query() == "orderBy=update+date&tags=Code&tags=Database&search=kotlin"

    def test_excluded_tags_and_repository_are_not_serialized(self) -> None:
        q = TrendingQuery.from_string('-tag:Paid repository:"https://r.example.org" tag:Theme')
        assert q.url_query() == "tags=Theme"

    def test_values_are_percent_encoded(self) -> None:
        q = TrendingQuery.from_string('tag:"Code tools" "a&b=c"')
        assert q.url_query() == "tags=Code%20tools&search=a%26b%3Dc"

    def test_non_ascii_is_utf8_encoded(self) -> None:
        assert TrendingQuery(search_query="café").url_query() == "search=caf%C3%A9"

    def test_uri_component_safe_characters(self) -> None:
        q = TrendingQuery(search_query="it's(ok)!~*-_.")
        assert q.url_query() == "search=it's(ok)!~*-_."

    def test_fallback_search_is_raw_query(self) -> None:
        q = TrendingQuery.from_string("dark  theme")
        assert q.url_query() == "search=dark%20%20theme"

    def test_tags_are_sorted(self) -> None:
        q = TrendingQuery(tags=frozenset({"b", "c", "a"}))
        assert q.url_query() == "tags=a&tags=b&tags=c"
