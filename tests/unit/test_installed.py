"""Unit tests for the installed listing query."""

from __future__ import annotations

import pytest

from plugin_query.search.installed import InstalledAttributes, InstalledQuery


@pytest.mark.parametrize(
    ("value", "flag", "expected"),
    [
        ("enabled", "enabled", True),
        ("disabled", "enabled", False),
        ("bundled", "bundled", True),
        ("installed", "bundled", False),
        ("invalid", "invalid", True),
        ("outdated", "need_update", True),
        ("uninstalled", "deleted", True),
        ("inactive", "need_restart", True),
    ],
)
class TestStatusValues:
    def test_sets_flag(self, value: str, flag: str, expected: bool) -> None:
        q = InstalledQuery.from_string(f"status:{value}")
        assert getattr(q, flag) is expected
        assert q.has_attributes is True

    def test_inverted_sets_opposite(self, value: str, flag: str, expected: bool) -> None:
        q = InstalledQuery.from_string(f"-status:{value}")
        assert getattr(q, flag) is (not expected)

    def test_other_flags_stay_unset(self, value: str, flag: str, expected: bool) -> None:
        q = InstalledQuery.from_string(f"status:{value}")
        others = {name: v for name, v in q.flags().items() if name != flag}
        assert all(v is None for v in others.values())


class TestInstalledQuery:
    def test_empty_query_has_no_attributes(self) -> None:
        q = InstalledQuery.from_string("")
        assert q.has_attributes is False
        assert q.search_query is None

    def test_last_write_wins(self) -> None:
        q = InstalledQuery.from_string("status:enabled status:disabled")
        assert q.enabled is False
        assert q.has_attributes is True

    def test_no_toggle_on_opposite_polarity(self) -> None:
        q = InstalledQuery.from_string("status:enabled -status:enabled")
        assert q.enabled is False

    def test_independent_flags_combine(self) -> None:
        q = InstalledQuery.from_string("status:outdated -status:bundled kotlin")
        assert q.need_update is True
        assert q.bundled is False
        assert q.enabled is None
        assert q.search_query == "kotlin"

    def test_unknown_status_is_ignored(self) -> None:
        q = InstalledQuery.from_string("status:sleeping")
        assert q.has_attributes is False

    def test_other_attribute_names_are_ignored(self) -> None:
        q = InstalledQuery.from_string("tag:enabled kotlin")
        assert q.has_attributes is False
        assert q.search_query == "kotlin"

    def test_free_text_only(self) -> None:
        q = InstalledQuery.from_string("kotlin")
        assert q.search_query == "kotlin"
        assert q.has_attributes is False

    def test_flags_survive_fallback(self) -> None:
        q = InstalledQuery.from_string("status:disabled dark theme")
        assert q.enabled is False
        assert q.search_query == "status:disabled dark theme"

    def test_single_status_word_is_search_text(self) -> None:
        q = InstalledQuery.from_string("status:")
        assert q.search_query == "status:"
        assert q.has_attributes is False


class TestInstalledAttributes:
    def test_starts_unset(self) -> None:
        attributes = InstalledAttributes()
        assert attributes.enabled is None
        assert attributes.need_restart is None

    def test_direct_dispatch(self) -> None:
        attributes = InstalledAttributes()
        attributes.handle_attribute("status", "uninstalled", False)
        attributes.handle_attribute("status", "disabled", True)
        assert attributes.deleted is True
        assert attributes.enabled is True
