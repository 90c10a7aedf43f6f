"""Unit tests for registry filtering, search and pagination."""

import pytest

from mcpreg.api.registry.clamp_limit import clamp_limit
from mcpreg.api.registry.Entry import Entry
from mcpreg.api.registry.filter_by_category import filter_by_category
from mcpreg.api.registry.paginate_entries import paginate_entries
from mcpreg.api.registry.search_entries import search_entries

pytestmark = pytest.mark.registry


def _entry(name: str, description: str = "desc", category: str = "official") -> Entry:
    return Entry(name=name, url=f"https://github.com/o/{name}", description=description, category=category)


@pytest.fixture
def entries() -> list[Entry]:
    return [
        _entry("Postgres", "SQL database access"),
        _entry("Redis", "Key value store", "community"),
        _entry("sqlite", "Embedded Database", "community"),
        _entry("Files", "Local file access"),
    ]


class TestFilterByCategory:
    def test_all_keeps_everything(self, entries):
        assert filter_by_category(entries, "all") == entries

    def test_none_keeps_everything(self, entries):
        assert filter_by_category(entries, None) == entries

    def test_community(self, entries):
        assert [e.name for e in filter_by_category(entries, "community")] == ["Redis", "sqlite"]

    def test_unknown_category_is_empty(self, entries):
        assert filter_by_category(entries, "partner") == []


class TestSearchEntries:
    def test_matches_description_case_insensitive(self, entries):
        assert [e.name for e in search_entries(entries, "DATABASE", 10)] == ["Postgres", "sqlite"]

    def test_matches_name(self, entries):
        assert [e.name for e in search_entries(entries, "redis", 10)] == ["Redis"]

    def test_limit(self, entries):
        assert [e.name for e in search_entries(entries, "access", 1)] == ["Postgres"]

    def test_empty_query_matches_all(self, entries):
        assert len(search_entries(entries, "", 10)) == 4

    def test_no_match(self, entries):
        assert search_entries(entries, "kubernetes", 10) == []


class TestPaginateEntries:
    def test_last_partial_page(self):
        items = [_entry(f"s{i}") for i in range(25)]
        page = paginate_entries(items, 20, 20)
        assert len(page.entries) == 5
        assert page.total == 25
        assert page.has_more is False

    def test_first_page_has_more(self):
        items = [_entry(f"s{i}") for i in range(50)]
        page = paginate_entries(items, 0, 20)
        assert [e.name for e in page.entries] == [f"s{i}" for i in range(20)]
        assert page.has_more is True

    def test_offset_past_end(self):
        page = paginate_entries([_entry("a")], 5, 20)
        assert page.entries == []
        assert page.has_more is False

    def test_exact_fit(self):
        page = paginate_entries([_entry(f"s{i}") for i in range(20)], 0, 20)
        assert len(page.entries) == 20
        assert page.has_more is False


class TestClampLimit:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(None, 10), (0, 10), (5, 5), (50, 50), (500, 50), ("7", 7)],
    )
    def test_clamp(self, value, expected):
        assert clamp_limit(value, 10, 50) == expected

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            clamp_limit("many", 10, 50)
