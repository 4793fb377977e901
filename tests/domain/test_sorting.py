"""Tests for the sort engine comparator and stable ordering."""

from __future__ import annotations

from yamlsort.domain.sorting import compare_by_key, sort_sequence, unicode_collate


def _casefold_collate(a: str, b: str) -> int:
    a, b = a.casefold(), b.casefold()
    return (a > b) - (a < b)


class TestCompareByKey:
    def test_string_values(self) -> None:
        assert compare_by_key({"n": "a"}, {"n": "b"}, "n") < 0
        assert compare_by_key({"n": "b"}, {"n": "a"}, "n") > 0
        assert compare_by_key({"n": "a"}, {"n": "a"}, "n") == 0

    def test_missing_key_is_equal(self) -> None:
        assert compare_by_key({"n": "a"}, {"other": "b"}, "n") == 0
        assert compare_by_key({}, {"n": "b"}, "n") == 0

    def test_non_string_value_is_equal(self) -> None:
        assert compare_by_key({"n": 2}, {"n": 1}, "n") == 0
        assert compare_by_key({"n": None}, {"n": "a"}, "n") == 0

    def test_non_mapping_is_equal(self) -> None:
        assert compare_by_key("a", {"n": "b"}, "n") == 0

    def test_custom_collation(self) -> None:
        assert compare_by_key({"n": "B"}, {"n": "a"}, "n", _casefold_collate) > 0


class TestSortSequence:
    def test_orders_by_key(self) -> None:
        items = [{"name": "c"}, {"name": "a"}, {"name": "b"}]
        assert sort_sequence(items, "name") == [{"name": "a"}, {"name": "b"}, {"name": "c"}]

    def test_returns_new_list(self) -> None:
        items = [{"name": "b"}, {"name": "a"}]
        result = sort_sequence(items, "name")
        assert result is not items
        assert items == [{"name": "b"}, {"name": "a"}]
        # Elements are reused, not copied.
        assert result[0] is items[1]

    def test_permutation_of_input(self) -> None:
        items = [{"name": "b"}, {"id": 1}, {"name": "a"}, "scalar", {"name": "b", "x": 1}]
        result = sort_sequence(items, "name")
        assert len(result) == len(items)
        assert all(any(r is i for i in items) for r in result)

    def test_stable_for_equal_values(self) -> None:
        items = [
            {"name": "b", "pos": 1},
            {"name": "a", "pos": 2},
            {"name": "b", "pos": 3},
            {"name": "a", "pos": 4},
        ]
        result = sort_sequence(items, "name")
        assert [i["pos"] for i in result] == [2, 4, 1, 3]

    def test_all_incomparable_keeps_order(self) -> None:
        items = [{"id": 3}, {"id": 1}, {"id": 2}]
        assert sort_sequence(items, "name") == items

    def test_non_string_values_keep_order(self) -> None:
        items = [{"name": 3}, {"name": 1}, {"name": 2}]
        assert sort_sequence(items, "name") == items

    def test_empty_sequence(self) -> None:
        assert sort_sequence([], "name") == []

    def test_injected_collation(self) -> None:
        items = [{"name": "b"}, {"name": "C"}, {"name": "a"}]
        result = sort_sequence(items, "name", collate=_casefold_collate)
        assert [i["name"] for i in result] == ["a", "b", "C"]


class TestDefaultCollation:
    def test_case_does_not_split_the_alphabet(self) -> None:
        items = [{"name": "banana"}, {"name": "Cherry"}, {"name": "apple"}]
        result = sort_sequence(items, "name")
        assert [i["name"] for i in result] == ["apple", "banana", "Cherry"]

    def test_accented_letters_sort_with_their_base(self) -> None:
        items = [{"name": "zeta"}, {"name": "éclair"}, {"name": "fig"}]
        result = sort_sequence(items, "name")
        assert [i["name"] for i in result] == ["éclair", "fig", "zeta"]

    def test_unicode_collate_three_way(self) -> None:
        assert unicode_collate("apple", "Banana") < 0
        assert unicode_collate("Banana", "apple") > 0
        assert unicode_collate("same", "same") == 0

    def test_compare_by_key_uses_unicode_default(self) -> None:
        assert compare_by_key({"n": "Zoo"}, {"n": "ábaco"}, "n") > 0
