"""Unit tests for structured filter evaluation."""
import pytest

from app.exceptions import InvalidFilter
from app.schemas.strings import FilterSet
from app.services.analyzer import analyze
from app.services.filters import apply_filters, matches


@pytest.fixture
def records():
    return [analyze(v) for v in ["madam", "noon", "hello"]]


class TestMatches:
    def test_empty_filter_matches_everything(self, records):
        assert all(matches(r, FilterSet()) for r in records)

    def test_conjunction(self, records):
        result = apply_filters(records, FilterSet(min_length=5, is_palindrome=True))
        assert [r.value for r in result] == ["madam"]

    def test_palindrome_false(self, records):
        result = apply_filters(records, FilterSet(is_palindrome=False))
        assert [r.value for r in result] == ["hello"]

    def test_length_bounds_are_inclusive(self, records):
        result = apply_filters(records, FilterSet(min_length=4, max_length=4))
        assert [r.value for r in result] == ["noon"]

    def test_word_count(self):
        records = [analyze("one"), analyze("two words"), analyze("")]
        result = apply_filters(records, FilterSet(word_count=2))
        assert [r.value for r in result] == ["two words"]

    def test_contains_character_is_case_insensitive(self):
        records = [analyze("Zebra"), analyze("apple")]
        assert [r.value for r in apply_filters(records, FilterSet(contains_character="z"))] == ["Zebra"]
        assert [r.value for r in apply_filters(records, FilterSet(contains_character="P"))] == ["apple"]

    def test_order_preserved(self, records):
        assert [r.value for r in apply_filters(records, FilterSet())] == ["madam", "noon", "hello"]


class TestFromQueryParams:
    def test_parses_strings(self):
        filters = FilterSet.from_query_params({
            "is_palindrome": "true",
            "min_length": "3",
            "max_length": "10",
            "word_count": "1",
            "contains_character": "a",
        })
        assert filters.applied() == {
            "is_palindrome": True,
            "min_length": 3,
            "max_length": 10,
            "word_count": 1,
            "contains_character": "a",
        }

    def test_none_values_are_unset(self):
        filters = FilterSet.from_query_params({"min_length": None, "is_palindrome": "false"})
        assert filters.applied() == {"is_palindrome": False}

    def test_empty(self):
        assert FilterSet.from_query_params({}).is_empty()

    @pytest.mark.parametrize("field,raw", [
        ("min_length", "abc"),
        ("max_length", "-1"),
        ("word_count", "1.5"),
        ("is_palindrome", "maybe"),
        ("contains_character", "ab"),
        ("contains_character", ""),
    ])
    def test_malformed_values(self, field, raw):
        with pytest.raises(InvalidFilter) as exc_info:
            FilterSet.from_query_params({field: raw})
        assert exc_info.value.field == field
