"""Unit tests for the in-memory string store."""
import pytest

from app.crud.strings import StringStore
from app.exceptions import DuplicateValue
from app.services.analyzer import analyze


class TestInsert:
    def test_insert_then_find_returns_identical_record(self, store):
        record = analyze("Hello World")
        store.insert(record)
        assert store.find_by_value("Hello World") == record

    def test_duplicate_rejected(self, store):
        store.insert(analyze("twice"))
        with pytest.raises(DuplicateValue):
            store.insert(analyze("twice"))
        assert store.count() == 1

    def test_case_variants_are_distinct(self, store):
        store.insert(analyze("abc"))
        store.insert(analyze("ABC"))
        assert store.count() == 2

    def test_empty_string_is_storable(self, store):
        store.insert(analyze(""))
        assert store.find_by_value("") is not None


class TestLookup:
    def test_find_by_value_is_case_sensitive(self, store):
        store.insert(analyze("Madam"))
        assert store.find_by_value("madam") is None

    def test_find_by_id(self, store):
        record = store.insert(analyze("hashed"))
        assert store.find_by_id(record.id) == record
        assert store.find_by_id("0" * 64) is None


class TestDeleteAndScan:
    def test_delete_present(self, store):
        store.insert(analyze("gone"))
        assert store.delete("gone") is True
        assert store.find_by_value("gone") is None

    def test_delete_missing(self, store):
        assert store.delete("never stored") is False

    def test_scan_preserves_insertion_order(self, store):
        for value in ["b", "a", "c"]:
            store.insert(analyze(value))
        store.delete("a")
        store.insert(analyze("a"))
        assert [r.value for r in store.scan_all()] == ["b", "c", "a"]

    def test_stores_are_isolated(self, store):
        store.insert(analyze("only here"))
        other = StringStore()
        try:
            assert other.scan_all() == []
        finally:
            other.close()
