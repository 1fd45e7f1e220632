from typing import Iterable, List

from app.schemas.strings import FilterSet, StringRecord


def matches(record: StringRecord, filters: FilterSet) -> bool:
    """Return True if the record satisfies every constraint set on the filter set."""
    props = record.properties

    if filters.is_palindrome is not None and props.is_palindrome != filters.is_palindrome:
        return False

    if filters.min_length is not None and props.length < filters.min_length:
        return False

    if filters.max_length is not None and props.length > filters.max_length:
        return False

    if filters.word_count is not None and props.word_count != filters.word_count:
        return False

    if filters.contains_character is not None:
        # Case-insensitive on both sides
        if filters.contains_character.lower() not in record.value.lower():
            return False

    return True


def apply_filters(records: Iterable[StringRecord], filters: FilterSet) -> List[StringRecord]:
    """Keep the records that match, preserving their order"""
    return [record for record in records if matches(record, filters)]
