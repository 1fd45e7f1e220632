import re
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from app.exceptions import Unparsable
from app.schemas.strings import FilterSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhraseRule:
    """
    A recognized phrase and the single filter field it sets.

    When only_if_unset is True the rule is skipped if an earlier rule
    already set the same field.
    """
    name: str
    pattern: re.Pattern
    field: str
    extract: Callable[[re.Match], Any]
    only_if_unset: bool = False


# Order matters: specific phrases come before their generic fallbacks.
RULES: List[PhraseRule] = [
    PhraseRule(
        name="palindrome",
        pattern=re.compile(r"palindrom(?:e|ic)"),
        field="is_palindrome",
        extract=lambda m: True,
    ),
    PhraseRule(
        name="single_word",
        pattern=re.compile(r"single[ -]word"),
        field="word_count",
        extract=lambda m: 1,
    ),
    PhraseRule(
        name="longer_than",
        pattern=re.compile(r"longer than (\d+)"),
        field="min_length",
        extract=lambda m: int(m.group(1)) + 1,
    ),
    PhraseRule(
        name="containing_the_letter",
        pattern=re.compile(r"containing (?:the )?letter ([a-z])\b"),
        field="contains_character",
        extract=lambda m: m.group(1),
    ),
    PhraseRule(
        name="containing",
        pattern=re.compile(r"containing ([a-z])\b"),
        field="contains_character",
        extract=lambda m: m.group(1),
        only_if_unset=True,
    ),
]


def parse_natural_language_query(query: str) -> FilterSet:
    """
    Parse a natural language query into a filter set.

    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}

    Raises Unparsable when no recognized phrase appears in the query.
    """
    text = query.lower()
    parsed: Dict[str, Any] = {}

    for rule in RULES:
        if rule.only_if_unset and rule.field in parsed:
            continue
        match = rule.pattern.search(text)
        if match:
            parsed[rule.field] = rule.extract(match)
            logger.debug(f"Query rule '{rule.name}' matched: {rule.field}={parsed[rule.field]!r}")

    filters = FilterSet(**parsed)
    if filters.is_empty():
        logger.info(f"Unparsable natural language query: {query!r}")
        raise Unparsable(query)

    return filters
