import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict

from app.schemas.strings import StringProperties, StringRecord

def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    # surrogatepass keeps hashing total over every str
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()

def normalize_characters(text: str) -> str:
    """Lower-case the string and drop all whitespace"""
    return "".join(ch for ch in text.lower() if not ch.isspace())

def is_palindrome(text: str) -> bool:
    """
    Check if string is a palindrome.
    Only case is folded; spaces and punctuation still count.
    """
    folded = text.lower()
    return folded == folded[::-1]

def count_unique_characters(text: str) -> int:
    """Count distinct characters, ignoring case and whitespace"""
    return len(set(normalize_characters(text)))

def count_words(text: str) -> int:
    """Count words separated by runs of whitespace"""
    return len(text.split())

def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character, ignoring case and whitespace"""
    return dict(Counter(normalize_characters(text)))

def analyze(value: str) -> StringRecord:
    """Analyze a string and return a new record with all computed properties"""
    sha256_hash = compute_sha256(value)

    # Every field is computed here, so validation is skipped; this keeps
    # analysis total over any str, lone surrogates included
    return StringRecord.model_construct(
        id=sha256_hash,
        value=value,
        properties=StringProperties.model_construct(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=get_character_frequency(value),
        ),
        created_at=datetime.now(timezone.utc),
    )
