from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError
from typing import Any, Dict, Optional, List, Mapping
from datetime import datetime

from app.exceptions import InvalidFilter, InvalidType, MissingField


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")


def is_utf8_encodable(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def resolve_create_value(payload: Any) -> str:
    """
    Resolve a create request body into the string to analyze.

    A body that is not an object, or has no "value" key, is a MissingField.
    A "value" that is present but not a string (null included) is an
    InvalidType, as is a string that cannot be encoded as UTF-8.
    The empty string is valid input.
    """
    if not isinstance(payload, dict) or "value" not in payload:
        raise MissingField("value")
    if isinstance(payload["value"], str) and not is_utf8_encodable(payload["value"]):
        raise InvalidType("value", "must be valid Unicode text (lone surrogates are not allowed)")
    try:
        return StringCreate.model_validate(payload).value
    except ValidationError as e:
        raise InvalidType("value", e.errors()[0]["msg"])


class StringProperties(BaseModel):
    model_config = ConfigDict(frozen=True)

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringRecord(BaseModel):
    """An analyzed string. Never modified after creation."""
    model_config = ConfigDict(frozen=True)

    id: str
    value: str
    properties: StringProperties
    created_at: datetime


class FilterSet(BaseModel):
    """
    Partial set of constraints over stored records.
    Unset (None) fields impose no constraint.
    """
    model_config = ConfigDict(frozen=True)

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = Field(None, ge=0)
    max_length: Optional[int] = Field(None, ge=0)
    word_count: Optional[int] = Field(None, ge=0)
    contains_character: Optional[str] = Field(None, min_length=1, max_length=1)

    @classmethod
    def from_query_params(cls, params: Mapping[str, Optional[str]]) -> "FilterSet":
        """Build a FilterSet from raw query string values, rejecting malformed ones."""
        raw = {key: value for key, value in params.items() if value is not None}
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            first = e.errors()[0]
            field = first["loc"][0] if first["loc"] else "filters"
            raise InvalidFilter(str(field), first["msg"])

    def applied(self) -> Dict[str, Any]:
        """The constraints that are actually set."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.applied()


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Optional[Dict[str, Any]] = None


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str
    total_strings: int
