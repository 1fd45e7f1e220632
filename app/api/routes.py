from fastapi import APIRouter, Depends, Query, Request, Response, status
from json import JSONDecodeError
from typing import Optional
import logging

from app.crud.strings import StringStore
from app.exceptions import MissingField, MissingQuery, NotFound
from app.schemas.strings import (
    FilterSet,
    NaturalLanguageResponse,
    StringListResponse,
    StringRecord,
    resolve_create_value,
)
from app.services.analyzer import analyze
from app.services.filters import apply_filters
from app.services.query_parser import parse_natural_language_query

router = APIRouter()
logger = logging.getLogger(__name__)


def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's string store."""
    return request.app.state.store


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
async def create_string(request: Request, store: StringStore = Depends(get_store)):
    """
    Analyze and store a string.
    Returns 400 if 'value' is missing, 422 if it is not a string,
    409 if the string already exists.
    """
    try:
        payload = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        raise MissingField("value")

    value = resolve_create_value(payload)
    record = store.insert(analyze(value))
    logger.info(f"Stored string {record.id[:12]} (length={record.properties.length})")
    return record


@router.get("/strings", response_model=StringListResponse)
async def list_strings(
    is_palindrome: Optional[str] = Query(None, description="Filter by palindrome (true/false)"),
    min_length: Optional[str] = Query(None, description="Minimum string length"),
    max_length: Optional[str] = Query(None, description="Maximum string length"),
    word_count: Optional[str] = Query(None, description="Exact word count"),
    contains_character: Optional[str] = Query(None, description="Single character the string must contain"),
    store: StringStore = Depends(get_store),
):
    """
    Get all strings with optional filtering.
    Returns 400 if any filter value is malformed.
    """
    filters = FilterSet.from_query_params({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })

    data = apply_filters(store.scan_all(), filters)
    filters_applied = filters.applied()

    return StringListResponse(
        data=data,
        count=len(data),
        filters_applied=filters_applied if filters_applied else None,
    )


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
async def filter_by_natural_language(
    query: Optional[str] = Query(None, description="Natural language query"),
    store: StringStore = Depends(get_store),
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    if not query:
        raise MissingQuery()

    filters = parse_natural_language_query(query)
    data = apply_filters(store.scan_all(), filters)

    return NaturalLanguageResponse(
        data=data,
        count=len(data),
        interpreted_query={
            "original": query,
            "parsed_filters": filters.applied(),
        },
    )


@router.get("/strings/{string_value}", response_model=StringRecord)
async def get_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    record = store.find_by_value(string_value)
    if record is None:
        raise NotFound(string_value)
    return record


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_string(string_value: str, store: StringStore = Depends(get_store)):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not store.delete(string_value):
        raise NotFound(string_value)
    logger.info(f"Deleted string of length {len(string_value)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
