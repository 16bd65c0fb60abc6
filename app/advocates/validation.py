"""
Query-string validation for the advocate endpoints.

Every function here is pure: it either returns a normalized value or raises
``ValidationError`` carrying a stable code, and never touches the database.
"""

# python imports
import logging
import re
from typing import Mapping, NamedTuple, Optional

# project imports
from app.libs.errors import ValidationError

# app imports
from .constants import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    LIMIT_MAX,
    LIMIT_MIN,
    MAX_SEARCH_TERMS,
    PAGE_MAX,
    PAGE_MIN,
    QUERY_MAX_LENGTH,
    SUSPICIOUS_PATTERNS,
    VALIDATION_CODES,
)

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_WHITESPACE = re.compile(r"\s+")
_TAGS = re.compile(r"<[^>]*>")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class NormalizedQuery(NamedTuple):
    query: Optional[str]
    page: int
    limit: int


def validate_search_query(query: Optional[str]) -> Optional[str]:
    """Validate free-text search input.

    Returns the trimmed query, or None when there is nothing to filter on.
    """
    if not query or not query.strip():
        return None

    trimmed = query.strip()

    if len(trimmed) > QUERY_MAX_LENGTH:
        raise ValidationError(
            f"Query too long (max {QUERY_MAX_LENGTH} characters)",
            code=VALIDATION_CODES["QUERY_TOO_LONG"],
        )

    for pattern in SUSPICIOUS_PATTERNS:
        if pattern.search(trimmed):
            raise ValidationError(
                "Query contains invalid characters or patterns",
                code=VALIDATION_CODES["QUERY_INVALID_CHARS"],
            )

    terms = [term for term in _WHITESPACE.split(trimmed.lower()) if term]
    if len(terms) > MAX_SEARCH_TERMS:
        raise ValidationError(
            f"Too many search terms (max {MAX_SEARCH_TERMS})",
            code=VALIDATION_CODES["TOO_MANY_TERMS"],
        )

    return trimmed


def _parse_bounded_int(raw, default, minimum, maximum, label, range_code):
    if raw is None or str(raw).strip() == "":
        return default

    text = str(raw).strip()
    if not _INTEGER.fullmatch(text):
        raise ValidationError(
            f"{label} must be a valid number", code=VALIDATION_CODES["INVALID_NUMBER"]
        )

    out_of_range = ValidationError(
        f"{label} must be between {minimum} and {maximum}", code=range_code
    )
    try:
        value = int(text)
    except ValueError:
        # Digit strings past the interpreter's conversion limit
        raise out_of_range from None

    if value < minimum or value > maximum:
        raise out_of_range
    return value


def validate_page(page: Optional[str]) -> int:
    """Parse the page parameter, defaulting to the first page"""
    return _parse_bounded_int(
        page,
        DEFAULT_PAGE,
        PAGE_MIN,
        PAGE_MAX,
        "Page",
        VALIDATION_CODES["PAGE_OUT_OF_RANGE"],
    )


def validate_limit(limit: Optional[str]) -> int:
    """Parse the limit parameter, defaulting to DEFAULT_LIMIT rows"""
    return _parse_bounded_int(
        limit,
        DEFAULT_LIMIT,
        LIMIT_MIN,
        LIMIT_MAX,
        "Limit",
        VALIDATION_CODES["LIMIT_OUT_OF_RANGE"],
    )


def sanitize_query(query: str) -> str:
    """
    Clean an already validated query before it is matched against rows.

    Removes control characters and HTML-like tags, drops backslashes and
    collapses whitespace. Applying it twice gives the same result as once.
    This is cleanup, not a security boundary; the validator decides what is
    accepted.
    """
    cleaned = _CONTROL_CHARS.sub("", query.strip())
    cleaned = _WHITESPACE.sub(" ", cleaned)
    cleaned = _TAGS.sub("", cleaned)
    cleaned = cleaned.replace("\\", "")
    # Tag removal can leave doubled or edge spaces behind
    return _WHITESPACE.sub(" ", cleaned).strip()


def validate_search_params(args: Mapping[str, Optional[str]]) -> NormalizedQuery:
    """Validate q, page and limit in that order; the first failure wins"""
    try:
        query = validate_search_query(args.get("q"))
        page = validate_page(args.get("page"))
        limit = validate_limit(args.get("limit"))
    except ValidationError as e:
        logger.info(f"Rejected search parameters ({e.code}): {e.message}")
        raise

    if query is not None:
        query = sanitize_query(query) or None

    return NormalizedQuery(query=query, page=page, limit=limit)


def validate_list_params(args: Mapping[str, Optional[str]]) -> NormalizedQuery:
    """Validate page and limit for the unfiltered listing"""
    try:
        page = validate_page(args.get("page"))
        limit = validate_limit(args.get("limit"))
    except ValidationError as e:
        logger.info(f"Rejected list parameters ({e.code}): {e.message}")
        raise

    return NormalizedQuery(query=None, page=page, limit=limit)
