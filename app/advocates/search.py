"""
Search predicate construction.

A query is split into whitespace-separated terms. Each term must appear, as a
case-insensitive substring, in at least one searchable field of an advocate;
every term must match for the advocate to be included (term-AND, field-OR).
So "oncology austin" matches an advocate whose specialties mention oncology
and whose city is Austin.
"""

# python imports
import re
from typing import List, Optional

# package imports
from sqlalchemy import String, and_, cast, or_, true
from sqlalchemy.sql.elements import ColumnElement

# app imports
from .models import Advocate

LIKE_ESCAPE = "/"

_WHITESPACE = re.compile(r"\s+")


def split_terms(query: Optional[str]) -> List[str]:
    """Lower-cased, non-empty terms of a query"""
    if not query:
        return []
    return [term for term in _WHITESPACE.split(query.lower()) if term]


def _like_pattern(term: str) -> str:
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


def searchable_columns() -> List[ColumnElement]:
    """Columns a term is matched against, non-text ones rendered as text"""
    return [
        Advocate.first_name,
        Advocate.last_name,
        Advocate.city,
        Advocate.degree,
        cast(Advocate.specialties, String),
        cast(Advocate.years_of_experience, String),
        cast(Advocate.phone_number, String),
    ]


def term_condition(term: str) -> ColumnElement:
    pattern = _like_pattern(term)
    return or_(
        *[
            column.ilike(pattern, escape=LIKE_ESCAPE)
            for column in searchable_columns()
        ]
    )


def build_search_predicate(query: Optional[str]) -> ColumnElement:
    """
    Build the filter for a sanitized query.

    No query (or one with no terms) yields an always-true predicate, so the
    search endpoint degrades to the plain listing.
    """
    terms = split_terms(query)
    if not terms:
        return true()
    return and_(*[term_condition(term) for term in terms])

