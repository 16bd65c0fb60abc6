from typing import Any, Dict, List, TypeVar
from math import ceil

from sqlalchemy.sql.elements import ColumnElement

T = TypeVar("T")  # Model type


def offset_for(page: int, per_page: int) -> int:
    """Number of rows to skip before the first row of ``page``"""
    return (page - 1) * per_page


def calculate_pagination(page: int, per_page: int, total: int) -> Dict[str, Any]:
    """
    Derive the pagination envelope for a page of results

    Args:
        page: Current page number (>= 1)
        per_page: Items per page (>= 1)
        total: Number of rows matching the active filter

    Returns:
        Dictionary containing page, limit, total, total_pages, has_next
        and has_prev. A page past the last one is not an error: it simply
        reports has_next=False.
    """
    total_pages: int = ceil(total / per_page) if total else 0

    return {
        "page": page,
        "limit": per_page,
        "total": total,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1,
    }


class Paginator:
    def __init__(
        self, repository, predicate: ColumnElement, page: int = 1, per_page: int = 20
    ) -> None:
        """
        Initialize paginator over a repository

        Args:
            repository: Object exposing fetch_page(predicate, offset, limit)
                and count(predicate)
            predicate: SQLAlchemy filter applied to both the page and the count
            page: Current page number (default: 1)
            per_page: Items per page (default: 20)
        """
        self.repository = repository
        self.predicate: ColumnElement = predicate
        self.page: int = page
        self.per_page: int = per_page

    @property
    def offset(self) -> int:
        return offset_for(self.page, self.per_page)

    def paginate(self) -> Dict[str, Any]:
        """
        Fetch the current page and the matching total

        Returns:
            Dictionary containing:
            - items: List of rows on the current page
            - pagination: Envelope from calculate_pagination
        """
        items: List[T] = self.repository.fetch_page(
            self.predicate, offset=self.offset, limit=self.per_page
        )
        total: int = self.repository.count(self.predicate)

        return {
            "items": items,
            "pagination": calculate_pagination(self.page, self.per_page, total),
        }
