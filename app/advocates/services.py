# python imports
import logging
from typing import List

# package imports
from sqlalchemy import func, select
from sqlalchemy.sql.elements import ColumnElement

# project imports
from app.libs.pagination import Paginator

# app imports
from .models import Advocate
from .search import build_search_predicate
from .validation import NormalizedQuery

logger = logging.getLogger(__name__)


class AdvocateRepository:
    """Read access to the advocates table.

    Built once per application and handed to the request path through
    ``app.extensions``; it holds the Flask-SQLAlchemy handle, not a session.
    """

    def __init__(self, db):
        self.db = db

    def fetch_page(
        self, predicate: ColumnElement, offset: int, limit: int
    ) -> List[Advocate]:
        stmt = (
            select(Advocate)
            .where(predicate)
            .order_by(Advocate.id)
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.session.scalars(stmt))

    def count(self, predicate: ColumnElement) -> int:
        stmt = select(func.count()).select_from(Advocate).where(predicate)
        return self.db.session.scalar(stmt) or 0


class AdvocateService:
    def __init__(self, repository: AdvocateRepository):
        self.repository = repository

    def list_advocates(self, params: NormalizedQuery):
        """Get one page of all advocates"""
        return self._paginate(params, build_search_predicate(None))

    def search_advocates(self, params: NormalizedQuery):
        """Get one page of advocates matching every term of the query"""
        result = self._paginate(params, build_search_predicate(params.query))
        result["query"] = params.query
        logger.debug(
            f"Search {params.query!r} matched {result['pagination']['total']} advocates"
        )
        return result

    def _paginate(self, params: NormalizedQuery, predicate: ColumnElement):
        paginator = Paginator(
            self.repository, predicate, page=params.page, per_page=params.limit
        )
        result = paginator.paginate()

        return {"data": result["items"], "pagination": result["pagination"]}
