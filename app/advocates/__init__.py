"""
Advocate directory package.

Exposes a single blueprint (see `routes.py`) with a paginated listing and a
free-text search over the advocates table. Query-string validation lives in
`validation.py` and the search predicate in `search.py`; both endpoints share
the pagination path in `app.libs.pagination`.
"""
