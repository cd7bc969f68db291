"""
search - Advocate Query Processor

Public API:
- search(): filter, sort and paginate a record collection
- build_query(): turn raw query-string values into an AdvocateQuery
- AdvocateQuery, SearchResult, SearchFilters, SortField, SortDirection
"""

from search.engine import search
from search.params import build_query
from search.models import (
    AdvocateQuery,
    SearchFilters,
    SearchResult,
    SortDirection,
    SortField,
)

__all__ = [
    "search",
    "build_query",
    "AdvocateQuery",
    "SearchFilters",
    "SearchResult",
    "SortDirection",
    "SortField",
]
