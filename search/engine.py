"""
search/engine.py - Advocate Query Processor

Runs the full search pipeline over an in-memory record collection:

    records -> filter -> sort -> paginate -> SearchResult

search() is a pure function. It reads the shared collection, allocates a
fresh result and never raises for a resolved AdvocateQuery, so any number of
requests can run it concurrently against the same records.
"""

import logging
from typing import Sequence

from schemas import Advocate
from search.filters import apply_filters
from search.models import AdvocateQuery, SearchResult, count_pages
from search.pagination import paginate
from search.sorting import apply_sorting

logger = logging.getLogger(__name__)


def search(records: Sequence[Advocate], query: AdvocateQuery) -> SearchResult:
    """
    Filter, sort and paginate the record collection.

    Args:
        records: Immutable record collection
        query: Resolved search request

    Returns:
        SearchResult with the requested page, the pre-pagination total and
        an echo of the resolved filters
    """
    matched = apply_filters(records, query)
    ordered = apply_sorting(matched, query.sort, query.direction)
    page = paginate(ordered, query.page, query.limit)

    total = len(matched)
    logger.info(
        f"Search matched {total} of {len(records)} advocates "
        f"(page={query.page}, limit={query.limit}, returned={len(page)})"
    )

    return SearchResult(
        data=page,
        total=total,
        page=query.page,
        limit=query.limit,
        total_pages=count_pages(total, query.limit),
        filters=query.filters(),
    )
