"""
search/params.py - Query Descriptor Construction

Converts the raw query-string values of a search request into an
AdvocateQuery. This is the only place where request input is interpreted;
nothing here raises. Malformed numbers are dropped (filters) or replaced by
their defaults (page, limit), unknown sort fields disable sorting, and any
direction other than "desc" means ascending.
"""

from typing import Optional

from config import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from search.models import AdvocateQuery, SortDirection
from search.sorting import resolve_sort_field
from utils.query_params import clean_text, parse_int, parse_positive_int


def resolve_direction(value: Optional[str]) -> SortDirection:
    if value and value.strip().lower() == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC


def build_query(
        search: Optional[str] = None,
        query: Optional[str] = None,
        city: Optional[str] = None,
        degree: Optional[str] = None,
        specialty: Optional[str] = None,
        min_experience: Optional[str] = None,
        max_experience: Optional[str] = None,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        max_limit: int = MAX_PAGE_LIMIT,
) -> AdvocateQuery:
    """
    Build a resolved AdvocateQuery from raw parameter strings.

    Args:
        search: Free-text term; takes precedence over ``query``
        query: Free-text term used when ``search`` is absent
        city: City substring
        degree: Exact degree code
        specialty: Specialty substring
        min_experience: Minimum years, ignored unless it parses as an integer
        max_experience: Maximum years, ignored unless it parses as an integer
        sort: Attribute name to sort by
        direction: "asc" or "desc"
        page: Page number, defaults to 1
        limit: Page size, defaults to DEFAULT_PAGE_LIMIT, capped at ``max_limit``
        max_limit: Largest page size a client may request

    Returns:
        AdvocateQuery
    """
    return AdvocateQuery(
        query=clean_text(search) or clean_text(query),
        city=clean_text(city),
        degree=clean_text(degree),
        specialty=clean_text(specialty),
        min_experience=parse_int(clean_text(min_experience)),
        max_experience=parse_int(clean_text(max_experience)),
        sort=resolve_sort_field(sort),
        direction=resolve_direction(direction),
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_PAGE_LIMIT, maximum=max_limit),
    )
