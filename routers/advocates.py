"""
routers/advocates.py - Advocate Search Endpoint

Endpoints for the advocate directory:
- GET /api/advocates: Search, filter, sort and paginate advocates
"""

import logging
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query

import schemas
from records import get_advocate_records
from search import SearchResult, build_query, search

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Advocates"])


@router.get(
    "/advocates",
    response_model=SearchResult,
    summary="Search advocates",
    description="Filter, sort and paginate the advocate directory",
    responses={
        200: {"content": {"application/json": {"example": schemas.EXAMPLE_SEARCH_RESULT}}},
        500: {"model": schemas.ErrorResponse, "description": "Record source unavailable"},
    },
)
def search_advocates(
        search_term: Optional[str] = Query(None, alias="search", description="Free-text search term"),
        query: Optional[str] = Query(None, description="Free-text search term, used when 'search' is absent"),
        city: Optional[str] = Query(None, description="City substring (case-insensitive)"),
        degree: Optional[str] = Query(None, description="Exact degree code: MD, PhD, or MSW"),
        specialty: Optional[str] = Query(None, description="Specialty substring (case-insensitive)"),
        min_experience: Optional[str] = Query(None, alias="minExperience", description="Minimum years of experience"),
        max_experience: Optional[str] = Query(None, alias="maxExperience", description="Maximum years of experience"),
        sort: Optional[str] = Query(None, description="Attribute to sort by, e.g. yearsOfExperience"),
        direction: Optional[str] = Query(None, description="Sort direction: asc or desc"),
        page: Optional[str] = Query(None, description="Page number (default 1)"),
        limit: Optional[str] = Query(None, description="Page size (default 20)"),
        records: Tuple[schemas.Advocate, ...] = Depends(get_advocate_records),
):
    """
    Search advocates.

    All parameters are optional and received as raw strings. Malformed
    values never cause an error: numeric filters that do not parse are
    ignored, and page/limit fall back to their defaults.
    """
    advocate_query = build_query(
        search=search_term,
        query=query,
        city=city,
        degree=degree,
        specialty=specialty,
        min_experience=min_experience,
        max_experience=max_experience,
        sort=sort,
        direction=direction,
        page=page,
        limit=limit,
    )
    logger.info(f"Advocate search: {advocate_query.model_dump(exclude_none=True)}")

    return search(records, advocate_query)
