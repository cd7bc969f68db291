"""
search/models.py - Data Models for Advocate Search

This module defines the data structures used by the query processor:
- SortField: The attributes a search may be ordered by
- SortDirection: Ascending or descending order
- AdvocateQuery: A resolved, typed search request
- SearchFilters: The filter echo returned to clients
- SearchResult: One page of matches plus pagination metadata
"""

import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from config import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT
from schemas import Advocate


class SortField(str, Enum):
    """Sortable advocate attributes, keyed by their wire names"""
    ID = "id"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    CITY = "city"
    DEGREE = "degree"
    YEARS_OF_EXPERIENCE = "yearsOfExperience"
    PHONE_NUMBER = "phoneNumber"
    CREATED_AT = "createdAt"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchFilters(BaseModel):
    """
    Echo of the resolved filter, sort and direction parameters.

    Malformed numeric parameters show up here as null, which is how the
    client can tell that they were ignored.
    """
    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = None
    city: Optional[str] = None
    degree: Optional[str] = None
    specialty: Optional[str] = None
    min_experience: Optional[int] = Field(None, alias="minExperience")
    max_experience: Optional[int] = Field(None, alias="maxExperience")
    sort: Optional[SortField] = None
    direction: SortDirection = SortDirection.ASC


class AdvocateQuery(BaseModel):
    """
    Structured search request, built once at the HTTP boundary.

    Every field is already coerced: the query processor never sees raw
    strings and never has to reject anything.

    Attributes:
        query: Free-text term matched across names, city, degree, specialties, experience
        city: Case-insensitive city substring
        degree: Exact, case-sensitive degree code
        specialty: Case-insensitive substring matched against any specialty
        min_experience: Inclusive lower bound on years of experience
        max_experience: Inclusive upper bound on years of experience
        sort: Attribute to order by, or None to keep input order
        direction: Sort direction
        page: 1-based page number
        limit: Page size, at least 1
    """
    model_config = ConfigDict(frozen=True)

    query: Optional[str] = None
    city: Optional[str] = None
    degree: Optional[str] = None
    specialty: Optional[str] = None
    min_experience: Optional[int] = None
    max_experience: Optional[int] = None
    sort: Optional[SortField] = None
    direction: SortDirection = SortDirection.ASC
    page: int = Field(DEFAULT_PAGE, ge=1)
    limit: int = Field(DEFAULT_PAGE_LIMIT, ge=1)

    def filters(self) -> SearchFilters:
        """Filter echo for the response envelope"""
        return SearchFilters(
            query=self.query,
            city=self.city,
            degree=self.degree,
            specialty=self.specialty,
            min_experience=self.min_experience,
            max_experience=self.max_experience,
            sort=self.sort,
            direction=self.direction,
        )


class SearchResult(BaseModel):
    """
    Complete search response: one page of matches plus metadata.

    Attributes:
        data: Matching advocates on the requested page
        total: Number of matches before pagination
        page: Requested page number
        limit: Page size
        total_pages: ceil(total / limit)
        filters: Echo of the resolved parameters
    """
    model_config = ConfigDict(populate_by_name=True)

    data: List[Advocate]
    total: int = 0
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_PAGE_LIMIT
    total_pages: int = Field(0, alias="totalPages")
    filters: SearchFilters = Field(default_factory=SearchFilters)


def count_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)
