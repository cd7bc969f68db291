"""
search/filters.py - Filter Stage of the Query Processor

Each active parameter of an AdvocateQuery becomes one predicate over a
record. A record matches when every predicate accepts it. Predicates are
pure, so the order they are applied in does not change the result set.
"""

import logging
from typing import Callable, Iterable, List

from schemas import Advocate
from search.models import AdvocateQuery

logger = logging.getLogger(__name__)

Predicate = Callable[[Advocate], bool]


# ==============================================================================
# PREDICATES
# ==============================================================================


def matches_text(term: str) -> Predicate:
    """
    Free-text predicate: case-insensitive substring match against any of
    first name, last name, city, degree, a specialty, or the years of
    experience written as a decimal string.
    """
    needle = term.lower()

    def predicate(advocate: Advocate) -> bool:
        return (
            needle in advocate.first_name.lower()
            or needle in advocate.last_name.lower()
            or needle in advocate.city.lower()
            or needle in advocate.degree.lower()
            or any(needle in specialty.lower() for specialty in advocate.specialties)
            or needle in str(advocate.years_of_experience)
        )

    return predicate


def matches_city(city: str) -> Predicate:
    needle = city.lower()
    return lambda advocate: needle in advocate.city.lower()


def matches_degree(degree: str) -> Predicate:
    """Degree codes match exactly, case included"""
    return lambda advocate: advocate.degree == degree


def matches_specialty(specialty: str) -> Predicate:
    needle = specialty.lower()
    return lambda advocate: any(needle in s.lower() for s in advocate.specialties)


def min_experience(years: int) -> Predicate:
    return lambda advocate: advocate.years_of_experience >= years


def max_experience(years: int) -> Predicate:
    return lambda advocate: advocate.years_of_experience <= years


# ==============================================================================
# FILTER APPLICATION
# ==============================================================================


def build_predicates(query: AdvocateQuery) -> List[Predicate]:
    """
    Turn the active parameters of a query into predicates.

    Args:
        query: Resolved search request

    Returns:
        List of predicates, empty when no filter is active
    """
    predicates = []

    if query.query:
        predicates.append(matches_text(query.query))

    if query.city:
        predicates.append(matches_city(query.city))

    if query.degree:
        predicates.append(matches_degree(query.degree))

    if query.specialty:
        predicates.append(matches_specialty(query.specialty))

    if query.min_experience is not None:
        predicates.append(min_experience(query.min_experience))

    if query.max_experience is not None:
        predicates.append(max_experience(query.max_experience))

    return predicates


def apply_filters(records: Iterable[Advocate], query: AdvocateQuery) -> List[Advocate]:
    """
    Keep the records accepted by every active predicate, in input order.

    Args:
        records: Record collection
        query: Resolved search request

    Returns:
        New list of matching records
    """
    predicates = build_predicates(query)
    matched = [
        advocate for advocate in records
        if all(predicate(advocate) for predicate in predicates)
    ]
    logger.debug(f"{len(predicates)} active filters matched {len(matched)} advocates")
    return matched
