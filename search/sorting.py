"""
search/sorting.py - Sort Stage of the Query Processor

Records are ordered by one attribute chosen from SortField. Strings compare
case-insensitively and numbers numerically. A record without a value for the
field (no id, no createdAt) always sorts last, in both directions.

Python's sort is stable, and the direction is applied inside the comparator,
so records with equal keys keep their input order whether the sort is
ascending or descending.
"""

from functools import cmp_to_key
from typing import Any, Callable, Dict, Iterable, List, Optional

from schemas import Advocate
from search.models import SortDirection, SortField

# ==============================================================================
# FIELD ACCESSORS
# ==============================================================================

SORT_ACCESSORS: Dict[SortField, Callable[[Advocate], Any]] = {
    SortField.ID: lambda a: a.id,
    SortField.FIRST_NAME: lambda a: a.first_name,
    SortField.LAST_NAME: lambda a: a.last_name,
    SortField.CITY: lambda a: a.city,
    SortField.DEGREE: lambda a: a.degree,
    SortField.YEARS_OF_EXPERIENCE: lambda a: a.years_of_experience,
    SortField.PHONE_NUMBER: lambda a: a.phone_number,
    SortField.CREATED_AT: lambda a: a.created_at,
}


def resolve_sort_field(name: Optional[str]) -> Optional[SortField]:
    """
    Map a raw sort parameter to a SortField.

    Returns:
        SortField, or None for a missing or unknown attribute name
    """
    if not name:
        return None
    try:
        return SortField(name)
    except ValueError:
        return None


def _normalize(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


# ==============================================================================
# COMPARATOR
# ==============================================================================


def compare_values(a: Any, b: Any, direction: SortDirection = SortDirection.ASC) -> int:
    """
    Three-way comparison of two attribute values.

    None is treated as undefined and placed after every defined value
    regardless of direction. Only comparisons between defined values are
    flipped for descending order.
    """
    if a is None and b is None:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1

    a, b = _normalize(a), _normalize(b)
    if a < b:
        result = -1
    elif a > b:
        result = 1
    else:
        return 0

    return -result if direction == SortDirection.DESC else result


def apply_sorting(
        records: Iterable[Advocate],
        field: Optional[SortField],
        direction: SortDirection = SortDirection.ASC
) -> List[Advocate]:
    """
    Sort records by one attribute.

    Args:
        records: Records to order
        field: Attribute to sort by; None keeps input order
        direction: Ascending or descending

    Returns:
        New sorted list
    """
    if field is None:
        return list(records)

    accessor = SORT_ACCESSORS[field]

    def comparator(left: Advocate, right: Advocate) -> int:
        return compare_values(accessor(left), accessor(right), direction)

    return sorted(records, key=cmp_to_key(comparator))
