"""
search/pagination.py - Pagination Stage of the Query Processor
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, limit: int) -> List[T]:
    """
    Slice one page out of an ordered sequence.

    A page that starts past the end of the sequence is empty, not an error.

    Args:
        items: Filtered and sorted records
        page: 1-based page number (>= 1)
        limit: Page size (>= 1)

    Returns:
        Records in [(page - 1) * limit, page * limit)
    """
    start = (page - 1) * limit
    end = start + limit
    return list(items[start:end])
