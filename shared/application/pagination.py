"""
Paging arithmetic shared by list use cases.
"""
import math


def total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show total rows, limit per page."""
    return math.ceil(total / limit) if limit > 0 else 0
