"""
Translate a (sort_by, sort_order) pair into a Django order_by argument.
"""
from typing import Collection


def order_by_clause(sort_by: str, sort_order: str, allowed: Collection[str], default: str) -> str:
    field = sort_by if sort_by in allowed else default
    return f"-{field}" if sort_order == 'desc' else field
