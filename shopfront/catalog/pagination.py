"""Page slicing for the product listing.

Pages are 1-based. Nothing here clamps the requested page: asking for a
page past ``page_count`` yields an empty slice, so callers check the range
before navigating.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")

PAGE_SIZE = 12


def _check(page: int, page_size: int) -> None:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    if page < 1:
        raise ValueError("page must be >= 1")


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    return math.ceil(total / page_size) if total > 0 else 0


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> List[T]:
    _check(page, page_size)
    start = (page - 1) * page_size
    end = min(page * page_size, len(items))
    return list(items[start:end])


def page_window(total: int, page: int, page_size: int = PAGE_SIZE) -> Tuple[int, int]:
    """1-based (first, last) item numbers shown on ``page``; (0, 0) when empty."""
    _check(page, page_size)
    end = min(page * page_size, total)
    start = (page - 1) * page_size + 1
    if start > end:
        return (0, 0)
    return (start, end)
