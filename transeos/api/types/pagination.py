"""Pagination over rows returned by the chain API."""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional

from ...errors import InvalidArgumentError


@dataclass
class PaginatedResult:
    """One page of query results.

    ``total`` counts the filtered rows before the page is cut.
    """

    docs: List[Any] = field(default_factory=list)
    total: int = 0
    limit: int = 0
    page: int = 1
    pages: int = 1

    def to_dict(self) -> dict:
        return {
            "docs": list(self.docs),
            "total": self.total,
            "limit": self.limit,
            "page": self.page,
            "pages": self.pages,
        }


def _to_int(field: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(field, f"{field.capitalize()} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(field, f"{field.capitalize()} must be an integer, got {value!r}")


def paginate(
    rows: List[Any],
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> PaginatedResult:
    """Cut rows into the 1-indexed page of size limit.

    A missing page means the first one. A missing or zero limit returns
    every row as a single page.

    Raises:
        InvalidArgumentError: If page is not an integer of 1 or more, or
            limit is not a non-negative integer
    """
    total = len(rows)
    page = 1 if page is None else _to_int("page", page)
    if page < 1:
        raise InvalidArgumentError("page", f"Page must be 1 or greater, got {page}")
    limit = 0 if limit is None else _to_int("limit", limit)
    if limit < 0:
        raise InvalidArgumentError("limit", f"Limit must not be negative, got {limit}")
    if not limit:
        return PaginatedResult(docs=list(rows), total=total, limit=total, page=page, pages=1)

    start = (page - 1) * limit
    return PaginatedResult(
        docs=rows[start : start + limit],
        total=total,
        limit=limit,
        page=page,
        pages=math.ceil(total / limit),
    )
