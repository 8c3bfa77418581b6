"""Types for the chain query client."""

from .order import OrderFilters, asset_symbol
from .pagination import PaginatedResult, paginate

__all__ = [
    "OrderFilters",
    "asset_symbol",
    "PaginatedResult",
    "paginate",
]
