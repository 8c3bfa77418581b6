"""Chain API client module for TransEOS.

This module reads balances, allowances and exchange orders from the
node's /v1/chain endpoints, with client-side filtering and pagination.

Example:
    ```python
    from transeos.api import ChainApiClient
    from transeos.shared import Network

    async with ChainApiClient(Network.from_url("http://127.0.0.1:8888")) as client:
        orders = await client.get_orders("gizmoexchnge", {"user": "alice"})
        print(f"Found {orders.total} orders")
    ```
"""

from .client import ChainApiClient, DEFAULT_TIMEOUT_SECS, TABLE_ROWS_LIMIT

from ..errors import UpstreamError
from .error import ErrorResponse

from .types import OrderFilters, PaginatedResult, asset_symbol, paginate

__all__ = [
    # Client
    "ChainApiClient",
    "DEFAULT_TIMEOUT_SECS",
    "TABLE_ROWS_LIMIT",
    # Errors
    "ErrorResponse",
    "UpstreamError",
    # Types
    "OrderFilters",
    "PaginatedResult",
    "asset_symbol",
    "paginate",
]
