"""Chain API client for reading TransEOS contract tables."""

import asyncio
import json
import logging
from typing import Any, List, Optional, Union

import aiohttp

from ..errors import UpstreamError
from ..shared.types import Network
from .error import ErrorResponse
from .types import OrderFilters, PaginatedResult, asset_symbol, paginate
from .validation import validate_account

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECS = 30

ALLOWANCE_TABLE = "allowed"
ORDERS_TABLE = "orders"

# Rows requested per get_table_rows call; nodeos answers 10 when unset
TABLE_ROWS_LIMIT = 1000

# nodeos reads the raw body as JSON whatever the content type says
FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded; charset=UTF-8"}


class ChainApiClient:
    """Client for the node's /v1/chain read endpoints.

    Example:
        ```python
        network = Network(host="127.0.0.1", protocol="http", port=8888)
        async with ChainApiClient(network) as client:
            page = await client.get_balance("transledger", "alice", symbol="TBTC")
            print(page.docs)
        ```
    """

    def __init__(
        self,
        network: Network,
        timeout: int = DEFAULT_TIMEOUT_SECS,
        headers: Optional[dict[str, str]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Create a client for the given network.

        Args:
            network: Node endpoint
            timeout: Request timeout in seconds
            headers: Optional additional headers for all requests
            session: Optional session to reuse; it is not closed by this client
        """
        self._network = network
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = dict(FORM_HEADERS)
        if headers:
            self._headers.update(headers)
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        """Get the node base URL."""
        return self._network.base_url

    async def __aenter__(self) -> "ChainApiClient":
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client opened it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _handle_response(self, response: aiohttp.ClientResponse) -> Any:
        """Decode a 2xx response or map the node's error body to UpstreamError."""
        if 200 <= response.status < 300:
            try:
                return await response.json(content_type=None)
            except (ValueError, json.JSONDecodeError) as e:
                raise UpstreamError("DeserializeError", f"Failed to deserialize response: {e}")

        # Error bodies are not always UTF-8
        error_text = await response.text(errors="replace")
        try:
            error_msg = ErrorResponse.from_dict(json.loads(error_text)).get_message()
        except (ValueError, AttributeError, json.JSONDecodeError):
            error_msg = error_text or "Unknown error"
        raise UpstreamError("HttpError", f"Request failed with status {response.status}: {error_msg}")

    async def _post(self, endpoint: str, body: dict) -> Any:
        """POST body to /v1/chain/{endpoint} and return the decoded JSON.

        Raises:
            UpstreamError: On any transport or endpoint failure
        """
        url = f"{self.base_url}/v1/chain/{endpoint}"
        logger.debug(f"POST {url} {body}")
        session = await self._ensure_session()
        try:
            async with session.post(url, data=json.dumps(body), headers=self._headers) as response:
                return await self._handle_response(response)
        except UpstreamError as e:
            logger.error(f"Chain API error on {endpoint}: {e.message}")
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Chain API request to {endpoint} failed: {e!r}")
            raise UpstreamError(type(e).__name__, str(e) or "Request failed")

    # =========================================================================
    # Raw chain endpoints
    # =========================================================================

    async def get_currency_balance(
        self, code: str, account: str, symbol: Optional[str] = None
    ) -> List[str]:
        """Get the balances of account on token contract code.

        Returns:
            Asset strings such as ["10.0000 TBTC"]
        """
        body = {"code": code, "account": account}
        if symbol:
            body["symbol"] = symbol
        data = await self._post("get_currency_balance", body)
        if not isinstance(data, list):
            raise UpstreamError("DeserializeError", f"Expected a list of balances, got {data!r}")
        return data

    async def get_table_rows(
        self, code: str, scope: str, table: str, limit: int = TABLE_ROWS_LIMIT
    ) -> List[dict]:
        """Get all rows of a contract table in JSON form.

        Follows the node's ``more``/``next_key`` cursor until the table is
        exhausted, requesting limit rows per call.
        """
        body = {"code": code, "scope": scope, "table": table, "json": True, "limit": limit}
        rows: List[dict] = []
        while True:
            data = await self._post("get_table_rows", body)
            page = data.get("rows") if isinstance(data, dict) else None
            if not isinstance(page, list):
                raise UpstreamError("DeserializeError", f"Expected table rows, got {data!r}")
            rows.extend(page)

            if not data.get("more"):
                return rows
            next_key = data.get("next_key")
            if not next_key:
                logger.warning(
                    f"Table {code}/{scope}/{table} has more rows but the node sent no next_key; "
                    f"returning the first {len(rows)}"
                )
                return rows
            body = dict(body, lower_bound=next_key)

    # =========================================================================
    # Contract queries
    # =========================================================================

    async def get_balance(
        self,
        code: str,
        account: str,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        """Get the balances of account, optionally for one symbol.

        Raises:
            ValidationError: If account is missing
            UpstreamError: If the node request fails
        """
        validate_account(account)
        balances = await self.get_currency_balance(code, account, symbol)
        if symbol:
            balances = [b for b in balances if asset_symbol(b) == symbol]
        return paginate(balances, page, limit)

    async def get_allowance(
        self,
        code: str,
        account: str,
        spender: Optional[str] = None,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        """Get the allowances granted by account.

        Args:
            code: Token contract account
            account: Account owning the allowance table
            spender: Keep only allowances for this spender
            symbol: Keep only allowances in this currency

        Raises:
            ValidationError: If account is missing
            UpstreamError: If the node request fails
        """
        validate_account(account)
        rows = await self.get_table_rows(code, account, ALLOWANCE_TABLE)
        if spender:
            rows = [row for row in rows if row.get("spender") == spender]
        if symbol:
            rows = [row for row in rows if asset_symbol(row.get("quantity")) == symbol]
        return paginate(rows, page, limit)

    async def get_orders(
        self,
        code: str,
        filters: Optional[Union[OrderFilters, dict]] = None,
    ) -> PaginatedResult:
        """Get the orders stored by the exchange contract code.

        Raises:
            UpstreamError: If the node request fails
        """
        if filters is None:
            filters = OrderFilters()
        elif isinstance(filters, dict):
            filters = OrderFilters.from_dict(filters)
        rows = await self.get_table_rows(code, code, ORDERS_TABLE)
        return paginate(filters.apply(rows), filters.page, filters.limit)
