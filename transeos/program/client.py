"""Main clients for the TransEOS SDK."""

from typing import Any, Callable, Optional, Union

from ..api.client import ChainApiClient
from ..api.types import OrderFilters, PaginatedResult
from ..errors import InvalidArgumentError
from ..shared.scaling import Quantity
from ..shared.types import ClientConfig
from .actions import (
    build_approve_action,
    build_cancel_order_action,
    build_create_action,
    build_create_order_action,
    build_edit_order_action,
    build_issue_action,
    build_retire_order_action,
    build_settle_orders_action,
    build_transfer_action,
    build_transfer_from_action,
    current_time_ms,
)
from .constants import DEFAULT_PERMISSION
from .types import ActionIntent
from .wallet import Wallet, require_wallet, send_actions


class TransEosClient:
    """Async client for the TransEOS basic and exchange contracts.

    Action methods return the ActionIntent they build without submitting
    it. Query methods read the contract tables through the chain API.

    Example:
        ```python
        config = ClientConfig(
            contract_address="transledger",
            exchange_address="gizmoexchnge",
            network=Network.from_url("http://127.0.0.1:8888"),
        )
        async with TransEosClient(config) as client:
            action = client.issue("alice", "100.5", 4, "TBTC")
            balances = await client.get_balance("alice", "TBTC")
        ```
    """

    def __init__(
        self,
        config: ClientConfig,
        api_client: Optional[ChainApiClient] = None,
        now_ms: Optional[Callable[[], int]] = None,
    ):
        """Initialize the client.

        Args:
            config: Contract accounts and node endpoint
            api_client: Chain API client (defaults to one for config.network)
            now_ms: Clock used for order timestamps, in milliseconds
        """
        self.config = config
        self.api = api_client or ChainApiClient(config.network)
        self._now_ms = now_ms or current_time_ms

    @property
    def contract_address(self) -> str:
        return self.config.contract_address

    @property
    def exchange_address(self) -> str:
        """Exchange contract account.

        Raises:
            InvalidArgumentError: If no exchange account is configured
        """
        if not self.config.exchange_address:
            raise InvalidArgumentError("exchangeAddress", "Exchange address is not configured")
        return self.config.exchange_address

    async def __aenter__(self):
        await self.api.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying chain API client."""
        await self.api.close()

    # =========================================================================
    # Basic contract actions
    # =========================================================================

    def create(
        self, issuer: str, max_supply: Quantity, decimals: int, symbol: str
    ) -> ActionIntent:
        """Build a create action for a new currency."""
        return build_create_action(self.contract_address, issuer, max_supply, decimals, symbol)

    def issue(
        self,
        to: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
        issuer: Optional[str] = None,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build an issue action.

        The action is authorized by issuer, or by the contract account when
        no issuer is given.
        """
        return build_issue_action(
            self.contract_address,
            issuer or self.contract_address,
            to,
            quantity,
            decimals,
            symbol,
            memo,
            permission,
        )

    def transfer(
        self,
        from_account: str,
        to: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build a transfer action."""
        return build_transfer_action(
            self.contract_address, from_account, to, quantity, decimals, symbol, memo, permission
        )

    def transferfrom(
        self,
        from_account: str,
        to: str,
        spender: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build a transferfrom action."""
        return build_transfer_from_action(
            self.contract_address,
            from_account,
            to,
            spender,
            quantity,
            decimals,
            symbol,
            memo,
            permission,
        )

    def approve(
        self,
        owner: str,
        spender: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build an approve action."""
        return build_approve_action(
            self.contract_address, owner, spender, quantity, decimals, symbol, permission
        )

    # =========================================================================
    # Exchange contract actions
    # =========================================================================

    def create_order(
        self,
        user: str,
        sender: str,
        base_amount: Quantity,
        base_decimals: int,
        base_symbol: str,
        counter_amount: Quantity,
        counter_decimals: int,
        counter_symbol: str,
        fees_amount: Quantity,
        expires: int,
        memo: Optional[str] = None,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build a createorder action."""
        return build_create_order_action(
            self.exchange_address,
            user,
            sender,
            base_amount,
            base_decimals,
            base_symbol,
            counter_amount,
            counter_decimals,
            counter_symbol,
            fees_amount,
            expires,
            memo,
            permission,
            now_ms=self._now_ms,
        )

    def edit_order(
        self,
        user: str,
        key: str,
        base_amount: Quantity,
        base_decimals: int,
        base_symbol: str,
        counter_amount: Quantity,
        counter_decimals: int,
        counter_symbol: str,
        expires: int,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build an editorder action."""
        return build_edit_order_action(
            self.exchange_address,
            user,
            key,
            base_amount,
            base_decimals,
            base_symbol,
            counter_amount,
            counter_decimals,
            counter_symbol,
            expires,
            permission,
        )

    def cancel_order(
        self, user: str, key: str, permission: str = DEFAULT_PERMISSION
    ) -> ActionIntent:
        """Build a cancelorder action."""
        return build_cancel_order_action(self.exchange_address, user, key, permission)

    def retire_order(
        self, sender: str, key: str, permission: str = DEFAULT_PERMISSION
    ) -> ActionIntent:
        """Build a retireorder action."""
        return build_retire_order_action(self.exchange_address, sender, key, permission)

    def settle_orders(
        self,
        sender: str,
        maker_key: str,
        taker_key: str,
        maker_base_amount: Quantity,
        maker_base_decimals: int,
        maker_base_symbol: str,
        maker_counter_amount: Quantity,
        maker_counter_decimals: int,
        maker_counter_symbol: str,
        taker_base_amount: Quantity,
        taker_base_decimals: int,
        taker_base_symbol: str,
        taker_counter_amount: Quantity,
        taker_counter_decimals: int,
        taker_counter_symbol: str,
        memo: Optional[str] = None,
        permission: str = DEFAULT_PERMISSION,
    ) -> ActionIntent:
        """Build a settleorders action."""
        return build_settle_orders_action(
            self.exchange_address,
            sender,
            maker_key,
            taker_key,
            maker_base_amount,
            maker_base_decimals,
            maker_base_symbol,
            maker_counter_amount,
            maker_counter_decimals,
            maker_counter_symbol,
            taker_base_amount,
            taker_base_decimals,
            taker_base_symbol,
            taker_counter_amount,
            taker_counter_decimals,
            taker_counter_symbol,
            memo,
            permission,
        )

    # =========================================================================
    # Queries
    # =========================================================================

    async def get_balance(
        self,
        account: str,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        """Get the token balances of account."""
        return await self.api.get_balance(self.contract_address, account, symbol, page, limit)

    async def get_allowance(
        self,
        account: str,
        spender: Optional[str] = None,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        """Get the allowances granted by account."""
        return await self.api.get_allowance(
            self.contract_address, account, spender, symbol, page, limit
        )

    async def get_orders(
        self, filters: Optional[Union[OrderFilters, dict]] = None
    ) -> PaginatedResult:
        """Get the orders stored by the exchange contract."""
        return await self.api.get_orders(self.exchange_address, filters)


class TransEosWalletClient:
    """Client that signs and broadcasts actions through a wallet.

    Every action method takes the wallet first, checks it can sign, builds
    the action with the wallet's permission and returns the chain receipt.
    Queries behave as in TransEosClient.

    Example:
        ```python
        async with TransEosWalletClient(config) as client:
            receipt = await client.transfer(wallet, "alice", "bob", "1.5", 4, "TBTC")
        ```
    """

    def __init__(
        self,
        config: ClientConfig,
        api_client: Optional[ChainApiClient] = None,
        now_ms: Optional[Callable[[], int]] = None,
    ):
        self.preview = TransEosClient(config, api_client, now_ms)

    @property
    def config(self) -> ClientConfig:
        return self.preview.config

    @property
    def api(self) -> ChainApiClient:
        return self.preview.api

    async def __aenter__(self):
        await self.preview.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self.preview.close()

    async def get_balance(
        self,
        account: str,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        return await self.preview.get_balance(account, symbol, page, limit)

    async def get_allowance(
        self,
        account: str,
        spender: Optional[str] = None,
        symbol: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PaginatedResult:
        return await self.preview.get_allowance(account, spender, symbol, page, limit)

    async def get_orders(
        self, filters: Optional[Union[OrderFilters, dict]] = None
    ) -> PaginatedResult:
        return await self.preview.get_orders(filters)

    # =========================================================================
    # Submitted actions
    # =========================================================================

    async def _submit(self, wallet: Wallet, action: ActionIntent) -> Any:
        return await send_actions(wallet, [action])

    async def create(
        self, wallet: Wallet, issuer: str, max_supply: Quantity, decimals: int, symbol: str
    ) -> Any:
        """Create a currency. Requires the contract account's active key."""
        require_wallet(wallet)
        action = self.preview.create(issuer, max_supply, decimals, symbol)
        return await self._submit(wallet, action)

    async def issue(
        self,
        wallet: Wallet,
        to: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
    ) -> Any:
        """Issue tokens, authorized by the wallet's account."""
        auth = require_wallet(wallet)
        action = self.preview.issue(
            to, quantity, decimals, symbol, memo, auth.account_name, auth.permission
        )
        return await self._submit(wallet, action)

    async def transfer(
        self,
        wallet: Wallet,
        from_account: str,
        to: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
    ) -> Any:
        """Transfer tokens on the authority of from_account."""
        auth = require_wallet(wallet)
        action = self.preview.transfer(
            from_account, to, quantity, decimals, symbol, memo, auth.permission
        )
        return await self._submit(wallet, action)

    async def transferfrom(
        self,
        wallet: Wallet,
        from_account: str,
        to: str,
        spender: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
        memo: Optional[str] = None,
    ) -> Any:
        """Transfer tokens of from_account on the authority of spender."""
        auth = require_wallet(wallet)
        action = self.preview.transferfrom(
            from_account, to, spender, quantity, decimals, symbol, memo, auth.permission
        )
        return await self._submit(wallet, action)

    async def approve(
        self,
        wallet: Wallet,
        owner: str,
        spender: str,
        quantity: Quantity,
        decimals: int,
        symbol: str,
    ) -> Any:
        """Approve spender on the authority of owner."""
        auth = require_wallet(wallet)
        action = self.preview.approve(owner, spender, quantity, decimals, symbol, auth.permission)
        return await self._submit(wallet, action)

    async def create_order(
        self,
        wallet: Wallet,
        user: str,
        sender: str,
        base_amount: Quantity,
        base_decimals: int,
        base_symbol: str,
        counter_amount: Quantity,
        counter_decimals: int,
        counter_symbol: str,
        fees_amount: Quantity,
        expires: int,
        memo: Optional[str] = None,
    ) -> Any:
        """Create an order on the authority of user."""
        auth = require_wallet(wallet)
        action = self.preview.create_order(
            user,
            sender,
            base_amount,
            base_decimals,
            base_symbol,
            counter_amount,
            counter_decimals,
            counter_symbol,
            fees_amount,
            expires,
            memo,
            auth.permission,
        )
        return await self._submit(wallet, action)

    async def edit_order(
        self,
        wallet: Wallet,
        user: str,
        key: str,
        base_amount: Quantity,
        base_decimals: int,
        base_symbol: str,
        counter_amount: Quantity,
        counter_decimals: int,
        counter_symbol: str,
        expires: int,
    ) -> Any:
        """Edit the amounts and expiration of an order."""
        auth = require_wallet(wallet)
        action = self.preview.edit_order(
            user,
            key,
            base_amount,
            base_decimals,
            base_symbol,
            counter_amount,
            counter_decimals,
            counter_symbol,
            expires,
            auth.permission,
        )
        return await self._submit(wallet, action)

    async def cancel_order(self, wallet: Wallet, user: str, key: str) -> Any:
        """Cancel an order owned by user."""
        auth = require_wallet(wallet)
        action = self.preview.cancel_order(user, key, auth.permission)
        return await self._submit(wallet, action)

    async def retire_order(self, wallet: Wallet, sender: str, key: str) -> Any:
        """Retire an expired order."""
        auth = require_wallet(wallet)
        action = self.preview.retire_order(sender, key, auth.permission)
        return await self._submit(wallet, action)

    async def settle_orders(
        self,
        wallet: Wallet,
        sender: str,
        maker_key: str,
        taker_key: str,
        maker_base_amount: Quantity,
        maker_base_decimals: int,
        maker_base_symbol: str,
        maker_counter_amount: Quantity,
        maker_counter_decimals: int,
        maker_counter_symbol: str,
        taker_base_amount: Quantity,
        taker_base_decimals: int,
        taker_base_symbol: str,
        taker_counter_amount: Quantity,
        taker_counter_decimals: int,
        taker_counter_symbol: str,
        memo: Optional[str] = None,
    ) -> Any:
        """Settle a matched maker/taker pair."""
        auth = require_wallet(wallet)
        action = self.preview.settle_orders(
            sender,
            maker_key,
            taker_key,
            maker_base_amount,
            maker_base_decimals,
            maker_base_symbol,
            maker_counter_amount,
            maker_counter_decimals,
            maker_counter_symbol,
            taker_base_amount,
            taker_base_decimals,
            taker_base_symbol,
            taker_counter_amount,
            taker_counter_decimals,
            taker_counter_symbol,
            memo,
            auth.permission,
        )
        return await self._submit(wallet, action)
