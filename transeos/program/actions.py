"""Action builders for the TransEOS contracts.

Every builder validates its arguments, formats the amounts it carries and
returns an ActionIntent whose ``data`` uses the field names of the on-chain
action.
"""

import time
from typing import Callable, Optional

from ..shared.scaling import Quantity, format_asset
from .constants import (
    ACTION_APPROVE,
    ACTION_CANCEL_ORDER,
    ACTION_CREATE,
    ACTION_CREATE_ORDER,
    ACTION_EDIT_ORDER,
    ACTION_ISSUE,
    ACTION_RETIRE_ORDER,
    ACTION_SETTLE_ORDERS,
    ACTION_TRANSFER,
    ACTION_TRANSFER_FROM,
    DEFAULT_PERMISSION,
    FEE_DECIMALS,
    FEE_SYMBOL,
)
from .names import get_key_for_order
from .types import ActionIntent, Authorization
from .validation import (
    APPROVE_FIELDS,
    CANCEL_ORDER_FIELDS,
    CREATE_FIELDS,
    CREATE_ORDER_FIELDS,
    EDIT_ORDER_FIELDS,
    ISSUE_FIELDS,
    RETIRE_ORDER_FIELDS,
    SETTLE_ORDERS_FIELDS,
    TRANSFER_FIELDS,
    TRANSFER_FROM_FIELDS,
    validate_fields,
)


def current_time_ms() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


def default_memo(symbol: str) -> str:
    # Shared by issue, transfer and transferfrom
    return f"Issue {symbol}"


def _action(contract: str, name: str, actor: str, permission: str, data: dict) -> ActionIntent:
    return ActionIntent(
        account=contract,
        name=name,
        authorization=[Authorization(actor=actor, permission=permission)],
        data=data,
    )


# =============================================================================
# Basic contract
# =============================================================================


def build_create_action(
    contract: str,
    issuer: str,
    max_supply: Quantity,
    decimals: int,
    symbol: str,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the create action for a new currency.

    Authorized by the contract account itself.
    """
    validate_fields(
        CREATE_FIELDS,
        {"issuer": issuer, "max_supply": max_supply, "decimals": decimals, "symbol": symbol},
    )
    return _action(
        contract,
        ACTION_CREATE,
        contract,
        permission,
        {
            "issuer": issuer,
            "max_supply": format_asset(max_supply, decimals, symbol),
        },
    )


def build_issue_action(
    contract: str,
    issuer: str,
    to: str,
    quantity: Quantity,
    decimals: int,
    symbol: str,
    memo: Optional[str] = None,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the issue action, authorized by the currency issuer."""
    validate_fields(
        ISSUE_FIELDS,
        {"to": to, "quantity": quantity, "decimals": decimals, "symbol": symbol},
    )
    return _action(
        contract,
        ACTION_ISSUE,
        issuer,
        permission,
        {
            "to": to,
            "quantity": format_asset(quantity, decimals, symbol),
            "memo": memo or default_memo(symbol),
        },
    )


def build_transfer_action(
    contract: str,
    from_account: str,
    to: str,
    quantity: Quantity,
    decimals: int,
    symbol: str,
    memo: Optional[str] = None,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the transfer action, authorized by the sending account."""
    validate_fields(
        TRANSFER_FIELDS,
        {
            "from": from_account,
            "to": to,
            "quantity": quantity,
            "decimals": decimals,
            "symbol": symbol,
        },
    )
    return _action(
        contract,
        ACTION_TRANSFER,
        from_account,
        permission,
        {
            "from": from_account,
            "to": to,
            "quantity": format_asset(quantity, decimals, symbol),
            "memo": memo or default_memo(symbol),
        },
    )


def build_transfer_from_action(
    contract: str,
    from_account: str,
    to: str,
    spender: str,
    quantity: Quantity,
    decimals: int,
    symbol: str,
    memo: Optional[str] = None,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the transferfrom action.

    Moves tokens out of from_account on the authority of spender, who must
    have been approved by from_account beforehand.
    """
    validate_fields(
        TRANSFER_FROM_FIELDS,
        {
            "from": from_account,
            "to": to,
            "spender": spender,
            "quantity": quantity,
            "decimals": decimals,
            "symbol": symbol,
        },
    )
    return _action(
        contract,
        ACTION_TRANSFER_FROM,
        spender,
        permission,
        {
            "from": from_account,
            "to": to,
            "spender": spender,
            "quantity": format_asset(quantity, decimals, symbol),
            "memo": memo or default_memo(symbol),
        },
    )


def build_approve_action(
    contract: str,
    owner: str,
    spender: str,
    quantity: Quantity,
    decimals: int,
    symbol: str,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the approve action, letting spender move quantity on behalf of owner."""
    validate_fields(
        APPROVE_FIELDS,
        {
            "owner": owner,
            "spender": spender,
            "quantity": quantity,
            "decimals": decimals,
            "symbol": symbol,
        },
    )
    return _action(
        contract,
        ACTION_APPROVE,
        owner,
        permission,
        {
            "owner": owner,
            "spender": spender,
            "quantity": format_asset(quantity, decimals, symbol),
        },
    )


# =============================================================================
# Exchange contract
# =============================================================================


def build_create_order_action(
    exchange: str,
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
    now_ms: Callable[[], int] = current_time_ms,
) -> ActionIntent:
    """Build the createorder action.

    The order key is derived from user, base_symbol and the creation
    timestamp. Fees are always expressed in GIZMO.

    Args:
        exchange: Exchange contract account
        user: Account offering base_amount (authorizes the action)
        sender: Relayer account collecting the fees
        base_amount: Amount offered
        base_decimals: Decimals of the offered currency
        base_symbol: Symbol of the offered currency
        counter_amount: Amount wanted in return
        counter_decimals: Decimals of the wanted currency
        counter_symbol: Symbol of the wanted currency
        fees_amount: Relayer fee, in GIZMO
        expires: Expiration time in milliseconds since the epoch
        memo: Optional memo (defaults to "Issue order <key>")
        permission: Permission level of user
        now_ms: Clock returning the creation timestamp in milliseconds
    """
    validate_fields(
        CREATE_ORDER_FIELDS,
        {
            "user": user,
            "sender": sender,
            "base_amount": base_amount,
            "base_decimals": base_decimals,
            "base_symbol": base_symbol,
            "counter_amount": counter_amount,
            "counter_decimals": counter_decimals,
            "counter_symbol": counter_symbol,
            "expires": expires,
        },
    )
    timestamp = now_ms()
    key = get_key_for_order(user, base_symbol, timestamp)

    return _action(
        exchange,
        ACTION_CREATE_ORDER,
        user,
        permission,
        {
            "user": user,
            "sender": sender,
            "key": key,
            "base": format_asset(base_amount, base_decimals, base_symbol),
            "counter": format_asset(counter_amount, counter_decimals, counter_symbol),
            "fees": format_asset(fees_amount or 0, FEE_DECIMALS, FEE_SYMBOL),
            "memo": memo or f"Issue order {key}",
            "timestamp": timestamp,
            "expires": expires,
        },
    )


def build_edit_order_action(
    exchange: str,
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
    """Build the editorder action.

    Only the amounts and the expiration of an order can change.
    """
    validate_fields(
        EDIT_ORDER_FIELDS,
        {
            "user": user,
            "key": key,
            "base_amount": base_amount,
            "base_decimals": base_decimals,
            "base_symbol": base_symbol,
            "counter_amount": counter_amount,
            "counter_decimals": counter_decimals,
            "counter_symbol": counter_symbol,
            "expires": expires,
        },
    )
    return _action(
        exchange,
        ACTION_EDIT_ORDER,
        user,
        permission,
        {
            "key": key,
            "base": format_asset(base_amount, base_decimals, base_symbol),
            "counter": format_asset(counter_amount, counter_decimals, counter_symbol),
            "expires": expires,
        },
    )


def build_cancel_order_action(
    exchange: str,
    user: str,
    key: str,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the cancelorder action (owner only)."""
    validate_fields(CANCEL_ORDER_FIELDS, {"user": user, "key": key})
    return _action(exchange, ACTION_CANCEL_ORDER, user, permission, {"key": key})


def build_retire_order_action(
    exchange: str,
    sender: str,
    key: str,
    permission: str = DEFAULT_PERMISSION,
) -> ActionIntent:
    """Build the retireorder action.

    Anybody may retire an order once it has expired.
    """
    validate_fields(RETIRE_ORDER_FIELDS, {"sender": sender, "key": key})
    return _action(exchange, ACTION_RETIRE_ORDER, sender, permission, {"key": key})


def build_settle_orders_action(
    exchange: str,
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
    """Build the settleorders action for a matched maker/taker pair.

    Args:
        maker_base_amount: Paid by the maker to the taker
        maker_counter_amount: Deducted from the maker's counter amount
        taker_base_amount: Paid by the taker to the maker
        taker_counter_amount: Deducted from the taker's counter amount
    """
    validate_fields(
        SETTLE_ORDERS_FIELDS,
        {
            "sender": sender,
            "maker_key": maker_key,
            "taker_key": taker_key,
            "maker_base_amount": maker_base_amount,
            "maker_base_decimals": maker_base_decimals,
            "maker_base_symbol": maker_base_symbol,
            "maker_counter_amount": maker_counter_amount,
            "maker_counter_decimals": maker_counter_decimals,
            "maker_counter_symbol": maker_counter_symbol,
            "taker_base_amount": taker_base_amount,
            "taker_base_decimals": taker_base_decimals,
            "taker_base_symbol": taker_base_symbol,
            "taker_counter_amount": taker_counter_amount,
            "taker_counter_decimals": taker_counter_decimals,
            "taker_counter_symbol": taker_counter_symbol,
        },
    )
    return _action(
        exchange,
        ACTION_SETTLE_ORDERS,
        sender,
        permission,
        {
            "maker": maker_key,
            "taker": taker_key,
            "quantity_maker": format_asset(maker_base_amount, maker_base_decimals, maker_base_symbol),
            "deduct_maker": format_asset(maker_counter_amount, maker_counter_decimals, maker_counter_symbol),
            "quantity_taker": format_asset(taker_base_amount, taker_base_decimals, taker_base_symbol),
            "deduct_taker": format_asset(taker_counter_amount, taker_counter_decimals, taker_counter_symbol),
            "memo": memo or "",
        },
    )
