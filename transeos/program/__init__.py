"""Contract interaction module for TransEOS.

This module provides the action builders, the order key encoder, the
wallet submission adapter and the clients for the TransEOS basic and
exchange contracts.
"""

from .constants import (
    DEFAULT_PERMISSION,
    FEE_DECIMALS,
    FEE_SYMBOL,
)
from .types import ActionIntent, Authorization, WalletAuth
from .names import (
    char_to_value,
    get_key_for_order,
    string_to_name,
    string_to_symbol_code,
)
from .validation import FieldRequirement, validate_fields
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
from .wallet import Wallet, require_wallet, send_actions, transaction_options
from .client import TransEosClient, TransEosWalletClient

__all__ = [
    # Constants
    "DEFAULT_PERMISSION",
    "FEE_DECIMALS",
    "FEE_SYMBOL",
    # Types
    "ActionIntent",
    "Authorization",
    "WalletAuth",
    # Name encoding
    "char_to_value",
    "get_key_for_order",
    "string_to_name",
    "string_to_symbol_code",
    # Validation
    "FieldRequirement",
    "validate_fields",
    # Action builders
    "build_approve_action",
    "build_cancel_order_action",
    "build_create_action",
    "build_create_order_action",
    "build_edit_order_action",
    "build_issue_action",
    "build_retire_order_action",
    "build_settle_orders_action",
    "build_transfer_action",
    "build_transfer_from_action",
    "current_time_ms",
    # Wallet
    "Wallet",
    "require_wallet",
    "send_actions",
    "transaction_options",
    # Clients
    "TransEosClient",
    "TransEosWalletClient",
]
