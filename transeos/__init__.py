"""TransEOS SDK - Python SDK for the Transledger contracts on EOS.

This SDK provides three modules:
- `program`: action builders and clients for the basic and exchange contracts
- `api`: chain API client for balances, allowances and orders
- `shared`: network configuration and asset amount formatting

Example:
    from transeos import ClientConfig, Network, TransEosClient

    config = ClientConfig(
        contract_address="transledger",
        exchange_address="gizmoexchnge",
        network=Network.from_url("http://127.0.0.1:8888"),
    )
    async with TransEosClient(config) as client:
        action = client.transfer("alice", "bob", "1.5", 4, "TBTC")
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import shared
from . import api
from . import program

# ============================================================================
# ERRORS
# ============================================================================

from .errors import (
    TransEosError,
    ValidationError,
    InvalidArgumentError,
    EncodingError,
    InvalidCharacterError,
    NameTooLongError,
    InvalidTrailingCharError,
    InvalidSymbolCharError,
    SymbolTooLongError,
    AuthError,
    MissingWalletError,
    MissingAuthError,
    UpstreamError,
)

# ============================================================================
# CONVENIENCE RE-EXPORTS
# ============================================================================

from .shared import (
    AssetFormat,
    ClientConfig,
    Network,
    format_amount,
    format_asset,
)

from .program import (
    TransEosClient,
    TransEosWalletClient,
    ActionIntent,
    Authorization,
    WalletAuth,
    Wallet,
    send_actions,
    get_key_for_order,
    string_to_name,
    string_to_symbol_code,
)

from .api import ChainApiClient, OrderFilters, PaginatedResult

__all__ = [
    "__version__",
    # Modules
    "program",
    "api",
    "shared",
    # Errors
    "TransEosError",
    "ValidationError",
    "InvalidArgumentError",
    "EncodingError",
    "InvalidCharacterError",
    "NameTooLongError",
    "InvalidTrailingCharError",
    "InvalidSymbolCharError",
    "SymbolTooLongError",
    "AuthError",
    "MissingWalletError",
    "MissingAuthError",
    "UpstreamError",
    # Shared
    "AssetFormat",
    "ClientConfig",
    "Network",
    "format_amount",
    "format_asset",
    # Program
    "TransEosClient",
    "TransEosWalletClient",
    "ActionIntent",
    "Authorization",
    "WalletAuth",
    "Wallet",
    "send_actions",
    "get_key_for_order",
    "string_to_name",
    "string_to_symbol_code",
    # API
    "ChainApiClient",
    "OrderFilters",
    "PaginatedResult",
]
