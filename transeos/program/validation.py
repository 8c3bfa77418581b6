"""Argument requirements of the TransEOS contract actions.

Error names and messages are the ones callers of the SDK match on.
"""

from ..shared.validation import ACCOUNT, REQUIRED, FieldRequirement, validate_fields


def _account(field: str, label: str, message: str) -> FieldRequirement:
    return FieldRequirement(
        field, ACCOUNT, f"No {label} has been passed or it is not of type string", message
    )


def _required(field: str, label: str, message: str) -> FieldRequirement:
    return FieldRequirement(field, REQUIRED, f"No {label} has been passed", message)


def _decimals(field: str = "decimals", label: str = "decimals") -> FieldRequirement:
    return _required(field, label, "Please provide a number of decimal for this currency.")


def _symbol(field: str = "symbol", label: str = "symbol", message: str = "Please provide a token symbol.") -> FieldRequirement:
    return _account(field, label, message)


def _expires() -> FieldRequirement:
    return _required(
        "expires",
        "expire date",
        "Please provide an expire date (in miliseconds like Date.now()) for the order.",
    )


# =============================================================================
# Basic contract
# =============================================================================

CREATE_FIELDS = (
    _account("issuer", "issuer", "Please provide an issuer for the currency."),
    _required("max_supply", "maximum supply", "Please provide a maximum supply for the currency."),
    _decimals(),
    _symbol(),
)

ISSUE_FIELDS = (
    _account("to", "destination", "Please provide a destination (to) for the issuance."),
    _required("quantity", "quantity", "Please provide a quantity for the issuance."),
    _decimals(),
    _symbol(),
)

TRANSFER_FIELDS = (
    _account("from", "source account", "Please provide a source (from) for the transaction."),
    _account("to", "destination", "Please provide a destination (to) for the transaction."),
    _required("quantity", "quantity", "Please provide a quantity for the transaction."),
    _decimals(),
    _symbol(),
)

TRANSFER_FROM_FIELDS = (
    _account("from", "source account", "Please provide a source (from) for the transaction."),
    _account("to", "destination", "Please provide a destination (to) for the transaction."),
    _account("spender", "spender", "Please provide a spender for the transaction."),
    _required("quantity", "quantity", "Please provide a quantity for the transaction."),
    _decimals(),
    _symbol(),
)

APPROVE_FIELDS = (
    _account("owner", "owner", "Please provide an owner for the approval."),
    _account("spender", "spender", "Please provide a spender for the approval."),
    _required("quantity", "quantity", "Please provide a quantity for the approval."),
    _decimals(),
    _symbol(),
)

# =============================================================================
# Exchange contract
# =============================================================================

_ORDER_AMOUNT_FIELDS = (
    _required("base_amount", "offer quantity", "Please provide an offer quantity for the order."),
    _decimals("base_decimals", "offer decimals"),
    _symbol("base_symbol", "offer symbol", "Please provide a token symbol for the offer."),
    _required("counter_amount", "counter quantity", "Please provide a quantity for the order."),
    _required(
        "counter_decimals",
        "counter decimals",
        "Please provide a number of counter decimal for this currency.",
    ),
    _symbol("counter_symbol", "counter symbol", "Please provide a token symbol for the counter."),
)

CREATE_ORDER_FIELDS = (
    _account("user", "user", "Please provide a user for the order."),
    _account("sender", "sender", "Please provide a sender for the order."),
    *_ORDER_AMOUNT_FIELDS,
    _expires(),
)

EDIT_ORDER_FIELDS = (
    _account("user", "user", "Please provide a user for the order."),
    _required("key", "key", "Please provide a key identifying the order to modify."),
    *_ORDER_AMOUNT_FIELDS,
    _expires(),
)

CANCEL_ORDER_FIELDS = (
    _account("user", "user", "Please provide a user for the order."),
    _required("key", "key", "Please provide a key identifying the order to delete."),
)

RETIRE_ORDER_FIELDS = (
    _account("sender", "sender", "Please provide a sender for the order."),
    _required("key", "key", "Please provide a key identifying the order to retire."),
)

SETTLE_ORDERS_FIELDS = (
    _account("sender", "sender", "Please provide a sender for the action."),
    _required("maker_key", "maker key", "Please provide a maker key identifying the order to settle."),
    _required("taker_key", "taker key", "Please provide a taker key identifying the order to settle."),
    _required("maker_base_amount", "maker offer quantity", "Please provide a maker offer quantity."),
    _decimals("maker_base_decimals", "maker offer decimals"),
    _symbol("maker_base_symbol", "maker offer symbol", "Please provide a token symbol for the maker offer."),
    _required("maker_counter_amount", "maker counter quantity", "Please provide maker counter quantity."),
    _required(
        "maker_counter_decimals",
        "maker counter decimals",
        "Please provide a number of maker counter decimal for this currency.",
    ),
    _symbol("maker_counter_symbol", "maker counter symbol", "Please provide a token symbol for the maker counter."),
    _required("taker_base_amount", "taker offer quantity", "Please provide a taker offer quantity."),
    _decimals("taker_base_decimals", "taker offer decimals"),
    _symbol("taker_base_symbol", "taker offer symbol", "Please provide a token symbol for the taker offer."),
    _required("taker_counter_amount", "taker counter quantity", "Please provide a taker counter quantity."),
    _required(
        "taker_counter_decimals",
        "taker counter decimals",
        "Please provide a number of taker counter decimal for this currency.",
    ),
    _symbol("taker_counter_symbol", "taker counter symbol", "Please provide a token symbol for the taker counter."),
)
