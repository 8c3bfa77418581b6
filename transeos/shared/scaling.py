"""Asset amount formatting for the TransEOS SDK."""

import decimal
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_DOWN
from typing import Union

from ..errors import InvalidArgumentError

Quantity = Union[str, int, float, Decimal]


@dataclass(frozen=True)
class AssetFormat:
    """Formatting configuration for one amount.

    Passed explicitly to every formatting call so that concurrent calls
    never share a decimal context.
    """

    decimal_places: int
    rounding: str = ROUND_DOWN


def parse_quantity(quantity: Quantity) -> Decimal:
    """Parse a quantity in base 10 with arbitrary precision.

    Floats are parsed from their shortest repr, so 0.1 stays 0.1.

    Raises:
        InvalidArgumentError: If quantity is not a finite decimal number
    """
    if isinstance(quantity, bool):
        raise InvalidArgumentError("quantity", f"Quantity must be numeric, got {quantity!r}")
    if isinstance(quantity, Decimal):
        value = quantity
    else:
        if isinstance(quantity, float):
            quantity = repr(quantity)
        try:
            value = Decimal(str(quantity).strip())
        except (InvalidOperation, ValueError, TypeError):
            raise InvalidArgumentError(
                "quantity", f"Quantity is not a decimal number: {quantity!r}"
            )
    if not value.is_finite():
        raise InvalidArgumentError("quantity", f"Quantity must be finite, got {quantity!r}")
    return value


def format_amount(quantity: Quantity, fmt: AssetFormat) -> str:
    """Format a quantity with exactly fmt.decimal_places fractional digits.

    Raises:
        InvalidArgumentError: If the quantity or the format is invalid
    """
    places = fmt.decimal_places
    if places is None or isinstance(places, bool) or not isinstance(places, int):
        raise InvalidArgumentError(
            "decimals", "Please provide a number of decimal for this currency."
        )
    if places < 0:
        raise InvalidArgumentError(
            "decimals", f"Number of decimals must not be negative, got {places}"
        )

    value = parse_quantity(quantity)
    exponent = Decimal(1).scaleb(-places)

    with decimal.localcontext() as ctx:
        # quantize fails if the coefficient does not fit the precision
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        result = value.quantize(exponent, rounding=fmt.rounding)
        if result.is_zero():
            # -0.001 truncates to -0.00
            result = result.copy_abs()

    return f"{result:f}"


def format_asset(
    quantity: Quantity,
    decimals: int,
    symbol: str,
    rounding: str = ROUND_DOWN,
) -> str:
    """Format a quantity as a chain asset string, e.g. "1.2300 TBTC".

    The value is truncated (never rounded up) to decimals fractional
    digits unless another rounding mode is passed.

    Args:
        quantity: Amount as a string, int, float or Decimal
        decimals: Number of fractional digits of the currency
        symbol: Currency symbol
        rounding: A decimal rounding mode (default ROUND_DOWN)

    Returns:
        The asset string "<value> <SYMBOL>"

    Raises:
        InvalidArgumentError: If decimals or symbol is missing, or the
            quantity cannot be parsed
    """
    if not symbol or not isinstance(symbol, str):
        raise InvalidArgumentError("symbol", "Please provide a token symbol.")
    amount = format_amount(quantity, AssetFormat(decimal_places=decimals, rounding=rounding))
    return f"{amount} {symbol}"
