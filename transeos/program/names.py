"""Name and symbol encoding for the TransEOS exchange contract.

Order keys are derived on-chain from the owner's account name, the offered
symbol and the creation timestamp. The functions here reproduce that
derivation bit for bit using unsigned 64-bit arithmetic.
"""

from .constants import MAX_NAME_LEN, MAX_SYMBOL_LEN, U64_MASK
from ..errors import (
    InvalidCharacterError,
    InvalidSymbolCharError,
    InvalidTrailingCharError,
    NameTooLongError,
    SymbolTooLongError,
)


def char_to_value(c: str) -> int:
    """Map an account name character to its 5-bit value.

    Raises:
        InvalidCharacterError: If c is not one of '.', '1'-'5', 'a'-'z'
    """
    if c == ".":
        return 0
    if "1" <= c <= "5":
        return ord(c) - ord("0")
    if "a" <= c <= "z":
        return ord(c) - ord("a") + 6
    raise InvalidCharacterError(c)


def string_to_name(value: str) -> int:
    """Encode an account name as a uint64.

    Raises:
        NameTooLongError: If the name is longer than 13 characters
        InvalidCharacterError: If a character is outside the name charset
        InvalidTrailingCharError: If the 13th character maps above 15
    """
    if len(value) > MAX_NAME_LEN:
        raise NameTooLongError(value)
    if not value:
        return 0

    n = min(len(value), 12)
    result = 0
    for c in value[:n]:
        result = ((result << 5) | char_to_value(c)) & U64_MASK

    result = (result << (4 + 5 * (12 - n))) & U64_MASK

    if len(value) == MAX_NAME_LEN:
        v = char_to_value(value[12])
        if v > 15:
            raise InvalidTrailingCharError(value[12])
        result |= v

    return result


def string_to_symbol_code(value: str) -> int:
    """Encode a symbol code (e.g. "TBTC") as a uint64.

    The first character lands in the least significant byte.

    Raises:
        SymbolTooLongError: If the symbol is longer than 7 characters
        InvalidSymbolCharError: If a character is not A-Z
    """
    if len(value) > MAX_SYMBOL_LEN:
        raise SymbolTooLongError(value)

    result = 0
    for c in reversed(value):
        if not "A" <= c <= "Z":
            raise InvalidSymbolCharError(c)
        result = ((result << 8) | ord(c)) & U64_MASK
    return result


def get_key_for_order(account: str, symbol: str, timestamp: int) -> str:
    """Derive the order key for an order created by account.

    The key is name(account) + symbol_code(symbol) + timestamp with uint64
    wraparound, rendered as a decimal string.

    Args:
        account: Account name of the order owner
        symbol: Symbol offered by the order
        timestamp: Creation time in milliseconds since the epoch

    Returns:
        The order key as a decimal string
    """
    name = string_to_name(account)
    code = string_to_symbol_code(symbol)
    key = (name + code + (int(timestamp) & U64_MASK)) & U64_MASK
    return str(key)
