"""Exceptions raised by the TransEOS SDK.

Every error carries the ``name``/``status_code``/``message`` triple that
callers of the SDK rely on; ``to_dict()`` renders it with the public
``statusCode`` key.
"""

from typing import Optional


class TransEosError(Exception):
    """Base exception for all TransEOS SDK errors."""

    status_code = 400

    def __init__(self, name: str, message: str, status_code: Optional[int] = None):
        self.name = name
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(f"{name}: {message}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "statusCode": self.status_code,
            "message": self.message,
        }


class ValidationError(TransEosError):
    """Raised when a caller argument is missing or malformed."""

    def __init__(self, field: str, name: str, message: str):
        self.field = field
        super().__init__(name, message, 400)


class InvalidArgumentError(ValidationError):
    """Raised when the amount formatter receives an unusable argument."""

    def __init__(self, field: str, message: str):
        super().__init__(field, "Invalid argument", message)


class EncodingError(TransEosError):
    """Raised when a name or symbol cannot be encoded."""

    def __init__(self, message: str):
        super().__init__(type(self).__name__, message, 400)


class InvalidCharacterError(EncodingError):
    """Raised when a character is outside the account name character set."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"character {char!r} is not allowed in character set for names"
        )


class NameTooLongError(EncodingError):
    """Raised when an account name exceeds 13 characters."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"string is too long to be a valid name: {value!r} ({len(value)} > 13)"
        )


class InvalidTrailingCharError(EncodingError):
    """Raised when the 13th character of a name maps above 15."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"thirteenth character in name cannot be a letter that comes after j: {char!r}"
        )


class InvalidSymbolCharError(EncodingError):
    """Raised when a symbol code contains anything but A-Z."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"only uppercase letters allowed in symbol_code string, got {char!r}"
        )


class SymbolTooLongError(EncodingError):
    """Raised when a symbol code exceeds 7 characters."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"string is too long to be a valid symbol_code: {value!r}")


class AuthError(TransEosError):
    """Raised when the wallet cannot authorize an action."""

    def __init__(self, name: str, message: str = "Please provide an authenticated wallet."):
        super().__init__(name, message, 400)


class MissingWalletError(AuthError):
    """Raised when no wallet is passed to a submitting method."""

    def __init__(self):
        super().__init__("No wallet has been passed")


class MissingAuthError(AuthError):
    """Raised when the wallet carries no auth information."""

    def __init__(self):
        super().__init__("No auth information has been passed with wallet")


class UpstreamError(TransEosError):
    """Transport or node failure while querying the chain (500)."""

    def __init__(self, name: str, message: str):
        super().__init__(name, message, 500)
