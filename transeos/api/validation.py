"""Argument checks for chain API queries."""

from ..shared.validation import REQUIRED, FieldRequirement, validate_fields

QUERY_ACCOUNT_FIELDS = (
    FieldRequirement("account", REQUIRED, "Missing arguments", "Account name is not provided!"),
)


def validate_account(account: str) -> None:
    """Raise ValidationError if no account name is given."""
    validate_fields(QUERY_ACCOUNT_FIELDS, {"account": account})
