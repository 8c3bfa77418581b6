"""Shared configuration, amount formatting and argument checks used across program and API modules."""

from .types import ClientConfig, Network
from .scaling import AssetFormat, Quantity, format_amount, format_asset, parse_quantity
from .validation import ACCOUNT, REQUIRED, FieldRequirement, validate_fields

__all__ = [
    "ClientConfig",
    "Network",
    "AssetFormat",
    "Quantity",
    "format_amount",
    "format_asset",
    "parse_quantity",
    "ACCOUNT",
    "REQUIRED",
    "FieldRequirement",
    "validate_fields",
]
