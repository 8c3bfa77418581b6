"""Order table query types for the chain API."""

from dataclasses import dataclass
from typing import Any, List, Optional


def asset_symbol(asset: Any) -> Optional[str]:
    """Return the symbol of an asset string such as "1.0000 TBTC"."""
    if not isinstance(asset, str):
        return None
    parts = asset.split()
    return parts[1] if len(parts) > 1 else None


@dataclass
class OrderFilters:
    """Optional filters for the exchange's order table.

    Every filter that is set must match (filters are ANDed).
    """

    user: Optional[str] = None
    sender: Optional[str] = None
    base_symbol: Optional[str] = None
    counter_symbol: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None

    def matches(self, row: dict) -> bool:
        if self.user and row.get("user") != self.user:
            return False
        if self.sender and row.get("sender") != self.sender:
            return False
        if self.base_symbol and asset_symbol(row.get("base")) != self.base_symbol:
            return False
        if self.counter_symbol and asset_symbol(row.get("counter")) != self.counter_symbol:
            return False
        return True

    def apply(self, rows: List[dict]) -> List[dict]:
        return [row for row in rows if self.matches(row)]

    @classmethod
    def from_dict(cls, data: dict) -> "OrderFilters":
        """Create from a dictionary using either camelCase or snake_case keys."""
        return cls(
            user=data.get("user"),
            sender=data.get("sender"),
            base_symbol=data.get("baseSymbol", data.get("base_symbol")),
            counter_symbol=data.get("counterSymbol", data.get("counter_symbol")),
            page=data.get("page"),
            limit=data.get("limit"),
        )
