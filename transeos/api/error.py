"""Error bodies returned by the node's chain API."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ErrorResponse:
    """Error body returned by a nodeos chain API endpoint."""

    code: Optional[int] = None
    message: Optional[str] = None
    what: Optional[str] = None

    def get_message(self) -> str:
        """Get the error message, preferring the node's detailed "what"."""
        return self.what or self.message or "Unknown error"

    @classmethod
    def from_dict(cls, data: dict) -> "ErrorResponse":
        """Create from dictionary."""
        error = data.get("error")
        what = error.get("what") if isinstance(error, dict) else error
        return cls(
            code=data.get("code"),
            message=data.get("message"),
            what=what,
        )
