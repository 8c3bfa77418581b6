"""Declarative argument checks shared by the action builders and queries.

Each operation declares the arguments it requires, in the order they are
checked. ``validate_fields`` walks that list and raises on the first
argument that fails.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..errors import ValidationError

# An account-like argument must be a non-empty string
ACCOUNT = "account"
# A quantity, decimals count or key only has to be present and non-zero
REQUIRED = "required"


@dataclass(frozen=True)
class FieldRequirement:
    """One required argument and the error raised when it is missing."""

    field: str
    kind: str
    name: str
    message: str

    def is_satisfied(self, value: Any) -> bool:
        if self.kind == ACCOUNT:
            return isinstance(value, str) and bool(value)
        return bool(value)


def validate_fields(
    requirements: Sequence[FieldRequirement], values: Mapping[str, Any]
) -> None:
    """Check values against requirements in declared order.

    Raises:
        ValidationError: For the first requirement that is not satisfied
    """
    for requirement in requirements:
        if not requirement.is_satisfied(values.get(requirement.field)):
            raise ValidationError(requirement.field, requirement.name, requirement.message)
