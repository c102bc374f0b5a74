"""Identifiers for the aggregates a purchase order refers to.

Each aggregate owns its own identity; the purchase order only holds
these by value.  All three are UUID-backed strings.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import TypeVar

from purchasing.domain.exceptions import ValidationError

_IdentifierT = TypeVar("_IdentifierT", bound="_UuidIdentifier")


@dataclass(frozen=True)
class _UuidIdentifier:

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValidationError(f"{type(self).__name__} cannot be empty")

    def __str__(self) -> str:
        return self.value

    # --- Factories ------------------------------------------------------------

    @classmethod
    def from_string(cls: type[_IdentifierT], value: str) -> _IdentifierT:
        """Parse a UUID string, normalising it to canonical lowercase form."""
        try:
            parsed = uuid.UUID(str(value).strip())
        except ValueError as exc:
            raise ValidationError(
                f"Invalid {cls.__name__}: {value!r} is not a UUID"
            ) from exc
        return cls(str(parsed))

    @classmethod
    def generate(cls: type[_IdentifierT]) -> _IdentifierT:
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True)
class PurchaseOrderId(_UuidIdentifier):
    pass


@dataclass(frozen=True)
class SupplierId(_UuidIdentifier):
    pass


@dataclass(frozen=True)
class ProductId(_UuidIdentifier):
    pass
