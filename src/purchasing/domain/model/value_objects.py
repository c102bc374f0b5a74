"""Quantity value objects.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from purchasing.domain.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Bounds that keep running totals exact in the default 28-digit context
# ---------------------------------------------------------------------------
MAX_DECIMAL_PLACES = 6
MAX_QUANTITY = Decimal("1000000000000000")  # 10**15


@dataclass(frozen=True)
class _PositiveQuantity:
    """A strictly positive decimal quantity.

    Accepts ``int``, ``float``, ``str`` or ``Decimal`` and stores a
    ``Decimal``.  Floats go through ``str()`` first so ``10.0`` stays
    exactly ``10.0`` instead of picking up binary rounding noise.
    """

    value: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self._coerce(self.value))
        if self.value <= Decimal("0"):
            raise ValidationError("Quantity must be larger than 0")
        if self.value >= MAX_QUANTITY:
            raise ValidationError(f"Quantity must be less than {MAX_QUANTITY}")
        if self.value != self.value.quantize(Decimal(1).scaleb(-MAX_DECIMAL_PLACES)):
            raise ValidationError(
                f"Quantity supports at most {MAX_DECIMAL_PLACES} decimal places, got {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def _coerce(cls, raw: object) -> Decimal:
        if isinstance(raw, bool):
            raise ValidationError(f"Invalid {cls.__name__}: {raw!r}")
        if isinstance(raw, Decimal):
            result = raw
        else:
            try:
                result = Decimal(str(raw).strip())
            except (InvalidOperation, ValueError) as exc:
                raise ValidationError(f"Invalid {cls.__name__}: {raw!r}") from exc
        if not result.is_finite():
            raise ValidationError(f"Invalid {cls.__name__}: {raw!r}")
        return result


@dataclass(frozen=True)
class OrderedQuantity(_PositiveQuantity):
    """How much of a product was ordered on a purchase order line."""


@dataclass(frozen=True)
class ReceiptQuantity(_PositiveQuantity):
    """How much of a product was received (or reversed) on a goods receipt.

    Deliberately a separate type from ``OrderedQuantity``: the two never
    compare equal and one can't be passed where the other is expected
    without a type checker complaining.
    """
