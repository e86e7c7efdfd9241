"""Conversion between caller-supplied monetary amounts and stored cents."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .exceptions import InvalidAmountError

CENTS = Decimal(100)


def to_cents(amount: Any) -> int:
    """Validate a positive amount with at most two decimal places and return it in cents.

    Booleans and strings are rejected even though Python could coerce them.
    Floats go through ``str`` so ``100.01`` stays ``10001`` cents.
    """
    if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
        raise InvalidAmountError("Amount must be a number")
    try:
        value = Decimal(str(amount)) if isinstance(amount, float) else Decimal(amount)
    except InvalidOperation as exc:
        raise InvalidAmountError("Amount must be a number") from exc
    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Amount must be a positive finite number")
    cents = value * CENTS
    if cents != cents.to_integral_value():
        raise InvalidAmountError("Amount cannot have more than two decimal places")
    return int(cents)


def from_cents(cents: int) -> Decimal:
    return (Decimal(cents) / CENTS).quantize(Decimal("0.01"))
