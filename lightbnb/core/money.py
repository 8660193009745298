"""Conversion between major currency units and stored minor units."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from numbers import Real
from typing import NewType

Cents = NewType("Cents", int)

MINOR_UNITS_PER_MAJOR = 100


def to_minor_units(amount: object) -> Cents | object:
    """Convert a price in major units (dollars) to stored minor units (cents).

    Half cents round away from zero. Values that are not finite numbers
    (strings, NaN, infinity) are returned unchanged so the store rejects them.
    """

    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        return amount
    try:
        major = Decimal(str(amount))
    except InvalidOperation:
        return amount
    if not major.is_finite():
        return amount
    minor = (major * MINOR_UNITS_PER_MAJOR).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return Cents(int(minor))


def to_major_units(amount: int) -> Decimal:
    """Convert a stored minor-unit price back to major units for display."""

    return Decimal(amount) / MINOR_UNITS_PER_MAJOR
