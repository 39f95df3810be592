"""Amount scaling utilities for the Step staking SDK."""

from decimal import Decimal, InvalidOperation
from typing import Union

from ..program.constants import MAX_U8, MAX_U64
from ..program.errors import (
    AmountOverflowError,
    AmountUnderflowError,
    InvalidAmountError,
)

AmountLike = Union[str, int, float, Decimal]


def parse_amount(value: AmountLike) -> Decimal:
    """Parse a human-entered amount into an exact Decimal.

    Floats are converted through their shortest repr so ``1.1`` stays
    ``Decimal("1.1")`` rather than its binary expansion.

    Raises:
        InvalidAmountError: If the value is not a finite decimal
        AmountUnderflowError: If the value is negative
    """
    if isinstance(value, bool):
        raise InvalidAmountError(value)

    try:
        if isinstance(value, float):
            amount = Decimal(repr(value))
        elif isinstance(value, str):
            amount = Decimal(value.strip())
        else:
            amount = Decimal(value)
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidAmountError(value) from e

    if not amount.is_finite():
        raise InvalidAmountError(value)
    if amount < 0:
        raise AmountUnderflowError(value)

    return amount


def to_base_units(value: AmountLike, decimals: int) -> int:
    """Scale a human-readable amount to integer base units.

    base_units = trunc(amount * 10^decimals)

    Fractional digits beyond the mint's precision are truncated toward zero.

    Args:
        value: Amount as entered by a user (e.g., "1.5")
        decimals: Mint decimals (u8)

    Returns:
        Amount in base units

    Raises:
        InvalidAmountError: If value is not a finite decimal
        AmountUnderflowError: If value is negative or truncates to zero
        AmountOverflowError: If the result does not fit in a u64
    """
    if not 0 <= decimals <= MAX_U8:
        raise ValueError(f"decimals out of range: {decimals} (must be 0-{MAX_U8})")

    amount = parse_amount(value)

    # Exact integer arithmetic on the decimal digits, independent of the
    # Decimal context precision.
    _, digits, exponent = amount.as_tuple()
    coefficient = int("".join(map(str, digits)))
    if coefficient == 0:
        raise AmountUnderflowError(value)

    # Bounds the exponent before any power of ten is built.
    if amount.adjusted() + decimals >= len(str(MAX_U64)):
        raise AmountOverflowError(value)

    shift = exponent + decimals
    if shift < -len(digits):
        base_units = 0
    elif shift >= 0:
        base_units = coefficient * 10**shift
    else:
        base_units = coefficient // 10 ** (-shift)

    if base_units == 0:
        raise AmountUnderflowError(value)
    if base_units > MAX_U64:
        raise AmountOverflowError(base_units)

    return base_units
