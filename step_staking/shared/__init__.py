"""Shared utilities used across the program and API modules."""

from .scaling import AmountLike, parse_amount, to_base_units

__all__ = [
    "AmountLike",
    "parse_amount",
    "to_base_units",
]
