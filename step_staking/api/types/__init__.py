"""API type definitions for the swap aggregator."""

from .quote import (
    QuoteResponse,
    RoutePlanStep,
    SwapInfo,
)

from .swap import (
    SwapInstructions,
    parse_instruction,
)

__all__ = [
    # Quote types
    "QuoteResponse",
    "RoutePlanStep",
    "SwapInfo",
    # Swap types
    "SwapInstructions",
    "parse_instruction",
]
