"""Swap aggregator client module.

This module provides an HTTP client for a Jupiter-compatible aggregator:
price quotes and the decomposed instructions that execute them.

Example:
    ```python
    from step_staking.api import JupiterClient

    async with JupiterClient() as client:
        quote = await client.get_quote(input_mint, output_mint, 1_000_000)
        print(f"Expected output: {quote.out_amount}")
    ```
"""

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECS, JupiterClient

from .error import (
    ApiError,
    ServiceUnavailableError,
    QuoteNotFoundError,
    MalformedResponseError,
    ErrorResponse,
)

from .validation import (
    MAX_ACCOUNTS_LIMIT,
    MAX_SLIPPAGE_BPS,
    parse_account,
    parse_input_mint,
    parse_pubkey,
)

from .types import (
    QuoteResponse,
    RoutePlanStep,
    SwapInfo,
    SwapInstructions,
    parse_instruction,
)

__all__ = [
    # Client
    "JupiterClient",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_SECS",
    # Errors
    "ApiError",
    "ServiceUnavailableError",
    "QuoteNotFoundError",
    "MalformedResponseError",
    "ErrorResponse",
    # Validation
    "MAX_ACCOUNTS_LIMIT",
    "MAX_SLIPPAGE_BPS",
    "parse_account",
    "parse_input_mint",
    "parse_pubkey",
    # Types
    "QuoteResponse",
    "RoutePlanStep",
    "SwapInfo",
    "SwapInstructions",
    "parse_instruction",
]
