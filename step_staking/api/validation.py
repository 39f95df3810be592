"""Input validation utilities for the Step staking SDK."""

from typing import Callable, Optional

from solders.pubkey import Pubkey

from ..program.constants import NATIVE_MINT, NATIVE_SYMBOL
from ..program.errors import InvalidAddressError, InvalidMintAddressError, StepStakingError

MAX_SLIPPAGE_BPS = 10_000

# Upper bound on accounts a legacy transaction can reference.
MAX_ACCOUNTS_LIMIT = 64


def parse_pubkey(
    value: str,
    error_factory: Callable[[str], StepStakingError] = InvalidAddressError,
) -> Pubkey:
    """Parse a Base58 string into a Pubkey.

    Uses solders.Pubkey for proper validation including the 32-byte length
    check.

    Raises:
        The error produced by ``error_factory`` (InvalidAddressError by
        default) if the value is empty or not a valid pubkey
    """
    if not isinstance(value, str) or not value.strip():
        raise error_factory(str(value))

    try:
        return Pubkey.from_string(value.strip())
    except Exception as e:
        raise error_factory(value) from e


def parse_account(value: str) -> Pubkey:
    """Parse the wallet address performing the action."""
    return parse_pubkey(value, InvalidAddressError)


def parse_input_mint(value: Optional[str]) -> Optional[Pubkey]:
    """Parse an optional input mint.

    The literal ``"SOL"`` maps to the wrapped native mint.

    Raises:
        InvalidMintAddressError: If the value is not a valid pubkey
    """
    if value is None:
        return None
    if isinstance(value, str) and value.strip().upper() == NATIVE_SYMBOL:
        return NATIVE_MINT
    return parse_pubkey(value, InvalidMintAddressError)


def validate_slippage_bps(slippage_bps: Optional[int]) -> None:
    """Validate a slippage tolerance in basis points.

    Raises:
        ValueError: If slippage is outside [0, 10000]
    """
    if slippage_bps is None:
        return
    if not 0 <= slippage_bps <= MAX_SLIPPAGE_BPS:
        raise ValueError(f"slippage_bps must be 0-{MAX_SLIPPAGE_BPS}, got {slippage_bps}")


def validate_max_accounts(max_accounts: Optional[int]) -> None:
    """Validate the max-accounts route constraint.

    Raises:
        ValueError: If max_accounts is outside [1, 64]
    """
    if max_accounts is None:
        return
    if not 1 <= max_accounts <= MAX_ACCOUNTS_LIMIT:
        raise ValueError(f"max_accounts must be 1-{MAX_ACCOUNTS_LIMIT}, got {max_accounts}")
