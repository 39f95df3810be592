"""Type definitions for the Step staking program module."""

import struct
from dataclasses import dataclass
from typing import Optional

from solders.pubkey import Pubkey

from .constants import MAX_U8, MAX_U64
from .errors import AmountOverflowError, AmountUnderflowError


@dataclass(frozen=True)
class StakeArgs:
    """Arguments of the staking program's ``stake`` entry point.

    Raises:
        ValueError: If nonce is outside [0, 255]
        AmountUnderflowError: If amount is negative
        AmountOverflowError: If amount exceeds u64
    """

    nonce: int
    amount: int

    def __post_init__(self) -> None:
        if not 0 <= self.nonce <= MAX_U8:
            raise ValueError(f"nonce out of range: {self.nonce} (must be 0-{MAX_U8})")
        if self.amount < 0:
            raise AmountUnderflowError(self.amount)
        if self.amount > MAX_U64:
            raise AmountOverflowError(self.amount)

    def serialize(self) -> bytes:
        """Serialize as nonce (u8) || amount (u64 LE), no length prefix."""
        return struct.pack("<BQ", self.nonce, self.amount)


@dataclass
class Mint:
    """SPL Token mint account data."""

    mint_authority: Optional[Pubkey]
    supply: int
    decimals: int
    is_initialized: bool
    freeze_authority: Optional[Pubkey]
