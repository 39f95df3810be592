"""Account deserialization for the Step staking SDK."""

from typing import Optional

from solders.pubkey import Pubkey

from .constants import MINT_SIZE
from .errors import InvalidAccountDataError
from .types import Mint
from .utils import decode_bool, decode_pubkey, decode_u32, decode_u64, decode_u8


def _decode_option_pubkey(data: bytes, offset: int) -> Optional[Pubkey]:
    """Decode a COption<Pubkey>: u32 tag followed by 32 bytes."""
    tag = decode_u32(data, offset)
    if tag == 0:
        return None
    if tag != 1:
        raise InvalidAccountDataError(f"Invalid option tag {tag} at offset {offset}")
    return decode_pubkey(data, offset + 4)


def deserialize_mint(data: bytes) -> Mint:
    """Deserialize an SPL Token Mint account.

    Layout (82 bytes):
    - [0..36]: mint_authority (COption<Pubkey>)
    - [36..44]: supply (u64 LE)
    - [44]: decimals (u8)
    - [45]: is_initialized (bool)
    - [46..82]: freeze_authority (COption<Pubkey>)

    Token-2022 mints carry extensions after the base layout; only the base
    layout is read.
    """
    if len(data) < MINT_SIZE:
        raise InvalidAccountDataError(
            f"Mint data too short: {len(data)} bytes (expected {MINT_SIZE})"
        )

    mint = Mint(
        mint_authority=_decode_option_pubkey(data, 0),
        supply=decode_u64(data, 36),
        decimals=decode_u8(data, 44),
        is_initialized=decode_bool(data, 45),
        freeze_authority=_decode_option_pubkey(data, 46),
    )

    if not mint.is_initialized:
        raise InvalidAccountDataError("Mint is not initialized")

    return mint
