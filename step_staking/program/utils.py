"""Utility functions for the Step staking program module."""

import struct

from Crypto.Hash import SHA256
from solders.pubkey import Pubkey

from .constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    DISCRIMINATOR_SIZE,
    GLOBAL_NAMESPACE,
    PUBKEY_SIZE,
    TOKEN_PROGRAM_ID,
)


def sha256(data: bytes) -> bytes:
    """Compute the SHA-256 digest of data."""
    return SHA256.new(data).digest()


def sighash(name: str, namespace: str = GLOBAL_NAMESPACE) -> bytes:
    """Compute the 8-byte entry point discriminator for a program method.

    discriminator = sha256("<namespace>:<name>")[:8]
    """
    preimage = f"{namespace}:{name}".encode("ascii")
    return sha256(preimage)[:DISCRIMINATOR_SIZE]


def decode_u8(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 8-bit integer."""
    return struct.unpack_from("<B", data, offset)[0]


def decode_u32(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 32-bit integer (little-endian)."""
    return struct.unpack_from("<I", data, offset)[0]


def decode_u64(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 64-bit integer (little-endian)."""
    return struct.unpack_from("<Q", data, offset)[0]


def decode_bool(data: bytes, offset: int = 0) -> bool:
    """Decode a boolean from a single byte.

    Raises:
        ValueError: If not enough bytes available
    """
    if offset >= len(data):
        raise ValueError(f"Not enough bytes for bool at offset {offset}")
    return data[offset] != 0


def decode_pubkey(data: bytes, offset: int = 0) -> Pubkey:
    """Decode a Pubkey from 32 bytes.

    Raises:
        ValueError: If not enough bytes available for Pubkey
    """
    if offset + PUBKEY_SIZE > len(data):
        raise ValueError(
            f"Not enough bytes for Pubkey at offset {offset}: "
            f"need {PUBKEY_SIZE} bytes, have {len(data) - offset}"
        )
    return Pubkey.from_bytes(data[offset : offset + PUBKEY_SIZE])


def get_associated_token_address(
    owner: Pubkey,
    mint: Pubkey,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Pubkey:
    """Derive the associated token account address for a wallet and mint."""
    address, _ = Pubkey.find_program_address(
        [bytes(owner), bytes(token_program_id), bytes(mint)],
        ASSOCIATED_TOKEN_PROGRAM_ID,
    )
    return address
