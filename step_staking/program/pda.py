"""PDA (Program Derived Address) derivation functions for the Step staking SDK."""

from typing import List, Optional, Sequence, Tuple

from solders.pubkey import Pubkey

from .constants import MAX_BUMP_SEED, STAKING_PROGRAM_ID, STEP_MINT
from .errors import DerivationFailureError


def create_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey,
) -> Optional[Pubkey]:
    """Derive a single candidate program address.

    Returns None when solders rejects the candidate (it lies on the ed25519
    curve, or the seeds exceed the runtime limits).
    """
    # solders raises its native PubkeyError, which has no public import path.
    try:
        return Pubkey.create_program_address(list(seeds), program_id)
    except Exception:
        return None


def find_program_address(
    seeds: Sequence[bytes],
    program_id: Pubkey,
) -> Tuple[Pubkey, int]:
    """Find the first valid program address, searching bumps from 255 down.

    Same result as ``Pubkey.find_program_address``, but exhaustion surfaces
    as a typed error.

    Returns:
        (address, bump) where bump is the seed that produced the address

    Raises:
        DerivationFailureError: If no bump yields a valid address
    """
    base: List[bytes] = list(seeds)

    for bump in range(MAX_BUMP_SEED, -1, -1):
        address = create_program_address(base + [bytes([bump])], program_id)
        if address is not None:
            return address, bump

    raise DerivationFailureError(program_id)


def get_vault_pda(
    mint: Pubkey = STEP_MINT,
    program_id: Pubkey = STAKING_PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the staking vault PDA.

    Seeds: [mint]

    The bump doubles as the ``nonce`` argument of the stake instruction.
    """
    return find_program_address([bytes(mint)], program_id)
