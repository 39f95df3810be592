"""Protocol constants for the Step staking program."""

from solders.pubkey import Pubkey

# ============================================================================
# PROGRAM IDS
# ============================================================================

STAKING_PROGRAM_ID = Pubkey.from_string("Stk5NCWomVN3itaFjLu382u9ibb5jMSHEsh6CuhaGjB")

TOKEN_PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")

TOKEN_2022_PROGRAM_ID = Pubkey.from_string("TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb")

ASSOCIATED_TOKEN_PROGRAM_ID = Pubkey.from_string(
    "ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL"
)

# ============================================================================
# MINTS
# ============================================================================

# Intermediate asset: the token that gets staked.
STEP_MINT = Pubkey.from_string("StepAscQoEioFxxWGnh2sLBDFp9d8rvKz2Yp39iDpyT")

# Receipt asset minted by the staking program.
XSTEP_MINT = Pubkey.from_string("xStpgUCss9piqeFUk2iLVcvJEGhAdJxJQuwLkXP555G")

# Wrapped native SOL.
NATIVE_MINT = Pubkey.from_string("So11111111111111111111111111111111111111112")

NATIVE_SYMBOL = "SOL"

NATIVE_DECIMALS = 9
STEP_DECIMALS = 9

# ============================================================================
# DERIVATION
# ============================================================================

MAX_BUMP_SEED = 255

# ============================================================================
# INSTRUCTION ENCODING
# ============================================================================

# Anchor-style sighash namespace for program entry points.
GLOBAL_NAMESPACE = "global"
STAKE_METHOD = "stake"
DISCRIMINATOR_SIZE = 8

# ============================================================================
# SIZES / LIMITS
# ============================================================================

PUBKEY_SIZE = 32
MINT_SIZE = 82
MAX_U8 = 255
MAX_U64 = 18446744073709551615

STAKE_SUCCESS_MESSAGE = "Stake successfully completed"
