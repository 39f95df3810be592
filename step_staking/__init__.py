"""Step staking SDK - compose Step Finance stake transactions on Solana.

This SDK provides three main modules:
- `program`: address derivation, instruction encoding, transaction assembly
- `api`: swap aggregator client (quotes and swap instructions)
- `shared`: amount scaling

Example:
    from step_staking import StepStakingClient, StakingConfig

    async with StepStakingClient.from_config(StakingConfig.from_env()) as client:
        action = await client.build_stake_transaction(wallet, "1.5", input_mint)
        body = action.to_dict()
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import api
from . import program
from . import shared

from .client import StepStakingClient, parse_out_amount
from .config import StakingConfig

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM PROGRAM MODULE
# ============================================================================

from .program import (
    # Constants
    STAKING_PROGRAM_ID,
    STEP_MINT,
    XSTEP_MINT,
    NATIVE_MINT,
    TOKEN_PROGRAM_ID,
    ASSOCIATED_TOKEN_PROGRAM_ID,
    STEP_DECIMALS,
    NATIVE_DECIMALS,
    # Errors
    StepStakingError,
    InvalidAddressError,
    InvalidMintAddressError,
    InvalidAmountError,
    AmountOverflowError,
    AmountUnderflowError,
    InvalidAccountDataError,
    DerivationFailureError,
    # Address Derivation
    find_program_address,
    get_vault_pda,
    get_associated_token_address,
    # Instruction Encoding
    STAKE_DISCRIMINATOR,
    build_stake_instruction_data,
    build_stake_instruction,
    build_create_associated_token_account_idempotent_instruction,
    # Transaction Assembly
    InstructionPlan,
    UnsignedTransaction,
    ActionTransaction,
    assemble_stake_transaction,
)

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM API / SHARED MODULES
# ============================================================================

from .api import (
    JupiterClient,
    ApiError,
    ServiceUnavailableError,
    QuoteNotFoundError,
    MalformedResponseError,
    QuoteResponse,
    SwapInstructions,
)
from .shared import to_base_units

__all__ = [
    # Version
    "__version__",
    # Modules
    "api",
    "program",
    "shared",
    # Clients
    "StepStakingClient",
    "StakingConfig",
    "JupiterClient",
    "parse_out_amount",
    # Constants
    "STAKING_PROGRAM_ID",
    "STEP_MINT",
    "XSTEP_MINT",
    "NATIVE_MINT",
    "TOKEN_PROGRAM_ID",
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "STEP_DECIMALS",
    "NATIVE_DECIMALS",
    # Errors
    "StepStakingError",
    "InvalidAddressError",
    "InvalidMintAddressError",
    "InvalidAmountError",
    "AmountOverflowError",
    "AmountUnderflowError",
    "InvalidAccountDataError",
    "DerivationFailureError",
    "ApiError",
    "ServiceUnavailableError",
    "QuoteNotFoundError",
    "MalformedResponseError",
    # Address Derivation
    "find_program_address",
    "get_vault_pda",
    "get_associated_token_address",
    # Instruction Encoding
    "STAKE_DISCRIMINATOR",
    "build_stake_instruction_data",
    "build_stake_instruction",
    "build_create_associated_token_account_idempotent_instruction",
    # Transaction Assembly
    "InstructionPlan",
    "UnsignedTransaction",
    "ActionTransaction",
    "assemble_stake_transaction",
    # API Types
    "QuoteResponse",
    "SwapInstructions",
    # Scaling
    "to_base_units",
]
