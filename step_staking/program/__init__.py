"""On-chain program interaction module for Step staking.

This module provides address derivation, instruction encoding and
transaction assembly for the Step staking program on Solana.
"""

from .accounts import deserialize_mint
from .constants import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    MAX_U64,
    MINT_SIZE,
    NATIVE_DECIMALS,
    NATIVE_MINT,
    STAKE_SUCCESS_MESSAGE,
    STAKING_PROGRAM_ID,
    STEP_DECIMALS,
    STEP_MINT,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    XSTEP_MINT,
)
from .errors import (
    AmountOverflowError,
    AmountUnderflowError,
    DerivationFailureError,
    InvalidAccountDataError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidMintAddressError,
    StepStakingError,
)
from .instructions import (
    STAKE_DISCRIMINATOR,
    build_create_associated_token_account_idempotent_instruction,
    build_stake_instruction,
    build_stake_instruction_data,
)
from .pda import create_program_address, find_program_address, get_vault_pda
from .transaction import (
    SEGMENT_ORDER,
    ActionTransaction,
    InstructionPlan,
    UnsignedTransaction,
    assemble_stake_transaction,
    build_instruction_plan,
)
from .types import Mint, StakeArgs
from .utils import get_associated_token_address, sha256, sighash

__all__ = [
    # Constants
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "MAX_U64",
    "MINT_SIZE",
    "NATIVE_DECIMALS",
    "NATIVE_MINT",
    "STAKE_SUCCESS_MESSAGE",
    "STAKING_PROGRAM_ID",
    "STEP_DECIMALS",
    "STEP_MINT",
    "TOKEN_2022_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "XSTEP_MINT",
    # Errors
    "StepStakingError",
    "InvalidAddressError",
    "InvalidMintAddressError",
    "InvalidAmountError",
    "AmountOverflowError",
    "AmountUnderflowError",
    "InvalidAccountDataError",
    "DerivationFailureError",
    # Types
    "Mint",
    "StakeArgs",
    # Account Deserialization
    "deserialize_mint",
    # PDA Functions
    "create_program_address",
    "find_program_address",
    "get_vault_pda",
    # Instruction Builders
    "STAKE_DISCRIMINATOR",
    "build_stake_instruction_data",
    "build_stake_instruction",
    "build_create_associated_token_account_idempotent_instruction",
    # Transaction Assembly
    "SEGMENT_ORDER",
    "InstructionPlan",
    "UnsignedTransaction",
    "ActionTransaction",
    "build_instruction_plan",
    "assemble_stake_transaction",
    # Utils
    "sha256",
    "sighash",
    "get_associated_token_address",
]
