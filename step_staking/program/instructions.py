"""Instruction builders for the Step staking SDK.

This module provides functions to build the staking program's ``stake``
instruction and the associated token account bootstrap it depends on.
"""

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey
from spl.token.instructions import create_idempotent_associated_token_account

from .constants import (
    STAKE_METHOD,
    STAKING_PROGRAM_ID,
    STEP_MINT,
    TOKEN_PROGRAM_ID,
    XSTEP_MINT,
)
from .pda import get_vault_pda
from .types import StakeArgs
from .utils import get_associated_token_address, sighash

STAKE_DISCRIMINATOR = sighash(STAKE_METHOD)


def build_stake_instruction_data(nonce: int, amount: int) -> bytes:
    """Encode the payload of the ``stake`` entry point.

    Data: [sha256("global:stake")[:8], nonce (u8), amount (u64 LE)]

    Raises:
        AmountOverflowError: If amount exceeds u64
        AmountUnderflowError: If amount is negative
    """
    return STAKE_DISCRIMINATOR + StakeArgs(nonce=nonce, amount=amount).serialize()


def build_create_associated_token_account_idempotent_instruction(
    payer: Pubkey,
    owner: Pubkey,
    mint: Pubkey,
    token_program_id: Pubkey = TOKEN_PROGRAM_ID,
) -> Instruction:
    """Build the Associated Token program's CreateIdempotent instruction.

    Succeeds whether or not the account already exists.
    """
    return create_idempotent_associated_token_account(payer, owner, mint, token_program_id)


def build_stake_instruction(
    user: Pubkey,
    amount: int,
    step_mint: Pubkey = STEP_MINT,
    xstep_mint: Pubkey = XSTEP_MINT,
    program_id: Pubkey = STAKING_PROGRAM_ID,
) -> Instruction:
    """Build the stake instruction.

    Accounts:
    0. step_mint
    1. xstep_mint (writable)
    2. user_step_ata (writable)
    3. user (signer)
    4. vault (writable)
    5. user_xstep_ata (writable)
    6. token_program

    Data: [discriminator (8), nonce (u8), amount (u64 LE)]
    """
    vault, nonce = get_vault_pda(step_mint, program_id)
    user_step_ata = get_associated_token_address(user, step_mint)
    user_xstep_ata = get_associated_token_address(user, xstep_mint)

    accounts = [
        AccountMeta(pubkey=step_mint, is_signer=False, is_writable=False),
        AccountMeta(pubkey=xstep_mint, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_step_ata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user, is_signer=True, is_writable=False),
        AccountMeta(pubkey=vault, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user_xstep_ata, is_signer=False, is_writable=True),
        AccountMeta(pubkey=TOKEN_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    data = build_stake_instruction_data(nonce, amount)

    return Instruction(program_id=program_id, accounts=accounts, data=data)
