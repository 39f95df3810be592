"""Tests for instruction builders."""

import hashlib
import struct

import pytest
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from spl.token.instructions import create_idempotent_associated_token_account

from step_staking import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    STAKE_DISCRIMINATOR,
    STAKING_PROGRAM_ID,
    STEP_MINT,
    TOKEN_PROGRAM_ID,
    XSTEP_MINT,
    AmountOverflowError,
    AmountUnderflowError,
    build_create_associated_token_account_idempotent_instruction,
    build_stake_instruction,
    build_stake_instruction_data,
    get_associated_token_address,
    get_vault_pda,
)
from step_staking.program import MAX_U64, StakeArgs, sighash


class TestSighash:
    def test_stake_discriminator(self):
        expected = hashlib.sha256(b"global:stake").digest()[:8]
        assert STAKE_DISCRIMINATOR == expected
        assert sighash("stake") == expected

    def test_namespace_changes_discriminator(self):
        assert sighash("stake", "state") != sighash("stake")

    def test_length(self):
        assert len(sighash("initialize")) == 8


class TestStakeArgs:
    def test_serialize_layout(self):
        data = StakeArgs(nonce=254, amount=1_000).serialize()

        assert data == bytes([254]) + struct.pack("<Q", 1_000)
        assert len(data) == 9

    def test_rejects_nonce_out_of_range(self):
        with pytest.raises(ValueError):
            StakeArgs(nonce=256, amount=1)

    def test_rejects_amount_out_of_range(self):
        with pytest.raises(AmountOverflowError):
            StakeArgs(nonce=1, amount=MAX_U64 + 1)
        with pytest.raises(AmountUnderflowError):
            StakeArgs(nonce=1, amount=-1)


class TestBuildStakeInstructionData:
    def test_is_pure(self):
        assert build_stake_instruction_data(5, 1000) == build_stake_instruction_data(5, 1000)

    def test_layout(self):
        data = build_stake_instruction_data(5, 1000)

        assert len(data) == 17
        assert data[:8] == STAKE_DISCRIMINATOR
        assert data[8] == 5
        assert struct.unpack("<Q", data[9:17])[0] == 1000

    @pytest.mark.parametrize("nonce,amount", [(0, 0), (255, 1), (5, MAX_U64), (17, 123456789)])
    def test_discriminator_independent_of_arguments(self, nonce, amount):
        assert build_stake_instruction_data(nonce, amount)[:8] == STAKE_DISCRIMINATOR

    def test_max_amount(self):
        data = build_stake_instruction_data(1, MAX_U64)
        assert data[9:] == b"\xff" * 8

    def test_overflow(self):
        with pytest.raises(AmountOverflowError):
            build_stake_instruction_data(1, MAX_U64 + 1)

    def test_negative_amount(self):
        with pytest.raises(AmountUnderflowError):
            build_stake_instruction_data(1, -1)


class TestBuildCreateAtaIdempotentInstruction:
    def test_accounts_and_data(self):
        payer = Pubkey.new_unique()
        ix = build_create_associated_token_account_idempotent_instruction(payer, payer, STEP_MINT)

        assert ix.program_id == ASSOCIATED_TOKEN_PROGRAM_ID
        assert bytes(ix.data) == bytes([1])

        keys = [meta.pubkey for meta in ix.accounts]
        assert keys == [
            payer,
            get_associated_token_address(payer, STEP_MINT),
            payer,
            STEP_MINT,
            SYSTEM_PROGRAM_ID,
            TOKEN_PROGRAM_ID,
        ]
        assert ix.accounts[0].is_signer and ix.accounts[0].is_writable
        assert ix.accounts[1].is_writable and not ix.accounts[1].is_signer
        assert not any(meta.is_signer for meta in ix.accounts[1:])

    def test_matches_spl_token_builder(self):
        payer = Pubkey.new_unique()
        owner = Pubkey.new_unique()

        assert build_create_associated_token_account_idempotent_instruction(
            payer, owner, XSTEP_MINT
        ) == create_idempotent_associated_token_account(payer, owner, XSTEP_MINT, TOKEN_PROGRAM_ID)


class TestBuildStakeInstruction:
    def test_accounts(self):
        user = Pubkey.new_unique()
        vault, _ = get_vault_pda()

        ix = build_stake_instruction(user, 42)

        assert ix.program_id == STAKING_PROGRAM_ID
        expected = [
            (STEP_MINT, False, False),
            (XSTEP_MINT, False, True),
            (get_associated_token_address(user, STEP_MINT), False, True),
            (user, True, False),
            (vault, False, True),
            (get_associated_token_address(user, XSTEP_MINT), False, True),
            (TOKEN_PROGRAM_ID, False, False),
        ]
        actual = [(m.pubkey, m.is_signer, m.is_writable) for m in ix.accounts]
        assert actual == expected

    def test_nonce_is_vault_bump(self):
        _, bump = get_vault_pda()
        ix = build_stake_instruction(Pubkey.new_unique(), 42)

        assert bytes(ix.data) == build_stake_instruction_data(bump, 42)

    def test_deterministic(self):
        user = Pubkey.new_unique()
        assert build_stake_instruction(user, 7) == build_stake_instruction(user, 7)
