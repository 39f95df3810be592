"""Transaction assembly for the Step staking SDK.

A stake transaction is a fixed sequence of named segments. Each segment is
either empty or populated, and the final instruction list is their
concatenation in this order:

    create_intermediate_ata, create_receipt_ata, token_ledger,
    compute_budget, setup, swap, cleanup, stake

Instructions execute strictly in order within one transaction, so later
segments may consume accounts created by earlier ones.
"""

import base64
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from solders.instruction import Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from .constants import STAKING_PROGRAM_ID, STEP_MINT, XSTEP_MINT
from .instructions import (
    build_create_associated_token_account_idempotent_instruction,
    build_stake_instruction,
)

if TYPE_CHECKING:
    from ..api.types import SwapInstructions

SEGMENT_ORDER = (
    "create_intermediate_ata",
    "create_receipt_ata",
    "token_ledger",
    "compute_budget",
    "setup",
    "swap",
    "cleanup",
    "stake",
)


@dataclass(frozen=True)
class InstructionPlan:
    """Ordered, possibly-empty instruction segments of a stake transaction."""

    create_intermediate_ata: Tuple[Instruction, ...] = ()
    create_receipt_ata: Tuple[Instruction, ...] = ()
    token_ledger: Tuple[Instruction, ...] = ()
    compute_budget: Tuple[Instruction, ...] = ()
    setup: Tuple[Instruction, ...] = ()
    swap: Tuple[Instruction, ...] = ()
    cleanup: Tuple[Instruction, ...] = ()
    stake: Tuple[Instruction, ...] = ()

    def segments(self) -> Iterator[Tuple[str, Tuple[Instruction, ...]]]:
        """Yield (name, instructions) pairs in execution order."""
        for name in SEGMENT_ORDER:
            yield name, getattr(self, name)

    def instructions(self) -> List[Instruction]:
        """Concatenate all segments in execution order."""
        result: List[Instruction] = []
        for _, segment in self.segments():
            result.extend(segment)
        return result


@dataclass(frozen=True)
class UnsignedTransaction:
    """Ordered instruction list with an optional fee payer and no signatures."""

    instructions: Tuple[Instruction, ...]
    fee_payer: Optional[Pubkey] = None

    def to_message(self) -> Message:
        """Compile a legacy message.

        Without a fee payer the first signer account becomes the payer, which
        leaves the wallet free to fill it in.
        """
        return Message(list(self.instructions), self.fee_payer)

    def to_transaction(self) -> Transaction:
        """Wrap the compiled message in a transaction with empty signatures."""
        return Transaction.new_unsigned(self.to_message())

    def to_base64(self) -> str:
        """Serialize the unsigned transaction for a wallet to sign."""
        return base64.b64encode(bytes(self.to_transaction())).decode("ascii")


@dataclass(frozen=True)
class ActionTransaction:
    """Composed transaction plus a human-readable status message."""

    transaction: UnsignedTransaction
    message: Optional[str] = None

    def to_dict(self) -> dict:
        """Render the action POST response body."""
        result = {"transaction": self.transaction.to_base64()}
        if self.message is not None:
            result["message"] = self.message
        return result


def _optional(ix: Optional[Instruction]) -> Tuple[Instruction, ...]:
    return () if ix is None else (ix,)


def build_instruction_plan(
    user: Pubkey,
    stake_amount: int,
    swap: Optional["SwapInstructions"] = None,
    step_mint: Pubkey = STEP_MINT,
    xstep_mint: Pubkey = XSTEP_MINT,
    program_id: Pubkey = STAKING_PROGRAM_ID,
) -> InstructionPlan:
    """Build every segment of a stake transaction.

    Args:
        user: Wallet performing the stake (payer, owner and signer)
        stake_amount: STEP base units to stake
        swap: Aggregator instructions converting the input asset into STEP,
            or None to stake STEP directly
    """
    plan = InstructionPlan(
        create_intermediate_ata=(
            build_create_associated_token_account_idempotent_instruction(
                user, user, step_mint
            ),
        ),
        create_receipt_ata=(
            build_create_associated_token_account_idempotent_instruction(
                user, user, xstep_mint
            ),
        ),
        stake=(
            build_stake_instruction(
                user, stake_amount, step_mint, xstep_mint, program_id
            ),
        ),
    )

    if swap is None:
        return plan

    return InstructionPlan(
        create_intermediate_ata=plan.create_intermediate_ata,
        create_receipt_ata=plan.create_receipt_ata,
        token_ledger=_optional(swap.token_ledger_instruction),
        compute_budget=tuple(swap.compute_budget_instructions),
        setup=tuple(swap.setup_instructions),
        swap=(swap.swap_instruction,),
        cleanup=_optional(swap.cleanup_instruction),
        stake=plan.stake,
    )


def assemble_stake_transaction(
    user: Pubkey,
    stake_amount: int,
    swap: Optional["SwapInstructions"] = None,
    step_mint: Pubkey = STEP_MINT,
    xstep_mint: Pubkey = XSTEP_MINT,
    program_id: Pubkey = STAKING_PROGRAM_ID,
    fee_payer: Optional[Pubkey] = None,
) -> UnsignedTransaction:
    """Assemble the full stake transaction, optionally preceded by a swap."""
    plan = build_instruction_plan(
        user, stake_amount, swap, step_mint, xstep_mint, program_id
    )
    return UnsignedTransaction(
        instructions=tuple(plan.instructions()), fee_payer=fee_payer
    )
