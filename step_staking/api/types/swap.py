"""Swap instruction types for the swap aggregator API."""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, List, Optional

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from ..error import MalformedResponseError
from ..validation import parse_pubkey


def _parse_pubkey(value: Any, field_name: str) -> Pubkey:
    return parse_pubkey(
        value,
        lambda v: MalformedResponseError(f"{field_name} is not a valid pubkey: {v!r}"),
    )


def _parse_flag(meta: Any, key: str, field_name: str) -> bool:
    value = meta[key]
    if not isinstance(value, bool):
        raise MalformedResponseError(f"{field_name}.{key} must be a boolean, got {value!r}")
    return value


def parse_instruction(data: Any, field_name: str = "instruction") -> Instruction:
    """Rebuild an Instruction from ``{programId, accounts, data}``.

    ``data`` is base64 and each account is ``{pubkey, isSigner, isWritable}``.

    Raises:
        MalformedResponseError: If any field is missing or malformed
    """
    if not isinstance(data, dict):
        raise MalformedResponseError(f"{field_name} must be an object")

    try:
        program_id = _parse_pubkey(data["programId"], f"{field_name}.programId")
        accounts = [
            AccountMeta(
                pubkey=_parse_pubkey(meta["pubkey"], f"{field_name}.accounts.pubkey"),
                is_signer=_parse_flag(meta, "isSigner", f"{field_name}.accounts"),
                is_writable=_parse_flag(meta, "isWritable", f"{field_name}.accounts"),
            )
            for meta in data["accounts"]
        ]
        payload = base64.b64decode(data["data"], validate=True)
    except KeyError as e:
        raise MalformedResponseError(f"Missing required field in {field_name}: {e}")
    except (TypeError, binascii.Error) as e:
        raise MalformedResponseError(f"Invalid {field_name}: {e}") from e

    return Instruction(program_id=program_id, accounts=accounts, data=payload)


def _parse_optional_instruction(data: Any, field_name: str) -> Optional[Instruction]:
    if data is None:
        return None
    return parse_instruction(data, field_name)


def _parse_instruction_list(data: Any, field_name: str) -> List[Instruction]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise MalformedResponseError(f"{field_name} must be a list")
    return [parse_instruction(ix, f"{field_name}[{i}]") for i, ix in enumerate(data)]


@dataclass
class SwapInstructions:
    """Response for POST /swap-instructions.

    The address lookup tables are kept for callers that compile versioned
    transactions.
    """

    swap_instruction: Instruction
    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: List[Instruction] = field(default_factory=list)
    setup_instructions: List[Instruction] = field(default_factory=list)
    cleanup_instruction: Optional[Instruction] = None
    address_lookup_table_addresses: List[Pubkey] = field(default_factory=list)
    prioritization_fee_lamports: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "SwapInstructions":
        """Parse a swap-instructions body.

        Raises:
            MalformedResponseError: If the body fails schema validation
        """
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Unexpected swap-instructions body: {type(data).__name__}"
            )
        if "swapInstruction" not in data:
            raise MalformedResponseError(
                "Missing required field in SwapInstructions: 'swapInstruction'"
            )

        lookup_tables = data.get("addressLookupTableAddresses") or []
        if not isinstance(lookup_tables, list):
            raise MalformedResponseError("addressLookupTableAddresses must be a list")

        fee = data.get("prioritizationFeeLamports")
        if fee is not None and (isinstance(fee, bool) or not isinstance(fee, int)):
            raise MalformedResponseError("prioritizationFeeLamports must be an integer")

        return cls(
            swap_instruction=parse_instruction(data["swapInstruction"], "swapInstruction"),
            token_ledger_instruction=_parse_optional_instruction(
                data.get("tokenLedgerInstruction"), "tokenLedgerInstruction"
            ),
            compute_budget_instructions=_parse_instruction_list(
                data.get("computeBudgetInstructions"), "computeBudgetInstructions"
            ),
            setup_instructions=_parse_instruction_list(
                data.get("setupInstructions"), "setupInstructions"
            ),
            cleanup_instruction=_parse_optional_instruction(
                data.get("cleanupInstruction"), "cleanupInstruction"
            ),
            address_lookup_table_addresses=[
                _parse_pubkey(address, "addressLookupTableAddresses")
                for address in lookup_tables
            ],
            prioritization_fee_lamports=fee,
        )
