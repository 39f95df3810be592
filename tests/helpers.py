"""Mocks and payload builders shared by the test modules."""

import base64
import json
import struct
from types import SimpleNamespace

from solders.pubkey import Pubkey

from step_staking import STEP_MINT, TOKEN_PROGRAM_ID


# ============================================================================
# HTTP MOCKS
# ============================================================================


class MockHttpResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status=200, body=None, text=None, raw=None):
        self.status = status
        if raw is None:
            raw = (text if text is not None else json.dumps(body)).encode("utf-8")
        self._raw = raw

    async def read(self):
        return self._raw

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False
class MockSession:
    """Records requests and replays queued responses in order."""

    def __init__(self, responses=None, error=None):
        self.calls = []
        self.closed = False
        self._responses = list(responses or [])
        self._error = error

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self._error is not None:
            raise self._error
        return self._responses.pop(0)

    async def close(self):
        self.closed = True


# ============================================================================
# RPC MOCKS
# ============================================================================


class MockConnection:
    """Mock Solana connection for testing."""

    def __init__(self, accounts=None, error=None):
        self.accounts = accounts or {}
        self.error = error
        self.calls = []
        self.closed = False

    async def get_account_info(self, pubkey):
        self.calls.append(pubkey)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(value=self.accounts.get(pubkey))

    async def close(self):
        self.closed = True


def build_mint_data(
    decimals: int,
    supply: int = 1_000_000,
    mint_authority=None,
    freeze_authority=None,
    is_initialized: bool = True,
) -> bytes:
    """Build SPL Mint account data for testing."""
    data = bytearray()
    if mint_authority is None:
        data.extend(struct.pack("<I", 0))
        data.extend(bytes(32))
    else:
        data.extend(struct.pack("<I", 1))
        data.extend(bytes(mint_authority))
    data.extend(struct.pack("<Q", supply))
    data.append(decimals)
    data.append(1 if is_initialized else 0)
    if freeze_authority is None:
        data.extend(struct.pack("<I", 0))
        data.extend(bytes(32))
    else:
        data.extend(struct.pack("<I", 1))
        data.extend(bytes(freeze_authority))
    return bytes(data)


def mint_account(decimals: int, owner: Pubkey = TOKEN_PROGRAM_ID):
    return SimpleNamespace(data=build_mint_data(decimals), owner=owner)


# ============================================================================
# AGGREGATOR PAYLOADS
# ============================================================================


def instruction_json(program_id=None, data=b"\x01\x02", signer=None) -> dict:
    """Build an aggregator-style instruction object."""
    accounts = [
        {"pubkey": str(Pubkey.new_unique()), "isSigner": False, "isWritable": True},
    ]
    if signer is not None:
        accounts.append({"pubkey": str(signer), "isSigner": True, "isWritable": True})
    return {
        "programId": str(program_id or Pubkey.new_unique()),
        "accounts": accounts,
        "data": base64.b64encode(data).decode("ascii"),
    }


def quote_json(input_mint, output_mint=STEP_MINT, in_amount="2500000", out_amount="123456789") -> dict:
    return {
        "inputMint": str(input_mint),
        "inAmount": in_amount,
        "outputMint": str(output_mint),
        "outAmount": out_amount,
        "otherAmountThreshold": "122839505",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0012",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": str(Pubkey.new_unique()),
                    "label": "Whirlpool",
                    "inputMint": str(input_mint),
                    "outputMint": str(output_mint),
                    "inAmount": in_amount,
                    "outAmount": out_amount,
                    "feeAmount": "250",
                    "feeMint": str(input_mint),
                },
                "percent": 100,
            }
        ],
        "contextSlot": 281234567,
        "timeTaken": 0.012,
    }


def swap_instructions_json(
    user,
    token_ledger=True,
    compute_budget=2,
    setup=2,
    cleanup=True,
) -> dict:
    return {
        "tokenLedgerInstruction": instruction_json(signer=user) if token_ledger else None,
        "computeBudgetInstructions": [instruction_json() for _ in range(compute_budget)],
        "setupInstructions": [instruction_json(signer=user) for _ in range(setup)],
        "swapInstruction": instruction_json(data=b"swap", signer=user),
        "cleanupInstruction": instruction_json(signer=user) if cleanup else None,
        "addressLookupTableAddresses": [str(Pubkey.new_unique())],
        "prioritizationFeeLamports": 5000,
    }
