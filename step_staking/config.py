"""Startup configuration for the Step staking SDK."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from solders.pubkey import Pubkey

from .api.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECS
from .api.validation import validate_max_accounts, validate_slippage_bps
from .program.constants import STAKING_PROGRAM_ID, STEP_MINT, XSTEP_MINT

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"

# Keeps swap routes small enough for a legacy transaction without lookup tables.
DEFAULT_MAX_ACCOUNTS = 9

ENV_PREFIX = "STEP_STAKING_"


def _env_int(environ: Mapping[str, str], name: str) -> Optional[int]:
    value = environ.get(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {value!r}") from e


@dataclass(frozen=True)
class StakingConfig:
    """Configuration for composing stake transactions."""

    rpc_url: str = DEFAULT_RPC_URL
    jupiter_base_url: str = DEFAULT_BASE_URL
    timeout_secs: int = DEFAULT_TIMEOUT_SECS
    max_accounts: Optional[int] = DEFAULT_MAX_ACCOUNTS
    slippage_bps: Optional[int] = None
    staking_program_id: Pubkey = STAKING_PROGRAM_ID
    step_mint: Pubkey = STEP_MINT
    xstep_mint: Pubkey = XSTEP_MINT

    def __post_init__(self) -> None:
        if self.timeout_secs <= 0:
            raise ValueError(f"timeout_secs must be positive, got {self.timeout_secs}")
        validate_max_accounts(self.max_accounts)
        validate_slippage_bps(self.slippage_bps)

    @classmethod
    def default(cls) -> "StakingConfig":
        """Create default mainnet config."""
        return cls()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "StakingConfig":
        """Create config from ``STEP_STAKING_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable is set to a malformed value
        """
        environ = os.environ if environ is None else environ
        overrides: dict = {}

        rpc_url = environ.get(ENV_PREFIX + "RPC_URL")
        if rpc_url:
            overrides["rpc_url"] = rpc_url

        jupiter_url = environ.get(ENV_PREFIX + "JUPITER_URL")
        if jupiter_url:
            overrides["jupiter_base_url"] = jupiter_url

        timeout = _env_int(environ, "TIMEOUT_SECS")
        if timeout is not None:
            overrides["timeout_secs"] = timeout

        max_accounts = _env_int(environ, "MAX_ACCOUNTS")
        if max_accounts is not None:
            overrides["max_accounts"] = max_accounts

        slippage_bps = _env_int(environ, "SLIPPAGE_BPS")
        if slippage_bps is not None:
            overrides["slippage_bps"] = slippage_bps

        return cls(**overrides)
