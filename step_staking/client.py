"""Main client for the Step staking SDK."""

import logging
from typing import Optional

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import RPCException
from solders.pubkey import Pubkey

from .api.client import JupiterClient
from .api.error import MalformedResponseError, ServiceUnavailableError
from .api.types import QuoteResponse, SwapInstructions
from .api.validation import parse_account, parse_input_mint
from .config import StakingConfig
from .program.accounts import deserialize_mint
from .program.constants import (
    MAX_U64,
    NATIVE_DECIMALS,
    NATIVE_MINT,
    STAKE_SUCCESS_MESSAGE,
    STEP_DECIMALS,
    TOKEN_2022_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
)
from .program.errors import (
    AmountOverflowError,
    AmountUnderflowError,
    InvalidMintAddressError,
)
from .program.transaction import ActionTransaction, assemble_stake_transaction
from .shared.scaling import AmountLike, parse_amount, to_base_units

logger = logging.getLogger(__name__)

TOKEN_PROGRAM_IDS = (TOKEN_PROGRAM_ID, TOKEN_2022_PROGRAM_ID)


def parse_out_amount(quote: QuoteResponse) -> int:
    """Parse a quote's output amount as exact u64 base units.

    Raises:
        MalformedResponseError: If outAmount is not an integer string
        AmountOverflowError: If outAmount exceeds u64
        AmountUnderflowError: If outAmount is zero
    """
    raw = quote.out_amount
    if not raw.isascii() or not raw.isdigit():
        raise MalformedResponseError(f"outAmount is not an integer: {raw!r}")

    out_amount = int(raw)
    if out_amount > MAX_U64:
        raise AmountOverflowError(out_amount)
    if out_amount == 0:
        raise AmountUnderflowError(raw)
    return out_amount


class StepStakingClient:
    """Composes unsigned stake transactions for the Step staking program.

    The client holds no per-request state; one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        connection: AsyncClient,
        jupiter: JupiterClient,
        config: Optional[StakingConfig] = None,
    ):
        """Initialize the client.

        Args:
            connection: Solana RPC async client, used for mint metadata reads
            jupiter: Swap aggregator client
            config: Staking configuration (defaults to mainnet)
        """
        self.connection = connection
        self.jupiter = jupiter
        self.config = config or StakingConfig.default()

    @classmethod
    def from_config(cls, config: Optional[StakingConfig] = None) -> "StepStakingClient":
        """Build the RPC and aggregator clients from configuration."""
        config = config or StakingConfig.default()
        connection = AsyncClient(config.rpc_url, timeout=config.timeout_secs)
        jupiter = JupiterClient(config.jupiter_base_url, timeout=config.timeout_secs)
        return cls(connection, jupiter, config)

    async def __aenter__(self) -> "StepStakingClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the RPC and aggregator sessions."""
        await self.jupiter.close()
        await self.connection.close()

    # =========================================================================
    # Account Fetchers
    # =========================================================================

    async def get_mint_decimals(self, mint: Pubkey) -> int:
        """Fetch a mint account and return its decimals.

        Raises:
            InvalidMintAddressError: If the account is missing or not a mint
            ServiceUnavailableError: If the RPC node cannot be reached
        """
        try:
            response = await self.connection.get_account_info(mint)
        except (SolanaRpcException, RPCException) as e:
            logger.warning(f"Mint read for {mint} failed: {e!r}")
            raise ServiceUnavailableError(f"getAccountInfo {mint} failed: {e!r}") from e

        account = response.value
        if account is None:
            raise InvalidMintAddressError(str(mint), "mint account not found")
        if account.owner not in TOKEN_PROGRAM_IDS:
            raise InvalidMintAddressError(str(mint), "account is not a token mint")

        return deserialize_mint(bytes(account.data)).decimals

    # =========================================================================
    # Transaction Builders
    # =========================================================================

    async def _get_swap(
        self,
        user: Pubkey,
        input_mint: Pubkey,
        amount: AmountLike,
    ) -> tuple[int, SwapInstructions]:
        """Quote and fetch swap instructions converting input_mint into STEP.

        Returns:
            (STEP base units the swap yields, swap instructions)
        """
        if input_mint == NATIVE_MINT:
            decimals = NATIVE_DECIMALS
        else:
            decimals = await self.get_mint_decimals(input_mint)

        input_amount = to_base_units(amount, decimals)

        quote = await self.jupiter.get_quote(
            input_mint,
            self.config.step_mint,
            input_amount,
            slippage_bps=self.config.slippage_bps,
            max_accounts=self.config.max_accounts,
        )
        if quote.output_mint != str(self.config.step_mint):
            raise MalformedResponseError(
                f"Quote output mint {quote.output_mint} does not match "
                f"{self.config.step_mint}"
            )
        step_amount = parse_out_amount(quote)

        swap = await self.jupiter.get_swap_instructions(quote, user)
        return step_amount, swap

    async def build_stake_transaction(
        self,
        account: str,
        amount: AmountLike,
        input_mint: Optional[str] = None,
    ) -> ActionTransaction:
        """Build an unsigned transaction that stakes STEP for xSTEP.

        When ``input_mint`` is omitted or is the STEP mint, ``amount`` STEP
        is staked directly. Any other mint (or ``"SOL"``) is first swapped
        into STEP through the aggregator and the quoted output is staked.

        Args:
            account: Base58 wallet address that will sign
            amount: Human-readable amount of the input asset
            input_mint: Optional Base58 mint to swap from

        Returns:
            ActionTransaction with the unsigned transaction and a status message

        Raises:
            InvalidAddressError: If account is malformed
            InvalidMintAddressError: If input_mint is malformed or not a mint
            InvalidAmountError, AmountOverflowError, AmountUnderflowError:
                If amount cannot be represented in base units
            ServiceUnavailableError, QuoteNotFoundError, MalformedResponseError:
                If the swap cannot be quoted or fetched
        """
        user = parse_account(account)
        mint = parse_input_mint(input_mint)
        parse_amount(amount)

        swap: Optional[SwapInstructions] = None
        if mint is None or mint == self.config.step_mint:
            stake_amount = to_base_units(amount, STEP_DECIMALS)
        else:
            stake_amount, swap = await self._get_swap(user, mint, amount)

        transaction = assemble_stake_transaction(
            user,
            stake_amount,
            swap,
            step_mint=self.config.step_mint,
            xstep_mint=self.config.xstep_mint,
            program_id=self.config.staking_program_id,
        )

        logger.info(
            f"Composed stake transaction for {user}: {stake_amount} base units, "
            f"{len(transaction.instructions)} instructions, "
            f"swap={'yes' if swap is not None else 'no'}"
        )
        return ActionTransaction(transaction=transaction, message=STAKE_SUCCESS_MESSAGE)
