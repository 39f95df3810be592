"""Swap aggregator REST API client implementation."""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp
from solders.pubkey import Pubkey

from .error import (
    ErrorResponse,
    MalformedResponseError,
    QuoteNotFoundError,
    ServiceUnavailableError,
)
from .types import QuoteResponse, SwapInstructions
from .validation import validate_max_accounts, validate_slippage_bps

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://quote-api.jup.ag/v6"
DEFAULT_TIMEOUT_SECS = 30


def _error_message(status: int, body: Any) -> str:
    if isinstance(body, dict):
        return ErrorResponse.from_dict(body).get_message()
    return f"HTTP {status}"


class JupiterClient:
    """Jupiter-compatible swap aggregator client.

    Every call is a single attempt. Failures are surfaced to the caller,
    which owns any retry policy.

    Example:
        ```python
        async with JupiterClient() as client:
            quote = await client.get_quote(input_mint, output_mint, 1_000_000)
            swap = await client.get_swap_instructions(quote, user)
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT_SECS,
        headers: Optional[dict[str, str]] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Create a new client with the given base URL.

        Args:
            base_url: The base URL of the aggregator API
            timeout: Request timeout in seconds
            headers: Optional additional headers for all requests
            session: Optional externally owned session; it is not closed
                by this client
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if headers:
            self._headers.update(headers)
        self._session = session
        self._owns_session = session is None

    @property
    def base_url(self) -> str:
        """Get the base URL."""
        return self._base_url

    async def __aenter__(self) -> "JupiterClient":
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers=self._headers,
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def _read_json(self, response: aiohttp.ClientResponse) -> Any:
        """Read a JSON body, returning None when it is not JSON."""
        raw = await response.read()
        try:
            return json.loads(raw)
        except (UnicodeDecodeError, ValueError):
            return None

    async def _request(self, method: str, path: str, **kwargs: Any) -> tuple[int, Any]:
        """Issue one request and return (status, parsed JSON body or None).

        Raises:
            ServiceUnavailableError: On transport failure, timeout or 5xx
        """
        session = await self._ensure_session()
        url = f"{self._base_url}{path}"

        try:
            async with session.request(method, url, **kwargs) as response:
                status = response.status
                body = await self._read_json(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"{method} {url} failed: {e!r}")
            raise ServiceUnavailableError(f"{method} {path} failed: {e!r}") from e

        if status >= 500:
            message = _error_message(status, body)
            logger.warning(f"{method} {url} returned {status}: {message}")
            raise ServiceUnavailableError(f"{method} {path} returned {status}: {message}")

        return status, body

    # =========================================================================
    # Quote endpoint
    # =========================================================================

    async def get_quote(
        self,
        input_mint: Pubkey,
        output_mint: Pubkey,
        amount: int,
        slippage_bps: Optional[int] = None,
        max_accounts: Optional[int] = None,
    ) -> QuoteResponse:
        """Get a swap quote.

        Args:
            input_mint: Mint being sold
            output_mint: Mint being bought
            amount: Input amount in base units
            slippage_bps: Optional slippage tolerance in basis points
            max_accounts: Optional cap on accounts the route may touch

        Returns:
            QuoteResponse with the route plan and expected output amount

        Raises:
            ServiceUnavailableError: If the aggregator cannot be reached
            QuoteNotFoundError: If no route exists or the quote is rejected
        """
        validate_slippage_bps(slippage_bps)
        validate_max_accounts(max_accounts)

        params = {
            "inputMint": str(input_mint),
            "outputMint": str(output_mint),
            "amount": str(amount),
        }
        if slippage_bps is not None:
            params["slippageBps"] = str(slippage_bps)
        if max_accounts is not None:
            params["maxAccounts"] = str(max_accounts)

        logger.debug(f"Requesting quote: {params}")
        status, body = await self._request("GET", "/quote", params=params)

        if status >= 400:
            message = _error_message(status, body)
            raise QuoteNotFoundError(f"No quote found: {message}")

        quote = QuoteResponse.from_dict(body)
        logger.info(
            f"Quote {quote.input_mint} -> {quote.output_mint}: "
            f"{quote.in_amount} -> {quote.out_amount} "
            f"over {len(quote.route_plan)} hop(s)"
        )
        return quote

    # =========================================================================
    # Swap instructions endpoint
    # =========================================================================

    async def get_swap_instructions(
        self,
        quote: QuoteResponse,
        user_public_key: Pubkey,
    ) -> SwapInstructions:
        """Get the instructions that execute a quote for a wallet.

        Args:
            quote: Quote previously returned by get_quote
            user_public_key: Wallet that will sign and receive the swap output

        Returns:
            SwapInstructions decomposed into setup/swap/cleanup segments

        Raises:
            ServiceUnavailableError: If the aggregator cannot be reached
            MalformedResponseError: If the body fails schema validation
        """
        payload = {
            "quoteResponse": quote.to_dict(),
            "userPublicKey": str(user_public_key),
        }

        status, body = await self._request("POST", "/swap-instructions", json=payload)

        if status >= 400:
            message = _error_message(status, body)
            raise MalformedResponseError(f"swap-instructions returned {status}: {message}")

        return SwapInstructions.from_dict(body)
