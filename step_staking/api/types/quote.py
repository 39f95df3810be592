"""Quote types for the swap aggregator API."""

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from ..error import QuoteNotFoundError


@dataclass
class SwapInfo:
    """One pool hop of a route."""

    amm_key: str
    label: str
    input_mint: str
    output_mint: str
    in_amount: str
    out_amount: str
    fee_amount: Optional[str] = None
    fee_mint: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SwapInfo":
        try:
            return cls(
                amm_key=data["ammKey"],
                label=data.get("label", ""),
                input_mint=data["inputMint"],
                output_mint=data["outputMint"],
                in_amount=str(data["inAmount"]),
                out_amount=str(data["outAmount"]),
                fee_amount=data.get("feeAmount"),
                fee_mint=data.get("feeMint"),
            )
        except KeyError as e:
            raise QuoteNotFoundError(f"Missing required field in SwapInfo: {e}")


@dataclass
class RoutePlanStep:
    """A route hop with its share of the input, in percent."""

    swap_info: SwapInfo
    percent: int

    @classmethod
    def from_dict(cls, data: dict) -> "RoutePlanStep":
        try:
            return cls(
                swap_info=SwapInfo.from_dict(data["swapInfo"]),
                percent=int(data["percent"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise QuoteNotFoundError(f"Invalid route plan step: {e}")


@dataclass
class QuoteResponse:
    """Response for GET /quote.

    Amounts stay as the exact integer strings the aggregator returns. The
    original body is kept in ``raw`` and posted back unchanged when requesting
    swap instructions.
    """

    input_mint: str
    in_amount: str
    output_mint: str
    out_amount: str
    other_amount_threshold: str
    swap_mode: str
    slippage_bps: int
    price_impact_pct: str
    route_plan: list[RoutePlanStep] = field(default_factory=list)
    platform_fee: Optional[Any] = None
    context_slot: Optional[int] = None
    time_taken: Optional[float] = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "QuoteResponse":
        """Parse a quote body.

        Raises:
            QuoteNotFoundError: If the body is not a quote or has no route
        """
        if not isinstance(data, dict):
            raise QuoteNotFoundError(f"Unexpected quote body: {type(data).__name__}")

        route_plan_data = data.get("routePlan")
        if not route_plan_data:
            raise QuoteNotFoundError()

        try:
            return cls(
                input_mint=data["inputMint"],
                in_amount=str(data["inAmount"]),
                output_mint=data["outputMint"],
                out_amount=str(data["outAmount"]),
                other_amount_threshold=str(data["otherAmountThreshold"]),
                swap_mode=data["swapMode"],
                slippage_bps=int(data["slippageBps"]),
                price_impact_pct=str(data["priceImpactPct"]),
                route_plan=[RoutePlanStep.from_dict(step) for step in route_plan_data],
                platform_fee=data.get("platformFee"),
                context_slot=data.get("contextSlot"),
                time_taken=data.get("timeTaken"),
                raw=copy.deepcopy(data),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise QuoteNotFoundError(f"Missing required field in QuoteResponse: {e}")

    def to_dict(self) -> dict:
        """Return the quote body exactly as received."""
        return copy.deepcopy(self.raw)
