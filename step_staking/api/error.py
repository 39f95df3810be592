"""API error types for the swap aggregator client."""

from dataclasses import dataclass
from typing import Optional

from ..program.errors import StepStakingError


class ApiError(StepStakingError):
    """Base exception for aggregator API errors."""

    is_server_error = True


class ServiceUnavailableError(ApiError):
    """Transport failure, timeout or 5xx reaching the aggregator or RPC."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Service unavailable: {message}")


class QuoteNotFoundError(ApiError):
    """The aggregator found no viable route for the requested swap."""

    is_server_error = False

    def __init__(self, message: str = "No quote was found for this token at this time"):
        self.message = message
        super().__init__(message)


class MalformedResponseError(ApiError):
    """Response body does not match the expected schema."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Malformed response: {message}")


@dataclass
class ErrorResponse:
    """Error response format returned by the aggregator."""

    error: Optional[str] = None
    error_code: Optional[str] = None

    def get_message(self) -> str:
        """Get the error message, falling back to the error code."""
        return self.error or self.error_code or "Unknown error"

    @classmethod
    def from_dict(cls, data: dict) -> "ErrorResponse":
        """Create from dictionary."""
        return cls(
            error=data.get("error") or data.get("message"),
            error_code=data.get("errorCode"),
        )
