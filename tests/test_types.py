"""Tests for error classification and value types."""

import pytest

from step_staking import (
    AmountOverflowError,
    AmountUnderflowError,
    ApiError,
    DerivationFailureError,
    InvalidAccountDataError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidMintAddressError,
    MalformedResponseError,
    QuoteNotFoundError,
    ServiceUnavailableError,
    StepStakingError,
)
from step_staking.program import StakeArgs


class TestErrorClassification:
    @pytest.mark.parametrize(
        "error",
        [
            InvalidAddressError("x"),
            InvalidMintAddressError("x"),
            InvalidAmountError("x"),
            AmountOverflowError(2**64),
            AmountUnderflowError("0"),
            QuoteNotFoundError(),
        ],
    )
    def test_user_errors(self, error):
        assert isinstance(error, StepStakingError)
        assert not error.is_server_error

    @pytest.mark.parametrize(
        "error",
        [
            ServiceUnavailableError("down"),
            MalformedResponseError("bad"),
            InvalidAccountDataError("short"),
            DerivationFailureError("program"),
        ],
    )
    def test_server_errors(self, error):
        assert isinstance(error, StepStakingError)
        assert error.is_server_error

    def test_api_errors_share_base(self):
        assert issubclass(ServiceUnavailableError, ApiError)
        assert issubclass(QuoteNotFoundError, ApiError)
        assert issubclass(MalformedResponseError, ApiError)

    def test_quote_not_found_default_message(self):
        assert str(QuoteNotFoundError()) == "No quote was found for this token at this time"

    def test_mint_error_carries_reason(self):
        error = InvalidMintAddressError("abc", "account is not a token mint")
        assert error.value == "abc"
        assert "account is not a token mint" in str(error)


class TestStakeArgs:
    def test_serialize(self):
        assert StakeArgs(nonce=254, amount=1).serialize() == bytes([254, 1, 0, 0, 0, 0, 0, 0, 0])

    def test_rejects_out_of_range_at_construction(self):
        with pytest.raises(ValueError):
            StakeArgs(nonce=256, amount=1)
        with pytest.raises(AmountOverflowError):
            StakeArgs(nonce=1, amount=2**64)
