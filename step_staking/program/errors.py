"""Custom exceptions for the Step staking SDK."""


class StepStakingError(Exception):
    """Base exception for all Step staking SDK errors.

    ``is_server_error`` tells the action layer whether the failure is a
    server fault or a condition the end user can act on.
    """

    is_server_error = False


class InvalidAddressError(StepStakingError):
    """Raised when the wallet address does not parse as a 32-byte pubkey."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid account public key: {value!r}")


class InvalidMintAddressError(StepStakingError):
    """Raised when the input mint is malformed or is not a token mint."""

    def __init__(self, value: str, reason: str = "malformed address"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid input mint address {value!r}: {reason}")


class InvalidAmountError(StepStakingError):
    """Raised when an amount cannot be parsed as a finite decimal."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid amount: {value!r}")


class AmountOverflowError(StepStakingError):
    """Raised when a base-unit amount does not fit in a u64."""

    def __init__(self, amount: object):
        self.amount = amount
        super().__init__(f"Amount overflows u64: {amount}")


class AmountUnderflowError(StepStakingError):
    """Raised when an amount is negative or scales to zero base units."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Amount too small: {value}")


class InvalidAccountDataError(StepStakingError):
    """Raised when account data cannot be deserialized."""

    is_server_error = True

    def __init__(self, message: str):
        super().__init__(f"Invalid account data: {message}")


class DerivationFailureError(StepStakingError):
    """Raised when no bump seed yields an off-curve program address.

    This points at a seed/program mismatch and should alert operators.
    """

    is_server_error = True

    def __init__(self, program_id: object):
        self.program_id = program_id
        super().__init__(
            f"Unable to find a viable program address bump seed for {program_id}"
        )
