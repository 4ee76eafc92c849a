"""Error taxonomy for secret reconstruction."""
from __future__ import annotations

import enum
from fractions import Fraction


class ErrorKind(enum.Enum):
    INVALID_SHARE_VALUE = "invalid_share_value"
    DUPLICATE_COORDINATE = "duplicate_coordinate"
    INSUFFICIENT_SHARES = "insufficient_shares"
    INVALID_SHARE_SET = "invalid_share_set"
    NON_INTEGRAL_SECRET = "non_integral_secret"


class ReconstructionError(ValueError):
    """Base class for every input-validation failure of a reconstruction."""

    kind: ErrorKind


class InvalidShareValue(ReconstructionError):
    """Raised when a share value is not a valid number in its stated base."""

    kind = ErrorKind.INVALID_SHARE_VALUE

    def __init__(self, value: object, base: object, reason: str | None = None) -> None:
        self.value = value
        self.base = base
        message = f"Invalid number {value!r} for base {base!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DuplicateCoordinate(ReconstructionError):
    """Raised when two points share the same x-coordinate."""

    kind = ErrorKind.DUPLICATE_COORDINATE

    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x}")


class InsufficientShares(ReconstructionError):
    """Raised when fewer than the threshold number of shares is present."""

    kind = ErrorKind.INSUFFICIENT_SHARES

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"Need at least {required} points, but only {available} provided")


class InvalidShareSet(ReconstructionError):
    """Raised when a share set is malformed or its thresholds are inconsistent."""

    kind = ErrorKind.INVALID_SHARE_SET


class NonIntegralSecret(ReconstructionError):
    """Raised in exact mode when the interpolated value is not an integer."""

    kind = ErrorKind.NON_INTEGRAL_SECRET

    def __init__(self, value: Fraction) -> None:
        self.value = value
        super().__init__(f"Interpolated value {value} is not an integer")


__all__ = [
    "ErrorKind",
    "ReconstructionError",
    "InvalidShareValue",
    "DuplicateCoordinate",
    "InsufficientShares",
    "InvalidShareSet",
    "NonIntegralSecret",
]
