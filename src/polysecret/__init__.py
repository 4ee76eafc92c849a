"""Recover the constant term of a polynomial from base-encoded shares.

``find_secret``
    Decode the shares of a :class:`ShareSet`, pick the first ``k`` of them and
    evaluate the Lagrange interpolating polynomial at ``x = 0``.

``decode`` / ``interpolate``
    The two building blocks, usable on their own.
"""

from __future__ import annotations

from .codec import decode, encode
from .errors import (
    DuplicateCoordinate,
    ErrorKind,
    InsufficientShares,
    InvalidShareSet,
    InvalidShareValue,
    NonIntegralSecret,
    ReconstructionError,
)
from .interpolation import interpolate, interpolate_fraction
from .models import Point, Share, ShareSet
from .reconstruction import (
    ReconstructionOutcome,
    decode_points,
    find_secret,
    find_secrets,
    select_points,
    try_find_secret,
)
from .settings import DivisionMode

__version__ = "0.1.0"

__all__ = [
    "decode",
    "encode",
    "interpolate",
    "interpolate_fraction",
    "DivisionMode",
    "Point",
    "Share",
    "ShareSet",
    "decode_points",
    "select_points",
    "find_secret",
    "find_secrets",
    "try_find_secret",
    "ReconstructionOutcome",
    "ErrorKind",
    "ReconstructionError",
    "InvalidShareValue",
    "DuplicateCoordinate",
    "InsufficientShares",
    "InvalidShareSet",
    "NonIntegralSecret",
]
