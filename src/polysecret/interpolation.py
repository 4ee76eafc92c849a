"""Lagrange interpolation over exact integers.

``interpolate`` evaluates the unique polynomial of minimal degree through a
set of integer points at a single target abscissa. Two division strategies
are available (see :class:`~polysecret.settings.DivisionMode`):

``EXACT``
    Every Lagrange term is kept as an exact :class:`fractions.Fraction` and
    the terms are summed once. A non-integral sum raises
    :class:`~polysecret.errors.NonIntegralSecret`.

``TRUNCATE``
    Each term ``y * num / den`` is divided with truncation toward zero before
    summation, in point order. This reproduces the historical behaviour of
    the reconstruction tool and can differ from the exact value when a term's
    division is not exact.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Iterable, Optional, Sequence, Tuple

from polysecret import settings as _config
from polysecret.errors import DuplicateCoordinate, InsufficientShares, NonIntegralSecret
from polysecret.settings import DivisionMode

_logger = logging.getLogger(__name__)

PointLike = Tuple[int, int]


def _divide_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def _checked(points: Iterable[PointLike]) -> list[tuple[int, int]]:
    pts = [(int(x), int(y)) for x, y in points]
    if not pts:
        raise InsufficientShares(1, 0)
    seen: set[int] = set()
    for x, _ in pts:
        if x in seen:
            raise DuplicateCoordinate(x)
        seen.add(x)
    return pts


def _basis(pts: Sequence[tuple[int, int]], i: int, target_x: int) -> tuple[int, int]:
    xi = pts[i][0]
    num = 1
    den = 1
    for j, (xj, _) in enumerate(pts):
        if i == j:
            continue
        num *= target_x - xj
        den *= xi - xj
    return num, den


def interpolate_fraction(points: Iterable[PointLike], target_x: int = 0) -> Fraction:
    """Return the exact value at *target_x* of the polynomial through *points*."""

    pts = _checked(points)
    total = Fraction(0)
    for i, (_, yi) in enumerate(pts):
        num, den = _basis(pts, i, target_x)
        total += Fraction(yi * num, den)
    return total


def interpolate(
    points: Iterable[PointLike],
    target_x: int = 0,
    *,
    mode: Optional[DivisionMode] = None,
) -> int:
    """Evaluate the interpolating polynomial through *points* at *target_x*."""

    mode = mode or _config.settings.division_mode
    pts = _checked(points)
    _logger.debug("interpolating %d points at x=%d (%s)", len(pts), target_x, mode.value)

    if mode is DivisionMode.EXACT:
        value = interpolate_fraction(pts, target_x)
        if value.denominator != 1:
            raise NonIntegralSecret(value)
        return value.numerator

    total = 0
    for i, (_, yi) in enumerate(pts):
        num, den = _basis(pts, i, target_x)
        total += _divide_toward_zero(yi * num, den)
    return total


__all__ = ["DivisionMode", "interpolate", "interpolate_fraction"]
