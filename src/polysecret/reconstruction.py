"""Share selection and secret reconstruction."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from polysecret.errors import ErrorKind, InsufficientShares, ReconstructionError
from polysecret.interpolation import interpolate
from polysecret.models import Point, ShareSet
from polysecret.settings import DivisionMode

_logger = logging.getLogger(__name__)


def decode_points(share_set: ShareSet) -> list[Point]:
    """Decode every present share with index ``1..n``, in ascending order."""

    return [share_set.shares[i].to_point() for i in share_set.present_indices()]


def select_points(points: list[Point], k: int) -> list[Point]:
    """Return the first *k* points or raise :class:`InsufficientShares`."""

    if len(points) < k:
        raise InsufficientShares(k, len(points))
    return points[:k]


def find_secret(share_set: ShareSet, *, mode: Optional[DivisionMode] = None) -> int:
    """Reconstruct the polynomial's value at ``x = 0`` from *share_set*."""

    points = decode_points(share_set)
    selected = select_points(points, share_set.k)
    _logger.debug(
        "share set %s: using x=%s of %d decoded shares",
        share_set.name or "<unnamed>",
        [p.x for p in selected],
        len(points),
    )
    return interpolate(selected, 0, mode=mode)


@dataclass(frozen=True)
class ReconstructionOutcome:
    """Result of one reconstruction: either a secret or the error that stopped it."""

    name: Optional[str]
    secret: Optional[int] = None
    error: Optional[ReconstructionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None


def try_find_secret(share_set: ShareSet, *, mode: Optional[DivisionMode] = None) -> ReconstructionOutcome:
    try:
        secret = find_secret(share_set, mode=mode)
    except ReconstructionError as exc:
        _logger.info("share set %s failed: %s", share_set.name or "<unnamed>", exc)
        return ReconstructionOutcome(name=share_set.name, error=exc)
    return ReconstructionOutcome(name=share_set.name, secret=secret)


def find_secrets(
    share_sets: Iterable[ShareSet], *, mode: Optional[DivisionMode] = None
) -> list[ReconstructionOutcome]:
    """Reconstruct each share set independently."""

    return [try_find_secret(s, mode=mode) for s in share_sets]


__all__ = [
    "decode_points",
    "select_points",
    "find_secret",
    "ReconstructionOutcome",
    "try_find_secret",
    "find_secrets",
]
