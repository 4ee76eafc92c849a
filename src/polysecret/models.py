"""Typed share, point and share-set structures."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from polysecret.codec import decode
from polysecret.errors import DuplicateCoordinate, InvalidShareSet

_logger = logging.getLogger(__name__)


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Share:
    """One encoded sample point; ``index`` doubles as the x-coordinate."""

    index: int
    base: int
    value: str

    def to_point(self) -> Point:
        return Point(self.index, decode(self.value, self.base))


def _parse_int(raw: Any, what: str) -> int:
    if isinstance(raw, bool):
        raise InvalidShareSet(f"{what} must be an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().isascii():
        try:
            return int(raw.strip())
        except ValueError as exc:
            raise InvalidShareSet(f"{what} must be an integer, got {raw!r}") from exc
    raise InvalidShareSet(f"{what} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class ShareSet:
    """All shares available for one reconstruction.

    ``n`` is the declared number of shares and ``k`` the threshold. Only
    shares with indices ``1..n`` take part in reconstruction.
    """

    n: int
    k: int
    shares: Mapping[int, Share] = field(default_factory=dict)
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.n < 1:
            raise InvalidShareSet(f"n must be positive, got {self.n}")
        if not 1 <= self.k <= self.n:
            raise InvalidShareSet(f"k must satisfy 1 <= k <= n, got k={self.k}, n={self.n}")
        for index, share in self.shares.items():
            if index < 1:
                raise InvalidShareSet(f"share index must be positive, got {index}")
            if share.index != index:
                raise InvalidShareSet(f"share stored under {index} has index {share.index}")
        object.__setattr__(self, "shares", MappingProxyType(dict(self.shares)))
        ignored = sorted(i for i in self.shares if i > self.n)
        if ignored:
            _logger.warning("shares %s lie beyond n=%d and will be ignored", ignored, self.n)

    def __hash__(self) -> int:
        return hash((self.n, self.k, tuple(sorted(self.shares.items())), self.name))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], name: str | None = None) -> "ShareSet":
        """Build a share set from the ``{"keys": {...}, "1": {...}}`` layout."""

        if not isinstance(data, Mapping):
            raise InvalidShareSet(f"share set must be a mapping, got {type(data).__name__}")
        keys = data.get("keys")
        if not isinstance(keys, Mapping):
            raise InvalidShareSet("share set is missing its 'keys' block")
        try:
            n = _parse_int(keys["n"], "n")
            k = _parse_int(keys["k"], "k")
        except KeyError as exc:
            raise InvalidShareSet(f"'keys' block is missing {exc.args[0]!r}") from exc

        shares: dict[int, Share] = {}
        for key, entry in data.items():
            if key == "keys":
                continue
            index = _parse_int(key, "share index")
            if index in shares:
                raise DuplicateCoordinate(index)
            if not isinstance(entry, Mapping) or "base" not in entry or "value" not in entry:
                raise InvalidShareSet(f"share {key!r} must have 'base' and 'value'")
            value = entry["value"]
            if not isinstance(value, str):
                raise InvalidShareSet(f"share {key!r} value must be a string, got {value!r}")
            # validated on decode
            base = entry["base"]
            if isinstance(base, str) and base.strip().isascii() and base.strip().isdigit():
                base = int(base.strip())
            shares[index] = Share(index=index, base=base, value=value)
        return cls(n=n, k=k, shares=shares, name=name)

    def present_indices(self) -> list[int]:
        return sorted(i for i in self.shares if i <= self.n)


__all__ = ["Point", "Share", "ShareSet"]
