"""Runtime configuration for secret reconstruction.

Tunables are read once from environment variables so that the library, the
command line tool and the tests share a single source of truth. Malformed
values fall back to the defaults instead of failing at import time.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass


class DivisionMode(enum.Enum):
    """How each Lagrange term is divided by its denominator."""

    EXACT = "exact"
    TRUNCATE = "truncate"


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_division(name: str, default: DivisionMode) -> DivisionMode:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return DivisionMode(value.strip().lower())
    except ValueError:
        return default


def _load_level(name: str, default: str) -> str:
    value = (os.environ.get(name) or "").strip().upper()
    if value in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return value
    return default


@dataclass(frozen=True)
class Settings:
    """Holds runtime tunables for reconstruction."""

    division_mode: DivisionMode = DivisionMode.EXACT
    log_level: str = "WARNING"
    max_digits: int = 4096


def load_settings() -> Settings:
    """Load the settings considering environment overrides."""

    return Settings(
        division_mode=_load_division("POLYSECRET_DIVISION", DivisionMode.EXACT),
        log_level=_load_level("POLYSECRET_LOG_LEVEL", "WARNING"),
        max_digits=max(1, _load_int("POLYSECRET_MAX_DIGITS", 4096)),
    )


settings = load_settings()


__all__ = ["DivisionMode", "Settings", "settings", "load_settings"]
