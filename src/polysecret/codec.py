"""Exact conversion between digit strings and integers in bases 2-36."""
from __future__ import annotations

import logging
import string

from polysecret import settings as _config
from polysecret.errors import InvalidShareValue

_logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 36
DIGITS = string.digits + string.ascii_lowercase

_DIGIT_VALUES = {ch: i for i, ch in enumerate(DIGITS)}


def _check_base(value: object, base: object) -> int:
    if isinstance(base, bool):
        raise InvalidShareValue(value, base, "base must be an integer")
    if isinstance(base, str):
        # share documents carry the base as a decimal string
        text = base.strip()
        if not text.isascii() or not text.isdigit():
            raise InvalidShareValue(value, base, "base must be an integer")
        base = int(text)
    if not isinstance(base, int):
        raise InvalidShareValue(value, base, "base must be an integer")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidShareValue(value, base, f"base must be between {MIN_BASE} and {MAX_BASE}")
    return base


def decode(value: str, base: int | str) -> int:
    """Return the integer that *value* denotes in *base*.

    Digits above 9 are the letters ``a``-``z`` in either case. A single
    leading ``+`` or ``-`` is accepted. Anything :func:`int` would tolerate
    beyond that (whitespace, underscores, ``0x`` prefixes) is rejected so that
    every share is read the same way regardless of its base.
    """

    radix = _check_base(value, base)
    if not isinstance(value, str):
        raise InvalidShareValue(value, radix, "value must be a string")

    digits = value
    negative = False
    if digits[:1] in ("+", "-"):
        negative = digits[0] == "-"
        digits = digits[1:]
    if not digits:
        raise InvalidShareValue(value, radix, "no digits")

    limit = _config.settings.max_digits
    if len(digits) > limit:
        raise InvalidShareValue(value, radix, f"more than {limit} digits")

    for ch in digits.lower():
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= radix:
            raise InvalidShareValue(value, radix, f"{ch!r} is not a base-{radix} digit")

    try:
        result = int(digits, radix)
    except ValueError as exc:  # interpreter digit limit
        raise InvalidShareValue(value, radix, str(exc)) from exc
    _logger.debug("decoded %d base-%d digits", len(digits), radix)
    return -result if negative else result


def encode(number: int, base: int = 10) -> str:
    """Render *number* in *base* using lower-case digits."""

    radix = _check_base(number, base)
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    number = abs(number)
    out: list[str] = []
    while number:
        number, digit = divmod(number, radix)
        out.append(DIGITS[digit])
    return sign + "".join(reversed(out))


__all__ = ["MIN_BASE", "MAX_BASE", "DIGITS", "decode", "encode"]
