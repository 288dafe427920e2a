# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

# src/share_recovery/numerals.py
"""Positional numeral decoding for share values in bases 2 to 36."""

from __future__ import annotations

import string
from typing import Any

from .errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36

_ALPHABET = string.digits + string.ascii_lowercase
# ASCII only: str.lower() also maps U+212A KELVIN SIGN to "k".
_DIGIT_VALUES = {ch: i for i, ch in enumerate(_ALPHABET)}
_DIGIT_VALUES.update({ch.upper(): i for ch, i in _DIGIT_VALUES.items() if ch.isalpha()})


def _check_base(base: Any) -> int:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBase(base)
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base)
    return base


def parse_base(raw: Any) -> int:
    """Convert a document's base field (``16`` or ``"16"``) to an int."""
    if isinstance(raw, str):
        text = raw.strip()
        if not text.isdigit() or not text.isascii():
            raise InvalidBase(raw)
        raw = int(text)
    return _check_base(raw)


def decode(digits: str, base: int) -> int:
    """Interpret ``digits`` as an unsigned base-``base`` numeral.

    Most significant digit first. Signs, whitespace, underscores and
    fractional parts are rejected, unlike :func:`int`.
    """
    base = _check_base(base)
    if not digits:
        raise InvalidDigit(None, 0, base)
    value = 0
    for position, ch in enumerate(digits):
        digit = _DIGIT_VALUES.get(ch)
        if digit is None or digit >= base:
            raise InvalidDigit(ch, position, base)
        value = value * base + digit
    return value


def encode(value: int, base: int) -> str:
    """Render a non-negative integer in ``base`` using lowercase digits."""
    base = _check_base(base)
    if value < 0:
        raise ValueError("cannot encode a negative value")
    if value == 0:
        return "0"
    out: list[str] = []
    while value:
        value, digit = divmod(value, base)
        out.append(_ALPHABET[digit])
    return "".join(reversed(out))


__all__ = ["MIN_BASE", "MAX_BASE", "decode", "encode", "parse_base"]
