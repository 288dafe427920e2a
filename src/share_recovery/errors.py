# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Error taxonomy for share decoding and secret reconstruction.

Every failure is local to one ``decode``/``reconstruct`` call and is raised as a
subclass of :class:`RecoveryError`. The ``kind`` attribute is the class name so
callers can report failures without inspecting types.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class RecoveryError(Exception):
    """Base class for every deterministic recovery failure."""

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidBase(RecoveryError, ValueError):
    def __init__(self, base: Any) -> None:
        self.base = base
        super().__init__(f"base {base!r} is not an integer in [2, 36]")


class InvalidDigit(RecoveryError, ValueError):
    def __init__(self, character: Optional[str], position: int, base: int) -> None:
        self.character = character
        self.position = position
        self.base = base
        if character is None:
            message = "empty numeral"
        else:
            message = f"character {character!r} at position {position} is not a base-{base} digit"
        super().__init__(message)


class InvalidShare(RecoveryError, TypeError):
    """Raised when a share point is not a pair of plain integers."""

    def __init__(self, point: Any) -> None:
        self.point = point
        if isinstance(point, tuple):
            shape = ", ".join(type(v).__name__ for v in point)
        else:
            shape = type(point).__name__
        super().__init__(f"share point must be a pair of integers, got ({shape})")


class DuplicateAbscissa(RecoveryError):
    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"more than one share has x = {x}")


class InconsistentShares(RecoveryError):
    """Raised when the points do not lie on one integer-coefficient polynomial."""

    def __init__(
        self,
        message: str,
        *,
        numerator: Optional[int] = None,
        denominator: Optional[int] = None,
        indices: Sequence[int] = (),
    ) -> None:
        self.numerator = numerator
        self.denominator = denominator
        self.indices = tuple(indices)
        super().__init__(message)


class InsufficientShares(RecoveryError):
    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(f"need {required} shares, only {available} usable")


class DatasetFormatError(RecoveryError, ValueError):
    """Raised for malformed or unreadable dataset documents."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


__all__ = [
    "RecoveryError",
    "InvalidBase",
    "InvalidDigit",
    "InvalidShare",
    "DuplicateAbscissa",
    "InconsistentShares",
    "InsufficientShares",
    "DatasetFormatError",
]
