# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

# src/share_recovery/interpolation.py
"""Exact Lagrange interpolation over the integers.

This module provides two helper functions:

``reconstruct``
    Recover the secret ``P(0)`` from ``k`` share points of a degree ``k - 1``
    integer-coefficient polynomial.

``evaluate_at``
    Evaluate the same interpolated polynomial at any abscissa.

Individual Lagrange terms are generally non-integral even when their sum is an
integer, so every term is kept as an exact numerator/denominator pair and the
only division happens once, after summation.
"""

from __future__ import annotations

import logging
from math import gcd
from typing import Iterable, NamedTuple, Sequence, Tuple

from .errors import DuplicateAbscissa, InconsistentShares, InsufficientShares, InvalidShare

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    x: int
    y: int


def _as_share(point: Tuple[int, int]) -> Share:
    try:
        x, y = point
    except (TypeError, ValueError):
        raise InvalidShare(point) from None
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidShare(point)
    return Share(x, y)


def _as_shares(points: Iterable[Tuple[int, int]]) -> list[Share]:
    shares = [_as_share(point) for point in points]
    if not shares:
        raise InsufficientShares(1, 0)
    seen: set[int] = set()
    for share in shares:
        if share.x in seen:
            raise DuplicateAbscissa(share.x)
        seen.add(share.x)
    return shares


def _lagrange_interpolate(x: int, shares: Sequence[Share], reduce: bool) -> Tuple[int, int]:
    """Return the value at ``x`` as ``(numerator, denominator)``, denominator > 0."""
    num_total = 0
    den_total = 1
    for j, (xj, yj) in enumerate(shares):
        num = yj
        den = 1
        for i, (xi, _) in enumerate(shares):
            if i == j:
                continue
            num *= x - xi
            den *= xj - xi
        num_total = num_total * den + num * den_total
        den_total *= den
        if reduce:
            g = gcd(num_total, den_total)
            if g > 1:
                num_total //= g
                den_total //= g
    if den_total < 0:
        num_total, den_total = -num_total, -den_total
    return num_total, den_total


def evaluate_at(points: Iterable[Tuple[int, int]], x: int, *, reduce: bool = True) -> int:
    """Evaluate the polynomial through ``points`` at ``x``.

    Raises :class:`InconsistentShares` when the value is not an integer,
    i.e. the points do not lie on an integer-coefficient polynomial of degree
    ``len(points) - 1``.
    """
    if isinstance(x, bool) or not isinstance(x, int):
        raise TypeError(f"abscissa must be an integer, got {type(x).__name__}")
    shares = _as_shares(points)
    if len(shares) == 1:
        return shares[0].y
    numerator, denominator = _lagrange_interpolate(x, shares, reduce)
    _logger.debug(
        "Interpolated %d shares, denominator bit length %d",
        len(shares),
        denominator.bit_length(),
    )
    value, remainder = divmod(numerator, denominator)
    if remainder:
        raise InconsistentShares(
            f"interpolated value is not an integer ({numerator.bit_length()}-bit numerator"
            f" over {denominator.bit_length()}-bit denominator)",
            numerator=numerator,
            denominator=denominator,
        )
    return value


def reconstruct(points: Iterable[Tuple[int, int]], *, reduce: bool = True) -> int:
    """Recover the secret (the polynomial's value at zero) from share points."""
    return evaluate_at(points, 0, reduce=reduce)


__all__ = ["Share", "evaluate_at", "reconstruct"]
