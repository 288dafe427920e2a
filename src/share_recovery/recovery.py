# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Per-dataset orchestration: select shares, decode, reconstruct.

Core functions raise :class:`~share_recovery.errors.RecoveryError` subclasses.
:func:`recover_outcome` and :func:`recover_files` turn them into explicit
:class:`RecoveryOutcome` values so one bad dataset never stops a batch.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Union

from . import policy as policy_module
from .dataset import Dataset, ShareEntry, load_dataset
from .errors import InconsistentShares, InsufficientShares, InvalidBase, InvalidDigit, RecoveryError
from .interpolation import Share, evaluate_at, reconstruct
from .numerals import decode, parse_base
from .policy import SELECTION_MODES, RecoveryPolicy

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecoveryOutcome:
    """Result of one dataset: either ``secret`` or ``error`` is set."""

    label: str
    secret: Optional[int] = None
    error: Optional[RecoveryError] = None

    @classmethod
    def success(cls, label: str, secret: int) -> "RecoveryOutcome":
        return cls(label=label, secret=secret)

    @classmethod
    def failure(cls, label: str, error: RecoveryError) -> "RecoveryOutcome":
        return cls(label=label, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind


def decode_entry(entry: ShareEntry) -> Share:
    """Decode one entry into a share point with ``x`` = its index."""
    return Share(entry.index, decode(entry.value, parse_base(entry.base)))


def select_shares(
    dataset: Dataset,
    *,
    selection: str = "first",
    max_threshold: Optional[int] = None,
) -> list[Share]:
    """Pick and decode ``k`` shares from ``dataset``.

    ``"first"`` requires indices ``1..k``; ``"any"`` takes the lowest ``k``
    indices that decode cleanly.
    """
    if selection not in SELECTION_MODES:
        raise ValueError(f"unknown selection mode {selection!r}")
    k = dataset.k
    if max_threshold is not None and k > max_threshold:
        raise InsufficientShares(k, min(dataset.available, max_threshold))

    if selection == "first":
        missing = [i for i in range(1, k + 1) if i not in dataset.entries]
        if missing:
            raise InsufficientShares(k, k - len(missing))
        return [decode_entry(dataset.entries[i]) for i in range(1, k + 1)]

    shares: list[Share] = []
    for index in dataset.indices():
        try:
            shares.append(decode_entry(dataset.entries[index]))
        except (InvalidBase, InvalidDigit) as exc:
            _logger.warning("%s: skipping share %d: %s", dataset.label, index, exc)
            continue
        if len(shares) == k:
            return shares
    raise InsufficientShares(k, len(shares))


def _check_surplus(dataset: Dataset, basis: list[Share], reduce: bool) -> None:
    used = {share.x for share in basis}
    mismatched: list[int] = []
    for index in dataset.indices():
        if index in used:
            continue
        try:
            share = decode_entry(dataset.entries[index])
        except (InvalidBase, InvalidDigit) as exc:
            _logger.warning("%s: cannot verify share %d: %s", dataset.label, index, exc)
            continue
        if evaluate_at(basis, share.x, reduce=reduce) != share.y:
            mismatched.append(index)
    if mismatched:
        raise InconsistentShares(
            f"shares {', '.join(map(str, mismatched))} do not lie on the recovered polynomial",
            indices=mismatched,
        )


def recover(dataset: Dataset, *, policy: Optional[RecoveryPolicy] = None) -> int:
    """Recover the secret of one dataset, raising on any failure."""
    active = policy or policy_module.policy
    shares = select_shares(dataset, selection=active.selection, max_threshold=active.max_threshold)
    _logger.debug("%s: using shares %s", dataset.label, [s.x for s in shares])
    secret = reconstruct(shares, reduce=active.reduce_fractions)
    if active.verify_surplus:
        _check_surplus(dataset, shares, active.reduce_fractions)
    _logger.info("%s: recovered secret from k=%d (%s)", dataset.label, dataset.k, active.selection)
    return secret


def recover_outcome(dataset: Dataset, *, policy: Optional[RecoveryPolicy] = None) -> RecoveryOutcome:
    try:
        secret = recover(dataset, policy=policy)
    except RecoveryError as exc:
        _logger.warning("%s: %s: %s", dataset.label, exc.kind, exc)
        return RecoveryOutcome.failure(dataset.label, exc)
    return RecoveryOutcome.success(dataset.label, secret)


def recover_files(
    paths: Iterable[Union[str, os.PathLike[str]]],
    *,
    policy: Optional[RecoveryPolicy] = None,
) -> list[RecoveryOutcome]:
    """Load and recover every file independently."""
    outcomes: list[RecoveryOutcome] = []
    for path in paths:
        try:
            dataset = load_dataset(path)
        except RecoveryError as exc:
            _logger.warning("%s: %s: %s", path, exc.kind, exc)
            outcomes.append(RecoveryOutcome.failure(str(path), exc))
            continue
        outcomes.append(recover_outcome(dataset, policy=policy))
    return outcomes


__all__ = [
    "RecoveryOutcome",
    "decode_entry",
    "select_shares",
    "recover",
    "recover_outcome",
    "recover_files",
]
