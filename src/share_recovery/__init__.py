# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Reconstruct Shamir-style secrets exactly from base-encoded share points."""

from __future__ import annotations

from .dataset import Dataset, ShareEntry, load_dataset, parse_dataset
from .errors import (
    DatasetFormatError,
    DuplicateAbscissa,
    InconsistentShares,
    InsufficientShares,
    InvalidBase,
    InvalidDigit,
    InvalidShare,
    RecoveryError,
)
from .interpolation import Share, evaluate_at, reconstruct
from .numerals import decode, encode, parse_base
from .policy import RecoveryPolicy, load_policy
from .recovery import RecoveryOutcome, recover, recover_files, recover_outcome, select_shares

__version__ = "0.1.0"

__all__ = [
    "Dataset",
    "ShareEntry",
    "load_dataset",
    "parse_dataset",
    "RecoveryError",
    "InvalidBase",
    "InvalidDigit",
    "InvalidShare",
    "DuplicateAbscissa",
    "InconsistentShares",
    "InsufficientShares",
    "DatasetFormatError",
    "Share",
    "evaluate_at",
    "reconstruct",
    "decode",
    "encode",
    "parse_base",
    "RecoveryPolicy",
    "load_policy",
    "RecoveryOutcome",
    "recover",
    "recover_files",
    "recover_outcome",
    "select_shares",
]
