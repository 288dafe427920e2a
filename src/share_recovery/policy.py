# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Centralised recovery policy configuration.

The policy collects the tunables shared by the orchestrator and the command
line. Values can be overridden by environment variables; malformed values fall
back to the defaults.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from typing import Any, Sequence

SELECTION_MODES = ("first", "any")
_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _load_choice(name: str, choices: Sequence[str], default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    return lowered if lowered in choices else default


def _load_level(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is None:
        return default
    upper = value.strip().upper()
    return upper if isinstance(logging.getLevelName(upper), int) else default


@dataclass(frozen=True)
class RecoveryPolicy:
    """Holds runtime tunables for share selection and reconstruction."""

    selection: str = "first"
    reduce_fractions: bool = True
    verify_surplus: bool = False
    max_threshold: int = 4096
    log_level: str = "WARNING"

    def with_overrides(self, **changes: Any) -> "RecoveryPolicy":
        """Return a copy with every non-``None`` override applied."""
        return dataclasses.replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_policy() -> RecoveryPolicy:
    """Load the recovery policy considering environment overrides."""

    return RecoveryPolicy(
        selection=_load_choice("SHARE_RECOVERY_SELECTION", SELECTION_MODES, "first"),
        reduce_fractions=_load_bool("SHARE_RECOVERY_REDUCE", True),
        verify_surplus=_load_bool("SHARE_RECOVERY_VERIFY", False),
        max_threshold=_load_int("SHARE_RECOVERY_MAX_K", 4096),
        log_level=_load_level("SHARE_RECOVERY_LOG_LEVEL", "WARNING"),
    )


policy = load_policy()


__all__ = ["RecoveryPolicy", "SELECTION_MODES", "policy", "load_policy"]
