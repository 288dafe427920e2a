# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Dataset documents: one threshold ``k`` plus base-encoded share entries.

A document looks like::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"}
    }

Bases are kept raw here; :mod:`share_recovery.numerals` validates them.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml

from .errors import DatasetFormatError

_logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


@dataclass(frozen=True)
class ShareEntry:
    index: int
    base: Union[int, str]
    value: str


@dataclass(frozen=True)
class Dataset:
    label: str
    k: int
    entries: Mapping[int, ShareEntry] = field(default_factory=dict)
    n: Optional[int] = None

    @property
    def available(self) -> int:
        return len(self.entries)

    def indices(self) -> list[int]:
        return sorted(self.entries)


def _decimal(text: str) -> Optional[int]:
    """Parse an ASCII decimal string, ``None`` if it is not one."""
    if not (text.isascii() and text.isdecimal()):
        return None
    try:
        return int(text)
    except ValueError:  # beyond the interpreter's int/str digit limit
        return None


def _parse_count(raw: Any, name: str, *, minimum: int) -> int:
    if isinstance(raw, bool):
        raise DatasetFormatError(f"keys.{name} must be an integer", field=f"keys.{name}")
    if isinstance(raw, str):
        parsed = _decimal(raw.strip())
        raw = raw if parsed is None else parsed
    if not isinstance(raw, int) or raw < minimum:
        raise DatasetFormatError(
            f"keys.{name} must be an integer >= {minimum}, got {raw!r}",
            field=f"keys.{name}",
        )
    return raw


def _parse_entry(key: Any, raw: Any) -> ShareEntry:
    text = str(key).strip()
    index = None if isinstance(key, bool) else _decimal(text)
    if index is None or index < 1:
        raise DatasetFormatError(f"share key {key!r} is not a positive index", field=str(key))
    if not isinstance(raw, Mapping):
        raise DatasetFormatError(f"share {index} must be an object", field=text)
    for name in ("base", "value"):
        if name not in raw:
            raise DatasetFormatError(f"share {index} has no {name!r}", field=f"{text}.{name}")
    value = raw["value"]
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            value = str(value)
        except ValueError as exc:
            raise DatasetFormatError(
                f"share {index} value is too large to read as text", field=f"{text}.value"
            ) from exc
    if not isinstance(value, str):
        raise DatasetFormatError(f"share {index} value must be a string", field=f"{text}.value")
    return ShareEntry(index=index, base=raw["base"], value=value)


def parse_dataset(document: Any, label: str) -> Dataset:
    """Build a :class:`Dataset` from a decoded JSON/YAML document."""
    if not isinstance(document, Mapping):
        raise DatasetFormatError(f"{label}: document must be an object")
    keys = document.get("keys")
    if not isinstance(keys, Mapping) or "k" not in keys:
        raise DatasetFormatError(f"{label}: missing keys.k", field="keys.k")
    k = _parse_count(keys["k"], "k", minimum=1)
    n = _parse_count(keys["n"], "n", minimum=0) if keys.get("n") is not None else None

    entries: dict[int, ShareEntry] = {}
    for key, raw in document.items():
        if key == "keys":
            continue
        entry = _parse_entry(key, raw)
        if entry.index in entries:
            raise DatasetFormatError(f"share {entry.index} is listed twice", field=str(key))
        entries[entry.index] = entry

    if n is not None and n != len(entries):
        _logger.warning("%s declares n=%d but lists %d shares", label, n, len(entries))
    return Dataset(label=label, k=k, entries=entries, n=n)


def load_dataset(path: Union[str, os.PathLike[str]]) -> Dataset:
    """Read and parse a dataset file (JSON, or YAML for ``.yaml``/``.yml``)."""
    p = Path(path)
    label = str(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetFormatError(f"cannot read {label}: {exc}") from exc
    try:
        if p.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise DatasetFormatError(f"cannot parse {label}: {exc}") from exc
    return parse_dataset(document, label)


__all__ = ["Dataset", "ShareEntry", "load_dataset", "parse_dataset"]
