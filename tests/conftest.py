"""Shared fixtures: dataset documents in the on-disk layout."""
from __future__ import annotations

import json
import sys

import pytest


@pytest.fixture
def sample_document():
    # P(x) = x^2 + 3, so the secret is 3 and share 6 (213 in base 4 = 39) agrees.
    return {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        "3": {"base": "10", "value": "12"},
        "6": {"base": "4", "value": "213"},
    }


@pytest.fixture
def write_dataset(tmp_path):
    def _write(name, document):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def default_int_str_limit():
    """Run under CPython's default int/str digit limit, restoring it afterwards."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str digit limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(previous)
