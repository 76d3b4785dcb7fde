"""
Pytest configuration and shared fixtures for Lean IMT tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from lean_imt.config import set_default_config  # noqa: E402
from lean_imt.crypto import join_hash  # noqa: E402
from lean_imt.imt import LeanIMT  # noqa: E402

from fixtures.trees import bracket_hash, make_leaves  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def join_tree():
    """Empty tree using the "left,right" join hash."""
    return LeanIMT(join_hash)


@pytest.fixture
def bracket_tree():
    """Empty tree using the shape-preserving H(left,right) hash."""
    return LeanIMT(bracket_hash)


@pytest.fixture
def four_leaves():
    return make_leaves(4)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove LEAN_IMT_* variables and reset the cached default config."""
    for name in ["LEAN_IMT_HASH_FUNCTION", "LEAN_IMT_LOG_LEVEL", "LEAN_IMT_LOG_FILE"]:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield monkeypatch
    set_default_config(None)
