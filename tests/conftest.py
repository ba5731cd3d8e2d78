"""Shared fixtures: seeded and scripted random sources."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cryptolab.core_crypto.random_source import SeededRandomSource, set_seed  # noqa: E402

from .utils import ScriptedSource  # noqa: E402


@pytest.fixture
def rng():
    """Random source with a fixed seed."""
    return SeededRandomSource(seed=1234)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedSource


@pytest.fixture
def reset_default_source():
    """Restore a fresh process-wide random source after the test."""
    yield
    set_seed(None)
