"""Ensure the revolve_mc package is importable for local pytest runs."""

import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from revolve_mc.rng import RanRNG  # noqa: E402
from revolve_mc.simulation import Simulation  # noqa: E402


@pytest.fixture
def rng():
    return RanRNG()


@pytest.fixture
def sim():
    return Simulation()
