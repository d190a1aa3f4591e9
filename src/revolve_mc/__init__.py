"""Rejection-sampling Monte Carlo estimate of a cos(x) solid of revolution."""

from .geometry import ShapePair, cos_revolution
from .rng import RanRNG
from .simulation import (
    InvalidSampleCount, Simulation, TrialLimitExceeded, run_single, run_sweep,
)
from .types import ANALYTICAL, CYL_VOL, SimulationResult, SweepPoint, SweepResult

__all__ = [
    "ANALYTICAL", "CYL_VOL", "InvalidSampleCount", "RanRNG", "ShapePair",
    "Simulation", "SimulationResult", "SweepPoint", "SweepResult",
    "TrialLimitExceeded", "cos_revolution", "run_single", "run_sweep",
]
