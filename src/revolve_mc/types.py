"""
Shared constants and result containers for the rejection-sampling integrator.

The proposal region is the cylinder obtained by revolving y = 1 on
[-pi/2, pi/2] about the x axis; the target is the solid obtained by
revolving y = cos(x) over the same interval.
"""

import math
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PI: float = math.acos(-1.0)
HALF_PI: float = PI / 2.0
TWO_PI: float = 2.0 * PI

CYL_RADIUS: float = 1.0
CYL_LENGTH: float = PI
CYL_VOL: float = PI * PI
ANALYTICAL: float = CYL_VOL / 2

DEFAULT_SEED: int = 5555
DEFAULT_MAX_TRIALS: int = 1_000_000_000

MASK32: int = 0xFFFFFFFF
MASK64: int = 0xFFFFFFFFFFFFFFFF


Point = tuple[float, float, float]


# ---------------------------------------------------------------------------
# Result containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SweepPoint:
    """One (sample_count, estimate, error) triple of an error sweep."""
    sample_count: int
    estimate: float
    error: float

    def as_tuple(self) -> tuple[int, float, float]:
        return (self.sample_count, self.estimate, self.error)


class SimulationResult:
    """Outcome of a single accept/reject run."""

    def __init__(self, estimate, trials, successes, error, analytical,
                 seed=None, wall_time=0.0):
        self.estimate = estimate
        self.trials = trials
        self.successes = successes
        self.error = error
        self.analytical = analytical
        self.seed = seed
        self.wall_time = wall_time

    @property
    def efficiency(self) -> float:
        """Accepted fraction of all trials, as a percentage."""
        if self.trials == 0:
            return 0.0
        return 100.0 * self.successes / self.trials

    @property
    def samples_per_second(self) -> float:
        if self.wall_time <= 0.0:
            return 0.0
        return self.trials / self.wall_time

    @property
    def figure_of_merit(self) -> float:
        from .statistics import figure_of_merit
        return figure_of_merit(self.error, self.wall_time)

    def as_tuple(self) -> tuple[float, int, int, float]:
        return (self.estimate, self.trials, self.successes, self.error)

    def to_dict(self) -> dict:
        return {
            "estimate":           self.estimate,
            "trials":             self.trials,
            "successes":          self.successes,
            "error":              self.error,
            "efficiency_percent": self.efficiency,
            "analytical":         self.analytical,
            "seed":               self.seed,
            "wall_time_sec":      self.wall_time,
            "samples_per_sec":    self.samples_per_second,
            "figure_of_merit":    self.figure_of_merit,
        }

    def print_summary(self):
        """Print the calculator-mode summary block."""
        print()
        print(f"Value: \t\t{self.estimate:.6g}")
        print(f"Samples: \t{self.successes}")
        print(f"Efficiency: \t{int(self.efficiency)}%")
        print(f"True value: \t{self.analytical:.6g}")
        print(f"Error: \t\t{int(self.error * 100)}%")
        print(f"Throughput: \t{self.samples_per_second:,.0f} samples/sec")
        print()


class SweepResult:
    """Ordered error-sweep results, one SweepPoint per sample count."""

    def __init__(self, points: list[SweepPoint], analytical: float,
                 seed=None, wall_time: float = 0.0):
        self.points = points
        self.analytical = analytical
        self.seed = seed
        self.wall_time = wall_time

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def sample_counts(self) -> list[int]:
        return [p.sample_count for p in self.points]

    def estimates(self) -> list[float]:
        return [p.estimate for p in self.points]

    def errors(self) -> list[float]:
        return [p.error for p in self.points]

    def to_dict(self) -> dict:
        return {
            "analytical":    self.analytical,
            "seed":          self.seed,
            "wall_time_sec": self.wall_time,
            "points":        [list(p.as_tuple()) for p in self.points],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SweepResult':
        points = [SweepPoint(int(n), float(est), float(err))
                  for n, est, err in data.get("points", [])]
        return cls(
            points=points,
            analytical=data.get("analytical", ANALYTICAL),
            seed=data.get("seed"),
            wall_time=data.get("wall_time_sec", 0.0),
        )
