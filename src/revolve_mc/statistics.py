"""Statistical utilities for Monte Carlo volume estimates."""

import math
from dataclasses import dataclass

import numpy as np

from .geometry import ShapePair
from .simulation import Simulation
from .types import DEFAULT_MAX_TRIALS, SimulationResult

Z_95: float = 1.96


@dataclass(frozen=True)
class EstimateSummary:
    """Spread of independent volume estimates around their mean."""
    count: int
    mean: float
    std_dev: float  # of the mean
    analytical: float

    @property
    def ci95(self) -> tuple[float, float]:
        half_width = Z_95 * self.std_dev
        return (self.mean - half_width, self.mean + half_width)

    @property
    def error(self) -> float:
        """Relative error of the mean against the analytical volume."""
        return abs(1.0 - self.mean / self.analytical)

    def covers_analytical(self) -> bool:
        lo, hi = self.ci95
        return lo <= self.analytical <= hi

    def to_dict(self) -> dict:
        lo, hi = self.ci95
        return {
            "count":      self.count,
            "mean":       self.mean,
            "std_dev":    self.std_dev,
            "ci95":       [lo, hi],
            "error":      self.error,
            "analytical": self.analytical,
        }

    def print_summary(self):
        lo, hi = self.ci95
        print(f"Runs: \t\t{self.count}")
        print(f"Mean: \t\t{self.mean:.6f} +/- {self.std_dev:.6f}")
        print(f"95% CI: \t[{lo:.6f}, {hi:.6f}]")
        print(f"Error of mean: \t{self.error:.4%}")
        print()


def summarize_estimates(values, analytical: float) -> EstimateSummary:
    """Welford mean and standard deviation of the mean of `values`."""
    count = 0
    mean = 0.0
    m2 = 0.0
    for value in values:
        count += 1
        delta = value - mean
        mean += delta / count
        m2 += delta * (value - mean)

    if count == 0:
        return EstimateSummary(0, 0.0, 0.0, analytical)
    variance = m2 / (count - 1) if count > 1 else 0.0
    return EstimateSummary(count, mean, math.sqrt(variance / count), analytical)


def summarize_runs(results: list[SimulationResult]) -> EstimateSummary:
    if not results:
        raise ValueError("Cannot summarize an empty list of runs")
    return summarize_estimates([r.estimate for r in results], results[0].analytical)


def repeated_estimates(seeds, samples: int, shapes: ShapePair = None,
                       max_trials=DEFAULT_MAX_TRIALS) -> list[SimulationResult]:
    """Run one independent single-run simulation per seed."""
    results = []
    for seed in seeds:
        sim = Simulation(seed=seed, shapes=shapes, max_trials=max_trials)
        results.append(sim.run(samples))
    return results


def fit_power_law(sample_counts, errors) -> tuple[float, float]:
    """Least-squares fit of error ~ amplitude * n**exponent in log-log space.

    Points with a zero (or negative) error carry no information on a log
    scale and are skipped.

    Returns: (amplitude, exponent)
    """
    n = np.asarray(sample_counts, dtype=np.float64)
    e = np.asarray(errors, dtype=np.float64)
    if n.shape != e.shape:
        raise ValueError(f"Length mismatch: {n.size} sample counts vs {e.size} errors")
    mask = (n > 0) & (e > 0)
    if np.count_nonzero(mask) < 2:
        raise ValueError("Need at least two points with positive error to fit a power law")

    exponent, log_amplitude = np.polyfit(np.log(n[mask]), np.log(e[mask]), 1)
    return (float(np.exp(log_amplitude)), float(exponent))


def figure_of_merit(rel_error: float, wall_time: float) -> float:
    """FOM = 1 / (R^2 * T). Higher is better."""
    if rel_error <= 0.0 or wall_time <= 0.0:
        return 0.0
    return 1.0 / (rel_error * rel_error * wall_time)
