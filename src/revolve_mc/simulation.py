"""Rejection-sampling volume integrator."""

import time

from .geometry import ShapePair, cos_revolution
from .rng import RanRNG
from .types import DEFAULT_MAX_TRIALS, DEFAULT_SEED, SimulationResult, SweepPoint, SweepResult


class InvalidSampleCount(ValueError):
    """A sample count, sweep bound or step was not a positive integer."""


class TrialLimitExceeded(RuntimeError):
    """The accept/reject loop hit max_trials before reaching its target."""

    def __init__(self, max_trials: int, trials: int, successes: int, target: int):
        super().__init__(
            f"Reached {trials} trials with {successes}/{target} accepted samples "
            f"(max_trials={max_trials})"
        )
        self.max_trials = max_trials
        self.trials = trials
        self.successes = successes
        self.target = target


def _require_positive(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidSampleCount(f"{name} must be a positive integer, got {value!r}")
    return value


class Simulation:
    """Monte Carlo volume estimate by accept/reject against a bounding region.

    The generator is owned by the instance and is never reseeded between
    runs, so consecutive runs (and sweep steps) consume one continuous
    stream.
    """

    def __init__(self, seed: int = DEFAULT_SEED, shapes: ShapePair = None,
                 max_trials=DEFAULT_MAX_TRIALS, rng: RanRNG = None):
        self.rng = rng if rng is not None else RanRNG(seed)
        self.seed = self.rng.seed
        self.shapes = shapes if shapes is not None else cos_revolution()
        if max_trials is not None:
            _require_positive("max_trials", max_trials)
        self.max_trials = max_trials

    @property
    def analytical(self) -> float:
        return self.shapes.analytical_volume

    def run_trials(self, target_successes: int) -> tuple[int, int]:
        """Sample until target_successes points are accepted.

        Returns (trials, successes).
        """
        target = _require_positive("target_successes", target_successes)
        sampler = self.shapes.sampler
        membership = self.shapes.membership
        max_trials = self.max_trials
        rng = self.rng

        trials = 0
        successes = 0
        while successes < target:
            if max_trials is not None and trials >= max_trials:
                raise TrialLimitExceeded(max_trials, trials, successes, target)
            trials += 1
            if membership(sampler(rng)):
                successes += 1
        return trials, successes

    def estimate(self, trials: int, successes: int) -> float:
        """Accepted fraction times the bounding volume."""
        if trials <= 0:
            raise InvalidSampleCount("Cannot estimate a volume from zero trials")
        return (successes / trials) * self.shapes.bounding_volume

    def relative_error(self, estimate: float) -> float:
        return abs(1.0 - estimate / self.shapes.analytical_volume)

    def run(self, samples: int, verbose: bool = False) -> SimulationResult:
        """Single run: estimate the volume from `samples` accepted points."""
        wall_start = time.perf_counter()
        trials, successes = self.run_trials(samples)
        approx = self.estimate(trials, successes)
        result = SimulationResult(
            estimate=approx,
            trials=trials,
            successes=successes,
            error=self.relative_error(approx),
            analytical=self.analytical,
            seed=self.seed,
            wall_time=time.perf_counter() - wall_start,
        )
        if verbose:
            print(f"  samples {successes:>8d}  trials {trials:>9d}  "
                  f"estimate {approx:.6f}  error {result.error:.4%}")
        return result

    def sweep(self, min_samples: int, max_samples: int, step: int = 1,
              verbose: bool = False) -> SweepResult:
        """Error sweep over min_samples, min_samples + step, ... < max_samples.

        The first count always runs, even when min_samples >= max_samples.
        """
        _require_positive("min_samples", min_samples)
        _require_positive("max_samples", max_samples)
        _require_positive("step", step)

        if verbose:
            print(f"Starting error sweep ({self.shapes.name})")
            print(f"  Samples: {min_samples} .. <{max_samples}, step {step}")
            print(f"  Seed:    {self.seed}")
            print()

        wall_start = time.perf_counter()
        points = []
        samples = min_samples
        while True:
            result = self.run(samples, verbose=verbose)
            points.append(SweepPoint(samples, result.estimate, result.error))
            samples += step
            if samples >= max_samples:
                break

        return SweepResult(
            points=points,
            analytical=self.analytical,
            seed=self.seed,
            wall_time=time.perf_counter() - wall_start,
        )


def run_single(samples: int, seed: int = DEFAULT_SEED,
               shapes: ShapePair = None) -> tuple[float, int, int, float]:
    """Convenience wrapper returning (estimate, trials, successes, error)."""
    return Simulation(seed=seed, shapes=shapes).run(samples).as_tuple()


def run_sweep(min_samples: int, max_samples: int, step: int,
              seed: int = DEFAULT_SEED,
              shapes: ShapePair = None) -> list[tuple[int, float, float]]:
    """Convenience wrapper returning ordered (sample_count, estimate, error) triples."""
    sweep = Simulation(seed=seed, shapes=shapes).sweep(min_samples, max_samples, step)
    return [p.as_tuple() for p in sweep]
