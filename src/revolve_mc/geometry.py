"""Proposal and target shapes for rejection sampling.

The proposal is the cylinder of radius 1 around the x axis over
[-pi/2, pi/2]; the target is the solid obtained by revolving y = cos(x)
about the x axis over the same interval. A ShapePair bundles a sampler,
a membership test and the two volumes the estimator needs, so the
integrator can run against any pair.
"""

import math
from typing import Callable

from .rng import RanRNG
from .types import ANALYTICAL, CYL_RADIUS, CYL_VOL, HALF_PI, PI, TWO_PI, Point


def sample_cylinder(rng: RanRNG) -> Point:
    """Uniform point inside the bounding cylinder.

    Draw order is radius, angle, then x; changing it changes every
    downstream estimate for a given seed.
    """
    r = math.sqrt(rng.uniform())
    t = TWO_PI * rng.uniform()
    x = -HALF_PI + PI * rng.uniform()
    return (x, r * math.cos(t), r * math.sin(t))


def cylinder_radius(point: Point) -> float:
    """Radius of the proposal cylinder's cross-section (constant)."""
    return CYL_RADIUS


def revolved_cos_radius(point: Point) -> float:
    """Radius of the target solid's cross-section at x = point[0]."""
    return math.cos(point[0])


def inside_revolved_cos(point: Point) -> bool:
    """True if the point lies strictly inside the revolved cos(x) solid."""
    _x, y, z = point
    return math.sqrt(y * y + z * z) < revolved_cos_radius(point)


class ShapePair:
    """A proposal sampler paired with a target membership test."""

    def __init__(self, sampler: Callable[[RanRNG], Point],
                 membership: Callable[[Point], bool],
                 bounding_volume: float, analytical_volume: float,
                 name: str = "custom"):
        """
        Args:
            sampler: Callable rng -> point, uniform over the bounding region.
            membership: Callable point -> bool, True inside the target.
            bounding_volume: Volume of the region the sampler covers.
            analytical_volume: Closed-form target volume used for errors.
            name: Label used in summaries and JSON output.
        """
        if bounding_volume <= 0.0:
            raise ValueError(f"Bounding volume must be positive, got {bounding_volume}")
        if analytical_volume <= 0.0:
            raise ValueError(f"Analytical volume must be positive, got {analytical_volume}")
        self.sampler = sampler
        self.membership = membership
        self.bounding_volume = bounding_volume
        self.analytical_volume = analytical_volume
        self.name = name

    def __repr__(self) -> str:
        return (f"ShapePair(name={self.name!r}, bounding_volume={self.bounding_volume:.6g}, "
                f"analytical_volume={self.analytical_volume:.6g})")


def cos_revolution() -> ShapePair:
    """Cylinder proposal against the revolved cos(x) solid.

    Disk integration gives pi * integral(cos^2) = pi^2 / 2, half the
    cylinder volume.
    """
    return ShapePair(
        sampler=sample_cylinder,
        membership=inside_revolved_cos,
        bounding_volume=CYL_VOL,
        analytical_volume=ANALYTICAL,
        name="cos-revolution",
    )
