"""Proposal sampler and membership tests."""

import math

import pytest

from revolve_mc.geometry import (
    ShapePair, cos_revolution, cylinder_radius, inside_revolved_cos,
    revolved_cos_radius, sample_cylinder,
)
from revolve_mc.rng import RanRNG
from revolve_mc.types import ANALYTICAL, CYL_VOL, HALF_PI

# First ten proposals for seed 5555, recorded from the reference C implementation
REFERENCE_TRACE = [
    (-1.3422561367746564, 0.47041221014772266, -0.18933269930089616, False),
    (0.14465541522034497, -0.040670361477040035, 0.68674748103125638, True),
    (-1.4116025675390667, 0.46592846512816377, 0.037546097153684149, False),
    (-0.53976307292531178, -0.7123234257824127, -0.54069165555642285, False),
    (-0.77629971849372736, -0.12046759861896994, -0.37253263667001496, True),
    (0.070315069913167161, -0.40089960221206378, -0.093236221230622487, True),
    (-0.52377353936180171, 0.56947139034366845, 0.4140592710014413, True),
    (-1.0274776326223414, -0.20421033908561431, 0.969225078289907, False),
    (1.2434887840495286, -0.24012362354891356, -0.4165033068299957, False),
    (-0.36509876018394083, -0.97315163236801105, -0.17944798538256435, False),
]


def test_first_ten_proposals_match_reference_trace(rng):
    for x, y, z, accepted in REFERENCE_TRACE:
        point = sample_cylinder(rng)
        assert point == pytest.approx((x, y, z), abs=1e-15)
        assert inside_revolved_cos(point) is accepted


def test_sample_cylinder_stays_inside_bounds(rng):
    for _ in range(20_000):
        x, y, z = sample_cylinder(rng)
        assert -HALF_PI <= x <= HALF_PI
        assert y * y + z * z <= 1.0 + 1e-12


def test_sample_cylinder_uses_three_draws():
    a = RanRNG(3)
    b = RanRNG(3)
    sample_cylinder(a)
    for _ in range(3):
        b.int64()
    assert a.int64() == b.int64()


def test_radii():
    assert cylinder_radius((0.3, 0.1, 0.2)) == 1.0
    assert revolved_cos_radius((0.0, 0.0, 0.0)) == 1.0
    assert revolved_cos_radius((math.pi / 3, 0.5, 0.5)) == pytest.approx(0.5)


def test_membership_is_strict():
    assert inside_revolved_cos((0.0, 0.0, 0.0))
    assert inside_revolved_cos((0.0, 0.6, 0.6))
    assert not inside_revolved_cos((math.pi / 3, 0.6, 0.0))
    assert not inside_revolved_cos((0.0, 1.0, 0.0))
    assert not inside_revolved_cos((HALF_PI, 0.01, 0.0))


def test_cos_revolution_volumes():
    shapes = cos_revolution()
    assert shapes.bounding_volume == CYL_VOL
    assert shapes.analytical_volume == ANALYTICAL
    assert shapes.analytical_volume == pytest.approx(shapes.bounding_volume / 2)
    assert shapes.sampler is sample_cylinder
    assert shapes.membership is inside_revolved_cos


@pytest.mark.parametrize("bounding, analytical", [(0.0, 1.0), (-1.0, 1.0), (1.0, 0.0)])
def test_shape_pair_rejects_non_positive_volumes(bounding, analytical):
    with pytest.raises(ValueError):
        ShapePair(sample_cylinder, inside_revolved_cos, bounding, analytical)
