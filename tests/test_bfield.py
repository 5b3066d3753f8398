from dataclasses import dataclass, field

import numpy as np
import pytest

from kinkal.bfield import (
    BFieldMap,
    CompositeBFieldMap,
    GradientBFieldMap,
    UniformBFieldMap,
    cbar,
)
from kinkal.timerange import TimeRange
from kinkal.units import c_light


@dataclass
class _StraightTraj:
    pos0: np.ndarray
    vel: np.ndarray
    mom: float
    charge: float
    range: TimeRange
    nominal: np.ndarray = field(default_factory=lambda: np.zeros(3))

    def position3(self, t):
        return self.pos0 + self.vel * t

    def velocity(self, t):
        return self.vel.copy()

    def momentum(self, t):
        return self.mom

    def bnom(self, t):
        return self.nominal.copy()


class _OutOfRange(UniformBFieldMap):
    def in_range(self, position):
        return False


def _traj(charge=-1.0):
    return _StraightTraj(
        pos0=np.array([0.0, 0.0, -500.0]),
        vel=np.array([100.0, 50.0, 200.0]),
        mom=100.0,
        charge=charge,
        range=TimeRange(0.0, 20.0),
    )


def test_cbar_value():
    assert cbar() == pytest.approx(0.299792458)
    assert cbar() == pytest.approx(c_light / 1000.0)


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        BFieldMap()


def test_uniform_scalar_and_vector():
    scalar = UniformBFieldMap(1.0)
    vector = UniformBFieldMap([0.0, 0.0, 1.0])
    pos = [10.0, -3.0, 400.0]
    np.testing.assert_allclose(scalar.field_vect(pos), vector.field_vect(pos))
    np.testing.assert_allclose(scalar.field_vect(pos), [0.0, 0.0, 1.0])
    np.testing.assert_allclose(scalar.field_grad(pos), np.zeros((3, 3)))
    np.testing.assert_allclose(scalar.field_deriv(pos, [1.0, 2.0, 3.0]), np.zeros(3))
    assert scalar.in_range(pos) is True


def test_uniform_describe():
    assert UniformBFieldMap(1.0).describe() == "Uniform BField, B = (0,0,1)\n"


def test_composite_sums_constituents():
    a = UniformBFieldMap([0.1, 0.0, 1.0])
    b = GradientBFieldMap(0.9, 1.1, -1000.0, 1000.0)
    comp = CompositeBFieldMap([a])
    comp.add_field(b)
    pos = [5.0, 7.0, 300.0]
    vel = [1.0, 2.0, 3.0]
    np.testing.assert_allclose(comp.field_vect(pos), a.field_vect(pos) + b.field_vect(pos))
    np.testing.assert_allclose(comp.field_grad(pos), a.field_grad(pos) + b.field_grad(pos))
    np.testing.assert_allclose(
        comp.field_deriv(pos, vel), a.field_deriv(pos, vel) + b.field_deriv(pos, vel)
    )
    assert comp.in_range(pos) is True


def test_composite_in_range_requires_all():
    comp = CompositeBFieldMap([UniformBFieldMap(1.0), _OutOfRange(0.5)])
    assert comp.in_range([0.0, 0.0, 0.0]) is False


def test_composite_describe_lists_constituents():
    a = UniformBFieldMap(1.0)
    comp = CompositeBFieldMap([a])
    text = comp.describe()
    assert text.startswith("Composite BField with constituents as follows:\n")
    assert text.endswith(a.describe())


def test_empty_composite_is_zero():
    comp = CompositeBFieldMap()
    np.testing.assert_allclose(comp.field_vect([1.0, 2.0, 3.0]), np.zeros(3))


def test_gradient_field_endpoints():
    g = GradientBFieldMap(0.9, 1.1, -1500.0, 1500.0)
    assert g.field_vect([0.0, 0.0, -1500.0])[2] == pytest.approx(0.9)
    assert g.field_vect([0.0, 0.0, 1500.0])[2] == pytest.approx(1.1)


def test_gradient_field_consistency():
    g = GradientBFieldMap(0.9, 1.1, -1500.0, 1500.0)
    dz = g.field_vect([0.0, 0.0, 1.0])[2] - g.field_vect([0.0, 0.0, 0.0])[2]
    assert dz == pytest.approx(g.gradient)
    grad = g.field_grad([1.0, 2.0, 3.0])
    assert grad[2][2] == pytest.approx(-g.gradient)
    assert grad[0][0] == pytest.approx(grad[1][1])
    assert grad[0][1] == 0.0
    vec = g.field_vect([4.0, -2.0, 0.0])
    assert vec[0] == pytest.approx(grad[0][0] * 4.0)
    assert g.in_range([1e9, 0.0, 0.0]) is True


def test_gradient_describe_mentions_units():
    g = GradientBFieldMap(1.0, 1.0, 0.0, 1.0)
    assert g.describe() == "BField with  constant gradient of 0 Tesla/mm\n"


def test_range_in_tolerance_uniform_returns_end():
    traj = _traj()
    assert UniformBFieldMap(1.0).range_in_tolerance(traj, 2.0, 1e-4) == traj.range.end


def test_range_in_tolerance_scales_with_sqrt_tolerance():
    g = GradientBFieldMap(0.9, 1.1, -1500.0, 1500.0)
    traj = _traj()
    tstart = 1.0
    t1 = g.range_in_tolerance(traj, tstart, 1e-4)
    t4 = g.range_in_tolerance(traj, tstart, 4e-4)
    assert t1 > tstart
    assert (t4 - tstart) == pytest.approx(2.0 * (t1 - tstart))


def test_integrate_zero_when_field_matches_nominal():
    traj = _traj()
    traj.nominal = np.array([0.0, 0.0, 1.0])
    result = UniformBFieldMap(1.0).integrate(traj, TimeRange(0.0, 10.0))
    np.testing.assert_allclose(result, np.zeros(3), atol=1e-12)


def test_integrate_is_linear_and_perpendicular():
    field_map = UniformBFieldMap([0.0, 0.1, 1.0])
    traj = _traj()
    short = field_map.integrate(traj, TimeRange(0.0, 5.0))
    long = field_map.integrate(traj, TimeRange(0.0, 10.0))
    np.testing.assert_allclose(long, 2.0 * short)
    assert np.dot(short, traj.vel) == pytest.approx(0.0, abs=1e-9)
    assert np.dot(short, field_map.field_vect([0, 0, 0])) == pytest.approx(0.0, abs=1e-9)
    flipped = _traj(charge=1.0)
    np.testing.assert_allclose(field_map.integrate(flipped, TimeRange(0.0, 5.0)), -short)