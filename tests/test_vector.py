"""Tests for vector algebra and the Helmert transform."""

import math

import numpy as np
import pytest

from osgb_geodesy.datums import OSGB36, WGS84
from osgb_geodesy.vector import Vector3D

X = Vector3D(x=1, y=0, z=0)
Y = Vector3D(x=0, y=1, z=0)
Z = Vector3D(x=0, y=0, z=1)


# ── Arithmetic ───────────────────────────────────────────────────


class TestArithmetic:
    def test_add(self):
        assert Vector3D(x=1, y=2, z=3) + Vector3D(x=4, y=5, z=6) == Vector3D(x=5, y=7, z=9)

    def test_subtract(self):
        assert Vector3D(x=4, y=5, z=6) - Vector3D(x=1, y=2, z=3) == Vector3D(x=3, y=3, z=3)

    def test_elementwise_multiply(self):
        assert Vector3D(x=1, y=2, z=3) * Vector3D(x=2, y=3, z=4) == Vector3D(x=2, y=6, z=12)

    def test_elementwise_divide(self):
        assert Vector3D(x=2, y=6, z=12) / Vector3D(x=2, y=3, z=4) == Vector3D(x=1, y=2, z=3)

    def test_negate(self):
        assert Vector3D(x=1, y=-2, z=3).negate() == Vector3D(x=-1, y=2, z=-3)
        assert -Vector3D(x=1, y=-2, z=3) == Vector3D(x=-1, y=2, z=-3)

    def test_length(self):
        assert Vector3D(x=3, y=4, z=12).length == 13

    def test_array_round_trip(self):
        v = Vector3D(x=1.5, y=-2.5, z=3.25)
        assert Vector3D.from_array(v.to_array()) == v
        assert isinstance(v.to_array(), np.ndarray)

    def test_str(self):
        assert str(Vector3D(x=1, y=2.5, z=-3)) == "[1.000,2.500,-3.000]"


# ── Products ─────────────────────────────────────────────────────


class TestProducts:
    def test_dot(self):
        assert Vector3D(x=1, y=2, z=3).dot(Vector3D(x=4, y=5, z=6)) == 32

    def test_cross_of_axes(self):
        assert X.cross(Y) == Z
        assert Y.cross(X) == -Z

    def test_unit(self):
        u = Vector3D(x=3, y=4, z=0).unit()
        assert u.x == pytest.approx(0.6)
        assert u.y == pytest.approx(0.8)
        assert u.length == pytest.approx(1.0)

    def test_unit_of_zero_is_noop(self):
        zero = Vector3D(x=0, y=0, z=0)
        assert zero.unit() == zero

    def test_unit_of_unit_is_noop(self):
        assert X.unit() is X

    def test_angle_between_axes(self):
        assert X.angle_to(Y) == pytest.approx(math.pi / 2)

    def test_signed_angle_with_normal(self):
        assert X.angle_to(Y, Z) == pytest.approx(math.pi / 2)
        assert X.angle_to(Y, -Z) == pytest.approx(-math.pi / 2)

    def test_rotate_around_z(self):
        r = X.rotate_around(Z, math.pi / 2)
        assert r.x == pytest.approx(0, abs=1e-12)
        assert r.y == pytest.approx(1)
        assert r.z == pytest.approx(0, abs=1e-12)

    def test_rotate_returns_unit_vector(self):
        r = Vector3D(x=10, y=0, z=0).rotate_around(Z, math.pi)
        assert r.x == pytest.approx(-1)
        assert r.length == pytest.approx(1)


# ── Helmert transform ────────────────────────────────────────────


class TestApplyTransform:
    P = Vector3D(x=3874938.849, y=116218.624, z=5047168.208)

    def test_zero_transform_is_identity(self):
        assert self.P.apply_transform(WGS84.transform) == self.P

    def test_translation_only(self):
        moved = self.P.apply_transform((1, -2, 3, 0, 0, 0, 0))
        assert moved.x == pytest.approx(self.P.x + 1)
        assert moved.y == pytest.approx(self.P.y - 2)
        assert moved.z == pytest.approx(self.P.z + 3)

    def test_scale_in_ppm(self):
        moved = Vector3D(x=1e6, y=0, z=0).apply_transform((0, 0, 0, 1, 0, 0, 0))
        assert moved.x == pytest.approx(1e6 + 1)

    def test_rotation_in_arcseconds(self):
        moved = Vector3D(x=1e6, y=0, z=0).apply_transform((0, 0, 0, 0, 0, 0, 3600))
        # one degree about z, small-angle form: y' = x * rz
        assert moved.x == pytest.approx(1e6)
        assert moved.y == pytest.approx(1e6 * math.radians(1))

    def test_linearised_inverse_is_close(self):
        there = self.P.apply_transform(OSGB36.transform)
        back = there.apply_transform(tuple(-p for p in OSGB36.transform))
        assert (back - self.P).length < 0.05

    def test_wrong_parameter_count(self):
        with pytest.raises(ValueError):
            self.P.apply_transform((1, 2, 3))

    def test_to_lat_lon(self):
        p = Vector3D(x=WGS84.ellipsoid.major, y=0, z=0).to_lat_lon(WGS84)
        assert p.latitude == pytest.approx(0, abs=1e-12)
        assert p.longitude == pytest.approx(0, abs=1e-12)
        assert p.datum == WGS84
