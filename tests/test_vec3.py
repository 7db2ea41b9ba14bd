"""Tests for Vec3 class."""

import pytest
import math
import numpy as np

from spherecast.vec3 import Vec3, Point3, Color


class TestVec3Creation:
    """Test Vec3 construction."""

    def test_default_constructor(self):
        v = Vec3()
        assert v.x == 0.0
        assert v.y == 0.0
        assert v.z == 0.0

    def test_value_constructor(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    def test_from_array(self):
        v = Vec3.from_array(np.array([1.0, 2.0, 3.0]))
        assert v == Vec3(1, 2, 3)

    def test_channel_indexing(self):
        c = Color(0.1, 0.2, 0.3)
        assert [c[i] for i in range(3)] == [0.1, 0.2, 0.3]


class TestVec3Arithmetic:
    """Test Vec3 arithmetic operations."""

    def test_addition(self):
        assert Vec3(1, 2, 3) + Vec3(4, 5, 6) == Vec3(5, 7, 9)

    def test_subtraction(self):
        assert Vec3(4, 5, 6) - Vec3(1, 2, 3) == Vec3(3, 3, 3)

    def test_negation(self):
        assert -Vec3(1, -2, 3) == Vec3(-1, 2, -3)

    def test_scale(self):
        assert Vec3(1, 2, 3) * 2 == Vec3(2, 4, 6)
        assert 2 * Vec3(1, 2, 3) == Vec3(2, 4, 6)

    def test_component_product(self):
        assert Vec3(1, 2, 3) * Vec3(2, 3, 4) == Vec3(2, 6, 12)

    def test_division(self):
        assert Vec3(2, 4, 6) / 2 == Vec3(1, 2, 3)

    def test_equality_is_tolerant(self):
        assert Vec3(0.1 + 0.2, 0, 0) == Vec3(0.3, 0, 0)
        assert Vec3(1, 0, 0) != Vec3(1.001, 0, 0)

    def test_not_hashable(self):
        # Tolerant equality cannot agree with an exact hash
        with pytest.raises(TypeError):
            hash(Vec3(1, 2, 3))

    def test_operations_do_not_mutate(self):
        v = Vec3(1, 2, 3)
        _ = v + Vec3(1, 1, 1)
        _ = v * 5
        assert v == Vec3(1, 2, 3)


class TestVec3Products:
    """Test dot, cross and normalization."""

    def test_dot(self):
        assert Vec3(1, 2, 3).dot(Vec3(4, 5, 6)) == 32

    def test_dot_perpendicular(self):
        assert Vec3(1, 0, 0).dot(Vec3(0, 1, 0)) == 0

    def test_cross(self):
        assert Vec3(1, 0, 0).cross(Vec3(0, 1, 0)) == Vec3(0, 0, 1)

    def test_cross_anticommutative(self):
        a = Vec3(1, 2, 3)
        b = Vec3(-2, 0, 5)
        assert a.cross(b) == -(b.cross(a))

    def test_length(self):
        assert Vec3(3, 4, 0).length() == 5.0
        assert Vec3(3, 4, 0).length_squared() == 25.0

    def test_normalize(self):
        n = Vec3(3, 4, 0).normalize()
        assert math.isclose(n.length(), 1.0)
        assert n == Vec3(0.6, 0.8, 0)

    def test_max_component(self):
        assert Color(0.2, 1.5, 0.3).max_component() == 1.5


class TestAliases:

    def test_point_and_color_are_vec3(self):
        assert Point3 is Vec3
        assert Color is Vec3
