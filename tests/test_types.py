"""
Tests for the Vector2D value type.
"""

import math

import pytest

from graph_display import Vector2D


class TestVectorArithmetic:
    """Arithmetic returns new vectors."""

    def test_add_and_sub(self):
        a = Vector2D(1, 2)
        b = Vector2D(3, -4)
        assert a.add(b) == Vector2D(4, -2)
        assert a.sub(b) == Vector2D(-2, 6)
        assert a + b == Vector2D(4, -2)
        assert a - b == Vector2D(-2, 6)

    def test_scale(self):
        v = Vector2D(1.5, -2)
        assert v.scale(2) == Vector2D(3, -4)
        assert v * 2 == Vector2D(3, -4)
        assert 2 * v == Vector2D(3, -4)
        assert -v == Vector2D(-1.5, 2)

    def test_operations_do_not_mutate(self):
        a = Vector2D(1, 1)
        a.add(Vector2D(5, 5))
        a.scale(10)
        assert a == Vector2D(1, 1)

    def test_immutable(self):
        v = Vector2D(1, 2)
        with pytest.raises(AttributeError):
            v.x = 5  # type: ignore[misc]

    def test_default_is_origin(self):
        assert Vector2D() == Vector2D(0.0, 0.0)


class TestVectorProducts:
    """Dot, cross, norm and distance."""

    def test_dot(self):
        assert Vector2D(1, 2).dot(Vector2D(3, 4)) == 11

    def test_cross(self):
        assert Vector2D(1, 0).cross(Vector2D(0, 1)) == 1
        assert Vector2D(0, 1).cross(Vector2D(1, 0)) == -1

    def test_norm_and_distance(self):
        assert Vector2D(3, 4).norm() == 5
        assert Vector2D(1, 1).distance(Vector2D(4, 5)) == 5

    def test_angle(self):
        assert Vector2D(0, 1).angle() == pytest.approx(math.pi / 2)
        assert Vector2D(-1, 0).angle() == pytest.approx(math.pi)


class TestVectorGeometry:
    """Rotation and projection."""

    def test_rotate_quarter_turn(self):
        r = Vector2D(1, 0).rotate(math.pi / 2)
        assert r.x == pytest.approx(0, abs=1e-12)
        assert r.y == pytest.approx(1)

    def test_rotate_preserves_norm(self):
        v = Vector2D(3, 4)
        assert v.rotate(1.234).norm() == pytest.approx(5)

    def test_project(self):
        p = Vector2D(2, 3).project(Vector2D(1, 0))
        assert p == Vector2D(2, 0)

    def test_project_onto_zero_vector(self):
        assert Vector2D(2, 3).project(Vector2D(0, 0)) == Vector2D(0, 0)

    def test_unpack(self):
        x, y = Vector2D(7, 8)
        assert (x, y) == (7, 8)
