# tests/test_alignment.py

import math

import pytest

from alignment import RotationResult, connect_rotation, parallel_rotation
from xyz import XYZ, BASIS_X, BASIS_Y, BASIS_Z


def rotate(vector, axis, angle):
    # Rodrigues' rotation formula
    axis = axis.normalize()
    return (vector * math.cos(angle)
            + axis.cross(vector) * math.sin(angle)
            + axis * (axis.dot(vector) * (1 - math.cos(angle))))


def assert_anti_parallel(a, b):
    assert a.normalize().dot(b.normalize()) == pytest.approx(-1)


def test_connect_perpendicular_connectors():
    axis, angle = connect_rotation(BASIS_X, BASIS_Y)
    assert axis == BASIS_Z
    assert angle == pytest.approx(-math.pi / 2)
    assert_anti_parallel(rotate(BASIS_X, axis, angle), BASIS_Y)


def test_connect_skewed_connectors():
    moved = XYZ(1, 2, 0.5)
    target = XYZ(-0.3, 1, 2)
    axis, angle = connect_rotation(moved, target)
    assert_anti_parallel(rotate(moved, axis, angle), target)


def test_connect_already_facing():
    assert connect_rotation(BASIS_X, -BASIS_X) is None


def test_connect_same_direction_turns_about_basis_y():
    axis, angle = connect_rotation(BASIS_X, BASIS_X, moved_basis_y=BASIS_Z)
    assert axis == BASIS_Z
    assert angle == pytest.approx(-math.pi)
    assert_anti_parallel(rotate(BASIS_X, axis, angle), BASIS_X)


def test_connect_same_direction_without_basis_y_uses_z():
    axis, _ = connect_rotation(BASIS_Y, XYZ(0, 3, 0))
    assert axis == BASIS_Z


def test_parallel_rotation_quarter_turn():
    axis, angle = parallel_rotation(BASIS_X, BASIS_Y)
    assert axis == BASIS_Z
    assert angle == pytest.approx(math.pi / 2)


def test_parallel_rotation_takes_short_way():
    target = XYZ(1, 1, 0)
    reference = XYZ(-1, 0, 0)
    axis, angle = parallel_rotation(target, reference)
    assert angle == pytest.approx(-math.pi / 4)
    rotated = rotate(target, axis, angle)
    assert rotated.cross(reference).is_zero_length(1e-9)


def test_parallel_rotation_ignores_elevation():
    axis, angle = parallel_rotation(XYZ(1, 0, 5), XYZ(0, 1, -2))
    assert axis == BASIS_Z
    assert angle == pytest.approx(math.pi / 2)


def test_parallel_rotation_already_parallel():
    assert parallel_rotation(XYZ(2, 0, 0), XYZ(-1, 0, 0)) is None


def test_parallel_rotation_vertical_element():
    with pytest.raises(ValueError):
        parallel_rotation(BASIS_Z, BASIS_X)


def test_rotation_result_degrees():
    assert RotationResult(5, math.pi / 4).degrees == pytest.approx(45)
