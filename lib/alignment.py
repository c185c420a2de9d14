# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from xyz import XYZ, BASIS_Z
import math

# Constants
# =========================================================================
ANGLE_TOL = 1e-6
ZERO_LENGTH_TOL = 1e-8


# Helpers
# =========================================================================
def is_almost_equal(a, b, tol=ANGLE_TOL):
    return abs(a - b) < tol


def connect_rotation(moved_dir, target_dir, moved_basis_y=None):
    """Rotation turning the moved connector to face the target connector.

    Returns (axis, angle) or None when the connectors already face each
    other. Rotating moved_dir by angle about axis makes it anti-parallel to
    target_dir.
    """
    moved = XYZ.from_point(moved_dir)
    target = XYZ.from_point(target_dir)
    angle = moved.angle_to(target)

    if is_almost_equal(angle, math.pi):
        return None

    if is_almost_equal(angle, 0) and moved_basis_y is not None:
        axis = XYZ.from_point(moved_basis_y)
    else:
        axis = moved.cross(target)

    if axis.is_zero_length(ZERO_LENGTH_TOL):
        axis = BASIS_Z

    return axis.normalize(), angle - math.pi


def parallel_rotation(target_dir, reference_dir):
    """Plan rotation turning target_dir parallel to reference_dir.

    Returns (axis, angle) with the angle folded into [-pi/2, pi/2] so the
    element turns the short way, or None when already parallel.
    """
    target = XYZ.from_point(target_dir).flatten()
    reference = XYZ.from_point(reference_dir).flatten()
    if target.is_zero_length(ZERO_LENGTH_TOL) or reference.is_zero_length(ZERO_LENGTH_TOL):
        raise ValueError("Direction has no plan component (vertical element)")

    target = target.normalize()
    reference = reference.normalize()

    angle = target.angle_to(reference)
    if angle > math.pi / 2:
        angle -= math.pi

    normal = target.cross(reference)
    if normal.is_zero_length(ZERO_LENGTH_TOL):
        return None

    return normal.normalize(), angle


# Result record
# =========================================================================
class RotationResult(object):
    def __init__(self, element_id, radians):
        self.element_id = element_id
        self.radians = radians

    @property
    def degrees(self):
        return math.degrees(self.radians)

    def __repr__(self):
        return "RotationResult({}, {:.2f} deg)".format(self.element_id, self.degrees)
