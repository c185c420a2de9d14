# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
import math

# Constants
# =========================================================================
ZERO_TOL = 1e-9

# Class
# =========================================================================


class XYZ(object):
    """Host-independent vector using the host's X/Y/Z attribute names."""

    def __init__(self, x, y, z):
        self.X = float(x)
        self.Y = float(y)
        self.Z = float(z)

    @classmethod
    def from_point(cls, point, scale=1.0):
        """Copy anything with X/Y/Z (a host XYZ), optionally scaled (feet -> inches = 12)."""
        return cls(point.X * scale, point.Y * scale, point.Z * scale)

    def __add__(self, other):
        return XYZ(self.X + other.X, self.Y + other.Y, self.Z + other.Z)

    def __sub__(self, other):
        return XYZ(self.X - other.X, self.Y - other.Y, self.Z - other.Z)

    def __mul__(self, scalar):
        return XYZ(self.X * scalar, self.Y * scalar, self.Z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return XYZ(self.X / scalar, self.Y / scalar, self.Z / scalar)

    __div__ = __truediv__

    def __neg__(self):
        return XYZ(-self.X, -self.Y, -self.Z)

    def __eq__(self, other):
        if not isinstance(other, XYZ):
            return NotImplemented
        return (self.X, self.Y, self.Z) == (other.X, other.Y, other.Z)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self):
        return hash((self.X, self.Y, self.Z))

    def __repr__(self):
        return "XYZ({}, {}, {})".format(self.X, self.Y, self.Z)

    def dot(self, other):
        return self.X * other.X + self.Y * other.Y + self.Z * other.Z

    def cross(self, other):
        return XYZ(
            self.Y * other.Z - self.Z * other.Y,
            self.Z * other.X - self.X * other.Z,
            self.X * other.Y - self.Y * other.X,
        )

    def length(self):
        return math.sqrt(self.X ** 2 + self.Y ** 2 + self.Z ** 2)

    def distance_to(self, other):
        return (self - other).length()

    def is_zero_length(self, tol=ZERO_TOL):
        return self.length() < tol

    def normalize(self):
        """Return a unit vector; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return XYZ(0, 0, 0)
        return self / length

    def flatten(self):
        """Drop the vertical component (plan projection)."""
        return XYZ(self.X, self.Y, 0)

    def angle_to(self, other):
        """Unsigned angle in radians, 0..pi. Zero vectors give 0."""
        a = self.length()
        b = other.length()
        if a == 0 or b == 0:
            return 0.0
        cos_theta = self.dot(other) / (a * b)
        # clamp rounding noise before acos
        cos_theta = max(-1.0, min(1.0, cos_theta))
        return math.acos(cos_theta)

    def is_almost_equal_to(self, other, tol=ZERO_TOL):
        return (self - other).length() < tol


BASIS_X = XYZ(1, 0, 0)
BASIS_Y = XYZ(0, 1, 0)
BASIS_Z = XYZ(0, 0, 1)
