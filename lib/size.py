# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Shapes
# ========================================================================
ROUND = "round"
OVAL = "oval"
RECTANGLE = "rectangle"


# Section Class
# ========================================================================
class Section(object):
    """Cross-section of one duct end, dimensions in inches."""

    def __init__(self, shape, width, height):
        if shape not in (ROUND, OVAL, RECTANGLE):
            raise ValueError("Unknown section shape '{}'".format(shape))
        if width is None or height is None or width < 0 or height < 0:
            raise ValueError(
                "Section needs non-negative width and height, got {} x {}".format(
                    width, height))
        self.shape = shape
        self.width = float(width)
        self.height = float(height)

    @classmethod
    def round(cls, diameter):
        return cls(ROUND, diameter, diameter)

    @classmethod
    def oval(cls, width, height):
        return cls(OVAL, width, height)

    @classmethod
    def rectangle(cls, width, height):
        return cls(RECTANGLE, width, height)

    @property
    def diameter(self):
        return self.width if self.shape == ROUND else None

    @property
    def half_width(self):
        return self.width / 2.0

    @property
    def half_height(self):
        return self.height / 2.0

    def swapped(self):
        """Same section turned 90 degrees about the duct axis."""
        return Section(self.shape, self.height, self.width)

    def __eq__(self, other):
        if not isinstance(other, Section):
            return NotImplemented
        return (self.shape, self.width, self.height) == (
            other.shape, other.width, other.height)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __repr__(self):
        if self.shape == ROUND:
            return "Section({:g}ø)".format(self.width)
        sep = "/" if self.shape == OVAL else "x"
        return "Section({:g}{}{:g})".format(self.width, sep, self.height)

