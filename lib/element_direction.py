# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from xyz import XYZ
import logging

# Global Variables
# =========================================================================
log = logging.getLogger("ElementDirection")


# Helpers
# =========================================================================
def _curve_direction(curve):
    start = XYZ.from_point(curve.GetEndPoint(0))
    end = XYZ.from_point(curve.GetEndPoint(1))
    return (end - start).normalize()


def _is_reference_plane(element):
    return hasattr(element, "GetPlane") and hasattr(element, "Direction")


def _location_curve(element):
    location = getattr(element, "Location", None)
    return getattr(location, "Curve", None) if location is not None else None


# Resolvers
# =========================================================================
# Each takes an element and returns an XYZ or None when it does not apply.

def grid_direction(element):
    curve = getattr(element, "Curve", None)
    return _curve_direction(curve) if curve is not None else None


def grid_origin(element):
    curve = getattr(element, "Curve", None)
    return XYZ.from_point(curve.GetEndPoint(0)) if curve is not None else None


def reference_plane_direction(element):
    if not _is_reference_plane(element):
        return None
    return XYZ.from_point(element.Direction)


def reference_plane_origin(element):
    if not _is_reference_plane(element):
        return None
    return XYZ.from_point(element.GetPlane().Origin)


def family_instance_direction(element):
    facing = getattr(element, "FacingOrientation", None)
    return XYZ.from_point(facing) if facing is not None else None


def family_instance_origin(element):
    if not hasattr(element, "FacingOrientation"):
        return None
    return XYZ.from_point(element.GetTransform().Origin)


def curve_element_direction(element):
    curve = _location_curve(element)
    return _curve_direction(curve) if curve is not None else None


def curve_element_origin(element):
    curve = _location_curve(element)
    return XYZ.from_point(curve.GetEndPoint(0)) if curve is not None else None


DIRECTION_RESOLVERS = (
    grid_direction,
    reference_plane_direction,
    family_instance_direction,
    curve_element_direction,
)

ORIGIN_RESOLVERS = (
    grid_origin,
    reference_plane_origin,
    family_instance_origin,
    curve_element_origin,
)


def _resolve(element, resolvers):
    for resolver in resolvers:
        try:
            value = resolver(element)
        except Exception as ex:
            log.debug("%s failed on %s: %s", resolver.__name__, element, ex)
            continue
        if value is not None:
            return value
    return None


def resolve_direction(element, extra=()):
    """Direction of element from the first resolver that applies, else None."""
    return _resolve(element, tuple(DIRECTION_RESOLVERS) + tuple(extra))


def resolve_origin(element, extra=()):
    return _resolve(element, tuple(ORIGIN_RESOLVERS) + tuple(extra))
