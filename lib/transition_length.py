# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from offsets import Offsets
import logging
import math
import re

# Logging
log = logging.getLogger("TransitionLength")

# Define Constants
# =========================================================================
MAX_FACE_ANGLE_DEG = 30.0
STANDARD_LENGTHS_IN = (8, 12, 16, 24, 30, 36)
ANGLE_PARAMETERS = ("Angle Top", "Angle Bottom", "Angle Left", "Angle Right")
ANGLE_TOL = 1e-9

NUMBER_RE = re.compile(r'\d+')


# Helpers
# =========================================================================
def face_angle(rise, length):
    """Side wall slope in degrees for a given rise and fitting length (inches)."""
    if length <= 0:
        raise ValueError("Transition length must be positive, got {}".format(length))
    return math.degrees(math.atan(abs(rise) / float(length)))


def _check_max_angle(max_angle):
    if not 0 < max_angle < 90:
        raise ValueError(
            "Maximum face angle must be between 0 and 90 degrees, got {}".format(
                max_angle))


def shortest_for_offsets(offsets, max_angle=MAX_FACE_ANGLE_DEG,
                         lengths=STANDARD_LENGTHS_IN):
    """Smallest candidate length keeping both face angles within max_angle."""
    _check_max_angle(max_angle)
    rise_h = offsets.rise_horizontal()
    rise_v = offsets.rise_vertical()

    for length in sorted(lengths):
        angle_h = face_angle(rise_h, length)
        angle_v = face_angle(rise_v, length)
        if angle_h <= max_angle + ANGLE_TOL and angle_v <= max_angle + ANGLE_TOL:
            return int(length)

    log.debug("No candidate length fits rises h=%.3f v=%.3f within %.1f deg",
              rise_h, rise_v, max_angle)
    return None


def shortest_transition_length(inlet, outlet, center_h=0.0, center_v=0.0,
                               max_angle=MAX_FACE_ANGLE_DEG,
                               lengths=STANDARD_LENGTHS_IN):
    """Shortest standard transition length for two sections, or None.

    center_h / center_v are the lateral centre offsets (inches) measured
    along the inlet's width and height axes.
    """
    offsets = Offsets(inlet, outlet, center_h, center_v)
    return shortest_for_offsets(offsets, max_angle, lengths)


def length_from_name(name, lengths=STANDARD_LENGTHS_IN):
    """First whole number in a type name that is a candidate length."""
    if not name:
        return None
    for token in NUMBER_RE.findall(name):
        value = int(token)
        if value in lengths:
            return value
    return None


def order_by_length(items, name_of, lengths=STANDARD_LENGTHS_IN):
    """Sort family types by their length in the candidate list.

    Types whose name carries no candidate length go last.
    """
    order = list(lengths)
    known = []
    unknown = []
    for item in items:
        length = length_from_name(name_of(item), lengths)
        if length is None:
            unknown.append(item)
            continue
        known.append((order.index(length), item))

    known.sort(key=lambda pair: pair[0])
    return [item for _, item in known] + unknown


def angles_within_limit(angles_deg, max_angle=MAX_FACE_ANGLE_DEG):
    angles = list(angles_deg or [])
    if not angles or any(a is None for a in angles):
        return False
    return all(abs(a) <= max_angle + ANGLE_TOL for a in angles)


def angle_from_radians(value):
    if value is None:
        return None
    return math.degrees(value)


def first_compliant_type(candidates, current, switch_to, read_angles,
                         max_angle=MAX_FACE_ANGLE_DEG):
    """Switch through candidates until read_angles() is within max_angle.

    Returns the compliant candidate. When none complies the element is
    switched back to current and None is returned.
    """
    for candidate in candidates:
        switch_to(candidate)
        angles = read_angles()
        log.debug("Type %s angles %s", candidate, angles)
        if angles_within_limit(angles, max_angle):
            return candidate

    if current is not None:
        switch_to(current)
    return None
