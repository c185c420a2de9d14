# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from connectors import is_connectable, is_transition_fitting, get_element_id_value
from transition_length import (
    ANGLE_PARAMETERS,
    MAX_FACE_ANGLE_DEG,
    STANDARD_LENGTHS_IN,
    angle_from_radians,
    first_compliant_type,
    length_from_name,
    order_by_length,
)
from element_direction import resolve_direction, resolve_origin
from xyz import XYZ
from Autodesk.Revit.DB import (
    BuiltInParameter,
    ElevationMarker,
    FilteredElementCollector,
    Line,
    LocationCurve,
    LocationPoint,
    ViewSection,
)
from Autodesk.Revit.DB import XYZ as HostXYZ
from Autodesk.Revit.UI.Selection import ISelectionFilter
import logging

# Thrid Party
from pyrevit import revit

import clr
clr.AddReference("RevitAPI")

# Logging
log = logging.getLogger("RevitMEP")


# Selection Filters
# =========================================================================
class ConnectableFilter(ISelectionFilter):
    """Allow MEP elements with connectors, never insulation or lining."""

    def __init__(self, allow_family_instance=True, ducts_only=False):
        self.allow_family_instance = allow_family_instance
        self.ducts_only = ducts_only

    def AllowElement(self, element):
        return is_connectable(element, self.allow_family_instance, self.ducts_only)

    def AllowReference(self, reference, position):
        return True


class TransitionFittingFilter(ISelectionFilter):
    def AllowElement(self, element):
        return is_transition_fitting(element)

    def AllowReference(self, reference, position):
        return True


# Geometry
# =========================================================================
def to_host(vector):
    return HostXYZ(vector.X, vector.Y, vector.Z)


def supports_location_edit(element):
    return isinstance(element.Location, (LocationCurve, LocationPoint))


def rotate_element(element, origin, axis, angle):
    """Rotate element about a line through origin. False if it has no curve/point location."""
    location = element.Location
    if not isinstance(location, (LocationCurve, LocationPoint)):
        return False
    start = XYZ.from_point(origin)
    axis_line = Line.CreateBound(to_host(start), to_host(start + axis))
    location.Rotate(axis_line, angle)
    return True


def move_element(element, vector):
    location = element.Location
    if not isinstance(location, (LocationCurve, LocationPoint)):
        return False
    location.Move(to_host(vector))
    return True


# Transition types
# =========================================================================
def transition_candidates(doc, fitting):
    """Types of the fitting's family ordered by their standard length."""
    family = fitting.Symbol.Family
    symbols = [doc.GetElement(i) for i in family.GetFamilySymbolIds()]
    return order_by_length(symbols, lambda s: s.Name, STANDARD_LENGTHS_IN)


def symbol_for_length(doc, fitting, length):
    """Type of the fitting's family whose name carries length, else None."""
    for symbol in transition_candidates(doc, fitting):
        if length_from_name(symbol.Name) == length:
            return symbol
    return None


def read_face_angles(fitting):
    """Face angle parameters in degrees, None for each one missing."""
    angles = []
    for name in ANGLE_PARAMETERS:
        p = fitting.LookupParameter(name)
        if p is None or not p.HasValue:
            angles.append(None)
            continue
        angles.append(angle_from_radians(p.AsDouble()))
    return angles


def has_angle_parameters(fitting):
    return any(a is not None for a in read_face_angles(fitting))


def find_best_symbol(doc, fitting, max_angle=MAX_FACE_ANGLE_DEG):
    """Switch the fitting through its family types, shortest first, until the
    face angles comply.

    Leaves the fitting on the first compliant type and returns it, or puts
    it back on its original type and returns None.
    """
    def switch_to(symbol):
        with revit.Transaction("Switch Transition Type"):
            if not symbol.IsActive:
                symbol.Activate()
            fitting.Symbol = symbol

    symbol = first_compliant_type(
        transition_candidates(doc, fitting),
        fitting.Symbol,
        switch_to,
        lambda: read_face_angles(fitting),
        max_angle,
    )
    if symbol is None:
        log.debug("No compliant type for fitting %s", get_element_id_value(fitting.Id))
    return symbol


# Section views
# =========================================================================
def section_view_from_element(element):
    p = element.get_Parameter(BuiltInParameter.VIEW_FIXED_SKETCH_PLANE)
    if p is None or not p.HasValue:
        return None
    doc = element.Document
    sketch_plane = doc.GetElement(p.AsElementId())
    if sketch_plane is None:
        return None
    view = doc.GetElement(sketch_plane.OwnerViewId)
    return view if isinstance(view, ViewSection) else None


def section_view_direction(element):
    view = section_view_from_element(element)
    return XYZ.from_point(view.RightDirection) if view else None


def section_view_origin(element):
    view = section_view_from_element(element)
    return XYZ.from_point(view.Origin) if view else None


def element_direction(element):
    return resolve_direction(element, extra=(section_view_direction,))


def element_origin(element):
    return resolve_origin(element, extra=(section_view_origin,))


def elevation_marker_for_view(doc, view):
    """Elevation marker hosting view, else None."""
    if not isinstance(view, ViewSection):
        return None
    view_id = get_element_id_value(view.Id)
    for marker in FilteredElementCollector(doc).OfClass(ElevationMarker):
        for i in range(4):
            marker_view = marker.GetViewId(i)
            if marker_view is not None and get_element_id_value(marker_view) == view_id:
                return marker
    return None
