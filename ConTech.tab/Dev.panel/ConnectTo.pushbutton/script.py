# -*- coding: utf-8 -*-
# ======================================================================
"""Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder."""
# ======================================================================

# Imports
# ==================================================
from connectors import (
    ConnectorPairError,
    closest_unused_connector,
    validate_pair,
)
from alignment import connect_rotation
from revit_mep import ConnectableFilter, rotate_element, move_element, supports_location_edit
from task_dialog import show_exception_dialog
from Autodesk.Revit.UI.Selection import ObjectType
from Autodesk.Revit.Exceptions import OperationCanceledException, ArgumentsInconsistentException
from pyrevit import revit, forms
from xyz import XYZ

# Button info
# ===================================================
__title__ = "ConnectTo"
__doc__ = """
Connects air ducts or pipes. The first element end selected moves and
connects to the second element you select. The command stays active so you
can keep connecting elements until you Esc out of it.
"""

# Variables
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = revit.doc
pick_filter = ConnectableFilter()


# Helpers
# ==================================================
def pick(prompt):
    ref = uidoc.Selection.PickObject(ObjectType.Element, pick_filter, prompt)
    return doc.GetElement(ref.ElementId), ref.GlobalPoint


def connect_elements():
    """One pick/connect round. False when the user pressed Esc."""
    try:
        moved, moved_point = pick("Pick element to move and connect")
        target, target_point = pick("Pick element to be connected to")
    except OperationCanceledException:
        return False

    moved_connector = closest_unused_connector(moved, moved_point)
    target_connector = closest_unused_connector(target, target_point)
    try:
        validate_pair(moved, target, moved_connector, target_connector)
    except ConnectorPairError as ex:
        forms.alert(str(ex), title=ex.title)
        return True

    if not supports_location_edit(moved):
        forms.alert("Element location type unsupported for move.", title="Error")
        return True

    with revit.Transaction("Connect elements"):
        rotation = connect_rotation(
            moved_connector.CoordinateSystem.BasisZ,
            target_connector.CoordinateSystem.BasisZ,
            moved_connector.CoordinateSystem.BasisY,
        )
        if rotation:
            axis, angle = rotation
            try:
                rotate_element(moved, moved_point, axis, angle)
            except ArgumentsInconsistentException:
                forms.alert("Rotation failed due to geometry constraints.", title="Warning")

        # connector origin is re-read after the rotation
        move_vector = (XYZ.from_point(target_connector.Origin)
                       - XYZ.from_point(moved_connector.Origin))
        move_element(moved, move_vector)
        moved_connector.ConnectTo(target_connector)

    return True


# Main Code
# ==================================================
try:
    while connect_elements():
        pass
except Exception as ex:
    show_exception_dialog("ConnectTo", ex)
