# -*- coding: utf-8 -*-
# ======================================================================
"""Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder."""
# ======================================================================

# Imports
# ==================================================
from connectors import ConnectorPairError, closest_unused_connector, validate_pair
from revit_mep import ConnectableFilter
from task_dialog import show_exception_dialog
from Autodesk.Revit.UI.Selection import ObjectType
from Autodesk.Revit.Exceptions import OperationCanceledException, InvalidOperationException
from pyrevit import revit, forms

# Button info
# ===================================================
__title__ = "Transition"
__doc__ = """
Creates an MEP transition fitting between two open unused connectors.
Element 1 is the side that moves depending on the transition length,
element 2 stays put. Keeps prompting until you press Esc.
"""

# Variables
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = revit.doc
movable_filter = ConnectableFilter(allow_family_instance=False)
static_filter = ConnectableFilter()


# Helpers
# ==================================================
def create_transition():
    """One pick/create round. False when the user pressed Esc."""
    try:
        pick1 = uidoc.Selection.PickObject(
            ObjectType.Element, movable_filter,
            "Pick element 1 (the connector moves depending on transition length)")
        pick2 = uidoc.Selection.PickObject(
            ObjectType.Element, static_filter, "Pick element 2 (static)")
    except OperationCanceledException:
        return False

    elem1 = doc.GetElement(pick1)
    elem2 = doc.GetElement(pick2)
    conn1 = closest_unused_connector(elem1, pick1.GlobalPoint)
    conn2 = closest_unused_connector(elem2, pick2.GlobalPoint)

    try:
        validate_pair(elem1, elem2, conn1, conn2)
    except ConnectorPairError as ex:
        forms.alert(str(ex), title=ex.title)
        return True

    with revit.Transaction("Create Transition"):
        try:
            doc.Create.NewTransitionFitting(conn1, conn2)
        except InvalidOperationException:
            forms.alert("Make sure you click near connectors you want to connect.",
                        title="Unable to Connect")

    return True


# Main Code
# ==================================================
try:
    while create_transition():
        pass
except Exception as ex:
    show_exception_dialog("Transition", ex)
