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
    pair_offsets,
    validate_pair,
)
from transition_length import MAX_FACE_ANGLE_DEG, shortest_for_offsets
from revit_mep import (
    ConnectableFilter,
    find_best_symbol,
    has_angle_parameters,
    symbol_for_length,
)
from task_dialog import ask_yes_no, show_exception_dialog
from Autodesk.Revit.UI.Selection import ObjectType
from Autodesk.Revit.Exceptions import OperationCanceledException
from pyrevit import revit, forms
import logging

# Button info
# ===================================================
__title__ = "ACCO Transition"
__doc__ = """
Creates an MEP transition fitting between two open unused duct connectors
and picks the shortest standard length that keeps every face angle within
the ACCO 30 degree limit.
"""

# Variables
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = revit.doc
log = logging.getLogger("AccoTransition")


# Helpers
# ==================================================
def geometric_length(conn1, conn2):
    try:
        return shortest_for_offsets(pair_offsets(conn1, conn2))
    except ValueError as ex:
        log.debug("No geometric length for this pair: %s", ex)
        return None


def pick_connectors():
    pick1 = uidoc.Selection.PickObject(
        ObjectType.Element,
        ConnectableFilter(allow_family_instance=False, ducts_only=True),
        "Pick element 1 (movable connector)")
    pick2 = uidoc.Selection.PickObject(
        ObjectType.Element,
        ConnectableFilter(ducts_only=True),
        "Pick element 2 (static connector)")

    elem1 = doc.GetElement(pick1)
    elem2 = doc.GetElement(pick2)
    conn1 = closest_unused_connector(elem1, pick1.GlobalPoint)
    conn2 = closest_unused_connector(elem2, pick2.GlobalPoint)
    validate_pair(elem1, elem2, conn1, conn2)
    return conn1, conn2


def assign_best_type(fitting, length):
    """Put the fitting on its best compliant type. Returns the type or None."""
    if has_angle_parameters(fitting):
        return find_best_symbol(doc, fitting)

    # family reports no face angles, the geometric length decides
    if length is None:
        return None
    symbol = symbol_for_length(doc, fitting, length)
    if symbol is not None:
        with revit.Transaction("Assign Best Fitting Type"):
            if not symbol.IsActive:
                symbol.Activate()
            fitting.Symbol = symbol
    return symbol


def main():
    try:
        conn1, conn2 = pick_connectors()
    except OperationCanceledException:
        return
    except ConnectorPairError as ex:
        forms.alert(str(ex), title=ex.title)
        return

    length = geometric_length(conn1, conn2)

    with revit.TransactionGroup("Create ACCO Transition"):
        with revit.Transaction("Create ACCO Transition"):
            fitting = doc.Create.NewTransitionFitting(conn1, conn2)

        if fitting is None:
            forms.alert("Failed to create transition fitting.", title="Error")
            return

        if assign_best_type(fitting, length) is not None:
            return

        keep = ask_yes_no(
            "Angle Constraint",
            "All transition types exceed {:.0f}° angle limit.".format(MAX_FACE_ANGLE_DEG),
            "Do you want to keep the default fitting anyway?")
        if not keep:
            with revit.Transaction("Delete Fitting"):
                doc.Delete(fitting.Id)


# Main Code
# ==================================================
try:
    main()
except Exception as ex:
    show_exception_dialog("ACCO Transition", ex)
