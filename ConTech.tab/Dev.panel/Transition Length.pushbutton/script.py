# -*- coding: utf-8 -*-
# ======================================================================
"""Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder."""
# ======================================================================

# Imports
# ==================================================
from connectors import all_connectors, is_transition_fitting, pair_offsets
from transition_length import shortest_for_offsets
from revit_mep import TransitionFittingFilter, symbol_for_length
from revit_output import print_transition_report
from task_dialog import ask_yes_no, show_exception_dialog
from Autodesk.Revit.UI.Selection import ObjectType
from Autodesk.Revit.Exceptions import OperationCanceledException
from pyrevit import revit, script, forms
import logging

# Button info
# ===================================================
__title__ = "Transition Length"
__doc__ = """
Checks that the selected duct transitions meet the ACCO angle constraints
and switches each one to the shortest standard length that does.
Uses the current selection, or asks you to pick transitions.
"""

# Variables
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = revit.doc
output = script.get_output()
log = logging.getLogger("TransitionLength")


# Helpers
# ==================================================
def selected_transitions():
    elements = [doc.GetElement(i) for i in uidoc.Selection.GetElementIds()]
    fittings = [e for e in elements if is_transition_fitting(e)]
    if fittings:
        return fittings

    refs = uidoc.Selection.PickObjects(
        ObjectType.Element, TransitionFittingFilter(),
        "Select duct transition fittings to update")
    return [doc.GetElement(r) for r in refs]


def evaluate(fitting):
    """(length, type) the fitting should use.

    length is None when no standard length complies, type is None when the
    family has no type named for that length.
    """
    ends = all_connectors(fitting)
    if len(ends) < 2:
        return None, None
    try:
        length = shortest_for_offsets(pair_offsets(ends[0], ends[1]))
    except ValueError as ex:
        log.debug("Skipping %s: %s", fitting.Id, ex)
        return None, None
    if length is None:
        return None, None
    return length, symbol_for_length(doc, fitting, length)


def main():
    try:
        fittings = selected_transitions()
    except OperationCanceledException:
        return

    if not fittings:
        forms.alert("No duct transition fittings selected.", title="Info")
        return

    compliant = []
    non_compliant = []
    missing_type = []
    for fitting in fittings:
        length, symbol = evaluate(fitting)
        if length is None:
            non_compliant.append(fitting.Id)
        elif symbol is None:
            missing_type.append(fitting.Id)
        else:
            compliant.append((fitting, symbol, length))

    if non_compliant:
        proceed = ask_yes_no(
            "Non-Compliant Fittings",
            "{} transition fittings exceed allowable angles.".format(len(non_compliant)),
            "Do you want to proceed anyway?")
        if not proceed:
            return

    updated = []
    with revit.Transaction("Update Transition Fittings"):
        for fitting, symbol, length in compliant:
            if not symbol.IsActive:
                symbol.Activate()
            fitting.Symbol = symbol
            updated.append((fitting.Id, symbol.Name, length))

    print_transition_report(output, updated, non_compliant, missing_type)


# Main Code
# ==================================================
try:
    main()
except Exception as ex:
    show_exception_dialog("Transition Length", ex)
