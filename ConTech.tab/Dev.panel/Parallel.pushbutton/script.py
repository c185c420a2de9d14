# -*- coding: utf-8 -*-
# ======================================================================
"""Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder."""
# ======================================================================

# Imports
# ==================================================
from alignment import RotationResult, parallel_rotation
from connectors import get_element_id_value
from revit_mep import element_direction, element_origin, elevation_marker_for_view, rotate_element
from revit_output import print_rotation_summary
from task_dialog import show_exception_dialog
from xyz import BASIS_X
from Autodesk.Revit.DB import ViewSection
from Autodesk.Revit.UI.Selection import ObjectType
from Autodesk.Revit.Exceptions import OperationCanceledException
from pyrevit import revit, script, forms

# Button info
# ===================================================
__title__ = "Parallel"
__doc__ = """
Pick a reference element (grid, reference plane, duct, pipe, family or
section), then select elements to rotate in plan until they are parallel
to it. Keeps asking for elements until you press Esc.
"""

# Variables
# ==================================================
uidoc = __revit__.ActiveUIDocument
doc = revit.doc
output = script.get_output()


# Helpers
# ==================================================
def describe(element):
    return "{} (Id: {})".format(type(element).__name__, get_element_id_value(element.Id))


def reference_direction(element):
    direction = element_direction(element)
    if direction is None:
        forms.alert("Could not determine direction for element of type {}".format(
            describe(element)), title="Direction Error")
        return BASIS_X
    return direction


def pick_targets(single):
    if single:
        return [uidoc.Selection.PickObject(ObjectType.Element, "Pick a target element to rotate.")]
    return list(uidoc.Selection.PickObjects(ObjectType.Element, "Select elements to rotate."))


def make_parallel(element, reference_dir):
    """Rotate one element; returns a RotationResult or None when skipped."""
    direction = element_direction(element)
    origin = element_origin(element)
    if direction is None or origin is None:
        forms.alert("Skipping element {} because direction or origin could not be "
                    "determined.".format(describe(element)), title="Warning")
        return None

    try:
        rotation = parallel_rotation(direction, reference_dir)
    except ValueError:
        forms.alert("Skipping element {} because it has no plan direction.".format(
            describe(element)), title="Warning")
        return None

    if rotation is None:
        return RotationResult(element.Id, 0.0)

    axis, angle = rotation
    if isinstance(element, ViewSection):
        # elevation views turn with their marker
        element = elevation_marker_for_view(doc, element) or element

    if not rotate_element(element, origin, axis, angle):
        forms.alert("Element {} does not support rotation.".format(describe(element)),
                    title="Error")
        return None
    return RotationResult(element.Id, angle)


def main():
    try:
        ref = uidoc.Selection.PickObject(
            ObjectType.Element, "Pick the reference element to define the parallel direction")
    except OperationCanceledException:
        forms.alert("Operation cancelled before selecting reference element.", title="Cancelled")
        return

    reference_dir = reference_direction(doc.GetElement(ref))
    results = []
    selected_count = 0

    while True:
        try:
            refs = pick_targets(single=selected_count == 1)
        except OperationCanceledException:
            break
        selected_count = len(refs)
        if not refs:
            continue

        with revit.Transaction("Make Elements Parallel"):
            for target_ref in refs:
                result = make_parallel(doc.GetElement(target_ref), reference_dir)
                if result is not None:
                    results.append(result)

    if results:
        print_rotation_summary(output, results)
    else:
        forms.alert("No elements were rotated.", title="Parallel Rotation")


# Main Code
# ==================================================
try:
    main()
except Exception as ex:
    show_exception_dialog("Parallel", ex)
