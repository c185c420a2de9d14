# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from offsets import Offsets, FEET_TO_INCHES
from size import Section
from xyz import XYZ
import logging

# Global Variables
# =========================================================================
log = logging.getLogger("Connectors")

DUCT_FITTINGS_CATEGORY = "Duct Fittings"
TRANSITION_PART_TYPE = "Transition"


# Exceptions
# =========================================================================
class ConnectorPairError(ValueError):
    """Two picked elements cannot be joined; message is shown to the user."""

    def __init__(self, message, title="Error"):
        ValueError.__init__(self, message)
        self.title = title


# Element helpers
# =========================================================================
def is_family_instance(element):
    return hasattr(element, "MEPModel")


def is_insulation(element):
    # Duct/pipe insulation and lining are hosted, they carry HostElementId
    return getattr(element, "HostElementId", None) is not None


def is_duct(element):
    return getattr(element, "DuctType", None) is not None


def get_element_id_value(element_id):
    """Get integer value from ElementId, handling version differences."""
    try:
        return element_id.Value
    except AttributeError:
        return element_id.IntegerValue


def get_connector_manager(element):
    """ConnectorManager of an MEP curve or an MEP family instance, else None."""
    if element is None:
        return None
    if is_family_instance(element):
        mep_model = element.MEPModel
        return getattr(mep_model, "ConnectorManager", None) if mep_model else None
    return getattr(element, "ConnectorManager", None)


def unused_connectors(element):
    manager = get_connector_manager(element)
    if manager is None:
        return []
    connectors = getattr(manager, "UnusedConnectors", None)
    if connectors is None:
        return []
    return [c for c in connectors if c is not None]


def closest_unused_connector(element, point):
    """Unused connector whose origin is nearest to point; ties keep the first."""
    target = XYZ.from_point(point)
    closest = None
    min_dist = float("inf")

    for connector in unused_connectors(element):
        dist = XYZ.from_point(connector.Origin).distance_to(target)
        if dist < min_dist:
            closest = connector
            min_dist = dist

    return closest


# Selection predicates
# =========================================================================
def is_connectable(element, allow_family_instance=True, ducts_only=False):
    if element is None or is_insulation(element):
        return False
    if not allow_family_instance and is_family_instance(element):
        return False
    if ducts_only and not is_duct(element):
        return False
    return get_connector_manager(element) is not None


def is_transition_fitting(element):
    if not is_family_instance(element) or get_connector_manager(element) is None:
        return False
    # host PartType enum prints as its member name
    if str(getattr(element.MEPModel, "PartType", "")) != TRANSITION_PART_TYPE:
        return False
    try:
        category = element.Symbol.Family.FamilyCategory
    except AttributeError:
        return False
    return category is not None and category.Name == DUCT_FITTINGS_CATEGORY


# Connector data
# =========================================================================
def connector_frame(connector):
    """Dict with the connector origin and its coordinate system axes."""
    cs = getattr(connector, "CoordinateSystem", None)
    return {
        'origin': connector.Origin,
        'basis_x': cs.BasisX if cs else None,
        'basis_y': cs.BasisY if cs else None,
        'basis_z': cs.BasisZ if cs else None,
    }


def section_from_connector(connector):
    """Section in inches from the connector profile (host sizes are feet)."""
    shape = str(getattr(connector, "Shape", "")).lower()
    if shape == "round":
        return Section.round(connector.Radius * 2 * FEET_TO_INCHES)
    if shape == "oval":
        return Section.oval(connector.Width * FEET_TO_INCHES,
                            connector.Height * FEET_TO_INCHES)
    if shape in ("rectangular", "rectangle"):
        return Section.rectangle(connector.Width * FEET_TO_INCHES,
                                 connector.Height * FEET_TO_INCHES)
    raise ValueError("Unsupported connector profile '{}'".format(shape))


def all_connectors(element):
    manager = get_connector_manager(element)
    if manager is None:
        return []
    return [c for c in (getattr(manager, "Connectors", None) or []) if c is not None]


def pair_offsets(inlet_connector, outlet_connector):
    """Offsets between two connectors facing each other (inches)."""
    return Offsets.from_connector_data(
        connector_frame(inlet_connector),
        connector_frame(outlet_connector),
        section_from_connector(inlet_connector),
        section_from_connector(outlet_connector),
    )


def validate_pair(first, second, first_connector, second_connector):
    """Raise ConnectorPairError when the picked pair cannot be joined."""
    if get_element_id_value(first.Id) == get_element_id_value(second.Id):
        raise ConnectorPairError("Oops, you selected the same object twice.")

    if first_connector is None or second_connector is None:
        raise ConnectorPairError(
            "One of the selected elements has no unused connector.")

    if first_connector.Domain != second_connector.Domain:
        raise ConnectorPairError(
            "You picked connectors of different domains. Please retry.",
            title="Domain Error")

    log.debug("Connector pair %s -> %s is valid",
              get_element_id_value(first.Id), get_element_id_value(second.Id))
