# tests/test_connectors.py

import pytest

import fakes
from connectors import (
    ConnectorPairError,
    all_connectors,
    closest_unused_connector,
    connector_frame,
    get_connector_manager,
    is_connectable,
    is_transition_fitting,
    pair_offsets,
    section_from_connector,
    unused_connectors,
    validate_pair,
)
from size import Section
from xyz import XYZ


def test_connector_manager_of_curve_and_family_instance():
    duct = fakes.mep_curve(1)
    fitting = fakes.family_instance(2)
    assert get_connector_manager(duct) is duct.ConnectorManager
    assert get_connector_manager(fitting) is fitting.MEPModel.ConnectorManager


def test_connector_manager_missing():
    assert get_connector_manager(None) is None
    assert get_connector_manager(fakes.family_instance(2, mep=False)) is None
    assert get_connector_manager(fakes.insulation(3)) is None


def test_unused_connectors_empty_without_manager():
    assert unused_connectors(fakes.insulation(3)) == []


def test_closest_unused_connector():
    near = fakes.connector(XYZ(1, 0, 0))
    far = fakes.connector(XYZ(10, 0, 0))
    duct = fakes.mep_curve(1, unused=[far, near])
    assert closest_unused_connector(duct, XYZ(0, 0, 0)) is near


def test_closest_unused_connector_tie_keeps_first():
    a = fakes.connector(XYZ(-1, 0, 0))
    b = fakes.connector(XYZ(1, 0, 0))
    duct = fakes.mep_curve(1, unused=[a, b])
    assert closest_unused_connector(duct, XYZ(0, 0, 0)) is a


def test_closest_unused_connector_none_when_all_connected():
    used = fakes.connector(XYZ(0, 0, 0))
    duct = fakes.mep_curve(1, connected=[used])
    assert closest_unused_connector(duct, XYZ(0, 0, 0)) is None
    assert all_connectors(duct) == [used]


def test_is_connectable():
    duct = fakes.mep_curve(1)
    pipe = fakes.mep_curve(2, duct=False)
    fitting = fakes.family_instance(3)
    assert is_connectable(duct)
    assert is_connectable(fitting)
    assert not is_connectable(fakes.insulation(4))
    assert not is_connectable(fitting, allow_family_instance=False)
    assert is_connectable(pipe)
    assert not is_connectable(pipe, ducts_only=True)
    assert not is_connectable(fakes.family_instance(5, mep=False))


def test_is_transition_fitting():
    assert is_transition_fitting(fakes.family_instance(1))
    assert not is_transition_fitting(fakes.family_instance(2, category="Pipe Fittings"))
    assert not is_transition_fitting(fakes.mep_curve(3))


def test_elbow_is_not_a_transition_fitting():
    elbow = fakes.family_instance(4, part_type="Elbow", name="Radius Elbow 12")
    tap = fakes.family_instance(5, part_type="TapAdjustable")
    assert not is_transition_fitting(elbow)
    assert not is_transition_fitting(tap)


def test_section_from_connector():
    rect = fakes.connector(XYZ(0, 0, 0), width=2.0, height=1.0)
    rnd = fakes.connector(XYZ(0, 0, 0), shape="Round", radius=0.5)
    oval = fakes.connector(XYZ(0, 0, 0), shape="Oval", width=1.5, height=0.75)
    assert section_from_connector(rect) == Section.rectangle(24, 12)
    assert section_from_connector(rnd) == Section.round(12)
    assert section_from_connector(oval) == Section.oval(18, 9)


def test_section_from_unknown_profile():
    with pytest.raises(ValueError):
        section_from_connector(fakes.connector(XYZ(0, 0, 0), shape="Invalid"))


def test_connector_frame_without_coordinate_system():
    frame = connector_frame(fakes.connector(XYZ(1, 2, 3)))
    assert frame['origin'] == XYZ(1, 2, 3)
    assert frame['basis_x'] is None
    assert frame['basis_z'] is None


def test_pair_offsets_between_facing_connectors():
    inlet = fakes.connector(
        XYZ(0, 0, 0), width=2.0, height=1.0,
        basis_x=XYZ(0, 1, 0), basis_y=XYZ(0, 0, 1), basis_z=XYZ(1, 0, 0))
    outlet = fakes.connector(
        XYZ(1, 0, 0.25), width=1.0, height=1.0,
        basis_x=XYZ(0, -1, 0), basis_y=XYZ(0, 0, 1), basis_z=XYZ(-1, 0, 0))
    offsets = pair_offsets(inlet, outlet)
    assert offsets.center_v == pytest.approx(3)
    assert offsets.rise_horizontal() == pytest.approx(6)
    assert offsets.rise_vertical() == pytest.approx(3)


def test_validate_pair_same_element():
    duct = fakes.mep_curve(1)
    c = fakes.connector(XYZ(0, 0, 0))
    with pytest.raises(ConnectorPairError, match="same object twice"):
        validate_pair(duct, duct, c, c)


def test_validate_pair_missing_connector():
    c = fakes.connector(XYZ(0, 0, 0))
    with pytest.raises(ConnectorPairError, match="no unused connector") as info:
        validate_pair(fakes.mep_curve(1), fakes.mep_curve(2), c, None)
    assert info.value.title == "Error"


def test_validate_pair_different_domains():
    hvac = fakes.connector(XYZ(0, 0, 0))
    piping = fakes.connector(XYZ(0, 0, 0), domain="DomainPiping")
    with pytest.raises(ConnectorPairError, match="different domains") as info:
        validate_pair(fakes.mep_curve(1), fakes.mep_curve(2), hvac, piping)
    assert info.value.title == "Domain Error"


def test_validate_pair_ok():
    a = fakes.connector(XYZ(0, 0, 0))
    b = fakes.connector(XYZ(1, 0, 0))
    validate_pair(fakes.mep_curve(1), fakes.mep_curve(2), a, b)


def test_validate_pair_legacy_integer_ids():
    class LegacyId:
        def __init__(self, value):
            self.IntegerValue = value

    a = fakes.mep_curve(1)
    b = fakes.mep_curve(2)
    a.Id = LegacyId(7)
    b.Id = LegacyId(7)
    c = fakes.connector(XYZ(0, 0, 0))
    with pytest.raises(ConnectorPairError):
        validate_pair(a, b, c, c)
