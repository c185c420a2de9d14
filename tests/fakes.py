# tests/fakes.py
"""Plain stand-ins for host objects, only carrying the attributes the code reads."""

from types import SimpleNamespace

from xyz import XYZ


def element_id(value):
    return SimpleNamespace(Value=value)


def coordinate_system(basis_x, basis_y, basis_z, origin=None):
    return SimpleNamespace(
        BasisX=basis_x, BasisY=basis_y, BasisZ=basis_z, Origin=origin or XYZ(0, 0, 0))


def connector(origin, domain="DomainHvac", shape="Rectangular", width=1.0, height=1.0,
              radius=None, basis_x=None, basis_y=None, basis_z=None):
    """Connector with sizes in feet, like the host reports them."""
    cs = None
    if basis_x is not None:
        cs = coordinate_system(basis_x, basis_y, basis_z, origin)
    c = SimpleNamespace(
        Origin=origin, Domain=domain, Shape=shape, CoordinateSystem=cs,
        Width=width, Height=height)
    if radius is not None:
        c.Radius = radius
    return c


def connector_manager(unused, connected=()):
    return SimpleNamespace(
        UnusedConnectors=list(unused),
        Connectors=list(connected) + list(unused))


def mep_curve(id_value, unused=(), connected=(), duct=True):
    e = SimpleNamespace(
        Id=element_id(id_value),
        ConnectorManager=connector_manager(unused, connected))
    if duct:
        e.DuctType = SimpleNamespace(Name="Rectangular Duct")
    return e


def family_instance(id_value, unused=(), connected=(), category="Duct Fittings",
                    mep=True, part_type="Transition", name="Transition"):
    family = SimpleNamespace(FamilyCategory=SimpleNamespace(Name=category))
    mep_model = (SimpleNamespace(ConnectorManager=connector_manager(unused, connected),
                                 PartType=part_type)
                 if mep else None)
    return SimpleNamespace(
        Id=element_id(id_value),
        MEPModel=mep_model,
        Symbol=SimpleNamespace(Family=family, Name=name))


def insulation(id_value):
    return SimpleNamespace(Id=element_id(id_value), HostElementId=element_id(1))


def line(start, end):
    points = (start, end)
    return SimpleNamespace(GetEndPoint=lambda i: points[i])


class RecordingOutput:
    """pyRevit output window double that records markdown lines."""

    def __init__(self):
        self.lines = []

    def print_md(self, text):
        self.lines.append(text)

    def linkify(self, ids):
        if isinstance(ids, list):
            return "[{}]".format(",".join(str(i) for i in ids))
        return "<{}>".format(ids)
