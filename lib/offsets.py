# -*- coding: utf-8 -*-
"""=========================================================================
Copyright (c) 2025 Jose Francisco Nava Perez. All rights reserved.

This code and associated documentation files may not be copied, modified,
distributed, or used in any form without the prior written permission of
the copyright holder.
========================================================================="""

# Imports
# =========================================================================
from xyz import XYZ

# Constants
# =========================================================================
FEET_TO_INCHES = 12.0

# Class
# =========================================================================


class Offsets:
    def __init__(self, inlet, outlet, center_h=0.0, center_v=0.0):
        """Edge offsets between two cross-sections.

        Args:
            inlet: Section at the fixed end
            outlet: Section at the other end
            center_h: Lateral centre displacement along the inlet width axis (in)
            center_v: Lateral centre displacement along the inlet height axis (in)
        """
        if inlet is None or outlet is None:
            raise ValueError("Offsets need both an inlet and an outlet section")
        self.inlet = inlet
        self.outlet = outlet
        self.center_h = float(center_h)
        self.center_v = float(center_v)

    @classmethod
    def from_connector_data(cls, inlet_data, outlet_data, inlet, outlet):
        """Build offsets from two connector frames (host feet).

        inlet_data / outlet_data are dicts with 'origin', 'basis_x',
        'basis_y' as produced by connectors.connector_frame().
        """
        inlet_origin = inlet_data.get('origin')
        outlet_origin = outlet_data.get('origin')
        if inlet_origin is None or outlet_origin is None:
            raise ValueError("Connector data is missing an origin")

        center_vec = (XYZ.from_point(outlet_origin, FEET_TO_INCHES)
                      - XYZ.from_point(inlet_origin, FEET_TO_INCHES))

        basis_x = inlet_data.get('basis_x')
        basis_y = inlet_data.get('basis_y')
        if basis_x is None or basis_y is None:
            # No orientation, measure against global axes
            center_h = (center_vec.X ** 2 + center_vec.Y ** 2) ** 0.5
            return cls(inlet, outlet, center_h, center_vec.Z)

        bx = XYZ.from_point(basis_x)
        by = XYZ.from_point(basis_y)
        center_h = center_vec.dot(bx)
        center_v = center_vec.dot(by)

        # basis_x pointing up means the duct is rotated 90° (width is vertical)
        bx_z = abs(bx.Z)
        if bx_z > abs(by.Z) and bx_z > 0.5:
            return cls(inlet.swapped(), outlet.swapped(), center_v, center_h)
        return cls(inlet, outlet, center_h, center_v)

    def calculate(self):
        """Top/bottom/left/right edge offsets plus the centre offsets."""
        dh = self.outlet.half_height - self.inlet.half_height
        dw = self.outlet.half_width - self.inlet.half_width

        return {
            'top': self.center_v + dh,
            'bottom': self.center_v - dh,
            'right': self.center_h + dw,
            'left': self.center_h - dw,
            'center_horizontal': self.center_h,
            'center_vertical': self.center_v,
        }

    def rise_horizontal(self):
        result = self.calculate()
        return max(abs(result['left']), abs(result['right']))

    def rise_vertical(self):
        result = self.calculate()
        return max(abs(result['top']), abs(result['bottom']))
