"""Tilt-compensated compass heading from accelerometer and magnetometer."""

from __future__ import annotations

import math

from ahrsfusion.axes import Convention
from ahrsfusion.vector_math import Vector, radians_to_degrees, to_float32


def _vector(value) -> Vector:
    return value if isinstance(value, Vector) else Vector.of(value)


def calculate_heading(convention, accelerometer, magnetometer) -> float:
    """Return the magnetic heading in degrees for the given Earth convention."""
    if isinstance(convention, bool) or not isinstance(convention, int):
        raise TypeError("Arguments are not (int, numpy.array, numpy.array)")
    convention = Convention(convention)
    acceleration = _vector(accelerometer)
    magnetic = _vector(magnetometer)

    if convention is Convention.NED:
        up = acceleration * -1.0
        west = up.cross(magnetic).normalise()
        north = west.cross(up).normalise()
        angle = math.atan2(west.x, north.x)
    else:
        west = acceleration.cross(magnetic).normalise()
        north = west.cross(acceleration).normalise()
        if convention is Convention.ENU:
            east = west * -1.0
            angle = math.atan2(north.x, east.x)
        else:
            angle = math.atan2(west.x, north.x)
    return to_float32(radians_to_degrees(angle))