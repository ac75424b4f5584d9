"""Earth axes conventions and sensor-to-body axes alignment."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from ahrsfusion.vector_math import Vector


class Convention(IntEnum):
    """Earth axes convention."""

    NWU = 0  # North-West-Up
    ENU = 1  # East-North-Up
    NED = 2  # North-East-Down


class AxesAlignment(IntEnum):
    """Sensor axes relative to the body axes.

    For example, if the body X axis is aligned with the sensor Y axis and the
    body Y axis is aligned with the sensor X axis but pointing the opposite
    direction, the alignment is +Y-X+Z (``PYNXPZ``).
    """

    PXPYPZ = 0
    PXNZPY = 1
    PXNYNZ = 2
    PXPZNY = 3
    NXPYNZ = 4
    NXPZPY = 5
    NXNYPZ = 6
    NXNZNY = 7
    PYNXPZ = 8
    PYNZNX = 9
    PYPXNZ = 10
    PYPZPX = 11
    NYPXPZ = 12
    NYNZPX = 13
    NYNXNZ = 14
    NYPZNX = 15
    PZPYNX = 16
    PZPXPY = 17
    PZNYPX = 18
    PZNXNY = 19
    NZPYPX = 20
    NZNXPY = 21
    NZNYNX = 22
    NZPXNY = 23


def _swap_rule(alignment: AxesAlignment) -> tuple[tuple[float, int], ...]:
    name = alignment.name
    return tuple(
        (-1.0 if sign == "N" else 1.0, "XYZ".index(axis))
        for sign, axis in zip(name[::2], name[1::2])
    )


_SWAP_RULES = {alignment: _swap_rule(alignment) for alignment in AxesAlignment}


def axes_swap(sensor: Vector | Iterable[float], alignment: int) -> Vector:
    """Return the sensor axes rearranged to align with the body axes.

    An alignment value outside the known set leaves the sensor axes unchanged.
    """
    vector = sensor if isinstance(sensor, Vector) else Vector.of(sensor)
    if isinstance(alignment, bool) or not isinstance(alignment, int):
        raise TypeError("Arguments are not (numpy.array, int)")
    try:
        rule = _SWAP_RULES[AxesAlignment(alignment)]
    except ValueError:
        return vector
    if alignment == AxesAlignment.PXPYPZ:
        return vector
    components = tuple(vector)
    return Vector(*(sign * components[index] for sign, index in rule))