"""Orientation helpers used by the AHRS algorithm: gravity, magnetic field and heading."""

from __future__ import annotations

import math
from collections.abc import Iterable

from ahrsfusion.axes import Convention
from ahrsfusion.vector_math import Quaternion, Vector, degrees_to_radians


def _vector(value: Vector | Iterable[float]) -> Vector:
    return value if isinstance(value, Vector) else Vector.of(value)


def _quaternion(value: Quaternion | Iterable[float]) -> Quaternion:
    return value if isinstance(value, Quaternion) else Quaternion.of(value)


def _convention(value: object) -> Convention:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("convention is not an int")
    return Convention(value)


def half_gravity(quaternion, convention) -> Vector:
    """Direction of gravity indicated by the quaternion, scaled by 0.5."""
    q = _quaternion(quaternion)
    if _convention(convention) is Convention.NED:
        # third column of transposed rotation matrix scaled by -0.5
        return Vector(
            q.w * q.y - q.x * q.z,
            -1.0 * (q.y * q.z + q.w * q.x),
            0.5 - q.w * q.w - q.z * q.z,
        )
    # third column of transposed rotation matrix scaled by 0.5
    return Vector(
        q.x * q.z - q.w * q.y,
        q.y * q.z + q.w * q.x,
        q.w * q.w - 0.5 + q.z * q.z,
    )


def half_magnetic(quaternion, convention) -> Vector:
    """Direction of the magnetic field indicated by the quaternion, scaled by 0.5."""
    q = _quaternion(quaternion)
    convention = _convention(convention)
    if convention is Convention.ENU:
        # first column of transposed rotation matrix scaled by -0.5
        return Vector(
            0.5 - q.w * q.w - q.x * q.x,
            q.w * q.z - q.x * q.y,
            -1.0 * (q.x * q.z + q.w * q.y),
        )
    if convention is Convention.NED:
        # second column of transposed rotation matrix scaled by -0.5
        return Vector(
            -1.0 * (q.x * q.y + q.w * q.z),
            0.5 - q.w * q.w - q.y * q.y,
            q.w * q.x - q.y * q.z,
        )
    # second column of transposed rotation matrix scaled by 0.5
    return Vector(
        q.x * q.y + q.w * q.z,
        q.w * q.w - 0.5 + q.y * q.y,
        q.y * q.z - q.w * q.x,
    )


def feedback(sensor, reference) -> Vector:
    """Error between sensor and reference directions; unit length beyond 90 degrees."""
    sensor = _vector(sensor)
    reference = _vector(reference)
    error = sensor.cross(reference)
    if sensor.dot(reference) < 0.0:
        return error.normalise()
    return error


def clamp(value, minimum, maximum):
    """Limit a value to the range [minimum, maximum]."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def gravity(quaternion) -> Vector:
    """Direction of gravity in the sensor coordinate frame."""
    q = _quaternion(quaternion)
    # third column of transposed rotation matrix
    return Vector(
        2.0 * (q.x * q.z - q.w * q.y),
        2.0 * (q.y * q.z + q.w * q.x),
        2.0 * (q.w * q.w - 0.5 + q.z * q.z),
    )


def linear_acceleration(quaternion, accelerometer, convention) -> Vector:
    """Accelerometer measurement (g) with gravity removed, in the sensor frame."""
    measured = _vector(accelerometer)
    if _convention(convention) is Convention.NED:
        return measured + gravity(quaternion)
    return measured - gravity(quaternion)


def earth_acceleration(quaternion, accelerometer, convention) -> Vector:
    """Accelerometer measurement (g) in the Earth frame with gravity removed."""
    q = _quaternion(quaternion)
    a = _vector(accelerometer)
    convention = _convention(convention)
    ww = q.w * q.w
    wx = q.w * q.x
    wy = q.w * q.y
    wz = q.w * q.z
    xy = q.x * q.y
    xz = q.x * q.z
    yz = q.y * q.z
    x = 2.0 * ((ww - 0.5 + q.x * q.x) * a.x + (xy - wz) * a.y + (xz + wy) * a.z)
    y = 2.0 * ((xy + wz) * a.x + (ww - 0.5 + q.y * q.y) * a.y + (yz - wx) * a.z)
    z = 2.0 * ((xz - wy) * a.x + (yz + wx) * a.y + (ww - 0.5 + q.z * q.z) * a.z)
    z = z + 1.0 if convention is Convention.NED else z - 1.0
    return Vector(x, y, z)


def roll(quaternion) -> float:
    """Roll angle of the quaternion in radians."""
    q = _quaternion(quaternion)
    return math.atan2(q.w * q.x + q.y * q.z, 0.5 - q.y * q.y - q.x * q.x)


def with_heading(quaternion, heading: float) -> Quaternion:
    """Return the quaternion rotated about the Earth Z axis to the given heading (degrees)."""
    q = _quaternion(quaternion)
    yaw = math.atan2(q.w * q.z + q.x * q.y, 0.5 - q.y * q.y - q.z * q.z)
    half_yaw_minus_heading = 0.5 * (yaw - degrees_to_radians(float(heading)))
    rotation = Quaternion(
        math.cos(half_yaw_minus_heading),
        0.0,
        0.0,
        -1.0 * math.sin(half_yaw_minus_heading),
    )
    return rotation * q