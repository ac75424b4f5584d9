"""Vector, quaternion, matrix and Euler angle types used by the AHRS algorithm."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from numbers import Real

_INVERSE_SQRT_MAGIC = 0x5F1F1412


def to_float32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    value = float(value)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * (180.0 / math.pi)


def clamped_asin(value: float) -> float:
    """Arc sine that saturates at +/- pi/2 instead of failing outside [-1, 1]."""
    if value <= -1.0:
        return math.pi / -2.0
    if value >= 1.0:
        return math.pi / 2.0
    return math.asin(value)


def fast_inverse_sqrt(x: float) -> float:
    """Approximate 1 / sqrt(x) using the single-precision bit-level trick."""
    (bits,) = struct.unpack("<i", struct.pack("<f", to_float32(x)))
    bits = (_INVERSE_SQRT_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    (y,) = struct.unpack("<f", struct.pack("<I", bits))
    return y * (1.69000231 - 0.714158168 * x * y * y)


def _is_sequence(item: object) -> bool:
    return isinstance(item, Iterable) and not isinstance(item, (str, bytes))


def _parse_array(values: object, size: int) -> tuple[float, ...]:
    """Read a one-dimensional sequence of exactly ``size`` numbers."""
    if not _is_sequence(values):
        raise TypeError("Arguments are not (numpy.array)")
    items = list(values)  # type: ignore[arg-type]
    if any(_is_sequence(item) for item in items):
        raise TypeError("Array dimensions is not 1")
    if len(items) != size:
        raise TypeError(f"Array size is not {size}")
    parsed = []
    for item in items:
        if isinstance(item, (str, bytes)):
            raise TypeError("Invalid array element type")
        try:
            parsed.append(to_float32(float(item)))
        except (TypeError, ValueError) as error:
            raise TypeError("Invalid array element type") from error
    return tuple(parsed)


@dataclass(frozen=True)
class Vector:
    """Three-dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, values: Iterable[float]) -> Vector:
        """Build a vector from a one-dimensional sequence of three numbers."""
        return cls(*_parse_array(values, 3))

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def __add__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: object) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        s = float(scalar)
        return Vector(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return self * -1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def sum(self) -> float:
        """Sum of the elements."""
        return self.x + self.y + self.z

    def hadamard(self, other: Vector) -> Vector:
        """Element-wise product."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector) -> float:
        return self.hadamard(other).sum()

    def magnitude_squared(self) -> float:
        return self.hadamard(self).sum()

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def normalise(self) -> Vector:
        """Unit vector in the same direction (fast approximate square root)."""
        return self * fast_inverse_sqrt(self.magnitude_squared())


@dataclass(frozen=True)
class Quaternion:
    """Quaternion with scalar part ``w``; defaults to the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, values: Iterable[float]) -> Quaternion:
        """Build a quaternion from a one-dimensional sequence (w, x, y, z)."""
        return cls(*_parse_array(values, 4))

    def wxyz(self) -> tuple[float, float, float, float]:
        return (self.w, self.x, self.y, self.z)

    def __add__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(
            self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z
        )

    def __mul__(self, other: object) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
        )

    def multiply_vector(self, vector: Vector) -> Quaternion:
        """Post-multiply by a vector treated as a quaternion with zero ``w``."""
        q, v = self, vector
        return Quaternion(
            -q.x * v.x - q.y * v.y - q.z * v.z,
            q.w * v.x + q.y * v.z - q.z * v.y,
            q.w * v.y - q.x * v.z + q.z * v.x,
            q.w * v.z + q.x * v.y - q.y * v.x,
        )

    def normalise(self) -> Quaternion:
        """Unit quaternion (fast approximate square root)."""
        reciprocal = fast_inverse_sqrt(
            self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        )
        return Quaternion(
            self.w * reciprocal,
            self.x * reciprocal,
            self.y * reciprocal,
            self.z * reciprocal,
        )

    def to_matrix(self) -> Matrix:
        """Rotation matrix equivalent to this quaternion."""
        w, x, y, z = self.wxyz()
        ww = w * w
        wx = w * x
        wy = w * y
        wz = w * z
        xy = x * y
        xz = x * z
        yz = y * z
        return Matrix(
            2.0 * (ww - 0.5 + x * x),
            2.0 * (xy - wz),
            2.0 * (xz + wy),
            2.0 * (xy + wz),
            2.0 * (ww - 0.5 + y * y),
            2.0 * (yz - wx),
            2.0 * (xz - wy),
            2.0 * (yz + wx),
            2.0 * (ww - 0.5 + z * z),
        )

    def to_euler(self) -> Euler:
        """ZYX Euler angles in degrees."""
        w, x, y, z = self.wxyz()
        half_minus_y_squared = 0.5 - y * y
        return Euler(
            roll=radians_to_degrees(
                math.atan2(w * x + y * z, half_minus_y_squared - x * x)
            ),
            pitch=radians_to_degrees(clamped_asin(2.0 * (w * y - z * x))),
            yaw=radians_to_degrees(
                math.atan2(w * z + x * y, half_minus_y_squared - z * z)
            ),
        )


@dataclass(frozen=True)
class Matrix:
    """3x3 matrix in row-major order; defaults to the identity."""

    xx: float = 1.0
    xy: float = 0.0
    xz: float = 0.0
    yx: float = 0.0
    yy: float = 1.0
    yz: float = 0.0
    zx: float = 0.0
    zy: float = 0.0
    zz: float = 1.0

    @classmethod
    def of(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from three rows of three numbers."""
        if not _is_sequence(rows):
            raise TypeError("Arguments are not (numpy.array)")
        row_list = list(rows)
        if len(row_list) != 3:
            raise TypeError("Matrix is not 3x3")
        elements = [value for row in row_list for value in _parse_array(row, 3)]
        return cls(*elements)

    def rows(self) -> tuple[tuple[float, float, float], ...]:
        return (
            (self.xx, self.xy, self.xz),
            (self.yx, self.yy, self.yz),
            (self.zx, self.zy, self.zz),
        )

    def multiply_vector(self, vector: Vector) -> Vector:
        return Vector(
            self.xx * vector.x + self.xy * vector.y + self.xz * vector.z,
            self.yx * vector.x + self.yy * vector.y + self.yz * vector.z,
            self.zx * vector.x + self.zy * vector.y + self.zz * vector.z,
        )


@dataclass(frozen=True)
class Euler:
    """Euler angles in degrees: rotations around X, Y and Z."""

    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.roll
        yield self.pitch
        yield self.yaw