"""Gyroscope, accelerometer and magnetometer calibration models."""

from __future__ import annotations

from collections.abc import Iterable

from ahrsfusion.vector_math import Matrix, Vector


def _vector(value: Vector | Iterable[float]) -> Vector:
    return value if isinstance(value, Vector) else Vector.of(value)


def _matrix(value: Matrix | Iterable[Iterable[float]]) -> Matrix:
    return value if isinstance(value, Matrix) else Matrix.of(value)


def calibrate_inertial(uncalibrated, misalignment, sensitivity, offset) -> Vector:
    """Apply the gyroscope/accelerometer model: M * ((u - offset) o sensitivity)."""
    corrected = (_vector(uncalibrated) - _vector(offset)).hadamard(_vector(sensitivity))
    return _matrix(misalignment).multiply_vector(corrected)


def calibrate_magnetic(uncalibrated, soft_iron_matrix, hard_iron_offset) -> Vector:
    """Apply the magnetometer model: S * (u - hard iron offset)."""
    return _matrix(soft_iron_matrix).multiply_vector(
        _vector(uncalibrated) - _vector(hard_iron_offset)
    )