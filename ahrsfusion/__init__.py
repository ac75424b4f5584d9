"""Sensor fusion for inertial measurement units: AHRS, compass, offset correction and calibration."""

__version__ = "1.0.0"

__all__ = ["ahrs", "axes", "calibration", "compass", "offset", "orientation", "settings", "vector_math"]