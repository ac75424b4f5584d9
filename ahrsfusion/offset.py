"""Run-time gyroscope offset correction."""

from __future__ import annotations

import math

from ahrsfusion.vector_math import Vector

CUTOFF_FREQUENCY = 0.02
"""Filter cutoff frequency in Hz."""

TIMEOUT = 5
"""Seconds the gyroscope must be stationary before the offset is adjusted."""

THRESHOLD = 3.0
"""Stationary threshold in degrees per second."""


class Offset:
    """Tracks and removes a slowly varying gyroscope offset."""

    def __init__(self, sample_rate: int) -> None:
        if isinstance(sample_rate, bool) or not isinstance(sample_rate, int):
            raise TypeError("Arguments are not (unsigned int)")
        if sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        self.filter_coefficient = 2.0 * math.pi * CUTOFF_FREQUENCY * (1.0 / sample_rate)
        self.timeout = TIMEOUT * sample_rate
        self.timer = 0
        self.gyroscope_offset = Vector()

    def update(self, gyroscope) -> Vector:
        """Return the gyroscope measurement (deg/s) with the offset removed."""
        measurement = gyroscope if isinstance(gyroscope, Vector) else Vector.of(gyroscope)
        corrected = measurement - self.gyroscope_offset

        if any(abs(component) > THRESHOLD for component in corrected):
            self.timer = 0
            return corrected

        if self.timer < self.timeout:
            self.timer += 1
            return corrected

        self.gyroscope_offset = self.gyroscope_offset + corrected * self.filter_coefficient
        return corrected