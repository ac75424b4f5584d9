"""AHRS algorithm combining gyroscope, accelerometer and magnetometer measurements."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import replace
from numbers import Real

from ahrsfusion.axes import Convention
from ahrsfusion.orientation import (
    clamp,
    earth_acceleration,
    feedback,
    gravity,
    half_gravity,
    half_magnetic,
    linear_acceleration,
    roll,
    with_heading,
)
from ahrsfusion.settings import Flags, InternalStates, Settings
from ahrsfusion.vector_math import (
    Quaternion,
    Vector,
    clamped_asin,
    degrees_to_radians,
    radians_to_degrees,
)

INITIAL_GAIN = 10.0
"""Gain used while the algorithm initialises."""

INITIALISATION_PERIOD = 3.0
"""Initialisation period in seconds."""

_FLT_MAX = 3.4028234663852886e38


def _vector(value: Vector | Iterable[float]) -> Vector:
    return value if isinstance(value, Vector) else Vector.of(value)


def _number(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} is not a float")
    return float(value)


def _rejection(degrees: float) -> float:
    if degrees == 0.0:
        return _FLT_MAX
    return (0.5 * math.sin(degrees_to_radians(degrees))) ** 2


class Ahrs:
    """Estimates the orientation of a sensor relative to the Earth."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._initialising = False
        self._ramped_gain = INITIAL_GAIN
        self.settings = Settings() if settings is None else settings
        self.reset()

    @property
    def settings(self) -> Settings:
        """A copy of the settings last applied."""
        return replace(self._settings)

    @settings.setter
    def settings(self, settings: Settings) -> None:
        if not isinstance(settings, Settings):
            raise TypeError("Value type is not Settings")
        self._settings = replace(settings)
        self._convention = Convention(settings.convention)
        self._gain = settings.gain
        self._gyroscope_range = (
            _FLT_MAX if settings.gyroscope_range == 0.0 else 0.98 * settings.gyroscope_range
        )
        self._acceleration_rejection = _rejection(settings.acceleration_rejection)
        self._magnetic_rejection = _rejection(settings.magnetic_rejection)
        self._recovery_trigger_period = settings.recovery_trigger_period
        self._acceleration_recovery_timeout = self._recovery_trigger_period
        self._magnetic_recovery_timeout = self._recovery_trigger_period
        if settings.gain == 0.0 or settings.recovery_trigger_period == 0:
            # rejection features are disabled without gain or recovery period
            self._acceleration_rejection = _FLT_MAX
            self._magnetic_rejection = _FLT_MAX
        if not self._initialising:
            self._ramped_gain = self._gain
        self._ramped_gain_step = (INITIAL_GAIN - self._gain) / INITIALISATION_PERIOD

    def reset(self) -> None:
        """Restart the algorithm while keeping the current settings."""
        self._quaternion = Quaternion()
        self._accelerometer = Vector()
        self._initialising = True
        self._ramped_gain = INITIAL_GAIN
        self._angular_rate_recovery = False
        self._half_accelerometer_feedback = Vector()
        self._half_magnetometer_feedback = Vector()
        self._accelerometer_ignored = False
        self._acceleration_recovery_trigger = 0
        self._acceleration_recovery_timeout = self._recovery_trigger_period
        self._magnetometer_ignored = False
        self._magnetic_recovery_trigger = 0
        self._magnetic_recovery_timeout = self._recovery_trigger_period

    def update(self, gyroscope, accelerometer, magnetometer, delta_time) -> None:
        """Update with gyroscope (deg/s), accelerometer (g) and magnetometer readings."""
        gyro = _vector(gyroscope)
        accel = _vector(accelerometer)
        mag = _vector(magnetometer)
        dt = _number("delta_time", delta_time)
        self._update(gyro, accel, mag, dt)

    def _update(self, gyro: Vector, accel: Vector, mag: Vector, dt: float) -> None:
        self._accelerometer = accel

        if any(abs(component) > self._gyroscope_range for component in gyro):
            quaternion = self._quaternion
            self.reset()
            self._quaternion = quaternion
            self._angular_rate_recovery = True

        if self._initialising:
            self._ramped_gain -= self._ramped_gain_step * dt
            if self._ramped_gain < self._gain or self._gain == 0.0:
                self._ramped_gain = self._gain
                self._initialising = False
                self._angular_rate_recovery = False

        period = self._recovery_trigger_period
        half_grav = half_gravity(self._quaternion, self._convention)

        accel_feedback = Vector()
        self._accelerometer_ignored = True
        if not accel.is_zero():
            self._half_accelerometer_feedback = feedback(accel.normalise(), half_grav)
            if (
                self._initialising
                or self._half_accelerometer_feedback.magnitude_squared()
                <= self._acceleration_rejection
            ):
                self._accelerometer_ignored = False
                self._acceleration_recovery_trigger -= 9
            else:
                self._acceleration_recovery_trigger += 1
            if self._acceleration_recovery_trigger > self._acceleration_recovery_timeout:
                self._acceleration_recovery_timeout = 0
                self._accelerometer_ignored = False
            else:
                self._acceleration_recovery_timeout = period
            self._acceleration_recovery_trigger = clamp(
                self._acceleration_recovery_trigger, 0, period
            )
            if not self._accelerometer_ignored:
                accel_feedback = self._half_accelerometer_feedback

        mag_feedback = Vector()
        self._magnetometer_ignored = True
        if not mag.is_zero():
            half_mag = half_magnetic(self._quaternion, self._convention)
            self._half_magnetometer_feedback = feedback(
                half_grav.cross(mag).normalise(), half_mag
            )
            if (
                self._initialising
                or self._half_magnetometer_feedback.magnitude_squared()
                <= self._magnetic_rejection
            ):
                self._magnetometer_ignored = False
                self._magnetic_recovery_trigger -= 9
            else:
                self._magnetic_recovery_trigger += 1
            if self._magnetic_recovery_trigger > self._magnetic_recovery_timeout:
                self._magnetic_recovery_timeout = 0
                self._magnetometer_ignored = False
            else:
                self._magnetic_recovery_timeout = period
            self._magnetic_recovery_trigger = clamp(
                self._magnetic_recovery_trigger, 0, period
            )
            if not self._magnetometer_ignored:
                mag_feedback = self._half_magnetometer_feedback

        half_gyro = gyro * degrees_to_radians(0.5)
        adjusted = half_gyro + (accel_feedback + mag_feedback) * self._ramped_gain
        q = self._quaternion
        self._quaternion = (q + q.multiply_vector(adjusted * dt)).normalise()

    def update_no_magnetometer(self, gyroscope, accelerometer, delta_time) -> None:
        """Update without a magnetometer; heading is held at zero while initialising."""
        gyro = _vector(gyroscope)
        accel = _vector(accelerometer)
        dt = _number("delta_time", delta_time)
        self._update(gyro, accel, Vector(), dt)
        if self._initialising:
            self.set_heading(0.0)

    def update_external_heading(self, gyroscope, accelerometer, heading, delta_time) -> None:
        """Update using an external heading measurement in degrees."""
        gyro = _vector(gyroscope)
        accel = _vector(accelerometer)
        heading_degrees = _number("heading", heading)
        dt = _number("delta_time", delta_time)
        current_roll = roll(self._quaternion)
        heading_radians = degrees_to_radians(heading_degrees)
        sin_heading = math.sin(heading_radians)
        magnetometer = Vector(
            math.cos(heading_radians),
            -1.0 * math.cos(current_roll) * sin_heading,
            sin_heading * math.sin(current_roll),
        )
        self._update(gyro, accel, magnetometer, dt)

    @property
    def quaternion(self) -> Quaternion:
        """Orientation of the sensor relative to the Earth."""
        return self._quaternion

    @quaternion.setter
    def quaternion(self, quaternion: Quaternion) -> None:
        if not isinstance(quaternion, Quaternion):
            raise TypeError("Value type is not Quaternion")
        self._quaternion = quaternion

    @property
    def gravity(self) -> Vector:
        """Direction of gravity in the sensor frame."""
        return gravity(self._quaternion)

    @property
    def linear_acceleration(self) -> Vector:
        """Last accelerometer measurement (g) with gravity removed."""
        return linear_acceleration(self._quaternion, self._accelerometer, self._convention)

    @property
    def earth_acceleration(self) -> Vector:
        """Last accelerometer measurement (g) in the Earth frame with gravity removed."""
        return earth_acceleration(self._quaternion, self._accelerometer, self._convention)

    @property
    def internal_states(self) -> InternalStates:
        period = self._recovery_trigger_period
        return InternalStates(
            acceleration_error=radians_to_degrees(
                clamped_asin(2.0 * self._half_accelerometer_feedback.magnitude())
            ),
            accelerometer_ignored=self._accelerometer_ignored,
            acceleration_recovery_trigger=(
                0.0 if period == 0 else self._acceleration_recovery_trigger / period
            ),
            magnetic_error=radians_to_degrees(
                clamped_asin(2.0 * self._half_magnetometer_feedback.magnitude())
            ),
            magnetometer_ignored=self._magnetometer_ignored,
            magnetic_recovery_trigger=(
                0.0 if period == 0 else self._magnetic_recovery_trigger / period
            ),
        )

    @property
    def flags(self) -> Flags:
        return Flags(
            initialising=self._initialising,
            angular_rate_recovery=self._angular_rate_recovery,
            acceleration_recovery=(
                self._acceleration_recovery_trigger > self._acceleration_recovery_timeout
            ),
            magnetic_recovery=(
                self._magnetic_recovery_trigger > self._magnetic_recovery_timeout
            ),
        )

    def set_heading(self, heading) -> None:
        """Set the heading (degrees) of the orientation, e.g. to reset drift."""
        self._quaternion = with_heading(self._quaternion, _number("heading", heading))