"""AHRS algorithm settings, flags and internal states."""

from __future__ import annotations

from dataclasses import dataclass, fields
from numbers import Real

from ahrsfusion.axes import Convention
from ahrsfusion.vector_math import to_float32

_FLOAT_FIELDS = frozenset(
    {"gain", "gyroscope_range", "acceleration_rejection", "magnetic_rejection"}
)


def _convention(value: object) -> Convention:
    if not isinstance(value, Real):
        raise TypeError("convention is not a number")
    return Convention(int(value))


def _single(name: str, value: object) -> float:
    if not isinstance(value, Real):
        raise TypeError(f"{name} is not a number")
    return to_float32(float(value))


def _unsigned(name: str, value: object) -> int:
    if not isinstance(value, Real):
        raise TypeError(f"{name} is not a number")
    number = int(value)
    if number < 0:
        raise ValueError(f"{name} must not be negative")
    return number


def _coerce(name: str, value: object) -> object:
    if name == "convention":
        return _convention(value)
    if name in _FLOAT_FIELDS:
        return _single(name, value)
    if name == "recovery_trigger_period":
        return _unsigned(name, value)
    return value


@dataclass
class Settings:
    """AHRS algorithm settings.

    Angles are in degrees, the gyroscope range in degrees per second and the
    recovery trigger period in samples. A range or rejection of zero disables
    that feature. Defaults are those the algorithm starts with.
    """

    convention: Convention = Convention.NWU
    gain: float = 0.5
    gyroscope_range: float = 0.0
    acceleration_rejection: float = 90.0
    magnetic_rejection: float = 90.0
    recovery_trigger_period: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            object.__setattr__(
                self, field.name, _coerce(field.name, getattr(self, field.name))
            )

    def __setattr__(self, name: str, value: object) -> None:
        object.__setattr__(self, name, _coerce(name, value))


@dataclass(frozen=True)
class Flags:
    """AHRS algorithm flags."""

    initialising: bool = False
    angular_rate_recovery: bool = False
    acceleration_recovery: bool = False
    magnetic_recovery: bool = False


@dataclass(frozen=True)
class InternalStates:
    """AHRS algorithm internal states; errors are in degrees."""

    acceleration_error: float = 0.0
    accelerometer_ignored: bool = False
    acceleration_recovery_trigger: float = 0.0
    magnetic_error: float = 0.0
    magnetometer_ignored: bool = False
    magnetic_recovery_trigger: float = 0.0