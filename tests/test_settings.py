import dataclasses

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ahrsfusion.axes import Convention
from ahrsfusion.settings import Flags, InternalStates, Settings
from ahrsfusion.vector_math import to_float32


def test_defaults_match_initial_settings():
    settings = Settings()
    assert settings.convention is Convention.NWU
    assert settings.gain == 0.5
    assert settings.gyroscope_range == 0.0
    assert settings.acceleration_rejection == 90.0
    assert settings.magnetic_rejection == 90.0
    assert settings.recovery_trigger_period == 0


def test_positional_construction_in_source_order():
    settings = Settings(Convention.NED, 0.5, 2000, 10, 20, 500)
    assert settings.convention is Convention.NED
    assert settings.gyroscope_range == 2000.0
    assert settings.acceleration_rejection == 10.0
    assert settings.magnetic_rejection == 20.0
    assert settings.recovery_trigger_period == 500


def test_integer_convention_becomes_enum():
    settings = Settings(convention=1)
    assert settings.convention is Convention.ENU


def test_gain_is_stored_in_single_precision():
    settings = Settings(gain=0.1)
    assert settings.gain == to_float32(0.1)
    assert settings.gain != 0.1


def test_assignment_is_normalised():
    settings = Settings()
    settings.convention = 2
    settings.gain = 0.1
    settings.recovery_trigger_period = 5.9
    assert settings.convention is Convention.NED
    assert settings.gain == to_float32(0.1)
    assert settings.recovery_trigger_period == 5


def test_unknown_convention_is_rejected():
    with pytest.raises(ValueError):
        Settings(convention=7)


@pytest.mark.parametrize(
    "name", ["gain", "gyroscope_range", "acceleration_rejection", "magnetic_rejection"]
)
def test_non_numeric_float_field_is_rejected(name):
    with pytest.raises(TypeError):
        Settings(**{name: "fast"})


def test_non_numeric_convention_is_rejected():
    with pytest.raises(TypeError):
        Settings(convention="nwu")


def test_negative_recovery_period_is_rejected():
    with pytest.raises(ValueError):
        Settings(recovery_trigger_period=-1)


def test_assignment_of_bad_value_is_rejected():
    settings = Settings()
    with pytest.raises(TypeError):
        settings.magnetic_rejection = None
    assert settings.magnetic_rejection == 90.0


def test_settings_equality():
    assert Settings(gain=0.5, recovery_trigger_period=10) == Settings(
        Convention.NWU, 0.5, 0, 90, 90, 10
    )


def test_flags_defaults_and_immutability():
    flags = Flags(initialising=True)
    assert flags.initialising is True
    assert flags.angular_rate_recovery is False
    with pytest.raises(dataclasses.FrozenInstanceError):
        flags.initialising = False


def test_internal_states_fields():
    states = InternalStates(
        acceleration_error=1.5,
        accelerometer_ignored=True,
        acceleration_recovery_trigger=0.25,
        magnetic_error=2.5,
        magnetometer_ignored=False,
        magnetic_recovery_trigger=0.75,
    )
    assert states.acceleration_error == 1.5
    assert states.accelerometer_ignored is True
    assert states.magnetic_recovery_trigger == 0.75
    with pytest.raises(dataclasses.FrozenInstanceError):
        states.magnetic_error = 0.0


@given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
def test_gain_round_trips_through_float32(value):
    settings = Settings(gain=value)
    assert settings.gain == to_float32(value)
    assert Settings(gain=settings.gain).gain == settings.gain


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_recovery_period_keeps_integer(value):
    assert Settings(recovery_trigger_period=value).recovery_trigger_period == value