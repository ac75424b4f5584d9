import pytest
from hypothesis import given
from hypothesis import strategies as st

from ahrsfusion.calibration import calibrate_inertial, calibrate_magnetic
from ahrsfusion.vector_math import Matrix, Vector

finite = st.floats(min_value=-1e3, max_value=1e3, allow_nan=False)
ONES = Vector(1.0, 1.0, 1.0)
ZERO = Vector()


@given(finite, finite, finite)
def test_inertial_identity_model_is_noop(x, y, z):
    sensor = Vector(x, y, z)
    assert calibrate_inertial(sensor, Matrix(), ONES, ZERO) == sensor


def test_inertial_offset_removed():
    sensor = Vector(1.0, 2.0, 3.0)
    assert calibrate_inertial(sensor, Matrix(), ONES, sensor) == ZERO


def test_inertial_sensitivity_scales_each_axis():
    result = calibrate_inertial(
        Vector(2.0, 4.0, 8.0), Matrix(), Vector(0.5, 0.25, 0.125), ZERO
    )
    assert result == Vector(1.0, 1.0, 1.0)


def test_inertial_misalignment_applied_last():
    swap = Matrix.of([[0.0, 1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
    result = calibrate_inertial(
        Vector(3.0, 5.0, 7.0), swap, Vector(2.0, 2.0, 2.0), Vector(1.0, 1.0, 1.0)
    )
    assert result == Vector(8.0, 4.0, 12.0)


def test_inertial_accepts_sequences():
    result = calibrate_inertial(
        [1.0, 2.0, 3.0],
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]],
        [1.0, 1.0, 1.0],
        [0.0, 0.0, 0.0],
    )
    assert result == Vector(1.0, 2.0, 3.0)


def test_magnetic_hard_iron_removed():
    sensor = Vector(10.0, -20.0, 30.0)
    assert calibrate_magnetic(sensor, Matrix(), sensor) == ZERO


@given(finite, finite, finite)
def test_magnetic_identity_model_is_noop(x, y, z):
    sensor = Vector(x, y, z)
    assert calibrate_magnetic(sensor, Matrix(), ZERO) == sensor


def test_magnetic_soft_iron_applied_after_offset():
    soft_iron = Matrix(2.0, 0.0, 0.0, 0.0, 2.0, 0.0, 0.0, 0.0, 2.0)
    result = calibrate_magnetic(Vector(3.0, 4.0, 5.0), soft_iron, Vector(1.0, 1.0, 1.0))
    assert result == Vector(4.0, 6.0, 8.0)


def test_magnetic_bad_vector_rejected():
    with pytest.raises(TypeError, match="Array size is not 3"):
        calibrate_magnetic([1.0, 2.0], Matrix(), ZERO)