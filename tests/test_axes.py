import pytest
from hypothesis import given
from hypothesis import strategies as st

from ahrsfusion.axes import AxesAlignment, axes_swap
from ahrsfusion.vector_math import Vector

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False)


def test_identity_alignment_returns_input():
    sensor = Vector(1.0, 2.0, 3.0)
    assert axes_swap(sensor, AxesAlignment.PXPYPZ) == sensor


def test_pxnzpy_follows_naming():
    result = axes_swap(Vector(1.0, 2.0, 3.0), AxesAlignment.PXNZPY)
    assert tuple(result) == (1.0, -3.0, 2.0)


def test_pynxpz_follows_naming():
    result = axes_swap(Vector(1.0, 2.0, 3.0), AxesAlignment.PYNXPZ)
    assert tuple(result) == (2.0, -1.0, 3.0)


def test_accepts_plain_sequence():
    result = axes_swap([1.0, 2.0, 3.0], AxesAlignment.NZNYNX)
    assert tuple(result) == (-3.0, -2.0, -1.0)


def test_accepts_plain_int_alignment():
    assert axes_swap(Vector(1.0, 2.0, 3.0), 6) == Vector(-1.0, -2.0, 3.0)


def test_unknown_alignment_leaves_sensor_unchanged():
    sensor = Vector(4.0, 5.0, 6.0)
    assert axes_swap(sensor, 99) == sensor


def test_wrong_size_rejected():
    with pytest.raises(TypeError, match="Array size is not 3"):
        axes_swap([1.0, 2.0], AxesAlignment.PXPYPZ)


def test_non_integer_alignment_rejected():
    with pytest.raises(TypeError):
        axes_swap(Vector(1.0, 2.0, 3.0), "PXPYPZ")


@pytest.mark.parametrize("alignment", list(AxesAlignment))
def test_every_alignment_is_a_proper_rotation(alignment):
    x = axes_swap(Vector(1.0, 0.0, 0.0), alignment)
    y = axes_swap(Vector(0.0, 1.0, 0.0), alignment)
    z = axes_swap(Vector(0.0, 0.0, 1.0), alignment)
    assert x.cross(y) == z


def test_all_alignments_are_distinct():
    sensor = Vector(1.0, 2.0, 3.0)
    results = {tuple(axes_swap(sensor, alignment)) for alignment in AxesAlignment}
    assert len(results) == len(AxesAlignment)


@given(finite, finite, finite, st.sampled_from(list(AxesAlignment)))
def test_swap_permutes_magnitudes(x, y, z, alignment):
    sensor = Vector(x, y, z)
    result = axes_swap(sensor, alignment)
    assert sorted(abs(v) for v in result) == sorted(abs(v) for v in sensor)