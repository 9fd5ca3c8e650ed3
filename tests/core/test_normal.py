import math

import pytest

from core.normal import Normal, NormalOutOfRange


def test_normal_clamps_out_of_range():
    assert Normal(-0.5).value == 0.0
    assert Normal(1.7).value == 1.0
    assert Normal(0.25).value == 0.25


def test_normal_nan_becomes_zero():
    assert Normal(math.nan) == Normal.MIN


def test_normal_checked_raises_outside_unit_interval():
    with pytest.raises(NormalOutOfRange):
        Normal.checked(1.01)
    assert Normal.checked(0.3).value == 0.3


def test_normal_out_of_range_is_value_error():
    assert issubclass(NormalOutOfRange, ValueError)


def test_normal_scale_helpers():
    n = Normal(0.25)
    assert n.scale(200.0) == 50.0
    assert n.scale_inv(200.0) == 150.0
    assert n.inverse == 0.75


def test_normal_ordering_and_constants():
    assert Normal.MIN < Normal.CENTER < Normal.MAX
    assert Normal.CENTER.value == 0.5


def test_normal_coerce_passes_normals_through():
    n = Normal(0.4)
    assert Normal.coerce(n) is n
    assert Normal.coerce(2.0) == Normal.MAX
