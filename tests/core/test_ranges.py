import pytest

from core.normal import Normal
from core.ranges import FloatRange, FreqRange, IntRange, LogDBRange


# --- FloatRange ---

def test_float_range_round_trip_clamps():
    r = FloatRange(-10.0, 30.0)
    assert r.to_value(r.to_normal(12.5)) == pytest.approx(12.5)
    assert r.to_value(r.to_normal(100.0)) == pytest.approx(30.0)
    assert r.to_value(r.to_normal(-100.0)) == pytest.approx(-10.0)


def test_float_range_rejects_empty_span():
    with pytest.raises(ValueError):
        FloatRange(1.0, 1.0)


def test_float_range_create_param():
    param = FloatRange.bipolar().create_param("pan", 0.5, 0.0)
    assert param.id == "pan"
    assert param.normal.value == pytest.approx(0.75)
    assert param.default == Normal.CENTER


def test_create_param_default_uses_each_range_convention():
    assert FloatRange.bipolar().create_param_default("a").normal == Normal.CENTER
    assert LogDBRange(-12.0, 12.0, 0.5).create_param_default("b").normal == Normal.CENTER
    assert FreqRange(20.0, 20480.0).create_param_default("c").normal.value == pytest.approx(1.0)


# --- IntRange ---

def test_int_range_rounds_half_up():
    r = IntRange(0, 5)
    assert r.to_value(0.5) == 3


def test_int_range_snap_normal():
    r = IntRange(0, 5)
    assert r.snap_normal(0.5).value == pytest.approx(0.6)
    assert r.snap_normal(r.snap_normal(0.5)) == r.snap_normal(0.5)


def test_int_range_round_trip_on_integers():
    r = IntRange(-3, 9)
    for value in range(-3, 10):
        assert r.to_value(r.to_normal(value)) == value


def test_int_range_clamps():
    r = IntRange(0, 10)
    assert r.to_normal(50) == Normal.MAX
    assert r.to_normal(-1) == Normal.MIN


# --- LogDBRange ---

def test_log_db_centered_fixed_points():
    r = LogDBRange(-12.0, 12.0, 0.5)
    assert r.to_normal(0.0) == Normal.CENTER
    assert r.to_normal(-12.0) == Normal.MIN
    assert r.to_normal(12.0) == Normal.MAX
    assert r.to_value(Normal.CENTER) == 0.0


def test_log_db_negative_half():
    r = LogDBRange(-12.0, 12.0, 0.5)
    assert r.to_normal(-3.0).value == pytest.approx(0.25)
    assert r.to_value(0.25) == pytest.approx(-3.0)


def test_log_db_positive_half():
    r = LogDBRange(-12.0, 12.0, 0.5)
    assert r.to_value(0.75) == pytest.approx(3.0)


def test_log_db_monotonic():
    r = LogDBRange(-64.0, 3.0, 0.9)
    values = [-64.0, -40.0, -12.0, -3.0, 0.0, 1.0, 3.0]
    normals = [r.to_normal(v).value for v in values]
    assert normals == sorted(normals)
    assert r.to_normal(0.0).value == pytest.approx(0.9)


@pytest.mark.parametrize("args", [(3.0, -3.0), (-12.0, -1.0), (1.0, 12.0), (-12.0, 12.0, 1.5)])
def test_log_db_rejects_bad_construction(args):
    with pytest.raises(ValueError):
        LogDBRange(*args)


@pytest.mark.parametrize("min_db, max_db, pivot, normal_of_min, normal_of_max, at_min, at_max", [
    # min of 0 dB: nothing below the pivot
    (0.0, 12.0, 0.5, 0.5, 1.0, 0.0, 12.0),
    # max of 0 dB: nothing above the pivot
    (-12.0, 0.0, 0.5, 0.0, 0.5, -12.0, 0.0),
    # pivot at the top: negative half only
    (-12.0, 12.0, 1.0, 0.0, 1.0, -12.0, 0.0),
    # pivot at the bottom: positive half only
    (-12.0, 12.0, 0.0, 0.0, 1.0, 0.0, 12.0),
])
def test_log_db_collapsed_halves(min_db, max_db, pivot, normal_of_min, normal_of_max, at_min, at_max):
    r = LogDBRange(min_db, max_db, pivot)
    assert r.to_normal(min_db).value == pytest.approx(normal_of_min)
    assert r.to_normal(max_db).value == pytest.approx(normal_of_max)
    assert r.to_value(pivot) == 0.0
    assert r.to_value(Normal.MIN) == pytest.approx(at_min)
    assert r.to_value(Normal.MAX) == pytest.approx(at_max)


def test_log_db_min_of_zero_clamps_negatives_to_the_bottom():
    r = LogDBRange(0.0, 12.0, 0.0)
    assert r.to_normal(-5.0) == Normal.MIN
    assert r.to_value(Normal.MIN) == 0.0


def test_log_db_max_of_zero_clamps_positives_to_the_top():
    r = LogDBRange(-12.0, 0.0, 1.0)
    assert r.to_normal(5.0) == Normal.MAX
    assert r.to_value(Normal.MAX) == 0.0


def test_log_db_snap_to_default_is_opt_in():
    plain = LogDBRange(-12.0, 12.0)
    snapping = LogDBRange(-12.0, 12.0, snap_to_default_window=0.01)
    nearly_zero = plain.to_normal(0.0001)
    assert plain.to_value_snapped(nearly_zero, Normal.CENTER) != 0.0
    assert snapping.to_value_snapped(nearly_zero, Normal.CENTER) == 0.0


# --- FreqRange ---

def test_freq_range_octaves():
    r = FreqRange(20.0, 20480.0)
    assert r.to_normal(20.0) == Normal.MIN
    assert r.to_normal(40.0).value == pytest.approx(0.1)
    assert r.to_normal(20480.0).value == pytest.approx(1.0)
    assert r.to_value(0.5) == pytest.approx(640.0)


def test_freq_range_doubling_is_constant_step():
    r = FreqRange(20.0, 20480.0)
    steps = [r.to_normal(f * 2).value - r.to_normal(f).value for f in (50.0, 100.0, 1000.0)]
    assert steps == pytest.approx([0.1, 0.1, 0.1])


def test_freq_range_renormalizes_to_endpoints():
    r = FreqRange(100.0, 1000.0)
    assert r.to_normal(100.0) == Normal.MIN
    assert r.to_normal(1000.0).value == pytest.approx(1.0)
    assert r.to_normal(5.0) == Normal.MIN


def test_freq_range_rejects_empty_after_clamp():
    with pytest.raises(ValueError):
        FreqRange(30000.0, 40000.0)
