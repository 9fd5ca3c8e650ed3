import pytest

from core.meter_state import BarState, DBMeterState, PhaseTierPositions, ReductionMeterState, TierPositions
from core.normal import Normal
from core.tick_marks import Tier, TickMarkGroup
from render.cache import MarkCaches
from render.meters import (
    DBTier,
    Orientation,
    PhaseTier,
    db_tier,
    draw_db_meter,
    draw_phase_meter,
    draw_reduction_meter,
    phase_tier,
)
from render.primitives import Cached, Group, Quad, Rect
from style import default_colors
from style.meters import DBMeterStyleSheet, PhaseMeterStyleSheet, ReductionMeterStyleSheet

TIERS = TierPositions(clipping=0.75, med=0.25, high=0.5)


def _mono(normal, peak=None):
    state = DBMeterState(BarState(Normal(normal), Normal(peak) if peak is not None else None),
                         None, TIERS)
    return draw_db_meter(Rect(0, 0, 10, 102), state, Orientation.VERTICAL,
                         DBMeterStyleSheet(), MarkCaches())


@pytest.mark.parametrize("value, tier", [
    (0.1, DBTier.LOW),
    (0.3, DBTier.MED),
    (0.6, DBTier.HIGH),
    (0.75, DBTier.CLIPPING),
])
def test_db_tier(value, tier):
    assert db_tier(Normal(value), TIERS) is tier


def test_med_is_ignored_without_high():
    assert db_tier(Normal(0.6), TierPositions(clipping=0.9, med=0.5)) is DBTier.LOW


def test_mono_meter_layers():
    back, clip_marker, bar = _mono(0.375).children
    assert back.rect == Rect(0, 0, 10, 102)
    assert clip_marker.rect == Rect(1, 25, 8, 2)
    low, med = bar.children
    assert low == Quad(Rect(1, 76, 8, 25), default_colors.DB_METER_LOW)
    assert med == Quad(Rect(1, 63.5, 8, 12.5), default_colors.DB_METER_MED)


def test_clipping_paints_every_segment_red():
    bar = _mono(0.875).children[2]
    assert len(bar.children) == 4
    assert {q.fill for q in bar.children} == {default_colors.DB_METER_CLIP}


def test_peak_line_takes_tier_colour():
    peak = _mono(0.0, peak=0.5).children[2]
    assert peak == Quad(Rect(1, 50, 8, 2), default_colors.DB_METER_HIGH)


def test_silent_meter_draws_no_bar():
    assert len(_mono(0.0).children) == 2


def test_stereo_meter_splits_around_gap():
    state = DBMeterState.stereo(TIERS)
    out = draw_db_meter(Rect(0, 0, 12, 102), state, Orientation.VERTICAL, DBMeterStyleSheet(), MarkCaches())
    back, clip_marker, gap = out.children
    assert gap == Quad(Rect(5, 0, 2, 102), default_colors.DB_METER_GAP)


def test_meter_ticks_sit_outside_the_track():
    ticks = TickMarkGroup.min_max(Tier.ONE)
    out = draw_db_meter(Rect(0, 0, 10, 102), DBMeterState(), Orientation.VERTICAL,
                        DBMeterStyleSheet(), MarkCaches(), tick_marks=ticks)
    assert isinstance(out.children[0], Cached)


@pytest.mark.parametrize("value, tier", [
    (0.1, PhaseTier.BAD),
    (0.3, PhaseTier.POOR),
    (0.6, PhaseTier.OKAY),
    (0.9, PhaseTier.GOOD),
])
def test_phase_tier(value, tier):
    assert phase_tier(Normal(value), PhaseTierPositions()) is tier


def _phase(normal):
    return draw_phase_meter(Rect(0, 0, 102, 10), Normal(normal), PhaseTierPositions(),
                            Orientation.HORIZONTAL, PhaseMeterStyleSheet(), MarkCaches())


def test_phase_centre_draws_only_the_centre_line():
    back, center_line = _phase(0.5).children
    assert center_line.rect == Rect(50, 1, 1, 8)


def test_phase_good_draws_okay_then_good():
    _, okay, good, _ = _phase(0.75).children
    assert okay == Quad(Rect(51, 1, 22, 8), default_colors.DB_METER_MED)
    assert good == Quad(Rect(73, 1, 3, 8), default_colors.DB_METER_LOW)


def test_phase_bad_draws_bad_then_poor():
    _, bad, poor, _ = _phase(0.1).children
    assert bad.rect == Rect(11, 1, 17, 8)
    assert poor.rect == Rect(28, 1, 23, 8)
    assert bad.fill == default_colors.DB_METER_CLIP


def test_reduction_vertical_hangs_from_top():
    state = ReductionMeterState(Normal(0.25), Normal(0.5))
    back, bar, peak = draw_reduction_meter(Rect(0, 0, 10, 100), state, Orientation.VERTICAL,
                                           ReductionMeterStyleSheet(), MarkCaches()).children
    assert bar.rect == Rect(0, 0, 10, 25)
    assert peak.rect == Rect(0, 48, 10, 4)


def test_reduction_horizontal_grows_from_right():
    state = ReductionMeterState(Normal(0.25))
    back, bar = draw_reduction_meter(Rect(0, 0, 100, 10), state, Orientation.HORIZONTAL,
                                     ReductionMeterStyleSheet(), MarkCaches()).children
    assert bar.rect == Rect(75, 0, 25, 10)


def test_reduction_at_rest_is_empty():
    out = draw_reduction_meter(Rect(0, 0, 10, 100), ReductionMeterState(), Orientation.VERTICAL,
                               ReductionMeterStyleSheet(), MarkCaches())
    assert isinstance(out, Group)
    assert len(out.children) == 1
