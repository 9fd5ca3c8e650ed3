"""Draw the DB, phase and reduction meters.

All meters floor their bounds first. Vertical meters fill from the bottom
(DB, phase) or hang from the top (reduction); horizontal ones fill from
the left or, for reduction, from the right.
"""
from __future__ import annotations
import enum
import math

from core.meter_state import BarState, DBMeterState, PhaseTierPositions, ReductionMeterState, TierPositions
from core.math_utils import round_half_up
from core.normal import Normal
from core.text_marks import TextMarkGroup
from core.tick_marks import TickMarkGroup
from render.cache import MarkCaches
from render.primitives import Cached, Group, Primitive, Quad, Rect
from render.text_layout import draw_horizontal_text_marks, draw_vertical_text_marks
from render.tick_layout import draw_horizontal_tick_marks, draw_vertical_tick_marks
from style.marks import BothSides, LeftOrTop, RightOrBottom
from style.meters import (
    DBMeterAppearance,
    DBMeterStyleSheet,
    MeterTickMarks,
    MeterTickPlacement,
    PhaseMeterStyleSheet,
    ReductionMeterStyleSheet,
)


class Orientation(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


_PLACEMENTS = {
    MeterTickPlacement.BOTH_SIDES: BothSides(),
    MeterTickPlacement.LEFT_OR_TOP: LeftOrTop(),
    MeterTickPlacement.RIGHT_OR_BOTTOM: RightOrBottom(),
}


def _meter_ticks(
    track: Rect,
    orientation: Orientation,
    tick_marks: TickMarkGroup | None,
    style: MeterTickMarks | None,
    caches: MarkCaches,
) -> Cached | None:
    """Ticks along ``track``, pushed ``style.offset`` outward on the cross axis."""
    if tick_marks is None or style is None:
        return None
    placement = _PLACEMENTS[style.placement]
    if orientation is Orientation.VERTICAL:
        bounds = Rect(track.x - style.offset, track.y, track.width + 2.0 * style.offset, track.height)
        return draw_vertical_tick_marks(bounds, tick_marks, style.style, placement,
                                        False, caches.tick_marks)
    bounds = Rect(track.x, track.y - style.offset, track.width, track.height + 2.0 * style.offset)
    return draw_horizontal_tick_marks(bounds, tick_marks, style.style, placement,
                                      False, caches.tick_marks)


# -- DB meter -------------------------------------------------------------------

class DBTier(enum.IntEnum):
    LOW = 0
    MED = 1
    HIGH = 2
    CLIPPING = 3


def db_tier(normal: Normal, tiers: TierPositions) -> DBTier:
    if normal >= tiers.clipping:
        return DBTier.CLIPPING
    if tiers.high is not None:
        if normal >= tiers.high:
            return DBTier.HIGH
        if tiers.med is not None and normal >= tiers.med:
            return DBTier.MED
    return DBTier.LOW


def _tier_color(tier: DBTier, style: DBMeterAppearance):
    return (style.low_color, style.med_color, style.high_color, style.clip_color)[tier]


def _db_bar(bar: BarState, tiers: TierPositions, style: DBMeterAppearance,
            vertical: bool, x: float, y: float, width: float, height: float) -> Primitive | None:
    """One channel: up to four tier segments plus the peak line.

    Offsets are measured along the meter from its low end.
    """
    length = height if vertical else width
    normal_tier = db_tier(bar.normal, tiers)
    all_clip = style.color_all_clip_color and normal_tier is DBTier.CLIPPING

    peak_line = None
    if bar.peak is not None and bar.peak != Normal.MIN:
        peak_tier = db_tier(bar.peak, tiers)
        all_clip = style.color_all_clip_color and peak_tier is DBTier.CLIPPING
        if peak_tier is DBTier.CLIPPING:
            peak_color = style.clip_color
        elif style.peak_line_color is not None:
            peak_color = style.peak_line_color
        else:
            peak_color = _tier_color(peak_tier, style)
        thickness = style.peak_line_width
        if vertical:
            offset = round_half_up((length - thickness) * bar.peak.inverse)
            peak_line = Quad(Rect(x, y + offset, width, thickness), peak_color)
        else:
            offset = round_half_up((length - thickness) * bar.peak.value)
            peak_line = Quad(Rect(x + offset, y, thickness, height), peak_color)

    if bar.normal == Normal.MIN:
        return peak_line

    clip_at = tiers.clipping.scale(length)
    high_at = tiers.high.scale(length) if tiers.high is not None else clip_at
    med_at = tiers.med.scale(length) if tiers.med is not None else high_at
    value_at = bar.normal.scale(length)

    # (start, end, colour, drawn) for each tier segment, low to clipping
    low_end = value_at if normal_tier is DBTier.LOW else med_at
    med_end = value_at if normal_tier is DBTier.MED else high_at
    high_end = value_at if normal_tier is DBTier.HIGH else clip_at
    segments = (
        (0.0, low_end, style.low_color, True),
        (low_end, med_end, style.med_color,
         normal_tier > DBTier.LOW and med_at != high_at),
        (med_end, high_end, style.high_color,
         normal_tier > DBTier.MED and high_at != clip_at),
        (high_end, value_at, style.clip_color, normal_tier is DBTier.CLIPPING),
    )

    quads: list[Primitive | None] = []
    for start, end, color, drawn in segments:
        if not drawn:
            quads.append(None)
            continue
        if all_clip:
            color = style.clip_color
        if vertical:
            quads.append(Quad(Rect(x, y + height - end, width, end - start), color))
        else:
            quads.append(Quad(Rect(x + start, y, end - start, height), color))

    return Group.of(*quads, peak_line)


def draw_db_meter(
    bounds: Rect,
    state: DBMeterState,
    orientation: Orientation,
    style_sheet: DBMeterStyleSheet,
    caches: MarkCaches,
    tick_marks: TickMarkGroup | None = None,
) -> Primitive:
    style = style_sheet.active()
    bounds = bounds.floored()
    border = style.back_border_width
    tiers = state.tier_positions
    vertical = orientation is Orientation.VERTICAL

    back = Quad(bounds, style.back_color, 0.0, border, style.back_border_color)

    bar_x = bounds.x + border
    bar_y = bounds.y + border
    bar_width = bounds.width - 2.0 * border
    bar_height = bounds.height - 2.0 * border
    track = Rect(bar_x, bar_y, bar_width, bar_height)

    if vertical:
        ticks = _meter_ticks(Rect(bounds.x, bar_y, bounds.width, bar_height),
                             orientation, tick_marks, style_sheet.tick_marks_style(), caches)
        half_marker = round_half_up(style.clip_marker_width * 0.5)
        clip_y = math.floor(bar_y + tiers.clipping.scale_inv(bar_height) - half_marker)
        clip_marker = Quad(Rect(bar_x, clip_y, bar_width, style.clip_marker_width),
                           style.clip_marker_color)
    else:
        ticks = _meter_ticks(Rect(bar_x, bounds.y, bar_width, bounds.height),
                             orientation, tick_marks, style_sheet.tick_marks_style(), caches)
        clip_x = math.floor(bar_x + tiers.clipping.scale(bar_width) - style.clip_marker_width * 0.5)
        clip_marker = Quad(Rect(clip_x, bar_y, style.clip_marker_width, bar_height),
                           style.clip_marker_color)

    if state.right is None:
        meter = _db_bar(state.left, tiers, style, vertical, *_rect_args(track))
        return Group.of(ticks, back, clip_marker, meter)

    if vertical:
        half = math.floor((bar_width - style.inner_gap) * 0.5)
        left = Rect(bar_x, bar_y, half, bar_height)
        right = Rect(bounds.x + bounds.width - border - half, bar_y, half, bar_height)
        gap = Quad(Rect(left.x + half, bounds.y, right.x - (left.x + half), bounds.height),
                   style.inner_gap_color)
    else:
        half = math.floor((bar_height - style.inner_gap) * 0.5)
        left = Rect(bar_x, bar_y, bar_width, half)
        right = Rect(bar_x, bounds.y + bounds.height - border - half, bar_width, half)
        gap = Quad(Rect(bounds.x, left.y + half, bounds.width, right.y - (left.y + half)),
                   style.inner_gap_color)

    return Group.of(
        ticks, back, clip_marker, gap,
        _db_bar(state.left, tiers, style, vertical, *_rect_args(left)),
        _db_bar(state.right, tiers, style, vertical, *_rect_args(right)),
    )


def _rect_args(rect: Rect) -> tuple[float, float, float, float]:
    return rect.x, rect.y, rect.width, rect.height


# -- phase meter ----------------------------------------------------------------

class PhaseTier(enum.Enum):
    BAD = "bad"
    POOR = "poor"
    OKAY = "okay"
    GOOD = "good"


def phase_tier(normal: Normal, tiers: PhaseTierPositions) -> PhaseTier:
    value = normal.value
    if value >= 0.5 + tiers.good.value / 2.0:
        return PhaseTier.GOOD
    if value >= 0.5:
        return PhaseTier.OKAY
    if value >= tiers.poor.value / 2.0:
        return PhaseTier.POOR
    return PhaseTier.BAD


def draw_phase_meter(
    bounds: Rect,
    normal: Normal,
    tiers: PhaseTierPositions,
    orientation: Orientation,
    style_sheet: PhaseMeterStyleSheet,
    caches: MarkCaches,
    tick_marks: TickMarkGroup | None = None,
    text_marks: TextMarkGroup | None = None,
) -> Primitive:
    """A centre-anchored bar: left (or down) of centre is poor or bad phase."""
    style = style_sheet.active()
    bounds = bounds.floored()
    border = style.back_border_width
    vertical = orientation is Orientation.VERTICAL

    back = Quad(bounds, style.back_color, 0.0, border, style.back_border_color)

    bar_x = bounds.x + border
    bar_y = bounds.y + border
    bar_width = bounds.width - 2.0 * border
    bar_height = bounds.height - 2.0 * border
    line_width = style.center_line_width

    text_style = style_sheet.text_marks_style()
    text = None
    if vertical:
        track = Rect(bounds.x, bar_y, bounds.width, bar_height)
        center = math.floor(bounds.height / 2.0)
        center_line = Quad(Rect(bar_x, math.floor(bounds.y + center - line_width / 2.0),
                                bar_width, line_width), style.center_line_color)
        if text_marks is not None and text_style is not None:
            text = draw_vertical_text_marks(track, text_marks, text_style.style,
                                            text_style.placement, False, caches.text_marks)
    else:
        track = Rect(bar_x, bounds.y, bar_width, bounds.height)
        center = math.floor(bounds.width / 2.0)
        center_line = Quad(Rect(math.floor(bounds.x + center - line_width / 2.0), bar_y,
                                line_width, bar_height), style.center_line_color)
        if text_marks is not None and text_style is not None:
            text = draw_horizontal_text_marks(track, text_marks, text_style.style,
                                              text_style.placement, False, caches.text_marks)
    ticks = _meter_ticks(track, orientation, tick_marks, style_sheet.tick_marks_style(), caches)

    if 0.499 <= normal.value <= 0.501:
        return Group.of(ticks, text, back, center_line)

    span = bar_height if vertical else bar_width
    tier = phase_tier(normal, tiers)

    # Offsets along the meter measured from its top (vertical) or left edge.
    def offset(position: float) -> float:
        if vertical:
            return math.floor((1.0 - position) * span + border)
        return math.floor(position * span + border)

    def segment(a: float, b: float, color) -> Quad:
        lo, hi = min(a, b), max(a, b)
        if vertical:
            return Quad(Rect(bar_x, bounds.y + lo, bar_width, hi - lo), color)
        return Quad(Rect(bounds.x + lo, bar_y, hi - lo, bar_height), color)

    value_at = offset(normal.value)
    if tier is PhaseTier.BAD:
        poor_at = offset(tiers.poor.value / 2.0)
        bars = (segment(value_at, poor_at, style.bad_color),
                segment(poor_at, center, style.poor_color))
    elif tier is PhaseTier.POOR:
        bars = (segment(value_at, center, style.poor_color),)
    elif tier is PhaseTier.OKAY:
        bars = (segment(center, value_at, style.okay_color),)
    else:
        good_at = offset(0.5 + tiers.good.value / 2.0)
        bars = (segment(center, good_at, style.okay_color),
                segment(good_at, value_at, style.good_color))

    return Group.of(ticks, text, back, *bars, center_line)


# -- reduction meter --------------------------------------------------------------

def draw_reduction_meter(
    bounds: Rect,
    state: ReductionMeterState,
    orientation: Orientation,
    style_sheet: ReductionMeterStyleSheet,
    caches: MarkCaches,
    tick_marks: TickMarkGroup | None = None,
) -> Primitive:
    style = style_sheet.active()
    bounds = bounds.floored()
    border = style.back_border_width
    radius = style.back_border_radius
    peak_width = style.peak_line_width + 2.0 * border

    back = Quad(bounds, style.back_color, radius, border, style.back_border_color)

    def fill(rect: Rect, color) -> Quad:
        return Quad(rect, color, radius, border)

    bar = peak = None
    if orientation is Orientation.VERTICAL:
        track = Rect(bounds.x, bounds.y + border, bounds.width, bounds.height - 2.0 * border)
        if state.bar != Normal.MIN:
            bar = fill(Rect(bounds.x, bounds.y, bounds.width, state.bar.scale(bounds.height)),
                       style.color)
        if state.peak is not None and state.peak != Normal.MIN:
            y = round_half_up(bounds.y + state.peak.scale(bounds.height) - peak_width / 2.0)
            peak = fill(Rect(bounds.x, y, bounds.width, peak_width), style.peak_line_color)
    else:
        track = Rect(bounds.x + border, bounds.y, bounds.width - 2.0 * border, bounds.height)
        if state.bar != Normal.MIN:
            bar_offset = round_half_up(state.bar.scale_inv(bounds.width))
            bar = fill(Rect(bounds.x + bar_offset, bounds.y, bounds.width - bar_offset, bounds.height),
                       style.color)
        if state.peak is not None and state.peak != Normal.MIN:
            peak_offset = round_half_up(state.peak.scale_inv(bounds.width - peak_width))
            peak = fill(Rect(bounds.x + peak_offset, bounds.y, peak_width, bounds.height),
                        style.peak_line_color)

    ticks = _meter_ticks(track, orientation, tick_marks, style_sheet.tick_marks_style(), caches)
    return Group.of(ticks, back, bar, peak)
