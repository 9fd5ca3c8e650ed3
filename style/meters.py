"""Appearances and style sheets for the DB, phase and reduction meters.

Meters are display-only, so each style sheet has a single ``active()`` look.
"""
from __future__ import annotations
import enum
from dataclasses import dataclass

from core.color import Color
from style import default_colors
from style.marks import LinearTextMarks, TickLine, TickMarksStyle


class MeterTickPlacement(enum.Enum):
    BOTH_SIDES = "both_sides"
    LEFT_OR_TOP = "left_or_top"
    RIGHT_OR_BOTTOM = "right_or_bottom"


@dataclass(frozen=True)
class MeterTickMarks:
    """Ticks outside a meter, ``offset`` pixels away from its edge."""

    style: TickMarksStyle = TickMarksStyle(
        tier_1=TickLine(4.0, 2.0, default_colors.DB_METER_TICK_TIER_1),
        tier_2=TickLine(3.0, 2.0, default_colors.DB_METER_TICK_TIER_2),
        tier_3=TickLine(2.0, 1.0, default_colors.DB_METER_TICK_TIER_3),
    )
    offset: float = 2.0
    placement: MeterTickPlacement = MeterTickPlacement.BOTH_SIDES


@dataclass(frozen=True)
class DBMeterAppearance:
    back_color: Color = default_colors.DB_METER_BACK
    back_border_width: float = 1.0
    back_border_color: Color = default_colors.DB_METER_BORDER
    low_color: Color = default_colors.DB_METER_LOW
    med_color: Color = default_colors.DB_METER_MED
    high_color: Color = default_colors.DB_METER_HIGH
    clip_color: Color = default_colors.DB_METER_CLIP
    # None: the peak line takes the colour of the tier it sits in
    peak_line_color: Color | None = None
    peak_line_width: float = 2.0
    color_all_clip_color: bool = True
    clip_marker_width: float = 2.0
    clip_marker_color: Color = default_colors.DB_METER_CLIP_MARKER
    inner_gap: float = 2.0
    inner_gap_color: Color = default_colors.DB_METER_GAP


class DBMeterStyleSheet:
    def active(self) -> DBMeterAppearance:
        return DBMeterAppearance()

    def tick_marks_style(self) -> MeterTickMarks | None:
        return MeterTickMarks()


@dataclass(frozen=True)
class PhaseMeterAppearance:
    back_color: Color = default_colors.DB_METER_BACK
    back_border_width: float = 1.0
    back_border_color: Color = default_colors.DB_METER_BORDER
    bad_color: Color = default_colors.DB_METER_CLIP
    poor_color: Color = default_colors.DB_METER_HIGH
    okay_color: Color = default_colors.DB_METER_MED
    good_color: Color = default_colors.DB_METER_LOW
    center_line_width: float = 1.0
    center_line_color: Color = default_colors.PHASE_METER_CENTER_LINE


class PhaseMeterStyleSheet:
    def active(self) -> PhaseMeterAppearance:
        return PhaseMeterAppearance()

    def tick_marks_style(self) -> MeterTickMarks | None:
        return MeterTickMarks()

    def text_marks_style(self) -> LinearTextMarks | None:
        return None


@dataclass(frozen=True)
class ReductionMeterAppearance:
    back_color: Color = default_colors.DB_METER_BACK
    back_border_width: float = 1.0
    back_border_radius: float = 0.0
    back_border_color: Color = default_colors.DB_METER_BORDER
    color: Color = default_colors.DB_METER_LOW
    peak_line_color: Color = default_colors.DB_METER_LOW
    peak_line_width: float = 2.0


class ReductionMeterStyleSheet:
    def active(self) -> ReductionMeterAppearance:
        return ReductionMeterAppearance()

    def tick_marks_style(self) -> MeterTickMarks | None:
        return MeterTickMarks(style=TickMarksStyle())
