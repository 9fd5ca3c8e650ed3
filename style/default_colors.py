"""Colours used by the default style sheets."""
from __future__ import annotations

from core.color import Color

BORDER = Color.grey(0.315)
LIGHT_BACK = Color.grey(0.97)
LIGHT_BACK_HOVER = Color.grey(0.93)
LIGHT_BACK_DRAG = Color.grey(0.92)

FILLED = Color(0.0, 0.6, 0.8)
FILLED_INVERSE = Color(0.95, 0.5, 0.0)

SLIDER_RAIL = (Color.grey(0.26, 0.75), Color.grey(0.56, 0.75))

TICK_TIER_1 = Color.grey(0.56, 0.93)
TICK_TIER_2 = Color.grey(0.56, 0.83)
TICK_TIER_3 = Color.grey(0.56, 0.65)

TEXT_MARK = Color.grey(0.16, 0.9)

KNOB_BACK_HOVER = Color.grey(0.96)
KNOB_TICK_TIER_1 = TICK_TIER_1
KNOB_TICK_TIER_2 = TICK_TIER_2
KNOB_TICK_TIER_3 = TICK_TIER_3
KNOB_ARC_EMPTY = Color.grey(0.85)
KNOB_ARC_FILLED = FILLED
KNOB_ARC_LEFT_FILLED = FILLED_INVERSE

RAMP_BACK_HOVER = Color.grey(0.95)

XY_PAD_RAIL = Color.grey(0.56, 0.9)
XY_PAD_CENTER_LINE = Color.grey(0.56, 0.5)

DB_METER_BACK = Color.grey(0.45)
DB_METER_BORDER = Color.grey(0.2)
DB_METER_LOW = Color(0.435, 0.886, 0.11)
DB_METER_MED = Color(0.737, 1.0, 0.145)
DB_METER_HIGH = Color(1.0, 0.945, 0.0)
DB_METER_CLIP = Color(1.0, 0.071, 0.071)
DB_METER_CLIP_MARKER = Color.grey(0.78, 0.28)
DB_METER_GAP = Color.grey(0.25)

PHASE_METER_CENTER_LINE = Color.grey(0.92)

DB_METER_TICK_TIER_1 = Color.grey(0.56, 0.85)
DB_METER_TICK_TIER_2 = Color.grey(0.56, 0.73)
DB_METER_TICK_TIER_3 = Color.grey(0.56, 0.63)

MOD_RANGE_FILLED = FILLED.with_alpha(0.6)
MOD_RANGE_FILLED_INVERSE = FILLED_INVERSE.with_alpha(0.6)
