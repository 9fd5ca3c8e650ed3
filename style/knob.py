"""Appearances and style sheets for rotary knobs."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Union

from core.color import Color
from core.knob_angle_range import KnobAngleRange
from render.primitives import LineCap
from style import default_colors
from style.marks import TextMarksStyle, TickCircle, TickMarksStyle


@dataclass(frozen=True)
class Units:
    """A length in pixels."""

    value: float

    def from_knob_diameter(self, diameter: float) -> float:
        return self.value


@dataclass(frozen=True)
class Scaled:
    """A length relative to the knob diameter."""

    scale: float

    def from_knob_diameter(self, diameter: float) -> float:
        return self.scale * diameter


StyleLength = Union[Units, Scaled]


@dataclass(frozen=True)
class CircleNotch:
    color: Color = default_colors.BORDER
    border_width: float = 0.0
    border_color: Color = Color.TRANSPARENT
    diameter: StyleLength = Scaled(0.17)
    offset: StyleLength = Scaled(0.15)


@dataclass(frozen=True)
class LineNotch:
    color: Color = default_colors.BORDER
    width: StyleLength = Units(2.0)
    length: StyleLength = Scaled(0.17)
    cap: LineCap = LineCap.ROUND
    offset: StyleLength = Scaled(0.15)


NotchShape = Union[CircleNotch, LineNotch, None]


@dataclass(frozen=True)
class CircleAppearance:
    color: Color = default_colors.LIGHT_BACK
    border_width: float = 1.0
    border_color: Color = default_colors.BORDER
    notch: NotchShape = field(default_factory=CircleNotch)


@dataclass(frozen=True)
class ArcAppearance:
    width: StyleLength = Scaled(0.14)
    empty_color: Color = default_colors.KNOB_ARC_EMPTY
    filled_color: Color = default_colors.KNOB_ARC_FILLED
    cap: LineCap = LineCap.ROUND
    notch: NotchShape = field(default_factory=lambda: LineNotch(
        color=default_colors.BORDER, width=Units(2.0), length=Scaled(0.18), offset=Scaled(0.12),
    ))


@dataclass(frozen=True)
class ArcBipolarAppearance:
    width: StyleLength = Scaled(0.14)
    empty_color: Color = default_colors.KNOB_ARC_EMPTY
    left_filled_color: Color = default_colors.KNOB_ARC_LEFT_FILLED
    right_filled_color: Color = default_colors.KNOB_ARC_FILLED
    cap: LineCap = LineCap.ROUND
    notch_center: NotchShape = field(default_factory=lambda: LineNotch(
        color=default_colors.BORDER, width=Units(2.0), length=Scaled(0.18), offset=Scaled(0.12),
    ))
    # (left, right); when unset the centre notch is used on both sides
    notch_left_right: tuple[NotchShape, NotchShape] | None = None


KnobAppearance = Union[CircleAppearance, ArcAppearance, ArcBipolarAppearance]


@dataclass(frozen=True)
class ValueArcStyle:
    """A thin arc outside the knob that follows the value."""

    width: float = 2.0
    offset: float = 1.5
    empty_color: Color | None = None
    left_filled_color: Color = default_colors.KNOB_ARC_FILLED
    right_filled_color: Color | None = None
    cap: LineCap = LineCap.BUTT


@dataclass(frozen=True)
class ModRangeArcStyle:
    width: float = 3.0
    offset: float = 1.5
    empty_color: Color | None = None
    filled_color: Color = default_colors.MOD_RANGE_FILLED
    filled_inverse_color: Color = default_colors.MOD_RANGE_FILLED_INVERSE
    cap: LineCap = LineCap.BUTT


@dataclass(frozen=True)
class KnobTickMarks:
    style: TickMarksStyle = TickMarksStyle(
        tier_1=TickCircle(4.0, default_colors.KNOB_TICK_TIER_1),
        tier_2=TickCircle(2.0, default_colors.KNOB_TICK_TIER_2),
        tier_3=TickCircle(2.0, default_colors.KNOB_TICK_TIER_3),
    )
    offset: float = 4.47


@dataclass(frozen=True)
class KnobTextMarks:
    style: TextMarksStyle = field(default_factory=TextMarksStyle)
    offset: float = 15.0
    h_char_offset: float = 3.0
    v_offset: float = -0.75


class KnobStyleSheet:
    """Default look: a light circle with a round notch."""

    def active(self) -> KnobAppearance:
        return CircleAppearance()

    def hovered(self) -> KnobAppearance:
        appearance = self.active()
        if isinstance(appearance, CircleAppearance):
            return replace(appearance, color=default_colors.KNOB_BACK_HOVER)
        return appearance

    def dragging(self) -> KnobAppearance:
        return self.hovered()

    def angle_range(self) -> KnobAngleRange:
        return KnobAngleRange()

    def tick_marks_style(self) -> KnobTickMarks | None:
        return KnobTickMarks()

    def text_marks_style(self) -> KnobTextMarks | None:
        return KnobTextMarks()

    def value_arc_style(self) -> ValueArcStyle | None:
        return None

    def mod_range_arc_style(self) -> ModRangeArcStyle | None:
        return None

    def mod_range_arc_style_2(self) -> ModRangeArcStyle | None:
        return None


class ArcKnobStyleSheet(KnobStyleSheet):
    def __init__(self, appearance: ArcAppearance | None = None) -> None:
        self._appearance = appearance or ArcAppearance()

    def active(self) -> KnobAppearance:
        return self._appearance

    def tick_marks_style(self) -> KnobTickMarks | None:
        return None

    def mod_range_arc_style(self) -> ModRangeArcStyle | None:
        return ModRangeArcStyle()


class ArcBipolarKnobStyleSheet(KnobStyleSheet):
    def __init__(self, appearance: ArcBipolarAppearance | None = None) -> None:
        self._appearance = appearance or ArcBipolarAppearance()

    def active(self) -> KnobAppearance:
        return self._appearance

    def tick_marks_style(self) -> KnobTickMarks | None:
        return None
