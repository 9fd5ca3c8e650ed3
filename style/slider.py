"""Appearances and style sheets for vertical and horizontal sliders.

Slider appearances are axis neutral: ``handle_length`` is the handle's size
along the track. "Low" is the bottom of a vertical slider and the left of a
horizontal one; "high" is the opposite end.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Union

from core.color import Color
from render.primitives import Rect
from style import default_colors
from style.marks import LinearTextMarks, LinearTickMarks


@dataclass(frozen=True)
class ClassicRail:
    rail_colors: tuple[Color, Color] = default_colors.SLIDER_RAIL
    rail_widths: tuple[float, float] = (1.0, 1.0)
    rail_padding: float = 0.0


@dataclass(frozen=True)
class ClassicHandle:
    color: Color = default_colors.LIGHT_BACK
    length: float = 34.0
    notch_width: float = 4.0
    notch_color: Color = default_colors.BORDER
    border_radius: float = 2.0
    border_width: float = 1.0
    border_color: Color = default_colors.BORDER


@dataclass(frozen=True)
class ClassicAppearance:
    rail: ClassicRail = field(default_factory=ClassicRail)
    handle: ClassicHandle = field(default_factory=ClassicHandle)


@dataclass(frozen=True)
class RectAppearance:
    back_color: Color = default_colors.LIGHT_BACK
    back_border_width: float = 1.0
    back_border_radius: float = 2.0
    back_border_color: Color = default_colors.BORDER
    filled_color: Color = default_colors.FILLED
    handle_color: Color = default_colors.FILLED
    handle_length: float = 4.0
    handle_filled_gap: float = 1.0


@dataclass(frozen=True)
class RectBipolarAppearance:
    back_color: Color = default_colors.LIGHT_BACK
    back_border_width: float = 1.0
    back_border_radius: float = 2.0
    back_border_color: Color = default_colors.BORDER
    low_filled_color: Color = default_colors.FILLED_INVERSE
    high_filled_color: Color = default_colors.FILLED
    handle_low_color: Color = default_colors.FILLED_INVERSE
    handle_high_color: Color = default_colors.FILLED
    handle_center_color: Color = default_colors.BORDER
    handle_length: float = 4.0
    handle_filled_gap: float = 1.0


@dataclass(frozen=True)
class TextureAppearance:
    """A bitmap handle drawn over classic rails.

    ``image_bounds`` is relative: on a vertical slider x is measured from
    the track centre and y from the handle position.
    """

    image_path: str
    image_bounds: Rect
    handle_length: float
    rail: ClassicRail = field(default_factory=ClassicRail)


SliderAppearance = Union[ClassicAppearance, RectAppearance, RectBipolarAppearance, TextureAppearance]


# -- modulation range strip -----------------------------------------------------

@dataclass(frozen=True)
class ModRangeCenter:
    """A strip of ``size`` across the track, centred, shifted by ``offset``."""

    size: float = 4.0
    offset: float = 0.0


@dataclass(frozen=True)
class ModRangeCenterFilled:
    edge_padding: float = 0.0


@dataclass(frozen=True)
class ModRangeLeftOrTop:
    size: float = 4.0
    offset: float = 0.0


@dataclass(frozen=True)
class ModRangeRightOrBottom:
    size: float = 4.0
    offset: float = 0.0


ModRangePlacement = Union[ModRangeCenter, ModRangeCenterFilled, ModRangeLeftOrTop, ModRangeRightOrBottom]


@dataclass(frozen=True)
class ModRangeStyle:
    placement: ModRangePlacement = field(default_factory=ModRangeCenter)
    back_color: Color | None = None
    back_border_width: float = 0.0
    back_border_radius: float = 0.0
    back_border_color: Color = Color.TRANSPARENT
    filled_color: Color = default_colors.MOD_RANGE_FILLED
    filled_inverse_color: Color = default_colors.MOD_RANGE_FILLED_INVERSE


# -- style sheets -----------------------------------------------------------------

class SliderStyleSheet:
    """Default look: classic rails with a light handle."""

    def active(self) -> SliderAppearance:
        return ClassicAppearance()

    def hovered(self) -> SliderAppearance:
        return _with_handle_color(self.active(), default_colors.LIGHT_BACK_HOVER)

    def dragging(self) -> SliderAppearance:
        return _with_handle_color(self.active(), default_colors.LIGHT_BACK_DRAG)

    def tick_marks_style(self) -> LinearTickMarks | None:
        return LinearTickMarks()

    def text_marks_style(self) -> LinearTextMarks | None:
        return LinearTextMarks()

    def mod_range_style(self) -> ModRangeStyle | None:
        return None

    def mod_range_style_2(self) -> ModRangeStyle | None:
        return None


def _with_handle_color(appearance: SliderAppearance, color: Color) -> SliderAppearance:
    if isinstance(appearance, ClassicAppearance):
        return replace(appearance, handle=replace(appearance.handle, color=color))
    return appearance


class RectSliderStyleSheet(SliderStyleSheet):
    def __init__(self, appearance: RectAppearance | None = None) -> None:
        self._appearance = appearance or RectAppearance()

    def active(self) -> SliderAppearance:
        return self._appearance

    def hovered(self) -> SliderAppearance:
        return replace(self._appearance, back_color=default_colors.LIGHT_BACK_HOVER)

    def dragging(self) -> SliderAppearance:
        return replace(self._appearance, back_color=default_colors.LIGHT_BACK_DRAG)

    def mod_range_style(self) -> ModRangeStyle | None:
        return ModRangeStyle(placement=ModRangeRightOrBottom(size=3.0, offset=2.0))


class RectBipolarSliderStyleSheet(SliderStyleSheet):
    def __init__(self, appearance: RectBipolarAppearance | None = None) -> None:
        self._appearance = appearance or RectBipolarAppearance()

    def active(self) -> SliderAppearance:
        return self._appearance

    def hovered(self) -> SliderAppearance:
        return replace(self._appearance, back_color=default_colors.LIGHT_BACK_HOVER)

    def dragging(self) -> SliderAppearance:
        return replace(self._appearance, back_color=default_colors.LIGHT_BACK_DRAG)
