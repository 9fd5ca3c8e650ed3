"""Draw rotary knobs into primitive trees.

Arcs use canvas angles. Tick and text marks are laid out in knob angles
(0 = straight down) starting at the angle range's minimum.
"""
from __future__ import annotations
import enum
import math
from dataclasses import dataclass

from core.knob_angle_range import KnobAngleRange
from core.math_utils import round_half_up
from core.modulation_range import ModulationRange
from core.normal import Normal
from core.text_marks import TextMarkGroup
from core.tick_marks import TickMarkGroup
from render.cache import MarkCaches
from render.common import pick_appearance
from render.primitives import Arc, Group, Line, Point, Primitive, Quad, Rect
from render.text_layout import draw_radial_text_marks
from render.tick_layout import draw_radial_tick_marks
from style.knob import (
    ArcAppearance,
    ArcBipolarAppearance,
    CircleAppearance,
    CircleNotch,
    KnobStyleSheet,
    LineNotch,
    ModRangeArcStyle,
    NotchShape,
    ValueArcStyle,
)


@dataclass(frozen=True)
class KnobInfo:
    bounds: Rect
    angle_range: KnobAngleRange
    start_angle: float
    angle_span: float
    radius: float
    value: Normal
    bipolar_center: Normal | None
    value_angle: float

    @property
    def center(self) -> Point:
        return self.bounds.center

    @property
    def diameter(self) -> float:
        return self.bounds.width


def square_bounds(bounds: Rect) -> Rect:
    """Round ``bounds`` and centre the largest square inside it."""
    bounds = bounds.rounded()
    if bounds.width > bounds.height:
        return Rect(round_half_up(bounds.x + (bounds.width - bounds.height) / 2.0), bounds.y,
                    bounds.height, bounds.height)
    if bounds.height > bounds.width:
        return Rect(bounds.x, round_half_up(bounds.y + (bounds.height - bounds.width) / 2.0),
                    bounds.width, bounds.width)
    return bounds


def knob_info(bounds: Rect, normal: Normal, angle_range: KnobAngleRange,
              bipolar_center: Normal | None = None) -> KnobInfo:
    square = square_bounds(bounds)
    start_angle = angle_range.canvas_start()
    angle_span = angle_range.span
    return KnobInfo(
        bounds=square,
        angle_range=angle_range,
        start_angle=start_angle,
        angle_span=angle_span,
        radius=square.width / 2.0,
        value=normal,
        bipolar_center=bipolar_center,
        value_angle=start_angle + normal.scale(angle_span),
    )


def _ring_point(info: KnobInfo, radius: float, canvas_angle: float) -> Point:
    c = info.center
    return Point(c.x + radius * math.cos(canvas_angle), c.y + radius * math.sin(canvas_angle))


# -- markers ----------------------------------------------------------------------

def _draw_value_arc(info: KnobInfo, style: ValueArcStyle | None) -> Group | None:
    if style is None:
        return None
    arc_radius = info.radius + style.offset + style.width / 2.0
    end_angle = info.start_angle + info.angle_span

    def arc(start: float, end: float, color) -> Arc:
        return Arc(info.center, arc_radius, start, end, style.width, color, style.cap)

    empty = None
    if style.empty_color is not None:
        empty = arc(info.start_angle, end_angle, style.empty_color)

    filled = None
    if style.right_filled_color is not None:
        if info.value.value < 0.499 or info.value.value > 0.501:
            half_angle = info.start_angle + info.angle_span / 2.0
            if info.value < Normal.CENTER:
                filled = arc(info.value_angle, half_angle, style.left_filled_color)
            elif info.value > Normal.CENTER:
                filled = arc(half_angle, info.value_angle, style.right_filled_color)
    elif info.value != Normal.MIN:
        filled = arc(info.start_angle, info.value_angle, style.left_filled_color)

    return Group.of(empty, filled)


def _draw_mod_range_arc(info: KnobInfo, style: ModRangeArcStyle | None,
                        mod_range: ModulationRange | None) -> Group | None:
    if mod_range is None or style is None or not mod_range.visible:
        return None
    arc_radius = info.radius + style.offset + style.width / 2.0

    empty = None
    if style.empty_color is not None:
        empty = Arc(info.center, arc_radius, info.start_angle, info.start_angle + info.angle_span,
                    style.width, style.empty_color, style.cap)

    filled = None
    if mod_range.filled_visible and mod_range.start != mod_range.end:
        low, high, inverted = mod_range.span()
        color = style.filled_inverse_color if inverted else style.filled_color
        filled = Arc(info.center, arc_radius,
                     info.start_angle + low.scale(info.angle_span),
                     info.start_angle + high.scale(info.angle_span),
                     style.width, color, style.cap)

    return Group.of(empty, filled)


def _draw_notch(info: KnobInfo, notch: NotchShape) -> Primitive | None:
    diameter = info.diameter
    if isinstance(notch, CircleNotch):
        notch_diameter = notch.diameter.from_knob_diameter(diameter)
        notch_radius = notch_diameter / 2.0
        ring = info.radius - notch.offset.from_knob_diameter(diameter)
        p = _ring_point(info, ring, info.value_angle)
        return Quad(
            Rect(p.x - notch_radius, p.y - notch_radius, notch_diameter, notch_diameter),
            notch.color, notch_radius, notch.border_width, notch.border_color,
        )
    if isinstance(notch, LineNotch):
        outer = info.radius - notch.offset.from_knob_diameter(diameter)
        inner = outer - notch.length.from_knob_diameter(diameter)
        return Line(
            _ring_point(info, outer, info.value_angle),
            _ring_point(info, inner, info.value_angle),
            notch.width.from_knob_diameter(diameter),
            notch.color,
            notch.cap,
        )
    return None


class _Markers:
    __slots__ = ("ticks", "text", "value_arc", "mod_1", "mod_2")

    def __init__(self, info: KnobInfo, sheet: KnobStyleSheet, caches: MarkCaches,
                 tick_marks: TickMarkGroup | None, text_marks: TextMarkGroup | None,
                 mod_range: ModulationRange | None, mod_range_2: ModulationRange | None) -> None:
        self.ticks = None
        tick_style = sheet.tick_marks_style()
        if tick_marks is not None and tick_style is not None:
            self.ticks = draw_radial_tick_marks(
                info.center, info.radius + tick_style.offset,
                info.angle_range.min, info.angle_span, False,
                tick_marks, tick_style.style, False, caches.tick_marks,
            )
        self.text = None
        text_style = sheet.text_marks_style()
        if text_marks is not None and text_style is not None:
            self.text = draw_radial_text_marks(
                Point(info.center.x, info.center.y + text_style.v_offset),
                info.radius + text_style.offset,
                info.angle_range.min, info.angle_span,
                text_marks, text_style.style, text_style.h_char_offset, False, caches.text_marks,
            )
        self.value_arc = _draw_value_arc(info, sheet.value_arc_style())
        self.mod_1 = _draw_mod_range_arc(info, sheet.mod_range_arc_style(), mod_range)
        self.mod_2 = _draw_mod_range_arc(info, sheet.mod_range_arc_style_2(), mod_range_2)


# -- appearances --------------------------------------------------------------------

def _draw_circle(info: KnobInfo, style: CircleAppearance, markers: _Markers) -> Group:
    back = Quad(info.bounds, style.color, info.radius, style.border_width, style.border_color)
    return Group.of(
        markers.ticks, markers.text, markers.value_arc, markers.mod_1, markers.mod_2,
        back, _draw_notch(info, style.notch),
    )


def _draw_arc(info: KnobInfo, style: ArcAppearance, markers: _Markers) -> Group:
    width = style.width.from_knob_diameter(info.diameter)
    arc_radius = info.radius - width / 2.0
    end_angle = info.start_angle + info.angle_span
    arc = Group.of(
        Arc(info.center, arc_radius, info.start_angle, end_angle, width, style.empty_color, style.cap),
        Arc(info.center, arc_radius, info.start_angle, info.value_angle, width,
            style.filled_color, style.cap),
    )
    return Group.of(
        markers.ticks, markers.text, arc, _draw_notch(info, style.notch),
        markers.value_arc, markers.mod_1, markers.mod_2,
    )


class BipolarState(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def of(cls, value: Normal, bipolar_center: Normal | None) -> BipolarState:
        if bipolar_center is not None:
            if value < bipolar_center:
                return cls.LEFT
            if value > bipolar_center:
                return cls.RIGHT
            return cls.CENTER
        if value.value < 0.499:
            return cls.LEFT
        if value.value > 0.501:
            return cls.RIGHT
        return cls.CENTER


def _draw_arc_bipolar(info: KnobInfo, style: ArcBipolarAppearance, markers: _Markers) -> Group:
    width = style.width.from_knob_diameter(info.diameter)
    arc_radius = info.radius - width / 2.0
    state = BipolarState.of(info.value, info.bipolar_center)
    center = info.bipolar_center if info.bipolar_center is not None else Normal.CENTER
    center_angle = info.start_angle + center.scale(info.angle_span)

    empty = Arc(info.center, arc_radius, info.start_angle, info.start_angle + info.angle_span,
                width, style.empty_color, style.cap)
    filled = None
    if state is BipolarState.LEFT:
        filled = Arc(info.center, arc_radius, info.value_angle, center_angle, width,
                     style.left_filled_color, style.cap)
    elif state is BipolarState.RIGHT:
        filled = Arc(info.center, arc_radius, center_angle, info.value_angle, width,
                     style.right_filled_color, style.cap)

    if style.notch_left_right is not None and state is not BipolarState.CENTER:
        notch_left, notch_right = style.notch_left_right
        notch = notch_left if state is BipolarState.LEFT else notch_right
    else:
        notch = style.notch_center

    return Group.of(
        markers.ticks, markers.text, Group.of(empty, filled), _draw_notch(info, notch),
        markers.value_arc, markers.mod_1, markers.mod_2,
    )


def draw_knob(
    bounds: Rect,
    cursor: Point | None,
    normal: Normal,
    is_dragging: bool,
    style_sheet: KnobStyleSheet,
    caches: MarkCaches,
    bipolar_center: Normal | None = None,
    mod_range: ModulationRange | None = None,
    mod_range_2: ModulationRange | None = None,
    tick_marks: TickMarkGroup | None = None,
    text_marks: TextMarkGroup | None = None,
) -> Primitive:
    appearance = pick_appearance(style_sheet, bounds, cursor, is_dragging)
    info = knob_info(bounds, normal, style_sheet.angle_range(), bipolar_center)
    markers = _Markers(info, style_sheet, caches, tick_marks, text_marks, mod_range, mod_range_2)

    if isinstance(appearance, CircleAppearance):
        return _draw_circle(info, appearance, markers)
    if isinstance(appearance, ArcAppearance):
        return _draw_arc(info, appearance, markers)
    if isinstance(appearance, ArcBipolarAppearance):
        return _draw_arc_bipolar(info, appearance, markers)
    raise TypeError(f"Unknown knob appearance: {appearance!r}")
