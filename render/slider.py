"""Draw vertical and horizontal sliders into primitive trees."""
from __future__ import annotations

from core.color import Color
from core.math_utils import round_half_up
from core.modulation_range import ModulationRange
from core.normal import Normal
from core.text_marks import TextMarkGroup
from core.tick_marks import TickMarkGroup
from render.cache import MarkCaches
from render.common import linear_marks, pick_appearance
from render.primitives import Group, Image, Point, Primitive, Quad, Rect
from style.slider import (
    ClassicAppearance,
    ClassicRail,
    ModRangeCenter,
    ModRangeCenterFilled,
    ModRangeLeftOrTop,
    ModRangeRightOrBottom,
    ModRangeStyle,
    RectAppearance,
    RectBipolarAppearance,
    SliderStyleSheet,
    TextureAppearance,
)

_r = round_half_up


def _is_centered(normal: Normal) -> bool:
    return 0.499 < normal.value < 0.501


def _mod_range_strip(cross_start: float, cross_len: float, style: ModRangeStyle) -> tuple[float, float]:
    placement = style.placement
    if isinstance(placement, ModRangeCenter):
        return cross_start + placement.offset + (cross_len - placement.size) / 2.0, placement.size
    if isinstance(placement, ModRangeCenterFilled):
        return cross_start + placement.edge_padding, cross_len - placement.edge_padding * 2.0
    if isinstance(placement, ModRangeLeftOrTop):
        return cross_start + placement.offset - placement.size, placement.size
    if isinstance(placement, ModRangeRightOrBottom):
        return cross_start + cross_len + placement.offset, placement.size
    raise TypeError(f"Unknown modulation range placement: {placement!r}")


def _draw_mod_range(
    bounds: Rect,
    mod_range: ModulationRange | None,
    style: ModRangeStyle | None,
    vertical: bool,
) -> Group | None:
    if mod_range is None or style is None or not mod_range.visible:
        return None

    if vertical:
        x, width = _mod_range_strip(bounds.x, bounds.width, style)
        strip = Rect(x, bounds.y, width, bounds.height)
    else:
        y, height = _mod_range_strip(bounds.y, bounds.height, style)
        strip = Rect(bounds.x, y, bounds.width, height)

    back = None
    if style.back_color is not None:
        back = Quad(strip, style.back_color, style.back_border_radius,
                    style.back_border_width, style.back_border_color)

    filled = None
    if mod_range.filled_visible and mod_range.start != mod_range.end:
        low, high, inverted = mod_range.span()
        color = style.filled_inverse_color if inverted else style.filled_color
        if vertical:
            top = bounds.y + high.scale_inv(bounds.height)
            bottom = bounds.y + low.scale_inv(bounds.height)
            rect = Rect(strip.x, top, strip.width, bottom - top)
        else:
            left = bounds.x + low.scale(bounds.width)
            right = bounds.x + high.scale(bounds.width)
            rect = Rect(left, strip.y, right - left, strip.height)
        filled = Quad(rect, color, style.back_border_radius, style.back_border_width,
                      Color.TRANSPARENT)

    return Group.of(back, filled)


def _rails(bounds: Rect, rail: ClassicRail, vertical: bool) -> tuple[Quad, Quad]:
    first_width, second_width = rail.rail_widths
    first_color, second_color = rail.rail_colors
    full_width = first_width + second_width
    if vertical:
        x = _r(bounds.x + (bounds.width - full_width) / 2.0)
        y = bounds.y + rail.rail_padding
        height = bounds.height - rail.rail_padding * 2.0
        return (
            Quad(Rect(x, y, first_width, height), first_color),
            Quad(Rect(x + first_width, y, second_width, height), second_color),
        )
    y = _r(bounds.y + (bounds.height - full_width) / 2.0)
    x = bounds.x + rail.rail_padding
    width = bounds.width - rail.rail_padding * 2.0
    return (
        Quad(Rect(x, y, width, first_width), first_color),
        Quad(Rect(x, y + first_width, width, second_width), second_color),
    )


def _value_bounds(bounds: Rect, handle_length: float, vertical: bool) -> Rect:
    if vertical:
        return Rect(bounds.x, _r(bounds.y + handle_length / 2.0),
                    bounds.width, bounds.height - handle_length)
    return Rect(_r(bounds.x + handle_length / 2.0), bounds.y,
                bounds.width - handle_length, bounds.height)


class _Markers:
    __slots__ = ("tick_marks", "text_marks", "mod_range", "mod_range_2", "sheet", "caches")

    def __init__(self, tick_marks, text_marks, mod_range, mod_range_2, sheet, caches) -> None:
        self.tick_marks = tick_marks
        self.text_marks = text_marks
        self.mod_range = mod_range
        self.mod_range_2 = mod_range_2
        self.sheet = sheet
        self.caches = caches

    def draw(self, mark_bounds: Rect, mod_bounds: Rect, vertical: bool):
        ticks, text = linear_marks(
            mark_bounds, vertical,
            self.tick_marks, self.sheet.tick_marks_style(),
            self.text_marks, self.sheet.text_marks_style(),
            self.caches,
        )
        mod_1 = _draw_mod_range(mod_bounds, self.mod_range, self.sheet.mod_range_style(), vertical)
        mod_2 = _draw_mod_range(mod_bounds, self.mod_range_2, self.sheet.mod_range_style_2(), vertical)
        return ticks, text, mod_1, mod_2


def _classic(normal: Normal, bounds: Rect, style: ClassicAppearance, markers: _Markers,
             vertical: bool) -> Group:
    handle = style.handle
    value_bounds = _value_bounds(bounds, handle.length, vertical)
    ticks, text, mod_1, mod_2 = markers.draw(value_bounds, value_bounds, vertical)
    rail_1, rail_2 = _rails(bounds, style.rail, vertical)

    notch = None
    if vertical:
        offset = _r(normal.scale_inv(value_bounds.height))
        handle_rect = Rect(bounds.x, bounds.y + offset, bounds.width, handle.length)
        if handle.notch_width != 0:
            notch_y = _r(bounds.y + offset + handle.length / 2.0 - handle.notch_width / 2.0)
            notch = Quad(Rect(bounds.x, notch_y, bounds.width, handle.notch_width), handle.notch_color)
    else:
        offset = _r(normal.scale(value_bounds.width))
        handle_rect = Rect(bounds.x + offset, bounds.y, handle.length, bounds.height)
        if handle.notch_width != 0:
            notch_x = _r(bounds.x + offset + handle.length / 2.0 - handle.notch_width / 2.0)
            notch = Quad(Rect(notch_x, bounds.y, handle.notch_width, bounds.height), handle.notch_color)

    handle_quad = Quad(handle_rect, handle.color, handle.border_radius,
                       handle.border_width, handle.border_color)
    return Group.of(ticks, text, rail_1, rail_2, handle_quad, notch, mod_1, mod_2)


def _back(bounds: Rect, style: RectAppearance | RectBipolarAppearance) -> Quad:
    return Quad(bounds, style.back_color, style.back_border_radius,
                style.back_border_width, style.back_border_color)


def _bar(rect: Rect, color: Color, style: RectAppearance | RectBipolarAppearance) -> Quad:
    return Quad(rect, color, style.back_border_radius, style.back_border_width, Color.TRANSPARENT)


def _rect(normal: Normal, bounds: Rect, style: RectAppearance, markers: _Markers,
          vertical: bool) -> Group:
    value_bounds = _value_bounds(bounds, style.handle_length, vertical)
    ticks, text, mod_1, mod_2 = markers.draw(value_bounds, bounds, vertical)
    twice_border = style.back_border_width * 2.0

    if vertical:
        offset = _r(normal.scale_inv(value_bounds.height - twice_border))
        filled_offset = offset + style.handle_length + style.handle_filled_gap
        filled = Rect(bounds.x, bounds.y + filled_offset, bounds.width, bounds.height - filled_offset)
        handle = Rect(bounds.x, bounds.y + offset, bounds.width, style.handle_length + twice_border)
    else:
        offset = _r(normal.scale(value_bounds.width - twice_border))
        filled = Rect(bounds.x, bounds.y, offset + twice_border - style.handle_filled_gap, bounds.height)
        handle = Rect(bounds.x + offset, bounds.y, style.handle_length + twice_border, bounds.height)

    return Group.of(
        _back(bounds, style), ticks, text,
        _bar(filled, style.filled_color, style),
        _bar(handle, style.handle_color, style),
        mod_1, mod_2,
    )


def _rect_bipolar(normal: Normal, bounds: Rect, style: RectBipolarAppearance, markers: _Markers,
                  vertical: bool) -> Group:
    value_bounds = _value_bounds(bounds, style.handle_length, vertical)
    ticks, text, mod_1, mod_2 = markers.draw(value_bounds, bounds, vertical)
    border = style.back_border_width
    twice_border = border * 2.0
    gap = style.handle_filled_gap
    length = style.handle_length

    filled = None
    if vertical:
        offset = _r(normal.scale_inv(value_bounds.height - twice_border))
        if _is_centered(normal):
            handle_color = style.handle_center_color
        elif normal.value > 0.5:
            handle_color = style.handle_high_color
            start = offset + length + gap
            filled = _bar(Rect(bounds.x, bounds.y + start, bounds.width,
                               _r(bounds.height / 2.0 - start + twice_border)),
                          style.high_filled_color, style)
        else:
            handle_color = style.handle_low_color
            start = _r(bounds.height / 2.0) - border
            filled = _bar(Rect(bounds.x, bounds.y + start, bounds.width,
                               offset - start + twice_border - gap),
                          style.low_filled_color, style)
        handle = Rect(bounds.x, bounds.y + offset, bounds.width, length + twice_border)
    else:
        offset = _r(normal.scale(value_bounds.width - twice_border))
        if _is_centered(normal):
            handle_color = style.handle_center_color
        elif normal.value < 0.5:
            handle_color = style.handle_low_color
            start = offset + length + gap
            filled = _bar(Rect(bounds.x + start, bounds.y,
                               _r(bounds.width / 2.0 - start + twice_border), bounds.height),
                          style.low_filled_color, style)
        else:
            handle_color = style.handle_high_color
            start = _r(bounds.width / 2.0) - border
            filled = _bar(Rect(bounds.x + start, bounds.y,
                               offset - start + twice_border - gap, bounds.height),
                          style.high_filled_color, style)
        handle = Rect(bounds.x + offset, bounds.y, length + twice_border, bounds.height)

    return Group.of(
        _back(bounds, style), ticks, text, filled,
        _bar(handle, handle_color, style),
        mod_1, mod_2,
    )


def _texture(normal: Normal, bounds: Rect, style: TextureAppearance, markers: _Markers,
             vertical: bool) -> Group:
    value_bounds = _value_bounds(bounds, style.handle_length, vertical)
    ticks, text, mod_1, mod_2 = markers.draw(value_bounds, value_bounds, vertical)
    rail_1, rail_2 = _rails(bounds, style.rail, vertical)
    image = style.image_bounds
    if vertical:
        x = _r(bounds.center_x + image.x)
        y = _r(value_bounds.y + image.y + normal.scale_inv(value_bounds.height))
    else:
        x = _r(value_bounds.x + image.x + normal.scale(value_bounds.width))
        y = _r(bounds.center_y + image.y)
    handle = Image(style.image_path, Rect(x, y, image.width, image.height))
    return Group.of(ticks, text, rail_1, rail_2, handle, mod_1, mod_2)


def _draw_slider(
    vertical: bool,
    bounds: Rect,
    cursor: Point | None,
    normal: Normal,
    is_dragging: bool,
    style_sheet: SliderStyleSheet,
    caches: MarkCaches,
    mod_range: ModulationRange | None,
    mod_range_2: ModulationRange | None,
    tick_marks: TickMarkGroup | None,
    text_marks: TextMarkGroup | None,
) -> Group:
    appearance = pick_appearance(style_sheet, bounds, cursor, is_dragging)
    bounds = bounds.rounded()
    markers = _Markers(tick_marks, text_marks, mod_range, mod_range_2, style_sheet, caches)

    if isinstance(appearance, ClassicAppearance):
        return _classic(normal, bounds, appearance, markers, vertical)
    if isinstance(appearance, RectAppearance):
        return _rect(normal, bounds, appearance, markers, vertical)
    if isinstance(appearance, RectBipolarAppearance):
        return _rect_bipolar(normal, bounds, appearance, markers, vertical)
    if isinstance(appearance, TextureAppearance):
        return _texture(normal, bounds, appearance, markers, vertical)
    raise TypeError(f"Unknown slider appearance: {appearance!r}")


def draw_v_slider(
    bounds: Rect,
    cursor: Point | None,
    normal: Normal,
    is_dragging: bool,
    style_sheet: SliderStyleSheet,
    caches: MarkCaches,
    mod_range: ModulationRange | None = None,
    mod_range_2: ModulationRange | None = None,
    tick_marks: TickMarkGroup | None = None,
    text_marks: TextMarkGroup | None = None,
) -> Primitive:
    return _draw_slider(True, bounds, cursor, normal, is_dragging, style_sheet, caches,
                        mod_range, mod_range_2, tick_marks, text_marks)


def draw_h_slider(
    bounds: Rect,
    cursor: Point | None,
    normal: Normal,
    is_dragging: bool,
    style_sheet: SliderStyleSheet,
    caches: MarkCaches,
    mod_range: ModulationRange | None = None,
    mod_range_2: ModulationRange | None = None,
    tick_marks: TickMarkGroup | None = None,
    text_marks: TextMarkGroup | None = None,
) -> Primitive:
    return _draw_slider(False, bounds, cursor, normal, is_dragging, style_sheet, caches,
                        mod_range, mod_range_2, tick_marks, text_marks)
