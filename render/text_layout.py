"""Turn text-mark groups into aligned labels."""
from __future__ import annotations

from core.knob_angle_range import polar_offset
from core.math_utils import round_half_up
from core.text_marks import TextMarkGroup
from render.cache import PrimitiveCache
from render.primitives import Cached, Group, HAlign, Point, Primitive, Rect, Text, VAlign
from style.marks import (
    Align,
    TextBothSides,
    TextCenter,
    TextLeftOrTop,
    TextMarksStyle,
    TextPlacement,
    TextRightOrBottom,
)


def _label(content: str, x: float, y: float, style: TextMarksStyle,
           h_align: HAlign, v_align: VAlign) -> Text:
    return Text(
        content=content,
        rect=Rect(round_half_up(x), round_half_up(y), style.bounds_width, style.bounds_height),
        size=style.text_size,
        color=style.color,
        font=style.font,
        h_align=h_align,
        v_align=v_align,
    )


def _horizontal_row(out, bounds: Rect, y: float, group: TextMarkGroup,
                    style: TextMarksStyle, inverse: bool, v_align: VAlign) -> None:
    for normal, content in group:
        offset = normal.scale_inv(bounds.width) if inverse else normal.scale(bounds.width)
        out.append(_label(content, bounds.x + offset, y, style, HAlign.CENTER, v_align))


def _vertical_column(out, bounds: Rect, x: float, group: TextMarkGroup,
                     style: TextMarksStyle, inverse: bool, h_align: HAlign) -> None:
    for normal, content in group:
        offset = normal.scale(bounds.height) if inverse else normal.scale_inv(bounds.height)
        out.append(_label(content, x, bounds.y + offset, style, h_align, VAlign.CENTER))


def layout_horizontal_text_marks(
    bounds: Rect,
    group: TextMarkGroup,
    style: TextMarksStyle,
    placement: TextPlacement,
    inverse: bool,
) -> Group:
    bounds = placement.offset.offset_rect(bounds)
    top = bounds.y
    bottom = bounds.y + bounds.height
    out: list[Primitive] = []

    if isinstance(placement, TextBothSides):
        if placement.inside:
            _horizontal_row(out, bounds, top, group, style, inverse, VAlign.TOP)
            _horizontal_row(out, bounds, bottom, group, style, inverse, VAlign.BOTTOM)
        else:
            _horizontal_row(out, bounds, top, group, style, inverse, VAlign.BOTTOM)
            _horizontal_row(out, bounds, bottom, group, style, inverse, VAlign.TOP)
    elif isinstance(placement, TextLeftOrTop):
        v_align = VAlign.TOP if placement.inside else VAlign.BOTTOM
        _horizontal_row(out, bounds, top, group, style, inverse, v_align)
    elif isinstance(placement, TextRightOrBottom):
        v_align = VAlign.BOTTOM if placement.inside else VAlign.TOP
        _horizontal_row(out, bounds, bottom, group, style, inverse, v_align)
    elif isinstance(placement, TextCenter):
        v_align = {Align.START: VAlign.TOP, Align.END: VAlign.BOTTOM,
                   Align.CENTER: VAlign.CENTER}[placement.align]
        _horizontal_row(out, bounds, bounds.center_y, group, style, inverse, v_align)
    else:
        raise TypeError(f"Unknown text mark placement: {placement!r}")

    return Group(tuple(out))


def layout_vertical_text_marks(
    bounds: Rect,
    group: TextMarkGroup,
    style: TextMarksStyle,
    placement: TextPlacement,
    inverse: bool,
) -> Group:
    bounds = placement.offset.offset_rect(bounds)
    left = bounds.x
    right = bounds.x + bounds.width
    out: list[Primitive] = []

    if isinstance(placement, TextBothSides):
        if placement.inside:
            _vertical_column(out, bounds, left, group, style, inverse, HAlign.LEFT)
            _vertical_column(out, bounds, right, group, style, inverse, HAlign.RIGHT)
        else:
            _vertical_column(out, bounds, left, group, style, inverse, HAlign.RIGHT)
            _vertical_column(out, bounds, right, group, style, inverse, HAlign.LEFT)
    elif isinstance(placement, TextLeftOrTop):
        h_align = HAlign.LEFT if placement.inside else HAlign.RIGHT
        _vertical_column(out, bounds, left, group, style, inverse, h_align)
    elif isinstance(placement, TextRightOrBottom):
        h_align = HAlign.RIGHT if placement.inside else HAlign.LEFT
        _vertical_column(out, bounds, right, group, style, inverse, h_align)
    elif isinstance(placement, TextCenter):
        h_align = {Align.START: HAlign.LEFT, Align.END: HAlign.RIGHT,
                   Align.CENTER: HAlign.CENTER}[placement.align]
        _vertical_column(out, bounds, bounds.center_x, group, style, inverse, h_align)
    else:
        raise TypeError(f"Unknown text mark placement: {placement!r}")

    return Group(tuple(out))


def draw_horizontal_text_marks(
    bounds: Rect,
    group: TextMarkGroup,
    style: TextMarksStyle,
    placement: TextPlacement,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    return cache.cached_linear(
        bounds, group, style, placement, inverse,
        lambda: layout_horizontal_text_marks(bounds, group, style, placement, inverse),
    )


def draw_vertical_text_marks(
    bounds: Rect,
    group: TextMarkGroup,
    style: TextMarksStyle,
    placement: TextPlacement,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    return cache.cached_linear(
        bounds, group, style, placement, inverse,
        lambda: layout_vertical_text_marks(bounds, group, style, placement, inverse),
    )


def layout_radial_text_marks(
    center: Point,
    radius: float,
    start_angle: float,
    angle_span: float,
    group: TextMarkGroup,
    style: TextMarksStyle,
    h_char_offset: float,
    inverse: bool,
) -> Group:
    """Labels around an arc; angles in knob convention (0 = down, clockwise).

    Labels left or right of the vertical axis are pushed outward by
    ``h_char_offset`` per character beyond the first.
    """
    out: list[Primitive] = []
    for normal, content in group:
        angle = start_angle + (
            normal.scale_inv(angle_span) if inverse else normal.scale(angle_span)
        )
        dx, dy = polar_offset(radius, angle)
        push = (len(content) - 1) * h_char_offset
        if dx < -0.001:
            dx -= push
        elif dx > 0.001:
            dx += push
        out.append(_label(content, center.x + dx, center.y + dy, style,
                          HAlign.CENTER, VAlign.CENTER))
    return Group(tuple(out))


def draw_radial_text_marks(
    center: Point,
    radius: float,
    start_angle: float,
    angle_span: float,
    group: TextMarkGroup,
    style: TextMarksStyle,
    h_char_offset: float,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    # Radial labels always sit on the ring itself, so ``inside`` is fixed.
    return cache.cached_radial(
        center, radius, start_angle, angle_span, False, group, (style, h_char_offset), inverse,
        lambda: layout_radial_text_marks(
            center, radius, start_angle, angle_span, group, style, h_char_offset, inverse
        ),
    )
