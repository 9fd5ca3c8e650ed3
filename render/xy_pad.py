"""Draw XY pads: a square field with rails crossing at the handle."""
from __future__ import annotations
import math

from core.normal import Normal
from render.common import pick_appearance
from render.primitives import Group, Point, Primitive, Quad, Rect
from style.xy_pad import HandleCircle, HandleSquare, XYPadStyleSheet


def draw_xy_pad(
    bounds: Rect,
    cursor: Point | None,
    normal_x: Normal,
    normal_y: Normal,
    is_dragging: bool,
    style_sheet: XYPadStyleSheet,
) -> Primitive:
    """The pad is the largest square anchored at the top-left of ``bounds``.

    ``normal_y`` grows upward.
    """
    appearance = pick_appearance(style_sheet, bounds, cursor, is_dragging)

    size = math.floor(min(bounds.width, bounds.height))
    x = bounds.x
    y = bounds.y
    handle_x = math.floor(x + normal_x.scale(size))
    handle_y = math.floor(y + normal_y.scale_inv(size))
    half = math.floor(size / 2.0)

    back = Quad(Rect(x, y, size, size), appearance.back_color, appearance.border_radius,
                appearance.border_width, appearance.border_color)

    h_center_line = v_center_line = None
    if not appearance.center_line_color.is_transparent:
        line_width = appearance.center_line_width
        line_offset = math.floor(line_width / 2.0)
        h_center_line = Quad(Rect(x, y + half - line_offset, size, line_width),
                             appearance.center_line_color)
        v_center_line = Quad(Rect(x + half - line_offset, y, line_width, size),
                             appearance.center_line_color)

    h_rail = v_rail = None
    if appearance.rail_width != 0:
        rail_width = appearance.rail_width
        rail_offset = math.floor(rail_width / 2.0)
        h_rail = Quad(Rect(x, handle_y - rail_offset, size, rail_width), appearance.h_rail_color)
        v_rail = Quad(Rect(handle_x - rail_offset, y, rail_width, size), appearance.v_rail_color)

    handle = appearance.handle
    if isinstance(handle, HandleCircle):
        radius = handle.diameter / 2.0
        handle_quad = Quad(
            Rect(handle_x - radius, handle_y - radius, handle.diameter, handle.diameter),
            handle.color, radius, handle.border_width, handle.border_color,
        )
    elif isinstance(handle, HandleSquare):
        handle_offset = math.floor(handle.size / 2.0)
        handle_quad = Quad(
            Rect(handle_x - handle_offset, handle_y - handle_offset, handle.size, handle.size),
            handle.color, handle.border_radius, handle.border_width, handle.border_color,
        )
    else:
        raise TypeError(f"Unknown XY pad handle: {handle!r}")

    return Group.of(back, h_center_line, v_center_line, h_rail, v_rail, handle_quad)
