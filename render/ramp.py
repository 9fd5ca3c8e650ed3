"""Draw ramps: a quadratic curve whose bend follows the value."""
from __future__ import annotations
import enum

from core.color import Color
from core.normal import Normal
from render.common import pick_appearance
from render.primitives import Group, Line, Point, Primitive, Quad, QuadraticCurve, Rect
from style.ramp import RampAppearance, RampStyleSheet


class RampDirection(enum.Enum):
    UP = "up"
    DOWN = "down"


def ramp_curve(
    bounds: Rect, normal: Normal, direction: RampDirection, appearance: RampAppearance,
) -> Line | QuadraticCurve:
    """The curve inside ``bounds`` (already floored), in absolute coordinates.

    Below 0.449 the curve bows one way and takes the down colour; above
    0.501 it bows the other way in the up colour; in between it is a
    straight line in the centre colour.
    """
    border = appearance.back_border_width
    range_width = bounds.width - 2.0 * border
    range_height = bounds.height - 2.0 * border
    origin_x = bounds.x + border
    origin_y = bounds.y + border + range_height
    n = normal.value

    def at(dx: float, dy: float) -> Point:
        return Point(origin_x + dx, origin_y + dy)

    def curve(start: Point, control: Point, end: Point, color: Color) -> QuadraticCurve:
        return QuadraticCurve(start, control, end, appearance.line_width, color)

    if direction is RampDirection.UP:
        if n < 0.449:
            return curve(at(0.0, 0.0), at(range_width * (1.0 - 2.0 * n), 0.0),
                         at(range_width, -range_height), appearance.line_down_color)
        if n > 0.501:
            return curve(at(range_width, -range_height),
                         at(range_width * (1.0 - 2.0 * (n - 0.5)), -range_height),
                         at(0.0, 0.0), appearance.line_up_color)
        return Line(at(0.0, 0.0), at(range_width, -range_height),
                    appearance.line_width, appearance.line_center_color)

    if n < 0.449:
        return curve(at(0.0, -range_height), at(range_width * 2.0 * n, 0.0),
                     at(range_width, 0.0), appearance.line_down_color)
    if n > 0.501:
        return curve(at(range_width, 0.0), at(range_width * 2.0 * (n - 0.5), -range_height),
                     at(0.0, -range_height), appearance.line_up_color)
    return Line(at(0.0, -range_height), at(range_width, 0.0),
                appearance.line_width, appearance.line_center_color)


def draw_ramp(
    bounds: Rect,
    cursor: Point | None,
    normal: Normal,
    direction: RampDirection,
    is_dragging: bool,
    style_sheet: RampStyleSheet,
) -> Primitive:
    appearance = pick_appearance(style_sheet, bounds, cursor, is_dragging)
    bounds = bounds.floored()
    back = Quad(bounds, appearance.back_color, 0.0,
                appearance.back_border_width, appearance.back_border_color)
    return Group.of(back, ramp_curve(bounds, normal, direction, appearance))
