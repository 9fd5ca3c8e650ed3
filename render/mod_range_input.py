"""Draw the modulation-range input dot."""
from __future__ import annotations

from render.common import pick_appearance
from render.primitives import Point, Primitive, Quad, Rect
from style.mod_range_input import CircleStyle, Invisible, ModRangeInputStyleSheet, SquareStyle


def draw_mod_range_input(
    bounds: Rect,
    cursor: Point | None,
    is_dragging: bool,
    style_sheet: ModRangeInputStyleSheet,
) -> Primitive | None:
    """A square dot sized by the floored width of ``bounds``; ``None`` when invisible."""
    appearance = pick_appearance(style_sheet, bounds, cursor, is_dragging)
    bounds = bounds.floored()
    dot = Rect(bounds.x, bounds.y, bounds.width, bounds.width)

    if isinstance(appearance, CircleStyle):
        return Quad(dot, appearance.color, bounds.width / 2.0,
                    appearance.border_width, appearance.border_color)
    if isinstance(appearance, SquareStyle):
        return Quad(dot, appearance.color, appearance.border_radius,
                    appearance.border_width, appearance.border_color)
    if isinstance(appearance, Invisible):
        return None
    raise TypeError(f"Unknown mod range input appearance: {appearance!r}")
