"""Helpers shared by the widget draws."""
from __future__ import annotations
from typing import Any

from core.text_marks import TextMarkGroup
from core.tick_marks import TickMarkGroup
from render.cache import MarkCaches
from render.primitives import Cached, Point, Rect
from render.text_layout import draw_horizontal_text_marks, draw_vertical_text_marks
from render.tick_layout import draw_horizontal_tick_marks, draw_vertical_tick_marks
from style.marks import LinearTextMarks, LinearTickMarks


def pick_appearance(style_sheet: Any, bounds: Rect, cursor: Point | None, is_dragging: bool) -> Any:
    if is_dragging:
        return style_sheet.dragging()
    if bounds.contains(cursor):
        return style_sheet.hovered()
    return style_sheet.active()


def linear_marks(
    bounds: Rect,
    vertical: bool,
    tick_marks: TickMarkGroup | None,
    tick_style: LinearTickMarks | None,
    text_marks: TextMarkGroup | None,
    text_style: LinearTextMarks | None,
    caches: MarkCaches,
    inverse: bool = False,
) -> tuple[Cached | None, Cached | None]:
    """Cached tick and text primitives, or ``None`` where a group or style is missing."""
    ticks = None
    if tick_marks is not None and tick_style is not None:
        draw = draw_vertical_tick_marks if vertical else draw_horizontal_tick_marks
        ticks = draw(bounds, tick_marks, tick_style.style, tick_style.placement,
                     inverse, caches.tick_marks)
    text = None
    if text_marks is not None and text_style is not None:
        draw = draw_vertical_text_marks if vertical else draw_horizontal_text_marks
        text = draw(bounds, text_marks, text_style.style, text_style.placement,
                    inverse, caches.text_marks)
    return ticks, text
