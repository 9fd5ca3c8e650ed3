import math

from core.text_marks import TextMarkGroup
from render.cache import PrimitiveCache
from render.primitives import HAlign, Point, Rect, VAlign
from render.text_layout import (
    draw_radial_text_marks,
    layout_horizontal_text_marks,
    layout_radial_text_marks,
    layout_vertical_text_marks,
)
from style.marks import TextBothSides, TextCenter, TextLeftOrTop, TextMarksStyle, TextRightOrBottom

STYLE = TextMarksStyle()


def test_horizontal_labels_sit_above_the_track():
    group = TextMarkGroup.min_max("0", "10")
    out = layout_horizontal_text_marks(Rect(0, 20, 100, 10), group, STYLE, TextLeftOrTop(), False)
    assert [(t.content, t.rect.x, t.rect.y) for t in out] == [("0", 0, 20), ("10", 100, 20)]
    assert all(t.v_align is VAlign.BOTTOM and t.h_align is HAlign.CENTER for t in out)


def test_horizontal_right_or_bottom():
    group = TextMarkGroup.center("C")
    out = layout_horizontal_text_marks(Rect(0, 20, 100, 10), group, STYLE, TextRightOrBottom(), False)
    label = out.children[0]
    assert (label.rect.x, label.rect.y, label.v_align) == (50, 30, VAlign.TOP)


def test_vertical_labels_grow_upward():
    group = TextMarkGroup.from_normalized([(0.0, "-12"), (1.0, "+12")])
    out = layout_vertical_text_marks(Rect(10, 0, 20, 100), group, STYLE, TextLeftOrTop(), False)
    by_label = {t.content: t for t in out}
    assert by_label["-12"].rect.y == 100
    assert by_label["+12"].rect.y == 0
    assert by_label["-12"].h_align is HAlign.RIGHT


def test_vertical_both_sides_inside():
    group = TextMarkGroup.center("0")
    out = layout_vertical_text_marks(Rect(10, 0, 20, 100), group, STYLE, TextBothSides(inside=True), False)
    assert [(t.rect.x, t.h_align) for t in out] == [(10, HAlign.LEFT), (30, HAlign.RIGHT)]


def test_center_placement_aligns_on_midline():
    group = TextMarkGroup.center("mid")
    out = layout_horizontal_text_marks(Rect(0, 0, 100, 40), group, STYLE, TextCenter(), False)
    assert out.children[0].rect.y == 20
    assert out.children[0].v_align is VAlign.CENTER


def test_label_box_comes_from_style():
    style = TextMarksStyle(text_size=9, bounds_width=40, bounds_height=12)
    out = layout_horizontal_text_marks(Rect(0, 0, 100, 10), TextMarkGroup.center("x"), style,
                                       TextLeftOrTop(), False)
    label = out.children[0]
    assert (label.rect.width, label.rect.height, label.size) == (40, 12, 9)


def test_radial_long_labels_are_pushed_outward():
    group = TextMarkGroup.from_normalized([(0.0, "1"), (0.0, "1000")])
    # start at a quarter turn so both labels sit on the left of the dial
    out = layout_radial_text_marks(Point(100, 100), 30.0, math.pi / 2, math.pi, group, STYLE, 3.0, False)
    short, long = out.children
    assert short.rect.x == 70
    assert long.rect.x == 61


def test_radial_bottom_label_is_not_pushed():
    group = TextMarkGroup.from_normalized([(0.0, "1000")])
    out = layout_radial_text_marks(Point(100, 100), 30.0, 0.0, math.pi, group, STYLE, 3.0, False)
    assert (out.children[0].rect.x, out.children[0].rect.y) == (100, 130)


def test_radial_text_cache_tracks_char_offset():
    cache = PrimitiveCache()
    group = TextMarkGroup.center("0")
    a = draw_radial_text_marks(Point(0, 0), 10.0, 0.0, math.pi, group, STYLE, 3.0, False, cache)
    b = draw_radial_text_marks(Point(0, 0), 10.0, 0.0, math.pi, group, STYLE, 3.0, False, cache)
    c = draw_radial_text_marks(Point(0, 0), 10.0, 0.0, math.pi, group, STYLE, 4.0, False, cache)
    assert a is b
    assert c is not b
    assert cache.rebuilds == 2
