import math

import pytest
from PyQt6.QtGui import QColor, QImage, QPainter
from PyQt6.QtWidgets import QApplication

from core.color import Color
from render.primitives import Arc, Cached, Group, HAlign, Point, Quad, Rect, Text, VAlign
from ui.painter import paint_primitive, qt_arc_angles, text_box, to_qcolor


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


def _paint(primitive, size=40):
    image = QImage(size, size, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))
    painter = QPainter(image)
    try:
        paint_primitive(painter, primitive)
    finally:
        painter.end()
    return image


def test_to_qcolor():
    assert to_qcolor(Color.from_hex("#ff0000")).red() == 255
    assert to_qcolor(Color.TRANSPARENT).alpha() == 0


def test_qt_arc_angles_flip_direction():
    start, span = qt_arc_angles(0.0, math.pi / 2)
    assert start == 0.0
    assert span == pytest.approx(-90.0)


@pytest.mark.parametrize("h, v, expected", [
    (HAlign.LEFT, VAlign.TOP, Rect(50, 20, 30, 14)),
    (HAlign.CENTER, VAlign.BOTTOM, Rect(35, 6, 30, 14)),
    (HAlign.RIGHT, VAlign.CENTER, Rect(20, 13, 30, 14)),
])
def test_text_box_anchor(h, v, expected):
    text = Text("x", Rect(50, 20, 30, 14), 12, Color.BLACK, h_align=h, v_align=v)
    assert text_box(text) == expected


def test_quad_fills_pixels(app):
    image = _paint(Group.of(Quad(Rect(0, 0, 40, 40), Color.WHITE)))
    assert image.pixelColor(20, 20) == QColor(255, 255, 255, 255)


def test_cached_content_is_painted(app):
    image = _paint(Cached(Quad(Rect(10, 10, 10, 10), Color.from_hex("#00ff00"))))
    assert image.pixelColor(15, 15).green() == 255
    assert image.pixelColor(2, 2).alpha() == 0


def test_other_primitives_paint(app):
    image = _paint(Group.of(
        Arc(Point(20, 20), 10, 0.0, math.pi, 2.0, Color.BLACK),
        Text("A", Rect(20, 20, 20, 14), 10, Color.BLACK),
    ))
    assert not image.isNull()


def test_nothing_to_paint(app):
    assert _paint(None).pixelColor(5, 5).alpha() == 0


def test_unknown_primitive_raises(app):
    with pytest.raises(TypeError):
        _paint(object())
