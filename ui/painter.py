"""Paint primitive trees with QPainter."""
from __future__ import annotations
import math

from PyQt6.QtCore import Qt as QtCore_Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen, QPixmap

from core.color import Color
from render.primitives import (
    Arc,
    Cached,
    Group,
    HAlign,
    Image,
    Line,
    LineCap,
    Primitive,
    Quad,
    QuadraticCurve,
    Rect,
    Text,
    VAlign,
)

_CAPS = {
    LineCap.BUTT: QtCore_Qt.PenCapStyle.FlatCap,
    LineCap.ROUND: QtCore_Qt.PenCapStyle.RoundCap,
    LineCap.SQUARE: QtCore_Qt.PenCapStyle.SquareCap,
}

_H_FLAGS = {
    HAlign.LEFT: QtCore_Qt.AlignmentFlag.AlignLeft,
    HAlign.CENTER: QtCore_Qt.AlignmentFlag.AlignHCenter,
    HAlign.RIGHT: QtCore_Qt.AlignmentFlag.AlignRight,
}

_V_FLAGS = {
    VAlign.TOP: QtCore_Qt.AlignmentFlag.AlignTop,
    VAlign.CENTER: QtCore_Qt.AlignmentFlag.AlignVCenter,
    VAlign.BOTTOM: QtCore_Qt.AlignmentFlag.AlignBottom,
}

_pixmaps: dict[str, QPixmap] = {}


def to_qcolor(color: Color) -> QColor:
    return QColor.fromRgbF(color.r, color.g, color.b, color.a)


def _pen(color: Color, width: float, cap: LineCap = LineCap.BUTT) -> QPen:
    pen = QPen(to_qcolor(color), width)
    pen.setCapStyle(_CAPS[cap])
    return pen


def qt_arc_angles(start_angle: float, end_angle: float) -> tuple[float, float]:
    """Canvas radians (clockwise, y down) to Qt degrees (counter-clockwise)."""
    return -math.degrees(start_angle), -math.degrees(end_angle - start_angle)


def text_box(text: Text) -> Rect:
    """The layout box whose alignment anchor sits at ``text.rect``'s origin."""
    x, y, w, h = text.rect.x, text.rect.y, text.rect.width, text.rect.height
    if text.h_align is HAlign.CENTER:
        x -= w / 2.0
    elif text.h_align is HAlign.RIGHT:
        x -= w
    if text.v_align is VAlign.CENTER:
        y -= h / 2.0
    elif text.v_align is VAlign.BOTTOM:
        y -= h
    return Rect(x, y, w, h)


def _pixmap(path: str) -> QPixmap:
    pixmap = _pixmaps.get(path)
    if pixmap is None:
        pixmap = QPixmap(path)
        _pixmaps[path] = pixmap
    return pixmap


def _paint_quad(painter: QPainter, quad: Quad) -> None:
    r = quad.rect
    rect = QRectF(r.x, r.y, r.width, r.height)
    radius = quad.border_radius
    if quad.border_width > 0 and not quad.border_color.is_transparent:
        # Borders are drawn inside the rect.
        inset = quad.border_width / 2.0
        rect = rect.adjusted(inset, inset, -inset, -inset)
        radius = max(0.0, radius - inset)
        painter.setPen(_pen(quad.border_color, quad.border_width))
    else:
        painter.setPen(QtCore_Qt.PenStyle.NoPen)
    if quad.fill.is_transparent:
        painter.setBrush(QtCore_Qt.BrushStyle.NoBrush)
    else:
        painter.setBrush(to_qcolor(quad.fill))
    if radius > 0:
        painter.drawRoundedRect(rect, radius, radius)
    else:
        painter.drawRect(rect)


def _paint_text(painter: QPainter, text: Text) -> None:
    font = QFont(text.font) if text.font else QFont(painter.font())
    font.setPixelSize(max(1, int(round(text.size))))
    painter.setFont(font)
    painter.setPen(to_qcolor(text.color))
    box = text_box(text)
    painter.drawText(
        QRectF(box.x, box.y, box.width, box.height),
        int(_H_FLAGS[text.h_align] | _V_FLAGS[text.v_align]),
        text.content,
    )


def paint_primitive(painter: QPainter, primitive: Primitive | None) -> None:
    """Paint ``primitive`` and its children in order."""
    if primitive is None:
        return
    if isinstance(primitive, Group):
        for child in primitive.children:
            paint_primitive(painter, child)
    elif isinstance(primitive, Cached):
        paint_primitive(painter, primitive.content)
    elif isinstance(primitive, Quad):
        _paint_quad(painter, primitive)
    elif isinstance(primitive, Line):
        painter.setPen(_pen(primitive.color, primitive.width, primitive.cap))
        painter.drawLine(QPointF(primitive.a.x, primitive.a.y), QPointF(primitive.b.x, primitive.b.y))
    elif isinstance(primitive, Arc):
        c, r = primitive.center, primitive.radius
        start, span = qt_arc_angles(primitive.start_angle, primitive.end_angle)
        painter.setPen(_pen(primitive.color, primitive.width, primitive.cap))
        painter.setBrush(QtCore_Qt.BrushStyle.NoBrush)
        painter.drawArc(QRectF(c.x - r, c.y - r, 2 * r, 2 * r), int(round(start * 16)), int(round(span * 16)))
    elif isinstance(primitive, QuadraticCurve):
        path = QPainterPath(QPointF(primitive.start.x, primitive.start.y))
        path.quadTo(
            QPointF(primitive.control.x, primitive.control.y),
            QPointF(primitive.end.x, primitive.end.y),
        )
        painter.strokePath(path, _pen(primitive.color, primitive.width, LineCap.ROUND))
    elif isinstance(primitive, Text):
        _paint_text(painter, primitive)
    elif isinstance(primitive, Image):
        r = primitive.rect
        pixmap = _pixmap(primitive.path)
        painter.drawPixmap(QRectF(r.x, r.y, r.width, r.height), pixmap, QRectF(pixmap.rect()))
    else:
        raise TypeError(f"Cannot paint {primitive!r}")
