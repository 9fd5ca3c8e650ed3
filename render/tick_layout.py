"""Turn tick-mark groups into quads and lines.

Linear layouts work on either axis: "along" is the track direction and
"cross" the perpendicular one. Horizontal tracks grow to the right;
vertical tracks grow upward, so non-inverted vertical marks use
``scale_inv``.
"""
from __future__ import annotations

from core.knob_angle_range import polar_offset
from core.math_utils import round_half_up
from core.normal import Normal
from core.tick_marks import Tier, TickMarkGroup
from render.cache import PrimitiveCache
from render.primitives import Cached, Group, Line, LineCap, Point, Primitive, Quad, Rect
from style.marks import (
    BothSides,
    Center,
    CenterSplit,
    LeftOrTop,
    RightOrBottom,
    TickCircle,
    TickLine,
    TickMarksStyle,
    TickPlacement,
    TickShape,
    shape_extent,
)


class _Track:
    __slots__ = ("vertical", "flip", "along_start", "along_len", "cross_start", "cross_len")

    def __init__(self, bounds: Rect, vertical: bool, inverse: bool) -> None:
        self.vertical = vertical
        self.flip = inverse != vertical
        if vertical:
            self.along_start, self.along_len = bounds.y, bounds.height
            self.cross_start, self.cross_len = bounds.x, bounds.width
        else:
            self.along_start, self.along_len = bounds.x, bounds.width
            self.cross_start, self.cross_len = bounds.y, bounds.height

    @property
    def cross_end(self) -> float:
        return self.cross_start + self.cross_len

    @property
    def cross_center(self) -> float:
        return self.cross_start + self.cross_len / 2.0

    def along(self, normal: Normal, thickness: float) -> float:
        start = self.along_start - thickness / 2.0
        if self.flip:
            return start + normal.scale_inv(self.along_len)
        return start + normal.scale(self.along_len)

    def quad(self, along: float, cross: float, thickness: float, extent: float) -> Rect:
        if self.vertical:
            return Rect(round_half_up(cross), round_half_up(along), extent, thickness)
        return Rect(round_half_up(along), round_half_up(cross), thickness, extent)


def _emit(
    out: list[Primitive],
    track: _Track,
    positions: list[Normal],
    cross: float,
    thickness: float,
    extent: float,
    color,
    radius: float = 0.0,
) -> None:
    if thickness <= 0.0 or extent <= 0.0:
        return
    for normal in positions:
        out.append(Quad(track.quad(track.along(normal, thickness), cross, thickness, extent),
                        color, border_radius=radius))


def _emit_shape(
    out: list[Primitive],
    track: _Track,
    positions: list[Normal],
    shape: TickShape,
    cross: float,
    extent: float | None = None,
) -> None:
    if isinstance(shape, TickLine):
        _emit(out, track, positions, cross, shape.width,
              shape.length if extent is None else extent, shape.color)
    elif isinstance(shape, TickCircle):
        diameter = shape.diameter if extent is None else extent
        _emit(out, track, positions, cross, diameter, diameter, shape.color, diameter / 2.0)


def _tiers(group: TickMarkGroup, style: TickMarksStyle):
    for tier in Tier:
        positions = group.tier(tier)
        shape = style.shape(tier)
        if positions is not None and shape is not None:
            yield positions, shape


def _start_aligned(out, track, group, style, cross) -> None:
    for positions, shape in _tiers(group, style):
        _emit_shape(out, track, positions, shape, cross)


def _end_aligned(out, track, group, style, cross) -> None:
    for positions, shape in _tiers(group, style):
        _emit_shape(out, track, positions, shape, cross - shape_extent(shape))


def _center_aligned(out, track, group, style, fill_length: bool) -> None:
    center = track.cross_center
    for positions, shape in _tiers(group, style):
        extent = shape_extent(shape)
        if fill_length:
            _emit_shape(out, track, positions, shape,
                        track.cross_start + extent, track.cross_len - extent * 2.0)
        else:
            _emit_shape(out, track, positions, shape, center - extent / 2.0)


def _center_split(out, track, group, style, fill_length: bool, gap: float) -> None:
    center = track.cross_center
    for positions, shape in _tiers(group, style):
        extent = shape_extent(shape)
        if isinstance(shape, TickCircle) and fill_length:
            first, second = track.cross_start, track.cross_end - extent
        elif fill_length:
            extent = (track.cross_len - gap) / 2.0
            first, second = track.cross_start, center + gap / 2.0
        else:
            first, second = center - extent - gap / 2.0, center + gap / 2.0
        _emit_shape(out, track, positions, shape, first, extent)
        _emit_shape(out, track, positions, shape, second, extent)


def layout_linear_tick_marks(
    bounds: Rect,
    group: TickMarkGroup,
    style: TickMarksStyle,
    placement: TickPlacement,
    inverse: bool,
    vertical: bool,
) -> Group:
    """Uncached layout for a straight track."""
    bounds = placement.offset.offset_rect(bounds)
    track = _Track(bounds, vertical, inverse)
    out: list[Primitive] = []

    if isinstance(placement, BothSides):
        if placement.inside:
            _start_aligned(out, track, group, style, track.cross_start)
            _end_aligned(out, track, group, style, track.cross_end)
        else:
            _end_aligned(out, track, group, style, track.cross_start)
            _start_aligned(out, track, group, style, track.cross_end)
    elif isinstance(placement, LeftOrTop):
        if placement.inside:
            _start_aligned(out, track, group, style, track.cross_start)
        else:
            _end_aligned(out, track, group, style, track.cross_start)
    elif isinstance(placement, RightOrBottom):
        if placement.inside:
            _end_aligned(out, track, group, style, track.cross_end)
        else:
            _start_aligned(out, track, group, style, track.cross_end)
    elif isinstance(placement, Center):
        _center_aligned(out, track, group, style, placement.fill_length)
    elif isinstance(placement, CenterSplit):
        _center_split(out, track, group, style, placement.fill_length, placement.gap)
    else:
        raise TypeError(f"Unknown tick mark placement: {placement!r}")

    return Group(tuple(out))


def draw_horizontal_tick_marks(
    bounds: Rect,
    group: TickMarkGroup,
    style: TickMarksStyle,
    placement: TickPlacement,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    return cache.cached_linear(
        bounds, group, style, placement, inverse,
        lambda: layout_linear_tick_marks(bounds, group, style, placement, inverse, vertical=False),
    )


def draw_vertical_tick_marks(
    bounds: Rect,
    group: TickMarkGroup,
    style: TickMarksStyle,
    placement: TickPlacement,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    return cache.cached_linear(
        bounds, group, style, placement, inverse,
        lambda: layout_linear_tick_marks(bounds, group, style, placement, inverse, vertical=True),
    )


# -- radial -------------------------------------------------------------------

def _radial_point(center: Point, radius: float, angle: float) -> Point:
    dx, dy = polar_offset(radius, angle)
    return Point(center.x + dx, center.y + dy)


def layout_radial_tick_marks(
    center: Point,
    radius: float,
    start_angle: float,
    angle_span: float,
    inside: bool,
    group: TickMarkGroup,
    style: TickMarksStyle,
    inverse: bool,
) -> Group:
    """Ticks around an arc; angles in knob convention (0 = down, clockwise)."""
    out: list[Primitive] = []
    for positions, shape in _tiers(group, style):
        angles = [
            start_angle + (n.scale_inv(angle_span) if inverse else n.scale(angle_span))
            for n in positions
        ]
        if isinstance(shape, TickLine):
            if shape.width <= 0.0 or shape.length <= 0.0:
                continue
            inner = radius - shape.length if inside else radius
            for angle in angles:
                out.append(Line(
                    _radial_point(center, inner, angle),
                    _radial_point(center, inner + shape.length, angle),
                    shape.width,
                    shape.color,
                    LineCap.BUTT,
                ))
        elif isinstance(shape, TickCircle):
            if shape.diameter <= 0.0:
                continue
            half = shape.diameter / 2.0
            ring = radius - half if inside else radius + half
            for angle in angles:
                p = _radial_point(center, ring, angle)
                out.append(Quad(
                    Rect(p.x - half, p.y - half, shape.diameter, shape.diameter),
                    shape.color,
                    border_radius=half,
                ))
    return Group(tuple(out))


def draw_radial_tick_marks(
    center: Point,
    radius: float,
    start_angle: float,
    angle_span: float,
    inside: bool,
    group: TickMarkGroup,
    style: TickMarksStyle,
    inverse: bool,
    cache: PrimitiveCache,
) -> Cached:
    return cache.cached_radial(
        center, radius, start_angle, angle_span, inside, group, style, inverse,
        lambda: layout_radial_tick_marks(
            center, radius, start_angle, angle_span, inside, group, style, inverse
        ),
    )
