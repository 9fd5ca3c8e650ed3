"""Single-slot memoisation of tick/text mark primitive trees.

Each widget owns its own caches. A hit returns the very same
:class:`~render.primitives.Cached` object as the previous call; a miss
rebuilds, replaces the slot and returns a new handle.
"""
from __future__ import annotations
import struct
from typing import Any, Callable, Hashable

from render.primitives import Cached, Point, Primitive, Rect


def _float_bits(value: float) -> bytes:
    # Bitwise float identity: 0.0 and -0.0 differ, NaN equals itself.
    return struct.pack("<d", float(value))


def _rect_key(rect: Rect) -> bytes:
    return b"".join(_float_bits(v) for v in (rect.x, rect.y, rect.width, rect.height))


def _point_key(point: Point) -> bytes:
    return _float_bits(point.x) + _float_bits(point.y)


class PrimitiveCache:
    def __init__(self) -> None:
        self._key: tuple[Any, ...] | None = None
        self._cached: Cached | None = None
        self.rebuilds = 0

    def clear(self) -> None:
        self._key = None
        self._cached = None

    def _get_or_build(self, key: tuple[Any, ...], build: Callable[[], Primitive]) -> Cached:
        if self._cached is not None and self._key == key:
            return self._cached
        content = build()
        self._cached = Cached(content)
        self._key = key
        self.rebuilds += 1
        return self._cached

    def cached_linear(
        self,
        bounds: Rect,
        group: Any,
        style: Hashable,
        placement: Hashable,
        inverse: bool,
        build: Callable[[], Primitive],
    ) -> Cached:
        key = ("linear", _rect_key(bounds), group.hashed(), style, placement, bool(inverse))
        return self._get_or_build(key, build)

    def cached_radial(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        angle_span: float,
        inside: bool,
        group: Any,
        style: Hashable,
        inverse: bool,
        build: Callable[[], Primitive],
    ) -> Cached:
        key = (
            "radial",
            _point_key(center),
            _float_bits(radius),
            _float_bits(start_angle),
            _float_bits(angle_span),
            bool(inside),
            group.hashed(),
            style,
            bool(inverse),
        )
        return self._get_or_build(key, build)


class MarkCaches:
    """The tick-mark and text-mark caches one widget owns."""

    __slots__ = ("tick_marks", "text_marks")

    def __init__(self) -> None:
        self.tick_marks = PrimitiveCache()
        self.text_marks = PrimitiveCache()
