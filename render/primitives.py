"""Toolkit-neutral drawing vocabulary produced by the renderers.

Every primitive is an immutable, hashable record. ``None`` stands for the
empty primitive wherever a primitive is expected.
"""
from __future__ import annotations
import enum
import math
from dataclasses import dataclass
from typing import Iterable, Union

from core.color import Color
from core.math_utils import round_half_up


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def center(self) -> Point:
        return Point(self.center_x, self.center_y)

    def contains(self, point: Point | None) -> bool:
        if point is None:
            return False
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def rounded(self) -> Rect:
        return Rect(
            round_half_up(self.x), round_half_up(self.y),
            round_half_up(self.width), round_half_up(self.height),
        )

    def floored(self) -> Rect:
        return Rect(
            math.floor(self.x), math.floor(self.y),
            math.floor(self.width), math.floor(self.height),
        )


class HAlign(enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VAlign(enum.Enum):
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


class LineCap(enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


@dataclass(frozen=True)
class Quad:
    """Filled rectangle; ``border_radius = width / 2`` draws a circle."""

    rect: Rect
    fill: Color
    border_radius: float = 0.0
    border_width: float = 0.0
    border_color: Color = Color.TRANSPARENT


@dataclass(frozen=True)
class Line:
    a: Point
    b: Point
    width: float
    color: Color
    cap: LineCap = LineCap.BUTT


@dataclass(frozen=True)
class Arc:
    """Stroked arc; angles in canvas radians (0 = +x, clockwise, y down)."""

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    width: float
    color: Color
    cap: LineCap = LineCap.BUTT


@dataclass(frozen=True)
class QuadraticCurve:
    start: Point
    control: Point
    end: Point
    width: float
    color: Color


@dataclass(frozen=True)
class Text:
    """A label whose ``rect`` origin is the anchor named by the alignments."""

    content: str
    rect: Rect
    size: float
    color: Color
    font: str | None = None
    h_align: HAlign = HAlign.CENTER
    v_align: VAlign = VAlign.CENTER


@dataclass(frozen=True)
class Image:
    path: str
    rect: Rect


@dataclass(frozen=True)
class Group:
    children: tuple[Primitive, ...] = ()

    @classmethod
    def of(cls, *children: Primitive | None) -> Group:
        return cls(tuple(child for child in children if child is not None))

    @classmethod
    def from_iter(cls, children: Iterable[Primitive | None]) -> Group:
        return cls.of(*children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)


@dataclass(frozen=True, eq=False)
class Cached:
    """Shared handle around a primitive tree kept by a PrimitiveCache.

    Compared by identity so callers can tell a cache hit from a rebuild.
    """

    content: Primitive


Primitive = Union[Quad, Line, Arc, QuadraticCurve, Text, Image, Group, Cached]


def flatten(primitive: Primitive | None) -> list[Primitive]:
    """Leaf primitives of a tree, in paint order."""
    if primitive is None:
        return []
    if isinstance(primitive, Group):
        out: list[Primitive] = []
        for child in primitive.children:
            out.extend(flatten(child))
        return out
    if isinstance(primitive, Cached):
        return flatten(primitive.content)
    return [primitive]
