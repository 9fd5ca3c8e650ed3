"""Styles and placements for tick marks and text marks."""
from __future__ import annotations
import enum
from dataclasses import dataclass, field
from typing import Union

from core.color import Color
from core.offset import Offset
from core.tick_marks import Tier
from style import default_colors


# -- tick marks --------------------------------------------------------------

@dataclass(frozen=True)
class TickLine:
    length: float
    width: float
    color: Color


@dataclass(frozen=True)
class TickCircle:
    diameter: float
    color: Color


TickShape = Union[TickLine, TickCircle, None]


def shape_extent(shape: TickShape) -> float:
    """Length of a shape along the axis perpendicular to the track."""
    if isinstance(shape, TickLine):
        return shape.length
    if isinstance(shape, TickCircle):
        return shape.diameter
    return 0.0


@dataclass(frozen=True)
class TickMarksStyle:
    tier_1: TickShape = TickLine(4.0, 2.0, default_colors.TICK_TIER_1)
    tier_2: TickShape = TickLine(3.0, 2.0, default_colors.TICK_TIER_2)
    tier_3: TickShape = TickLine(2.0, 1.0, default_colors.TICK_TIER_3)

    def shape(self, tier: Tier) -> TickShape:
        return (self.tier_1, self.tier_2, self.tier_3)[int(tier) - 1]

    def max_extent(self) -> float:
        return max(shape_extent(self.tier_1), shape_extent(self.tier_2), shape_extent(self.tier_3))


@dataclass(frozen=True)
class BothSides:
    offset: Offset = Offset.ZERO
    inside: bool = False


@dataclass(frozen=True)
class LeftOrTop:
    offset: Offset = Offset.ZERO
    inside: bool = False


@dataclass(frozen=True)
class RightOrBottom:
    offset: Offset = Offset.ZERO
    inside: bool = False


@dataclass(frozen=True)
class Center:
    offset: Offset = Offset.ZERO
    fill_length: bool = False


@dataclass(frozen=True)
class CenterSplit:
    offset: Offset = Offset.ZERO
    fill_length: bool = False
    gap: float = 0.0


TickPlacement = Union[BothSides, LeftOrTop, RightOrBottom, Center, CenterSplit]
DEFAULT_TICK_PLACEMENT = BothSides()


# -- text marks --------------------------------------------------------------

class Align(enum.Enum):
    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class TextMarksStyle:
    color: Color = default_colors.TEXT_MARK
    text_size: int = 12
    font: str | None = None
    bounds_width: int = 30
    bounds_height: int = 14


@dataclass(frozen=True)
class TextBothSides:
    inside: bool = False
    offset: Offset = Offset.ZERO


@dataclass(frozen=True)
class TextLeftOrTop:
    inside: bool = False
    offset: Offset = Offset.ZERO


@dataclass(frozen=True)
class TextRightOrBottom:
    inside: bool = False
    offset: Offset = Offset.ZERO


@dataclass(frozen=True)
class TextCenter:
    align: Align = Align.CENTER
    offset: Offset = Offset.ZERO


TextPlacement = Union[TextBothSides, TextLeftOrTop, TextRightOrBottom, TextCenter]
DEFAULT_TEXT_PLACEMENT = TextLeftOrTop()


# -- widget-level wrappers ----------------------------------------------------

@dataclass(frozen=True)
class LinearTickMarks:
    """Tick style plus where the ticks sit relative to a slider or meter."""

    style: TickMarksStyle = field(default_factory=TickMarksStyle)
    placement: TickPlacement = DEFAULT_TICK_PLACEMENT


@dataclass(frozen=True)
class LinearTextMarks:
    style: TextMarksStyle = field(default_factory=TextMarksStyle)
    placement: TextPlacement = DEFAULT_TEXT_PLACEMENT
