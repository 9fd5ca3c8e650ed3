"""Looks for the small dot that drags a modulation range."""
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Union

from core.color import Color
from style import default_colors


@dataclass(frozen=True)
class CircleStyle:
    color: Color = default_colors.LIGHT_BACK
    border_width: float = 1.0
    border_color: Color = default_colors.BORDER


@dataclass(frozen=True)
class SquareStyle:
    color: Color = default_colors.LIGHT_BACK
    border_width: float = 1.0
    border_radius: float = 0.0
    border_color: Color = default_colors.BORDER


@dataclass(frozen=True)
class Invisible:
    pass


ModRangeInputAppearance = Union[CircleStyle, SquareStyle, Invisible]


class ModRangeInputStyleSheet:
    def active(self) -> ModRangeInputAppearance:
        return CircleStyle()

    def hovered(self) -> ModRangeInputAppearance:
        appearance = self.active()
        if isinstance(appearance, CircleStyle):
            return replace(appearance, color=default_colors.KNOB_BACK_HOVER)
        return appearance

    def dragging(self) -> ModRangeInputAppearance:
        return self.hovered()


class InvisibleModRangeInputStyleSheet(ModRangeInputStyleSheet):
    """Keeps the input interactive but draws nothing, e.g. over a knob."""

    def active(self) -> ModRangeInputAppearance:
        return Invisible()
