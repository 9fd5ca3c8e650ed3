"""Appearance and style sheet for two-dimensional XY pads."""
from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Union

from core.color import Color
from style import default_colors


@dataclass(frozen=True)
class HandleCircle:
    color: Color = default_colors.LIGHT_BACK
    diameter: float = 11.0
    border_width: float = 2.0
    border_color: Color = default_colors.BORDER


@dataclass(frozen=True)
class HandleSquare:
    color: Color = default_colors.LIGHT_BACK
    size: float = 10.0
    border_width: float = 2.0
    border_radius: float = 0.0
    border_color: Color = default_colors.BORDER


HandleShape = Union[HandleCircle, HandleSquare]


@dataclass(frozen=True)
class XYPadAppearance:
    rail_width: float = 2.0
    h_rail_color: Color = default_colors.XY_PAD_RAIL
    v_rail_color: Color = default_colors.XY_PAD_RAIL
    handle: HandleShape = field(default_factory=HandleCircle)
    back_color: Color = default_colors.LIGHT_BACK
    border_width: float = 1.0
    border_radius: float = 0.0
    border_color: Color = default_colors.BORDER
    center_line_width: float = 1.0
    center_line_color: Color = default_colors.XY_PAD_CENTER_LINE


class XYPadStyleSheet:
    def active(self) -> XYPadAppearance:
        return XYPadAppearance()

    def hovered(self) -> XYPadAppearance:
        return replace(self.active(), handle=HandleCircle(color=default_colors.LIGHT_BACK_HOVER))

    def dragging(self) -> XYPadAppearance:
        return replace(
            self.active(),
            handle=HandleCircle(color=default_colors.LIGHT_BACK_DRAG, diameter=9.0),
        )
