"""Appearance and style sheet for ramp (curve shape) controls."""
from __future__ import annotations
from dataclasses import dataclass, replace

from core.color import Color
from style import default_colors


@dataclass(frozen=True)
class RampAppearance:
    back_color: Color = default_colors.LIGHT_BACK
    back_border_width: float = 1.0
    back_border_color: Color = default_colors.BORDER
    line_width: float = 2.0
    line_center_color: Color = default_colors.BORDER
    line_up_color: Color = default_colors.BORDER
    line_down_color: Color = default_colors.BORDER


class RampStyleSheet:
    def active(self) -> RampAppearance:
        return RampAppearance()

    def hovered(self) -> RampAppearance:
        return replace(self.active(), back_color=default_colors.RAMP_BACK_HOVER)

    def dragging(self) -> RampAppearance:
        return self.hovered()
