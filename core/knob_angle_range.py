"""The sweep a knob rotates through.

Knob angles are measured in radians clockwise from straight down, so the
default 30 to 330 degree range leaves a gap at the bottom and points up at
its midpoint. Canvas angles (used by arcs) are measured from +x, clockwise
on a y-down surface.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

from core.math_utils import DEG_TO_RAD, HALF_PI, THREE_HALVES_PI, TWO_PI
from core.normal import Normal

DEFAULT_ANGLE_MIN = 30.0 * DEG_TO_RAD
DEFAULT_ANGLE_MAX = (360.0 - 30.0) * DEG_TO_RAD


def _wrap_into_turn(angle: float) -> float:
    if not 0.0 <= angle < TWO_PI:
        return 0.0
    return angle


@dataclass(frozen=True)
class KnobAngleRange:
    min: float = DEFAULT_ANGLE_MIN
    max: float = DEFAULT_ANGLE_MAX

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _wrap_into_turn(float(self.min)))
        object.__setattr__(self, "max", _wrap_into_turn(float(self.max)))
        if self.min > self.max:
            raise ValueError(
                f"KnobAngleRange min ({self.min}) must not be greater than max ({self.max})"
            )

    @classmethod
    def from_deg(cls, min_deg: float, max_deg: float) -> KnobAngleRange:
        return cls.from_rad(min_deg * DEG_TO_RAD, max_deg * DEG_TO_RAD)

    @classmethod
    def from_rad(cls, min_rad: float, max_rad: float) -> KnobAngleRange:
        return cls(min_rad, max_rad)

    @property
    def span(self) -> float:
        return self.max - self.min

    def angle_at(self, normal: Normal | float) -> float:
        """Knob angle (0 = down, clockwise) for ``normal``."""
        return self.min + Normal.coerce(normal).scale(self.span)

    def canvas_start(self) -> float:
        """Canvas angle of the minimum position, wrapped into one turn."""
        if self.min >= THREE_HALVES_PI:
            return self.min - THREE_HALVES_PI
        return self.min + HALF_PI

    def canvas_angle_at(self, normal: Normal | float) -> float:
        return self.canvas_start() + Normal.coerce(normal).scale(self.span)


def polar_offset(radius: float, knob_angle: float) -> tuple[float, float]:
    """Offset from a knob centre to the point ``radius`` away at ``knob_angle``.

    Angles within 0.001 of zero snap to straight down so marks at the
    bottom of the dial do not jitter.
    """
    if -0.001 < knob_angle < 0.001:
        return 0.0, radius
    return -radius * math.sin(knob_angle), radius * math.cos(knob_angle)
