"""Unit scalar shared by every widget and renderer."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import ClassVar


class NormalOutOfRange(ValueError):
    def __init__(self, value: float) -> None:
        super().__init__(f"{value} out of Normal range (0.0..=1.0)")
        self.value = value


def _clip(value: float) -> float:
    value = float(value)
    if math.isnan(value) or value <= 0.0:
        return 0.0
    if value >= 1.0:
        return 1.0
    return value


@dataclass(frozen=True, order=True)
class Normal:
    """A value clamped to ``[0.0, 1.0]``.

    Construction clamps (``NaN`` becomes 0.0), so every instance is in range
    and equality can compare the stored float directly. Normals are
    immutable; holders such as :class:`core.param.Param` rebind them.
    """

    value: float = 0.0

    MIN: ClassVar[Normal]
    CENTER: ClassVar[Normal]
    MAX: ClassVar[Normal]

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _clip(self.value))

    @classmethod
    def checked(cls, value: float) -> Normal:
        """Like the constructor, but raise instead of clamping."""
        if not 0.0 <= value <= 1.0:
            raise NormalOutOfRange(value)
        return cls(value)

    @classmethod
    def coerce(cls, value: Normal | float) -> Normal:
        if isinstance(value, Normal):
            return value
        return cls(value)

    @property
    def inverse(self) -> float:
        return 1.0 - self.value

    def scale(self, scalar: float) -> float:
        return self.value * scalar

    def scale_inv(self, scalar: float) -> float:
        return (1.0 - self.value) * scalar

    def __float__(self) -> float:
        return self.value


Normal.MIN = Normal(0.0)
Normal.CENTER = Normal(0.5)
Normal.MAX = Normal(1.0)
