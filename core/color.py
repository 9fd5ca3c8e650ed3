from __future__ import annotations
from dataclasses import dataclass, replace
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """Linear RGBA colour with float channels in ``[0.0, 1.0]``."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    TRANSPARENT: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int, a: float = 1.0) -> Color:
        return cls(r / 255.0, g / 255.0, b / 255.0, a)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``#rrggbb`` or ``#rrggbbaa``."""
        digits = value.lstrip("#")
        if len(digits) not in (6, 8):
            raise ValueError(f"Invalid hex colour: {value!r}")
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return cls.from_rgb8(r, g, b, a)

    @classmethod
    def grey(cls, level: float, a: float = 1.0) -> Color:
        return cls(level, level, level, a)

    def with_alpha(self, a: float) -> Color:
        return replace(self, a=a)

    @property
    def is_transparent(self) -> bool:
        return self.a == 0.0

    def to_rgba8(self) -> tuple[int, int, int, int]:
        return tuple(round(c * 255) for c in (self.r, self.g, self.b, self.a))  # type: ignore[return-value]

    def to_hex(self) -> str:
        r, g, b, _ = self.to_rgba8()
        return f"#{r:02x}{g:02x}{b:02x}"


Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
