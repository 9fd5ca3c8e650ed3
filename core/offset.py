from __future__ import annotations
import dataclasses
from dataclasses import dataclass
from typing import ClassVar, TypeVar

_R = TypeVar("_R")


@dataclass(frozen=True)
class Offset:
    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Offset]

    def offset_rect(self, rect: _R) -> _R:
        """Return a copy of ``rect`` moved by this offset; size is kept."""
        return dataclasses.replace(rect, x=rect.x + self.x, y=rect.y + self.y)

    @property
    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


Offset.ZERO = Offset(0.0, 0.0)
