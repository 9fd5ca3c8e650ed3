from __future__ import annotations
from dataclasses import dataclass, field

from core.normal import Normal


@dataclass
class ModulationRange:
    """A pair of Normals marking the automation span shown on a widget."""

    start: Normal = field(default_factory=lambda: Normal.MIN)
    end: Normal = field(default_factory=lambda: Normal.MIN)
    filled_visible: bool = True
    visible: bool = True

    def __post_init__(self) -> None:
        self.start = Normal.coerce(self.start)
        self.end = Normal.coerce(self.end)

    @classmethod
    def new(cls, start: Normal | float, end: Normal | float) -> ModulationRange:
        return cls(Normal.coerce(start), Normal.coerce(end))

    def span(self) -> tuple[Normal, Normal, bool]:
        """Return ``(low, high, inverted)``; ``inverted`` when end < start."""
        if self.end < self.start:
            return self.end, self.start, True
        return self.start, self.end, False

    @property
    def is_empty(self) -> bool:
        return self.start == self.end
