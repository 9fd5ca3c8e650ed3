"""Mutable state shared between meter widgets and whatever feeds them."""
from __future__ import annotations
from dataclasses import dataclass, field

from core.normal import Normal


@dataclass(frozen=True)
class TierPositions:
    """Where the DB meter changes colour.

    ``med`` is only consulted when ``high`` is set.
    """

    clipping: Normal = Normal.MAX
    med: Normal | None = None
    high: Normal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "clipping", Normal.coerce(self.clipping))
        if self.med is not None:
            object.__setattr__(self, "med", Normal.coerce(self.med))
        if self.high is not None:
            object.__setattr__(self, "high", Normal.coerce(self.high))


@dataclass
class BarState:
    normal: Normal = Normal.MIN
    peak: Normal | None = None


@dataclass
class DBMeterState:
    left: BarState = field(default_factory=BarState)
    right: BarState | None = None
    tier_positions: TierPositions = field(default_factory=TierPositions)

    @classmethod
    def stereo(cls, tier_positions: TierPositions | None = None) -> DBMeterState:
        return cls(BarState(), BarState(), tier_positions or TierPositions())

    def set_left(self, normal: Normal | float) -> None:
        self.left.normal = Normal.coerce(normal)

    def set_left_peak(self, normal: Normal | float) -> None:
        self.left.peak = Normal.coerce(normal)

    def set_right(self, normal: Normal | float) -> None:
        # A mono meter has no right bar; updates are dropped.
        if self.right is not None:
            self.right.normal = Normal.coerce(normal)

    def set_right_peak(self, normal: Normal | float) -> None:
        if self.right is not None:
            self.right.peak = Normal.coerce(normal)


@dataclass(frozen=True)
class PhaseTierPositions:
    """``poor`` is measured on the left half, ``good`` on the right half."""

    poor: Normal = Normal(0.55)
    good: Normal = Normal(0.45)


@dataclass
class ReductionMeterState:
    bar: Normal = Normal.MIN
    peak: Normal | None = None
