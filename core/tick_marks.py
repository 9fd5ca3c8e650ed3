"""Groups of tiered tick marks positioned on the unit interval."""
from __future__ import annotations
import enum
import hashlib
import struct
from typing import Iterable

from core.normal import Normal


class Tier(enum.IntEnum):
    ONE = 1    # large
    TWO = 2    # medium
    THREE = 3  # small


def _quantize(normal: Normal) -> int:
    return int(normal.value * 10_000_000.0)


class TickMarkGroup:
    """Immutable set of tick marks bucketed by tier.

    Every constructor funnels through :meth:`from_normalized`, which also
    computes a stable 64-bit hash used as a cache key by the renderers.
    """

    __slots__ = ("_tiers", "_len", "_hashed")

    def __init__(self, marks: Iterable[tuple[Normal | float, Tier]] = ()) -> None:
        tiers: dict[Tier, list[Normal]] = {Tier.ONE: [], Tier.TWO: [], Tier.THREE: []}
        hasher = hashlib.blake2b(digest_size=8)
        marks = [(Normal.coerce(n), Tier(t)) for n, t in marks]
        hasher.update(struct.pack("<Q", len(marks)))
        for normal, tier in marks:
            hasher.update(struct.pack("<Bq", int(tier), _quantize(normal)))
            tiers[tier].append(normal)
        self._tiers = {tier: tuple(positions) for tier, positions in tiers.items()}
        self._len = len(marks)
        self._hashed = int.from_bytes(hasher.digest(), "little")

    @classmethod
    def from_normalized(cls, marks: Iterable[tuple[Normal | float, Tier]]) -> TickMarkGroup:
        return cls(marks)

    @classmethod
    def center(cls, tier: Tier) -> TickMarkGroup:
        return cls([(Normal.CENTER, tier)])

    @classmethod
    def min_max(cls, tier: Tier) -> TickMarkGroup:
        return cls([(Normal.MIN, tier), (Normal.MAX, tier)])

    @classmethod
    def min_max_and_center(cls, min_max_tier: Tier, center_tier: Tier) -> TickMarkGroup:
        return cls([
            (Normal.MIN, min_max_tier),
            (Normal.CENTER, center_tier),
            (Normal.MAX, min_max_tier),
        ])

    @classmethod
    def subdivided(
        cls, one: int, two: int, three: int, sides: Tier | None = None
    ) -> TickMarkGroup:
        """Build a tiered grid.

        ``one`` tier-1 marks split ``[0, 1]`` into ``one + 1`` intervals,
        each holding ``two`` tier-2 marks; every interval between tier-2
        boundaries holds ``three`` tier-3 marks. ``sides`` adds marks at 0
        and 1 with the given tier.
        """
        marks: list[tuple[Normal, Tier]] = []
        one_ranges = one + 1
        two_ranges = two + 1
        three_ranges = three + 1

        one_span = 1.0 / one_ranges
        two_span = one_span / two_ranges
        three_span = two_span / three_ranges

        for i_1 in range(one_ranges):
            one_pos = i_1 * one_span + one_span
            if i_1 != one:
                marks.append((Normal(one_pos), Tier.ONE))

            for i_2 in range(two_ranges):
                two_pos = i_2 * two_span + two_span
                if i_2 != two:
                    marks.append((Normal(one_pos - two_pos), Tier.TWO))

                for i_3 in range(three):
                    three_pos = i_3 * three_span + three_span
                    marks.append((Normal(one_pos - two_pos + three_pos), Tier.THREE))

        if sides is not None:
            marks.append((Normal.MIN, sides))
            marks.append((Normal.MAX, sides))

        return cls(marks)

    @classmethod
    def evenly_spaced(cls, length: int, tier: Tier) -> TickMarkGroup:
        if length == 0:
            return cls()
        if length == 1:
            return cls([(Normal.MIN, tier)])
        span = 1.0 / (length - 1)
        marks = [(Normal(i * span), tier) for i in range(length - 1)]
        marks.append((Normal.MAX, tier))
        return cls(marks)

    @classmethod
    def default(cls) -> TickMarkGroup:
        return cls.center(Tier.ONE)

    def tier(self, tier: Tier) -> list[Normal] | None:
        """Positions for ``tier``, or ``None`` when the tier is empty."""
        positions = self._tiers[Tier(tier)]
        return list(positions) if positions else None

    def tier_1(self) -> list[Normal] | None:
        return self.tier(Tier.ONE)

    def tier_2(self) -> list[Normal] | None:
        return self.tier(Tier.TWO)

    def tier_3(self) -> list[Normal] | None:
        return self.tier(Tier.THREE)

    def positions(self) -> list[Normal]:
        return [n for tier in Tier for n in self._tiers[tier]]

    def hashed(self) -> int:
        return self._hashed

    def is_empty(self) -> bool:
        return self._len == 0

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickMarkGroup):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        return self._hashed

    def __repr__(self) -> str:
        counts = ", ".join(f"{t.name.lower()}={len(self._tiers[t])}" for t in Tier)
        return f"TickMarkGroup({counts})"
