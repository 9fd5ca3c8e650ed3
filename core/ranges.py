"""Ranges that map user-facing values (linear, integer, dB, Hz) to a Normal.

Every range checks its invariants once at construction and raises
``ValueError`` on violation. After that, mapping in either direction never
fails: out-of-range inputs are clamped.
"""
from __future__ import annotations
import math
from typing import Hashable

from core.math_utils import clamp, round_half_up
from core.normal import Normal
from core.param import Param

FREQ_MIN_HZ = 20.0
FREQ_MAX_HZ = 20480.0


class FloatRange:
    """A continuous linear range of floats."""

    def __init__(self, min_value: float = 0.0, max_value: float = 1.0) -> None:
        if not max_value > min_value:
            raise ValueError(
                f"FloatRange max ({max_value}) must be greater than min ({min_value})"
            )
        self.min = float(min_value)
        self.max = float(max_value)
        self.span = self.max - self.min
        self.span_recip = 1.0 / self.span

    @classmethod
    def bipolar(cls) -> FloatRange:
        return cls(-1.0, 1.0)

    def to_normal(self, value: float) -> Normal:
        value = clamp(value, self.min, self.max)
        return Normal((value - self.min) * self.span_recip)

    def to_value(self, normal: Normal | float) -> float:
        return Normal.coerce(normal).value * self.span + self.min

    def create_param(self, id: Hashable | None, value: float, default: float) -> Param:
        return Param(self.to_normal(value), self.to_normal(default), id)

    def create_param_default(self, id: Hashable | None = None) -> Param:
        return self.create_param(id, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"FloatRange({self.min}, {self.max})"


class IntRange:
    """A discrete linear range of integers."""

    def __init__(self, min_value: int = 0, max_value: int = 100) -> None:
        if not max_value > min_value:
            raise ValueError(
                f"IntRange max ({max_value}) must be greater than min ({min_value})"
            )
        self.min = int(min_value)
        self.max = int(max_value)
        self.span = float(self.max - self.min)
        self.span_recip = 1.0 / self.span

    def _constrain(self, value: int) -> int:
        if value <= self.min:
            return self.min
        if value >= self.max:
            return self.max
        return int(value)

    def to_normal(self, value: int) -> Normal:
        return Normal((self._constrain(value) - self.min) / self.span)

    def to_value(self, normal: Normal | float) -> int:
        return int(round_half_up(Normal.coerce(normal).value * self.span)) + self.min

    def snap_normal(self, normal: Normal | float) -> Normal:
        """Return the Normal of the integer step closest to ``normal``."""
        return self.to_normal(self.to_value(normal))

    def create_param(self, id: Hashable | None, value: int, default: int) -> Param:
        return Param(self.to_normal(value), self.to_normal(default), id)

    def create_param_default(self, id: Hashable | None = None) -> Param:
        return self.create_param(id, 0, 0)

    def __repr__(self) -> str:
        return f"IntRange({self.min}, {self.max})"


class LogDBRange:
    """A bipolar decibel range with a stationary point at 0 dB.

    ``zero_pivot`` is the Normal where 0 dB sits: ``Normal.CENTER`` puts it
    in the middle, 1.0 keeps only the negative half and 0.0 only the
    positive half. Values near 0 dB move slower per unit of Normal than
    values near the ends.

    ``snap_to_default_window`` is opt-in: when set,
    :meth:`to_value_snapped` returns the default value exactly for any
    Normal whose value lands within the window of it.
    """

    def __init__(
        self,
        min_db: float = -12.0,
        max_db: float = 12.0,
        zero_pivot: Normal | float = Normal.CENTER,
        snap_to_default_window: float | None = None,
    ) -> None:
        if not max_db > min_db:
            raise ValueError(f"LogDBRange max ({max_db}) must be greater than min ({min_db})")
        if max_db < 0.0:
            raise ValueError(f"LogDBRange max ({max_db}) must be 0.0 or positive")
        if min_db > 0.0:
            raise ValueError(f"LogDBRange min ({min_db}) must be 0.0 or negative")
        if not isinstance(zero_pivot, Normal) and not 0.0 <= zero_pivot <= 1.0:
            raise ValueError(f"LogDBRange zero pivot ({zero_pivot}) must be within [0.0, 1.0]")

        self.min = float(min_db)
        self.max = float(max_db)
        self.zero_pivot = Normal.coerce(zero_pivot)
        self.snap_to_default_window = snap_to_default_window

        pivot = self.zero_pivot.value
        self._min_recip = 0.0 if self.min == 0.0 else 1.0 / self.min
        self._max_recip = 0.0 if self.max == 0.0 else 1.0 / self.max
        self._pivot_recip = 0.0 if pivot == 0.0 else 1.0 / pivot
        self._one_min_pivot_recip = 0.0 if pivot == 1.0 else 1.0 / (1.0 - pivot)

    def to_normal(self, value: float) -> Normal:
        value = clamp(value, self.min, self.max)
        pivot = self.zero_pivot.value
        if value == 0.0:
            return self.zero_pivot
        if value < 0.0:
            if self.min >= 0.0:
                return Normal.MIN
            neg_normal = value * self._min_recip
            return Normal((1.0 - math.sqrt(neg_normal)) * pivot)
        if self.max <= 0.0:
            return Normal.MAX
        pos_normal = value * self._max_recip
        return Normal(math.sqrt(pos_normal) * (1.0 - pivot) + pivot)

    def to_value(self, normal: Normal | float) -> float:
        normal = Normal.coerce(normal)
        pivot = self.zero_pivot.value
        if normal == self.zero_pivot:
            return 0.0
        if normal.value < pivot:
            if self.min >= 0.0:
                return self.min
            neg_normal = 1.0 - normal.value * self._pivot_recip
            return neg_normal * neg_normal * self.min
        if pivot == 1.0 or self.max <= 0.0:
            return self.max
        pos_normal = (normal.value - pivot) * self._one_min_pivot_recip
        return pos_normal * pos_normal * self.max

    def to_value_snapped(self, normal: Normal | float, default: Normal | float) -> float:
        value = self.to_value(normal)
        if self.snap_to_default_window is None:
            return value
        default_value = self.to_value(default)
        if abs(value - default_value) <= self.snap_to_default_window:
            return default_value
        return value

    def create_param(self, id: Hashable | None, value: float, default: float) -> Param:
        return Param(self.to_normal(value), self.to_normal(default), id)

    def create_param_default(self, id: Hashable | None = None) -> Param:
        return self.create_param(id, 0.0, 0.0)

    def __repr__(self) -> str:
        return f"LogDBRange({self.min}, {self.max}, {self.zero_pivot.value})"


def spectrum_normal(freq: float) -> Normal:
    """Position of ``freq`` on the ten-octave 20 Hz - 20480 Hz spectrum."""
    return Normal((math.log2(freq / 40.0) + 1.0) * 0.1)


def spectrum_freq(normal: Normal | float) -> float:
    return 40.0 * 2.0 ** (10.0 * Normal.coerce(normal).value - 1.0)


class FreqRange:
    """Octave-spaced frequency range; every octave gets the same travel."""

    def __init__(self, min_hz: float = 20.0, max_hz: float = 20000.0) -> None:
        if not max_hz > min_hz:
            raise ValueError(f"FreqRange max ({max_hz}) must be greater than min ({min_hz})")
        self.min = clamp(float(min_hz), FREQ_MIN_HZ, FREQ_MAX_HZ)
        self.max = clamp(float(max_hz), FREQ_MIN_HZ, FREQ_MAX_HZ)
        if not self.max > self.min:
            raise ValueError(
                f"FreqRange ({min_hz}, {max_hz}) is empty after clamping to "
                f"[{FREQ_MIN_HZ}, {FREQ_MAX_HZ}]"
            )
        self._min_spectrum = spectrum_normal(self.min).value
        self.spectrum_span = spectrum_normal(self.max).value - self._min_spectrum
        self._spectrum_span_recip = 1.0 / self.spectrum_span

    def to_normal(self, value: float) -> Normal:
        value = clamp(value, self.min, self.max)
        return Normal(
            (spectrum_normal(value).value - self._min_spectrum) * self._spectrum_span_recip
        )

    def to_value(self, normal: Normal | float) -> float:
        normal = Normal.coerce(normal)
        return spectrum_freq(normal.value * self.spectrum_span + self._min_spectrum)

    def create_param(self, id: Hashable | None, value: float, default: float) -> Param:
        return Param(self.to_normal(value), self.to_normal(default), id)

    def create_param_default(self, id: Hashable | None = None) -> Param:
        return self.create_param(id, FREQ_MAX_HZ, FREQ_MAX_HZ)

    def __repr__(self) -> str:
        return f"FreqRange({self.min}, {self.max})"
