from __future__ import annotations
import math

DEG_TO_RAD = math.pi / 180.0
TWO_PI = math.pi * 2.0
HALF_PI = math.pi / 2.0
THREE_HALVES_PI = math.pi * 1.5


def db_to_amplitude(db: float) -> float:
    return 10.0 ** (db / 20.0)


def amplitude_to_db(amp: float) -> float:
    """Convert a linear amplitude to decibels. Silence maps to ``-inf``."""
    if amp <= 0.0:
        return -math.inf
    return 20.0 * math.log10(amp)


def round_half_up(value: float) -> float:
    # Ties go up: 2.5 -> 3.0
    return float(math.floor(value + 0.5))


def clamp(value: float, lo: float, hi: float) -> float:
    if value <= lo:
        return lo
    if value >= hi:
        return hi
    return value
