import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest


@pytest.fixture
def tone():
    """Factory for float32 sine blocks: ``tone(freq, duration, sample_rate, amplitude)``."""
    def make(freq: float, duration: float, sample_rate: int = 44100, amplitude: float = 1.0):
        t = np.arange(int(sample_rate * duration)) / sample_rate
        return (amplitude * np.sin(2 * np.pi * freq * t)).astype(np.float32)
    return make
