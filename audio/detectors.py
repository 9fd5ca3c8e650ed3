"""Level detectors that turn audio blocks into DB meter readings."""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass

import numpy as np

from core.logger import AppLogger
from core.math_utils import amplitude_to_db
from core.meter_state import DBMeterState
from core.ranges import FloatRange

RMS_WINDOW_SEC = 0.3
RMS_BLOCK_SIZE = 512
N_CHANNELS = 2


@dataclass
class DetectorOutput:
    peak_db: float | None = None
    bar_db: float | None = None
    n_samples_to_discard: int = 0


def _peak_db(samples: np.ndarray) -> float:
    return amplitude_to_db(float(np.max(np.abs(samples))))


class Detector:
    """Base detector. ``process`` sees every pending sample of one channel."""

    def update_sample_rate(self, sample_rate: float) -> None:
        pass

    def process(self, channel: int, samples: np.ndarray) -> DetectorOutput:
        raise NotImplementedError

    def clear(self) -> None:
        pass


class PeakDetector(Detector):
    """Bar and peak both show the loudest sample; everything is consumed."""

    def process(self, channel: int, samples: np.ndarray) -> DetectorOutput:
        if len(samples) == 0:
            return DetectorOutput()
        peak = _peak_db(samples)
        return DetectorOutput(peak_db=peak, bar_db=peak, n_samples_to_discard=len(samples))


class PeakRmsDetector(Detector):
    """Peak of the new samples plus RMS over a sliding 0.3 s window.

    The window is kept as sums of squares of 512-sample blocks. Samples
    that do not fill a whole block stay pending for the next call, and
    RMS is only reported once the window is full.
    """

    def __init__(self, sample_rate: float | None = None) -> None:
        self.sample_rate = 0.0
        self.n_blocks = 0
        self.window_size = 0
        self._blocks: list[deque[float]] = []
        self._not_cached: list[int] = []
        if sample_rate is not None:
            self.update_sample_rate(sample_rate)

    def update_sample_rate(self, sample_rate: float) -> None:
        if sample_rate == self.sample_rate:
            return
        self.sample_rate = float(sample_rate)
        window = int(np.round(RMS_WINDOW_SEC * sample_rate))
        self.n_blocks = max(1, int(np.round(window / RMS_BLOCK_SIZE)))
        self.window_size = self.n_blocks * RMS_BLOCK_SIZE
        self._blocks = [deque(maxlen=self.n_blocks) for _ in range(N_CHANNELS)]
        self._not_cached = [0] * N_CHANNELS

    def process(self, channel: int, samples: np.ndarray) -> DetectorOutput:
        if not self._blocks or len(samples) == 0:
            return DetectorOutput()

        n_new = len(samples) - self._not_cached[channel]
        peak = _peak_db(samples[len(samples) - n_new:]) if n_new > 0 else None

        n_full = len(samples) // RMS_BLOCK_SIZE
        bar = None
        if n_full:
            # Whole blocks are consumed oldest first; the remainder stays pending.
            head = samples[:n_full * RMS_BLOCK_SIZE].astype(np.float64)
            sums = np.sum(head.reshape(n_full, RMS_BLOCK_SIZE) ** 2, axis=1)
            blocks = self._blocks[channel]
            blocks.extend(float(s) for s in sums)
            if len(blocks) == blocks.maxlen:
                bar = amplitude_to_db(float(np.sqrt(sum(blocks) / self.window_size)))

        self._not_cached[channel] = len(samples) - n_full * RMS_BLOCK_SIZE
        return DetectorOutput(peak_db=peak, bar_db=bar,
                              n_samples_to_discard=n_full * RMS_BLOCK_SIZE)

    def clear(self) -> None:
        for blocks in self._blocks:
            blocks.clear()
        self._not_cached = [0] * N_CHANNELS


def create_detector(name: str, sample_rate: float) -> Detector:
    """Build a detector by its config name (``peak`` or ``peak_rms``)."""
    if name == "peak":
        detector: Detector = PeakDetector()
    elif name == "peak_rms":
        detector = PeakRmsDetector()
    else:
        raise ValueError(f"Unknown meter detector: {name!r}")
    detector.update_sample_rate(sample_rate)
    return detector


class DBMeterFeed:
    """Buffers incoming audio and writes detector readings into a DBMeterState.

    ``db_range`` maps decibels onto the meter; anything with a
    ``to_normal(db)`` method works. A mono state ignores the right channel.
    """

    def __init__(
        self,
        state: DBMeterState,
        detector: Detector,
        sample_rate: float,
        db_range=None,
        logger: AppLogger | None = None,
    ) -> None:
        self.state = state
        self.detector = detector
        self.db_range = db_range or FloatRange(-64.0, 3.0)
        self._logger = logger
        self.sample_rate = float(sample_rate)
        self.detector.update_sample_rate(self.sample_rate)
        self._pending = [np.zeros(0, dtype=np.float32) for _ in range(N_CHANNELS)]

    def set_sample_rate(self, sample_rate: float) -> None:
        if sample_rate == self.sample_rate:
            return
        self.sample_rate = float(sample_rate)
        self.detector.update_sample_rate(self.sample_rate)
        self.clear()
        if self._logger:
            self._logger.meter(f"Detector reconfigured for {self.sample_rate:g} Hz")

    def set_detector(self, detector: Detector) -> None:
        self.detector = detector
        self.detector.update_sample_rate(self.sample_rate)
        self.clear()

    def clear(self) -> None:
        self.detector.clear()
        self._pending = [np.zeros(0, dtype=np.float32) for _ in range(N_CHANNELS)]

    def pending(self, channel: int) -> int:
        return len(self._pending[channel])

    def push(self, left: np.ndarray, right: np.ndarray | None = None) -> None:
        self._pending[0] = np.concatenate((self._pending[0], np.asarray(left, dtype=np.float32)))
        if right is not None:
            self._pending[1] = np.concatenate((self._pending[1], np.asarray(right, dtype=np.float32)))

    def push_frames(self, frames: np.ndarray) -> None:
        """Push an ``(n, channels)`` array; a single column feeds both bars."""
        frames = np.asarray(frames, dtype=np.float32)
        if frames.ndim == 1:
            self.push(frames, frames)
        elif frames.shape[1] == 1:
            self.push(frames[:, 0], frames[:, 0])
        else:
            self.push(frames[:, 0], frames[:, 1])

    def update(self) -> None:
        """Run the detector over pending audio and update the meter state."""
        self._update_channel(0, self.state.set_left, self.state.set_left_peak)
        if self.state.right is not None:
            self._update_channel(1, self.state.set_right, self.state.set_right_peak)
        else:
            self._pending[1] = self._pending[1][:0]

    def _update_channel(self, channel: int, set_bar, set_peak) -> None:
        output = self.detector.process(channel, self._pending[channel])
        if output.bar_db is not None:
            set_bar(self.db_range.to_normal(output.bar_db))
        if output.peak_db is not None:
            set_peak(self.db_range.to_normal(output.peak_db))
        if output.n_samples_to_discard:
            self._pending[channel] = self._pending[channel][output.n_samples_to_discard:]
