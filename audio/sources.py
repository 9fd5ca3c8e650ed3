"""Audio that drives the meters: synthetic signals, WAV files and live input."""
from __future__ import annotations
import threading
from pathlib import Path

import numpy as np
from scipy.io import wavfile


class DemoSignal:
    """A stereo sine whose level swells slowly and whose channels drift in phase.

    ``read(n)`` returns the next ``(n, 2)`` block, so the meters see a
    continuous signal regardless of how often they poll.
    """

    def __init__(self, sample_rate: int = 44100, freq: float = 220.0,
                 swell_hz: float = 0.25, drift_hz: float = 0.05) -> None:
        self.sample_rate = sample_rate
        self.freq = freq
        self.swell_hz = swell_hz
        self.drift_hz = drift_hz
        self._position = 0

    def read(self, n_frames: int) -> np.ndarray:
        t = (self._position + np.arange(n_frames)) / self.sample_rate
        self._position += n_frames
        level = 0.55 + 0.5 * np.sin(2 * np.pi * self.swell_hz * t)
        drift = np.pi * (0.5 + 0.5 * np.sin(2 * np.pi * self.drift_hz * t))
        left = level * np.sin(2 * np.pi * self.freq * t)
        right = level * np.sin(2 * np.pi * self.freq * t + drift)
        return np.stack((left, right), axis=1).astype(np.float32)


def phase_correlation(left: np.ndarray, right: np.ndarray) -> float:
    """Correlation of two channels in ``[-1, 1]``; silence counts as in phase."""
    left = np.asarray(left, dtype=np.float64)
    right = np.asarray(right, dtype=np.float64)
    energy = np.sqrt(np.sum(left ** 2) * np.sum(right ** 2))
    if energy == 0.0:
        return 1.0
    return float(np.clip(np.sum(left * right) / energy, -1.0, 1.0))


def correlation_to_normal(correlation: float) -> float:
    """Map ``-1..+1`` onto the phase meter's ``0..1``."""
    return (correlation + 1.0) / 2.0


def load_wav(path: Path) -> tuple[np.ndarray, int]:
    """Read a WAV file as float32 frames of shape ``(n, channels)``."""
    sr, data = wavfile.read(str(path))
    if data.dtype == np.int16:
        data = data.astype(np.float32) / 32767.0
    elif data.dtype == np.int32:
        data = data.astype(np.float32) / 2147483647.0
    else:
        data = data.astype(np.float32)
    if data.ndim == 1:
        data = data[:, np.newaxis]
    return data, sr


def save_wav(path: Path, frames: np.ndarray, sample_rate: int) -> None:
    scaled = np.int16(np.clip(frames, -1.0, 1.0) * 32767)
    wavfile.write(str(path), sample_rate, scaled)


class WavSource:
    """Loops a WAV file block by block."""

    def __init__(self, path: Path) -> None:
        self.frames, self.sample_rate = load_wav(path)
        self._position = 0

    def read(self, n_frames: int) -> np.ndarray:
        total = len(self.frames)
        if total == 0:
            return np.zeros((n_frames, self.frames.shape[1]), dtype=np.float32)
        idx = (self._position + np.arange(n_frames)) % total
        self._position = (self._position + n_frames) % total
        return self.frames[idx]


class AudioInputError(RuntimeError):
    """The input stream could not be opened."""


def list_audio_input_devices() -> list[tuple[int, str]]:
    """Return (index, name) for each audio device with input channels."""
    try:
        import sounddevice as sd
        devices = sd.query_devices()
        return [
            (i, d["name"])
            for i, d in enumerate(devices)
            if d.get("max_input_channels", 0) > 0
        ]
    except OSError:
        return []


class AudioInput:
    """Captures an input device in the background for metering.

    The stream callback runs on the audio thread; ``drain()`` hands the
    captured frames to the UI thread.
    """

    def __init__(self, device: int | str | None = None, sample_rate: int = 44100,
                 channels: int = 2) -> None:
        self._device = device
        self._sample_rate = sample_rate
        self._channels = channels
        self._stream = None
        self._lock = threading.Lock()
        self._blocks: list[np.ndarray] = []

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def is_running(self) -> bool:
        return self._stream is not None and self._stream.active

    def start(self) -> None:
        if self.is_running:
            return
        try:
            import sounddevice as sd
        except OSError as exc:
            raise AudioInputError(f"PortAudio is unavailable: {exc}") from exc
        try:
            stream = sd.InputStream(
                samplerate=self._sample_rate,
                channels=self._channels,
                dtype="float32",
                device=self._device,
                callback=self._callback,
            )
            stream.start()
        except (sd.PortAudioError, ValueError) as exc:
            raise AudioInputError(f"Cannot open audio input {self._device!r}: {exc}") from exc
        self._stream = stream

    def stop(self) -> None:
        if self._stream is not None:
            self._stream.stop()
            self._stream.close()
            self._stream = None

    def _callback(self, indata, frames, time, status) -> None:
        with self._lock:
            self._blocks.append(indata.copy())

    def drain(self) -> np.ndarray:
        with self._lock:
            blocks, self._blocks = self._blocks, []
        if not blocks:
            return np.zeros((0, self._channels), dtype=np.float32)
        return np.concatenate(blocks, axis=0)
