from __future__ import annotations
import json
from pathlib import Path

_DEFAULTS = {
    "theme": "auto",
    "drag_scalar": 0.00385,
    "wheel_scalar": 0.01,
    "modifier_scalar": 0.02,
    "meter_refresh_ms": 33,
    "meter_detector": "peak_rms",
    "sample_rate": 44100,
    "meter_source": "demo",
    "audio_input_device": None,
    "wav_path": "",
}

DETECTOR_NAMES = ("peak", "peak_rms")
METER_SOURCES = ("demo", "input", "wav")


class AppConfig:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "tonewidgets" / "config.json"
        self.theme: str = _DEFAULTS["theme"]
        self.drag_scalar: float = _DEFAULTS["drag_scalar"]
        self.wheel_scalar: float = _DEFAULTS["wheel_scalar"]
        self.modifier_scalar: float = _DEFAULTS["modifier_scalar"]
        self.meter_refresh_ms: int = _DEFAULTS["meter_refresh_ms"]
        self.meter_detector: str = _DEFAULTS["meter_detector"]
        self.sample_rate: int = _DEFAULTS["sample_rate"]
        self.meter_source: str = _DEFAULTS["meter_source"]
        self.audio_input_device: int | str | None = _DEFAULTS["audio_input_device"]
        self.wav_path: str = _DEFAULTS["wav_path"]
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text())
            for key in _DEFAULTS:
                if key in data:
                    setattr(self, key, data[key])
        except (json.JSONDecodeError, OSError):
            pass
        if self.meter_detector not in DETECTOR_NAMES:
            self.meter_detector = _DEFAULTS["meter_detector"]
        if self.meter_source not in METER_SOURCES:
            self.meter_source = _DEFAULTS["meter_source"]

    def save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = {key: getattr(self, key) for key in _DEFAULTS}
        self._path.write_text(json.dumps(data, indent=2))
