from __future__ import annotations
from PyQt6.QtWidgets import (
    QComboBox, QDialog, QDialogButtonBox, QDoubleSpinBox, QFileDialog, QFormLayout,
    QHBoxLayout, QLineEdit, QPushButton, QSpinBox, QWidget,
)
from audio.sources import list_audio_input_devices
from core.config import AppConfig


_THEME_LABELS = [
    ("auto", "Auto (System)"),
    ("light", "Light"),
    ("dark", "Dark"),
    ("studio", "Studio"),
    ("ocean", "Ocean"),
    ("sunset", "Sunset"),
]

_DETECTOR_LABELS = [
    ("peak_rms", "Peak + RMS"),
    ("peak", "Peak"),
]

_SOURCE_LABELS = [
    ("demo", "Demo signal"),
    ("input", "Audio input"),
    ("wav", "WAV file"),
]

_SAMPLE_RATES = (44100, 48000, 88200, 96000)


class SettingsDialog(QDialog):
    def __init__(self, config: AppConfig, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self._config = config
        self._build_ui()
        self._load_from_config()

    @property
    def selected_theme(self) -> str:
        return self.theme_combo.currentData()

    def _build_ui(self) -> None:
        layout = QFormLayout(self)

        self.theme_combo = QComboBox()
        for key, label in _THEME_LABELS:
            self.theme_combo.addItem(label, key)
        layout.addRow("Theme:", self.theme_combo)

        self.drag_spin = QDoubleSpinBox()
        self.drag_spin.setDecimals(5)
        self.drag_spin.setRange(0.0001, 0.05)
        self.drag_spin.setSingleStep(0.0005)
        layout.addRow("Drag sensitivity:", self.drag_spin)

        self.detector_combo = QComboBox()
        for key, label in _DETECTOR_LABELS:
            self.detector_combo.addItem(label, key)
        layout.addRow("Meter detector:", self.detector_combo)

        self.refresh_spin = QSpinBox()
        self.refresh_spin.setRange(10, 500)
        self.refresh_spin.setSuffix(" ms")
        layout.addRow("Meter refresh:", self.refresh_spin)

        self.source_combo = QComboBox()
        for key, label in _SOURCE_LABELS:
            self.source_combo.addItem(label, key)
        layout.addRow("Meter source:", self.source_combo)

        self.device_combo = QComboBox()
        self.device_combo.addItem("System default", None)
        for index, name in list_audio_input_devices():
            self.device_combo.addItem(name, index)
        layout.addRow("Input device:", self.device_combo)

        self.rate_combo = QComboBox()
        for rate in _SAMPLE_RATES:
            self.rate_combo.addItem(f"{rate} Hz", rate)
        layout.addRow("Sample rate:", self.rate_combo)

        wav_row = QWidget()
        wav_layout = QHBoxLayout(wav_row)
        wav_layout.setContentsMargins(0, 0, 0, 0)
        self.wav_edit = QLineEdit()
        self.wav_edit.setPlaceholderText("Path to a .wav file")
        browse_btn = QPushButton("Browse…")
        browse_btn.clicked.connect(self._browse_wav)
        wav_layout.addWidget(self.wav_edit, stretch=1)
        wav_layout.addWidget(browse_btn)
        layout.addRow("WAV file:", wav_row)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        buttons.accepted.connect(self._on_accept)
        buttons.rejected.connect(self.reject)
        layout.addRow(buttons)

    def _browse_wav(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Open WAV", "", "WAV files (*.wav)")
        if path:
            self.wav_edit.setText(path)

    @staticmethod
    def _select(combo: QComboBox, data) -> None:
        idx = combo.findData(data)
        if idx >= 0:
            combo.setCurrentIndex(idx)

    def _load_from_config(self) -> None:
        self._select(self.theme_combo, self._config.theme)
        self.drag_spin.setValue(self._config.drag_scalar)
        self._select(self.detector_combo, self._config.meter_detector)
        self.refresh_spin.setValue(self._config.meter_refresh_ms)
        self._select(self.source_combo, self._config.meter_source)
        self._select(self.device_combo, self._config.audio_input_device)
        self._select(self.rate_combo, self._config.sample_rate)
        self.wav_edit.setText(self._config.wav_path)

    def _on_accept(self) -> None:
        self._config.theme = self.selected_theme
        self._config.drag_scalar = self.drag_spin.value()
        self._config.meter_detector = self.detector_combo.currentData()
        self._config.meter_refresh_ms = self.refresh_spin.value()
        self._config.meter_source = self.source_combo.currentData()
        self._config.audio_input_device = self.device_combo.currentData()
        self._config.sample_rate = self.rate_combo.currentData()
        self._config.wav_path = self.wav_edit.text()
        self._config.save()
        self.accept()
