import pytest
from PyQt6.QtWidgets import QApplication
from core.config import AppConfig
from ui.settings_dialog import SettingsDialog


@pytest.fixture(scope="module")
def app():
    a = QApplication.instance() or QApplication([])
    yield a


def test_settings_dialog_creates_with_defaults(app, tmp_path):
    cfg = AppConfig(path=tmp_path / "config.json")
    dlg = SettingsDialog(cfg)
    assert dlg.selected_theme == "auto"
    assert dlg.drag_spin.value() == pytest.approx(0.00385)
    assert dlg.detector_combo.currentData() == "peak_rms"
    assert dlg.refresh_spin.value() == 33
    assert dlg.source_combo.currentData() == "demo"
    assert dlg.device_combo.currentData() is None
    assert dlg.rate_combo.currentData() == 44100
    assert dlg.wav_edit.text() == ""


def test_settings_dialog_round_trips_values(app, tmp_path):
    path = tmp_path / "config.json"
    cfg = AppConfig(path=path)

    dlg = SettingsDialog(cfg)
    dlg._select(dlg.theme_combo, "studio")
    dlg.drag_spin.setValue(0.005)
    dlg._select(dlg.detector_combo, "peak")
    dlg.refresh_spin.setValue(50)
    dlg._select(dlg.source_combo, "wav")
    dlg._select(dlg.rate_combo, 48000)
    dlg.wav_edit.setText("/tmp/loop.wav")
    dlg._on_accept()

    cfg2 = AppConfig(path=path)
    assert cfg2.theme == "studio"
    assert cfg2.drag_scalar == pytest.approx(0.005)
    assert cfg2.meter_detector == "peak"
    assert cfg2.meter_refresh_ms == 50
    assert cfg2.meter_source == "wav"
    assert cfg2.sample_rate == 48000
    assert cfg2.wav_path == "/tmp/loop.wav"


def test_settings_dialog_loads_existing_config(app, tmp_path):
    path = tmp_path / "config.json"
    cfg = AppConfig(path=path)
    cfg.theme = "ocean"
    cfg.meter_refresh_ms = 100
    cfg.sample_rate = 96000
    cfg.save()

    dlg = SettingsDialog(AppConfig(path=path))
    assert dlg.selected_theme == "ocean"
    assert dlg.refresh_spin.value() == 100
    assert dlg.rate_combo.currentData() == 96000


def test_unknown_device_keeps_default_entry(app, tmp_path):
    cfg = AppConfig(path=tmp_path / "config.json")
    cfg.audio_input_device = 999
    dlg = SettingsDialog(cfg)
    assert dlg.device_combo.currentData() is None
