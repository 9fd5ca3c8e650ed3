import numpy as np
import pytest
from PyQt6.QtWidgets import QApplication

from audio.sources import DemoSignal, WavSource, save_wav
from core.config import AppConfig
from core.logger import AppLogger
from core.normal import Normal
from core.theme import THEMES
from ui.gallery_window import GalleryWindow, open_meter_source, reduction_normal


@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(app, tmp_path):
    config = AppConfig(path=tmp_path / "config.json")
    config.theme = "dark"
    win = GalleryWindow(config, AppLogger())
    yield win
    win.close()


def _collect(logger):
    lines = []
    logger.message_logged.connect(lambda category, message: lines.append((category, message)))
    return lines


def test_window_has_every_widget(window):
    assert {"gain", "level", "pan", "voices", "cutoff", "cutoff_mod", "resonance",
            "balance", "steps", "pad", "attack", "release"} <= set(window.widgets)


def test_user_change_is_logged_with_units(window):
    lines = _collect(window._logger)
    window.widgets["gain"]._set_normal_interactive(1.0)
    assert ("INPUT", "gain = 12.00 dB") in lines


def test_integer_params_log_whole_numbers(window):
    assert window.format_value("voices", Normal.MAX) == "8"


def test_mod_input_moves_cutoff_mod_range(window):
    start = window.params["cutoff"].normal.value
    window.widgets["cutoff_mod"]._set_normal_interactive(0.75)
    mod_range = window.widgets["cutoff"].mod_range
    assert mod_range.start.value == pytest.approx(start)
    assert mod_range.end.value == pytest.approx(min(1.0, start + 0.25))


def test_meter_tick_updates_meters(window):
    window.tick_meters()
    assert window.db_meter.state.left.peak is not None
    assert isinstance(window.reduction_meter.state.bar, Normal)


def test_apply_settings_rethemes_widgets(window):
    window._config.theme = "light"
    window.apply_settings()
    assert window.theme.name == "light"
    assert window.widgets["gain"].style_sheet.theme is THEMES["light"]


def test_reduction_normal():
    assert reduction_normal(np.zeros((0, 2))) == 0.0
    assert reduction_normal(np.full((4, 2), 0.1)) == 0.0
    assert reduction_normal(np.full((4, 2), 1.0)) == pytest.approx(0.5)


def test_open_meter_source_defaults_to_demo(app, tmp_path):
    config = AppConfig(path=tmp_path / "config.json")
    assert isinstance(open_meter_source(config, AppLogger()), DemoSignal)


def test_missing_wav_falls_back_to_demo(app, tmp_path):
    config = AppConfig(path=tmp_path / "config.json")
    config.meter_source = "wav"
    config.wav_path = str(tmp_path / "missing.wav")
    logger = AppLogger()
    lines = _collect(logger)
    assert isinstance(open_meter_source(config, logger), DemoSignal)
    assert any("not found" in message for _, message in lines)


def test_wav_source_is_opened(app, tmp_path, tone):
    path = tmp_path / "loop.wav"
    save_wav(path, tone(220.0, 0.1, 8000), 8000)
    config = AppConfig(path=tmp_path / "config.json")
    config.meter_source = "wav"
    config.wav_path = str(path)
    source = open_meter_source(config, AppLogger())
    assert isinstance(source, WavSource)
    assert source.sample_rate == 8000
