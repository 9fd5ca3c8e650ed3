"""Demo window showing every widget, with meters driven by live audio."""
from __future__ import annotations
from pathlib import Path
from typing import Callable

import numpy as np
from PyQt6.QtWidgets import (
    QApplication, QGridLayout, QGroupBox, QHBoxLayout, QLabel, QMainWindow,
    QSplitter, QTabWidget, QToolBar, QVBoxLayout, QWidget,
)
from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QAction

from audio.detectors import DBMeterFeed, create_detector
from audio.sources import (
    AudioInput,
    AudioInputError,
    DemoSignal,
    WavSource,
    correlation_to_normal,
    phase_correlation,
)
from core.config import AppConfig
from core.logger import AppLogger
from core.math_utils import amplitude_to_db
from core.meter_state import DBMeterState, ReductionMeterState, TierPositions
from core.modulation_range import ModulationRange
from core.normal import Normal
from core.param import Param
from core.ranges import FloatRange, FreqRange, IntRange, LogDBRange
from core.text_marks import TextMarkGroup
from core.theme import ThemeColors, apply_theme, get_theme
from core.tick_marks import Tier, TickMarkGroup
from render.meters import Orientation
from render.ramp import RampDirection
from style.slider import RectBipolarSliderStyleSheet
from style.themed import (
    ThemedArcKnobStyleSheet,
    ThemedDBMeterStyleSheet,
    ThemedKnobStyleSheet,
    ThemedRampStyleSheet,
    ThemedRectSliderStyleSheet,
    ThemedSliderStyleSheet,
    ThemedXYPadStyleSheet,
    rethemed,
)
from ui.log_panel import LogPanel
from ui.settings_dialog import SettingsDialog
from ui.widgets import (
    DBMeter, HSlider, Knob, ModRangeInput, PhaseMeter, Ramp, ReductionMeter, VSlider, XYPad,
)

METER_DB_RANGE = LogDBRange(-64.0, 3.0, 0.9)
REDUCTION_THRESHOLD_DB = -12.0
REDUCTION_RANGE_DB = 24.0


def open_meter_source(config: AppConfig, logger: AppLogger):
    """Build the source named by ``config.meter_source``; fall back to the demo signal."""
    if config.meter_source == "wav":
        path = Path(config.wav_path)
        if config.wav_path and path.is_file():
            try:
                source = WavSource(path)
            except ValueError as exc:
                logger.meter(f"Cannot read {path}: {exc}")
            else:
                logger.meter(f"Metering {path.name} ({source.sample_rate} Hz)")
                return source
        else:
            logger.meter(f"WAV file not found: {config.wav_path!r}")
    elif config.meter_source == "input":
        source = AudioInput(config.audio_input_device, config.sample_rate)
        try:
            source.start()
        except AudioInputError as exc:
            logger.meter(str(exc))
        else:
            logger.meter(f"Metering audio input {config.audio_input_device or 'default'}")
            return source
    logger.meter(f"Metering demo signal ({config.sample_rate} Hz)")
    return DemoSignal(config.sample_rate)


def reduction_normal(frames: np.ndarray) -> float:
    """Gain reduction a hard limiter at ``REDUCTION_THRESHOLD_DB`` would apply."""
    if len(frames) == 0:
        return 0.0
    peak_db = amplitude_to_db(float(np.max(np.abs(frames))))
    return max(0.0, peak_db - REDUCTION_THRESHOLD_DB) / REDUCTION_RANGE_DB


def _labeled(widget: QWidget, text: str) -> QWidget:
    box = QWidget()
    layout = QVBoxLayout(box)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.addWidget(widget, stretch=1, alignment=Qt.AlignmentFlag.AlignHCenter)
    label = QLabel(text)
    label.setAlignment(Qt.AlignmentFlag.AlignHCenter)
    layout.addWidget(label)
    return box


class GalleryWindow(QMainWindow):
    def __init__(self, config: AppConfig | None = None, logger: AppLogger | None = None,
                 parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Tone Widgets")
        self.resize(980, 760)
        self._config = config or AppConfig()
        self._logger = logger or AppLogger()
        self._theme = get_theme(self._config.theme)
        # name -> (range, unit) for formatting logged values
        self._ranges: dict[str, tuple[object, str]] = {}
        self.params: dict[str, Param] = {}
        self.widgets: dict[str, QWidget] = {}
        self._source = None
        self._build_ui()
        self._build_toolbar()
        self._logger.message_logged.connect(self._log_panel.append_message)
        self._start_meters()

    # --- params ---

    def _param(self, name: str, value_range, value, default, unit: str = "") -> Param:
        param = value_range.create_param(name, value, default)
        self._ranges[name] = (value_range, unit)
        self.params[name] = param
        return param

    def format_value(self, name: str, normal: Normal) -> str:
        value_range, unit = self._ranges[name]
        value = value_range.to_value(normal)
        if isinstance(value, int):
            return f"{value}{unit}"
        return f"{value:.2f}{unit}"

    def _on_user_change(self, name: str, normal: Normal) -> None:
        self._logger.input(f"{name} = {self.format_value(name, normal)}")
        if name in ("cutoff", "cutoff_mod"):
            self._update_cutoff_mod_range()

    def _update_cutoff_mod_range(self) -> None:
        start = self.params["cutoff"].normal.value
        amount = self.params["cutoff_mod"].normal.value - 0.5
        self.widgets["cutoff"].set_mod_range(ModulationRange.new(start, start + amount))

    # --- layout ---

    def _build_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        layout = QHBoxLayout(central)

        self._tab_widget = QTabWidget()
        self._tab_widget.addTab(self._build_sliders_tab(), "Sliders")
        self._tab_widget.addTab(self._build_knobs_tab(), "Knobs")
        self._tab_widget.addTab(self._build_pads_tab(), "XY Pad / Ramps")
        self._tab_widget.addTab(self._build_meters_tab(), "Meters")

        self._log_panel = LogPanel()

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self._tab_widget)
        splitter.addWidget(self._log_panel)
        splitter.setSizes([560, 180])
        layout.addWidget(splitter)

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Gallery")
        self.addToolBar(toolbar)
        settings_action = QAction("Settings...", self)
        settings_action.triggered.connect(self.open_settings)
        toolbar.addAction(settings_action)

    def _group(self, title: str, items: list[tuple[QWidget, str]]) -> QGroupBox:
        group = QGroupBox(title)
        layout = QGridLayout(group)
        for col, (widget, text) in enumerate(items):
            layout.addWidget(_labeled(widget, text), 0, col)
        return group

    def _add(self, name: str, widget: QWidget) -> QWidget:
        self.widgets[name] = widget
        return widget

    def _build_sliders_tab(self) -> QWidget:
        theme = self._theme
        on_change: Callable[[str, Normal], None] = self._on_user_change
        page = QWidget()
        layout = QVBoxLayout(page)

        gain = self._param("gain", LogDBRange(-12.0, 12.0, 0.5), 0.0, 0.0, " dB")
        level = self._param("level", FloatRange(0.0, 1.0), 0.75, 0.75)
        pan = self._param("pan", FloatRange.bipolar(), 0.0, 0.0)
        voices = self._param("voices", IntRange(1, 8), 4, 4)

        db_ticks = TickMarkGroup.subdivided(1, 1, 1, Tier.TWO)
        db_text = TextMarkGroup.min_max_and_center("-12", "+12", "0")
        layout.addWidget(self._group("Vertical", [
            (self._add("gain", VSlider("gain", gain, on_change, ThemedSliderStyleSheet(theme),
                                       db_ticks, db_text, self._config)), "Gain"),
            (self._add("level", VSlider("level", level, on_change, ThemedRectSliderStyleSheet(theme),
                                        TickMarkGroup.evenly_spaced(5, Tier.TWO),
                                        config=self._config)), "Level"),
        ]))
        layout.addWidget(self._group("Horizontal", [
            (self._add("pan", HSlider("pan", pan, on_change, RectBipolarSliderStyleSheet(),
                                      TickMarkGroup.center(Tier.ONE),
                                      TextMarkGroup.min_max_and_center("L", "R", "C"),
                                      self._config)), "Pan"),
            (self._add("voices", HSlider("voices", voices, on_change, ThemedSliderStyleSheet(theme),
                                         TickMarkGroup.evenly_spaced(8, Tier.TWO),
                                         TextMarkGroup.evenly_spaced([str(i) for i in range(1, 9)]),
                                         self._config)), "Voices"),
        ]))
        return page

    def _build_knobs_tab(self) -> QWidget:
        theme = self._theme
        on_change = self._on_user_change
        page = QWidget()
        layout = QVBoxLayout(page)

        cutoff = self._param("cutoff", FreqRange(20.0, 20000.0), 1000.0, 1000.0, " Hz")
        cutoff_mod = self._param("cutoff_mod", FloatRange.bipolar(), 0.25, 0.0)
        resonance = self._param("resonance", FloatRange(0.0, 1.0), 0.3, 0.0)
        balance = self._param("balance", FloatRange.bipolar(), 0.0, 0.0)
        steps = self._param("steps", IntRange(0, 10), 5, 5)

        cutoff_knob = self._add("cutoff", Knob(
            "cutoff", cutoff, on_change, ThemedKnobStyleSheet(theme),
            tick_marks=TickMarkGroup.subdivided(1, 3, 0, Tier.ONE),
            text_marks=TextMarkGroup.min_max_and_center("20", "20k", "640"),
            config=self._config,
        ))
        mod_input = self._add("cutoff_mod", ModRangeInput("cutoff_mod", cutoff_mod, on_change,
                                                          config=self._config))
        layout.addWidget(self._group("Knobs", [
            (cutoff_knob, "Cutoff"),
            (mod_input, "Mod"),
            (self._add("resonance", Knob("resonance", resonance, on_change,
                                         ThemedArcKnobStyleSheet(theme), config=self._config)), "Resonance"),
            (self._add("balance", Knob("balance", balance, on_change,
                                       ThemedArcKnobStyleSheet(theme, bipolar=True),
                                       config=self._config)), "Balance"),
            (self._add("steps", Knob("steps", steps, on_change, ThemedKnobStyleSheet(theme),
                                     tick_marks=TickMarkGroup.evenly_spaced(11, Tier.TWO),
                                     config=self._config)), "Steps"),
        ]))
        self._update_cutoff_mod_range()
        layout.addStretch()
        return page

    def _build_pads_tab(self) -> QWidget:
        theme = self._theme
        on_change = self._on_user_change
        page = QWidget()
        layout = QHBoxLayout(page)

        x = self._param("pad_x", FloatRange.bipolar(), 0.0, 0.0)
        y = self._param("pad_y", FloatRange.bipolar(), 0.0, 0.0)
        attack = self._param("attack", FloatRange(0.0, 1.0), 0.5, 0.5)
        release = self._param("release", FloatRange(0.0, 1.0), 0.5, 0.5)

        layout.addWidget(self._group("XY Pad", [
            (self._add("pad", XYPad("pad_x", x, "pad_y", y, on_change, ThemedXYPadStyleSheet(theme))),
             "X / Y"),
        ]), stretch=2)
        layout.addWidget(self._group("Ramps", [
            (self._add("attack", Ramp("attack", attack, on_change, RampDirection.UP,
                                      ThemedRampStyleSheet(theme), self._config)), "Attack"),
            (self._add("release", Ramp("release", release, on_change, RampDirection.DOWN,
                                       ThemedRampStyleSheet(theme), self._config)), "Release"),
        ]), stretch=1)
        return page

    def _build_meters_tab(self) -> QWidget:
        page = QWidget()
        layout = QHBoxLayout(page)

        db_state = DBMeterState.stereo(TierPositions(
            clipping=METER_DB_RANGE.to_normal(0.0),
            med=METER_DB_RANGE.to_normal(-12.0),
            high=METER_DB_RANGE.to_normal(-3.0),
        ))
        db_ticks = TickMarkGroup.from_normalized(
            [(METER_DB_RANGE.to_normal(db), Tier.ONE if db == 0.0 else Tier.TWO)
             for db in (-48.0, -24.0, -12.0, -6.0, -3.0, 0.0)]
        )
        self.db_meter = DBMeter(db_state, Orientation.VERTICAL, ThemedDBMeterStyleSheet(self._theme),
                                db_ticks)
        self.reduction_meter = ReductionMeter(ReductionMeterState(), Orientation.VERTICAL,
                                              tick_marks=TickMarkGroup.evenly_spaced(5, Tier.TWO))
        self.phase_meter = PhaseMeter(Orientation.HORIZONTAL,
                                      tick_marks=TickMarkGroup.min_max_and_center(Tier.TWO, Tier.ONE))

        layout.addWidget(self._group("Level", [
            (self.db_meter, "dB"),
            (self.reduction_meter, "GR"),
        ]))
        layout.addWidget(self._group("Phase", [(self.phase_meter, "-1 / 0 / +1")]), stretch=1)
        return page

    # --- meters ---

    def _start_meters(self) -> None:
        self._source = open_meter_source(self._config, self._logger)
        detector = create_detector(self._config.meter_detector, self._source.sample_rate)
        self._feed = DBMeterFeed(self.db_meter.state, detector, self._source.sample_rate,
                                 METER_DB_RANGE, self._logger)
        self._meter_timer = QTimer(self)
        self._meter_timer.timeout.connect(self.tick_meters)
        self._meter_timer.start(self._config.meter_refresh_ms)

    def _restart_meters(self) -> None:
        self._stop_source()
        self._source = open_meter_source(self._config, self._logger)
        self._feed.set_detector(create_detector(self._config.meter_detector, self._source.sample_rate))
        self._feed.set_sample_rate(self._source.sample_rate)
        self._meter_timer.setInterval(self._config.meter_refresh_ms)

    def _stop_source(self) -> None:
        if isinstance(self._source, AudioInput):
            self._source.stop()

    def _read_frames(self) -> np.ndarray:
        if isinstance(self._source, AudioInput):
            return self._source.drain()
        n_frames = max(1, round(self._source.sample_rate * self._meter_timer.interval() / 1000.0))
        return self._source.read(n_frames)

    def tick_meters(self) -> None:
        frames = self._read_frames()
        if len(frames):
            self._feed.push_frames(frames)
            if frames.shape[1] > 1:
                self.phase_meter.set_normal(
                    correlation_to_normal(phase_correlation(frames[:, 0], frames[:, 1]))
                )
            self.reduction_meter.state.bar = Normal(reduction_normal(frames))
            self.reduction_meter.refresh()
        self._feed.update()
        self.db_meter.refresh()

    # --- settings ---

    def open_settings(self) -> None:
        dialog = SettingsDialog(self._config, self)
        if dialog.exec():
            self.apply_settings()

    def apply_settings(self) -> None:
        app = QApplication.instance()
        if app is not None:
            self._theme = apply_theme(app, self._config.theme)
            self._logger.general(f"Theme applied: {self._theme.name}")
            self._restyle()
        self._restart_meters()

    def _restyle(self) -> None:
        for widget in [*self.widgets.values(), self.db_meter]:
            widget.style_sheet = rethemed(widget.style_sheet, self._theme)
            widget.update()

    @property
    def theme(self) -> ThemeColors:
        return self._theme

    def closeEvent(self, event) -> None:  # noqa: N802
        self._meter_timer.stop()
        self._stop_source()
        super().closeEvent(event)
