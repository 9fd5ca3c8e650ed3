import numpy as np
import pytest

from audio.detectors import (
    DBMeterFeed,
    PeakDetector,
    PeakRmsDetector,
    RMS_BLOCK_SIZE,
    create_detector,
)
from core.math_utils import amplitude_to_db
from core.meter_state import DBMeterState
from core.ranges import FloatRange


def test_create_detector_by_name():
    assert isinstance(create_detector("peak", 44100), PeakDetector)
    assert isinstance(create_detector("peak_rms", 44100), PeakRmsDetector)
    with pytest.raises(ValueError):
        create_detector("loudness", 44100)


def test_peak_detector_consumes_everything():
    out = PeakDetector().process(0, np.array([0.5, -1.0, 0.25], dtype=np.float32))
    assert out.peak_db == 0.0
    assert out.bar_db == 0.0
    assert out.n_samples_to_discard == 3


def test_peak_rms_window_at_44100():
    detector = PeakRmsDetector(44100)
    assert detector.n_blocks == 26
    assert detector.window_size == 26 * RMS_BLOCK_SIZE


def test_partial_block_stays_pending():
    detector = PeakRmsDetector(44100)
    out = detector.process(0, np.zeros(1000, dtype=np.float32))
    assert out.n_samples_to_discard == RMS_BLOCK_SIZE
    assert out.bar_db is None


def test_peak_only_looks_at_new_samples():
    detector = PeakRmsDetector(44100)
    detector.process(0, np.concatenate([np.ones(512), np.zeros(488)]).astype(np.float32))
    # the 488 pending zeros come back with 100 new samples at half scale
    pending = np.concatenate([np.zeros(488), np.full(100, 0.5)]).astype(np.float32)
    out = detector.process(0, pending)
    assert out.peak_db == pytest.approx(amplitude_to_db(0.5))


def test_no_new_samples_leaves_peak_alone():
    detector = PeakRmsDetector(44100)
    detector.process(0, np.concatenate([np.ones(512), np.zeros(100)]).astype(np.float32))
    # only the 100 pending samples come back, nothing new arrived
    out = detector.process(0, np.zeros(100, dtype=np.float32))
    assert out.peak_db is None
    assert out.n_samples_to_discard == 0


def test_feed_keeps_peak_when_a_tick_brings_nothing_new():
    state = DBMeterState()
    feed = DBMeterFeed(state, PeakRmsDetector(), 44100)
    feed.push(np.full(600, 0.5, dtype=np.float32))
    feed.update()
    peak = state.left.peak
    assert peak.value > 0.0
    feed.update()
    assert state.left.peak == peak


def test_rms_reported_once_window_is_full():
    detector = PeakRmsDetector(44100)
    samples = np.full(detector.window_size, 0.5, dtype=np.float32)
    out = detector.process(0, samples)
    assert out.bar_db == pytest.approx(amplitude_to_db(0.5), abs=1e-4)
    assert out.n_samples_to_discard == detector.window_size


def test_channels_are_independent():
    detector = PeakRmsDetector(44100)
    detector.process(0, np.full(detector.window_size, 0.5, dtype=np.float32))
    assert detector.process(1, np.zeros(512, dtype=np.float32)).bar_db is None


def test_clear_empties_the_window():
    detector = PeakRmsDetector(44100)
    detector.process(0, np.full(detector.window_size, 0.5, dtype=np.float32))
    detector.clear()
    assert detector.process(0, np.full(512, 0.5, dtype=np.float32)).bar_db is None


def test_feed_writes_stereo_state():
    state = DBMeterState.stereo()
    feed = DBMeterFeed(state, PeakDetector(), 44100, db_range=FloatRange(-60.0, 0.0))
    frames = np.column_stack([np.full(64, 1.0), np.full(64, 0.1)])
    feed.push_frames(frames)
    feed.update()
    assert state.left.normal.value == pytest.approx(1.0)
    assert state.right.peak.value == pytest.approx(40.0 / 60.0)
    assert feed.pending(0) == 0


def test_feed_mono_drops_right_channel():
    state = DBMeterState()
    feed = DBMeterFeed(state, PeakDetector(), 44100)
    feed.push(np.zeros(10), np.ones(10))
    feed.update()
    assert feed.pending(1) == 0
    assert state.right is None


def test_single_column_feeds_both_bars():
    state = DBMeterState.stereo()
    feed = DBMeterFeed(state, PeakDetector(), 44100, db_range=FloatRange(-60.0, 0.0))
    feed.push_frames(np.full((32, 1), 1.0))
    feed.update()
    assert state.right.normal.value == pytest.approx(1.0)


def test_sample_rate_change_resets_pending():
    feed = DBMeterFeed(DBMeterState(), PeakRmsDetector(), 44100)
    feed.push(np.zeros(100))
    feed.set_sample_rate(48000)
    assert feed.pending(0) == 0
    assert feed.detector.sample_rate == 48000
