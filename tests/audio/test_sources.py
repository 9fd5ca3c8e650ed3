import numpy as np
import pytest

from audio.sources import (
    AudioInput,
    DemoSignal,
    WavSource,
    correlation_to_normal,
    load_wav,
    phase_correlation,
    save_wav,
)


def test_demo_signal_is_stereo_and_continuous():
    demo = DemoSignal(sample_rate=1000)
    first = demo.read(100)
    second = demo.read(100)
    assert first.shape == (100, 2)
    whole = DemoSignal(sample_rate=1000).read(200)
    np.testing.assert_allclose(np.concatenate([first, second]), whole, atol=1e-6)


def test_phase_correlation_extremes(tone):
    samples = tone(100.0, 0.1, 8000)
    assert phase_correlation(samples, samples) == pytest.approx(1.0)
    assert phase_correlation(samples, -samples) == pytest.approx(-1.0)
    assert phase_correlation(np.zeros(10), np.zeros(10)) == 1.0


def test_correlation_to_normal():
    assert correlation_to_normal(-1.0) == 0.0
    assert correlation_to_normal(0.0) == 0.5
    assert correlation_to_normal(1.0) == 1.0


def test_wav_round_trip(tmp_path, tone):
    path = tmp_path / "tone.wav"
    samples = tone(440.0, 0.1, 8000, amplitude=0.5)
    save_wav(path, samples, 8000)
    frames, sr = load_wav(path)
    assert sr == 8000
    assert frames.shape == (800, 1)
    np.testing.assert_allclose(frames[:, 0], samples, atol=1e-3)


def test_wav_source_loops(tmp_path):
    path = tmp_path / "short.wav"
    save_wav(path, np.linspace(-0.5, 0.5, 10, dtype=np.float32), 8000)
    source = WavSource(path)
    block = source.read(15)
    assert block.shape == (15, 1)
    np.testing.assert_allclose(block[10:], block[:5])


def test_missing_wav_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        WavSource(tmp_path / "missing.wav")


def test_audio_input_not_running_initially():
    audio_in = AudioInput()
    assert audio_in.is_running is False
    assert audio_in.drain().shape == (0, 2)


def test_audio_input_collects_callback_blocks():
    audio_in = AudioInput(channels=2)
    audio_in._callback(np.ones((4, 2), dtype=np.float32), 4, None, None)
    audio_in._callback(np.zeros((3, 2), dtype=np.float32), 3, None, None)
    drained = audio_in.drain()
    assert drained.shape == (7, 2)
    assert audio_in.drain().shape == (0, 2)


def test_stop_without_start_is_harmless():
    AudioInput().stop()
