import sys
import pytest
from PyQt6.QtWidgets import QApplication

@pytest.fixture(scope="module")
def app():
    return QApplication.instance() or QApplication(sys.argv)


from core.logger import CATEGORIES, AppLogger


def test_logger_emits_messages(app):
    logger = AppLogger()
    received = []
    logger.message_logged.connect(lambda cat, msg: received.append((cat, msg)))
    logger.log("METER", "Detector reconfigured for 48000 Hz")
    assert len(received) == 1
    assert received[0] == ("METER", "Detector reconfigured for 48000 Hz")


def test_logger_categories(app):
    logger = AppLogger()
    received = []
    logger.message_logged.connect(lambda cat, msg: received.append(cat))
    logger.input("gain = 0.00 dB")
    logger.render("rebuilt tick marks")
    logger.meter("Metering demo signal")
    logger.general("Ready")
    assert received == ["INPUT", "RENDER", "METER", "GENERAL"]
    assert tuple(received) == CATEGORIES


def test_logger_prints_to_stdout(app, capsys):
    AppLogger().general("hello")
    assert "[GENERAL] hello" in capsys.readouterr().out
