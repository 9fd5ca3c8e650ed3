import signal
import sys
from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication
from core.config import AppConfig
from core.logger import AppLogger
from core.theme import apply_theme, connect_system_theme_changed
from ui.gallery_window import GalleryWindow


def main():
    app = QApplication(sys.argv)
    app.setApplicationName("Tone Widgets")
    font = app.font()
    font.setPointSize(11)
    app.setFont(font)

    config = AppConfig()
    logger = AppLogger()
    colors = apply_theme(app, config.theme)

    # Let Ctrl+C shut down cleanly. Qt's event loop blocks Python's signal
    # handling, so a timer ticks periodically to give Python a chance to run.
    signal.signal(signal.SIGINT, lambda *_: app.quit())
    timer = QTimer()
    timer.start(200)
    timer.timeout.connect(lambda: None)

    window = GalleryWindow(config=config, logger=logger)
    logger.general(f"Theme applied: {colors.name}")
    connect_system_theme_changed(app, config, on_applied=lambda _colors: window.apply_settings())
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
