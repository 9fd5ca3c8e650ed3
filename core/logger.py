from __future__ import annotations
from PyQt6.QtCore import QObject, pyqtSignal

CATEGORIES = ("INPUT", "RENDER", "METER", "GENERAL")


class AppLogger(QObject):
    message_logged = pyqtSignal(str, str)  # category, message

    def log(self, category: str, message: str) -> None:
        print(f"[{category}] {message}", flush=True)
        self.message_logged.emit(category, message)

    def input(self, message: str) -> None:
        self.log("INPUT", message)

    def render(self, message: str) -> None:
        self.log("RENDER", message)

    def meter(self, message: str) -> None:
        self.log("METER", message)

    def general(self, message: str) -> None:
        self.log("GENERAL", message)
