from __future__ import annotations
from datetime import datetime
from PyQt6.QtWidgets import (
    QApplication, QComboBox, QHBoxLayout, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget,
)
from PyQt6.QtGui import QFont
from PyQt6.QtCore import QMetaObject, Qt, Q_ARG

from core.logger import CATEGORIES


def format_line(category: str, message: str, when: datetime | None = None) -> str:
    timestamp = (when or datetime.now()).strftime("%H:%M:%S.%f")[:-3]
    return f"[{timestamp}] [{category}] {message}"


class LogPanel(QWidget):
    """Scrolling log view fed by ``AppLogger.message_logged``.

    The category filter only affects lines that arrive after it changes.
    """

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.log_text = QPlainTextEdit()
        self.log_text.setReadOnly(True)
        self.log_text.setFont(QFont("Courier", 10))
        self.log_text.setMaximumBlockCount(5000)
        layout.addWidget(self.log_text)

        btn_row = QHBoxLayout()
        self.filter_combo = QComboBox()
        self.filter_combo.addItem("All", None)
        for category in CATEGORIES:
            self.filter_combo.addItem(category.title(), category)
        self.copy_btn = QPushButton("Copy Log")
        self.copy_btn.clicked.connect(self._copy_to_clipboard)
        self.clear_btn = QPushButton("Clear")
        self.clear_btn.clicked.connect(self.log_text.clear)
        btn_row.addWidget(self.filter_combo)
        btn_row.addStretch()
        btn_row.addWidget(self.clear_btn)
        btn_row.addWidget(self.copy_btn)
        layout.addLayout(btn_row)

    @property
    def category_filter(self) -> str | None:
        return self.filter_combo.currentData()

    def set_category_filter(self, category: str | None) -> None:
        idx = self.filter_combo.findData(category)
        if idx >= 0:
            self.filter_combo.setCurrentIndex(idx)

    def append_message(self, category: str, message: str) -> None:
        wanted = self.category_filter
        if wanted is not None and category != wanted:
            return
        QMetaObject.invokeMethod(
            self.log_text, "appendPlainText",
            Qt.ConnectionType.QueuedConnection,
            Q_ARG(str, format_line(category, message)),
        )

    def _copy_to_clipboard(self) -> None:
        clipboard = QApplication.clipboard()
        if clipboard:
            clipboard.setText(self.log_text.toPlainText())
