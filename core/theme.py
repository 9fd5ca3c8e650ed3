from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication


@dataclass
class ThemeColors:
    name: str
    # Window/widget backgrounds
    window: str
    base: str
    alternate_base: str
    # Text
    text: str
    placeholder: str
    # Accents
    highlight: str
    highlight_text: str
    # Buttons
    button: str
    button_text: str
    # Borders/midtones
    mid: str
    dark: str
    light: str
    # Audio widget surfaces
    widget_back: str
    widget_border: str
    filled: str
    filled_inverse: str
    meter_back: str
    # Group box titles, log categories
    accent: str


THEMES: dict[str, ThemeColors] = {
    "light": ThemeColors(
        name="light",
        window="#f5f5f5",
        base="#ffffff",
        alternate_base="#e8e8e8",
        text="#1a1a1a",
        placeholder="#888888",
        highlight="#2563eb",
        highlight_text="#ffffff",
        button="#e0e0e0",
        button_text="#1a1a1a",
        mid="#c0c0c0",
        dark="#a0a0a0",
        light="#ffffff",
        widget_back="#f7f7f7",
        widget_border="#505050",
        filled="#2563eb",
        filled_inverse="#e0562b",
        meter_back="#737373",
        accent="#2563eb",
    ),
    "dark": ThemeColors(
        name="dark",
        window="#1e1e2e",
        base="#181825",
        alternate_base="#262637",
        text="#cdd6f4",
        placeholder="#6c7086",
        highlight="#2563eb",
        highlight_text="#ffffff",
        button="#313244",
        button_text="#cdd6f4",
        mid="#45475a",
        dark="#11111b",
        light="#45475a",
        widget_back="#313244",
        widget_border="#11111b",
        filled="#89b4fa",
        filled_inverse="#fab387",
        meter_back="#262637",
        accent="#89b4fa",
    ),
    "studio": ThemeColors(
        name="studio",
        window="#1a1a1a",
        base="#121212",
        alternate_base="#222222",
        text="#e0e0e0",
        placeholder="#666666",
        highlight="#cc0000",
        highlight_text="#ffffff",
        button="#2a2a2a",
        button_text="#e0e0e0",
        mid="#444444",
        dark="#0a0a0a",
        light="#444444",
        widget_back="#2a2a2a",
        widget_border="#0a0a0a",
        filled="#cc0000",
        filled_inverse="#ff9900",
        meter_back="#1f1f1f",
        accent="#cc0000",
    ),
    "ocean": ThemeColors(
        name="ocean",
        window="#0d1b2a",
        base="#0a1628",
        alternate_base="#132d4a",
        text="#c8dce8",
        placeholder="#4a6a80",
        highlight="#00b4d8",
        highlight_text="#ffffff",
        button="#1b3a5c",
        button_text="#c8dce8",
        mid="#2a4a6a",
        dark="#061018",
        light="#2a4a6a",
        widget_back="#1b3a5c",
        widget_border="#061018",
        filled="#00b4d8",
        filled_inverse="#90e0ef",
        meter_back="#132d4a",
        accent="#00b4d8",
    ),
    "sunset": ThemeColors(
        name="sunset",
        window="#2d1b00",
        base="#241600",
        alternate_base="#3a2400",
        text="#fde8c8",
        placeholder="#8a6a40",
        highlight="#f59e0b",
        highlight_text="#1a1000",
        button="#4a3000",
        button_text="#fde8c8",
        mid="#5a4020",
        dark="#1a1000",
        light="#5a4020",
        widget_back="#4a3000",
        widget_border="#1a1000",
        filled="#f59e0b",
        filled_inverse="#ef4444",
        meter_back="#3a2400",
        accent="#f59e0b",
    ),
}


def detect_system_scheme() -> str:
    """Return ``'light'`` or ``'dark'`` based on the OS preference."""
    app = QApplication.instance()
    if app is not None:
        try:
            scheme = app.styleHints().colorScheme()
            if scheme == Qt.ColorScheme.Dark:
                return "dark"
            if scheme == Qt.ColorScheme.Light:
                return "light"
        except AttributeError:
            pass
        lightness = app.palette().color(QPalette.ColorRole.Window).lightness()
        return "light" if lightness > 128 else "dark"
    return "dark"


def get_theme(name: str) -> ThemeColors:
    """Return the resolved theme (``'auto'`` maps to system preference)."""
    if name == "auto":
        name = detect_system_scheme()
    return THEMES.get(name, THEMES["dark"])


def apply_theme(app: QApplication, theme_name: str) -> ThemeColors:
    """Apply the named theme to the application and return the resolved colours."""
    colors = get_theme(theme_name)

    app.setStyle("Fusion")

    palette = QPalette()
    _set = palette.setColor
    _set(QPalette.ColorRole.Window, QColor(colors.window))
    _set(QPalette.ColorRole.WindowText, QColor(colors.text))
    _set(QPalette.ColorRole.Base, QColor(colors.base))
    _set(QPalette.ColorRole.AlternateBase, QColor(colors.alternate_base))
    _set(QPalette.ColorRole.Text, QColor(colors.text))
    _set(QPalette.ColorRole.PlaceholderText, QColor(colors.placeholder))
    _set(QPalette.ColorRole.Highlight, QColor(colors.highlight))
    _set(QPalette.ColorRole.HighlightedText, QColor(colors.highlight_text))
    _set(QPalette.ColorRole.Button, QColor(colors.button))
    _set(QPalette.ColorRole.ButtonText, QColor(colors.button_text))
    _set(QPalette.ColorRole.Mid, QColor(colors.mid))
    _set(QPalette.ColorRole.Dark, QColor(colors.dark))
    _set(QPalette.ColorRole.Light, QColor(colors.light))

    _set(QPalette.ColorGroup.Disabled, QPalette.ColorRole.WindowText, QColor(colors.mid))
    _set(QPalette.ColorGroup.Disabled, QPalette.ColorRole.Text, QColor(colors.mid))

    app.setPalette(palette)

    accent = colors.accent
    mid = colors.mid
    app.setStyleSheet(f"""
        QGroupBox {{
            border: 1px solid {mid};
            border-radius: 4px;
            margin-top: 8px;
            padding-top: 4px;
        }}
        QGroupBox::title {{
            color: {accent};
            subcontrol-origin: margin;
            left: 8px;
            padding: 0 4px;
        }}
        QSplitter::handle {{
            background: {mid};
        }}
        QSplitter::handle:vertical {{
            height: 2px;
        }}
    """)
    return colors


def connect_system_theme_changed(app: QApplication, config, on_applied=None) -> None:
    """Re-apply theme when OS colour scheme changes (Qt 6.5+). No-op on older Qt."""
    def _reapply(_scheme) -> None:
        if config.theme != "auto":
            return
        colors = apply_theme(app, config.theme)
        if on_applied is not None:
            on_applied(colors)

    try:
        app.styleHints().colorSchemeChanged.connect(_reapply)
    except AttributeError:
        pass
