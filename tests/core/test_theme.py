from dataclasses import fields

from PyQt6.QtGui import QPalette
from PyQt6.QtWidgets import QApplication

from core.color import Color
from core.theme import (
    THEMES,
    ThemeColors,
    apply_theme,
    detect_system_scheme,
    get_theme,
)


def _ensure_app():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def test_theme_colors_has_all_fields():
    expected = {
        "name", "window", "base", "alternate_base",
        "text", "placeholder",
        "highlight", "highlight_text",
        "button", "button_text",
        "mid", "dark", "light",
        "widget_back", "widget_border", "filled", "filled_inverse", "meter_back",
        "accent",
    }
    actual = {f.name for f in fields(ThemeColors)}
    assert expected == actual


def test_all_themes_defined():
    assert set(THEMES.keys()) == {"light", "dark", "studio", "ocean", "sunset"}


def test_each_theme_produces_valid_palette():
    app = _ensure_app()
    for name, colors in THEMES.items():
        apply_theme(app, name)
        palette = app.palette()
        assert isinstance(palette, QPalette)
        # Verify a few colours were actually set
        assert palette.color(QPalette.ColorRole.Window).isValid()
        assert palette.color(QPalette.ColorRole.Highlight).isValid()


def test_detect_system_scheme_returns_valid():
    _ensure_app()
    result = detect_system_scheme()
    assert result in ("light", "dark")


def test_get_theme_auto_resolves():
    _ensure_app()
    theme = get_theme("auto")
    assert isinstance(theme, ThemeColors)
    assert theme.name in ("light", "dark")


def test_get_theme_unknown_falls_back_to_dark():
    _ensure_app()
    theme = get_theme("nonexistent")
    assert theme.name == "dark"


def test_widget_surfaces_differ_light_dark():
    light = THEMES["light"]
    dark = THEMES["dark"]
    assert light.widget_back != dark.widget_back
    assert light.meter_back != dark.meter_back


def test_studio_theme_has_red_accent():
    studio = THEMES["studio"]
    assert studio.accent == "#cc0000"
    assert studio.filled == "#cc0000"


def test_every_theme_colour_parses():
    for colors in THEMES.values():
        for f in fields(ThemeColors):
            if f.name != "name":
                Color.from_hex(getattr(colors, f.name))
