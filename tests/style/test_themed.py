from core.color import Color
from core.normal import Normal
from core.theme import THEMES
from render.cache import MarkCaches
from render.common import pick_appearance
from render.knob import draw_knob
from render.primitives import Point, Rect
from style.knob import ArcBipolarAppearance, ArcAppearance
from style.slider import ClassicAppearance, SliderStyleSheet
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

DARK = THEMES["dark"]
LIGHT = THEMES["light"]


def test_pick_appearance_prefers_dragging_over_hover():
    sheet = ThemedSliderStyleSheet(DARK)
    bounds = Rect(0, 0, 10, 10)
    assert pick_appearance(sheet, bounds, None, False) == sheet.active()
    assert pick_appearance(sheet, bounds, Point(5, 5), False) == sheet.hovered()
    assert pick_appearance(sheet, bounds, Point(50, 5), True) == sheet.dragging()


def test_slider_handle_uses_theme_surface():
    appearance = ThemedSliderStyleSheet(DARK).active()
    assert isinstance(appearance, ClassicAppearance)
    assert appearance.handle.color == Color.from_hex(DARK.widget_back)
    assert appearance.handle.notch_color == Color.from_hex(DARK.filled)


def test_hover_differs_from_active():
    sheet = ThemedRectSliderStyleSheet(LIGHT)
    assert sheet.hovered().back_color != sheet.active().back_color


def test_bipolar_arc_knob_has_both_fills():
    appearance = ThemedArcKnobStyleSheet(DARK, bipolar=True).active()
    assert isinstance(appearance, ArcBipolarAppearance)
    assert appearance.left_filled_color == Color.from_hex(DARK.filled_inverse)


def test_themed_bipolar_knob_draws():
    out = draw_knob(Rect(0, 0, 40, 40), None, Normal(0.2), False,
                    ThemedArcKnobStyleSheet(DARK, bipolar=True), MarkCaches())
    empty, filled = out.children[0].children
    assert filled.color == Color.from_hex(DARK.filled_inverse)


def test_rethemed_keeps_kind_and_switches_colours():
    for sheet in (ThemedSliderStyleSheet(DARK), ThemedRectSliderStyleSheet(DARK),
                  ThemedKnobStyleSheet(DARK), ThemedXYPadStyleSheet(DARK),
                  ThemedRampStyleSheet(DARK), ThemedDBMeterStyleSheet(DARK)):
        fresh = rethemed(sheet, LIGHT)
        assert type(fresh) is type(sheet)
        assert fresh.theme is LIGHT


def test_rethemed_arc_knob_keeps_polarity():
    fresh = rethemed(ThemedArcKnobStyleSheet(DARK, bipolar=True), LIGHT)
    assert fresh.bipolar
    assert isinstance(fresh.active(), ArcBipolarAppearance)
    plain = rethemed(ThemedArcKnobStyleSheet(DARK), LIGHT)
    assert isinstance(plain.active(), ArcAppearance)


def test_rethemed_passes_unthemed_sheets_through():
    sheet = SliderStyleSheet()
    assert rethemed(sheet, LIGHT) is sheet
