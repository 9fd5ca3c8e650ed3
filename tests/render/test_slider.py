import pytest

from core.color import Color
from core.modulation_range import ModulationRange
from core.normal import Normal
from core.tick_marks import Tier, TickMarkGroup
from render.cache import MarkCaches
from render.primitives import Cached, Group, Image, Point, Quad, Rect
from render.slider import draw_h_slider, draw_v_slider
from style import default_colors
from style.slider import (
    RectBipolarSliderStyleSheet,
    RectSliderStyleSheet,
    SliderStyleSheet,
    TextureAppearance,
)

V_BOUNDS = Rect(0, 0, 20, 100)
H_BOUNDS = Rect(0, 0, 100, 20)


def _v(normal, sheet=None, cursor=None, dragging=False, caches=None, **kwargs):
    return draw_v_slider(V_BOUNDS, cursor, Normal(normal), dragging, sheet or SliderStyleSheet(),
                         caches or MarkCaches(), **kwargs)


def test_classic_handle_at_top_when_max():
    rail_1, rail_2, handle, notch = _v(1.0).children
    assert rail_1.rect == Rect(9, 0, 1, 100)
    assert rail_2.rect == Rect(10, 0, 1, 100)
    assert handle.rect == Rect(0, 0, 20, 34)
    assert notch.rect == Rect(0, 15, 20, 4)


def test_classic_handle_at_bottom_when_min():
    handle = _v(0.0).children[2]
    assert handle.rect == Rect(0, 66, 20, 34)


def test_classic_handle_colour_follows_interaction():
    assert _v(0.5).children[2].fill == default_colors.LIGHT_BACK
    assert _v(0.5, cursor=Point(5, 5)).children[2].fill == default_colors.LIGHT_BACK_HOVER
    assert _v(0.5, dragging=True).children[2].fill == default_colors.LIGHT_BACK_DRAG


def test_rect_vertical_fill_below_handle():
    back, filled, handle = _v(0.5, RectSliderStyleSheet()).children
    assert back.rect == V_BOUNDS
    assert filled == Quad(Rect(0, 52, 20, 48), default_colors.FILLED, 2.0, 1.0, Color.TRANSPARENT)
    assert handle.rect == Rect(0, 47, 20, 6)


def test_rect_mod_range_strip_outside_track():
    mod = ModulationRange.new(0.25, 0.75)
    children = _v(0.5, RectSliderStyleSheet(), mod_range=mod).children
    strip = children[3]
    assert isinstance(strip, Group)
    assert strip.children[0].rect == Rect(22, 25, 3, 50)
    assert strip.children[0].fill == default_colors.MOD_RANGE_FILLED


def test_inverted_mod_range_uses_inverse_colour():
    mod = ModulationRange.new(0.75, 0.25)
    strip = _v(0.5, RectSliderStyleSheet(), mod_range=mod).children[3]
    assert strip.children[0].fill == default_colors.MOD_RANGE_FILLED_INVERSE


def test_hidden_mod_range_draws_nothing():
    mod = ModulationRange(Normal(0.2), Normal(0.8), visible=False)
    assert len(_v(0.5, RectSliderStyleSheet(), mod_range=mod).children) == 3


def test_bipolar_centre_has_no_fill():
    out = draw_h_slider(H_BOUNDS, None, Normal.CENTER, False, RectBipolarSliderStyleSheet(), MarkCaches())
    back, handle = out.children
    assert handle.rect == Rect(47, 0, 6, 20)
    assert handle.fill == default_colors.BORDER


def test_bipolar_low_fills_toward_centre():
    out = draw_h_slider(H_BOUNDS, None, Normal(0.25), False, RectBipolarSliderStyleSheet(), MarkCaches())
    back, filled, handle = out.children
    assert filled.rect == Rect(29, 0, 23, 20)
    assert filled.fill == default_colors.FILLED_INVERSE
    assert handle.fill == default_colors.FILLED_INVERSE


def test_tick_marks_are_cached_between_draws():
    caches = MarkCaches()
    ticks = TickMarkGroup.center(Tier.ONE)
    first = _v(0.2, caches=caches, tick_marks=ticks).children[0]
    second = _v(0.9, caches=caches, tick_marks=ticks).children[0]
    assert isinstance(first, Cached)
    assert first is second


class _TextureSheet(SliderStyleSheet):
    def active(self):
        return TextureAppearance("handle.png", Rect(-10, -5, 20, 10), 10)


def test_texture_handle_is_an_image():
    image = _v(1.0, _TextureSheet()).children[2]
    assert image == Image("handle.png", Rect(0, 0, 20, 10))


class _BrokenSheet(SliderStyleSheet):
    def active(self):
        return object()


def test_unknown_appearance_raises():
    with pytest.raises(TypeError):
        _v(0.5, _BrokenSheet())
