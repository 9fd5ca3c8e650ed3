from dataclasses import replace

import pytest

from core.color import Color
from core.normal import Normal
from render.mod_range_input import draw_mod_range_input
from render.primitives import Line, Point, Quad, QuadraticCurve, Rect
from render.ramp import RampDirection, draw_ramp, ramp_curve
from render.xy_pad import draw_xy_pad
from style import default_colors
from style.mod_range_input import InvisibleModRangeInputStyleSheet, ModRangeInputStyleSheet
from style.ramp import RampAppearance
from style.xy_pad import HandleSquare, XYPadAppearance, XYPadStyleSheet

UP = Color.from_hex("#00ff00")
DOWN = Color.from_hex("#ff0000")
CENTER = Color.from_hex("#0000ff")
RAMP = RampAppearance(line_up_color=UP, line_down_color=DOWN, line_center_color=CENTER)


def test_xy_pad_layers():
    out = draw_xy_pad(Rect(0, 0, 100, 80), None, Normal(0.25), Normal(0.75), False, XYPadStyleSheet())
    back, h_center, v_center, h_rail, v_rail, handle = out.children
    assert back.rect == Rect(0, 0, 80, 80)
    assert h_center.rect == Rect(0, 40, 80, 1)
    assert v_center.rect == Rect(40, 0, 1, 80)
    assert h_rail.rect == Rect(0, 19, 80, 2)
    assert v_rail.rect == Rect(19, 0, 2, 80)
    assert handle.rect == Rect(14.5, 14.5, 11, 11)
    assert handle.border_radius == 5.5


def test_xy_pad_dragging_shrinks_handle():
    handle = draw_xy_pad(Rect(0, 0, 80, 80), None, Normal.CENTER, Normal.CENTER, True,
                         XYPadStyleSheet()).children[-1]
    assert handle.rect.width == 9.0
    assert handle.fill == default_colors.LIGHT_BACK_DRAG


class _SquarePad(XYPadStyleSheet):
    def active(self):
        return XYPadAppearance(handle=HandleSquare(), center_line_color=Color.TRANSPARENT, rail_width=0)


def test_xy_pad_square_handle_without_lines():
    back, handle = draw_xy_pad(Rect(0, 0, 80, 80), None, Normal.MIN, Normal.MIN, False,
                               _SquarePad()).children
    assert handle.rect == Rect(-5, 75, 10, 10)


def test_ramp_up_low_value_bows_toward_bottom_right():
    curve = ramp_curve(Rect(0, 0, 40, 20), Normal(0.25), RampDirection.UP, RAMP)
    assert isinstance(curve, QuadraticCurve)
    assert curve.start == Point(1, 19)
    assert curve.control == Point(20, 19)
    assert curve.end == Point(39, 1)
    assert curve.color == DOWN


def test_ramp_up_high_value_uses_up_colour():
    curve = ramp_curve(Rect(0, 0, 40, 20), Normal(0.75), RampDirection.UP, RAMP)
    assert curve.start == Point(39, 1)
    assert curve.control == Point(20, 1)
    assert curve.color == UP


@pytest.mark.parametrize("direction, start, end", [
    (RampDirection.UP, Point(1, 19), Point(39, 1)),
    (RampDirection.DOWN, Point(1, 1), Point(39, 19)),
])
def test_ramp_centre_is_a_straight_line(direction, start, end):
    line = ramp_curve(Rect(0, 0, 40, 20), Normal(0.48), direction, RAMP)
    assert line == Line(start, end, 2.0, CENTER)


def test_ramp_down_low_value():
    curve = ramp_curve(Rect(0, 0, 40, 20), Normal(0.25), RampDirection.DOWN, RAMP)
    assert curve.start == Point(1, 1)
    assert curve.control == Point(20, 19)
    assert curve.color == DOWN


def test_draw_ramp_floors_bounds_and_hovers():
    back, _ = draw_ramp(Rect(0.6, 0.2, 40.9, 20.9), Point(5, 5), Normal.CENTER, RampDirection.UP,
                        False, _RampSheet()).children
    assert back.rect == Rect(0, 0, 40, 20)
    assert back.fill == default_colors.RAMP_BACK_HOVER


class _RampSheet:
    def active(self):
        return RAMP

    def hovered(self):
        return replace(RAMP, back_color=default_colors.RAMP_BACK_HOVER)

    def dragging(self):
        return self.hovered()


def test_mod_range_input_is_a_round_dot():
    dot = draw_mod_range_input(Rect(0, 0, 12.7, 12.7), None, False, ModRangeInputStyleSheet())
    assert dot == Quad(Rect(0, 0, 12, 12), default_colors.LIGHT_BACK, 6.0, 1.0, default_colors.BORDER)


def test_mod_range_input_hover_colour():
    dot = draw_mod_range_input(Rect(0, 0, 12, 12), Point(3, 3), False, ModRangeInputStyleSheet())
    assert dot.fill == default_colors.KNOB_BACK_HOVER


def test_invisible_mod_range_input_draws_nothing():
    assert draw_mod_range_input(Rect(0, 0, 12, 12), None, False,
                                InvisibleModRangeInputStyleSheet()) is None
