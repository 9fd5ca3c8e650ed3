"""Style sheets that follow the active application theme.

Each sheet takes a :class:`core.theme.ThemeColors` and maps its widget
accents onto the default appearances.
"""
from __future__ import annotations
from dataclasses import replace

from core.color import Color
from core.theme import ThemeColors
from style.knob import (
    ArcAppearance,
    ArcBipolarAppearance,
    ArcKnobStyleSheet,
    CircleAppearance,
    CircleNotch,
    KnobAppearance,
    KnobStyleSheet,
    LineNotch,
    ModRangeArcStyle,
)
from style.marks import LinearTextMarks, TextMarksStyle
from style.meters import DBMeterAppearance, DBMeterStyleSheet
from style.ramp import RampAppearance, RampStyleSheet
from style.slider import (
    ClassicAppearance,
    ClassicHandle,
    ClassicRail,
    RectAppearance,
    RectSliderStyleSheet,
    SliderAppearance,
    SliderStyleSheet,
)
from style.xy_pad import HandleCircle, XYPadAppearance, XYPadStyleSheet


def _c(value: str) -> Color:
    return Color.from_hex(value)


def _hover(color: Color) -> Color:
    """Nudge a surface colour toward mid grey."""
    return Color(
        color.r + (0.5 - color.r) * 0.08,
        color.g + (0.5 - color.g) * 0.08,
        color.b + (0.5 - color.b) * 0.08,
        color.a,
    )


class ThemedSliderStyleSheet(SliderStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        self.theme = theme

    def active(self) -> SliderAppearance:
        t = self.theme
        return ClassicAppearance(
            rail=ClassicRail(rail_colors=(_c(t.dark), _c(t.mid))),
            handle=ClassicHandle(
                color=_c(t.widget_back),
                notch_color=_c(t.filled),
                border_color=_c(t.widget_border),
            ),
        )

    def hovered(self) -> SliderAppearance:
        appearance = self.active()
        return replace(appearance, handle=replace(appearance.handle, color=_hover(appearance.handle.color)))

    def dragging(self) -> SliderAppearance:
        return self.hovered()

    def text_marks_style(self) -> LinearTextMarks | None:
        return LinearTextMarks(style=TextMarksStyle(color=_c(self.theme.text)))


class ThemedRectSliderStyleSheet(RectSliderStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        super().__init__(RectAppearance(
            back_color=_c(theme.widget_back),
            back_border_color=_c(theme.widget_border),
            filled_color=_c(theme.filled),
            handle_color=_c(theme.filled),
        ))
        self.theme = theme

    def hovered(self) -> SliderAppearance:
        return replace(self._appearance, back_color=_hover(self._appearance.back_color))

    def dragging(self) -> SliderAppearance:
        return self.hovered()

    def text_marks_style(self) -> LinearTextMarks | None:
        return LinearTextMarks(style=TextMarksStyle(color=_c(self.theme.text)))


class ThemedKnobStyleSheet(KnobStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        self.theme = theme

    def active(self) -> KnobAppearance:
        t = self.theme
        return CircleAppearance(
            color=_c(t.widget_back),
            border_color=_c(t.widget_border),
            notch=CircleNotch(color=_c(t.filled)),
        )

    def hovered(self) -> KnobAppearance:
        appearance = self.active()
        return replace(appearance, color=_hover(appearance.color))

    def mod_range_arc_style(self) -> ModRangeArcStyle | None:
        return ModRangeArcStyle(
            filled_color=_c(self.theme.filled).with_alpha(0.6),
            filled_inverse_color=_c(self.theme.filled_inverse).with_alpha(0.6),
        )


class ThemedArcKnobStyleSheet(ArcKnobStyleSheet):
    def __init__(self, theme: ThemeColors, bipolar: bool = False) -> None:
        notch = LineNotch(color=_c(theme.text))
        if bipolar:
            appearance = ArcBipolarAppearance(
                empty_color=_c(theme.mid),
                left_filled_color=_c(theme.filled_inverse),
                right_filled_color=_c(theme.filled),
                notch_center=notch,
            )
        else:
            appearance = ArcAppearance(
                empty_color=_c(theme.mid),
                filled_color=_c(theme.filled),
                notch=notch,
            )
        self._appearance = appearance
        self.theme = theme
        self.bipolar = bipolar


class ThemedXYPadStyleSheet(XYPadStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        self.theme = theme

    def _handle(self, color: Color, diameter: float = 11.0) -> HandleCircle:
        return HandleCircle(color=color, diameter=diameter, border_color=_c(self.theme.widget_border))

    def active(self) -> XYPadAppearance:
        t = self.theme
        return XYPadAppearance(
            h_rail_color=_c(t.filled).with_alpha(0.8),
            v_rail_color=_c(t.filled).with_alpha(0.8),
            handle=self._handle(_c(t.widget_back)),
            back_color=_c(t.base),
            border_color=_c(t.widget_border),
            center_line_color=_c(t.mid).with_alpha(0.5),
        )

    def hovered(self) -> XYPadAppearance:
        return replace(self.active(), handle=self._handle(_hover(_c(self.theme.widget_back))))

    def dragging(self) -> XYPadAppearance:
        return replace(self.active(), handle=self._handle(_c(self.theme.filled), 9.0))


class ThemedRampStyleSheet(RampStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        self.theme = theme

    def active(self) -> RampAppearance:
        t = self.theme
        return RampAppearance(
            back_color=_c(t.widget_back),
            back_border_color=_c(t.widget_border),
            line_center_color=_c(t.text),
            line_up_color=_c(t.filled),
            line_down_color=_c(t.filled_inverse),
        )

    def hovered(self) -> RampAppearance:
        appearance = self.active()
        return replace(appearance, back_color=_hover(appearance.back_color))


class ThemedDBMeterStyleSheet(DBMeterStyleSheet):
    def __init__(self, theme: ThemeColors) -> None:
        self.theme = theme

    def active(self) -> DBMeterAppearance:
        t = self.theme
        return DBMeterAppearance(back_color=_c(t.meter_back), back_border_color=_c(t.dark))


def rethemed(style_sheet, theme: ThemeColors):
    """A style sheet of the same kind built for ``theme``; unthemed sheets pass through."""
    if isinstance(style_sheet, ThemedArcKnobStyleSheet):
        return ThemedArcKnobStyleSheet(theme, style_sheet.bipolar)
    if getattr(style_sheet, "theme", None) is None:
        return style_sheet
    return type(style_sheet)(theme)
