"""Qt widgets around the renderers.

Each widget keeps its own state, asks a ``draw_*`` function for a primitive
tree on every paint and hands it to :func:`ui.painter.paint_primitive`.
Interactive edits call ``on_change(param_name, normal)``; ``set_normal`` and
friends never do, so hosts can push values without feedback loops.
"""
from __future__ import annotations
from typing import Callable

from PyQt6.QtCore import Qt as QtCore_Qt
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QWidget

from core.config import AppConfig
from core.meter_state import DBMeterState, PhaseTierPositions, ReductionMeterState
from core.modulation_range import ModulationRange
from core.normal import Normal
from core.param import Param
from core.text_marks import TextMarkGroup
from core.tick_marks import TickMarkGroup
from render.cache import MarkCaches
from render.knob import draw_knob
from render.meters import Orientation, draw_db_meter, draw_phase_meter, draw_reduction_meter
from render.mod_range_input import draw_mod_range_input
from render.primitives import Point, Primitive, Rect
from render.ramp import RampDirection, draw_ramp
from render.slider import draw_h_slider, draw_v_slider
from render.xy_pad import draw_xy_pad
from style.knob import KnobStyleSheet
from style.meters import DBMeterStyleSheet, PhaseMeterStyleSheet, ReductionMeterStyleSheet
from style.mod_range_input import ModRangeInputStyleSheet
from style.ramp import RampStyleSheet
from style.slider import SliderStyleSheet
from style.xy_pad import XYPadStyleSheet
from ui.painter import paint_primitive

OnChange = Callable[[str, Normal], None]

_WHEEL_STEP = 120
_SCALARS = {"drag_scalar": 0.00385, "wheel_scalar": 0.01, "modifier_scalar": 0.02}


class PrimitiveWidget(QWidget):
    """Paints whatever :meth:`primitive` returns inside the margins."""

    margins: tuple[int, int, int, int] = (0, 0, 0, 0)  # left, top, right, bottom

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.caches = MarkCaches()

    def content_bounds(self) -> Rect:
        left, top, right, bottom = self.margins
        return Rect(left, top, max(0, self.width() - left - right), max(0, self.height() - top - bottom))

    def primitive(self) -> Primitive | None:
        raise NotImplementedError

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        paint_primitive(painter, self.primitive())
        painter.end()


class NormalWidget(PrimitiveWidget):
    """Base for widgets that edit one :class:`Param` by dragging.

    Vertical drag (or horizontal, for horizontal widgets) moves the value by
    ``drag_scalar`` per pixel; the wheel moves it by ``wheel_scalar`` per
    notch. Holding Shift multiplies either by ``modifier_scalar`` for fine
    adjustment. Double-click resets to the param's default.
    """

    horizontal = False
    scalar_factor = 1.0

    def __init__(
        self,
        param_name: str,
        param: Param,
        on_change: OnChange,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.param_name = param_name
        self.param = param
        self._on_change = on_change
        self._config = config
        self._cursor: Point | None = None
        self._drag_start_pos: float | None = None
        self._drag_start_normal: float | None = None
        self.setMouseTracking(True)
        self.setFocusPolicy(QtCore_Qt.FocusPolicy.WheelFocus)

    @property
    def normal(self) -> Normal:
        return self.param.normal

    @property
    def is_dragging(self) -> bool:
        return self._drag_start_pos is not None

    def set_normal(self, normal: Normal | float) -> None:
        normal = Normal.coerce(normal)
        if normal != self.param.normal:
            self.param.update(normal)
            self.update()

    def _set_normal_interactive(self, normal: Normal | float) -> None:
        normal = Normal.coerce(normal)
        if normal != self.param.normal:
            self.param.update(normal)
            self.update()
            self._on_change(self.param_name, self.param.normal)

    def _scalar(self, name: str, fine: bool) -> float:
        source = self._config
        if source is None:
            value, modifier = _SCALARS[name], _SCALARS["modifier_scalar"]
        else:
            value, modifier = getattr(source, name), source.modifier_scalar
        value *= self.scalar_factor
        return value * modifier if fine else value

    def _axis_pos(self, event) -> float:
        # Up and right both increase the value.
        pos = event.position()
        return pos.x() if self.horizontal else -pos.y()

    def _track_cursor(self, event) -> None:
        pos = event.position()
        self._cursor = Point(pos.x(), pos.y())

    # --- interaction ---

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() == QtCore_Qt.MouseButton.LeftButton:
            self._drag_start_pos = self._axis_pos(event)
            self._drag_start_normal = self.param.normal.value
            self.update()
            event.accept()

    def mouseMoveEvent(self, event) -> None:  # noqa: N802
        self._track_cursor(event)
        if self._drag_start_pos is not None:
            fine = bool(event.modifiers() & QtCore_Qt.KeyboardModifier.ShiftModifier)
            delta = (self._axis_pos(event) - self._drag_start_pos) * self._scalar("drag_scalar", fine)
            self._set_normal_interactive(self._drag_start_normal + delta)
        self.update()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:  # noqa: N802
        self._drag_start_pos = None
        self._drag_start_normal = None
        self.update()
        event.accept()

    def mouseDoubleClickEvent(self, event) -> None:  # noqa: N802
        if event.button() == QtCore_Qt.MouseButton.LeftButton:
            self._set_normal_interactive(self.param.default)
            event.accept()

    def wheelEvent(self, event) -> None:  # noqa: N802
        fine = bool(event.modifiers() & QtCore_Qt.KeyboardModifier.ShiftModifier)
        steps = event.angleDelta().y() / _WHEEL_STEP
        if steps:
            self._set_normal_interactive(self.param.normal.value + steps * self._scalar("wheel_scalar", fine))
        event.accept()

    def leaveEvent(self, event) -> None:  # noqa: N802
        self._cursor = None
        self.update()


class VSlider(NormalWidget):
    margins = (30, 8, 30, 8)

    def __init__(
        self,
        param_name: str,
        param: Param,
        on_change: OnChange,
        style_sheet: SliderStyleSheet | None = None,
        tick_marks: TickMarkGroup | None = None,
        text_marks: TextMarkGroup | None = None,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(param_name, param, on_change, config, parent)
        self.style_sheet = style_sheet or SliderStyleSheet()
        self.tick_marks = tick_marks
        self.text_marks = text_marks
        self.mod_range: ModulationRange | None = None
        self.mod_range_2: ModulationRange | None = None
        self.setMinimumSize(74, 160)

    def set_mod_range(self, mod_range: ModulationRange | None,
                      mod_range_2: ModulationRange | None = None) -> None:
        self.mod_range = mod_range
        self.mod_range_2 = mod_range_2
        self.update()

    def _draw(self):
        return draw_v_slider

    def primitive(self) -> Primitive | None:
        return self._draw()(
            self.content_bounds(), self._cursor, self.param.normal, self.is_dragging,
            self.style_sheet, self.caches, self.mod_range, self.mod_range_2,
            self.tick_marks, self.text_marks,
        )


class HSlider(VSlider):
    horizontal = True
    margins = (8, 22, 8, 22)

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.setMinimumSize(160, 60)

    def _draw(self):
        return draw_h_slider


class Knob(NormalWidget):
    margins = (24, 24, 24, 24)

    def __init__(
        self,
        param_name: str,
        param: Param,
        on_change: OnChange,
        style_sheet: KnobStyleSheet | None = None,
        bipolar_center: Normal | None = None,
        tick_marks: TickMarkGroup | None = None,
        text_marks: TextMarkGroup | None = None,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(param_name, param, on_change, config, parent)
        self.style_sheet = style_sheet or KnobStyleSheet()
        self.bipolar_center = bipolar_center
        self.tick_marks = tick_marks
        self.text_marks = text_marks
        self.mod_range: ModulationRange | None = None
        self.mod_range_2: ModulationRange | None = None
        self.setMinimumSize(90, 90)

    def set_mod_range(self, mod_range: ModulationRange | None,
                      mod_range_2: ModulationRange | None = None) -> None:
        self.mod_range = mod_range
        self.mod_range_2 = mod_range_2
        self.update()

    def primitive(self) -> Primitive | None:
        return draw_knob(
            self.content_bounds(), self._cursor, self.param.normal, self.is_dragging,
            self.style_sheet, self.caches, self.bipolar_center,
            self.mod_range, self.mod_range_2, self.tick_marks, self.text_marks,
        )


class Ramp(NormalWidget):
    margins = (1, 1, 1, 1)

    def __init__(
        self,
        param_name: str,
        param: Param,
        on_change: OnChange,
        direction: RampDirection = RampDirection.UP,
        style_sheet: RampStyleSheet | None = None,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(param_name, param, on_change, config, parent)
        self.direction = direction
        self.style_sheet = style_sheet or RampStyleSheet()
        self.setMinimumSize(40, 24)

    def primitive(self) -> Primitive | None:
        return draw_ramp(self.content_bounds(), self._cursor, self.param.normal,
                         self.direction, self.is_dragging, self.style_sheet)


class ModRangeInput(NormalWidget):
    """Small drag handle that edits a modulation amount."""

    scalar_factor = 0.5

    def __init__(
        self,
        param_name: str,
        param: Param,
        on_change: OnChange,
        style_sheet: ModRangeInputStyleSheet | None = None,
        config: AppConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(param_name, param, on_change, config, parent)
        self.style_sheet = style_sheet or ModRangeInputStyleSheet()
        self.setFixedSize(12, 12)

    def primitive(self) -> Primitive | None:
        return draw_mod_range_input(self.content_bounds(), self._cursor, self.is_dragging, self.style_sheet)


class XYPad(PrimitiveWidget):
    """Two params edited together; the handle follows the cursor."""

    margins = (1, 1, 1, 1)

    def __init__(
        self,
        param_name_x: str,
        param_x: Param,
        param_name_y: str,
        param_y: Param,
        on_change: OnChange,
        style_sheet: XYPadStyleSheet | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.param_name_x = param_name_x
        self.param_x = param_x
        self.param_name_y = param_name_y
        self.param_y = param_y
        self._on_change = on_change
        self.style_sheet = style_sheet or XYPadStyleSheet()
        self._cursor: Point | None = None
        self._dragging = False
        self.setMouseTracking(True)
        self.setMinimumSize(120, 120)

    def set_normals(self, normal_x: Normal | float, normal_y: Normal | float) -> None:
        self.param_x.update(normal_x)
        self.param_y.update(normal_y)
        self.update()

    def _set_interactive(self, normal_x: Normal | float, normal_y: Normal | float) -> None:
        for name, param, value in ((self.param_name_x, self.param_x, normal_x),
                                   (self.param_name_y, self.param_y, normal_y)):
            value = Normal.coerce(value)
            if value != param.normal:
                param.update(value)
                self._on_change(name, param.normal)
        self.update()

    def _set_from_position(self, x: float, y: float) -> None:
        bounds = self.content_bounds()
        size = min(bounds.width, bounds.height)
        if size <= 0:
            return
        self._set_interactive((x - bounds.x) / size, 1.0 - (y - bounds.y) / size)

    def primitive(self) -> Primitive | None:
        return draw_xy_pad(self.content_bounds(), self._cursor, self.param_x.normal,
                           self.param_y.normal, self._dragging, self.style_sheet)

    def mousePressEvent(self, event) -> None:  # noqa: N802
        if event.button() == QtCore_Qt.MouseButton.LeftButton:
            self._dragging = True
            pos = event.position()
            self._set_from_position(pos.x(), pos.y())
            event.accept()

    def mouseMoveEvent(self, event) -> None:  # noqa: N802
        pos = event.position()
        self._cursor = Point(pos.x(), pos.y())
        if self._dragging:
            self._set_from_position(pos.x(), pos.y())
        self.update()
        event.accept()

    def mouseReleaseEvent(self, event) -> None:  # noqa: N802
        self._dragging = False
        self.update()
        event.accept()

    def mouseDoubleClickEvent(self, event) -> None:  # noqa: N802
        if event.button() == QtCore_Qt.MouseButton.LeftButton:
            self._set_interactive(self.param_x.default, self.param_y.default)
            event.accept()

    def leaveEvent(self, event) -> None:  # noqa: N802
        self._cursor = None
        self.update()


class DBMeter(PrimitiveWidget):
    """Read-only level meter; call :meth:`refresh` after changing ``state``."""

    def __init__(
        self,
        state: DBMeterState | None = None,
        orientation: Orientation = Orientation.VERTICAL,
        style_sheet: DBMeterStyleSheet | None = None,
        tick_marks: TickMarkGroup | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = state or DBMeterState.stereo()
        self.orientation = orientation
        self.style_sheet = style_sheet or DBMeterStyleSheet()
        self.tick_marks = tick_marks
        if orientation is Orientation.VERTICAL:
            self.margins = (8, 4, 8, 4)
            self.setMinimumSize(40, 160)
        else:
            self.margins = (4, 8, 4, 8)
            self.setMinimumSize(160, 40)

    def refresh(self) -> None:
        self.update()

    def primitive(self) -> Primitive | None:
        return draw_db_meter(self.content_bounds(), self.state, self.orientation,
                             self.style_sheet, self.caches, self.tick_marks)


class ReductionMeter(PrimitiveWidget):
    def __init__(
        self,
        state: ReductionMeterState | None = None,
        orientation: Orientation = Orientation.VERTICAL,
        style_sheet: ReductionMeterStyleSheet | None = None,
        tick_marks: TickMarkGroup | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = state or ReductionMeterState()
        self.orientation = orientation
        self.style_sheet = style_sheet or ReductionMeterStyleSheet()
        self.tick_marks = tick_marks
        if orientation is Orientation.VERTICAL:
            self.margins = (8, 4, 8, 4)
            self.setMinimumSize(30, 160)
        else:
            self.margins = (4, 8, 4, 8)
            self.setMinimumSize(160, 30)

    def refresh(self) -> None:
        self.update()

    def primitive(self) -> Primitive | None:
        return draw_reduction_meter(self.content_bounds(), self.state, self.orientation,
                                    self.style_sheet, self.caches, self.tick_marks)


class PhaseMeter(PrimitiveWidget):
    def __init__(
        self,
        orientation: Orientation = Orientation.HORIZONTAL,
        tiers: PhaseTierPositions | None = None,
        style_sheet: PhaseMeterStyleSheet | None = None,
        tick_marks: TickMarkGroup | None = None,
        text_marks: TextMarkGroup | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._normal = Normal.CENTER
        self.orientation = orientation
        self.tiers = tiers or PhaseTierPositions()
        self.style_sheet = style_sheet or PhaseMeterStyleSheet()
        self.tick_marks = tick_marks
        self.text_marks = text_marks
        if orientation is Orientation.HORIZONTAL:
            self.margins = (4, 8, 4, 8)
            self.setMinimumSize(160, 30)
        else:
            self.margins = (8, 4, 8, 4)
            self.setMinimumSize(30, 160)

    @property
    def normal(self) -> Normal:
        return self._normal

    def set_normal(self, normal: Normal | float) -> None:
        normal = Normal.coerce(normal)
        if normal != self._normal:
            self._normal = normal
            self.update()

    def primitive(self) -> Primitive | None:
        return draw_phase_meter(self.content_bounds(), self._normal, self.tiers, self.orientation,
                                self.style_sheet, self.caches, self.tick_marks, self.text_marks)
