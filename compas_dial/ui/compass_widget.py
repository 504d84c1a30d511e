# File: compas_dial/ui/compass_widget.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Widget Qt del dial: rumbo + señales + pintado cuadrado.
# Notes: Adaptador fino. La geometría vive en compas_dial.render.dial.

from __future__ import annotations

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QSizePolicy, QWidget

from compas_dial.core.bearing import BearingModel
from compas_dial.core.style import DialStyle
from compas_dial.render.dial import CompassRenderer, measure_square
from compas_dial.render.metrics import QtTextMetrics, style_font
from compas_dial.render.primitives import PrimitiveStream
from compas_dial.render.qt_painter import paint_stream
from compas_dial.utils.log import get_logger

log = get_logger(__name__)


class CompassWidget(QWidget):
    """Dial de brújula. El rumbo lo fija el host (sensor, slider, etc.)."""

    bearing_changed = Signal(float)  # grados, sin normalizar
    accessibility_text_changed = Signal(str)  # solo si el widget está visible

    def __init__(self, style: DialStyle | None = None, bearing: float = 0.0, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setFocusPolicy(Qt.StrongFocus)

        sp = QSizePolicy(QSizePolicy.Preferred, QSizePolicy.Preferred)
        sp.setHeightForWidth(True)
        self.setSizePolicy(sp)

        self._style = style or DialStyle()
        self._font = style_font(self._style)
        self._renderer = CompassRenderer(self._style, QtTextMetrics(self._font))
        self._model = BearingModel(bearing)

    def style_config(self) -> DialStyle:
        return self._style

    def bearing(self) -> float:
        return self._model.bearing

    def set_bearing(self, value: float) -> None:
        change = self._model.set_bearing(value, visible=self.isVisible())
        if change.redraw:
            self.update()
        self.bearing_changed.emit(change.bearing)
        if change.notification is not None:
            self.setAccessibleDescription(change.notification)
            self.accessibility_text_changed.emit(change.notification)

    def current_stream(self) -> PrimitiveStream:
        """Pasada de render para el tamaño actual (lado = min(ancho, alto))."""
        w, _ = measure_square(self.width(), self.height())
        return self._renderer.render(self._model.bearing, w, w)

    # ------------------------------
    # QWidget
    # ------------------------------
    def sizeHint(self) -> QSize:
        d, _ = measure_square(None, None)
        return QSize(d, d)

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, w: int) -> int:
        return w

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        try:
            paint_stream(painter, self.current_stream(), self._font)
        finally:
            painter.end()
