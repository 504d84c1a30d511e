# File: compas_dial/render/qt_painter.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Superficie Qt: reproduce un PrimitiveStream sobre QPainter / QImage / PNG.
# Notes: Render en hilo UI. El texto se dibuja en su marco rotado (origin + rotation_deg).
from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QImage, QPainter, QPen

from compas_dial.core.style import DialStyle
from compas_dial.render.metrics import qt_metrics_available, style_font
from compas_dial.render.primitives import FillCircle, Line, PrimitiveStream, TextRun
from compas_dial.utils.errors import CompasError, CompasIOError

log = logging.getLogger(__name__)


def paint_stream(painter: QPainter, stream: PrimitiveStream, font: QFont | None = None) -> None:
    """Dibuja el stream en orden. El estado del painter se restaura al final."""
    painter.save()
    try:
        painter.setRenderHint(QPainter.Antialiasing, True)
        if font is not None:
            painter.setFont(font)

        for prim in stream:
            if isinstance(prim, FillCircle):
                color = QColor(prim.color)
                painter.setPen(QPen(color, 1))
                painter.setBrush(QBrush(color))
                painter.drawEllipse(QPointF(*prim.center), prim.radius, prim.radius)
            elif isinstance(prim, Line):
                painter.setPen(QPen(QColor(prim.color), 1))
                painter.setBrush(Qt.NoBrush)
                painter.drawLine(QPointF(*prim.p0), QPointF(*prim.p1))
            elif isinstance(prim, TextRun):
                painter.setPen(QPen(QColor(prim.color), 1))
                painter.save()
                painter.translate(QPointF(*prim.origin))
                painter.rotate(prim.rotation_deg)
                painter.drawText(QPointF(0.0, 0.0), prim.text)
                painter.restore()
    finally:
        painter.restore()


def render_image(stream: PrimitiveStream, style: DialStyle | None = None) -> QImage:
    """Renderiza el stream a un QImage cuadrado (fondo transparente).

    Raises:
        CompasError: si no hay QGuiApplication (el texto necesita la base de fuentes).
    """
    if not qt_metrics_available():
        raise CompasError("Se requiere QGuiApplication para renderizar a QImage")
    side = max(1, int(stream.size))
    img = QImage(side, side, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)

    p = QPainter(img)
    try:
        paint_stream(p, stream, style_font(style or DialStyle()))
    finally:
        p.end()
    return img


def save_png(stream: PrimitiveStream, out_path: str | Path, style: DialStyle | None = None) -> Path:
    p = Path(out_path)
    if p.suffix.lower() != ".png":
        p = p.with_suffix(".png")

    img = render_image(stream, style)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise CompasIOError(f"No se pudo exportar PNG: {p}") from e
    if not img.save(str(p), "PNG"):
        raise CompasIOError(f"No se pudo exportar PNG: {p}")
    log.info("PNG exportado: %s (%dx%d)", p, img.width(), img.height())
    return p
