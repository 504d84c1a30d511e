# File: compas_dial/render/metrics.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Métricas de texto (ancho de strings) para centrar rótulos y derivar el alto de texto.
# Notes:
#   - QtTextMetrics requiere una QGuiApplication viva (QFontMetricsF usa la base de fuentes).
#     Sin app, Qt aborta el proceso: se valida antes de tocar QFont.
#   - FixedAdvanceMetrics sirve para export/tests sin Qt (y es el fallback de default_metrics).
from __future__ import annotations

import logging
from typing import Protocol

from compas_dial.core.style import DialStyle
from compas_dial.core.version import TEXT_HEIGHT_REFERENCE
from compas_dial.utils.errors import CompasError

log = logging.getLogger(__name__)

# Avance medio de un carácter respecto del tamaño de fuente (aprox. sans-serif).
_FIXED_ADVANCE_RATIO = 0.6


class TextMetrics(Protocol):
    def text_width(self, text: str) -> float:
        ...


class FixedAdvanceMetrics:
    """Métrica monoespaciada: cada carácter avanza `advance_px`."""

    def __init__(self, advance_px: float = 7.0) -> None:
        self.advance_px = float(advance_px)

    @classmethod
    def for_style(cls, style: DialStyle) -> "FixedAdvanceMetrics":
        return cls(style.font_size_px * _FIXED_ADVANCE_RATIO)

    def text_width(self, text: str) -> float:
        return self.advance_px * len(text)


def qt_metrics_available() -> bool:
    """True si hay una QGuiApplication (o QApplication) viva."""
    from PySide6.QtGui import QGuiApplication

    return QGuiApplication.instance() is not None


def _require_gui_app() -> None:
    if not qt_metrics_available():
        raise CompasError("Se requiere QGuiApplication para métricas Qt")


class QtTextMetrics:
    """Métrica real vía QFontMetricsF (horizontalAdvance)."""

    def __init__(self, font=None) -> None:
        _require_gui_app()
        from PySide6.QtGui import QFont, QFontMetricsF

        self.font = QFont(font) if font is not None else QFont()
        self._fm = QFontMetricsF(self.font)

    @classmethod
    def for_style(cls, style: DialStyle) -> "QtTextMetrics":
        _require_gui_app()
        return cls(style_font(style))

    def text_width(self, text: str) -> float:
        return float(self._fm.horizontalAdvance(text))


def default_metrics(style: DialStyle) -> TextMetrics:
    """Métrica Qt si hay app; si no, monoespaciada escalada al tamaño de fuente."""
    if qt_metrics_available():
        return QtTextMetrics.for_style(style)
    log.debug("Sin QGuiApplication: métrica de texto monoespaciada (%spx)", style.font_size_px)
    return FixedAdvanceMetrics.for_style(style)


def style_font(style: DialStyle):
    """QFont del estilo (familia opcional + tamaño en px)."""
    from PySide6.QtGui import QFont

    f = QFont(style.font_family) if style.font_family else QFont()
    f.setPixelSize(int(style.font_size_px))
    return f


def measure_text_height(metrics: TextMetrics) -> int:
    """Alto de texto: avance del string de referencia "yY", truncado a int (mínimo 1).

    Se calcula una vez por renderer y se reusa para todos los offsets verticales.
    """
    return max(1, int(metrics.text_width(TEXT_HEIGHT_REFERENCE)))
