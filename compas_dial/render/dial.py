# File: compas_dial/render/dial.py
# Project: CompasDial (CPS)
# Version: 0.1.3
# Status: stable
# Date: 2026-10-19
# Purpose: Layout del dial: tamaño cuadrado + ticks/rótulos/flecha rotados según el rumbo.
# Notes:
#   - Función pura (rumbo, tamaño, estilo) -> PrimitiveStream. Sin estado entre pasadas.
#   - La geometría se arma en el marco local (sin rotar) y se rota alrededor del centro.
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from compas_dial.core.style import DialStyle
from compas_dial.core.version import (
    ARROW_HALF_WIDTH_PX,
    DEFAULT_SIZE_PX,
    TICK_COUNT,
    TICK_LENGTH_PX,
    TICK_STEP_DEG,
)
from compas_dial.render.metrics import TextMetrics, default_metrics, measure_text_height
from compas_dial.render.primitives import FillCircle, Line, Point, Primitive, PrimitiveStream, TextRun


class MeasureMode(str, Enum):
    """Modo de la propuesta de tamaño que hace el layout del host."""

    UNSPECIFIED = "unspecified"
    EXACTLY = "exactly"
    AT_MOST = "at_most"


@dataclass(frozen=True)
class SizeSpec:
    mode: MeasureMode
    size: int = 0


# None = "sin especificar".
SizeProposal = Union[int, None, SizeSpec]


def resolve_size(proposal: SizeProposal) -> int:
    """Sin especificar -> DEFAULT_SIZE_PX; si no, el tamaño propuesto tal cual."""
    if proposal is None:
        return DEFAULT_SIZE_PX
    if isinstance(proposal, SizeSpec):
        if proposal.mode == MeasureMode.UNSPECIFIED:
            return DEFAULT_SIZE_PX
        return int(proposal.size)
    return int(proposal)


def measure_square(width: SizeProposal, height: SizeProposal) -> tuple[int, int]:
    """Resuelve cada eje por separado y usa el mínimo para ambos (target siempre cuadrado)."""
    d = min(resolve_size(width), resolve_size(height))
    return d, d


class CompassRenderer:
    """Renderer del dial para un estilo fijo.

    El alto de texto se mide una vez acá (string de referencia) y se reusa
    en cada pasada. El ancho de cada rótulo se mide por separado al centrarlo.
    Sin `metrics`: Qt si hay QGuiApplication, si no métrica monoespaciada.
    """

    def __init__(self, style: DialStyle | None = None, metrics: TextMetrics | None = None) -> None:
        self.style = style or DialStyle()
        self.metrics = metrics if metrics is not None else default_metrics(self.style)
        self.text_height = measure_text_height(self.metrics)

    def render(self, bearing: float, width: SizeProposal = None, height: SizeProposal = None) -> PrimitiveStream:
        size, _ = measure_square(width, height)
        st = self.style
        th = self.text_height

        px = size / 2.0
        py = size / 2.0
        radius = min(px, py)
        pivot = (px, py)

        out: list[Primitive] = [FillCircle((px, py), radius, st.background_color)]

        # Rotación del marco = -rumbo. Se normaliza a [0, 360) para que B y B+360k den lo mismo.
        frame_deg = -(float(bearing) % 360.0)
        cardinals = st.cardinal_labels()
        label_y = int(py - radius + th)

        for i in range(TICK_COUNT):
            deg = frame_deg + i * TICK_STEP_DEG

            def rot(pt: Point, dy: float = 0.0) -> Point:
                return _rotate((pt[0], pt[1] + dy), pivot, deg)

            out.append(
                Line(
                    rot((px, py - radius)),
                    rot((px, py - radius + TICK_LENGTH_PX)),
                    st.marker_color,
                    role="tick",
                    tick=i,
                )
            )

            # Rótulos y flecha van en un marco desplazado un alto de texto hacia abajo.
            if i % 6 == 0:
                label = cardinals[i // 6]
                if i == 0:
                    apex = (px, 2.0 * th)
                    for side in (-1.0, 1.0):
                        out.append(
                            Line(
                                rot(apex, th),
                                rot((px + side * ARROW_HALF_WIDTH_PX, 3.0 * th), th),
                                st.marker_color,
                                role="arrow",
                                tick=i,
                            )
                        )
                x = int(px - self.metrics.text_width(label) / 2)
                out.append(TextRun(label, rot((x, label_y), th), _norm_deg(deg), st.text_color, role="cardinal", tick=i))
            elif i % 3 == 0:
                label = str(int(i * TICK_STEP_DEG))
                x = int(px - self.metrics.text_width(label) / 2)
                out.append(TextRun(label, rot((x, label_y), th), _norm_deg(deg), st.text_color, role="heading", tick=i))

        return PrimitiveStream(
            size=size,
            center=(px, py),
            radius=radius,
            rotation_deg=-float(bearing),
            text_height=th,
            primitives=tuple(out),
        )


def render(
    bearing: float,
    size_w: SizeProposal = None,
    size_h: SizeProposal = None,
    style: DialStyle | None = None,
    metrics: Optional[TextMetrics] = None,
) -> PrimitiveStream:
    """Atajo funcional: una pasada completa con un renderer descartable."""
    return CompassRenderer(style, metrics).render(bearing, size_w, size_h)


def _norm_deg(deg: float) -> float:
    return deg % 360.0


def _rotate(pt: Point, pivot: Point, deg: float) -> Point:
    """Rota pt alrededor de pivot (ejes de pantalla: y hacia abajo, ángulo positivo = horario)."""
    rad = math.radians(deg)
    c = math.cos(rad)
    s = math.sin(rad)
    dx = pt[0] - pivot[0]
    dy = pt[1] - pivot[1]
    return (pivot[0] + dx * c - dy * s, pivot[1] + dx * s + dy * c)
