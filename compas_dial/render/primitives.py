# File: compas_dial/render/primitives.py
# Project: CompasDial (CPS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Primitivas de dibujo (círculo, línea, texto) y el stream de una pasada de render.
# Notes: Coordenadas absolutas en px del canvas (ya rotadas). Sin dependencia de Qt.
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Optional, Union

Point = tuple[float, float]

Role = Literal["face", "tick", "arrow", "cardinal", "heading"]


@dataclass(frozen=True)
class FillCircle:
    center: Point
    radius: float
    color: str
    role: Role = "face"
    tick: Optional[int] = None


@dataclass(frozen=True)
class Line:
    p0: Point
    p1: Point
    color: str
    role: Role = "tick"
    tick: Optional[int] = None


@dataclass(frozen=True)
class TextRun:
    # origin = baseline izquierda del texto; rotation_deg = giro acumulado del marco.
    text: str
    origin: Point
    rotation_deg: float
    color: str
    role: Role = "cardinal"
    tick: Optional[int] = None


Primitive = Union[FillCircle, Line, TextRun]


@dataclass(frozen=True)
class PrimitiveStream:
    """Resultado de una pasada de render.

    Se consume enseguida (QPainter / SVG) y no se retiene.
    """

    size: int
    center: Point
    radius: float
    rotation_deg: float  # rotación del marco antes del loop de ticks (= -bearing)
    text_height: int
    primitives: tuple[Primitive, ...]

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.primitives)

    def __len__(self) -> int:
        return len(self.primitives)

    def for_tick(self, index: int) -> list[Primitive]:
        return [p for p in self.primitives if p.tick == index]

    def by_role(self, role: Role) -> list[Primitive]:
        return [p for p in self.primitives if p.role == role]

    def texts(self) -> list[TextRun]:
        return [p for p in self.primitives if isinstance(p, TextRun)]
