# File: compas_dial/svg/exporter.py
# Project: CompasDial (CPS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Export SVG (px) de una pasada de render del dial.
# Notes: Sin Qt. Cada primitiva del stream -> un elemento SVG, en el mismo orden.
from __future__ import annotations

import logging
from pathlib import Path
from xml.etree.ElementTree import Element, SubElement, tostring

from compas_dial.core.style import DialStyle
from compas_dial.render.primitives import FillCircle, Line, PrimitiveStream, TextRun
from compas_dial.utils.errors import CompasIOError

log = logging.getLogger(__name__)


def _num(v: float) -> str:
    # Sin notación científica ni ceros de más.
    s = f"{float(v):.3f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def _svg_color(color: str) -> tuple[str, str | None]:
    """'#AARRGGBB' -> ('#RRGGBB', opacity). '#RRGGBB' pasa tal cual."""
    c = color.strip()
    if len(c) == 9:
        alpha = int(c[1:3], 16) / 255.0
        return "#" + c[3:], _num(alpha)
    return c, None


def _paint_attrs(color: str, key: str) -> dict[str, str]:
    rgb, opacity = _svg_color(color)
    attrs = {key: rgb}
    if opacity is not None:
        attrs[f"{key}-opacity"] = opacity
    return attrs


def stream_to_svg(stream: PrimitiveStream, style: DialStyle | None = None) -> str:
    st = style or DialStyle()
    size = _num(stream.size)
    svg = Element(
        "svg",
        {
            "xmlns": "http://www.w3.org/2000/svg",
            "version": "1.1",
            "width": f"{size}px",
            "height": f"{size}px",
            "viewBox": f"0 0 {size} {size}",
        },
    )

    font_attrs = {"font-size": f"{int(st.font_size_px)}px"}
    if st.font_family:
        font_attrs["font-family"] = st.font_family
    g = SubElement(svg, "g", {"id": "COMPAS_DIAL", **font_attrs})

    for prim in stream:
        if isinstance(prim, FillCircle):
            attrs = {"cx": _num(prim.center[0]), "cy": _num(prim.center[1]), "r": _num(prim.radius)}
            attrs.update(_paint_attrs(prim.color, "fill"))
            attrs.update(_paint_attrs(prim.color, "stroke"))
            SubElement(g, "circle", attrs)
        elif isinstance(prim, Line):
            attrs = {
                "x1": _num(prim.p0[0]),
                "y1": _num(prim.p0[1]),
                "x2": _num(prim.p1[0]),
                "y2": _num(prim.p1[1]),
                "class": prim.role,
            }
            attrs.update(_paint_attrs(prim.color, "stroke"))
            SubElement(g, "line", attrs)
        elif isinstance(prim, TextRun):
            x, y = _num(prim.origin[0]), _num(prim.origin[1])
            attrs = {
                "x": x,
                "y": y,
                "transform": f"rotate({_num(prim.rotation_deg)} {x} {y})",
                "class": prim.role,
            }
            attrs.update(_paint_attrs(prim.color, "fill"))
            t = SubElement(g, "text", attrs)
            t.text = prim.text

    return tostring(svg, encoding="unicode")


def export_svg(stream: PrimitiveStream, out_path: str | Path, style: DialStyle | None = None) -> Path:
    """Escribe el SVG del stream. Fuerza extensión .svg."""
    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        xml = stream_to_svg(stream, style)
        p.write_text(xml, encoding="utf-8")
    except OSError as e:
        raise CompasIOError(f"No se pudo exportar SVG: {p}") from e
    log.info("SVG exportado: %s (%d primitivas)", p, len(stream))
    return p
