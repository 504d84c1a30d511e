# File: compas_dial/core/style.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Configuración de estilo del dial (colores + rótulos cardinales).
# Notes: No depende de Qt. Inmutable por instancia de renderer.
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

from compas_dial.utils.errors import CompasSchemaError

_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Nombre externo (camelCase, como en la config del host) -> campo del dataclass.
STYLE_KEYS: dict[str, str] = {
    "backgroundColor": "background_color",
    "markerColor": "marker_color",
    "textColor": "text_color",
    "northLabel": "north_label",
    "eastLabel": "east_label",
    "southLabel": "south_label",
    "westLabel": "west_label",
    "fontFamily": "font_family",
    "fontSize": "font_size_px",
}

COLOR_FIELDS = ("background_color", "marker_color", "text_color")
LABEL_FIELDS = ("north_label", "east_label", "south_label", "west_label")


@dataclass(frozen=True)
class DialStyle:
    """Paleta + rótulos del dial.

    Colores en "#RRGGBB" o "#AARRGGBB" (formato que acepta QColor).
    Los rótulos no se validan: vacíos o repetidos son responsabilidad del caller.
    """

    background_color: str = "#555555"
    marker_color: str = "#AAFFFF"
    text_color: str = "#AAFFFF"

    north_label: str = "N"
    east_label: str = "E"
    south_label: str = "S"
    west_label: str = "W"

    # Tipografía para la métrica de texto (12 px = tamaño de texto por defecto del host original).
    font_family: str = ""
    font_size_px: int = 12

    def cardinal_labels(self) -> tuple[str, str, str, str]:
        """Rótulos en orden N, E, S, W (índices de tick 0, 6, 12, 18)."""
        return (self.north_label, self.east_label, self.south_label, self.west_label)

    def to_dict(self) -> dict[str, Any]:
        return {ext: getattr(self, name) for ext, name in STYLE_KEYS.items()}

    @staticmethod
    def from_dict(d: dict[str, Any], base: "DialStyle | None" = None) -> "DialStyle":
        """Construye un DialStyle desde un dict (camelCase o snake_case).

        Claves ausentes toman el valor de `base` (o los defaults).
        Claves desconocidas se ignoran.
        """
        if not isinstance(d, dict):
            raise CompasSchemaError("Estilo inválido: se esperaba dict")

        out = base or DialStyle()
        changes: dict[str, Any] = {}
        for ext, name in STYLE_KEYS.items():
            if ext in d:
                changes[name] = d[ext]
            elif name in d:
                changes[name] = d[name]

        for name in COLOR_FIELDS:
            if name in changes:
                changes[name] = coerce_color(changes[name], name)
        for name in LABEL_FIELDS:
            if name in changes:
                v = changes[name]
                if not isinstance(v, str):
                    raise CompasSchemaError(f"{name} inválido: {v!r}")
        if "font_family" in changes:
            changes["font_family"] = str(changes["font_family"] or "")
        if "font_size_px" in changes:
            changes["font_size_px"] = _as_font_size(changes["font_size_px"])

        return replace(out, **changes)


def coerce_color(v: Any, field_name: str = "color") -> str:
    s = str(v or "").strip()
    if not _COLOR_RE.match(s):
        raise CompasSchemaError(f"{field_name} inválido: {v!r} (se espera #RRGGBB o #AARRGGBB)")
    return s.upper()


def _as_font_size(v: Any) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError) as e:
        raise CompasSchemaError(f"font_size_px inválido: {v!r}") from e
    if n < 1 or n > 512:
        raise CompasSchemaError(f"font_size_px fuera de rango (1..512): {n}")
    return n
