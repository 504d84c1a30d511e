# File: compas_dial/core/settings.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Settings del proyecto (JSON repo-local) + overrides por env -> DialStyle.
# Notes: No depende de Qt. Carga tolerante: si el archivo es inválido se usan defaults.
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from compas_dial.core.style import DialStyle
from compas_dial.utils.errors import CompasSchemaError

log = logging.getLogger(__name__)


# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: compas_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "compas_settings.json"

# Sección del JSON con el estilo del dial.
DIAL_SECTION = "dial"

# Env var -> clave externa del estilo.
ENV_STYLE_KEYS: dict[str, str] = {
    "COMPAS_BACKGROUND_COLOR": "backgroundColor",
    "COMPAS_MARKER_COLOR": "markerColor",
    "COMPAS_TEXT_COLOR": "textColor",
    "COMPAS_NORTH_LABEL": "northLabel",
    "COMPAS_EAST_LABEL": "eastLabel",
    "COMPAS_SOUTH_LABEL": "southLabel",
    "COMPAS_WEST_LABEL": "westLabel",
    "COMPAS_FONT_FAMILY": "fontFamily",
    "COMPAS_FONT_SIZE": "fontSize",
}


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca compas_settings.json subiendo desde start (o CWD)."""
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido."""
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        _log.warning("Settings ignorados (raíz no es objeto JSON): %s", p)
        return {}
    return data


def save_project_settings(data: Dict[str, Any], start: Path | None = None, *, logger: logging.Logger | None = None) -> Path | None:
    """Guarda project settings en compas_settings.json.

    - Si se encuentra un archivo existente, lo pisa.
    - Si no existe, lo crea en `start` (o el CWD).

    Devuelve el Path guardado o None si falla.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        p = (start or Path.cwd()).resolve() / PROJECT_SETTINGS_FILENAME
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        return p
    except OSError as e:
        _log.warning("No se pudo guardar %s: %s", p, e)
        return None


def env_style_overrides(environ: Dict[str, str] | None = None) -> Dict[str, str]:
    """Lee overrides de estilo desde variables de entorno (solo las seteadas y no vacías)."""
    env = os.environ if environ is None else environ
    out: Dict[str, str] = {}
    for var, key in ENV_STYLE_KEYS.items():
        v = env.get(var)
        if v:
            out[key] = v
    return out


def load_dial_style(
    start: Path | None = None,
    *,
    prefer_env: bool = True,
    environ: Dict[str, str] | None = None,
    logger: logging.Logger | None = None,
) -> DialStyle:
    """Resuelve el DialStyle efectivo: defaults <- JSON (sección "dial") <- env.

    - Si `prefer_env=True`, una env var seteada pisa al JSON.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Valores inválidos no rompen la carga: se loggea y se descarta esa capa.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    section = data.get(DIAL_SECTION) if isinstance(data, dict) else None
    if section is not None and not isinstance(section, dict):
        _log.warning("Sección %r inválida en settings (se espera objeto)", DIAL_SECTION)
        section = None

    layers: list[tuple[str, Dict[str, Any]]] = []
    env = env_style_overrides(environ)
    if section:
        layers.append(("settings", section))
    if env:
        layers.insert(len(layers) if prefer_env else 0, ("env", env))

    style = DialStyle()
    for origin, layer in layers:
        try:
            style = DialStyle.from_dict(layer, base=style)
        except CompasSchemaError as e:
            _log.warning("Estilo ignorado (%s): %s", origin, e)

    if layers:
        _log.info("Estilo del dial aplicado: %s", style.to_dict())
    return style
