# File: compas_dial/utils/log.py
# Project: CompasDial (CPS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Logging centralizado (consola + archivo opcional) y helpers.
# Notes: Se configura una sola vez desde compas_dial.app. El export headless no
#   escribe archivo salvo que se pida --log-dir.
from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_NAME = "compas.log"

_LOGGER_CONFIGURED = False
# Handlers agregados por setup_logging (para poder reconfigurar con force=True).
_HANDLERS: list[logging.Handler] = []


def setup_logging(
    log_dir: str | os.PathLike | None = "logs",
    level: int = logging.INFO,
    *,
    force: bool = False,
) -> Path | None:
    """Configura logging en consola y, si `log_dir` no es None, también en archivo.

    Devuelve el path del archivo de log (o None si solo hay consola).

    Nota:
        - No lanza excepción si no puede escribir el archivo; cae a consola.
        - `force=True` quita los handlers de una configuración previa.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED and not force:
        return None

    logger = logging.getLogger()
    for h in _HANDLERS:
        logger.removeHandler(h)
        h.close()
    _HANDLERS.clear()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _HANDLERS.append(ch)

    log_file: Path | None = None
    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILE_NAME, encoding="utf-8")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            logger.addHandler(fh)
            _HANDLERS.append(fh)
            log_file = d / LOG_FILE_NAME
        except OSError as e:
            logging.getLogger(__name__).warning("No se pudo inicializar FileHandler: %s", e)

    _LOGGER_CONFIGURED = True
    return log_file


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
