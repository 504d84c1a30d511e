# File: compas_dial/app.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Entry-point: ventana demo o export headless (SVG/PNG) por CLI.
# Notes: El export usa Qt offscreen solo para las métricas de texto y el PNG.
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from compas_dial.core.settings import load_dial_style
from compas_dial.core.version import APP_NAME, APP_SHORT, APP_VERSION
from compas_dial.utils.errors import CompasError
from compas_dial.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="compas", description=f"{APP_NAME} ({APP_SHORT}) v{APP_VERSION}")
    ap.add_argument("--bearing", type=float, default=0.0, help="Rumbo inicial en grados (0 = norte).")
    ap.add_argument("--size", type=int, default=None, help="Lado del dial en px (default 200).")
    ap.add_argument("--export", type=Path, default=None, help="Exporta a .svg o .png y sale (sin ventana).")
    ap.add_argument("--log-level", default="INFO", help="Nivel de logging (DEBUG, INFO, ...).")
    ap.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Carpeta del archivo de log (default: logs/ en modo ventana; sin archivo con --export).",
    )
    return ap


def export_dial(out_path: Path, bearing: float, size: int | None, style=None) -> Path:
    """Render headless de una pasada y export según la extensión."""
    from compas_dial.render.dial import CompassRenderer

    style = style or load_dial_style()
    renderer = CompassRenderer(style)
    stream = renderer.render(bearing, size, size)
    if out_path.suffix.lower() == ".png":
        from compas_dial.render.qt_painter import save_png

        return save_png(stream, out_path, style)

    from compas_dial.svg.exporter import export_svg

    return export_svg(stream, out_path, style)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    level = getattr(logging, str(args.log_level).upper(), logging.INFO)
    log_dir = args.log_dir
    if log_dir is None and args.export is None:
        log_dir = Path("logs")
    setup_logging(log_dir, level=level)

    if args.export is not None:
        os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication(sys.argv[:1])
    style = load_dial_style(logger=log)

    if args.export is not None:
        try:
            out = export_dial(args.export, args.bearing, args.size, style)
        except CompasError as e:
            log.error("Export falló: %s", e)
            return 1
        log.info("Export OK: %s", out)
        return 0

    from compas_dial.ui.main_window import MainWindow

    w = MainWindow(style, args.bearing)
    w.show()
    log.info("%s iniciado (v%s)", APP_NAME, APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
