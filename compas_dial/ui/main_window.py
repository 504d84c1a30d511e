# File: compas_dial/ui/main_window.py
# Project: CompasDial (CPS)
# Version: 0.1.2
# Status: stable
# Date: 2026-10-19
# Purpose: Ventana principal: dial + barra inferior de rumbo + export (Archivo).
# Notes: El slider/spinbox hacen de fuente de rumbo (no hay sensor en la demo).
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QDoubleSpinBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QSlider,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from compas_dial.core.settings import DIAL_SECTION, load_project_settings, save_project_settings
from compas_dial.core.style import DialStyle
from compas_dial.core.version import APP_NAME, APP_SHORT, APP_VERSION
from compas_dial.render.qt_painter import save_png
from compas_dial.svg.exporter import export_svg
from compas_dial.ui.compass_widget import CompassWidget
from compas_dial.utils.errors import CompasError
from compas_dial.utils.log import get_logger

log = get_logger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, style: DialStyle | None = None, bearing: float = 0.0) -> None:
        super().__init__()
        self.setWindowTitle("{} ({}) v{}".format(APP_NAME, APP_SHORT, APP_VERSION))
        self.resize(420, 480)

        self._build_ui(style or DialStyle(), bearing)
        self._build_menu()

    def _build_ui(self, style: DialStyle, bearing: float) -> None:
        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(4)

        self.compass = CompassWidget(style, bearing, central)
        root.addWidget(self.compass, 1)

        bar = QWidget(central)
        bl = QHBoxLayout(bar)
        bl.setContentsMargins(6, 0, 6, 0)
        bl.setSpacing(8)

        lbl = QLabel("Rumbo", bar)
        lbl.setAlignment(Qt.AlignVCenter | Qt.AlignLeft)
        bl.addWidget(lbl, 0)

        self._slider = QSlider(Qt.Horizontal, bar)
        self._slider.setRange(0, 359)
        self._slider.setSingleStep(1)
        self._slider.setPageStep(15)
        self._slider.valueChanged.connect(self._on_slider)
        bl.addWidget(self._slider, 1)

        # Spinbox sin wrap: acepta valores fuera de 0..360 (el dial no recorta el rumbo).
        self._spin = QDoubleSpinBox(bar)
        self._spin.setRange(-3600.0, 3600.0)
        self._spin.setDecimals(1)
        self._spin.setSuffix("°")
        self._spin.valueChanged.connect(self._on_spin)
        bl.addWidget(self._spin, 0)

        root.addWidget(bar, 0)
        self.setCentralWidget(central)

        sb = QStatusBar(self)
        self.setStatusBar(sb)
        self._status_label = QLabel("Listo", self)
        sb.addPermanentWidget(self._status_label)

        self.compass.bearing_changed.connect(self._on_bearing_changed)
        self._sync_controls(self.compass.bearing())

    def _build_menu(self) -> None:
        m_file = self.menuBar().addMenu("&Archivo")

        act_svg = QAction("Exportar &SVG…", self)
        act_svg.setShortcut("Ctrl+E")
        act_svg.triggered.connect(self.action_export_svg)
        m_file.addAction(act_svg)

        act_png = QAction("Exportar &PNG…", self)
        act_png.setShortcut("Ctrl+Shift+E")
        act_png.triggered.connect(self.action_export_png)
        m_file.addAction(act_png)

        m_file.addSeparator()

        act_save_style = QAction("Guardar &estilo", self)
        act_save_style.triggered.connect(self.action_save_style)
        m_file.addAction(act_save_style)

        m_file.addSeparator()

        act_exit = QAction("&Salir", self)
        act_exit.setShortcut("Ctrl+Q")
        act_exit.triggered.connect(self.close)
        m_file.addAction(act_exit)

    # ------------------------------
    # Signals / slots
    # ------------------------------
    def _on_slider(self, v: int) -> None:
        self.compass.set_bearing(float(v))

    def _on_spin(self, v: float) -> None:
        self.compass.set_bearing(float(v))

    def _on_bearing_changed(self, v: float) -> None:
        self._sync_controls(v)
        self._status_label.setText(f"Rumbo: {v:.1f}°")

    def _sync_controls(self, v: float) -> None:
        self._slider.blockSignals(True)
        self._slider.setValue(int(round(v)) % 360)
        self._slider.blockSignals(False)
        if abs(self._spin.value() - v) > 1e-9:
            self._spin.blockSignals(True)
            self._spin.setValue(v)
            self._spin.blockSignals(False)

    # ------------------------------
    # Archivo
    # ------------------------------
    def action_export_svg(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Exportar SVG", "compas.svg", "SVG (*.svg)")
        if not path:
            return
        try:
            out = export_svg(self.compass.current_stream(), path, self.compass.style_config())
        except CompasError as e:
            log.exception("Export SVG falló")
            QMessageBox.critical(self, "Error", str(e))
            return
        self._status_label.setText(f"Exportado: {out.name}")

    def action_export_png(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Exportar PNG", "compas.png", "PNG (*.png)")
        if not path:
            return
        try:
            out = save_png(self.compass.current_stream(), path, self.compass.style_config())
        except CompasError as e:
            log.exception("Export PNG falló")
            QMessageBox.critical(self, "Error", str(e))
            return
        self._status_label.setText(f"Exportado: {out.name}")

    def action_save_style(self) -> None:
        """Persiste el estilo actual en compas_settings.json (sección "dial").

        Las demás secciones del archivo se conservan.
        """
        data = load_project_settings(logger=log)
        data[DIAL_SECTION] = self.compass.style_config().to_dict()
        p = save_project_settings(data, logger=log)
        if p is None:
            QMessageBox.warning(self, "Error", "No se pudo guardar el estilo.")
            return
        log.info("Estilo guardado en %s", p)
        self._status_label.setText(f"Estilo guardado: {p.name}")
