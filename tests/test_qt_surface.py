from __future__ import annotations

import pytest

from compas_dial.core.style import DialStyle
from compas_dial.render.dial import CompassRenderer
from compas_dial.render.metrics import QtTextMetrics, measure_text_height
from compas_dial.render.qt_painter import render_image, save_png


def test_qt_metrics_measure_each_string(qapp):
    m = QtTextMetrics.for_style(DialStyle(font_size_px=16))
    assert m.text_width("135") > m.text_width("5") > 0
    assert measure_text_height(m) >= 1


def test_default_renderer_uses_qt_metrics(qapp):
    r = CompassRenderer(DialStyle())
    assert isinstance(r.metrics, QtTextMetrics)
    assert r.text_height == measure_text_height(r.metrics)


def test_render_image_is_square_and_painted(qapp):
    style = DialStyle(background_color="#FF0000")
    s = CompassRenderer(style).render(30.0, 160, 120)
    img = render_image(s, style)
    assert (img.width(), img.height()) == (120, 120)
    # centro de la cara = color de fondo
    c = img.pixelColor(60, 60)
    assert (c.red(), c.green(), c.blue()) == (255, 0, 0)
    # esquina fuera del círculo = transparente
    assert img.pixelColor(0, 0).alpha() == 0


def test_save_png_writes_file(qapp, tmp_path):
    s = CompassRenderer(DialStyle()).render(0.0)
    out = save_png(s, tmp_path / "dial")
    assert out.suffix == ".png"
    assert out.stat().st_size > 0
