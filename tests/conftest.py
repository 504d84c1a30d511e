from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from compas_dial.render.metrics import FixedAdvanceMetrics


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def metrics():
    # "yY" -> 14 px de alto de texto
    return FixedAdvanceMetrics(7.0)
