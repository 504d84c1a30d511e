from __future__ import annotations

import xml.etree.ElementTree as ET

from compas_dial.app import main


def test_cli_export_svg(qapp, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "dial.svg"
    assert main(["--export", str(out), "--bearing", "45", "--size", "180"]) == 0
    root = ET.fromstring(out.read_text(encoding="utf-8"))
    assert root.attrib["viewBox"] == "0 0 180 180"


def test_cli_export_png(qapp, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = tmp_path / "dial.png"
    assert main(["--export", str(out)]) == 0
    assert out.stat().st_size > 0


def test_cli_export_does_not_create_log_dir(qapp, tmp_path, monkeypatch):
    import compas_dial.utils.log as clog

    monkeypatch.setattr(clog, "_LOGGER_CONFIGURED", False)
    monkeypatch.chdir(tmp_path)
    try:
        assert main(["--export", str(tmp_path / "d.svg")]) == 0
        assert not (tmp_path / "logs").exists()
    finally:
        clog.setup_logging(None, force=True)


def test_cli_export_with_log_dir(qapp, tmp_path, monkeypatch):
    import compas_dial.utils.log as clog

    monkeypatch.setattr(clog, "_LOGGER_CONFIGURED", False)
    monkeypatch.chdir(tmp_path)
    try:
        assert main(["--export", str(tmp_path / "d.svg"), "--log-dir", str(tmp_path / "registro")]) == 0
        assert (tmp_path / "registro" / clog.LOG_FILE_NAME).is_file()
    finally:
        clog.setup_logging(None, force=True)


def test_cli_description_names_app():
    from compas_dial.app import build_parser
    from compas_dial.core.version import APP_SHORT

    assert f"({APP_SHORT})" in build_parser().format_help()
