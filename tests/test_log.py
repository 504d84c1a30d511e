from __future__ import annotations

import logging

from compas_dial.utils.log import LOG_FILE_NAME, setup_logging


def _file_handlers():
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


def test_console_only_logging_creates_no_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    try:
        assert setup_logging(None, force=True) is None
        assert not (tmp_path / "logs").exists()
        assert not _file_handlers()
    finally:
        setup_logging(None, force=True)


def test_log_dir_writes_file_and_reconfigure_drops_it(tmp_path):
    try:
        out = setup_logging(tmp_path / "registro", force=True)
        assert out == tmp_path / "registro" / LOG_FILE_NAME
        logging.getLogger("compas_dial.test").warning("hola")
        for h in _file_handlers():
            h.flush()
        assert "hola" in out.read_text(encoding="utf-8")
    finally:
        setup_logging(None, force=True)
    assert not _file_handlers()


def test_second_setup_without_force_is_noop(tmp_path):
    try:
        setup_logging(None, force=True)
        assert setup_logging(tmp_path / "otro") is None
        assert not (tmp_path / "otro").exists()
    finally:
        setup_logging(None, force=True)
