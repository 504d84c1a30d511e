from __future__ import annotations

import json

import pytest

from compas_dial.core.settings import (
    PROJECT_SETTINGS_FILENAME,
    env_style_overrides,
    find_project_settings_path,
    load_dial_style,
    save_project_settings,
)
from compas_dial.core.style import DialStyle
from compas_dial.utils.errors import CompasSchemaError


def _write_settings(root, data):
    p = root / PROJECT_SETTINGS_FILENAME
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


def test_style_from_dict_accepts_external_and_snake_keys():
    st = DialStyle.from_dict(
        {
            "backgroundColor": "#102030",
            "marker_color": "#ff00ff",
            "textColor": "#80FFFFFF",
            "northLabel": "Norte",
            "fontSize": "16",
            "unknown": 1,
        }
    )
    assert st.background_color == "#102030"
    assert st.marker_color == "#FF00FF"
    assert st.text_color == "#80FFFFFF"
    assert st.north_label == "Norte"
    assert st.east_label == "E"
    assert st.font_size_px == 16


def test_style_round_trip_through_external_keys():
    st = DialStyle(west_label="O", font_family="DejaVu Sans")
    assert DialStyle.from_dict(st.to_dict()) == st


@pytest.mark.parametrize(
    "data",
    [
        {"backgroundColor": "red"},
        {"markerColor": "#12345"},
        {"northLabel": 5},
        {"fontSize": 0},
        {"fontSize": "grande"},
    ],
)
def test_style_from_dict_rejects_invalid_values(data):
    with pytest.raises(CompasSchemaError):
        DialStyle.from_dict(data)


def test_style_from_dict_rejects_non_dict():
    with pytest.raises(CompasSchemaError):
        DialStyle.from_dict(["#000000"])  # type: ignore[arg-type]


def test_settings_found_from_subfolder(tmp_path):
    p = _write_settings(tmp_path, {"dial": {}})
    sub = tmp_path / "a" / "b"
    sub.mkdir(parents=True)
    assert find_project_settings_path(sub) == p


def test_load_dial_style_from_settings_file(tmp_path):
    _write_settings(tmp_path, {"dial": {"backgroundColor": "#000000", "southLabel": "Sur"}})
    st = load_dial_style(tmp_path, environ={})
    assert st.background_color == "#000000"
    assert st.south_label == "Sur"
    assert st.north_label == "N"


def test_env_overrides_settings_when_preferred(tmp_path):
    _write_settings(tmp_path, {"dial": {"northLabel": "Norte"}})
    env = {"COMPAS_NORTH_LABEL": "Nord", "COMPAS_FONT_SIZE": "14"}
    assert load_dial_style(tmp_path, environ=env).north_label == "Nord"
    assert load_dial_style(tmp_path, environ=env).font_size_px == 14
    assert load_dial_style(tmp_path, environ=env, prefer_env=False).north_label == "Norte"


def test_invalid_settings_fall_back_to_defaults(tmp_path, caplog):
    _write_settings(tmp_path, {"dial": {"textColor": "blanco"}})
    with caplog.at_level("WARNING"):
        st = load_dial_style(tmp_path, environ={})
    assert st == DialStyle()
    assert "Estilo ignorado" in caplog.text


def test_malformed_settings_json_is_ignored(tmp_path, caplog):
    (tmp_path / PROJECT_SETTINGS_FILENAME).write_text("{no json", encoding="utf-8")
    with caplog.at_level("WARNING"):
        st = load_dial_style(tmp_path, environ={})
    assert st == DialStyle()
    assert "No se pudo leer" in caplog.text


def test_env_style_overrides_skip_empty_values():
    assert env_style_overrides({"COMPAS_EAST_LABEL": "", "COMPAS_WEST_LABEL": "O"}) == {"westLabel": "O"}


def test_save_project_settings_round_trip(tmp_path):
    data = {"dial": DialStyle(north_label="Norte").to_dict()}
    p = save_project_settings(data, tmp_path)
    assert p == (tmp_path / PROJECT_SETTINGS_FILENAME).resolve()
    assert load_dial_style(tmp_path, environ={}).north_label == "Norte"
