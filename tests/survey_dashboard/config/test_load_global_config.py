import json
from pathlib import Path

import pytest

from survey_dashboard.config.loader import load_configured_dataset, load_global_config
from survey_dashboard.core.exceptions import ConfigError, DatasetLoadError

HEADER = "Gender,PaymentMethod,Chain,Age,Income,PurchaseAmount,FamilySize\n"


def _write_config(root: Path, raw) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    (root / "global.json").write_text(json.dumps(raw))
    return root


def test_defaults_when_keys_missing(tmp_path):
    root = _write_config(tmp_path / "config", {})

    cfg = load_global_config(root)

    assert cfg.ui_title == "Grocery Store Survey"
    assert cfg.pie_palette == ["#9C27B0", "#FF9800"]
    assert cfg.zoom_increment == pytest.approx(0.1)
    assert cfg.stable_pie_colors is False
    assert cfg.config_root == root


def test_values_override_defaults(tmp_path):
    root = _write_config(
        tmp_path / "config",
        {
            "ui_title": "Survey",
            "data_file": "elsewhere/s.csv",
            "pie_palette": ["red", "blue", "green"],
            "stable_pie_colors": True,
            "zoom_increment": 0.25,
        },
    )

    cfg = load_global_config(root)

    assert cfg.ui_title == "Survey"
    assert cfg.data_file == Path("elsewhere/s.csv")
    assert cfg.pie_palette == ["red", "blue", "green"]
    assert cfg.stable_pie_colors is True
    assert cfg.zoom_increment == pytest.approx(0.25)


def test_missing_global_json_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


def test_invalid_json_raises(tmp_path):
    (tmp_path / "global.json").write_text("{not json")

    with pytest.raises(ConfigError):
        load_global_config(tmp_path)


@pytest.mark.parametrize(
    "raw",
    [
        {"zoom_increment": 0},
        {"min_zoom": "small"},
        {"pie_palette": []},
        ["not", "an", "object"],
    ],
)
def test_bad_values_raise(tmp_path, raw):
    root = _write_config(tmp_path / "config", raw)

    with pytest.raises(ConfigError):
        load_global_config(root)


def test_configured_dataset_resolves_relative_to_config_parent(tmp_path, monkeypatch):
    monkeypatch.delenv("SURVEY_DASHBOARD_DATA_ROOT", raising=False)
    (tmp_path / "data").mkdir()
    (tmp_path / "data" / "s.csv").write_text(HEADER + "Male,Cash,Aldi,1,1,1,1\n")
    root = _write_config(tmp_path / "config", {"data_file": "data/s.csv"})

    ds = load_configured_dataset(load_global_config(root))

    assert ds.n_rows == 1


def test_configured_dataset_missing_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SURVEY_DASHBOARD_DATA_ROOT", raising=False)
    root = _write_config(tmp_path / "config", {"data_file": "data/missing.csv"})

    with pytest.raises(DatasetLoadError):
        load_configured_dataset(load_global_config(root))
