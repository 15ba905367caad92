from __future__ import annotations

import json
import logging
from pathlib import Path

from survey_dashboard.config.model import DEFAULT_PIE_PALETTE, GlobalConfig
from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.dataset_loader import load_survey_dataset, resolve_data_path
from survey_dashboard.core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def _positive_float(raw_global: dict, key: str, default: float) -> float:
    value = raw_global.get(key, default)
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"global.json: '{key}' must be a number, got {value!r}")
    if value <= 0:
        raise ConfigError(f"global.json: '{key}' must be positive, got {value}")
    return value


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load configuration from a directory.

    Expected structure:

        root/
            global.json

    Keys missing from global.json fall back to the GlobalConfig defaults.

    :param root: Directory containing 'global.json'.
    :return: A GlobalConfig instance.
    :raises ConfigError: if global.json is missing, not valid JSON or holds bad values.
    """
    root = Path(root)
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = root / "global.json"
    if not global_path.is_file():
        raise ConfigError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw_global = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    if not isinstance(raw_global, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    palette = raw_global.get("pie_palette", DEFAULT_PIE_PALETTE)
    if not isinstance(palette, list) or not palette:
        raise ConfigError("global.json: 'pie_palette' must be a non-empty list of colours")

    return GlobalConfig(
        ui_title=raw_global.get("ui_title", defaults.ui_title),
        subtitle=raw_global.get("subtitle", defaults.subtitle),
        data_file=Path(raw_global.get("data_file", defaults.data_file)),
        bar_color=raw_global.get("bar_color", defaults.bar_color),
        bar_highlight_color=raw_global.get("bar_highlight_color", defaults.bar_highlight_color),
        pie_palette=[str(c) for c in palette],
        stable_pie_colors=bool(raw_global.get("stable_pie_colors", defaults.stable_pie_colors)),
        zoom_increment=_positive_float(raw_global, "zoom_increment", defaults.zoom_increment),
        min_zoom=_positive_float(raw_global, "min_zoom", defaults.min_zoom),
        config_root=root,
    )


def load_configured_dataset(config: GlobalConfig) -> Dataset:
    """
    Load the survey file named by the config.

    Relative paths are resolved against SURVEY_DASHBOARD_DATA_ROOT, or the
    parent of the config root when the env var is unset.
    """
    base_dir = config.config_root.parent if config.config_root is not None else None
    path = resolve_data_path(config.data_file, base_dir=base_dir)
    return load_survey_dataset(path)
