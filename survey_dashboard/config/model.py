from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

DEFAULT_PIE_PALETTE = ["#9C27B0", "#FF9800"]


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - ui_title / subtitle: navbar text
    - data_file: survey CSV, absolute or relative (see resolve_data_path)
    - bar_color / bar_highlight_color: bar fill, and fill of the hovered bar
    - pie_palette: colours assigned to Gender values, cycled
    - stable_pie_colors: key the pie palette to the whole dataset's Gender
      values instead of the filtered slice's
    - zoom_increment / min_zoom: pie zoom step and floor
    """
    ui_title: str = "Grocery Store Survey"
    subtitle: str = "Purchase behaviour by chain, gender and payment method"
    data_file: Path = Path("data/a1-grocerystoresurvey.csv")
    bar_color: str = "#4FC3F7"
    bar_highlight_color: str = "#FF7043"
    pie_palette: List[str] = field(default_factory=lambda: list(DEFAULT_PIE_PALETTE))
    stable_pie_colors: bool = False
    zoom_increment: float = 0.1
    min_zoom: float = 0.1
    config_root: Optional[Path] = None
