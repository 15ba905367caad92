from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pandas as pd
import plotly.graph_objects as go

from survey_dashboard.config.model import DEFAULT_PIE_PALETTE
from survey_dashboard.core.aggregation import aggregate_counts
from survey_dashboard.core.base_view import BaseView
from survey_dashboard.core.filter_state import FilterState

DEFAULT_ZOOM = 1.0

# Share of the plot area the pie spans at zoom 1.0
BASE_PIE_FRACTION = 0.8

HOVER_PULL = 0.1


def zoom_in(level: float, step: float = 0.1) -> float:
    return round(level + step, 6)


def zoom_out(level: float, step: float = 0.1, min_zoom: float = 0.1) -> float:
    return max(min_zoom, round(level - step, 6))


def pie_domain(zoom: float) -> Dict[str, List[float]]:
    """
    Plotly domain for a pie scaled by zoom, centred in the plot area.

    Plotly keeps domains inside [0, 1], so the pie stops growing once it
    fills the area even though the zoom level keeps increasing.
    """
    fraction = min(1.0, BASE_PIE_FRACTION * zoom)
    lo, hi = 0.5 - fraction / 2, 0.5 + fraction / 2
    return {"x": [lo, hi], "y": [lo, hi]}


def palette_for(domain: Sequence[str], palette: Sequence[str]) -> Dict[str, str]:
    """Ordinal colour scale: i-th value of the domain gets the i-th colour, cycling."""
    return {value: palette[i % len(palette)] for i, value in enumerate(domain)}


class GenderDistributionView(BaseView):
    """
    Pie chart of respondent counts per gender.

    The zoom level is supplied per render; it is UI state kept apart from
    the filters.
    """

    id = "pie"
    label = "Gender Distribution"

    def compute_data(self, records: pd.DataFrame, state: FilterState) -> Dict[str, int]:
        return aggregate_counts(records)

    def colour_map(self, counts: Dict[str, int]) -> Dict[str, str]:
        """
        By default colours follow the genders present in the filtered slice,
        so a gender's colour can change when the filter drops another gender.
        With stable_pie_colors the whole dataset's genders are the domain.
        """
        palette = self.config.pie_palette if self.config else DEFAULT_PIE_PALETTE
        if self.config is not None and self.config.stable_pie_colors:
            domain = list(self.dataset.valid_sets().genders)
        else:
            domain = list(counts.keys())
        return palette_for(domain, palette)

    def render_figure(
        self,
        data: Dict[str, int],
        state: FilterState,
        zoom: Optional[float] = None,
        highlight: Optional[str] = None,
    ) -> go.Figure:
        if not data:
            return self.empty_figure()

        zoom = DEFAULT_ZOOM if zoom is None else zoom
        genders = list(data.keys())
        colours = self.colour_map(data)

        fig = go.Figure(
            go.Pie(
                labels=genders,
                values=list(data.values()),
                marker={"colors": [colours[g] for g in genders]},
                sort=False,
                direction="clockwise",
                pull=[HOVER_PULL if g == highlight else 0 for g in genders],
                domain=pie_domain(zoom),
                hovertemplate="<b>Gender:</b> %{label}<br><b>Count:</b> %{value}<extra></extra>",
                name="",
            )
        )

        fig.update_layout(
            title={"text": self.label, "x": 0.5},
            margin=dict(l=20, r=20, t=50, b=20),
            showlegend=True,
        )
        return fig
