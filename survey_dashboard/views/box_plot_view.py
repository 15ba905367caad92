from __future__ import annotations

from typing import List, Tuple

import pandas as pd
import plotly.graph_objects as go

from survey_dashboard.core.aggregation import FiveNumberSummary, aggregate_box_stats
from survey_dashboard.core.base_view import BaseView
from survey_dashboard.core.filter_state import FilterState

BOX_COLOR = "#4FC3F7"
OUTLIER_COLOR = "#FF7043"


class PurchaseBoxPlotView(BaseView):
    """
    Box plot of purchase amounts per chain.

    Boxes are drawn from precomputed statistics (linear-interpolation
    quartiles, whiskers clamped to the data range) rather than letting
    Plotly compute its own, and every outlier is drawn as its own marker.
    """

    id = "box"
    label = "Purchase Amount Distribution by Chain"

    def compute_data(
        self, records: pd.DataFrame, state: FilterState
    ) -> List[Tuple[str, FiveNumberSummary]]:
        return aggregate_box_stats(records)

    def render_figure(
        self, data: List[Tuple[str, FiveNumberSummary]], state: FilterState
    ) -> go.Figure:
        if not data:
            return self.empty_figure()

        box_color = self.config.bar_color if self.config else BOX_COLOR
        outlier_color = self.config.bar_highlight_color if self.config else OUTLIER_COLOR

        fig = go.Figure()
        chains = [chain for chain, _ in data]

        for chain, stats in data:
            fig.add_trace(
                go.Box(
                    x=[chain],
                    q1=[stats.q1],
                    median=[stats.median],
                    q3=[stats.q3],
                    lowerfence=[stats.lower_whisker],
                    upperfence=[stats.upper_whisker],
                    boxpoints=False,
                    name=chain,
                    marker_color=box_color,
                    showlegend=False,
                )
            )

        # One scatter trace for all outliers keeps them individually hoverable
        outlier_x: List[str] = []
        outlier_y: List[float] = []
        for chain, stats in data:
            outlier_x.extend([chain] * len(stats.outliers))
            outlier_y.extend(stats.outliers)

        if outlier_y:
            fig.add_trace(
                go.Scatter(
                    x=outlier_x,
                    y=outlier_y,
                    mode="markers",
                    marker={"color": outlier_color, "size": 7, "opacity": 0.8},
                    name="Outliers",
                    hovertemplate="<b>Chain:</b> %{x}<br><b>Purchase:</b> $%{y:.2f}<extra></extra>",
                    showlegend=False,
                )
            )

        fig.update_layout(
            title={"text": self.label, "x": 0.5},
            margin=dict(l=50, r=20, t=50, b=50),
            xaxis={"title": "Chain", "categoryorder": "array", "categoryarray": chains},
            yaxis={"title": "Purchase amount ($)"},
        )
        return fig
