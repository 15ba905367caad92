from __future__ import annotations

from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go

from survey_dashboard.core.aggregation import aggregate_means
from survey_dashboard.core.base_view import BaseView
from survey_dashboard.core.filter_state import FilterState


class AveragePurchaseView(BaseView):
    """
    Horizontal bar chart: mean purchase amount per chain.

    The hovered chain, when given, is drawn in the highlight colour.
    """

    id = "bar"
    label = "Average Purchase by Chain"

    def compute_data(self, records: pd.DataFrame, state: FilterState) -> Dict[str, float]:
        return aggregate_means(records)

    def render_figure(
        self,
        data: Dict[str, float],
        state: FilterState,
        highlight: Optional[str] = None,
    ) -> go.Figure:
        if not data:
            return self.empty_figure()

        bar_color = self.config.bar_color if self.config else "#4FC3F7"
        highlight_color = self.config.bar_highlight_color if self.config else "#FF7043"

        chains = list(data.keys())
        means = list(data.values())

        fig = go.Figure(
            go.Bar(
                x=means,
                y=chains,
                orientation="h",
                marker_color=[highlight_color if c == highlight else bar_color for c in chains],
                hoverlabel={"bgcolor": highlight_color},
                hovertemplate="<b>Chain:</b> %{y}<br><b>Avg Purchase:</b> $%{x:.2f}<extra></extra>",
                name="",
            )
        )

        fig.update_layout(
            title={"text": self.label, "x": 0.5},
            margin=dict(l=50, r=20, t=50, b=50),
            xaxis={"title": "Average purchase ($)", "rangemode": "tozero"},
            yaxis={"title": "Chain", "categoryorder": "array", "categoryarray": chains},
            showlegend=False,
        )
        return fig
