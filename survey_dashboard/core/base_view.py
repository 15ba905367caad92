from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional

import pandas as pd
import plotly.graph_objects as go

from .dataset import Dataset
from .filter_state import FilterState

if TYPE_CHECKING:
    from survey_dashboard.config.model import GlobalConfig

NO_DATA_MESSAGE = "No data available"


class BaseView(ABC):
    """
    Abstract base class for all chart views.

    Defines the contract that every chart on the dashboard must follow
    - expose an 'id' - used internally and as the graph component suffix
    - expose a 'label' - used as the card header
    - implement 'compute_data' - aggregate an already-filtered frame
    - implement 'render_figure' - build the Plotly figure from that aggregate

    Views never filter on their own: the orchestrator filters once per update
    and hands every view the same frame.
    """

    id: str = None
    label: str = None

    def __init__(self, dataset: Dataset, config: Optional[GlobalConfig] = None):
        self.dataset = dataset
        self.config = config

    @abstractmethod
    def compute_data(self, records: pd.DataFrame, state: FilterState) -> Any:
        """
        Compute the summary this view plots
        :param records: the filtered rows for the current FilterState
        :param state: the current FilterState
        :return: data: the aggregate consumed by {@link render_figure()}; empty when there is nothing to plot
        """
        raise NotImplementedError()

    @abstractmethod
    def render_figure(self, data: Any, state: FilterState) -> go.Figure:
        """
        Render the figure given the computed data
        :param data: the data provided by {@link compute_data()}
        :param state: the current FilterState
        :return: the Plotly figure
        """
        raise NotImplementedError()

    def build(self, records: pd.DataFrame, state: FilterState) -> go.Figure:
        return self.render_figure(self.compute_data(records, state), state)

    # ------------------------------------------------------------------
    # Common helpers for all views
    # ------------------------------------------------------------------
    @staticmethod
    def empty_figure(message: str = NO_DATA_MESSAGE) -> go.Figure:
        """
        Standardised 'no data' figure used by all views.
        """
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            showarrow=False,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            font={"size": 16},
        )
        fig.update_layout(
            title=message,
            xaxis={"visible": False},
            yaxis={"visible": False},
            margin=dict(l=20, r=20, t=50, b=20),
        )
        return fig
