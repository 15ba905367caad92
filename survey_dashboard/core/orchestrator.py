from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import pandas as pd
import plotly.graph_objects as go

from .base_view import BaseView
from .dataset import Dataset
from .filter_state import FilterState
from .filtering import filter_records
from .view_registry import ViewRegistry

if TYPE_CHECKING:
    from survey_dashboard.config.model import GlobalConfig

logger = logging.getLogger(__name__)


def error_figure(details: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=f"Something went wrong while rendering this chart.<br><br>{details}",
        showarrow=False,
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(margin=dict(l=40, r=40, t=40, b=40))
    return fig


class ChartOrchestrator:
    """
    Drives every registered view from one filtered frame.

    On load, on any filter change and on reset, `update` filters the dataset
    exactly once and hands the same frame to each view. Each view is built
    in isolation: if one raises, it gets an error figure and the others still
    render.

    The (state, frame) pair of the latest filtering is kept so that
    view-local changes (pie zoom, hover highlight) can be re-rendered via
    `rerender` without filtering again. Callbacks may run on several
    threads, so the pair is only ever replaced in a single assignment.
    """

    def __init__(
        self,
        dataset: Dataset,
        registry: ViewRegistry,
        config: Optional[GlobalConfig] = None,
    ) -> None:
        self.dataset = dataset
        self.views: Dict[str, BaseView] = {
            view_id: registry.create(view_id, dataset, config)
            for view_id in registry.ids()
        }
        self._last: Optional[Tuple[FilterState, pd.DataFrame]] = None

    @property
    def filtered_records(self) -> Optional[pd.DataFrame]:
        """Frame produced by the latest filtering, None before the first update."""
        last = self._last
        return last[1] if last is not None else None

    def filtered(self, state: FilterState) -> pd.DataFrame:
        records = filter_records(self.dataset, state)
        self._last = (state, records)
        return records

    def update(
        self,
        state: FilterState,
        view_kwargs: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> Tuple[Dict[str, go.Figure], pd.DataFrame]:
        """
        Filter once and build every view. view_kwargs passes extra render
        arguments per view id, e.g. {"pie": {"zoom": 1.2}}.

        Returns the figures by view id together with the filtered frame they
        were built from.
        """
        view_kwargs = view_kwargs or {}
        records = self.filtered(state)

        logger.info(
            "render_start",
            extra={
                "filter_state": state.to_dict(),
                "n_records": len(records),
                "n_total": self.dataset.n_rows,
            },
        )

        figures = {
            view_id: self._build(view, records, state, **view_kwargs.get(view_id, {}))
            for view_id, view in self.views.items()
        }
        return figures, records

    def rerender(self, view_id: str, state: FilterState, **render_kwargs: Any) -> go.Figure:
        """
        Re-render a single view, reusing the frame from the latest update when
        it was computed for the same state.
        """
        try:
            view = self.views[view_id]
        except KeyError:
            raise KeyError(f"View '{view_id}' not found")

        last = self._last
        if last is not None and last[0] == state:
            records = last[1]
        else:
            records = self.filtered(state)

        return self._build(view, records, state, **render_kwargs)

    def _build(
        self,
        view: BaseView,
        records: pd.DataFrame,
        state: FilterState,
        **render_kwargs: Any,
    ) -> go.Figure:
        try:
            data = view.compute_data(records, state)
            return view.render_figure(data, state, **render_kwargs)
        except Exception as e:
            logger.exception(
                "Error rendering view",
                extra={"view_id": view.id, "filter_state": state.to_dict()},
            )
            return error_figure(f"{type(e).__name__}: {e}")
