from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

import dash
from dash import Input, Output, State

from survey_dashboard.ui.helpers import status_text, try_parse_filter_state
from survey_dashboard.ui.ids import IDs, graph_id
from survey_dashboard.ui.layout.build_chart_panel import BAR_VIEW_ID, PIE_VIEW_ID
from survey_dashboard.views.pie_chart_view import DEFAULT_ZOOM

if TYPE_CHECKING:
    from survey_dashboard.ui.context import AppContext

logger = logging.getLogger(__name__)


def hovered_label(hover_data: Optional[dict], key: str = "label") -> Optional[str]:
    """
    Category under the pointer, if any: "label" for a pie slice, "y" for a
    horizontal bar.
    """
    if not hover_data:
        return None
    points = hover_data.get("points") or []
    if not points:
        return None
    label = points[0].get(key)
    return str(label) if label is not None else None


def register_render_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    orchestrator = ctx.orchestrator
    view_ids = list(orchestrator.views.keys())

    # ---------------------------------------------------------
    # FilterState -> every chart (load, dropdown change, reset)
    # ---------------------------------------------------------
    @app.callback(
        *[Output(graph_id(view_id), "figure") for view_id in view_ids],
        Output(IDs.Control.STATUS_TEXT, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        State(IDs.Store.PIE_ZOOM, "data"),
    )
    def update_charts(fs_data: dict[str, Any] | None, zoom: float | None):
        state = try_parse_filter_state(fs_data, ctx.dataset)
        zoom = DEFAULT_ZOOM if zoom is None else float(zoom)

        figures, records = orchestrator.update(state, view_kwargs={PIE_VIEW_ID: {"zoom": zoom}})

        return (
            *[figures[view_id] for view_id in view_ids],
            status_text(len(records), ctx.dataset.n_rows),
        )

    # ---------------------------------------------------------
    # Hover -> bar only, no refiltering
    # ---------------------------------------------------------
    if BAR_VIEW_ID in view_ids:

        @app.callback(
            Output(graph_id(BAR_VIEW_ID), "figure", allow_duplicate=True),
            Input(graph_id(BAR_VIEW_ID), "hoverData"),
            State(IDs.Store.FILTER_STATE, "data"),
            prevent_initial_call=True,
        )
        def update_bar(hover_data: dict | None, fs_data: dict[str, Any] | None):
            state = try_parse_filter_state(fs_data, ctx.dataset)
            return orchestrator.rerender(
                BAR_VIEW_ID,
                state,
                highlight=hovered_label(hover_data, key="y"),
            )

    # ---------------------------------------------------------
    # Zoom / hover -> pie only, no refiltering
    # ---------------------------------------------------------
    if PIE_VIEW_ID not in view_ids:
        return

    @app.callback(
        Output(graph_id(PIE_VIEW_ID), "figure", allow_duplicate=True),
        Input(IDs.Store.PIE_ZOOM, "data"),
        Input(graph_id(PIE_VIEW_ID), "hoverData"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_pie(zoom: float | None, hover_data: dict | None, fs_data: dict[str, Any] | None):
        state = try_parse_filter_state(fs_data, ctx.dataset)
        zoom = DEFAULT_ZOOM if zoom is None else float(zoom)
        return orchestrator.rerender(
            PIE_VIEW_ID,
            state,
            zoom=zoom,
            highlight=hovered_label(hover_data),
        )
