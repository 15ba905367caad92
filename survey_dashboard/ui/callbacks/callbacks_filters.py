from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from survey_dashboard.core.filter_state import FilterState
from survey_dashboard.ui.ids import IDs
from survey_dashboard.views.pie_chart_view import DEFAULT_ZOOM, zoom_in, zoom_out

if TYPE_CHECKING:
    from survey_dashboard.ui.context import AppContext

logger = logging.getLogger(__name__)


def zoom_label(level: float) -> str:
    return f"{round(level * 100)}%"


def next_zoom(triggered_id: str | None, current: float | None, step: float, min_zoom: float) -> float:
    level = DEFAULT_ZOOM if current is None else float(current)
    if triggered_id == IDs.Control.ZOOM_IN_BTN:
        return zoom_in(level, step)
    if triggered_id == IDs.Control.ZOOM_OUT_BTN:
        return zoom_out(level, step, min_zoom)
    return level


def register_filter_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # Dropdowns -> FilterState store (fires once on page load too)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.GENDER_SELECT, "value"),
        Input(IDs.Control.PAYMENT_SELECT, "value"),
        Input(IDs.Control.CHAIN_SELECT, "value"),
    )
    def sync_filter_state(gender: str | None, payment_method: str | None, chain: str | None):
        state = FilterState.from_dict(
            {"gender": gender, "payment_method": payment_method, "chain": chain}
        ).sanitised(ctx.dataset)
        logger.debug("filter_state_changed", extra={"filter_state": state.to_dict()})
        return state.to_dict()

    # ---------------------------------------------------------
    # Reset: all dropdowns back to "All"
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.GENDER_SELECT, "value"),
        Output(IDs.Control.PAYMENT_SELECT, "value"),
        Output(IDs.Control.CHAIN_SELECT, "value"),
        Input(IDs.Control.RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(_n_clicks):
        default = FilterState.default()
        logger.info("filters_reset")
        return default.gender, default.payment_method, default.chain

    # ---------------------------------------------------------
    # Pie zoom buttons -> zoom store
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.PIE_ZOOM, "data"),
        Output(IDs.Control.ZOOM_LABEL, "children"),
        Input(IDs.Control.ZOOM_IN_BTN, "n_clicks"),
        Input(IDs.Control.ZOOM_OUT_BTN, "n_clicks"),
        State(IDs.Store.PIE_ZOOM, "data"),
        prevent_initial_call=True,
    )
    def update_zoom(_in_clicks, _out_clicks, current):
        cfg = ctx.global_config
        level = next_zoom(dash.ctx.triggered_id, current, cfg.zoom_increment, cfg.min_zoom)
        return level, zoom_label(level)
