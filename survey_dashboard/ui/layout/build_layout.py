from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from survey_dashboard.core.filter_state import FilterState
from survey_dashboard.ui.ids import IDs
from survey_dashboard.ui.layout.build_chart_panel import build_chart_panel
from survey_dashboard.ui.layout.build_filter_panel import build_filter_panel
from survey_dashboard.ui.layout.build_navbar import build_navbar
from survey_dashboard.views.pie_chart_view import DEFAULT_ZOOM

if TYPE_CHECKING:
    from survey_dashboard.ui.context import AppContext

LOAD_ERROR_MESSAGE = "Error loading the data. Please check the file path."


def build_load_error_layout(ctx: AppContext) -> dbc.Container:
    """
    Shown instead of the dashboard when the survey file cannot be loaded.
    No filter controls and no charts are built.
    """
    return dbc.Container(
        fluid=True,
        className="sd-root",
        children=[
            build_navbar(ctx.global_config, None),
            dbc.Alert(
                [
                    html.H4(LOAD_ERROR_MESSAGE, className="alert-heading"),
                    html.P(ctx.load_error or "", className="mb-0 small"),
                ],
                id=IDs.Control.LOAD_ERROR_ALERT,
                color="danger",
                is_open=True,
                dismissable=False,
                className="mt-3",
            ),
        ],
    )


def build_layout(ctx: AppContext):
    if not ctx.is_ready:
        return build_load_error_layout(ctx)

    return dbc.Container(
        fluid=True,
        className="sd-root",
        children=[
            build_navbar(ctx.global_config, ctx.dataset),

            # App-level stores
            dcc.Store(id=IDs.Store.FILTER_STATE, data=FilterState.default().to_dict()),
            dcc.Store(id=IDs.Store.PIE_ZOOM, data=DEFAULT_ZOOM),

            dbc.Row(
                [
                    dbc.Col(build_filter_panel(ctx.dataset), md=3, className="mt-3"),
                    dbc.Col(build_chart_panel(ctx.registry), md=9, className="mt-3"),
                ],
                className="gx-3",
            ),
        ],
    )
