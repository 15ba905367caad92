from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.filter_state import ALL
from survey_dashboard.ui.helpers import get_filter_dropdown_options, status_text
from survey_dashboard.ui.ids import IDs


def _dropdown(label: str, component_id: str, options: list) -> html.Div:
    return html.Div(
        [
            html.Label(label, className="form-label", htmlFor=component_id),
            dcc.Dropdown(
                id=component_id,
                options=options,
                value=ALL,
                clearable=False,
                className="mb-3",
            ),
        ]
    )


def build_filter_panel(dataset: Dataset) -> dbc.Card:
    gender_options, payment_options, chain_options = get_filter_dropdown_options(dataset)

    return dbc.Card(
        [
            dbc.CardHeader("Filters", className="fw-semibold"),
            dbc.CardBody(
                [
                    html.Div([
                        html.H5(dataset.name, className="card-title"),
                        html.P(
                            status_text(dataset.n_rows, dataset.n_rows),
                            id=IDs.Control.STATUS_TEXT,
                            className="card-subtitle text-muted mb-3",
                        ),
                        html.Hr(),
                    ]),
                    _dropdown("Gender", IDs.Control.GENDER_SELECT, gender_options),
                    _dropdown("Payment method", IDs.Control.PAYMENT_SELECT, payment_options),
                    _dropdown("Chain", IDs.Control.CHAIN_SELECT, chain_options),
                    dbc.Button(
                        "Reset filters",
                        id=IDs.Control.RESET_BTN,
                        color="secondary",
                        size="sm",
                        n_clicks=0,
                        className="w-100",
                    ),
                ]
            ),
        ],
        className="sd-sidebar",
    )
