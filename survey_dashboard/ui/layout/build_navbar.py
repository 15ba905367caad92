from __future__ import annotations

from typing import Optional

import dash_bootstrap_components as dbc
from dash import html

from survey_dashboard.config.model import GlobalConfig
from survey_dashboard.core.dataset import Dataset


def build_navbar(global_config: GlobalConfig, dataset: Optional[Dataset]) -> dbc.Navbar:
    dataset_text = dataset.name if dataset is not None else "No dataset loaded"

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(global_config.ui_title, className="mb-0"),
                        html.Small(global_config.subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
                html.Div(
                    [
                        html.Div("Active Dataset", className="navbar-dataset-title"),
                        html.Div(dataset_text, className="navbar-dataset-name"),
                    ],
                    className="text-end",
                ),
            ],
        ),
        className="sd-navbar mb-2",
        color="light",
    )
