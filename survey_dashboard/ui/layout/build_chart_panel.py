from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from survey_dashboard.core.view_registry import ViewRegistry
from survey_dashboard.ui.ids import IDs, graph_id
from survey_dashboard.views.bar_chart_view import AveragePurchaseView
from survey_dashboard.views.pie_chart_view import GenderDistributionView

BAR_VIEW_ID = AveragePurchaseView.id
PIE_VIEW_ID = GenderDistributionView.id


def _zoom_controls() -> html.Div:
    return html.Div(
        [
            dbc.Button("−", id=IDs.Control.ZOOM_OUT_BTN, color="light", size="sm", n_clicks=0),
            html.Span("100%", id=IDs.Control.ZOOM_LABEL, className="mx-2 small text-muted"),
            dbc.Button("+", id=IDs.Control.ZOOM_IN_BTN, color="light", size="sm", n_clicks=0),
        ],
        className="d-flex align-items-center ms-auto",
    )


def build_chart_card(view_id: str, label: str) -> dbc.Card:
    header_children = [html.Strong(label)]
    if view_id == PIE_VIEW_ID:
        header_children.append(_zoom_controls())

    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(header_children, className="d-flex align-items-center"),
                className="p-2",
            ),
            dbc.CardBody(
                dcc.Loading(
                    type="default",
                    children=dcc.Graph(
                        id=graph_id(view_id),
                        style={"height": "420px"},
                        config={"displaylogo": False},
                        clear_on_unhover=True,
                    ),
                ),
            ),
        ],
        className="sd-chartcard mb-3",
    )


def build_chart_panel(registry: ViewRegistry) -> List[dbc.Row]:
    cards = [build_chart_card(cls.id, cls.label) for cls in registry.all_classes()]
    # Two charts per row; a chart left over takes the full width
    rows = []
    for i in range(0, len(cards), 2):
        pair = cards[i:i + 2]
        width = 6 if len(pair) == 2 else 12
        rows.append(dbc.Row([dbc.Col(card, md=width) for card in pair], className="gx-3"))
    return rows
