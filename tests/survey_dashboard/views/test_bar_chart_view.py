from typing import cast

import plotly.graph_objects as go
import pytest

from survey_dashboard.config.model import GlobalConfig
from survey_dashboard.core.base_view import NO_DATA_MESSAGE
from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.filter_state import FilterState
from survey_dashboard.core.filtering import filter_records
from survey_dashboard.core.record import SurveyRecord
from survey_dashboard.views.bar_chart_view import AveragePurchaseView


def _make_dataset_for_bar():
    """
    4 rows over 2 chains:
    - Aldi: 10, 20 -> mean 15
    - Kroger: 40, 60 -> mean 50
    """
    return Dataset.from_records(
        "BarDataset",
        [
            SurveyRecord("Male", "Cash", "Aldi", 20, 1, 10.0, 1),
            SurveyRecord("Female", "Cash", "Kroger", 30, 1, 40.0, 2),
            SurveyRecord("Female", "Card", "Aldi", 40, 1, 20.0, 3),
            SurveyRecord("Male", "Card", "Kroger", 50, 1, 60.0, 4),
        ],
    )


def test_bar_compute_data_means():
    ds = _make_dataset_for_bar()
    view = AveragePurchaseView(ds, GlobalConfig())
    state = FilterState.default()

    data = view.compute_data(filter_records(ds, state), state)

    assert data == {"Aldi": pytest.approx(15.0), "Kroger": pytest.approx(50.0)}


def test_bar_render_figure_basic():
    ds = _make_dataset_for_bar()
    cfg = GlobalConfig(bar_color="#123456")
    view = AveragePurchaseView(ds, cfg)
    state = FilterState.default()

    fig = cast(go.Figure, view.build(filter_records(ds, state), state))

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    bar = fig.data[0]
    assert bar.orientation == "h"
    assert list(bar.y) == ["Aldi", "Kroger"]
    assert list(bar.x) == pytest.approx([15.0, 50.0])
    assert list(bar.marker.color) == ["#123456", "#123456"]
    assert "Avg Purchase" in bar.hovertemplate
    assert fig.layout.title.text == "Average Purchase by Chain"


def test_bar_highlight_recolours_hovered_chain():
    ds = _make_dataset_for_bar()
    cfg = GlobalConfig(bar_color="#111111", bar_highlight_color="#FF7043")
    view = AveragePurchaseView(ds, cfg)
    state = FilterState.default()
    data = view.compute_data(filter_records(ds, state), state)

    fig = view.render_figure(data, state, highlight="Kroger")

    assert list(fig.data[0].marker.color) == ["#111111", "#FF7043"]
    assert fig.data[0].hoverlabel.bgcolor == "#FF7043"


def test_bar_render_figure_filtered():
    ds = _make_dataset_for_bar()
    view = AveragePurchaseView(ds, GlobalConfig())
    state = FilterState(payment_method="Card")

    fig = view.build(filter_records(ds, state), state)

    assert list(fig.data[0].y) == ["Aldi", "Kroger"]
    assert list(fig.data[0].x) == pytest.approx([20.0, 60.0])


def test_bar_render_figure_empty():
    ds = _make_dataset_for_bar()
    view = AveragePurchaseView(ds, GlobalConfig())
    state = FilterState(gender="Other")

    data = view.compute_data(filter_records(ds, state), state)
    fig = view.render_figure(data, state)

    assert data == {}
    assert isinstance(fig, go.Figure)
    assert fig.layout.title.text == NO_DATA_MESSAGE
    assert len(fig.data) == 0
