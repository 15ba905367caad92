from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from survey_dashboard.config.loader import load_configured_dataset, load_global_config
from survey_dashboard.core.exceptions import DatasetLoadError
from survey_dashboard.core.orchestrator import ChartOrchestrator
from survey_dashboard.core.view_registry import ViewRegistry
from survey_dashboard.ui.callbacks.callbacks_filters import register_filter_callbacks
from survey_dashboard.ui.callbacks.callbacks_render import register_render_callbacks
from survey_dashboard.ui.context import AppContext
from survey_dashboard.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)


def _build_view_registry() -> ViewRegistry:
    from survey_dashboard.views import (
        AveragePurchaseView,
        GenderDistributionView,
        PurchaseBoxPlotView,
    )

    registry = ViewRegistry()
    registry.register(AveragePurchaseView)
    registry.register(GenderDistributionView)
    registry.register(PurchaseBoxPlotView)
    return registry


def build_context(config_root: Path | str = Path("config")) -> AppContext:
    """
    Load config and the survey file once.

    A survey file that cannot be loaded does not raise: the returned context
    carries the error so the UI can show it and stop there.
    """
    global_config = load_global_config(Path(config_root))
    registry = _build_view_registry()

    try:
        dataset = load_configured_dataset(global_config)
    except DatasetLoadError as e:
        logger.exception(
            "Error loading survey file",
            extra={"data_file": str(global_config.data_file)},
        )
        return AppContext(global_config=global_config, registry=registry, load_error=str(e))

    orchestrator = ChartOrchestrator(dataset, registry, global_config)
    return AppContext(
        global_config=global_config,
        registry=registry,
        dataset=dataset,
        orchestrator=orchestrator,
    )


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    ctx = build_context(config_root)

    assets_path = Path(__file__).parent / "assets"

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        assets_folder=str(assets_path),
    )
    app.title = ctx.global_config.ui_title
    app.layout = build_layout(ctx)

    if not ctx.is_ready:
        # Halt: no controls were built, so nothing to wire up
        return app

    register_filter_callbacks(app, ctx)
    register_render_callbacks(app, ctx)

    return app
