from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from survey_dashboard.config.model import GlobalConfig
from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.orchestrator import ChartOrchestrator
from survey_dashboard.core.view_registry import ViewRegistry


@dataclass
class AppContext:
    """
    Holds shared state for the Dash app: config, the loaded dataset, the view
    registry and the chart orchestrator. This is passed into layout + callback
    registration functions instead of using module-level globals.

    When the survey file failed to load, dataset and orchestrator are None
    and load_error carries the message shown to the user.
    """
    global_config: GlobalConfig
    registry: ViewRegistry
    dataset: Optional[Dataset] = None
    orchestrator: Optional[ChartOrchestrator] = None
    load_error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.dataset is not None and self.orchestrator is not None
