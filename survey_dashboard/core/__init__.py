"""
Core domain layer: survey dataset, filter state, filtering, aggregation,
view base class, view registry and the chart update orchestrator
"""

from .dataset import Dataset
from .filter_state import ALL, FilterState
from .base_view import BaseView
from .view_registry import ViewRegistry

__all__ = ["ALL", "Dataset", "FilterState", "BaseView", "ViewRegistry"]
