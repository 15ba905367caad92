"""
Config package for survey_dashboard.

Responsible for:
- config model (GlobalConfig)
- config I/O helpers (load_global_config / load_configured_dataset)
"""

from .model import GlobalConfig
from .loader import load_global_config, load_configured_dataset
