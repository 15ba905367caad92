"""
Top-level package for the grocery survey dashboard.

This package exposes the core architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    survey_dashboard.core
    survey_dashboard.views
    survey_dashboard.ui
"""

__all__: list[str] = []
