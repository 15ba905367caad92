from __future__ import annotations

__all__ = ["IDs", "graph_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"
        PIE_ZOOM = "pie-zoom"

    class Control:
        # Filter dropdowns
        GENDER_SELECT = "gender-select"
        PAYMENT_SELECT = "payment-select"
        CHAIN_SELECT = "chain-select"
        RESET_BTN = "reset-filters-btn"

        # Pie zoom
        ZOOM_IN_BTN = "pie-zoom-in-btn"
        ZOOM_OUT_BTN = "pie-zoom-out-btn"
        ZOOM_LABEL = "pie-zoom-label"

        # Status line under the filters
        STATUS_TEXT = "status-text"

        # Shown instead of the dashboard when the survey file fails to load
        LOAD_ERROR_ALERT = "load-error-alert"


def graph_id(view_id: str) -> str:
    """Component id of the dcc.Graph hosting the given view."""
    return f"{view_id}-graph"
