from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple

from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.filter_state import ALL, FilterState

logger = logging.getLogger(__name__)


def _options(values: Sequence[str]) -> List[dict]:
    return [{"label": ALL, "value": ALL}] + [{"label": v, "value": v} for v in values]


def get_filter_dropdown_options(
    dataset: Dataset,
) -> Tuple[List[dict], List[dict], List[dict]]:
    """
    Gender, payment method and chain options, each anchored by "All" and
    listed in first-seen order.
    """
    valid = dataset.valid_sets()
    return (
        _options(valid.genders),
        _options(valid.payment_methods),
        _options(valid.chains),
    )


def try_parse_filter_state(data: Any, dataset: Optional[Dataset] = None) -> FilterState:
    """
    Parse the filter-state store payload, falling back to the default state
    when it is missing or malformed. Unknown values are reset to "All".
    """
    if not isinstance(data, dict) or not data:
        return FilterState.default()
    try:
        state = FilterState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid filter-state: %r", data)
        return FilterState.default()
    return state.sanitised(dataset) if dataset is not None else state


def status_text(n_records: int, n_total: int) -> str:
    return f"{n_records} of {n_total} responses"
