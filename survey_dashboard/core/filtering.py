from __future__ import annotations

import numpy as np
import pandas as pd

from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.filter_state import ALL, FilterState

# FilterState attribute -> CSV column
_DIMENSIONS = (
    ("gender", "Gender"),
    ("payment_method", "PaymentMethod"),
    ("chain", "Chain"),
)


def filter_frame(frame: pd.DataFrame, state: FilterState) -> pd.DataFrame:
    """
    Keep the rows matching every non-"All" selection, in their original order.

    Matching is exact string equality (case-sensitive, no trimming).
    An empty result is valid and means "no data" downstream.
    """
    mask = np.ones(len(frame), dtype=bool)

    for attr, column in _DIMENSIONS:
        selected = getattr(state, attr)
        if selected != ALL:
            mask &= (frame[column] == selected).to_numpy()

    return frame[mask]


def filter_records(dataset: Dataset, state: FilterState) -> pd.DataFrame:
    """Filter the whole dataset for the given selection."""
    return filter_frame(dataset.frame, state)
