"""
Per-chart summary statistics over a filtered survey frame.

All functions are pure: they take the filtered frame and return plain Python
containers. NaN purchase amounts (unparseable source values) never take part
in a numeric aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

import numpy as np
import pandas as pd

WHISKER_FACTOR = 1.5


@dataclass(frozen=True)
class FiveNumberSummary:
    """
    Box-plot statistics for one group.

    Whiskers are clamped to the observed data range. Outliers are every
    value strictly outside the whiskers, ascending, duplicates kept.
    """
    q1: float
    median: float
    q3: float
    lower_whisker: float
    upper_whisker: float
    outliers: Tuple[float, ...] = field(default_factory=tuple)

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """
    Linear-interpolation quantile (R-7): index = p * (n - 1), interpolated
    between the two bounding order statistics.
    """
    if len(sorted_values) == 0:
        raise ValueError("quantile of an empty sequence is undefined")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be within [0, 1], got {p}")
    return float(np.quantile(np.asarray(sorted_values, dtype=float), p, method="linear"))


def five_number_summary(values: Sequence[float]) -> FiveNumberSummary:
    """
    Compute the clamped five-number summary of the given values.

    NaN values are dropped first. Raises ValueError when nothing is left.
    """
    arr = np.asarray(values, dtype=float)
    arr = np.sort(arr[~np.isnan(arr)])
    if arr.size == 0:
        raise ValueError("five-number summary needs at least one numeric value")

    q1 = quantile(arr, 0.25)
    median = quantile(arr, 0.5)
    q3 = quantile(arr, 0.75)
    iqr = q3 - q1

    lower_whisker = max(float(arr[0]), q1 - WHISKER_FACTOR * iqr)
    upper_whisker = min(float(arr[-1]), q3 + WHISKER_FACTOR * iqr)

    outliers = tuple(
        float(v) for v in arr if v < lower_whisker or v > upper_whisker
    )

    return FiveNumberSummary(
        q1=q1,
        median=median,
        q3=q3,
        lower_whisker=lower_whisker,
        upper_whisker=upper_whisker,
        outliers=outliers,
    )


def aggregate_means(records: pd.DataFrame) -> Dict[str, float]:
    """
    Mean PurchaseAmount per Chain.

    Chains whose amounts are all NaN are left out. Empty input gives an
    empty mapping.
    """
    if records.empty:
        return {}

    means = (
        records.groupby("Chain", sort=False)["PurchaseAmount"]
        .mean()
        .dropna()
    )
    return {str(chain): float(value) for chain, value in means.items()}


def aggregate_counts(records: pd.DataFrame) -> Dict[str, int]:
    """Number of rows per Gender, in first-seen order."""
    if records.empty:
        return {}

    counts = records.groupby("Gender", sort=False).size()
    return {str(gender): int(n) for gender, n in counts.items()}


def aggregate_box_stats(records: pd.DataFrame) -> List[Tuple[str, FiveNumberSummary]]:
    """
    Five-number summary of PurchaseAmount per Chain, in first-encountered order.
    """
    out: List[Tuple[str, FiveNumberSummary]] = []
    if records.empty:
        return out

    for chain, group in records.groupby("Chain", sort=False):
        amounts = group["PurchaseAmount"].dropna().to_numpy(dtype=float)
        if amounts.size == 0:
            continue
        out.append((str(chain), five_number_summary(amounts)))

    return out
