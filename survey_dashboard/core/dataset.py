from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import pandas as pd

from survey_dashboard.core.exceptions import DatasetSchemaError
from survey_dashboard.core.record import (
    CATEGORICAL_COLUMNS,
    NUMERIC_COLUMNS,
    REQUIRED_COLUMNS,
    SurveyRecord,
)


@dataclass(frozen=True)
class ValidSets:
    """
    Cached domain of each categorical field, in first-seen order.
    Used to populate the dropdowns and to sanitise incoming selections.
    """
    genders: Tuple[str, ...]
    payment_methods: Tuple[str, ...]
    chains: Tuple[str, ...]


class Dataset:
    """
    Process-wide holder of all loaded survey rows.

    Includes:
    - the rows as a pandas DataFrame with the CSV column names
    - typed access to individual rows as SurveyRecord
    - cached categorical domains for UI population/validation

    The frame is populated once at load time and treated as read-only
    afterwards. Filtering never mutates it, it returns a new frame.
    """

    # -------------------------------------------------------------------------
    # Constructor
    # -------------------------------------------------------------------------
    def __init__(
        self,
        name: str,
        frame: pd.DataFrame,
        file_path: Optional[Path] = None,
    ) -> None:
        missing = [col for col in REQUIRED_COLUMNS if col not in frame.columns]
        if missing:
            source = file_path or name
            raise DatasetSchemaError(
                f"Dataset '{source}' is missing required columns: {', '.join(missing)}"
            )

        self.name = name
        self.file_path = file_path

        # Extra source columns are dropped
        frame = frame[REQUIRED_COLUMNS].reset_index(drop=True).copy()
        for col in CATEGORICAL_COLUMNS:
            frame[col] = frame[col].astype(str)
        for col in NUMERIC_COLUMNS:
            frame[col] = pd.to_numeric(frame[col], errors="coerce").astype(float)
        self._frame = frame

        self._valid_sets: Optional[ValidSets] = None

    @classmethod
    def from_records(cls, name: str, records: Iterable[SurveyRecord]) -> Dataset:
        rows = [r.to_row() for r in records]
        frame = pd.DataFrame(rows, columns=REQUIRED_COLUMNS)
        return cls(name=name, frame=frame)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def n_rows(self) -> int:
        return len(self._frame)

    def __len__(self) -> int:
        return self.n_rows

    @property
    def genders(self) -> pd.Series:
        return self._frame["Gender"]

    @property
    def payment_methods(self) -> pd.Series:
        return self._frame["PaymentMethod"]

    @property
    def chains(self) -> pd.Series:
        return self._frame["Chain"]

    def records(self) -> Iterator[SurveyRecord]:
        for row in self._frame.to_dict("records"):
            yield SurveyRecord.from_row(row)

    # -------------------------------------------------------------------------
    # Cached valid values for UI sanitisation
    # -------------------------------------------------------------------------
    def valid_sets(self) -> ValidSets:
        """
        Return the distinct values of each categorical field.

        Order is first-seen order in the file, which is also the order the
        dropdown options are listed in.
        """
        if self._valid_sets is not None:
            return self._valid_sets

        def domain(series: pd.Series) -> Tuple[str, ...]:
            return tuple(str(v) for v in series.unique())

        self._valid_sets = ValidSets(
            genders=domain(self.genders),
            payment_methods=domain(self.payment_methods),
            chains=domain(self.chains),
        )
        return self._valid_sets

    def missing_numeric_counts(self) -> List[Tuple[str, int]]:
        """Per numeric column, how many rows hold NaN (unparseable source text)."""
        out: List[Tuple[str, int]] = []
        for col in NUMERIC_COLUMNS:
            n_missing = int(self._frame[col].isna().sum())
            if n_missing:
                out.append((col, n_missing))
        return out
