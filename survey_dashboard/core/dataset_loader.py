from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import pandas as pd

from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.exceptions import DatasetLoadError

logger = logging.getLogger(__name__)


def resolve_data_path(path: Path, base_dir: Optional[Path] = None) -> Path:
    """
    Resolve a configured data file path.

    Absolute paths are used as-is. Relative paths are resolved against
    SURVEY_DASHBOARD_DATA_ROOT when set, else against base_dir.
    """
    path = Path(path)
    if path.is_absolute():
        return path

    data_root = os.environ.get("SURVEY_DASHBOARD_DATA_ROOT")
    if data_root:
        root_path = Path(data_root)
        resolved = root_path / path

        # Fallback for redundant 'data/' prefix
        if not resolved.is_file() and path.parts and path.parts[0] == "data":
            alt_path = root_path / Path(*path.parts[1:])
            if alt_path.is_file():
                resolved = alt_path
        return resolved

    if base_dir is not None:
        return Path(base_dir) / path
    return path


def load_survey_dataset(path: Path, name: Optional[str] = None) -> Dataset:
    """
    Load the survey CSV into a Dataset.

    Every field is read as text first. Categorical fields keep their exact
    text (no NA conversion, so "" stays ""). Numeric fields are coerced and
    anything unparseable becomes NaN, which aggregates skip.

    :raises DatasetLoadError: file missing, unreadable or not parseable as CSV
    :raises DatasetSchemaError: required columns are absent
    """
    path = Path(path)
    if not path.is_file():
        raise DatasetLoadError(f"Survey file not found at {path}.")

    try:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DatasetLoadError(f"Could not parse survey file {path}: {e}") from e

    # Header cells sometimes carry stray whitespace
    frame.columns = [str(c).strip() for c in frame.columns]

    ds = Dataset(name=name or path.stem, frame=frame, file_path=path)

    for col, n_missing in ds.missing_numeric_counts():
        logger.warning(
            "Column '%s' has %d non-numeric value(s); they are excluded from aggregates",
            col,
            n_missing,
            extra={"dataset": ds.name, "column": col, "n_missing": n_missing},
        )

    logger.info(
        "dataset_loaded",
        extra={"dataset": ds.name, "path": str(path), "n_rows": ds.n_rows},
    )
    return ds
