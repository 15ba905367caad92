import math

import pytest

from survey_dashboard.core.dataset_loader import load_survey_dataset, resolve_data_path
from survey_dashboard.core.exceptions import DatasetLoadError, DatasetSchemaError

HEADER = "Gender,PaymentMethod,Chain,Age,Income,PurchaseAmount,FamilySize\n"


def _write_csv(tmp_path, body: str, header: str = HEADER, name: str = "survey.csv"):
    path = tmp_path / name
    path.write_text(header + body)
    return path


def test_load_parses_numeric_fields(tmp_path):
    path = _write_csv(
        tmp_path,
        "Male,Cash,Aldi,34,52000,45.50,3\n"
        "Female,Credit Card,Kroger,28,61000,80.25,2\n",
    )

    ds = load_survey_dataset(path)

    assert ds.n_rows == 2
    assert ds.name == "survey"
    assert ds.file_path == path
    assert list(ds.frame["PurchaseAmount"]) == [45.5, 80.25]
    assert ds.frame["Age"].dtype.kind == "f"

    records = list(ds.records())
    assert records[1].chain == "Kroger"
    assert records[1].income == 61000.0


def test_load_coerces_non_numeric_to_nan(tmp_path):
    path = _write_csv(
        tmp_path,
        "Male,Cash,Aldi,thirty,52000,n/a,3\n"
        "Female,Cash,Aldi,28,61000,,2\n"
        "Female,Cash,Aldi,28,61000,10,2\n",
    )

    ds = load_survey_dataset(path)

    amounts = list(ds.frame["PurchaseAmount"])
    assert math.isnan(amounts[0])
    assert math.isnan(amounts[1])
    assert amounts[2] == 10.0
    assert dict(ds.missing_numeric_counts()) == {"Age": 1, "PurchaseAmount": 2}


def test_load_keeps_categorical_text_exact(tmp_path):
    path = _write_csv(tmp_path, "NA,Cash,Aldi,30,1,1,1\n,Cash, Aldi,30,1,1,1\n")

    ds = load_survey_dataset(path)

    # "NA" and "" are real category values, whitespace is not stripped
    assert list(ds.genders) == ["NA", ""]
    assert list(ds.chains) == ["Aldi", " Aldi"]


def test_valid_sets_are_first_seen_order(tmp_path):
    path = _write_csv(
        tmp_path,
        "Female,Cash,Kroger,30,1,1,1\n"
        "Male,Card,Aldi,30,1,1,1\n"
        "Female,Cash,Kroger,30,1,1,1\n",
    )

    valid = load_survey_dataset(path).valid_sets()

    assert valid.genders == ("Female", "Male")
    assert valid.payment_methods == ("Cash", "Card")
    assert valid.chains == ("Kroger", "Aldi")


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(DatasetLoadError):
        load_survey_dataset(tmp_path / "nope.csv")


def test_empty_file_raises_load_error(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")

    with pytest.raises(DatasetLoadError):
        load_survey_dataset(path)


def test_missing_columns_raise_schema_error(tmp_path):
    path = _write_csv(tmp_path, "Male,Aldi,1\n", header="Gender,Chain,Age\n")

    with pytest.raises(DatasetSchemaError, match="PaymentMethod, Income, PurchaseAmount, FamilySize"):
        load_survey_dataset(path)


def test_resolve_data_path_uses_env_root(tmp_path, monkeypatch):
    (tmp_path / "survey.csv").write_text(HEADER)
    monkeypatch.setenv("SURVEY_DASHBOARD_DATA_ROOT", str(tmp_path))

    # redundant data/ prefix falls back to the root itself
    assert resolve_data_path("data/survey.csv") == tmp_path / "survey.csv"


def test_resolve_data_path_relative_to_base_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("SURVEY_DASHBOARD_DATA_ROOT", raising=False)

    assert resolve_data_path("data/x.csv", base_dir=tmp_path) == tmp_path / "data" / "x.csv"
    assert resolve_data_path(tmp_path / "abs.csv") == tmp_path / "abs.csv"
