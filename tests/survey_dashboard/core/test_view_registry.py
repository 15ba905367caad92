import pytest

from survey_dashboard.core.dataset import Dataset
from survey_dashboard.core.record import SurveyRecord
from survey_dashboard.core.view_registry import ViewRegistry
from survey_dashboard.views import AveragePurchaseView, GenderDistributionView


def _dataset() -> Dataset:
    return Dataset.from_records("reg", [SurveyRecord("Male", "Cash", "Aldi", 1, 1, 1.0, 1)])


def test_register_and_create_in_registration_order():
    registry = ViewRegistry()
    registry.register(GenderDistributionView)
    registry.register(AveragePurchaseView)

    assert registry.ids() == ["pie", "bar"]
    view = registry.create("bar", _dataset())
    assert isinstance(view, AveragePurchaseView)
    assert view.config is None


def test_duplicate_registration_rejected():
    registry = ViewRegistry()
    registry.register(AveragePurchaseView)

    with pytest.raises(ValueError):
        registry.register(AveragePurchaseView)


def test_non_view_rejected():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(dict)


def test_unknown_view_id():
    with pytest.raises(KeyError):
        ViewRegistry().create("missing", _dataset())
