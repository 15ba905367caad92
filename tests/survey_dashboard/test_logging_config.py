import logging

from pythonjsonlogger import jsonlogger

from survey_dashboard.logging_config import configure_logging


def test_plain_format_replaces_handlers():
    configure_logging(force_format="plain")
    configure_logging(force_format="plain")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_json_format_from_env(monkeypatch):
    monkeypatch.setenv("SURVEY_DASHBOARD_LOG_FORMAT", "json")

    configure_logging(level=logging.WARNING)

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, jsonlogger.JsonFormatter)
