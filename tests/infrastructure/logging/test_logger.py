"""Tests for the gemdash application and usage loggers."""

import logging
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from gemdash.adapters import assemble_dashboard_cli
from gemdash.domain.models.finance import DashboardResult
from gemdash.infrastructure.logging import logger as logger_module

STAMP = "20241018"
_LOGGER_NAMES = ("gemdash.app", "gemdash.usage", "gemdash.builder")


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    """Point loggers at tmp_path and start from unbuilt singletons."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: STAMP),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)
    for name in _LOGGER_NAMES:
        monkeypatch.setattr(logging.getLogger(name), "handlers", [])
    yield tmp_path
    for name in _LOGGER_NAMES:
        for handler in logging.getLogger(name).handlers:
            handler.close()


def _read(wrapper: logger_module.Logger, path) -> str:
    for handler in wrapper.logger.handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


def test_app_logger_writes_dated_file_under_app(log_root):
    """The app logger is gemdash.app and writes INFO and above."""
    app = logger_module.get_app_logger()
    app.info("Dashboard assembled: config=bkk_dashboard, module=bkk")
    app.debug("raw payload dump")

    assert app.logger.name == "gemdash.app"
    assert app.logger.propagate is False
    text = _read(app, log_root / "logs" / "app" / f"{STAMP}_app_logs.log")
    assert (
        "| gemdash.app | INFO | "
        "Dashboard assembled: config=bkk_dashboard, module=bkk"
    ) in text
    assert "raw payload dump" not in text


def test_usage_logger_is_a_separate_singleton(log_root):
    """Usage entries go to usage/usage_logs, not to the app log."""
    usage = logger_module.get_usage_logger()
    app = logger_module.get_app_logger()
    usage.warning("No dashboard registered for kenya/Unknown")

    assert usage is logger_module.get_usage_logger()
    assert app is logger_module.get_app_logger()
    assert usage is not app
    assert usage.logger.name == "gemdash.usage"
    usage_text = _read(
        usage, log_root / "logs" / "usage" / f"{STAMP}_usage_logs.log"
    )
    app_text = _read(app, log_root / "logs" / "app" / f"{STAMP}_app_logs.log")
    assert "WARNING | No dashboard registered for kenya/Unknown" in usage_text
    assert "kenya/Unknown" not in app_text


def test_cli_records_requested_dashboard_in_usage_log(
    log_root, monkeypatch, capsys
):
    """Each CLI run leaves one usage entry naming the dashboard."""
    assembler = MagicMock()
    assembler.execute.return_value = DashboardResult(
        metrics={"totalOutstandingLKR": Decimal("0"), "hasData": False}
    )
    monkeypatch.setattr(
        assemble_dashboard_cli,
        "build_dashboard_assembler",
        lambda: assembler,
    )

    assemble_dashboard_cli.main(["outstanding_dashboard"])
    capsys.readouterr()

    text = _read(
        logger_module.get_usage_logger(),
        log_root / "logs" / "usage" / f"{STAMP}_usage_logs.log",
    )
    entries = [
        line for line in text.splitlines() if "Dashboard requested" in line
    ]
    assert len(entries) == 1
    assert entries[0].endswith(
        "Dashboard requested: config=outstanding_dashboard, module=None"
    )


def test_builder_reuses_configured_logger(log_root):
    """A second build returns the same logger without new handlers."""
    builder = (
        logger_module.LoggerBuilder()
        .name("gemdash.builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.WARNING)
    )

    first = builder.build()
    second = builder.build()

    assert first is second
    assert first.level == logging.WARNING
    assert len(first.handlers) == 1
    handler = first.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    assert handler.baseFilename == str(
        log_root / "logs" / "reports" / f"{STAMP}_report_logs.log"
    )


@pytest.mark.parametrize(
    "method",
    ["info", "warning", "error", "debug", "critical"],
)
def test_wrapper_forwards_each_level(log_root, monkeypatch, method):
    """Every level method forwards the message to the built logger."""
    app = logger_module.get_app_logger()
    monkeypatch.setattr(app, "logger", MagicMock())

    getattr(app, method)("Inventory profit computed: module=kenya")

    getattr(app.logger, method).assert_called_once_with(
        "Inventory profit computed: module=kenya"
    )
