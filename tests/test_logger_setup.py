"""Tests for logging setup and error formatting."""

import logging

from blueprint.src.errors import ConfigError, GenerationError
from blueprint.utils.logger_setup import LoggerManager, get_logger


def test_get_logger_namespaces_names():
    assert get_logger("blueprint.src.cli").name == "blueprint.src.cli"
    assert get_logger("scripts").name == "blueprint.scripts"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "nested" / "run.log"

    LoggerManager.setup_logging(log_file=str(log_file), level="DEBUG", console=False)
    get_logger("blueprint.tests").debug("hello from tests")
    for handler in logging.getLogger("blueprint").handlers:
        handler.flush()

    assert "blueprint.tests - DEBUG - hello from tests" in log_file.read_text(encoding="utf-8")


def test_setup_logging_runs_once():
    LoggerManager.setup_logging(level="WARNING")
    LoggerManager.setup_logging(level="DEBUG")

    root = logging.getLogger("blueprint")
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_error_string_includes_type_and_cause():
    cause = ValueError("bad number")

    assert str(ConfigError("Invalid setting", cause=cause)) == (
        "config_error: Invalid setting (caused by: bad number)"
    )
    assert str(GenerationError("empty reply")) == "api_error: empty reply"
