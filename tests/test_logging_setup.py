"""Tests for the logging bootstrap."""

import logging
from logging.handlers import RotatingFileHandler

import logdeck.io.logging_setup as logging_setup


def test_configure_uses_env_file(tmp_path):
    runtime = logging_setup.configure()
    assert runtime.file_path == str(tmp_path / "logs" / "logdeck.log")
    assert runtime.level_name == "INFO"
    assert logging_setup.get_runtime() is runtime

    logger = logging.getLogger("logdeck")
    assert logger.propagate is False
    assert len(logger.handlers) == 2


def test_interactive_run_logs_to_file_only():
    runtime = logging_setup.configure(interactive=True)
    assert runtime.interactive is True
    handlers = logging.getLogger("logdeck").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], RotatingFileHandler)


def test_configure_is_idempotent():
    first = logging_setup.configure()
    second = logging_setup.configure(run_name="other")
    assert first is second
    assert len(logging.getLogger("logdeck").handlers) == 2


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("LOGDECK_LOG_LEVEL", "debug")
    runtime = logging_setup.configure()
    assert runtime.level == logging.DEBUG
    assert runtime.level_name == "DEBUG"


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOGDECK_LOG_LEVEL", "chatty")
    assert logging_setup.configure().level == logging.INFO


def test_records_reach_the_file(tmp_path):
    runtime = logging_setup.configure()
    logging.getLogger("logdeck.core.registry").info("panel removed module=OS remaining=13")
    for handler in logging.getLogger("logdeck").handlers:
        handler.flush()
    content = (tmp_path / "logs" / "logdeck.log").read_text(encoding="utf-8")
    assert "panel removed module=OS" in content
    assert runtime.file_path.endswith("logdeck.log")


def test_default_log_path_uses_log_dir(tmp_path, monkeypatch):
    monkeypatch.delenv("LOGDECK_LOG_FILE")
    monkeypatch.setenv("LOGDECK_LOG_DIR", str(tmp_path / "dir"))
    runtime = logging_setup.configure(run_name="batch run")
    assert runtime.file_path.startswith(str(tmp_path / "dir"))
    assert "batch-run-" in runtime.file_path
