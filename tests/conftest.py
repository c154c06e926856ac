"""Pytest configuration and shared fixtures for logdeck tests."""

import logging

import pytest

import logdeck.io.logging_setup


# ---------------------------------------------------------------------------
# Isolation fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point settings and log files at a per-test temp directory."""
    config_home = tmp_path / "config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("LOGDECK_LOG_FILE", str(tmp_path / "logs" / "logdeck.log"))
    monkeypatch.delenv("LOGDECK_LOG_LEVEL", raising=False)
    return config_home


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging_setup.configure() so caplog keeps seeing records."""
    yield
    logdeck.io.logging_setup._RUNTIME = None
    logger = logging.getLogger("logdeck")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def settings_file(isolated_config):
    """Path of the settings file inside the isolated config home."""
    return isolated_config / "logdeck" / "settings.json"
