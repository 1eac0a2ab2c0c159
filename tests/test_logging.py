"""
Tests for logging setup.

Tests:
- Importing the client leaves logging untouched
- Opt-in configuration for host applications
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
import structlog

from scorecard.config import Settings
from scorecard.logging import configure_logging, configure_logging_from_settings, get_logger

ROOT_DIR = Path(__file__).resolve().parent.parent

IMPORT_SCRIPT = """
import logging
import structlog

before = list(logging.getLogger().handlers)
import scorecard.github.client

assert logging.getLogger().handlers == before, logging.getLogger().handlers
assert not structlog.is_configured()
"""


@pytest.fixture
def restore_logging():
    """Undo global logging changes made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers = handlers
    root.setLevel(level)


class TestImportSideEffects:
    """Importing the library must not configure logging or read settings."""

    def test_import_leaves_logging_alone(self):
        env = dict(os.environ)
        # Invalid on purpose: settings must not be read at import time
        env["SCORECARD_PAGE_SIZE"] = "500"
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT_DIR), env.get("PYTHONPATH")]))

        result = subprocess.run(
            [sys.executable, "-c", IMPORT_SCRIPT],
            cwd=ROOT_DIR,
            env=env,
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr

    def test_get_logger_does_not_configure(self):
        structlog.reset_defaults()

        get_logger("github")

        assert not structlog.is_configured()


class TestConfigureLogging:
    """Tests for the opt-in configuration helpers."""

    def test_json_renderer(self, restore_logging):
        configure_logging("DEBUG", json_logs=True)

        assert structlog.is_configured()
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self, restore_logging):
        configure_logging("INFO")

        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_from_settings_outside_development(self, restore_logging):
        configure_logging_from_settings(Settings(environment="production", _env_file=None))

        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)

    def test_from_settings_in_development(self, restore_logging):
        configure_logging_from_settings(Settings(environment="development", _env_file=None))

        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)
