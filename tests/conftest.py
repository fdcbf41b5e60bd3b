"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from gmrc.config import clear_app_settings_cache

# Import CLI fixtures to make them available globally
from tests.cli_fixtures import clean_runner, cli_invoke  # noqa: F401


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep GMRC_* variables from the developer's shell out of the tests."""
    for var in (
        "GMRC_CONFIG",
        "GMRC_DEBUG",
        "GMRC_LOG_LEVEL",
        "GMRC_LOG_FORMAT",
        "GMRC_LOG_FILE",
    ):
        monkeypatch.delenv(var, raising=False)
    clear_app_settings_cache()
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    # CLI commands configure logging onto the CliRunner streams
    clear_app_settings_cache()
    root_logger.handlers[:] = original_handlers
    root_logger.setLevel(original_level)


@pytest.fixture
def project_dir(tmp_path, monkeypatch) -> Path:
    """An empty project directory that is also the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_file(project_dir):
    """Return a helper that writes a file below the project directory."""

    def write(name: str, content: str) -> Path:
        path = project_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def write_module(write_file):
    """Return a helper that writes a Python config exporting ``value``."""

    def write(name: str, value) -> Path:
        return write_file(name, f"default = {value!r}\n")

    return write
