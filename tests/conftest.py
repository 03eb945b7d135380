"""Pytest configuration and fixtures for poem_config tests."""

import typing as t
from pathlib import Path

import loguru
import pytest

from poem_config.config.settings import CONFIG_ENV, CONFIG_FILENAME, LogLevel, Settings
from poem_config.infrastructure.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_logging() -> t.Iterator[None]:
    """Start and finish every test with no logging sinks configured."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def unset_config_env(monkeypatch):
    """Keep the caller's POEM_ENV from leaking into tests."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        debug=True,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
    )


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def write_config() -> t.Callable[[Path, str], Path]:
    """Provide a helper writing `config/env_config.toml` under a directory."""

    def _write(directory: Path, contents: str) -> Path:
        path = directory / CONFIG_FILENAME
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """Provide a project directory with a `sub` directory and no config."""
    project = tmp_path / "proj"
    (project / "sub").mkdir(parents=True)
    return project


STAGING_CONFIG = """\
[development]
port = 8080

[staging]
address = "10.0.0.5"
port = 9000
workers = 4

[staging.database]
adapter = "postgres"
db_name = "app_staging"
pool = 16

[production]
"""


@pytest.fixture
def staging_config() -> str:
    """Provide config file contents overriding development and staging."""
    return STAGING_CONFIG
