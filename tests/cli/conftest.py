"""Shared fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner

from poem_config.cli.app import create_cli_app
from poem_config.cli.state import CLIState
from poem_config.loading.loader import ConfigLoader


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()


@pytest.fixture
def mock_loader(mocker):
    """Provide fully mocked ConfigLoader with spec for type safety."""
    return mocker.Mock(spec=ConfigLoader)


@pytest.fixture
def cli_state_with_mock_loader(test_settings, mock_loader):
    """CLIState that returns the mocked loader."""

    def mock_loader_factory(settings):
        return mock_loader

    return CLIState(test_settings, loader_factory=mock_loader_factory)


@pytest.fixture
def app_with_mock_loader(cli_state_with_mock_loader):
    """CLI app with mocked loader factory for testing."""
    return create_cli_app(state=cli_state_with_mock_loader)
