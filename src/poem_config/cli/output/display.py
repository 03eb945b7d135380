"""Display functions for CLI output."""

from pathlib import Path

import typer

from ...domain.basic_config import BasicConfig
from ...domain.environment import Environment
from ...domain.exceptions import ConfigError
from ...loading.env_config import EnvConfig


def display_environment(env: Environment) -> None:
    typer.echo(str(env))


def display_path(path: Path) -> None:
    typer.echo(str(path))


def display_basic_config(config: BasicConfig, *, active: bool = False) -> None:
    """Display one environment's settings.

    Args:
        config: Settings to display
        active: Whether to mark the settings as the active environment
    """
    marker = " (active)" if active else ""
    typer.secho(f"[{config.environment}]{marker}", bold=True)
    typer.echo(f"  address  = {config.address}")
    typer.echo(f"  port     = {config.port}")
    typer.echo(f"  workers  = {config.workers if config.workers is not None else '-'}")
    if config.database is not None:
        typer.echo(f"  database = {config.database.adapter}:{config.database.db_name}")
        typer.echo(f"  pool     = {config.database.pool}")
    if config.config_file_path is not None:
        typer.echo(f"  file     = {config.config_file_path}")


def display_env_config(config: EnvConfig, *, show_all: bool = False) -> None:
    """Display the active environment, or every environment with `show_all`."""
    if not show_all:
        display_basic_config(config.active_config, active=True)
        return

    for env in Environment:
        display_basic_config(config.get(env), active=env is config.active_env)


def display_error(error: ConfigError) -> None:
    """Display a configuration error.

    Args:
        error: The error to report
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
