"""Commands for inspecting the resolved configuration."""

import typer

from ...domain.exceptions import ConfigError
from ..output.display import (
    display_env_config,
    display_environment,
    display_error,
    display_path,
)
from ..state import CLIState


def env(ctx: typer.Context) -> None:
    """Print the active environment.

    Examples:
        POEM_ENV=prod poem-config env
    """
    state: CLIState = ctx.obj
    loader = state.create_loader()

    try:
        active = loader.active_env()
    except ConfigError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_environment(active)


def find(ctx: typer.Context) -> None:
    """Print the path of the nearest config file."""
    state: CLIState = ctx.obj
    loader = state.create_loader()

    try:
        path = loader.find()
    except ConfigError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_path(path)


def show(
    ctx: typer.Context,
    defaults: bool = typer.Option(
        False,
        "--defaults",
        help="Show built-in defaults without looking for a config file",
    ),
    show_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Show every environment, not just the active one",
    ),
) -> None:
    """Show the resolved configuration.

    Examples:
        poem-config show
        poem-config show --all
        POEM_ENV=staging poem-config show --defaults
    """
    state: CLIState = ctx.obj
    loader = state.create_loader()

    try:
        config = loader.defaults() if defaults else loader.read()
    except ConfigError as e:
        display_error(e)
        raise typer.Exit(code=1)

    display_env_config(config, show_all=show_all)
