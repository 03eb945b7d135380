"""CLI application factory."""

from typing import Optional

import typer

from ..app import create_app
from ..config.settings import LogLevel, Settings, build_settings
from .commands.show import env, find, show
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None,
    state: CLIState | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional CLIState override (takes precedence over settings)

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="poem-config",
        help="Inspect environment-bound configuration resolved from POEM_ENV "
        "and config/env_config.toml",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        env_var: Optional[str] = typer.Option(
            None,
            "--env-var",
            help="Environment variable selecting the active environment",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        else:
            resolved_settings = settings or build_settings(
                env_var=env_var,
                log_level=LogLevel.DEBUG if verbose else None,
            )
            resolved_state = CLIState(resolved_settings)

        create_app(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(env)
    app.command()(find)
    app.command()(show)

    return app
