"""Logging setup built on loguru.

The library only ever binds loguru's global logger; it never adds or
removes sinks on import. Messages from `poem_config` modules are disabled
until an application opts in through `configure_logger` (or `create_app`),
so an embedding application's own loguru setup is left alone.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings
from ..domain.environment import Environment

if t.TYPE_CHECKING:
    import loguru

LIBRARY_NAME = "poem_config"

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name} - {message}"

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.WARNING,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace loguru's sinks with a single stderr sink and enable library logs.

    Meant for applications such as the CLI. Development gets a colourised
    format with call sites; staging and production get a plain single-line
    format.
    """
    global _configured

    logger.remove()
    logger.add(
        sys.stderr,
        level=str(level),
        format=_DEVELOPMENT_FORMAT if environment.is_dev else _DEFAULT_FORMAT,
        colorize=environment.is_dev,
        backtrace=environment.is_dev,
        diagnose=environment.is_dev,
    )
    logger.enable(LIBRARY_NAME)
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from settings."""
    configure_logger(
        level=settings.log_level,
        environment=Environment.fallback(settings.debug),
    )


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to `name`. Never touches sinks."""
    return logger.bind(logger_name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Remove all sinks and silence library logs again."""
    global _configured

    logger.remove()
    logger.disable(LIBRARY_NAME)
    _configured = False
