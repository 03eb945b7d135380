"""Environment-bound configuration loading.

Resolves the active environment from `POEM_ENV`, finds
`config/env_config.toml` in the working directory or an ancestor, and merges
its `[environment]` sections over built-in defaults.

Usage:
    from poem_config import EnvConfig

    config = EnvConfig.read_config()
    print(config.active_env, config.active_config.port)
"""

from loguru import logger

from .app import App, create_app
from .config.settings import CONFIG_ENV, CONFIG_FILENAME, LogLevel, Settings
from .domain import (
    BadEntryError,
    BadEnvError,
    BadFilePathError,
    BadTypeError,
    BasicConfig,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
    Database,
    Environment,
)
from .loading import ConfigLoader, EnvConfig, find_config

# Silent until an application calls configure_logger or create_app
logger.disable(__name__)

__all__ = [
    # Entry points
    "EnvConfig",
    "ConfigLoader",
    "find_config",
    # Models
    "BasicConfig",
    "Database",
    "Environment",
    # Settings and wiring
    "App",
    "create_app",
    "CONFIG_ENV",
    "CONFIG_FILENAME",
    "LogLevel",
    "Settings",
    # Exceptions
    "BadEntryError",
    "BadEnvError",
    "BadFilePathError",
    "BadTypeError",
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigParseError",
]
