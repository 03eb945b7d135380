"""Domain layer - environments, configuration records and exceptions."""

from .basic_config import BasicConfig, Database
from .environment import Environment
from .exceptions import (
    BadEntryError,
    BadEnvError,
    BadFilePathError,
    BadTypeError,
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigParseError,
)

__all__ = [
    # Models
    "BasicConfig",
    "Database",
    "Environment",
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
