import enum
from dataclasses import dataclass, fields
from typing import Any

CONFIG_ENV = "POEM_ENV"
CONFIG_FILENAME = "config/env_config.toml"


class LogLevel(enum.StrEnum):
    """Log levels accepted by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings that control how configuration is located and resolved.

    The defaults match the conventions the library documents: the active
    environment comes from `POEM_ENV` and the config file lives at
    `config/env_config.toml` in the working directory or one of its
    ancestors. `debug` selects the fallback environment when the variable
    is unset and mirrors the interpreter's `__debug__` flag.
    """

    env_var: str = CONFIG_ENV
    config_filename: str = CONFIG_FILENAME
    debug: bool = __debug__
    log_level: LogLevel = LogLevel.WARNING


def build_settings(**overrides: Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets callers such as the CLI forward optional flags without checking
    each one.
    """
    known = {field.name for field in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
