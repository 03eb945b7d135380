"""Exceptions raised while resolving and loading configuration."""

from pathlib import Path

from ..config.settings import CONFIG_ENV


class ConfigError(Exception):
    """Base exception for configuration errors."""

    description = "configuration error"


class ConfigNotFoundError(ConfigError):
    """Raised when no config file exists in the working directory or above it.

    Also raised when the working directory itself cannot be determined.
    """

    description = "config file was not found"

    def __init__(self) -> None:
        super().__init__("config file was not found")


class ConfigIOError(ConfigError):
    """Raised when a discovered config file cannot be opened or read."""

    description = "there was an I/O error while reading the config file"

    def __init__(self) -> None:
        super().__init__("I/O error while reading the config file")


class BadFilePathError(ConfigError):
    """Raised when a config file path is not rooted in a directory."""

    description = "the config file path is invalid"

    def __init__(self, *, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"'{path}' is not a valid config path: {reason}")


class BadEnvError(ConfigError):
    """Raised when the environment variable holds an unknown environment."""

    description = "the environment specified in the environment variable is invalid"

    def __init__(self, *, value: str, env_var: str = CONFIG_ENV) -> None:
        self.value = value
        self.env_var = env_var
        super().__init__(f"'{value}' is not a valid `{env_var}` value")


class BadEntryError(ConfigError):
    """Raised when a top-level section does not name an environment."""

    description = "an environment specified as `[environment]` is invalid"

    def __init__(self, *, entry: str, path: Path) -> None:
        self.entry = entry
        self.path = path
        super().__init__(f"'{entry}' is not a valid `[environment]` entry")


class BadTypeError(ConfigError):
    """Raised when a key holds a value of the wrong type.

    `expected` and `actual` are human-readable labels such as "a table"
    and "integer".
    """

    description = "a key was specified with a value of the wrong type"

    def __init__(
        self,
        *,
        name: str,
        expected: str,
        actual: str,
        path: Path | None = None,
    ) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        self.path = path
        super().__init__(
            f"type mismatch for '{name}'. expected {expected}, found {actual}"
        )


class ConfigParseError(ConfigError):
    """Raised when the config file is not a valid TOML table.

    `location` distinguishes the two failure modes: (1, 1) when the text
    parses but is not a table, (2, 2) when it does not parse at all.
    """

    description = "the config file contains invalid TOML"

    def __init__(
        self,
        *,
        source: str,
        path: Path,
        detail: str,
        location: tuple[int, int] | None = None,
    ) -> None:
        self.source = source
        self.path = path
        self.detail = detail
        self.location = location
        where = f"{path}:{location[0]}:{location[1]}" if location else f"{path}"
        super().__init__(f"the config file contains invalid TOML ({where}): {detail}")
