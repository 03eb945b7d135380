"""Config loading pipeline: discovery, reading, parsing and merging."""

import typing as t
from pathlib import Path

from ..config.settings import Settings
from ..domain.basic_config import BasicConfig
from ..domain.environment import Environment
from ..domain.exceptions import BadEntryError, BadTypeError, ConfigIOError
from ..infrastructure.logging import get_logger
from .discovery import find_config
from .env_config import EnvConfig
from .merge import merge_section
from .parsing import parse_document, toml_type_name

if t.TYPE_CHECKING:
    import loguru


class ConfigLoader:
    """Loads an EnvConfig according to Settings.

    Holds the settings and logger so the pipeline steps share them. The
    EnvConfig classmethods create a loader per call; build one directly to
    inject a logger or to run the steps separately.

    Usage:
        loader = ConfigLoader(Settings(env_var="APP_ENV"))
        config = loader.read()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the loader.

        Args:
            settings: Variable name, config filename and debug fallback.
                Defaults to Settings().
            logger: Logger for recording pipeline steps
        """
        self.settings = settings or Settings()
        self._logger = logger

    def active_env(self) -> Environment:
        """Resolve the active environment.

        Raises:
            BadEnvError: If the environment variable is invalid
        """
        return Environment.active(
            env_var=self.settings.env_var,
            debug=self.settings.debug,
        )

    def find(self, start: Path | None = None) -> Path:
        """Find the config file from `start` or the working directory.

        Raises:
            ConfigNotFoundError: If there is no config file
        """
        return find_config(
            self.settings.config_filename,
            start=start,
            logger=self._logger,
        )

    def defaults(self, filename: Path | str | None = None) -> EnvConfig:
        """Build defaults for every environment and stamp the active one.

        Raises:
            BadFilePathError: If `filename` has no parent directory
            BadEnvError: If the environment variable is invalid
        """
        if filename is not None:
            configs = {env: BasicConfig.from_path(env, filename) for env in Environment}
        else:
            configs = {env: BasicConfig.default(env) for env in Environment}

        return EnvConfig(active_env=self.active_env(), config=configs)

    def parse(self, source: str, filename: Path | str) -> EnvConfig:
        """Parse config file contents and merge them over the defaults.

        Top-level entries must be tables named after an environment; each is
        merged onto that environment's defaults in document order.

        Raises:
            ConfigParseError: If the contents are not a TOML table
            BadTypeError: If a section or key has the wrong type
            BadEntryError: If a section does not name an environment
            BadFilePathError: If `filename` has no parent directory
            BadEnvError: If the environment variable is invalid
        """
        path = Path(filename)
        table = parse_document(source, path)
        config = self.defaults(path)

        for entry, value in table.items():
            if not isinstance(value, dict):
                raise BadTypeError(
                    name=entry,
                    expected="a table",
                    actual=toml_type_name(value),
                    path=path,
                )
            try:
                env = Environment(entry)
            except ValueError:
                raise BadEntryError(entry=entry, path=path) from None

            merge_section(
                config.get(env),
                value,
                env=env,
                path=path,
                logger=self._logger,
            )

        self._logger.debug(
            f"Loaded {path} with active environment {config.active_env}"
        )
        return config

    def read(self, start: Path | None = None) -> EnvConfig:
        """Find, read and parse the config file.

        Raises:
            ConfigNotFoundError: If no config file is found
            ConfigIOError: If the config file cannot be read
            ConfigError: Any error raised by `parse`
        """
        path = self.find(start)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.debug(f"Failed to read {path}: {exc}")
            raise ConfigIOError() from exc

        return self.parse(source, path)
