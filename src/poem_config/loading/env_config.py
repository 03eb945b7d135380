"""The resolved configuration for every environment."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from ..config.settings import Settings
from ..domain.basic_config import BasicConfig
from ..domain.environment import Environment


@dataclass
class EnvConfig:
    """One BasicConfig per Environment plus the active environment.

    Always holds exactly one entry for each Environment. The classmethods
    are the library's entry points; each call re-reads the process
    environment and the filesystem, nothing is cached.

    Usage:
        config = EnvConfig.read_config()
        print(config.active_config.port)
    """

    active_env: Environment
    config: dict[Environment, BasicConfig] = field(repr=False)

    def __post_init__(self) -> None:
        missing = [env for env in Environment if env not in self.config]
        extra = [key for key in self.config if not isinstance(key, Environment)]
        if missing or extra:
            raise ValueError(
                f"EnvConfig needs one config per environment "
                f"(missing: {missing}, unexpected: {extra})"
            )

    @property
    def configs(self) -> Mapping[Environment, BasicConfig]:
        """Read-only view of the config for each environment."""
        return MappingProxyType(self.config)

    @property
    def active_config(self) -> BasicConfig:
        return self.config[self.active_env]

    def get(self, env: Environment) -> BasicConfig:
        return self.config[env]

    def __len__(self) -> int:
        return len(self.config)

    def __iter__(self) -> Iterator[Environment]:
        return iter(self.config)

    @classmethod
    def active_default_from(
        cls,
        filename: Path | str | None = None,
        *,
        settings: Settings | None = None,
    ) -> "EnvConfig":
        """Build defaults for every environment and stamp the active one.

        Args:
            filename: Config file the defaults belong to, if any. Sets each
                config's file and root paths.
            settings: Settings overriding variable name and debug fallback

        Raises:
            BadFilePathError: If `filename` has no parent directory
            BadEnvError: If the environment variable is invalid
        """
        from .loader import ConfigLoader

        return ConfigLoader(settings).defaults(filename)

    @classmethod
    def active(cls, *, settings: Settings | None = None) -> BasicConfig:
        """Return the built-in defaults of the active environment.

        Does not look for a config file.

        Raises:
            BadEnvError: If the environment variable is invalid
        """
        from .loader import ConfigLoader

        loader = ConfigLoader(settings)
        return BasicConfig.new(loader.active_env())

    @classmethod
    def parse(
        cls,
        source: str,
        filename: Path | str,
        *,
        settings: Settings | None = None,
    ) -> "EnvConfig":
        """Parse config file contents and merge them over the defaults.

        Raises:
            ConfigParseError: If the contents are not a TOML table
            BadTypeError: If a section or key has the wrong type
            BadEntryError: If a section does not name an environment
            BadFilePathError: If `filename` has no parent directory
            BadEnvError: If the environment variable is invalid
        """
        from .loader import ConfigLoader

        return ConfigLoader(settings).parse(source, filename)

    @classmethod
    def read_config(cls, *, settings: Settings | None = None) -> "EnvConfig":
        """Find, read and parse the config file.

        Raises:
            ConfigNotFoundError: If no config file is found
            ConfigIOError: If the config file cannot be read
            ConfigError: Any error raised by `parse`
        """
        from .loader import ConfigLoader

        return ConfigLoader(settings).read()
