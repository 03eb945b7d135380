"""Per-environment configuration records."""

import os
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .environment import Environment
from .exceptions import BadFilePathError

U16_MAX: Final = 2**16 - 1
U32_MAX: Final = 2**32 - 1

DEFAULT_ADDRESS: Final = "localhost"
BIND_ALL_ADDRESS: Final = "0.0.0.0"
DEFAULT_PORT: Final = 8000

_UNROOTED_PATH_REASON: Final = "Configuration files must be rooted in a directory"


def _default_workers() -> int:
    """Twice the number of logical CPUs, capped to the field range."""
    return min((os.cpu_count() or 1) * 2, U16_MAX)


class Database(BaseModel):
    """Database connection settings for one environment."""

    adapter: str = Field(description="Database adapter name, e.g. 'postgres'")
    db_name: str = Field(description="Name of the database to connect to")
    pool: int = Field(ge=0, le=U32_MAX, description="Connection pool size")


class BasicConfig(BaseModel):
    """Configuration for a single environment.

    Equality only looks at address, port and workers, so configs built for
    different environments or from different files compare equal when they
    would serve the same way.
    """

    model_config = ConfigDict(validate_assignment=True)

    environment: Environment = Field(default=Environment.DEVELOPMENT)
    address: str = Field(default=DEFAULT_ADDRESS, description="Bind address")
    port: int = Field(default=DEFAULT_PORT, ge=0, le=U16_MAX)
    database: Database | None = Field(default=None)
    workers: int | None = Field(default_factory=_default_workers, ge=0, le=U16_MAX)
    config_file_path: Path | None = Field(
        default=None,
        description="Config file these settings were derived from",
    )
    root_path: Path | None = Field(
        default=None,
        description="Directory containing the config file",
    )

    @classmethod
    def default(cls, env: Environment) -> "BasicConfig":
        """Build the built-in defaults for an environment.

        Staging and production bind to all interfaces; development stays on
        localhost.
        """
        match env:
            case Environment.DEVELOPMENT:
                return cls(environment=env)
            case Environment.STAGING | Environment.PRODUCTION:
                return cls(environment=env, address=BIND_ALL_ADDRESS)

    @classmethod
    def new(cls, env: Environment) -> "BasicConfig":
        return cls.default(env)

    @classmethod
    def from_path(cls, env: Environment, path: Path | str) -> "BasicConfig":
        """Build defaults for an environment loaded from a config file.

        Args:
            env: Environment to build defaults for
            path: Path of the config file

        Returns:
            Defaults with `config_file_path` set and `root_path` set to the
            file's directory

        Raises:
            BadFilePathError: If the path has no parent directory
        """
        config = cls.default(env)
        raw_path = os.fspath(path)
        config_file_path = Path(raw_path)
        # Decided on the raw string: pathlib drops a leading "." component
        parent = os.path.dirname(raw_path)
        if not parent or config_file_path.parent == config_file_path:
            raise BadFilePathError(path=config_file_path, reason=_UNROOTED_PATH_REASON)

        config.set_root(parent)
        config.config_file_path = config_file_path
        return config

    def set_root(self, path: Path | str) -> None:
        self.root_path = Path(path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicConfig):
            return NotImplemented
        return (self.address, self.port, self.workers) == (
            other.address,
            other.port,
            other.workers,
        )

    def __str__(self) -> str:
        parts = [
            f"environment={self.environment}",
            f"address={self.address}",
            f"port={self.port}",
            f"workers={self.workers if self.workers is not None else '-'}",
        ]
        if self.database is not None:
            parts.append(
                f"database={self.database.adapter}:{self.database.db_name}"
                f" (pool={self.database.pool})"
            )
        if self.root_path is not None:
            parts.append(f"root={self.root_path}")
        return ", ".join(parts)
