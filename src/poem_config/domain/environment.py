"""Runtime environment model."""

import enum
import os
from typing import Final

from ..config.settings import CONFIG_ENV
from .exceptions import BadEnvError


class Environment(enum.StrEnum):
    """Runtime environment selecting which defaults apply.

    Values are the canonical names used for display and for the
    `[environment]` sections of the config file.
    """

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, text: str) -> "Environment":
        """Parse an environment from one of its aliases.

        Matching is case-sensitive.

        Examples:
            >>> Environment.parse("prod")
            <Environment.PRODUCTION: 'production'>
            >>> Environment.parse("s")
            <Environment.STAGING: 'staging'>
        """
        for env, aliases in _ALIASES.items():
            if text in aliases:
                return env
        raise ValueError(f"Unknown environment '{text}'")

    @classmethod
    def fallback(cls, debug: bool) -> "Environment":
        """Environment used when none is configured.

        Debug runs fall back to development so they never pick up
        production behaviour by accident.
        """
        return cls.DEVELOPMENT if debug else cls.PRODUCTION

    @classmethod
    def active(
        cls,
        *,
        env_var: str = CONFIG_ENV,
        debug: bool = __debug__,
    ) -> "Environment":
        """Resolve the active environment from the process environment.

        Re-reads the variable on every call.

        Raises:
            BadEnvError: If the variable is set to an unknown value
        """
        value = os.environ.get(env_var)
        if value is None:
            return cls.fallback(debug)
        try:
            return cls.parse(value)
        except ValueError:
            raise BadEnvError(value=value, env_var=env_var) from None

    @property
    def is_dev(self) -> bool:
        return self is Environment.DEVELOPMENT

    @property
    def is_stage(self) -> bool:
        return self is Environment.STAGING

    @property
    def is_prod(self) -> bool:
        return self is Environment.PRODUCTION


_ALIASES: Final[dict[Environment, frozenset[str]]] = {
    Environment.DEVELOPMENT: frozenset({"d", "dev", "devel", "development"}),
    Environment.STAGING: frozenset({"s", "stage", "staging"}),
    Environment.PRODUCTION: frozenset({"p", "prod", "production"}),
}

if set(_ALIASES) != set(Environment):
    raise RuntimeError("every environment needs aliases")
