"""Applying a parsed `[environment]` section onto its BasicConfig."""

import typing as t
from pathlib import Path
from typing import Any, Final

from ..domain.basic_config import U16_MAX, U32_MAX, BasicConfig, Database
from ..domain.environment import Environment
from ..domain.exceptions import BadTypeError
from ..infrastructure.logging import get_logger
from .parsing import toml_type_name

if t.TYPE_CHECKING:
    import loguru

_U16_LABEL: Final = "a 16-bit unsigned integer"
_U32_LABEL: Final = "a 32-bit unsigned integer"
_OUT_OF_RANGE: Final = "an out-of-range integer"
_MISSING: Final = "nothing"


def _expect_string(name: str, value: Any, path: Path | None) -> str:
    if not isinstance(value, str):
        raise BadTypeError(
            name=name, expected="a string", actual=toml_type_name(value), path=path
        )
    return value


def _expect_unsigned(
    name: str,
    value: Any,
    path: Path | None,
    *,
    maximum: int,
    label: str,
) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadTypeError(
            name=name, expected=label, actual=toml_type_name(value), path=path
        )
    if not 0 <= value <= maximum:
        raise BadTypeError(name=name, expected=label, actual=_OUT_OF_RANGE, path=path)
    return value


def _database_from_table(name: str, value: Any, path: Path | None) -> Database:
    if not isinstance(value, dict):
        raise BadTypeError(
            name=name, expected="a table", actual=toml_type_name(value), path=path
        )

    def field(key: str) -> Any:
        if key not in value:
            expected = _U32_LABEL if key == "pool" else "a string"
            raise BadTypeError(
                name=f"{name}.{key}", expected=expected, actual=_MISSING, path=path
            )
        return value[key]

    return Database(
        adapter=_expect_string(f"{name}.adapter", field("adapter"), path),
        db_name=_expect_string(f"{name}.db_name", field("db_name"), path),
        pool=_expect_unsigned(
            f"{name}.pool", field("pool"), path, maximum=U32_MAX, label=_U32_LABEL
        ),
    )


def merge_section(
    config: BasicConfig,
    section: dict[str, Any],
    *,
    env: Environment,
    path: Path | None = None,
    logger: "loguru.Logger" = get_logger(__name__),
) -> BasicConfig:
    """Apply the recognised keys of an `[environment]` section to `config`.

    Recognised keys are `address`, `port`, `workers` and a `database` table
    with `adapter`, `db_name` and `pool`. Unknown keys are logged and
    ignored. All keys are checked before any is applied, so a section that
    fails leaves `config` unchanged.

    Args:
        config: Defaults for the section's environment, updated in place
        section: Parsed section table
        env: Environment the section belongs to
        path: Config file path, used in errors
        logger: Logger for recording ignored keys

    Returns:
        The updated `config`

    Raises:
        BadTypeError: If a recognised key holds the wrong type or an
            out-of-range number
    """
    updates: dict[str, Any] = {}

    for key, value in section.items():
        name = f"{env}.{key}"
        match key:
            case "address":
                updates[key] = _expect_string(name, value, path)
            case "port" | "workers":
                updates[key] = _expect_unsigned(
                    name, value, path, maximum=U16_MAX, label=_U16_LABEL
                )
            case "database":
                updates[key] = _database_from_table(name, value, path)
            case _:
                logger.warning(f"Ignoring unknown config key '{name}'")

    for key, value in updates.items():
        setattr(config, key, value)

    if updates:
        logger.debug(f"Applied {', '.join(sorted(updates))} to {env} config")
    return config
