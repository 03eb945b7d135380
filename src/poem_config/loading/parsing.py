"""TOML parsing for config files."""

import datetime
import tomllib
from pathlib import Path
from typing import Any, Final

from ..domain.exceptions import ConfigParseError

# Placeholder locations telling the two parse failures apart
WRONG_SHAPE_LOCATION: Final = (1, 1)
SYNTAX_ERROR_LOCATION: Final = (2, 2)

_VALUE_KEY: Final = "value"


def toml_type_name(value: Any) -> str:
    """Name of the TOML type a parsed value came from."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, datetime.datetime):
        return "datetime"
    if isinstance(value, datetime.date):
        return "date"
    if isinstance(value, datetime.time):
        return "time"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "table"
    return type(value).__name__


def _parse_bare_value(source: str) -> Any:
    """Parse `source` as a lone TOML value such as `[1, 2]` or `42`.

    Raises:
        ValueError: If `source` is not a single value
    """
    document = tomllib.loads(f"{_VALUE_KEY} = {source.strip()}")
    if set(document) != {_VALUE_KEY}:
        raise ValueError("not a single value")
    return document[_VALUE_KEY]


def parse_document(source: str, path: Path) -> dict[str, Any]:
    """Parse config file text into its top-level table.

    Text that is a single TOML value rather than a document is accepted
    when that value is an inline table.

    Args:
        source: Raw file contents
        path: Path the contents were read from, used in errors

    Returns:
        The top-level table

    Raises:
        ConfigParseError: If the text does not parse, located at
            SYNTAX_ERROR_LOCATION, or parses to something other than a
            table, located at WRONG_SHAPE_LOCATION
    """
    try:
        return tomllib.loads(source)
    except tomllib.TOMLDecodeError as exc:
        syntax_error = exc

    try:
        value = _parse_bare_value(source)
    except ValueError:
        raise ConfigParseError(
            source=source,
            path=path,
            detail=str(syntax_error),
            location=SYNTAX_ERROR_LOCATION,
        ) from syntax_error

    if isinstance(value, dict):
        return value

    raise ConfigParseError(
        source=source,
        path=path,
        detail=f"expected a table, found {toml_type_name(value)}",
        location=WRONG_SHAPE_LOCATION,
    )
