"""Config loading - discovery, parsing, merging and the EnvConfig result."""

from .discovery import find_config
from .env_config import EnvConfig
from .loader import ConfigLoader
from .merge import merge_section
from .parsing import (
    SYNTAX_ERROR_LOCATION,
    WRONG_SHAPE_LOCATION,
    parse_document,
    toml_type_name,
)

__all__ = [
    "ConfigLoader",
    "EnvConfig",
    "find_config",
    "merge_section",
    "parse_document",
    "toml_type_name",
    "SYNTAX_ERROR_LOCATION",
    "WRONG_SHAPE_LOCATION",
]
