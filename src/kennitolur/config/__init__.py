"""Application configuration helpers."""

from __future__ import annotations

from .cli import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV_VAR,
    OUTPUT_FORMAT_ENV_VAR,
    CliConfig,
    OutputFormat,
    get_cli_config,
    parse_log_level,
    parse_output_format,
)
from .env import optional_env_var
from .errors import ConfigurationError

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV_VAR",
    "OUTPUT_FORMAT_ENV_VAR",
    "CliConfig",
    "ConfigurationError",
    "OutputFormat",
    "get_cli_config",
    "optional_env_var",
    "parse_log_level",
    "parse_output_format",
]
