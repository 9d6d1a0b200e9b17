"""Settings for the ``kennitolur`` command line tool."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "KENNITOLUR_LOG_LEVEL"
OUTPUT_FORMAT_ENV_VAR = "KENNITOLUR_OUTPUT"
DEFAULT_LOG_LEVEL = logging.WARNING


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    output_format: OutputFormat = OutputFormat.TEXT


def parse_log_level(value: str) -> int:
    """Translate a level name such as ``debug`` into its ``logging`` constant."""

    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def parse_output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(fmt.value for fmt in OutputFormat)
        raise ConfigurationError(f"Unknown output format: {value} (expected {choices})") from exc


def get_cli_config() -> CliConfig:
    log_level = optional_env_var(LOG_LEVEL_ENV_VAR)
    output_format = optional_env_var(OUTPUT_FORMAT_ENV_VAR)
    return CliConfig(
        log_level=parse_log_level(log_level) if log_level else DEFAULT_LOG_LEVEL,
        output_format=parse_output_format(output_format) if output_format else OutputFormat.TEXT,
    )
