from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING, TextIO

from dotenv import load_dotenv

from kennitolur.common import configure_logging
from kennitolur.config import (
    CliConfig,
    ConfigurationError,
    OutputFormat,
    get_cli_config,
    parse_log_level,
)
from kennitolur.domain import Kennitala, KennitalaError, parse

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _log_level_arg(value: str) -> int:
    try:
        return parse_log_level(value)
    except ConfigurationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: Sequence[str], config: CliConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="kennitolur",
        description="Validate and decode Icelandic kennitölur",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        dest="output_format",
        action="store_const",
        const=OutputFormat.JSON,
        help="Print one JSON object per kennitala",
    )
    output.add_argument(
        "--text",
        dest="output_format",
        action="store_const",
        const=OutputFormat.TEXT,
        help="Print one human readable line per kennitala",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level_arg,
        default=config.log_level,
        help="Logging level name, e.g. DEBUG (defaults to config)",
    )
    parser.add_argument(
        "kennitolur",
        nargs="+",
        metavar="KENNITALA",
        help="10 digit kennitala to check",
    )
    parser.set_defaults(output_format=config.output_format)
    return parser.parse_args(list(argv))


def describe(text: str) -> dict[str, object]:
    """Summarise the outcome of validating ``text`` as a JSON-ready mapping."""

    result = parse(text)
    if isinstance(result, KennitalaError):
        return {
            "input": text,
            "valid": False,
            "error": str(result.kind),
            "message": str(result),
        }
    return _describe_kennitala(text, result)


def _describe_kennitala(text: str, kennitala: Kennitala) -> dict[str, object]:
    return {
        "input": text,
        "valid": True,
        "kennitala": str(kennitala),
        "birthday": kennitala.birthday.isoformat(),
        "randoms": kennitala.randoms,
        "checksum_digit": kennitala.checksum_digit,
        "century_digit": kennitala.short_century_digit,
    }


def _format_text(record: dict[str, object]) -> str:
    if record["valid"]:
        return (
            f"{record['input']}: valid, born {record['birthday']}, "
            f"randoms {record['randoms']:03}, century digit {record['century_digit']}"
        )
    return f"{record['input']}: {record['error']} ({record['message']})"


def _emit(record: dict[str, object], output_format: OutputFormat, stream: TextIO) -> None:
    if output_format is OutputFormat.JSON:
        line = json.dumps(record, ensure_ascii=False)
    else:
        line = _format_text(record)
    stream.write(line + "\n")


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> int:
    """Check every kennitala given on the command line and return the exit status."""

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    stream = stdout if stdout is not None else sys.stdout

    try:
        config = get_cli_config()
    except ConfigurationError:
        configure_logging(force=True)
        log.exception("Invalid configuration")
        return EXIT_USAGE

    parsed_args = _parse_args(args_list, config)
    configure_logging(level=parsed_args.log_level, force=True)

    invalid = 0
    for text in parsed_args.kennitolur:
        record = describe(text)
        if not record["valid"]:
            invalid += 1
        _emit(record, parsed_args.output_format, stream)

    log.info("Checked %d kennitölur, %d invalid", len(parsed_args.kennitolur), invalid)
    return EXIT_INVALID if invalid else EXIT_OK


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(EXIT_OK)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    sys.exit(main())


if __name__ == "__main__":
    run()
