"""Logging setup for the ``kennitolur`` entry points."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int = logging.WARNING,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Send log records to ``stream`` (stderr by default).

    Check results go to stdout, so diagnostics must stay on a separate stream.
    The library itself never installs handlers; only entry points call this.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=force,
    )
