from __future__ import annotations

import logging

from .constants import LOG_FORMAT


def configure_logging(level: str | int) -> None:
    """
    Route log records to stderr for the command line front end.

    The library itself never installs handlers; if the host process already
    configured the root logger this is a no-op.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
