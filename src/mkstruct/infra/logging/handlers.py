from __future__ import annotations

"""
Handler construction for the mkstruct log sinks.

Every handler created here is tagged, so reconfiguration and shutdown only
remove what mkstruct installed and leave alone handlers added by pytest's
caplog or by a program embedding the package.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_mkstruct_handler"


def _tag_handler(handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_rotating_file_handler(
        log_file: str,
        level_int: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open the '--log-file' target, creating its directory first.

    The log file is an extra record of what a run created or rejected. If it
    cannot be opened the structure is still built: a one-line warning goes
    to stderr and the run continues with console logging only.

    Args:
        log_file: Path given on the command line.
        level_int: Threshold applied to the file sink.
        formatter: Formatter with timestamps.
        max_bytes: Roll-over size.
        backup_count: Rolled files to keep.

    Returns:
        Optional[RotatingFileHandler]: Tagged handler, or None when the file
        is unusable.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    fh.setLevel(level_int)
    fh.setFormatter(formatter)
    _tag_handler(fh)
    return fh
