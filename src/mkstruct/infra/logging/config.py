from __future__ import annotations

"""
Logging settings for a single mkstruct invocation.

The CLI builds one LoggingConfig from '--debug' and '--log-file'. The
colored report on stdout is the user-facing channel, so the console
handler only carries warnings unless debugging was requested.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Accepted level names, case-insensitive
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Where diagnostics of a run go and how verbose they are.

    Attributes:
        level: Threshold name. WARNING by default, DEBUG under '--debug'
            to show per-line parse decisions and per-entry actions.
        console: Write records to stderr, keeping stdout for the report.
        log_file: Target of '--log-file'. Repeated runs append to it.
        max_bytes: Size at which the log file is rolled over, so scripted
            runs over many layouts do not grow it without bound.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Short stderr format, without timestamps.
        file_fmt: File format with timestamp and module name.
        datefmt: Timestamp format of the file output.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
