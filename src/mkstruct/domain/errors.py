from __future__ import annotations

"""
Domain Exception Hierarchy.

Separates fatal configuration problems, per-entry path rejections and
unrecoverable filesystem failures so each layer can decide where to stop.
"""

from typing import Optional


class MkstructError(Exception):
    """Base class for all application errors."""


class ConfigurationError(MkstructError):
    """Invalid command-line usage detected before any work begins."""


class UnsafePathError(MkstructError):
    """
    A parsed path would escape the base directory.

    Recovered per entry: the entry is skipped and the run continues.
    """

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason


class MaterializationIOError(MkstructError):
    """
    A filesystem operation failed for reasons outside input validation.

    Fatal for the run. Carries the offending path and the underlying cause,
    an OSError or a UnicodeDecodeError for input that is not valid UTF-8.
    """

    def __init__(self, path: str, action: str, cause: Optional[Exception] = None):
        detail = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Failed to {action} '{path}': {detail}")
        self.path = path
        self.action = action
        self.cause = cause
