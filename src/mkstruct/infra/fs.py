from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Wraps the 'os' primitives used to read tree text and to create directories
and empty files, translating OSError into the domain's fatal I/O error.
"""

import os
import sys
from typing import Optional, TextIO

from mkstruct.domain.errors import MaterializationIOError

_BOM = "\ufeff"
STDIN_NAME = "<stdin>"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# INPUT API
# -----------------------------------------------------------------------------

def read_text(path: Optional[str] = None, stream: Optional[TextIO] = None) -> str:
    """
    Read the whole tree depiction into memory.

    Args:
        path: File to read. Ignored when a stream is given.
        stream: Open text stream, defaults to stdin when no path is given.

    Returns:
        str: Input text with any leading UTF-8 BOM removed.

    Raises:
        MaterializationIOError: If the input cannot be read or is not valid UTF-8.
    """
    if stream is None and path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise MaterializationIOError(path, "read", e) from e
        except UnicodeDecodeError as e:
            raise MaterializationIOError(path, "decode", e) from e
    else:
        try:
            text = (stream or sys.stdin).read()
        except UnicodeDecodeError as e:
            raise MaterializationIOError(STDIN_NAME, "decode", e) from e

    if text.startswith(_BOM):
        text = text[len(_BOM):]
    return text

# -----------------------------------------------------------------------------
# MUTATION API
# -----------------------------------------------------------------------------

def ensure_directory(path: str) -> bool:
    """
    Recursively create a directory, succeeding silently if present.

    Returns:
        bool: True if the directory was created, False if it already existed.

    Raises:
        MaterializationIOError: If creation fails.
    """
    if os.path.isdir(path):
        return False
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise MaterializationIOError(path, "create directory", e) from e
    return True


def touch_file(path: str) -> bool:
    """
    Create an empty file and its missing parents.

    An existing entry is never opened, so its content and timestamps
    stay as they are.

    Returns:
        bool: True if the file was created, False if it already existed.

    Raises:
        MaterializationIOError: If the parent chain or the file cannot be created.
    """
    if os.path.lexists(path):
        return False
    parent = os.path.dirname(path)
    if parent:
        ensure_directory(parent)
    try:
        with open(path, "a", encoding="utf-8"):
            pass
    except OSError as e:
        raise MaterializationIOError(path, "create file", e) from e
    return True
