from __future__ import annotations

"""
Path Safety Validation.

Rejects parsed paths that could resolve outside the base directory. The
parent-reference check is a plain substring test, so names such as 'a..b'
are rejected as well.
"""

import os
from typing import Optional

from mkstruct.domain.errors import UnsafePathError

_SEPARATORS = tuple({"/", os.sep})


def check_path(relative_path: str) -> Optional[str]:
    """
    Inspect a relative path without raising.

    Args:
        relative_path: Path built from the ancestor stack and entry name.

    Returns:
        Optional[str]: Rejection reason, or None if the path is acceptable.
    """
    if ".." in relative_path:
        return f"Path contains '..' which is not allowed: {relative_path}"
    if relative_path.startswith(_SEPARATORS):
        return f"Absolute paths are not allowed: {relative_path}"
    return None


def validate_path(relative_path: str) -> str:
    """
    Validate a relative path before any filesystem mutation.

    Returns:
        str: The unchanged path.

    Raises:
        UnsafePathError: If the path contains '..' or starts with a separator.
    """
    reason = check_path(relative_path)
    if reason is not None:
        raise UnsafePathError(relative_path, reason)
    return relative_path
