from __future__ import annotations

"""
Run Configuration Domain.

Holds the default session values and the immutable configuration object that
is built once at startup and handed to the engine. Nothing is persisted.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_BASE_DIR = "."


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input source
        "input_path": None,
        "use_stdin": False,

        # Target
        "base_dir": DEFAULT_BASE_DIR,
        "dry_run": False,
    }


# -----------------------------------------------------------------------------
# Configuration Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RunConfig:
    """
    Validated, immutable configuration for a single run.

    Attributes:
        base_dir: Absolute directory every parsed path is resolved against.
        base_display: Base directory as the user supplied it, for reporting.
        dry_run: If True, report actions without touching the filesystem.
        input_path: Source file of the tree text, None when reading stdin.
        use_stdin: Read the tree text from standard input.
    """
    base_dir: str
    base_display: str = DEFAULT_BASE_DIR
    dry_run: bool = False
    input_path: Optional[str] = None
    use_stdin: bool = False
