from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample tree texts and run configurations.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from mkstruct.domain.config import RunConfig  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def indented_text() -> str:
    """Two-space indented structure with a nested directory."""
    return "a/\n  b.txt\n  c/\n    d.txt\n"


@pytest.fixture
def tree_style_text() -> str:
    """Structure as printed by the 'tree' utility."""
    return "root/\n├── x.txt\n└── y/\n    └── z.txt\n"


@pytest.fixture
def run_config(tmp_path: Path) -> RunConfig:
    """Real-run configuration rooted in a fresh temporary directory."""
    return RunConfig(base_dir=str(tmp_path), base_display=str(tmp_path))


@pytest.fixture
def dry_run_config(tmp_path: Path) -> RunConfig:
    """Dry-run configuration rooted in a fresh temporary directory."""
    return RunConfig(base_dir=str(tmp_path), base_display=str(tmp_path), dry_run=True)


@pytest.fixture
def tree_snapshot():
    """Return a helper listing every path below a root, sorted and relative."""
    def _snapshot(root: Path) -> list:
        return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))
    return _snapshot
