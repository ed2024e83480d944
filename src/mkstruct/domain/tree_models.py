from __future__ import annotations

"""
Tree Structure Data Models.

Provides the entry and stack-frame types produced while reconstructing a
hierarchy from a flat, indentation-based text depiction.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeEntry:
    """
    A single parsed line of the tree depiction.

    Attributes:
        name: Cleaned segment text (no glyphs, no trailing slash).
        depth: Zero-based nesting level among the open ancestors.
        is_directory: True if the cleaned name ended with '/'.
        prefix_width: Raw count of leading decoration characters.
        relative_path: Ancestor names and the entry name joined with '/'.
        line_number: 1-based line in the source text.
    """
    name: str
    depth: int
    is_directory: bool
    prefix_width: int = 0
    relative_path: str = ""
    line_number: int = 0


@dataclass(frozen=True)
class AncestorFrame:
    """An open directory on the parser stack."""
    name: str
    prefix_width: int
