from __future__ import annotations

"""
Tree Text Parser.

Reconstructs parent/child nesting from a flat sequence of lines written either
with plain indentation or with the box-drawing glyphs printed by the 'tree'
utility. Nesting is recovered with an explicit stack of open directories keyed
by the raw width of each line's decoration prefix.
"""

import logging
from typing import Iterable, Iterator, List, Optional

from mkstruct.domain.tree_models import AncestorFrame, TreeEntry

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLYPH TABLES
# -----------------------------------------------------------------------------

TREE_GLYPHS = ("│", "├", "└", "─")

# Longest sequences first so the composite connectors go in one replacement
_STRIP_SEQUENCES = ("├──", "└──", "├─", "└─", "│", "├", "└", "─")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree(text: str) -> Iterator[TreeEntry]:
    """
    Lazily parse a tree depiction into entries in document order.

    The returned iterator is single-pass: the ancestor stack lives inside
    the generator and is discarded once it is exhausted.

    Args:
        text: Complete input text.

    Yields:
        TreeEntry: One entry per non-blank, non-comment line with a name.
    """
    stack: List[AncestorFrame] = []
    previous: Optional[TreeEntry] = None

    for line_number, line in enumerate(text.splitlines(), start=1):
        if is_ignorable(line):
            continue

        width = prefix_width(line)
        clean_name = strip_glyphs(line)
        if not clean_name:
            continue

        is_directory = clean_name.endswith("/")
        name = clean_name[:-1] if is_directory else clean_name
        if not name:
            logger.debug(f"Line {line_number}: bare '/' has no name, skipped.")
            continue

        while stack and stack[-1].prefix_width >= width:
            stack.pop()

        if previous is not None and not previous.is_directory and width > previous.prefix_width:
            logger.warning(
                f"Line {line_number}: '{name}' is indented under file "
                f"'{previous.relative_path}'; files cannot have children, "
                f"attaching it to the nearest open directory instead."
            )

        parts = [frame.name for frame in stack]
        parts.append(name)

        entry = TreeEntry(
            name=name,
            depth=len(stack),
            is_directory=is_directory,
            prefix_width=width,
            relative_path="/".join(parts),
            line_number=line_number,
        )
        logger.debug(f"Line {line_number}: width={width} depth={entry.depth} -> {entry.relative_path}")
        yield entry

        if is_directory:
            stack.append(AncestorFrame(name=name, prefix_width=width))
        previous = entry


def render_tree(entries: Iterable[TreeEntry], indent: str = "  ") -> str:
    """
    Pretty-print entries back into indentation-based text.

    Args:
        entries: Parsed entries, in document order.
        indent: Indentation unit for one nesting level.

    Returns:
        str: One line per entry, directories suffixed with '/'.
    """
    lines = []
    for entry in entries:
        suffix = "/" if entry.is_directory else ""
        lines.append(f"{indent * entry.depth}{entry.name}{suffix}")
    return "\n".join(lines) + ("\n" if lines else "")

# -----------------------------------------------------------------------------
# LINE HELPERS
# -----------------------------------------------------------------------------

def is_ignorable(line: str) -> bool:
    """Return True for blank lines and '#' comment lines."""
    stripped = line.strip()
    return not stripped or stripped.startswith("#")


def prefix_width(line: str) -> int:
    """
    Count the leading whitespace and tree-glyph characters of a line.

    The value is only meaningful as an ordering key against other lines
    of the same input; space and glyph indentation are not normalized.
    """
    width = 0
    for ch in line:
        if ch.isspace() or ch in TREE_GLYPHS:
            width += 1
        else:
            break
    return width


def strip_glyphs(line: str) -> str:
    """Remove every tree-drawing glyph from the line and trim whitespace."""
    for seq in _STRIP_SEQUENCES:
        line = line.replace(seq, "")
    return line.strip()
