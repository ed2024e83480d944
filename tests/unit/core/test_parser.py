from __future__ import annotations

"""
Unit tests for the Tree Text Parser.

Verifies:
1. Nesting reconstruction for space-indented and tree-style input.
2. Skipping of blank lines, comments and decoration-only lines.
3. Directory detection from the trailing slash.
4. Stack behavior for siblings, dedents and files followed by deeper lines.
5. Round-trip stability through render_tree.
"""

import logging
import types

import pytest

from mkstruct.core.parser import (
    is_ignorable,
    parse_tree,
    prefix_width,
    render_tree,
    strip_glyphs,
)


def paths(text: str):
    """Helper returning (relative_path, is_directory) pairs."""
    return [(e.relative_path, e.is_directory) for e in parse_tree(text)]

# -----------------------------------------------------------------------------
# LINE HELPERS
# -----------------------------------------------------------------------------

def test_prefix_width_counts_spaces_and_glyphs() -> None:
    """TC-01: Width counts every leading space or glyph, not levels."""
    assert prefix_width("name") == 0
    assert prefix_width("    name") == 4
    assert prefix_width("├── name") == 4
    assert prefix_width("│   └── name") == 8
    assert prefix_width("\t\tname") == 2


def test_strip_glyphs_removes_decoration() -> None:
    """TC-02: All glyph combinations are removed and the result is trimmed."""
    assert strip_glyphs("│   ├── src/") == "src/"
    assert strip_glyphs("└─ main.py  ") == "main.py"
    assert strip_glyphs("├ └ ─ │") == ""
    assert strip_glyphs("│\u00a0\u00a0 └── nbsp.txt") == "nbsp.txt"


@pytest.mark.parametrize("line, expected", [
    ("", True),
    ("   ", True),
    ("# comment", True),
    ("    # indented comment", True),
    ("name#1.txt", False),
    ("src/", False),
])
def test_is_ignorable(line: str, expected: bool) -> None:
    """TC-03: Only blank and '#'-first lines are ignorable."""
    assert is_ignorable(line) is expected

# -----------------------------------------------------------------------------
# STRUCTURE RECONSTRUCTION
# -----------------------------------------------------------------------------

def test_parse_indented_scenario(indented_text: str) -> None:
    """TC-04: Two-space input resolves nested paths in document order."""
    entries = list(parse_tree(indented_text))

    assert [(e.relative_path, e.is_directory, e.depth) for e in entries] == [
        ("a", True, 0),
        ("a/b.txt", False, 1),
        ("a/c", True, 1),
        ("a/c/d.txt", False, 2),
    ]
    assert [e.line_number for e in entries] == [1, 2, 3, 4]


def test_parse_tree_style_scenario(tree_style_text: str) -> None:
    """TC-05: Output of the 'tree' utility resolves the same way."""
    assert paths(tree_style_text) == [
        ("root", True),
        ("root/x.txt", False),
        ("root/y", True),
        ("root/y/z.txt", False),
    ]


def test_parse_tree_output_with_nbsp() -> None:
    """TC-06: Non-breaking spaces emitted by 'tree' count as indentation."""
    text = "a/\n├── b/\n│\u00a0\u00a0 └── c.txt\n└── d.txt\n"
    assert paths(text) == [
        ("a", True),
        ("a/b", True),
        ("a/b/c.txt", False),
        ("a/d.txt", False),
    ]


def test_root_does_not_need_column_zero() -> None:
    """TC-07: The shallowest indentation becomes depth 0."""
    entries = list(parse_tree("    a/\n      b.txt\nc.txt\n"))

    assert [(e.relative_path, e.depth) for e in entries] == [
        ("a", 0),
        ("a/b.txt", 1),
        ("c.txt", 0),
    ]


def test_equal_width_entries_are_siblings() -> None:
    """TC-08: A directory at the same width closes the previous one."""
    assert paths("a/\nb/\n  c\n") == [("a", True), ("b", True), ("b/c", False)]


def test_dedent_to_ancestor_pops_several_levels() -> None:
    """TC-09: One dedent can close multiple open directories."""
    text = "a/\n  b/\n    c/\n      d\n  e\nf\n"
    assert paths(text) == [
        ("a", True),
        ("a/b", True),
        ("a/b/c", True),
        ("a/b/c/d", False),
        ("a/e", False),
        ("f", False),
    ]


def test_blank_comment_and_decoration_lines_are_skipped() -> None:
    """TC-10: Ignored lines never reach the output nor disturb the stack."""
    text = "\n\n# header\na/\n│\n   \n  # note\n  b#1.txt\n\n"
    assert paths(text) == [("a", True), ("a/b#1.txt", False)]


def test_directory_flag_iff_trailing_slash() -> None:
    """TC-11: Only names ending with '/' are directories; one slash is stripped."""
    entries = list(parse_tree("dir/\nfile\nname.with.dots/\nslashes//\n"))

    assert [(e.name, e.is_directory) for e in entries] == [
        ("dir", True),
        ("file", False),
        ("name.with.dots", True),
        ("slashes/", True),
    ]


def test_bare_slash_is_skipped() -> None:
    """TC-12: A line with only '/' carries no name."""
    assert paths("/\na/\n") == [("a", True)]


def test_windows_line_endings() -> None:
    """TC-13: CRLF input parses like LF input."""
    assert paths("a/\r\n  b.txt\r\n") == [("a", True), ("a/b.txt", False)]


def test_unsafe_names_are_still_emitted() -> None:
    """TC-14: The parser does not validate; rejection happens downstream."""
    assert paths("evil/../../etc/passwd\n/abs/\n") == [
        ("evil/../../etc/passwd", False),
        ("/abs", True),
    ]

# -----------------------------------------------------------------------------
# FILE WITH CHILDREN
# -----------------------------------------------------------------------------

def test_line_deeper_than_file_attaches_to_open_directory(caplog: pytest.LogCaptureFixture) -> None:
    """TC-15: Files are never pushed; the deeper line stays under the directory."""
    caplog.set_level(logging.WARNING, logger="mkstruct.core.parser")

    result = paths("a/\n  f.txt\n    g.txt\n")

    assert result == [("a", True), ("a/f.txt", False), ("a/g.txt", False)]
    assert any("indented under file 'a/f.txt'" in r.getMessage() for r in caplog.records)


def test_no_warning_for_regular_nesting(caplog: pytest.LogCaptureFixture, indented_text: str) -> None:
    """TC-16: Well-formed input produces no diagnostics."""
    caplog.set_level(logging.WARNING, logger="mkstruct.core.parser")
    list(parse_tree(indented_text))
    assert not caplog.records

# -----------------------------------------------------------------------------
# LAZINESS AND ROUND TRIP
# -----------------------------------------------------------------------------

def test_parse_is_lazy_and_single_pass(indented_text: str) -> None:
    """TC-17: Entries are produced on demand and the iterator is not restartable."""
    it = parse_tree(indented_text)
    assert isinstance(it, types.GeneratorType)

    assert next(it).relative_path == "a"
    assert len(list(it)) == 3
    assert list(it) == []


@pytest.mark.parametrize("text", [
    "a/\n  b.txt\n  c/\n    d.txt\n",
    "src/\n  pkg/\n    __init__.py\n    mod.py\n  tests/\nREADME.md\nsetup.py\n",
    "x\n  y\n    z/\n      w\n",
    "",
])
def test_render_round_trip(text: str) -> None:
    """TC-18: Re-parsing the rendered output yields identical pairs."""
    first = list(parse_tree(text))
    rendered = render_tree(first)

    assert paths(rendered) == [(e.relative_path, e.is_directory) for e in first]


def test_render_tree_uses_two_space_levels(tree_style_text: str) -> None:
    """TC-19: Depth maps to indentation and directories keep their slash."""
    assert render_tree(parse_tree(tree_style_text)) == "root/\n  x.txt\n  y/\n    z.txt\n"
