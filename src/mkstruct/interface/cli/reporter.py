from __future__ import annotations

"""
Console Reporter.

Renders run progress with rich: a banner, one labelled line per accepted
entry, red error lines on stderr for rejected entries, and a closing summary.
Paths are always passed as Text objects so brackets in names are never
interpreted as markup.
"""

from typing import Optional

from rich.console import Console
from rich.text import Text

from mkstruct.domain.result_models import KIND_DIR, STATUS_EXISTS, MaterializationResult, RunResult

# -----------------------------------------------------------------------------
# STYLE TABLE
# -----------------------------------------------------------------------------

STYLE_DIR = "green"
STYLE_FILE = "cyan"
STYLE_DRY_RUN = "yellow"
STYLE_ERROR = "red"
STYLE_EXISTS = "dim"
STYLE_TITLE = "bold"

LABEL_DIR = "[DIR ]"
LABEL_FILE = "[FILE]"


class ConsoleReporter:
    """
    Writes human-readable progress for one run.

    Args:
        dry_run: Use the dry-run color scheme and banners.
        no_color: Disable styling entirely.
        console: Override the stdout console (tests).
        err_console: Override the stderr console (tests).
    """

    def __init__(
            self,
            *,
            dry_run: bool = False,
            no_color: bool = False,
            console: Optional[Console] = None,
            err_console: Optional[Console] = None,
    ):
        self.dry_run = dry_run
        self.console = console or Console(no_color=no_color, highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, no_color=no_color, highlight=False, soft_wrap=True)

    # -------------------------------------------------------------------------
    # Run lifecycle
    # -------------------------------------------------------------------------

    def start(self, base_display: str) -> None:
        if self.dry_run:
            self.console.print(Text("=== DRY RUN MODE ===", style=STYLE_DRY_RUN))
        self.console.print(Text(f"Creating structure in: {base_display}", style=STYLE_TITLE))
        self.console.print()

    def __call__(self, result: MaterializationResult) -> None:
        if not result.accepted:
            self.error(result.reason)
            return

        if result.kind == KIND_DIR:
            label, style = LABEL_DIR, STYLE_DIR
        else:
            label, style = LABEL_FILE, STYLE_FILE
        if self.dry_run:
            style = STYLE_DRY_RUN

        line = Text.assemble((label, style), " ", (result.relative_path, style))
        if result.status == STATUS_EXISTS:
            line.append(" (exists)", style=STYLE_EXISTS)
        self.console.print(line)

    def finish(self, outcome: RunResult) -> None:
        self.console.print()
        if not outcome.ok:
            self.error(outcome.error)
            return

        if self.dry_run:
            self.console.print(Text("=== DRY RUN COMPLETE (no files created) ===", style=STYLE_DRY_RUN))
        else:
            self.console.print(Text("Structure created successfully", style=STYLE_DIR))

        s = outcome.summary
        self.console.print(
            f"{s['directories']} directories, {s['files']} files "
            f"({s['created']} new, {s['existing']} existing, {s['rejected']} rejected)"
        )

    def error(self, message: str) -> None:
        self.err_console.print(Text(f"ERROR: {message}", style=STYLE_ERROR))
