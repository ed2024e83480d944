from __future__ import annotations

"""
Materialization Result Models.

Defines the per-entry outcome records and the aggregated run result used to
communicate between the engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# STATUS CONSTANTS
# -----------------------------------------------------------------------------

STATUS_CREATED = "created"
STATUS_EXISTS = "exists"
STATUS_REJECTED = "rejected"

KIND_DIR = "dir"
KIND_FILE = "file"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MaterializationResult:
    """
    Outcome of attempting to create one parsed entry.

    In dry-run mode 'created' means the entry would have been created.

    Attributes:
        kind: 'dir' or 'file'.
        relative_path: Path relative to the base directory, as parsed.
        path: Resolved absolute target path (empty when rejected).
        status: One of 'created', 'exists', 'rejected'.
        reason: Rejection reason, empty otherwise.
        dry_run: Whether the action was only reported.
    """
    kind: str
    relative_path: str
    path: str
    status: str
    reason: str = ""
    dry_run: bool = False

    @property
    def accepted(self) -> bool:
        return self.status != STATUS_REJECTED


@dataclass(frozen=True)
class RunResult:
    """
    Aggregated result of one complete run.

    Attributes:
        ok: False only when a fatal error aborted the run.
        error: Descriptive message in case of failure.
        base_dir: Absolute base directory the structure was resolved against.
        dry_run: Whether filesystem mutation was withheld.
        results: Per-entry outcomes in parse order.
        summary: Counters keyed by 'created', 'existing', 'rejected',
            'directories' and 'files'.
    """
    ok: bool
    error: str
    base_dir: str
    dry_run: bool
    results: List[MaterializationResult] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def summarize(results: List[MaterializationResult]) -> Dict[str, int]:
    """Count outcomes by status and by kind of accepted entry."""
    summary = {
        "created": 0,
        "existing": 0,
        "rejected": 0,
        "directories": 0,
        "files": 0,
    }
    for r in results:
        if r.status == STATUS_CREATED:
            summary["created"] += 1
        elif r.status == STATUS_EXISTS:
            summary["existing"] += 1
        else:
            summary["rejected"] += 1
            continue
        if r.kind == KIND_DIR:
            summary["directories"] += 1
        else:
            summary["files"] += 1
    return summary


def create_success_result(
        base_dir: str,
        dry_run: bool,
        results: List[MaterializationResult],
) -> RunResult:
    """Build a completed run result with its counters."""
    return RunResult(
        ok=True,
        error="",
        base_dir=base_dir,
        dry_run=dry_run,
        results=list(results),
        summary=summarize(results),
    )


def create_error_result(
        error: str,
        base_dir: str,
        dry_run: bool,
        results: List[MaterializationResult],
) -> RunResult:
    """Build a run result for a run aborted by a fatal error."""
    return RunResult(
        ok=False,
        error=error,
        base_dir=base_dir,
        dry_run=dry_run,
        results=list(results),
        summary=summarize(results),
    )
