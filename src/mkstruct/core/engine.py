from __future__ import annotations

"""
Core orchestration engine.

Coordinates one run:
1. Prepares the base directory (real runs only).
2. Parses the tree text line by line.
3. Validates and materializes each entry before the next line is read.
4. Streams every outcome to the reporter in parse order.
5. Aggregates the outcomes into a RunResult.
"""

import logging
from typing import Callable, Iterator, List, Optional

from mkstruct.core.materializer import Materializer
from mkstruct.core.parser import parse_tree, render_tree
from mkstruct.domain.config import RunConfig
from mkstruct.domain.errors import MaterializationIOError
from mkstruct.domain.result_models import (
    MaterializationResult,
    RunResult,
    create_error_result,
    create_success_result,
)
from mkstruct.domain.tree_models import TreeEntry
from mkstruct.infra.fs import ensure_directory

logger = logging.getLogger(__name__)

Reporter = Callable[[MaterializationResult], None]


def iter_structure(text: str, config: RunConfig) -> Iterator[MaterializationResult]:
    """
    Lazily materialize a tree depiction.

    Args:
        text: Complete input text.
        config: Validated run configuration.

    Yields:
        MaterializationResult: One outcome per parsed entry.

    Raises:
        MaterializationIOError: On the first unrecoverable filesystem error.
    """
    if not config.dry_run:
        ensure_directory(config.base_dir)

    materializer = Materializer(config.base_dir, dry_run=config.dry_run)
    debug = logger.isEnabledFor(logging.DEBUG)
    seen: List[TreeEntry] = []
    for entry in parse_tree(text):
        if debug:
            seen.append(entry)
        yield materializer.materialize(entry)

    if debug:
        logger.debug(f"Parsed structure:\n{render_tree(seen)}")


def run_structure(
        text: str,
        config: RunConfig,
        reporter: Optional[Reporter] = None,
) -> RunResult:
    """
    Execute a complete run and summarize it.

    Rejected entries are reported and skipped. A filesystem failure stops
    the run and is returned as a failed RunResult carrying the outcomes
    produced so far.

    Args:
        text: Complete input text.
        config: Validated run configuration.
        reporter: Optional callback invoked with each outcome as it happens.

    Returns:
        RunResult: Status, per-entry outcomes and counters.
    """
    mode = "dry run" if config.dry_run else "run"
    logger.info(f"Structure {mode} started in: {config.base_dir}")

    results: List[MaterializationResult] = []
    try:
        for result in iter_structure(text, config):
            results.append(result)
            if reporter is not None:
                reporter(result)
    except MaterializationIOError as e:
        logger.error(f"Run aborted: {e}")
        return create_error_result(str(e), config.base_dir, config.dry_run, results)

    outcome = create_success_result(config.base_dir, config.dry_run, results)
    logger.info(
        f"Structure {mode} finished: {outcome.summary['created']} created, "
        f"{outcome.summary['existing']} existing, {outcome.summary['rejected']} rejected."
    )
    return outcome
