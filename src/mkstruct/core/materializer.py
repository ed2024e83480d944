from __future__ import annotations

"""
Filesystem Materializer.

Turns parsed entries into real directories and empty files beneath a base
directory. Every entry is validated on its own before anything is touched,
and dry-run mode runs the same validation and resolution while withholding
all mutation, so its report matches what a real run would do.
"""

import errno
import logging
import os

from mkstruct.core.safety import validate_path
from mkstruct.domain.errors import MaterializationIOError, UnsafePathError
from mkstruct.domain.result_models import (
    KIND_DIR,
    KIND_FILE,
    STATUS_CREATED,
    STATUS_EXISTS,
    STATUS_REJECTED,
    MaterializationResult,
)
from mkstruct.domain.tree_models import TreeEntry
from mkstruct.infra.fs import ensure_directory, touch_file

logger = logging.getLogger(__name__)


class Materializer:
    """
    Creates parsed entries relative to a fixed base directory.

    Filesystem failures are not recovered here: MaterializationIOError
    propagates to the caller and ends the run.
    """

    def __init__(self, base_dir: str, *, dry_run: bool = False):
        self.base_dir = os.path.abspath(base_dir)
        self.dry_run = dry_run

    def resolve(self, relative_path: str) -> str:
        """Join a validated relative path onto the base directory."""
        return os.path.normpath(os.path.join(self.base_dir, relative_path))

    def materialize(self, entry: TreeEntry) -> MaterializationResult:
        """Create (or report) a single parsed entry."""
        return self.materialize_path(entry.relative_path, entry.is_directory)

    def materialize_path(self, relative_path: str, is_directory: bool) -> MaterializationResult:
        """
        Validate, resolve and create one path.

        Args:
            relative_path: Path relative to the base directory.
            is_directory: Create a directory instead of an empty file.

        Returns:
            MaterializationResult: 'created', 'exists' or 'rejected'.

        Raises:
            MaterializationIOError: If the filesystem refuses the operation.
        """
        kind = KIND_DIR if is_directory else KIND_FILE

        try:
            validate_path(relative_path)
        except UnsafePathError as e:
            logger.info(f"Rejected {kind} '{relative_path}': {e.reason}")
            return MaterializationResult(
                kind=kind,
                relative_path=relative_path,
                path="",
                status=STATUS_REJECTED,
                reason=e.reason,
                dry_run=self.dry_run,
            )

        target = self.resolve(relative_path)

        if self.dry_run:
            self._check_dry_run_conflict(target, is_directory)
            exists = os.path.isdir(target) if is_directory else os.path.lexists(target)
            created = not exists
        elif is_directory:
            created = ensure_directory(target)
        else:
            created = touch_file(target)

        status = STATUS_CREATED if created else STATUS_EXISTS
        logger.debug(f"{kind} {status}{' (dry run)' if self.dry_run else ''}: {target}")

        return MaterializationResult(
            kind=kind,
            relative_path=relative_path,
            path=target,
            status=status,
            dry_run=self.dry_run,
        )

    def _check_dry_run_conflict(self, target: str, is_directory: bool) -> None:
        """
        Raise the error a real run would hit when a non-directory sits on
        the directory chain of the target.
        """
        directory = target if is_directory else os.path.dirname(target)
        relative = os.path.relpath(directory, self.base_dir)
        if relative == os.curdir:
            return

        current = self.base_dir
        for part in relative.split(os.sep):
            current = os.path.join(current, part)
            if os.path.isdir(current):
                continue
            if os.path.lexists(current):
                code = errno.EEXIST if current == directory else errno.ENOTDIR
                cause = OSError(code, os.strerror(code), directory)
                raise MaterializationIOError(directory, "create directory", cause)
            return
