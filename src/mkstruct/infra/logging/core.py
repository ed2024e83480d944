from __future__ import annotations

"""
Logging bootstrap for the mkstruct CLI.

Each CLI invocation calls configure_logging() once after argument parsing
and shutdown_logging() on the way out. Modules log through the root logger
into a single QueueHandler; a QueueListener thread writes to stderr and to
the optional '--log-file', so a slow log disk never delays creation of the
next entry.
"""

import atexit
import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from mkstruct.infra.logging.config import _LEVEL_MAP, LoggingConfig
from mkstruct.infra.logging.handlers import (
    _create_rotating_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Root logger attributes marking the active setup
_CONFIGURED_FLAG_ATTR: str = "_mkstruct_configured"
_QUEUE_LISTENER_ATTR: str = "_mkstruct_queue_listener"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route mkstruct diagnostics to stderr and the optional log file.

    A second call is a no-op unless force is set. The CLI always forces, so
    calling main() repeatedly in one process (as the tests do) picks up the
    '--debug' and '--log-file' of the latest invocation.

    Args:
        cfg: Level and sinks for this invocation.
        force: Replace an existing setup instead of keeping it.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    _remove_our_handlers(root)
    _stop_existing_listener(root)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        _tag_handler(sh)
        sinks.append(sh)

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            sinks.append(fh)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    # Records queued by a crashing run still reach the sinks
    atexit.register(_safe_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """Flush queued records and remove the handlers installed for this run."""
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _parse_level(level: str) -> int:
    """Map a level name to its constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()


def _stop_existing_listener(root: logging.Logger) -> None:
    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        setattr(root, _QUEUE_LISTENER_ATTR, None)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a listener unless its thread is already gone.

    shutdown_logging() and the atexit hook both reach the listener of the
    last run.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
