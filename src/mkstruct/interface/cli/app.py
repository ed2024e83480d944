from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration validation, input reading, engine execution and result
rendering. All configuration errors are detected before the input is parsed.
"""

import json
import sys
from dataclasses import asdict
from typing import List, Optional, TextIO

from rich.console import Console

from mkstruct.core.engine import run_structure
from mkstruct.core.validator import validate_config
from mkstruct.domain.config import get_default_config
from mkstruct.domain.errors import ConfigurationError, MaterializationIOError
from mkstruct.infra.fs import read_text
from mkstruct.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from mkstruct.interface.cli import args as cli_args
from mkstruct.interface.cli.reporter import ConsoleReporter

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        stdin: Stream read by --stdin. Defaults to sys.stdin.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    try:
        args = parser.parse_args(argv)
    except ConfigurationError as e:
        return _config_failure(str(e))
    except SystemExit as e:
        # --help and --version
        return int(e.code or 0)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(
        LoggingConfig(level=log_level, console=True, log_file=args.log_file),
        force=True,
    )

    try:
        return _run(args, stdin)
    finally:
        shutdown_logging()


def _run(args, stdin: Optional[TextIO]) -> int:
    """Validate configuration, then parse and materialize the input."""
    # 3. Configuration resolution and validation
    try:
        overrides = cli_args.args_to_overrides(args)
        base_conf = get_default_config()
        base_conf.update({k: v for k, v in overrides.items() if v is not None})
        config, warnings = validate_config(base_conf)
    except ConfigurationError as e:
        logger.debug(f"Configuration rejected: {e}")
        return _config_failure(str(e), no_color=args.no_color)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    reporter = ConsoleReporter(dry_run=config.dry_run, no_color=args.no_color)

    try:
        # 4. Input acquisition
        try:
            if config.use_stdin:
                text = read_text(stream=stdin or sys.stdin)
            else:
                text = read_text(config.input_path)
        except MaterializationIOError as e:
            logger.error(str(e))
            reporter.error(str(e))
            return EXIT_ERROR

        # 5. Engine execution phase
        if not args.json_output:
            reporter.start(config.base_display)
        outcome = run_structure(
            text,
            config,
            reporter=None if args.json_output else reporter,
        )
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        reporter.error("Interrupted by user.")
        return EXIT_INTERRUPTED

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(outcome), ensure_ascii=False, indent=2))
    else:
        reporter.finish(outcome)

    return EXIT_OK if outcome.ok else EXIT_ERROR

# -----------------------------------------------------------------------------
# ERROR RENDERING
# -----------------------------------------------------------------------------

def _config_failure(message: str, *, no_color: bool = False) -> int:
    """Report a configuration error with a usage hint."""
    err = Console(stderr=True, no_color=no_color, highlight=False, soft_wrap=True)
    ConsoleReporter(err_console=err).error(message)
    err.print("Use --help for usage information")
    return EXIT_ERROR

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
