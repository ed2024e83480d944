from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema, help text and defaults, and translates the
parsed namespace into configuration overrides for the validator.
"""

import argparse
from typing import Any, Dict, List, Optional

from mkstruct import __version__
from mkstruct.domain.errors import ConfigurationError

# -----------------------------------------------------------------------------
# HELP TEXT
# -----------------------------------------------------------------------------

DESCRIPTION = "mkstruct - Create folder and file structures from text representations"

EPILOG = """\
input formats:
  1. Simple indentation (2 spaces per level):
      project/
        src/
          main.cpp
        README.md

  2. Tree-style:
      project/
      ├── src/
      │   └── main.cpp
      └── README.md

  Names ending with '/' are directories, everything else is an empty file.
  Lines starting with '#' and blank lines are ignored. Paths containing '..'
  or starting with '/' are rejected.

examples:
  mkstruct structure.txt
  mkstruct tree.txt --base ./myproject
  mkstruct layout.txt --dry-run
  cat structure.txt | mkstruct --stdin
  tree -F | mkstruct --stdin --base ./copy
"""

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors as ConfigurationError."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ConfigurationError(message)


def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the mkstruct CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = CliArgumentParser(
        prog="mkstruct",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Input Source ---
    p.add_argument(
        "input_files",
        nargs="*",
        metavar="file",
        help="Text file describing the structure.",
    )
    p.add_argument(
        "--stdin",
        dest="use_stdin",
        action="store_true",
        help="Read structure from stdin instead of file.",
    )

    # --- Target ---
    p.add_argument(
        "--base",
        dest="base_dir",
        metavar="path",
        default=None,
        help="Base directory for creation (default: current directory).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show actions without creating files/folders.",
    )

    # --- Output ---
    p.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        metavar="path",
        default=None,
        help="Also write diagnostic logs to this file.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.

    Raises:
        ConfigurationError: If more than one input file was given.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = _single_input(args.input_files)
    overrides["base_dir"] = args.base_dir

    if args.use_stdin:
        overrides["use_stdin"] = True
    if args.dry_run:
        overrides["dry_run"] = True

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _single_input(values: Optional[List[str]]) -> Optional[str]:
    """Return the only positional input, None if there is none."""
    if not values:
        return None
    if len(values) > 1:
        raise ConfigurationError("Multiple input files specified")
    return values[0]
