from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between raw configuration values (defaults merged
with CLI overrides) and the engine. Coerces types, normalizes the base
directory and rejects unusable input selections before any work begins.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from mkstruct.domain.config import DEFAULT_BASE_DIR, RunConfig, get_default_config
from mkstruct.domain.errors import ConfigurationError
from mkstruct.infra.fs import normalize_path

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any) -> Tuple[RunConfig, List[str]]:
    """
    Validate a raw configuration dictionary and build the run configuration.

    Args:
        config: Raw configuration data, merged over the domain defaults.

    Returns:
        Tuple[RunConfig, List[str]]: The immutable configuration and a list
                                     of non-fatal warnings.

    Raises:
        ConfigurationError: If no usable input is selected, both stdin and
                            a file are selected, or the file does not exist.
    """
    warnings: List[str] = []

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Invalid config type: expected dict, received {type(config).__name__}."
        )

    merged: Dict[str, Any] = get_default_config()
    merged.update({k: v for k, v in config.items() if v is not None})

    use_stdin = _as_bool(merged.get("use_stdin"), "use_stdin", warnings)
    dry_run = _as_bool(merged.get("dry_run"), "dry_run", warnings)
    input_path = merged.get("input_path")
    base_display = str(merged.get("base_dir") or "").strip() or DEFAULT_BASE_DIR

    # Input source selection
    if use_stdin and input_path:
        raise ConfigurationError("Cannot specify both --stdin and input file")
    if not use_stdin and not input_path:
        raise ConfigurationError("No input file specified")
    if input_path and not os.path.isfile(input_path):
        raise ConfigurationError(f"Input file not found: {input_path}")

    base_dir = normalize_path(base_display, DEFAULT_BASE_DIR)
    if os.path.exists(base_dir) and not os.path.isdir(base_dir):
        raise ConfigurationError(f"Base path is not a directory: {base_display}")

    run_config = RunConfig(
        base_dir=base_dir,
        base_display=base_display,
        dry_run=dry_run,
        input_path=input_path,
        use_stdin=use_stdin,
    )
    logger.debug(f"Resolved configuration: {run_config}")
    return run_config, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_bool(value: Any, field: str, warnings: List[str]) -> bool:
    """Coerce flags coming from untyped sources."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in ("1", "true", "yes", "y", "on"):
            return True
        if v in ("0", "false", "no", "n", "off", ""):
            return False

    warnings.append(f"Invalid field '{field}': expected bool, received {value!r}. Using False.")
    return False
