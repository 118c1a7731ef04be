# topmark:header:start
#
#   project      : LineSort
#   file         : cmd_common.py
#   file_relpath : src/linesort/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by LineSort commands (config resolution, verbosity, diagnostics)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from linesort.config.logging import get_logger
from linesort.config.model import MutableConfig
from linesort.core.diagnostics import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from linesort.cli.console import ConsoleLike
    from linesort.config.model import Config
    from linesort.core.diagnostics import Diagnostic

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order:
        1. Config.verbosity_level if set (not None)
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    cfg_level = config.verbosity_level if config is not None else None
    if cfg_level is not None:
        return int(cfg_level)
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(
    ctx: click.Context,
    *,
    no_config: bool,
    config_paths: Iterable[str],
    **cli_args: Any,
) -> Config:
    """Merge defaults, config files and CLI arguments into a frozen `Config`.

    Args:
        ctx (click.Context): Current Click context (verbosity is read from ``ctx.obj``).
        no_config (bool): Skip config discovery in the working directory.
        config_paths (Iterable[str]): Explicit config files.
        **cli_args (Any): CLI overrides (``None`` values are ignored).

    Returns:
        Config: The effective configuration.
    """
    ctx.ensure_object(dict)
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args({"verbosity_level": ctx.obj.get("verbosity_level"), **cli_args})
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def emit_diagnostics(
    console: ConsoleLike,
    diagnostics: Iterable[Diagnostic],
    *,
    verbosity: int,
    include_errors: bool = True,
) -> None:
    """Print diagnostics (warnings and errors go to stderr).

    Errors are always shown unless ``include_errors`` is False (the caller then
    reports them itself); warnings are shown unless quiet; info only with ``-vv``.
    """
    for diag in diagnostics:
        if diag.level == DiagnosticLevel.ERROR:
            if include_errors:
                console.error(f"Error: {diag.message}")
            continue
        if diag.level == DiagnosticLevel.WARNING and verbosity >= 0:
            console.warn(f"Warning: {diag.message}")
        elif diag.level == DiagnosticLevel.INFO and verbosity >= 2:
            console.print(console.styled(f"Note: {diag.message}", dim=True))
