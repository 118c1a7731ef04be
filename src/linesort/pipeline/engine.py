# topmark:header:start
#
#   project      : LineSort
#   file         : engine.py
#   file_relpath : src/linesort/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helper for a complete LineSort run (engine layer).

Design goals:
  - No CLI dependencies: Do not import Click or anything under
    ``linesort.cli.*`` from here. Presentation (printing, colors, exit) is a
    responsibility of the CLI layer.
  - Structured results: Return the final `ProcessingContext` plus an optional
    `ExitCode` for the error that ended the run.
  - Scoped resources: the output stream is opened only after the input was
    loaded and split, and it is always closed; the buffer and line views are
    released when the run is over.

Typical usage:

    ctx, err = run_sort(config)
    if err is not None:
        # CLI would map this to a process exit; API callers may handle it differently.
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.core.errors import OutputFileError
from linesort.pipeline import runner
from linesort.pipeline.context import ProcessingContext
from linesort.pipeline.pipelines import EMIT_PIPELINE, PREPARE_PIPELINE

if TYPE_CHECKING:
    from typing import BinaryIO

    from linesort.config.logging import LinesortLogger
    from linesort.config.model import Config
    from linesort.core.exit_codes import ExitCode

logger: LinesortLogger = get_logger(__name__)

_ENGINE_STEP = "engine"


def _output_failure(ctx: ProcessingContext, err: OutputFileError, reason: str) -> None:
    """Record an output-stream failure, halting only in strict mode."""
    if ctx.config.strict:
        logger.error("%s", err)
        ctx.add_error(str(err))
        ctx.request_halt(reason=reason, at_step=_ENGINE_STEP, error=err)
    else:
        logger.warning("%s (continuing)", err)
        ctx.add_warning(str(err))


def _open_output(ctx: ProcessingContext) -> BinaryIO | None:
    path = ctx.config.output_path
    try:
        return open(path, "wb")
    except OSError as exc:
        err = OutputFileError(f"Cannot open output file {path}: {exc.strerror or exc}")
        _output_failure(ctx, err, "output-open-failed")
        return None


def _close_output(ctx: ProcessingContext, handle: BinaryIO) -> None:
    try:
        handle.close()
    except OSError as exc:
        err = OutputFileError(f"Failed to flush {ctx.config.output_path}: {exc}")
        _output_failure(ctx, err, "output-close-failed")


def run_sort(config: Config, *, prune: bool = True) -> tuple[ProcessingContext, ExitCode | None]:
    """Load, split, and write the three passes for ``config``.

    Args:
        config (Config): The effective configuration.
        prune (bool): Release the buffer and line views when done (default: `True`).

    Returns:
        tuple[ProcessingContext, ExitCode | None]: The final context and ``None`` on
        success, otherwise the exit code of the error that halted the run.

    Notes:
        - This helper **never prints**; it only logs. Callers are responsible for
          user-visible messaging and exiting the process if desired.
        - In lenient mode (``config.strict`` is False) an output file that
          cannot be opened does not stop the run: every write pass then fails
          with a warning and the run reports success.
    """
    ctx: ProcessingContext = ProcessingContext.bootstrap(config)
    try:
        ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)
        if ctx.is_halted:
            return ctx, ctx.exit_code

        handle: BinaryIO | None = _open_output(ctx)
        if ctx.is_halted:
            return ctx, ctx.exit_code
        try:
            ctx.output = handle
            ctx = runner.run(ctx, EMIT_PIPELINE, prune=False)
        finally:
            ctx.output = None
            if handle is not None:
                _close_output(ctx, handle)
    finally:
        if prune:
            runner.trim_views(ctx)

    logger.debug("Run finished: %s", ctx.to_dict())
    return ctx, ctx.exit_code
