# topmark:header:start
#
#   project      : LineSort
#   file         : runner.py
#   file_relpath : src/linesort/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a sequence of pipeline steps against one processing context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linesort.config.logging import LinesortLogger

    from .context import ProcessingContext
    from .protocols import Step

logger: LinesortLogger = get_logger(__name__)


def trim_views(ctx: ProcessingContext) -> None:
    """Release the line views and the text buffer (idempotent)."""
    ctx.views.release_all()


def run(
    ctx: ProcessingContext,
    steps: Sequence[Step],
    *,
    prune: bool = True,
) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Steps run even after a halt so that each one can record that it was
    skipped; `BaseStep.may_proceed` gates the actual work.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
        prune (bool): Release the views at the end of the run (default: `True`).

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.info("Running %d steps: %s", len(steps), [s.name for s in steps])
    for step in steps:
        ctx = step(ctx)

    if prune is True:
        trim_views(ctx)

    return ctx
