# topmark:header:start
#
#   project      : LineSort
#   file         : base.py
#   file_relpath : src/linesort/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The engine invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → (fail?) → hint

Design goals
------------
- Single place for per-step bookkeeping and error translation.
- Steps call into `linesort.text`, which raises `LinesortError`; the base
  class turns those into a status (via `fail`), a diagnostic, and, when the
  failure is fatal, a halt request carrying the error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.core.errors import LinesortError

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.pipeline.context import ProcessingContext
    from linesort.pipeline.status import Axis

logger: LinesortLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``run()`` and
    ``fail()``, and optionally ``may_proceed()``, ``is_fatal()`` and ``hint()``.

    Attributes:
        name (str): Stable step identifier for logs and diagnostics.
        primary_axis (Axis | None): The axis this step represents in summaries.
        axes_written (tuple[Axis, ...]): Status axes this step is allowed to write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.info("BaseStep: Pipeline step %s - running", self.name)
            try:
                self.run(ctx)
            except LinesortError as exc:
                self._handle_error(ctx, exc)
            if ctx.flow.halt:
                logger.info(
                    "BaseStep: Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason
                )
        else:
            logger.info("BaseStep: Pipeline step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def _handle_error(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        self.fail(ctx, exc)
        message: str = f"{self.name}: {exc}"
        if self.is_fatal(ctx):
            logger.error("%s", message)
            ctx.add_error(message)
            ctx.request_halt(reason=f"{self.name}-failed", at_step=self.name, error=exc)
        else:
            logger.warning("%s (continuing)", message)
            ctx.add_warning(message)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless an earlier step halted the pipeline.
        """
        return not ctx.is_halted

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place.

        Subclasses must implement this method and only write to declared axes.
        """
        raise NotImplementedError

    def fail(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        """Record the failure ``exc`` on the step's status axis."""

    def is_fatal(self, ctx: ProcessingContext) -> bool:
        """Return whether a failure of this step halts the pipeline (default: always)."""
        return True

    def hint(self, ctx: ProcessingContext) -> None:
        """Attach non-binding diagnostics to ``ctx`` (optional)."""
