# topmark:header:start
#
#   project      : LineSort
#   file         : sorter.py
#   file_relpath : src/linesort/pipeline/steps/sorter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sorter step: reorder the line views by one `Ordering`.

Axes written:
  - sort

Sets:
  - SortStatus: {SORTED, FAILED}

Failures halt the pipeline in strict mode; otherwise they are recorded as
warnings and the next pass runs on the unchanged order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.pipeline.context import PassRecord
from linesort.pipeline.status import Axis, SortStatus
from linesort.pipeline.steps.base import BaseStep
from linesort.text.sort import sort_lines

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.core.errors import LinesortError
    from linesort.pipeline.context import ProcessingContext
    from linesort.text.compare import Ordering

logger: LinesortLogger = get_logger(__name__)


class SorterStep(BaseStep):
    """Sort ``ctx.views.lines`` in place by ``ordering``."""

    def __init__(self, ordering: Ordering) -> None:
        super().__init__(
            name=f"{self.__class__.__name__}[{ordering.value}]",
            primary_axis=Axis.SORT,
            axes_written=(Axis.SORT,),
        )
        self.ordering: Ordering = ordering

    def run(self, ctx: ProcessingContext) -> None:
        """Sort the line views using the configured suffix strategy and tracing."""
        sort_lines(
            ctx.views.lines,
            self.ordering,
            strategy=ctx.config.suffix_strategy,
            trace=ctx.config.trace_compare,
        )
        ctx.status.sort = SortStatus.SORTED
        ctx.passes.append(
            PassRecord(
                step=self.name,
                label=self.ordering.value,
                status=SortStatus.SORTED,
                lines=len(ctx.views.lines or ()),
            )
        )

    def fail(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        """Record a failed sort pass."""
        ctx.status.sort = SortStatus.FAILED
        ctx.passes.append(
            PassRecord(step=self.name, label=self.ordering.value, status=SortStatus.FAILED)
        )

    def is_fatal(self, ctx: ProcessingContext) -> bool:
        """Sort failures are fatal only in strict mode."""
        return ctx.config.strict
