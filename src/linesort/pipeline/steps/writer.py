# topmark:header:start
#
#   project      : LineSort
#   file         : writer.py
#   file_relpath : src/linesort/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer step: append the current line order to the output stream.

Every write pass appends to the same stream (``ctx.output``), so the three
passes of a run land back to back with no separator.

Axes written:
  - write

Sets:
  - WriteStatus: {WRITTEN, FAILED}

Failures halt the pipeline in strict mode; otherwise they are recorded as
warnings and the next pass runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.pipeline.context import PassRecord
from linesort.pipeline.status import Axis, WriteStatus
from linesort.pipeline.steps.base import BaseStep
from linesort.text.output import write

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.core.errors import LinesortError
    from linesort.pipeline.context import ProcessingContext
    from linesort.text.output import WriteResult

logger: LinesortLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``ctx.views.lines`` to ``ctx.output``; ``label`` names the pass."""

    def __init__(self, label: str) -> None:
        super().__init__(
            name=f"{self.__class__.__name__}[{label}]",
            primary_axis=Axis.WRITE,
            axes_written=(Axis.WRITE,),
        )
        self.label: str = label

    def run(self, ctx: ProcessingContext) -> None:
        """Append one dump of the lines to the output stream."""
        result: WriteResult = write(ctx.views.lines, ctx.output)
        ctx.status.write = WriteStatus.WRITTEN
        ctx.passes.append(
            PassRecord(
                step=self.name,
                label=self.label,
                status=WriteStatus.WRITTEN,
                lines=result.lines_written,
                bytes_written=result.bytes_written,
            )
        )

    def fail(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        """Record a failed write pass."""
        ctx.status.write = WriteStatus.FAILED
        ctx.passes.append(PassRecord(step=self.name, label=self.label, status=WriteStatus.FAILED))

    def is_fatal(self, ctx: ProcessingContext) -> bool:
        """Write failures are fatal only in strict mode."""
        return ctx.config.strict
