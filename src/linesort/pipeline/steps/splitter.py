# topmark:header:start
#
#   project      : LineSort
#   file         : splitter.py
#   file_relpath : src/linesort/pipeline/steps/splitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Splitter step: split the loaded buffer into line views.

Axes written:
  - split

Sets:
  - SplitStatus: {OK, NO_TEXT, NO_MEMORY}

A split failure always halts the pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.core.errors import StringArrayError
from linesort.pipeline.status import Axis, SplitStatus
from linesort.pipeline.steps.base import BaseStep
from linesort.text.lines import split

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.core.errors import LinesortError
    from linesort.pipeline.context import ProcessingContext
    from linesort.text.lines import LineCollection

logger: LinesortLogger = get_logger(__name__)


class SplitterStep(BaseStep):
    """Split ``ctx.views.buffer`` on the configured delimiter."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.SPLIT,
            axes_written=(Axis.SPLIT,),
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Split the buffer in place and attach the line views to ``ctx.views``."""
        lines: LineCollection = split(ctx.views.buffer, ctx.config.delimiter_bytes)
        ctx.views.lines = lines
        ctx.status.split = SplitStatus.OK
        logger.debug("Split into %d lines", len(lines))

    def fail(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        """Map the splitter's error to a `SplitStatus`."""
        if isinstance(exc, StringArrayError):
            ctx.status.split = SplitStatus.NO_MEMORY
        else:
            ctx.status.split = SplitStatus.NO_TEXT
