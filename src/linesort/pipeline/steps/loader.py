# topmark:header:start
#
#   project      : LineSort
#   file         : loader.py
#   file_relpath : src/linesort/pipeline/steps/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Loader step: read the whole input file into the context's text buffer.

Axes written:
  - load

Sets:
  - LoadStatus: {OK, EMPTY, CANNOT_OPEN, READ_ERROR, SIZE_ERROR}

A load failure always halts the pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.core.errors import ReadError, UnknownError
from linesort.pipeline.status import Axis, LoadStatus
from linesort.pipeline.steps.base import BaseStep
from linesort.text.buffer import load

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.core.errors import LinesortError
    from linesort.pipeline.context import ProcessingContext
    from linesort.text.buffer import TextBuffer

logger: LinesortLogger = get_logger(__name__)


class LoaderStep(BaseStep):
    """Load the input file named by ``ctx.config.input_path``."""

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.LOAD,
            axes_written=(Axis.LOAD,),
        )

    def run(self, ctx: ProcessingContext) -> None:
        """Load the input and attach the buffer to ``ctx.views``."""
        buffer: TextBuffer = load(ctx.config.input_path)
        ctx.views.buffer = buffer
        ctx.status.load = LoadStatus.OK if buffer.size > 0 else LoadStatus.EMPTY
        logger.debug("Loaded %s: %s", ctx.config.input_path, ctx.status.load.value)

    def fail(self, ctx: ProcessingContext, exc: LinesortError) -> None:
        """Map the loader's error to a `LoadStatus`."""
        if isinstance(exc, ReadError):
            ctx.status.load = LoadStatus.READ_ERROR
        elif isinstance(exc, UnknownError):
            ctx.status.load = LoadStatus.SIZE_ERROR
        else:
            ctx.status.load = LoadStatus.CANNOT_OPEN

    def hint(self, ctx: ProcessingContext) -> None:
        """Note an empty input (it still yields one empty line per pass)."""
        if ctx.status.load == LoadStatus.EMPTY:
            ctx.add_info(f"{ctx.config.input_path} is empty")
