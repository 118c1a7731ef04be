# topmark:header:start
#
#   project      : LineSort
#   file         : protocols.py
#   file_relpath : src/linesort/pipeline/protocols.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural protocol for pipeline steps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from linesort.pipeline.context import ProcessingContext
    from linesort.pipeline.status import Axis


class Step(Protocol):
    """A callable pipeline step: ``ctx = step(ctx)``."""

    name: str
    primary_axis: Axis | None

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the step against ``ctx`` and return it."""
        ...
