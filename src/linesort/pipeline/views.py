# topmark:header:start
#
#   project      : LineSort
#   file         : views.py
#   file_relpath : src/linesort/pipeline/views.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Heavy, run-scoped data carried by the processing context.

The text buffer and the line collection are the only large objects in a run.
They are grouped in `Views` so that the runner can drop both at once when the
run is over. The collection aliases the buffer, so it is released first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from linesort.text.buffer import TextBuffer
from linesort.text.lines import LineCollection


@runtime_checkable
class Releasable(Protocol):
    """Protocol for views that can release large in-memory buffers.

    Implementers must make ``release()`` idempotent: calling it multiple times
    must be safe and should not raise.

    Examples:
        * `TextBuffer` drops its ``bytearray``.
        * `LineCollection` drops its list of line views.
    """

    def release(self) -> None:
        """Release any materialized buffers to reduce memory usage."""
        ...


@dataclass(slots=True)
class Views:
    """Bundle of the run's buffer and line views.

    Attributes:
        buffer (TextBuffer | None): The loaded file image (owner of all bytes).
        lines (LineCollection | None): Views into ``buffer``, in current order.
    """

    buffer: TextBuffer | None = None
    lines: LineCollection | None = None

    def release_all(self) -> None:
        """Release the line views, then the buffer they alias."""
        for view in (self.lines, self.buffer):
            if isinstance(view, Releasable):
                view.release()
