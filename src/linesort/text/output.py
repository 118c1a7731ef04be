# topmark:header:start
#
#   project      : LineSort
#   file         : output.py
#   file_relpath : src/linesort/text/output.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize a line collection to an output stream, one line per row.

Each line is written from its buffer view (no copy) followed by `LINE_END`.
The writer only appends; consecutive calls on the same handle produce
back-to-back dumps with no separator between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from linesort.config.logging import get_logger
from linesort.core.errors import InvalidCountError, OutputFileError, StringArrayError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import BinaryIO

    from linesort.config.logging import LinesortLogger
    from linesort.text.lines import Line

logger: LinesortLogger = get_logger(__name__)

#: Row terminator in the output, independent of the input delimiter.
LINE_END: Final[bytes] = b"\n"


@dataclass
class WriteResult:
    """Structured result of a write operation."""

    lines_written: int = 0
    bytes_written: int = 0


def write(
    lines: Sequence[Line] | None,
    handle: BinaryIO | None,
    count: int | None = None,
) -> WriteResult:
    """Append the first ``count`` lines of ``lines`` to ``handle``.

    Args:
        lines (Sequence[Line] | None): The lines to write, in their current order.
        handle (BinaryIO | None): A binary stream opened for writing.
        count (int | None): Number of lines to write; defaults to all of them.

    Returns:
        WriteResult: The number of lines and bytes written.

    Raises:
        OutputFileError: If ``handle`` is absent or the stream reports an error.
        StringArrayError: If ``lines`` is absent.
        InvalidCountError: If ``count`` is negative or exceeds ``len(lines)``.
    """
    if handle is None:
        raise OutputFileError("Output file error: no output stream")
    if lines is None:
        raise StringArrayError("No strings array")
    n: int = len(lines) if count is None else count
    if n < 0:
        raise InvalidCountError(f"There are {n} strings in text, it's strange")
    if n > len(lines):
        raise InvalidCountError(f"Asked to write {n} strings but only {len(lines)} exist")

    result = WriteResult()
    try:
        for line in lines[:n]:
            with line.view() as mv:
                result.bytes_written += handle.write(mv) or 0
            result.bytes_written += handle.write(LINE_END) or 0
            result.lines_written += 1
    except (OSError, ValueError) as exc:
        # ValueError: write to a closed file
        raise OutputFileError(f"Failed writing to output: {exc}") from exc

    logger.debug("Wrote %d lines (%d bytes)", result.lines_written, result.bytes_written)
    return result
