# topmark:header:start
#
#   project      : LineSort
#   file         : lines.py
#   file_relpath : src/linesort/text/lines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line views and the in-place line splitter.

`split` scans a `TextBuffer` once, from the start up to the first terminator
byte, overwriting every delimiter with the terminator and recording where each
line starts. The result is a `LineCollection` of `Line` views: each view is an
``(buffer, offset, length)`` triple that aliases the buffer, so no character
data is copied while splitting or while sorting in forward order.

The number of lines is always the number of delimiters plus one. A buffer that
ends with a delimiter therefore yields a trailing empty line, and an empty
buffer yields exactly one empty line.

Example:
    ```python
    buf = TextBuffer.from_bytes(b"banana\napple\n")
    lines = split(buf)
    assert [ln.tobytes() for ln in lines] == [b"banana", b"apple", b""]
    ```
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Final, overload

from linesort.config.logging import get_logger
from linesort.core.errors import StringArrayError, StringError
from linesort.text.buffer import TERMINATOR, TextBuffer

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger

logger: LinesortLogger = get_logger(__name__)

#: Default line delimiter (LF).
DEFAULT_DELIMITER: Final[bytes] = b"\n"


@dataclass(frozen=True, slots=True, eq=False)
class Line:
    """Non-owning view of one line inside a `TextBuffer`.

    Attributes:
        buffer (TextBuffer): The buffer this line aliases.
        offset (int): Index of the first byte of the line.
        length (int): Number of bytes in the line (its terminator excluded).
    """

    buffer: TextBuffer
    offset: int
    length: int

    def view(self) -> memoryview:
        """Return a zero-copy view of the line's bytes.

        Raises:
            StringError: If the backing buffer has been released.
        """
        if self.buffer.released:
            raise StringError("Line view outlives its text buffer")
        return memoryview(self.buffer.data)[self.offset : self.offset + self.length]

    def tobytes(self) -> bytes:
        """Return a copy of the line's bytes."""
        with self.view() as mv:
            return mv.tobytes()

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        if self.buffer.released:
            return f"Line(offset={self.offset}, length={self.length}, <released>)"
        return f"Line({self.tobytes()!r})"


class LineCollection(Sequence[Line]):
    """Ordered, reorderable sequence of `Line` views over one buffer.

    Only the sort step reorders the collection; it permutes the views and never
    touches the underlying bytes. Calling `release` discards the views.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: list[Line]) -> None:
        self._lines: list[Line] | None = lines

    @property
    def lines(self) -> list[Line]:
        """Return the backing list of views.

        Raises:
            StringArrayError: If the collection has been released.
        """
        if self._lines is None:
            raise StringArrayError("Line collection has been released")
        return self._lines

    @overload
    def __getitem__(self, index: int) -> Line: ...

    @overload
    def __getitem__(self, index: slice) -> list[Line]: ...

    def __getitem__(self, index: int | slice) -> Line | list[Line]:
        return self.lines[index]

    def __len__(self) -> int:
        return 0 if self._lines is None else len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines or ())

    def sort(self, *, key: Callable[[Line], object]) -> None:
        """Reorder the views in place using ``key``."""
        self.lines.sort(key=key)

    def tobytes_list(self) -> list[bytes]:
        """Return copies of every line's bytes in the current order."""
        return [ln.tobytes() for ln in self.lines]

    def release(self) -> None:
        """Release the views. Idempotent."""
        self._lines = None

    def __repr__(self) -> str:
        return f"LineCollection(n={len(self)})"


def delimiter_byte(delimiter: bytes | int) -> int:
    """Normalize a delimiter to a single byte value.

    Raises:
        StringError: If the delimiter is not exactly one byte, or is the terminator.
    """
    if isinstance(delimiter, int):
        value = delimiter
    elif len(delimiter) == 1:
        value = delimiter[0]
    else:
        raise StringError(f"Delimiter must be a single byte, got {delimiter!r}")
    if not 0 <= value <= 0xFF or value == TERMINATOR:
        raise StringError(f"Invalid delimiter byte: {value!r}")
    return value


def split(buffer: TextBuffer | None, delimiter: bytes | int = DEFAULT_DELIMITER) -> LineCollection:
    """Split ``buffer`` in place on ``delimiter`` and return views of the lines.

    Every delimiter up to the first terminator is overwritten with the
    terminator while the start of the following line is recorded, so the
    rewrite and the view construction share one linear scan.

    Args:
        buffer (TextBuffer | None): The loaded buffer; mutated in place.
        delimiter (bytes | int): The single byte separating lines.

    Returns:
        LineCollection: ``count(delimiter) + 1`` views, in original order.

    Raises:
        StringError: If the buffer is absent, released, or unterminated, or the
            delimiter is invalid.
        StringArrayError: If the collection of views cannot be allocated.
    """
    if buffer is None:
        raise StringError("Text buffer is missing")
    if buffer.released:
        raise StringError("Text buffer has been released")
    delim: int = delimiter_byte(delimiter)

    data: bytearray = buffer.data
    # The scan trusts the terminator: anything past the first one is not text.
    end: int = data.find(TERMINATOR)
    if end < 0:
        raise StringError("Text buffer is not terminated")

    try:
        lines: list[Line] = []
        start: int = 0
        pos: int = data.find(delim, 0, end)
        while pos >= 0:
            data[pos] = TERMINATOR
            lines.append(Line(buffer, start, pos - start))
            start = pos + 1
            pos = data.find(delim, start, end)
        lines.append(Line(buffer, start, end - start))
    except MemoryError as exc:
        raise StringArrayError("Failed allocating memory for the line collection") from exc

    if end < buffer.size:
        logger.warning(
            "Terminator byte at offset %d: ignoring the remaining %d bytes",
            end,
            buffer.size - end,
        )
    logger.debug("Split %d bytes into %d lines", end, len(lines))
    return LineCollection(lines)
