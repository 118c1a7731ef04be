# topmark:header:start
#
#   project      : LineSort
#   file         : buffer.py
#   file_relpath : src/linesort/text/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Whole-file text buffer and its loader.

`load` reads an entire file into a single owned `bytearray` in one operation
and appends a terminator byte (``b"\x00"``). The file length is probed by
seeking to the end and back, so a short read is detected and treated as a hard
failure (there is no retry).

The buffer is the backing store for every `Line` produced by the splitter;
lines alias into it, so the buffer must stay alive (not released) for as long
as any line is used.
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from linesort.config.logging import get_logger
from linesort.core.errors import InputFileError, ReadError, UnknownError

if TYPE_CHECKING:
    from typing import BinaryIO

    from linesort.config.logging import LinesortLogger

logger: LinesortLogger = get_logger(__name__)

#: Byte that ends the loaded buffer and, after splitting, every line.
TERMINATOR: Final[int] = 0


@dataclass(slots=True, eq=False)
class TextBuffer:
    """Owned, mutable byte buffer holding a file image plus one terminator byte.

    Attributes:
        data (bytearray): ``size`` content bytes followed by `TERMINATOR`.
        size (int): Number of content bytes (the probed file length).
        path (Path | None): Source of the content, if loaded from disk.
    """

    data: bytearray
    size: int
    path: Path | None = None

    @classmethod
    def from_bytes(cls, content: bytes, path: Path | None = None) -> TextBuffer:
        """Build a terminated buffer from in-memory content."""
        data = bytearray(len(content) + 1)
        data[: len(content)] = content
        return cls(data=data, size=len(content), path=path)

    @property
    def released(self) -> bool:
        """Return True once `release` has dropped the bytes."""
        return len(self.data) == 0

    def content(self) -> bytes:
        """Return a copy of the content bytes (terminator excluded)."""
        return bytes(self.data[: self.size])

    def release(self) -> None:
        """Drop the backing bytes. Idempotent."""
        if not self.released:
            logger.debug("Releasing text buffer (%d bytes) for %s", self.size, self.path)
        self.data = bytearray()
        self.size = 0


def probe_length(handle: BinaryIO) -> int:
    """Return the length of an open file by seeking to its end and back.

    Args:
        handle (BinaryIO): A seekable binary file object.

    Returns:
        int: The number of bytes between the start and the end of the file.

    Raises:
        UnknownError: If seeking fails or the computed length is negative.
    """
    try:
        begin: int = handle.seek(0, io.SEEK_SET)
        end: int = handle.seek(0, io.SEEK_END)
        handle.seek(0, io.SEEK_SET)
    except (OSError, ValueError) as exc:
        raise UnknownError(f"Failed to move the file pointer: {exc}") from exc
    length: int = end - begin
    if length < 0:
        raise UnknownError(f"Size of file is less than zero ({length})")
    return length


def load(path: Path | str) -> TextBuffer:
    """Read an entire file into a terminated `TextBuffer`.

    Args:
        path (Path | str): The file to read.

    Returns:
        TextBuffer: The owned buffer (content plus terminator).

    Raises:
        InputFileError: If the path cannot be opened for reading.
        UnknownError: If the file length cannot be determined.
        ReadError: If fewer bytes were read than expected.
    """
    file_path = Path(path)
    try:
        handle = open(file_path, "rb")
    except OSError as exc:
        raise InputFileError(f"Cannot open input file {file_path}: {exc.strerror or exc}") from exc

    with handle:
        length: int = probe_length(handle)
        data = bytearray(length + 1)
        try:
            # Single read straight into the buffer; the terminator byte stays zero.
            n_read: int | None = handle.readinto(memoryview(data)[:length])
        except OSError as exc:
            raise ReadError(f"Failed to read text from {file_path}: {exc}") from exc

    if n_read is None or n_read != length:
        raise ReadError(f"Failed to read text from {file_path}: got {n_read} of {length} bytes")

    logger.debug("Loaded %d bytes from %s", length, file_path)
    return TextBuffer(data=data, size=length, path=file_path)
