# topmark:header:start
#
#   project      : LineSort
#   file         : status.py
#   file_relpath : src/linesort/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis in the LineSort pipeline.

Each enum captures one phase (load, split, sort, write). Steps **must only**
write to the axes listed in their ``axes_written`` contract.

Values are human-readable strings used in CLI output; compare with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from yachalk import chalk

from linesort.rendering.colored_enum import ColoredStrEnum


class Axis(str, Enum):
    """Status axes of a processing context."""

    LOAD = "load"
    SPLIT = "split"
    SORT = "sort"
    WRITE = "write"


class LoadStatus(ColoredStrEnum):
    """Outcome of reading the input file."""

    PENDING = ("pending", chalk.gray)
    OK = ("loaded", chalk.green)
    EMPTY = ("empty file", chalk.yellow)
    CANNOT_OPEN = ("cannot open input", chalk.red)
    READ_ERROR = ("short read", chalk.red_bright)
    SIZE_ERROR = ("cannot determine size", chalk.red_bright)


class SplitStatus(ColoredStrEnum):
    """Outcome of splitting the buffer into lines."""

    PENDING = ("pending", chalk.gray)
    OK = ("split", chalk.green)
    NO_TEXT = ("no text buffer", chalk.red)
    NO_MEMORY = ("cannot allocate lines", chalk.red_bright)


class SortStatus(ColoredStrEnum):
    """Outcome of the most recent sort pass."""

    PENDING = ("pending", chalk.gray)
    SORTED = ("sorted", chalk.green)
    FAILED = ("sort failed", chalk.red)


class WriteStatus(ColoredStrEnum):
    """Outcome of the most recent write pass."""

    PENDING = ("pending", chalk.gray)
    WRITTEN = ("written", chalk.green)
    FAILED = ("write failed", chalk.red)


@dataclass
class ProcessingStatus:
    """Per-axis status of a run; the single source of truth for step outcomes."""

    load: LoadStatus = LoadStatus.PENDING
    split: SplitStatus = SplitStatus.PENDING
    sort: SortStatus = SortStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING
