# topmark:header:start
#
#   project      : LineSort
#   file         : exit_codes.py
#   file_relpath : src/linesort/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by LineSort.

The error taxonomy is a small closed set; the numeric values are stable and
negative for every failure, matching the historical behavior of the tool.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LineSort CLI.

    Attributes:
        SUCCESS (int): All three passes were written.
        INPUT_FILE_ERROR (int): The input could not be opened or fully read.
        STRING_ERROR (int): No text buffer was available for splitting.
        STRING_ARRAY_ERROR (int): The line collection was missing or could not be allocated.
        OUTPUT_FILE_ERROR (int): The output could not be opened or written.
        INVALID_COUNT (int): A write was asked for an impossible number of lines.
        UNKNOWN_ERROR (int): Seeking failed or the computed file size was negative.

    Usage:
        Note that POSIX shells report the status modulo 256, so
        ``INPUT_FILE_ERROR`` shows up as ``255``:

        ```python
        import subprocess
        from linesort.core.exit_codes import ExitCode

        result = subprocess.run(["linesort", "run", "in.txt", "out.txt"])
        if result.returncode == ExitCode.INPUT_FILE_ERROR % 256:
            print("Cannot read in.txt")
        ```
    """

    SUCCESS = 0
    INPUT_FILE_ERROR = -1
    STRING_ERROR = -2
    STRING_ARRAY_ERROR = -3
    OUTPUT_FILE_ERROR = -4
    INVALID_COUNT = -5
    UNKNOWN_ERROR = -6
