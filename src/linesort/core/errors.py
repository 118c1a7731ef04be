# topmark:header:start
#
#   project      : LineSort
#   file         : errors.py
#   file_relpath : src/linesort/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the LineSort text layer.

Every error carries the `ExitCode` the CLI reports when the error ends a run.
These exceptions never print; presentation belongs to the CLI layer.
"""

from __future__ import annotations

from linesort.core.exit_codes import ExitCode


class LinesortError(Exception):
    """Base class for all LineSort processing errors."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR


class InputFileError(LinesortError):
    """The input path cannot be opened for reading."""

    exit_code = ExitCode.INPUT_FILE_ERROR


class ReadError(InputFileError):
    """Fewer bytes were read than the probed file length."""


class StringError(LinesortError):
    """No usable text buffer (absent, released, or bad delimiter)."""

    exit_code = ExitCode.STRING_ERROR


class StringArrayError(LinesortError):
    """The line collection is absent or could not be allocated."""

    exit_code = ExitCode.STRING_ARRAY_ERROR


class OutputFileError(LinesortError):
    """The output handle is absent or writing to it failed."""

    exit_code = ExitCode.OUTPUT_FILE_ERROR


class InvalidCountError(LinesortError):
    """A write was requested for a negative or out-of-range line count."""

    exit_code = ExitCode.INVALID_COUNT


class UnknownError(LinesortError):
    """Seeking failed or the probed file length was negative."""

    exit_code = ExitCode.UNKNOWN_ERROR
