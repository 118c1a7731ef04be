# topmark:header:start
#
#   project      : LineSort
#   file         : errors.py
#   file_relpath : src/linesort/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LineSort CLI.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from linesort.core.errors import LinesortError
from linesort.core.exit_codes import ExitCode


class LinesortCliError(click.ClickException):
    """Base class for all LineSort CLI errors."""

    exit_code = ExitCode.UNKNOWN_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @classmethod
    def from_error(cls, error: LinesortError) -> LinesortCliError:
        """Wrap a processing error, keeping its exit code."""
        return cls(str(error), exit_code=error.exit_code)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LinesortUsageError(click.UsageError):
    """Error for command-line invocation errors (invalid flags/args); exits with 2."""
