# topmark:header:start
#
#   project      : LineSort
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running LineSort in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so that relative paths (including the default
``Onegin2.txt``/``NewOnegin.txt`` and discovered ``linesort.toml``) resolve
against the temporary test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from linesort.cli.main import cli
from linesort.config.logging import TRACE_LEVEL, setup_logging
from linesort.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep color detection on auto and reinstall TRACE logging after the CLI ran."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Pytest-provided temporary directory used as the CWD.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["run"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test passes absolute paths only, or does not touch
    the filesystem at all (``--help``, ``version``).
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code`` (negative codes are reported as-is)."""
    assert result.exit_code == code, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that Click rejected the invocation (code 2)."""
    assert result.exit_code == 2, result.output
