# topmark:header:start
#
#   project      : LineSort
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LineSort test suite.

This file sets up typed wrappers around pytest decorators, global fixtures,
and the logging configuration used during test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `linesort.config.model.MutableConfig` (mutable), then
      `freeze()` into a `linesort.config.model.Config` before running the engine.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from linesort.config import logging
from linesort.config.model import Config, MutableConfig

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

#: The sample input used across the suite.
SAMPLE_TEXT: bytes = b"banana\napple\ncherry\n"

#: The three dumps of `SAMPLE_TEXT`, back to back.
SAMPLE_OUTPUT: bytes = (
    b"banana\napple\ncherry\n\n"  # unsorted (trailing empty line kept)
    b"\napple\nbanana\ncherry\n"  # forward
    b"\nbanana\napple\ncherry\n"  # suffix: "", "ananab", "elppa", "yrrehc"
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_linesort_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure LineSort's runtime log level is not forced via env during tests.

    Individual tests can still raise the level via `caplog`.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that detailed output is captured."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(input_path: Path, output_path: Path, **overrides: Any) -> Config:
    """Return a frozen config for ``input_path``/``output_path`` (defaults otherwise).

    Args:
        input_path (Path): File to read.
        output_path (Path): File to write.
        **overrides (Any): Extra fields accepted by `MutableConfig.apply_cli_args`.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_cli_args({"input_path": input_path, "output_path": output_path, **overrides})
    return draft.freeze()


@fixture()
def sample_file(tmp_path: Path) -> Path:
    """Write `SAMPLE_TEXT` to ``tmp_path / "in.txt"`` and return its path."""
    path: Path = tmp_path / "in.txt"
    path.write_bytes(SAMPLE_TEXT)
    return path
