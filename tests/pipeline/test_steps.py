# topmark:header:start
#
#   project      : LineSort
#   file         : test_steps.py
#   file_relpath : tests/pipeline/test_steps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the individual pipeline steps and their status/halt contracts."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from linesort.core.diagnostics import DiagnosticLevel
from linesort.core.errors import InputFileError, OutputFileError, StringArrayError
from linesort.core.exit_codes import ExitCode
from linesort.pipeline import runner
from linesort.pipeline.context import ProcessingContext
from linesort.pipeline.pipelines import PREPARE_PIPELINE, get_pipeline
from linesort.pipeline.status import LoadStatus, SortStatus, SplitStatus, WriteStatus
from linesort.pipeline.steps.loader import LoaderStep
from linesort.pipeline.steps.sorter import SorterStep
from linesort.pipeline.steps.splitter import SplitterStep
from linesort.pipeline.steps.writer import WriterStep
from linesort.text.compare import Ordering
from tests.conftest import make_config, mark_pipeline

if TYPE_CHECKING:
    from pathlib import Path

    from linesort.config.model import Config


def _ctx(tmp_path: Path, **overrides: object) -> ProcessingContext:
    cfg: Config = make_config(tmp_path / "in.txt", tmp_path / "out.txt", **overrides)
    return ProcessingContext.bootstrap(cfg)


@mark_pipeline
def test_prepare_pipeline_loads_and_splits(sample_file: Path) -> None:
    ctx: ProcessingContext = _ctx(sample_file.parent)

    ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)

    assert ctx.status.load == LoadStatus.OK
    assert ctx.status.split == SplitStatus.OK
    assert ctx.views.lines is not None
    assert ctx.views.lines.tobytes_list() == [b"banana", b"apple", b"cherry", b""]
    assert not ctx.is_halted


@mark_pipeline
def test_empty_input_is_loaded_with_info(tmp_path: Path) -> None:
    (tmp_path / "in.txt").write_bytes(b"")
    ctx: ProcessingContext = _ctx(tmp_path)

    ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)

    assert ctx.status.load == LoadStatus.EMPTY
    assert ctx.views.lines is not None
    assert len(ctx.views.lines) == 1
    assert [d.level for d in ctx.diagnostics.items] == [DiagnosticLevel.INFO]


@mark_pipeline
def test_missing_input_halts_before_split(tmp_path: Path) -> None:
    ctx: ProcessingContext = _ctx(tmp_path)

    ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)

    assert ctx.status.load == LoadStatus.CANNOT_OPEN
    assert ctx.status.split == SplitStatus.PENDING
    assert ctx.is_halted
    assert ctx.flow.at_step == "LoaderStep"
    assert isinstance(ctx.error, InputFileError)
    assert ctx.exit_code == ExitCode.INPUT_FILE_ERROR
    assert [type(s) for s in ctx.steps] == [LoaderStep, SplitterStep]


@mark_pipeline
def test_splitter_without_buffer_is_string_error(tmp_path: Path) -> None:
    ctx: ProcessingContext = SplitterStep()(_ctx(tmp_path))

    assert ctx.status.split == SplitStatus.NO_TEXT
    assert ctx.exit_code == ExitCode.STRING_ERROR


@mark_pipeline
def test_writer_without_output_halts_in_strict_mode(tmp_path: Path) -> None:
    ctx: ProcessingContext = _ctx(tmp_path)
    ctx.output = None

    ctx = WriterStep("unsorted")(ctx)

    assert ctx.status.write == WriteStatus.FAILED
    assert ctx.is_halted
    assert isinstance(ctx.error, OutputFileError)
    assert ctx.diagnostics.stats().n_error == 1


@mark_pipeline
def test_writer_failure_is_warning_in_lenient_mode(tmp_path: Path) -> None:
    ctx: ProcessingContext = _ctx(tmp_path, strict=False)

    ctx = WriterStep("unsorted")(ctx)

    assert ctx.status.write == WriteStatus.FAILED
    assert not ctx.is_halted
    assert ctx.error is None
    assert ctx.diagnostics.stats().n_warning == 1
    assert ctx.passes[-1].status == WriteStatus.FAILED


@mark_pipeline
def test_sorter_without_lines(tmp_path: Path) -> None:
    strict: ProcessingContext = SorterStep(Ordering.FORWARD)(_ctx(tmp_path))
    lenient: ProcessingContext = SorterStep(Ordering.FORWARD)(_ctx(tmp_path, strict=False))

    assert strict.status.sort == SortStatus.FAILED
    assert isinstance(strict.error, StringArrayError)
    assert strict.exit_code == ExitCode.STRING_ARRAY_ERROR
    assert lenient.status.sort == SortStatus.FAILED
    assert lenient.exit_code is None


@mark_pipeline
def test_steps_after_halt_are_skipped(sample_file: Path) -> None:
    ctx: ProcessingContext = _ctx(sample_file.parent)
    ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)
    ctx.request_halt(reason="test", at_step="test")

    out = io.BytesIO()
    ctx.output = out
    ctx = runner.run(ctx, get_pipeline("emit"), prune=False)

    assert out.getvalue() == b""
    assert ctx.passes == []
    assert ctx.status.write == WriteStatus.PENDING


@mark_pipeline
def test_emit_pipeline_records_every_pass(sample_file: Path) -> None:
    ctx: ProcessingContext = _ctx(sample_file.parent)
    ctx = runner.run(ctx, PREPARE_PIPELINE, prune=False)
    out = io.BytesIO()
    ctx.output = out

    ctx = runner.run(ctx, get_pipeline("emit"))

    assert [(p.label, p.status) for p in ctx.passes] == [
        ("unsorted", WriteStatus.WRITTEN),
        ("forward", SortStatus.SORTED),
        ("forward", WriteStatus.WRITTEN),
        ("suffix", SortStatus.SORTED),
        ("suffix", WriteStatus.WRITTEN),
    ]
    assert ctx.views.buffer is not None and ctx.views.buffer.released
