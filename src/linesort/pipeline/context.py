# topmark:header:start
#
#   project      : LineSort
#   file         : context.py
#   file_relpath : src/linesort/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context model for the LineSort pipeline.

`ProcessingContext` carries the configuration, per-axis status, diagnostics,
views (buffer and lines) and the output stream between steps. Steps mutate it
in place and may request an early, graceful termination through `FlowControl`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from linesort.config.logging import get_logger
from linesort.core.diagnostics import DiagnosticLog
from linesort.pipeline.status import ProcessingStatus, SortStatus, WriteStatus
from linesort.pipeline.views import Views

if TYPE_CHECKING:
    from typing import BinaryIO

    from linesort.config.logging import LinesortLogger
    from linesort.config.model import Config
    from linesort.core.errors import LinesortError
    from linesort.core.exit_codes import ExitCode
    from linesort.pipeline.protocols import Step

logger: LinesortLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "PassRecord",
    "ProcessingContext",
]


@dataclass
class FlowControl:
    """Execution flow control for the current run."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "load-failed"
    at_step: str = ""  # step name that requested the halt


@dataclass
class PassRecord:
    """Summary of one sort or write pass, in execution order."""

    step: str
    label: str
    status: SortStatus | WriteStatus
    lines: int = 0
    bytes_written: int = 0


@dataclass
class ProcessingContext:
    """Mutable state of one LineSort run.

    Attributes:
        config (Config): Effective configuration at the time of processing.
        steps (list[Step]): Steps that have been invoked, in order.
        status (ProcessingStatus): Per-axis outcomes.
        flow (FlowControl): Whether processing should halt and why.
        diagnostics (DiagnosticLog): Info, warning and error messages.
        views (Views): The text buffer and its line views.
        output (BinaryIO | None): Output stream shared by the write passes.
        error (LinesortError | None): The error that halted the run, if any.
        passes (list[PassRecord]): One record per sort/write pass.
    """

    config: Config
    steps: list[Step] = field(default_factory=lambda: [])
    status: ProcessingStatus = field(default_factory=ProcessingStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    views: Views = field(default_factory=Views)
    output: BinaryIO | None = None
    error: LinesortError | None = None
    passes: list[PassRecord] = field(default_factory=lambda: [])

    @classmethod
    def bootstrap(cls, config: Config) -> ProcessingContext:
        """Create a fresh context seeded with the config's diagnostics."""
        ctx = cls(config=config)
        ctx.diagnostics.extend(config.diagnostics)
        return ctx

    @property
    def is_halted(self) -> bool:
        """Return True once a step has requested a halt."""
        return self.flow.halt

    @property
    def exit_code(self) -> ExitCode | None:
        """Return the exit code of the halting error, or None when the run succeeded."""
        return self.error.exit_code if self.error is not None else None

    def request_halt(self, *, reason: str, at_step: str, error: LinesortError | None = None) -> None:
        """Stop the pipeline after the current step.

        The first halting error wins; later calls keep it.
        """
        self.flow.halt = True
        self.flow.reason = reason
        self.flow.at_step = at_step
        if error is not None and self.error is None:
            self.error = error

    def add_info(self, message: str) -> None:
        """Record an ``info`` diagnostic."""
        self.diagnostics.add_info(message)

    def add_warning(self, message: str) -> None:
        """Record a ``warning`` diagnostic."""
        self.diagnostics.add_warning(message)

    def add_error(self, message: str) -> None:
        """Record an ``error`` diagnostic."""
        self.diagnostics.add_error(message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly summary (for logging and tests)."""
        buffer = self.views.buffer
        return {
            "input": str(self.config.input_path),
            "output": str(self.config.output_path),
            "status": {
                "load": self.status.load.value,
                "split": self.status.split.value,
                "sort": self.status.sort.value,
                "write": self.status.write.value,
            },
            "flow": {
                "halt": self.flow.halt,
                "reason": self.flow.reason,
                "at_step": self.flow.at_step,
            },
            "bytes": buffer.size if buffer is not None else None,
            "lines": len(self.views.lines) if self.views.lines is not None else None,
            "passes": [
                {"step": p.step, "label": p.label, "status": p.status.value, "lines": p.lines}
                for p in self.passes
            ],
            "diagnostics": [
                {"level": d.level.value, "message": d.message} for d in self.diagnostics.items
            ],
        }
