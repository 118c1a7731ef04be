# topmark:header:start
#
#   project      : LineSort
#   file         : run.py
#   file_relpath : src/linesort/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort `run` command.

Reads INPUT, splits it into lines and writes three dumps to OUTPUT: the lines
in their original order, sorted lexicographically, and sorted by their
reversed text.

Examples:
  Sort with the configured (or historical default) file names:

    $ linesort run

  Name the files explicitly and show one summary line per pass:

    $ linesort -v run poem.txt sorted.txt

  Split on semicolons and keep going when a write fails:

    $ linesort run data.txt out.txt --delimiter ';' --lenient
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from click.core import ParameterSource

from linesort.cli.cmd_common import build_config, emit_diagnostics, get_effective_verbosity
from linesort.cli.console import get_console
from linesort.cli.errors import LinesortCliError
from linesort.cli.options import common_config_options, parse_delimiter
from linesort.config.logging import get_logger
from linesort.pipeline.engine import run_sort
from linesort.pipeline.status import WriteStatus
from linesort.text.sort import SuffixStrategy

if TYPE_CHECKING:
    from linesort.cli.console import ConsoleLike
    from linesort.config.model import Config
    from linesort.core.exit_codes import ExitCode
    from linesort.pipeline.context import ProcessingContext

logger = get_logger(__name__)


def _explicit(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` only if the user passed the flag (else inherit from config)."""
    source: ParameterSource | None = ctx.get_parameter_source(name)
    return None if source in (None, ParameterSource.DEFAULT) else value


@click.command(
    name="run",
    help="Write the lines of INPUT to OUTPUT unsorted, sorted, and sorted by reversed text.",
)
@click.argument("input_path", required=False, metavar="[INPUT]")
@click.argument("output_path", required=False, metavar="[OUTPUT]")
@click.option(
    "--delimiter",
    default=None,
    callback=parse_delimiter,
    help=r"Single-byte line delimiter (default: '\n'; escapes like '\t' are accepted).",
)
@click.option(
    "--suffix-strategy",
    type=click.Choice([s.value for s in SuffixStrategy]),
    default=None,
    help="Evaluate the reversed-text sort with precomputed keys or per comparison.",
)
@click.option(
    "--strict/--lenient",
    "strict",
    default=True,
    help="Stop at the first failed write or sort (default) or warn and continue.",
)
@click.option(
    "--trace-compare",
    is_flag=True,
    default=False,
    help="Log every line comparison at TRACE level (set LINESORT_LOG_LEVEL=TRACE).",
)
@common_config_options
def run_command(
    *,
    input_path: str | None,
    output_path: str | None,
    delimiter: str | None,
    suffix_strategy: str | None,
    strict: bool,
    trace_compare: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Run the load → split → write/sort/write/sort/write sequence.

    Exit Status:
        SUCCESS (0): All three passes were written.
        INPUT_FILE_ERROR (-1): The input could not be opened or fully read.
        STRING_ERROR (-2) / STRING_ARRAY_ERROR (-3): Splitting failed.
        OUTPUT_FILE_ERROR (-4): The output could not be opened or written (strict mode).
        INVALID_COUNT (-5): A write was asked for an impossible number of lines.
        UNKNOWN_ERROR (-6): The input size could not be determined.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config(
        ctx,
        no_config=no_config,
        config_paths=config_paths,
        input_path=input_path,
        output_path=output_path,
        delimiter=delimiter,
        suffix_strategy=suffix_strategy,
        strict=_explicit(ctx, "strict", strict),
        trace_compare=_explicit(ctx, "trace_compare", trace_compare),
    )
    vlevel: int = get_effective_verbosity(ctx, config)
    logger.trace("Config after merging args: %s", config)
    emit_diagnostics(console, config.diagnostics, verbosity=vlevel)

    result: ProcessingContext
    err: ExitCode | None
    result, err = run_sort(config)

    # Config diagnostics were already shown; the halting error is raised below.
    run_diagnostics = result.diagnostics.items[len(config.diagnostics) :]
    emit_diagnostics(console, run_diagnostics, verbosity=vlevel, include_errors=False)

    if err is not None:
        assert result.error is not None
        raise LinesortCliError.from_error(result.error)

    if vlevel > 0:
        color_enabled: bool = bool(ctx.obj.get("color_enabled", False))
        for record in result.passes:
            if not isinstance(record.status, WriteStatus):
                continue
            status_text: str = (
                record.status.color(record.status.value) if color_enabled else record.status.value
            )
            console.print(
                f"{record.label:>8}: {status_text}, "
                f"{record.lines} lines, {record.bytes_written} bytes"
            )
        console.print(f"Wrote {config.output_path}")
