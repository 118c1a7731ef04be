# topmark:header:start
#
#   project      : LineSort
#   file         : dump_config.py
#   file_relpath : src/linesort/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort `dump-config` command.

Emits the effective LineSort configuration as TOML after applying defaults,
discovered and explicit config files, and any CLI overrides. The output is
wrapped between `# === BEGIN ===` and `# === END ===` markers for easy parsing
in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linesort.cli.cmd_common import build_config, emit_diagnostics, get_effective_verbosity
from linesort.cli.console import get_console
from linesort.cli.options import common_config_options, parse_delimiter
from linesort.config.logging import get_logger
from linesort.text.sort import SuffixStrategy

if TYPE_CHECKING:
    from linesort.cli.console import ConsoleLike
    from linesort.config.model import Config

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged LineSort configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@click.option("--input", "input_path", default=None, help="Override the input file.")
@click.option("--output", "output_path", default=None, help="Override the output file.")
@click.option(
    "--delimiter",
    default=None,
    callback=parse_delimiter,
    help="Override the line delimiter.",
)
@click.option(
    "--suffix-strategy",
    type=click.Choice([s.value for s in SuffixStrategy]),
    default=None,
    help="Override the suffix sort strategy.",
)
@common_config_options
def dump_config_command(
    *,
    input_path: str | None,
    output_path: str | None,
    delimiter: str | None,
    suffix_strategy: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Config diagnostics (ignored values, unreadable files) are printed to
    stderr before the document. With ``-v`` the merged sources are listed as
    TOML comments.
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
    )
    vlevel: int = get_effective_verbosity(ctx, config)
    emit_diagnostics(console, config.diagnostics, verbosity=vlevel)

    console.print("# === BEGIN ===")
    if vlevel > 0:
        for source in config.config_files:
            console.print(f"# source: {source}")
    console.print(config.to_toml().rstrip("\n"))
    console.print("# === END ===")
