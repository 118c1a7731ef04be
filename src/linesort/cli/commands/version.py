# topmark:header:start
#
#   project      : LineSort
#   file         : version.py
#   file_relpath : src/linesort/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort `version` command.

Prints the current LineSort version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from linesort.cli.cmd_common import get_effective_verbosity
from linesort.cli.console import get_console
from linesort.constants import LINESORT_VERSION

if TYPE_CHECKING:
    from linesort.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LineSort.",
)
def version_command() -> None:
    """Show the current version of LineSort.

    With ``-v`` a heading is printed above the version string.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    vlevel = get_effective_verbosity(ctx)

    if vlevel > 0:
        console.print(console.styled("LineSort version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(LINESORT_VERSION, bold=True)}")
    else:
        console.print(console.styled(LINESORT_VERSION, bold=True))
