# topmark:header:start
#
#   project      : LineSort
#   file         : __main__.py
#   file_relpath : src/linesort/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LineSort via ``python -m linesort``.

It delegates directly to :func:`linesort.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how LineSort is launched.

Examples:
    Sort a file::

        python -m linesort run poem.txt sorted.txt
"""

from __future__ import annotations

from linesort.cli.main import cli

if __name__ == "__main__":
    cli()
