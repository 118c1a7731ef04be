# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : src/linesort/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text layer: load a file, split it into line views, order and write them.

This package is CLI-free and pipeline-free; the pipeline steps in
`linesort.pipeline.steps` wrap these functions and translate their
exceptions into statuses and diagnostics.
"""

from __future__ import annotations

from linesort.text.buffer import TERMINATOR, TextBuffer, load
from linesort.text.compare import Ordering, forward_order, suffix_key, suffix_order
from linesort.text.lines import DEFAULT_DELIMITER, Line, LineCollection, split
from linesort.text.output import LINE_END, WriteResult, write
from linesort.text.sort import SuffixStrategy, sort_in_place, sort_lines

__all__: list[str] = [
    "DEFAULT_DELIMITER",
    "LINE_END",
    "TERMINATOR",
    "Line",
    "LineCollection",
    "Ordering",
    "SuffixStrategy",
    "TextBuffer",
    "WriteResult",
    "forward_order",
    "load",
    "sort_in_place",
    "sort_lines",
    "split",
    "suffix_key",
    "suffix_order",
    "write",
]
