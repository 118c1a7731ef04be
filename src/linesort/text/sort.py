# topmark:header:start
#
#   project      : LineSort
#   file         : sort.py
#   file_relpath : src/linesort/text/sort.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-place sorting of a `LineCollection`.

Sorting permutes the line views only; the bytes in the text buffer are never
touched. Stability is not part of the contract (Python's sort happens to be
stable, which is harmless).
"""

from __future__ import annotations

from enum import Enum
from functools import cmp_to_key
from typing import TYPE_CHECKING

from linesort.config.logging import get_logger
from linesort.core.errors import StringArrayError
from linesort.text.compare import COMPARATORS, Ordering, suffix_key, traced

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.text.compare import Comparator
    from linesort.text.lines import LineCollection

logger: LinesortLogger = get_logger(__name__)


class SuffixStrategy(str, Enum):
    """How the suffix ordering is evaluated during a sort.

    PRECOMPUTE: build each line's reversed copy once, then sort by those keys.
    PER_COMPARISON: reverse both lines on every comparison (`suffix_order`).

    Both strategies produce the same order.
    """

    PRECOMPUTE = "precompute"
    PER_COMPARISON = "per-comparison"


def sort_in_place(lines: LineCollection | None, comparator: Comparator) -> None:
    """Reorder ``lines`` in place according to ``comparator``.

    Args:
        lines (LineCollection | None): The collection to reorder.
        comparator (Comparator): A ``cmp``-style ordering function.

    Raises:
        StringArrayError: If ``lines`` is absent.
    """
    if lines is None:
        raise StringArrayError("No line collection to sort")
    if len(lines) < 2:
        return
    lines.sort(key=cmp_to_key(comparator))


def sort_lines(
    lines: LineCollection | None,
    ordering: Ordering,
    *,
    strategy: SuffixStrategy = SuffixStrategy.PRECOMPUTE,
    trace: bool = False,
) -> None:
    """Sort ``lines`` in place by ``ordering``.

    Args:
        lines (LineCollection | None): The collection to reorder.
        ordering (Ordering): Forward or suffix ordering.
        strategy (SuffixStrategy): Evaluation strategy for the suffix ordering.
        trace (bool): Log every comparison at TRACE level (forces comparator-based sorting).

    Raises:
        StringArrayError: If ``lines`` is absent.
    """
    if lines is None:
        raise StringArrayError("No line collection to sort")
    logger.debug(
        "Sorting %d lines by %s order (strategy=%s, trace=%s)",
        len(lines),
        ordering.value,
        strategy.value,
        trace,
    )
    if ordering == Ordering.SUFFIX and strategy == SuffixStrategy.PRECOMPUTE and not trace:
        if len(lines) > 1:
            lines.sort(key=suffix_key)
        return

    comparator: Comparator = COMPARATORS[ordering]
    if trace:
        comparator = traced(comparator)
    sort_in_place(lines, comparator)
