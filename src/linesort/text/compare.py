# topmark:header:start
#
#   project      : LineSort
#   file         : compare.py
#   file_relpath : src/linesort/text/compare.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line orderings: forward lexicographic and suffix (reversed) lexicographic.

Both comparators follow the ``cmp`` convention (negative, zero, positive) and
compare unsigned bytes, like C's ``strcmp``:

- `forward_order` walks both lines from their first byte without copying.
- `suffix_order` compares the lines as if each were read end-to-start. It
  allocates, reverses and discards two scratch copies on every call, which
  makes it O(line length) in both time and memory per comparison.

`suffix_key` yields the same order as `suffix_order` when used as a sort key
and lets a sort build each reversed copy once instead of once per comparison.
"""

from __future__ import annotations

from enum import Enum
from functools import wraps
from typing import TYPE_CHECKING, Callable

from linesort.config.logging import get_logger

if TYPE_CHECKING:
    from linesort.config.logging import LinesortLogger
    from linesort.text.lines import Line

logger: LinesortLogger = get_logger(__name__)

Comparator = Callable[["Line", "Line"], int]


class Ordering(str, Enum):
    """The two line orderings written by a run."""

    FORWARD = "forward"
    SUFFIX = "suffix"


def forward_order(a: Line, b: Line) -> int:
    """Compare two lines byte-wise from their first byte.

    Returns:
        int: The difference of the first mismatching bytes, or the difference of
        the lengths when one line is a prefix of the other (zero when equal).
    """
    with a.view() as va, b.view() as vb:
        for x, y in zip(va, vb):
            if x != y:
                return x - y
    return a.length - b.length


def _reversed_copy(line: Line) -> bytearray:
    scratch = bytearray(line.view())
    scratch.reverse()
    return scratch


def suffix_order(a: Line, b: Line) -> int:
    """Compare two lines from their last byte backwards.

    Each call copies both lines into scratch buffers, reverses them in place and
    compares the reversed copies; the scratch buffers are dropped on return.
    """
    ra: bytearray = _reversed_copy(a)
    rb: bytearray = _reversed_copy(b)
    return (ra > rb) - (ra < rb)


def suffix_key(line: Line) -> bytes:
    """Return the line's bytes reversed, for use as a precomputed sort key."""
    return line.tobytes()[::-1]


def traced(comparator: Comparator, trace_logger: LinesortLogger | None = None) -> Comparator:
    """Wrap ``comparator`` so that every call is logged at TRACE level.

    Args:
        comparator (Comparator): The comparator to wrap.
        trace_logger (LinesortLogger | None): Logger to use (defaults to this module's logger).

    Returns:
        Comparator: A comparator with the same results as ``comparator``.
    """
    log: LinesortLogger = trace_logger or logger

    @wraps(comparator)
    def _traced(a: Line, b: Line) -> int:
        result: int = comparator(a, b)
        log.trace("%s(%r, %r) -> %d", comparator.__name__, a, b, result)
        return result

    return _traced


COMPARATORS: dict[Ordering, Comparator] = {
    Ordering.FORWARD: forward_order,
    Ordering.SUFFIX: suffix_order,
}
