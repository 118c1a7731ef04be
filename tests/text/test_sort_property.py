# topmark:header:start
#
#   project      : LineSort
#   file         : test_sort_property.py
#   file_relpath : tests/text/test_sort_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property tests for splitting and both orderings.

Bytes comparison in Python is unsigned lexicographic with a proper prefix
sorting first, which makes ``sorted()`` a convenient oracle.
"""

from __future__ import annotations

from collections import Counter

import pytest
from hypothesis import HealthCheck, given, settings

from linesort.text.buffer import TextBuffer
from linesort.text.compare import Ordering
from linesort.text.lines import LineCollection, split
from linesort.text.sort import SuffixStrategy, sort_lines
from tests.strategies_linesort import s_lines


def _lines(raw: list[bytes]) -> LineCollection:
    return split(TextBuffer.from_bytes(b"\n".join(raw)))


@given(raw=s_lines)
def test_split_recovers_joined_lines(raw: list[bytes]) -> None:
    assert _lines(raw).tobytes_list() == raw


@given(raw=s_lines)
def test_forward_sort_matches_sorted(raw: list[bytes]) -> None:
    lines: LineCollection = _lines(raw)

    sort_lines(lines, Ordering.FORWARD)

    assert lines.tobytes_list() == sorted(raw)


@given(raw=s_lines)
def test_suffix_strategies_agree(raw: list[bytes]) -> None:
    """Precomputed keys and per-comparison reversal give the same order."""
    pre: LineCollection = _lines(raw)
    per: LineCollection = _lines(raw)

    sort_lines(pre, Ordering.SUFFIX, strategy=SuffixStrategy.PRECOMPUTE)
    sort_lines(per, Ordering.SUFFIX, strategy=SuffixStrategy.PER_COMPARISON)

    assert pre.tobytes_list() == per.tobytes_list()
    assert pre.tobytes_list() == sorted(raw, key=lambda b: b[::-1])


@pytest.mark.hypothesis_slow
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=500)
@given(raw=s_lines)
def test_sorting_is_a_permutation(raw: list[bytes]) -> None:
    lines: LineCollection = _lines(raw)

    for ordering in (Ordering.FORWARD, Ordering.SUFFIX):
        sort_lines(lines, ordering, strategy=SuffixStrategy.PER_COMPARISON)
        assert Counter(lines.tobytes_list()) == Counter(raw)
        assert len(lines) == len(raw)
