# topmark:header:start
#
#   project      : LineSort
#   file         : test_compare.py
#   file_relpath : tests/text/test_compare.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `linesort.text.compare` (forward and suffix orderings)."""

from __future__ import annotations

import logging

import pytest

from linesort.config.logging import TRACE_LEVEL
from linesort.text.buffer import TextBuffer
from linesort.text.compare import forward_order, suffix_key, suffix_order, traced
from linesort.text.lines import Line, LineCollection, split
from tests.conftest import parametrize


def _line(content: bytes) -> Line:
    lines: LineCollection = split(TextBuffer.from_bytes(content))
    return lines[0]


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


@parametrize(
    "a, b, expected",
    [
        (b"apple", b"banana", -1),
        (b"banana", b"apple", 1),
        (b"same", b"same", 0),
        (b"", b"", 0),
        (b"", b"a", -1),
        (b"ab", b"a", 1),  # prefix sorts first
        (b"\xff", b"a", 1),  # bytes compare unsigned
        (b"Zebra", b"apple", -1),  # byte order, not locale
    ],
)
def test_forward_order_sign(a: bytes, b: bytes, expected: int) -> None:
    assert _sign(forward_order(_line(a), _line(b))) == expected


def test_forward_order_returns_byte_difference() -> None:
    assert forward_order(_line(b"a"), _line(b"c")) == ord("a") - ord("c")
    assert forward_order(_line(b"abc"), _line(b"a")) == 2


@parametrize(
    "a, b, expected",
    [
        (b"banana", b"apple", -1),  # "ananab" < "elppa"
        (b"cherry", b"apple", 1),  # "yrrehc" > "elppa"
        (b"ba", b"ca", -1),  # "ab" < "ac"
        (b"sing", b"ring", 1),  # "gnis" > "gnir"
        (b"a", b"ba", -1),  # "a" is a prefix of "ab"
        (b"", b"x", -1),
        (b"rhyme", b"rhyme", 0),
    ],
)
def test_suffix_order_sign(a: bytes, b: bytes, expected: int) -> None:
    assert suffix_order(_line(a), _line(b)) == expected


def test_suffix_order_does_not_modify_lines() -> None:
    """Reversal happens on scratch copies only."""
    a, b = _line(b"abc"), _line(b"xyz")

    suffix_order(a, b)

    assert a.tobytes() == b"abc"
    assert b.tobytes() == b"xyz"


def test_suffix_key_is_reversed_bytes() -> None:
    assert suffix_key(_line(b"abc")) == b"cba"


def test_traced_logs_each_comparison(caplog: pytest.LogCaptureFixture) -> None:
    """The traced wrapper keeps results and logs at TRACE level."""
    cmp = traced(forward_order)

    with caplog.at_level(TRACE_LEVEL):
        result: int = cmp(_line(b"a"), _line(b"b"))

    assert result == forward_order(_line(b"a"), _line(b"b"))
    records: list[logging.LogRecord] = [r for r in caplog.records if r.levelno == TRACE_LEVEL]
    assert any("forward_order" in r.getMessage() for r in records)
