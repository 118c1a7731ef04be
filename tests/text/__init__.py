# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : tests/text/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the text layer (buffer, lines, comparators, sort, output)."""
