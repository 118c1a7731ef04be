# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : src/linesort/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort package.

LineSort reads a text file into memory, splits it into lines and writes the
lines three times to one output file: in their original order, sorted
lexicographically, and sorted by their reversed text (rhyme order).
"""

from __future__ import annotations
