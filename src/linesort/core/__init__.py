# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : src/linesort/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by every LineSort layer (exit codes, errors, diagnostics)."""
