# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : src/linesort/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort CLI subcommands."""
