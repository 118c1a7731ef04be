# topmark:header:start
#
#   project      : LineSort
#   file         : __init__.py
#   file_relpath : src/linesort/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for LineSort.

Import the model explicitly (``from linesort.config.model import Config``);
this package module stays import-free so that `linesort.config.logging` can be
loaded by every other module without cycles.
"""
