# topmark:header:start
#
#   project      : LineSort
#   file         : constants.py
#   file_relpath : src/linesort/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LineSort Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

LINESORT_VERSION: str = get_version("linesort")

# Historical file names used when neither the CLI nor a config file names them.
DEFAULT_INPUT_FILE: str = "Onegin2.txt"
DEFAULT_OUTPUT_FILE: str = "NewOnegin.txt"
