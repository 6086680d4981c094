# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for ShellArgs."""

from __future__ import annotations
