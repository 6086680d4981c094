# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for ShellArgs (logging setup and environment overrides)."""

from __future__ import annotations
