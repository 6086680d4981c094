# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Frontend-neutral primitives shared by the CLI and the machine serializers."""

from __future__ import annotations
