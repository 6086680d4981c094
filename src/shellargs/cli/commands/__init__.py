# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs CLI subcommands (`flags`, `resolve`, `args`, `version`)."""

from __future__ import annotations
