# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/flags/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in flag declarations, grouped by topic.

Each module declares its flags as module-level [`Flag`][shellargs.flags.base.Flag]
constants and registers every one of them, in declaration order, in a
module-level ``FLAGS`` list. The catalog builder in
[`shellargs.flags.instances`][shellargs.flags.instances] refuses to start if a
declared constant is missing from ``FLAGS`` (or vice versa).

A deprecated flag must be declared in the same module as its replacement.
"""

from __future__ import annotations
