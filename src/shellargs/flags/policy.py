# topmark:header:start
#
#   project      : ShellArgs
#   file         : policy.py
#   file_relpath : src/shellargs/flags/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flags that are recognized but switched off by policy.

A disabled flag still resolves through every lookup path (so callers can
report it by name), but it must not be applied to the engine.
"""

from __future__ import annotations

from typing import Final

from shellargs.flags.base import Flag
from shellargs.flags.builtins.runtime import DISABLE_MERGED_PLATFORM_UI_THREAD

DISABLED_FLAGS: Final[frozenset[Flag]] = frozenset(
    {
        DISABLE_MERGED_PLATFORM_UI_THREAD,
    }
)
