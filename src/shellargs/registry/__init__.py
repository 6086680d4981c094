# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public flag resolver facade.

This package exposes:

* [`shellargs.registry.FlagRegistry`][] – the **stable, read-only facade** for
  integrators (lookups by argument, metadata key and intent key, deprecation
  and policy checks).
* [`shellargs.registry.FlagMeta`][] – serializable per-flag metadata.

```python
from shellargs.registry import FlagRegistry
flag = FlagRegistry.get_flag_by_command_line_argument("--flutter-assets-dir=")
```
"""

from __future__ import annotations

from .flags import (
    FlagMeta,
    FlagRegistry,
    LookupKind,
    all_flags,
    get_flag_by_command_line_argument,
    get_flag_by_metadata_key,
    get_flag_from_intent_key,
    get_replacement_flag_if_deprecated,
    is_disabled,
)

__all__ = [
    # Stable facade
    "FlagRegistry",
    "FlagMeta",
    "LookupKind",
    # Function-style aliases
    "all_flags",
    "get_flag_by_command_line_argument",
    "get_flag_by_metadata_key",
    "get_flag_from_intent_key",
    "get_replacement_flag_if_deprecated",
    "is_disabled",
]
