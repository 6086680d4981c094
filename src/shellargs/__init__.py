# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs package.

ShellArgs is a registry of engine configuration flags. Every flag can be
supplied as a command-line argument, an application-manifest metadata key, or
a platform intent-extra key; the registry resolves each spelling back to the
same [`shellargs.flags.base.Flag`][] and transparently maps deprecated
spellings to the flag that superseded them.

Most callers only need the resolver facade:

```python
from shellargs.registry import FlagRegistry

flag = FlagRegistry.get_flag_by_metadata_key("io.flutter.embedding.android.EnableImpeller")
```
"""

from __future__ import annotations
