# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/registry/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-output support for flag-related ShellArgs commands.

Layering:

1) **Schema types** (`schemas.py`): TypedDict payload shapes.
2) **Payload builders** (`payloads.py`): deterministic, JSON-serializable payloads.
3) **Serializers** (`serializers.py`): envelopes/records and JSON/NDJSON strings.

This package does not depend on Click and does not print to the console.
"""

from __future__ import annotations

from shellargs.registry.machine.serializers import serialize_collection, serialize_single

__all__ = [
    "serialize_collection",
    "serialize_single",
]
