# topmark:header:start
#
#   project      : ShellArgs
#   file         : schemas.py
#   file_relpath : src/shellargs/registry/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-output schema types for flag-related commands.

These are schema-only types describing the JSON/NDJSON payload shapes emitted
by `shellargs flags`, `shellargs resolve` and `shellargs args`. They do not
perform serialization or printing.

Serialization conventions:
- JSON mode wraps a payload in a top-level envelope with `meta` plus a stable key.
- NDJSON mode emits one record per entity: `{"kind": ..., "meta": ..., <kind>: ...}`.
"""

from __future__ import annotations

from enum import Enum
from typing import TypedDict


class MachineKind(str, Enum):
    """Record kinds used in NDJSON output."""

    FLAG = "flag"
    RESOLUTION = "resolution"
    ARGUMENTS = "arguments"
    VERSION = "version"


class MetaPayload(TypedDict):
    """Metadata attached to every machine-readable document."""

    tool: str
    version: str
    platform: str


class FlagBriefEntry(TypedDict):
    """Brief flag entry used when `--long` is not requested."""

    name: str
    command_line_argument: str
    description: str


class FlagDetailEntry(TypedDict):
    """Detailed flag entry used when `--long` is requested."""

    name: str
    command_line_argument: str
    metadata_key: str
    intent_key_aliases: list[str]
    takes_value: bool
    deprecated: bool
    replacement: str | None
    disabled: bool
    description: str


FlagEntry = FlagBriefEntry | FlagDetailEntry
FlagsPayload = list[FlagEntry]


class ResolutionEntry(TypedDict):
    """Result of resolving one key through one lookup path."""

    key: str
    kind: str
    found: bool
    flag: FlagDetailEntry | None
    effective: str | None


class ArgumentsPayload(TypedDict):
    """Engine arguments built from a manifest (and optional intent extras)."""

    source: str
    arguments: list[str]
