# topmark:header:start
#
#   project      : ShellArgs
#   file         : payloads.py
#   file_relpath : src/shellargs/registry/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders for flag-related machine output.

The builders here are:
- Click-free and console-free.
- Deterministic (catalog declaration order) so output is stable for tests and
  downstream tooling.
- Focused on producing payloads only (no envelopes, no serialization).
"""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import TYPE_CHECKING

from shellargs.constants import SHELLARGS, SHELLARGS_VERSION
from shellargs.registry.flags import FlagRegistry

if TYPE_CHECKING:
    from shellargs.flags.base import Flag
    from shellargs.registry.machine.schemas import (
        ArgumentsPayload,
        FlagBriefEntry,
        FlagDetailEntry,
        FlagEntry,
        FlagsPayload,
        MetaPayload,
        ResolutionEntry,
    )


@lru_cache(maxsize=1)
def build_meta_payload() -> MetaPayload:
    """Build a small metadata payload with tool name, version and platform.

    Returns:
        Mapping with keys `"tool"`, `"version"`, and `"platform"`.
    """
    return {
        "tool": SHELLARGS,
        "version": SHELLARGS_VERSION,
        "platform": sys.platform,
    }


def build_flag_details(flag: Flag) -> FlagDetailEntry:
    """Serialize the detailed machine payload for a single flag.

    Args:
        flag: Registered flag.

    Returns:
        A `FlagDetailEntry` dict.
    """
    return {
        "name": flag.name,
        "command_line_argument": flag.command_line_argument,
        "metadata_key": flag.metadata_key,
        "intent_key_aliases": list(flag.intent_key_aliases),
        "takes_value": flag.takes_value,
        "deprecated": flag.is_deprecated,
        "replacement": flag.replacement.name if flag.replacement is not None else None,
        "disabled": FlagRegistry.is_disabled(flag),
        "description": flag.description,
    }


def build_flags_payload(*, show_details: bool) -> FlagsPayload:
    """Build the catalog payload for `shellargs flags`.

    Args:
        show_details: If True, include every spelling and status field.

    Returns:
        List of flag entries in declaration order.
    """
    payload: list[FlagEntry] = []
    for flag in FlagRegistry.all_flags():
        if show_details:
            payload.append(build_flag_details(flag))
        else:
            brief: FlagBriefEntry = {
                "name": flag.name,
                "command_line_argument": flag.command_line_argument,
                "description": flag.description,
            }
            payload.append(brief)
    return payload


def build_resolution_payload(*, key: str, kind: str, flag: Flag | None) -> ResolutionEntry:
    """Build the payload describing the outcome of one lookup.

    Args:
        key: The looked-up spelling.
        kind: Lookup path (``argument``, ``metadata`` or ``intent``).
        flag: The resolved flag, or None on a miss.

    Returns:
        A `ResolutionEntry` dict. ``effective`` names the flag that applies after
        deprecation indirection (None on a miss).
    """
    if flag is None:
        return {"key": key, "kind": kind, "found": False, "flag": None, "effective": None}
    effective: Flag = FlagRegistry.get_replacement_flag_if_deprecated(flag) or flag
    return {
        "key": key,
        "kind": kind,
        "found": True,
        "flag": build_flag_details(flag),
        "effective": effective.name,
    }


def build_arguments_payload(*, source: str, arguments: list[str]) -> ArgumentsPayload:
    """Build the payload for `shellargs args`.

    Args:
        source: Where the metadata came from (the manifest path).
        arguments: Engine arguments in emission order.

    Returns:
        An `ArgumentsPayload` dict.
    """
    return {"source": source, "arguments": list(arguments)}
