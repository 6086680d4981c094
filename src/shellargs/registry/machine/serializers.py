# topmark:header:start
#
#   project      : ShellArgs
#   file         : serializers.py
#   file_relpath : src/shellargs/registry/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure serializers for flag-related machine output.

Layers:
- [`payloads`][shellargs.registry.machine.payloads] builds JSON-serializable payloads.
- This module wraps payloads into envelopes / NDJSON records and serializes them:
    - JSON: one pretty-printed JSON string (no trailing newline).
    - NDJSON: an iterator of per-line JSON strings (no trailing newline per item).

Consumers (CLI commands) are responsible for emitting these strings to the
active console.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from shellargs.core.formats import OutputFormat
from shellargs.registry.machine.schemas import MachineKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping, Sequence

    from shellargs.registry.machine.schemas import MetaPayload


def build_json_envelope(*, meta: MetaPayload, **payloads: object) -> dict[str, object]:
    """Build a JSON envelope ``{"meta": ..., <key>: <payload>, ...}``."""
    envelope: dict[str, object] = {"meta": meta}
    envelope.update(payloads)
    return envelope


def build_ndjson_record(
    *, kind: MachineKind, meta: MetaPayload, payload: object
) -> dict[str, object]:
    """Build one NDJSON record ``{"kind": ..., "meta": ..., <kind>: <payload>}``."""
    return {"kind": kind.value, "meta": meta, kind.value: payload}


def serialize_json_object(obj: object) -> str:
    """Serialize an object to pretty-printed JSON (no trailing newline)."""
    return json.dumps(obj, indent=2)


def iter_ndjson_strings(records: Iterable[Mapping[str, object]]) -> Iterator[str]:
    """Serialize shaped NDJSON records into per-line JSON strings."""
    for record in records:
        yield json.dumps(record, separators=(",", ":"))


def serialize_collection(
    *,
    fmt: OutputFormat,
    meta: MetaPayload,
    kind: MachineKind,
    container_key: str,
    items: Sequence[object],
) -> str | Iterator[str]:
    """Serialize a list payload as a JSON envelope or as one NDJSON record per item.

    Args:
        fmt: Target output format (JSON or NDJSON).
        meta: Machine metadata payload.
        kind: NDJSON record kind for each item.
        container_key: Envelope key holding the list in JSON mode.
        items: JSON-serializable entries.

    Returns:
        - JSON: pretty-printed JSON string (no trailing newline)
        - NDJSON: iterator of JSON strings (one per record)

    Raises:
        ValueError: If `fmt` is not JSON or NDJSON.
    """
    if fmt == OutputFormat.JSON:
        envelope: dict[str, object] = build_json_envelope(meta=meta, **{container_key: list(items)})
        return serialize_json_object(envelope)
    if fmt == OutputFormat.NDJSON:
        return iter_ndjson_strings(
            build_ndjson_record(kind=kind, meta=meta, payload=item) for item in items
        )
    raise ValueError(f"Unsupported machine output format: {fmt!r}")


def serialize_single(
    *,
    fmt: OutputFormat,
    meta: MetaPayload,
    kind: MachineKind,
    payload: object,
) -> str:
    """Serialize a single payload as a JSON envelope or one NDJSON line.

    Args:
        fmt: Target output format (JSON or NDJSON).
        meta: Machine metadata payload.
        kind: Envelope key (JSON) or record kind (NDJSON).
        payload: JSON-serializable payload.

    Returns:
        The serialized document (no trailing newline).

    Raises:
        ValueError: If `fmt` is not JSON or NDJSON.
    """
    if fmt == OutputFormat.JSON:
        return serialize_json_object(build_json_envelope(meta=meta, **{kind.value: payload}))
    if fmt == OutputFormat.NDJSON:
        return next(
            iter_ndjson_strings([build_ndjson_record(kind=kind, meta=meta, payload=payload)])
        )
    raise ValueError(f"Unsupported machine output format: {fmt!r}")
