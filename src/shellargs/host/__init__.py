# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/host/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Host-environment collaborators: manifest metadata access outside the flag catalog."""

from __future__ import annotations

from .manifest import ManifestFile, load_manifest_metadata
from .metadata import (
    HostContext,
    PackageInfoError,
    is_content_sizing_enabled,
    read_boolean_metadata,
)

__all__ = [
    "HostContext",
    "ManifestFile",
    "PackageInfoError",
    "is_content_sizing_enabled",
    "load_manifest_metadata",
    "read_boolean_metadata",
]
