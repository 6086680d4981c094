# topmark:header:start
#
#   project      : ShellArgs
#   file         : manifest.py
#   file_relpath : src/shellargs/host/manifest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML-backed application manifest.

A manifest file stands in for the host application's manifest when running
outside a device, e.g. from the CLI:

```toml
[application]
package = "com.example.app"

[application.metadata]
"io.flutter.embedding.android.EnableImpeller" = true
"io.flutter.embedding.android.OldGenHeapSize" = 512
```

Parsing is done with `tomlkit` and returned as plain Python values.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from shellargs.config.logging import get_logger
from shellargs.constants import (
    MANIFEST_APPLICATION_TABLE,
    MANIFEST_METADATA_TABLE,
    MANIFEST_PACKAGE_KEY,
)
from shellargs.host.metadata import PackageInfoError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from shellargs.config.logging import ShellargsLogger

logger: ShellargsLogger = get_logger(__name__)


def load_manifest_dict(path: Path) -> dict[str, Any]:
    """Load and parse a manifest TOML file.

    Args:
        path (Path): Path to the manifest document.

    Returns:
        dict[str, Any]: The parsed TOML content as plain Python values.

    Raises:
        PackageInfoError: If the file cannot be read, is not UTF-8 text, or is
            not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading manifest from %s: %s", path, e)
        raise PackageInfoError(f"Cannot read manifest {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding manifest from %s: %s", path, e)
        raise PackageInfoError(f"Invalid manifest {path}: {e}") from e
    except (TypeError, ValueError) as e:
        logger.error("Error decoding manifest from %s: %s", path, e)
        raise PackageInfoError(f"Invalid manifest {path}: {e}") from e

    data_any: Any = doc.unwrap()
    return cast("dict[str, Any]", data_any) if isinstance(data_any, dict) else {}


def _application_table(data: Mapping[str, Any], path: Path) -> dict[str, Any]:
    table: Any = data.get(MANIFEST_APPLICATION_TABLE)
    if not isinstance(table, dict):
        raise PackageInfoError(f"Manifest {path} has no [{MANIFEST_APPLICATION_TABLE}] table")
    return cast("dict[str, Any]", table)


def load_manifest_metadata(path: Path) -> dict[str, object]:
    """Return the ``[application.metadata]`` table of a manifest file.

    A manifest without a metadata table yields an empty mapping.

    Raises:
        PackageInfoError: If the file is unreadable, malformed, or lacks an
            ``[application]`` table.
    """
    app: dict[str, Any] = _application_table(load_manifest_dict(path), path)
    metadata: Any = app.get(MANIFEST_METADATA_TABLE, {})
    if not isinstance(metadata, dict):
        raise PackageInfoError(
            f"Manifest {path}: [{MANIFEST_APPLICATION_TABLE}.{MANIFEST_METADATA_TABLE}] "
            "must be a table"
        )
    return cast("dict[str, object]", metadata)


class ManifestFile:
    """Host context backed by a manifest file on disk.

    The file is read on every metadata request, so edits are picked up without
    re-creating the object.

    Attributes:
        path (Path): Location of the manifest file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def get_application_context(self) -> ManifestFile:
        """Return ``self``; a manifest file is its own application context."""
        return self

    @property
    def package_name(self) -> str | None:
        """Return the declared package name, or None if absent or unreadable."""
        try:
            app: dict[str, Any] = _application_table(load_manifest_dict(self.path), self.path)
        except PackageInfoError:
            return None
        name: Any = app.get(MANIFEST_PACKAGE_KEY)
        return name if isinstance(name, str) else None

    def get_application_metadata(self) -> Mapping[str, object] | None:
        """Return the manifest's metadata table.

        Raises:
            PackageInfoError: If the manifest cannot be read or parsed.
        """
        return load_manifest_metadata(self.path)

    def __repr__(self) -> str:
        return f"ManifestFile({str(self.path)!r})"
