# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_manifest_file.py
#   file_relpath : tests/host/test_manifest_file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML manifest host: loading, validation and use as a host context."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from shellargs.host import (
    ManifestFile,
    PackageInfoError,
    is_content_sizing_enabled,
    load_manifest_metadata,
)
from tests.conftest import write_manifest

if TYPE_CHECKING:
    from pathlib import Path

MANIFEST = """\
[application]
package = "com.example.app"

[application.metadata]
"io.flutter.embedding.android.EnableImpeller" = true
"io.flutter.embedding.android.OldGenHeapSize" = 512
"io.flutter.embedding.android.EnableContentSizing" = true
"""


def test_load_metadata(tmp_path: Path) -> None:
    """Metadata values come back as plain Python values."""
    metadata = load_manifest_metadata(write_manifest(tmp_path, MANIFEST))
    assert metadata == {
        "io.flutter.embedding.android.EnableImpeller": True,
        "io.flutter.embedding.android.OldGenHeapSize": 512,
        "io.flutter.embedding.android.EnableContentSizing": True,
    }


def test_manifest_without_metadata_table(tmp_path: Path) -> None:
    """An application without metadata yields an empty mapping."""
    path: Path = write_manifest(tmp_path, '[application]\npackage = "com.example.app"\n')
    assert load_manifest_metadata(path) == {}


def test_manifest_file_is_a_host_context(tmp_path: Path) -> None:
    """`ManifestFile` feeds the boolean accessor directly."""
    host = ManifestFile(write_manifest(tmp_path, MANIFEST))
    assert host.get_application_context() is host
    assert host.package_name == "com.example.app"
    assert is_content_sizing_enabled(host) is True


@pytest.mark.parametrize(
    ("body", "match"),
    [
        ("[application\n", "Invalid manifest"),
        ('package = "com.example.app"\n', r"no \[application\] table"),
        ('[application]\nmetadata = "nope"\n', "must be a table"),
    ],
)
def test_malformed_manifests(tmp_path: Path, body: str, match: str) -> None:
    """Malformed manifests raise `PackageInfoError` with a reason."""
    with pytest.raises(PackageInfoError, match=match):
        load_manifest_metadata(write_manifest(tmp_path, body))


def test_missing_manifest(tmp_path: Path) -> None:
    """A missing file is reported, and the accessor degrades to its default."""
    host = ManifestFile(tmp_path / "absent.toml")
    with pytest.raises(PackageInfoError, match="Cannot read manifest"):
        host.get_application_metadata()
    assert host.package_name is None
    assert is_content_sizing_enabled(host) is False


def test_non_utf8_manifest(tmp_path: Path) -> None:
    """Undecodable bytes are an invalid manifest, not a crash."""
    path: Path = tmp_path / "manifest.toml"
    path.write_bytes(b'[application]\npackage = "\xff\xfe"\n')
    with pytest.raises(PackageInfoError, match="Invalid manifest"):
        load_manifest_metadata(path)
    assert is_content_sizing_enabled(ManifestFile(path)) is False
