# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_cli_resolve.py
#   file_relpath : tests/cli/test_cli_resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `resolve` command, kind inference and exit codes."""

from __future__ import annotations

from typing import Any

from shellargs.cli.commands.resolve import infer_lookup_kind
from shellargs.registry import LookupKind
from tests.cli.conftest import (
    assert_NOT_FOUND,
    assert_SUCCESS,
    parse_json_output,
    parse_ndjson_output,
    run_cli,
)
from tests.conftest import mark_cli, parametrize


@parametrize(
    ("key", "kind"),
    [
        ("--old-gen-heap-size=", LookupKind.ARGUMENT),
        ("io.flutter.embedding.android.OldGenHeapSize", LookupKind.METADATA),
        ("old-gen-heap-size", LookupKind.INTENT),
    ],
)
def test_infer_lookup_kind(key: str, kind: LookupKind) -> None:
    """The kind follows the shape of the key."""
    assert infer_lookup_kind(key) is kind


@mark_cli
def test_resolve_metadata_key() -> None:
    """A metadata key resolves to its flag."""
    result = run_cli(["--no-color", "resolve", "io.flutter.embedding.android.OldGenHeapSize"])
    assert_SUCCESS(result)
    assert result.stdout.splitlines()[0] == "OLD_GEN_HEAP_SIZE"
    assert "argument     : --old-gen-heap-size=" in result.stdout


@mark_cli
def test_resolve_argument_with_option_like_key() -> None:
    """Keys starting with ``--`` are passed after ``--``."""
    result = run_cli(["--no-color", "resolve", "--", "--flutter-assets-dir="])
    assert_SUCCESS(result)
    assert result.stdout.startswith("FLUTTER_ASSETS_DIR")


@mark_cli
def test_resolve_deprecated_reports_replacement() -> None:
    """A deprecated key reports its replacement on stderr."""
    key = "io.flutter.embedding.engine.loader.FlutterLoader.aot-shared-library-name"
    result = run_cli(["--no-color", "resolve", key])
    assert_SUCCESS(result)
    assert "DEPRECATED_AOT_SHARED_LIBRARY_NAME" in result.stdout
    assert "use AOT_SHARED_LIBRARY_NAME" in result.stderr


@mark_cli
def test_resolve_disabled_flag() -> None:
    """A disabled flag is found and flagged as disabled."""
    key = "io.flutter.embedding.android.DisableMergedPlatformUIThread"
    result = run_cli(["--no-color", "resolve", "--kind", "metadata", key])
    assert_SUCCESS(result)
    assert "is ignored by policy" in result.stderr


@mark_cli
def test_resolve_explicit_kind_overrides_inference() -> None:
    """An intent alias looked up as metadata misses."""
    result = run_cli(["resolve", "--kind", "metadata", "old-gen-heap-size"])
    assert_NOT_FOUND(result)


@mark_cli
@parametrize(
    "key",
    [
        "io.flutter.embedding.android.InvalidMetaDataKey",
        "non-existent-flag",
    ],
)
def test_resolve_unknown_key_exits_not_found(key: str) -> None:
    """Unknown keys exit with status 1 and a message on stderr."""
    result = run_cli(["--no-color", "resolve", key])
    assert_NOT_FOUND(result)
    assert "No flag matches" in result.stderr
    assert result.stdout == ""


@mark_cli
def test_resolve_json_hit() -> None:
    """JSON output carries the resolution and the effective flag."""
    result = run_cli(["resolve", "--format", "json", "--", "--loader-flutter-assets-dir="])
    assert_SUCCESS(result)
    doc: dict[str, Any] = parse_json_output(result)
    resolution: dict[str, Any] = doc["resolution"]
    assert resolution["kind"] == "argument"
    assert resolution["found"] is True
    assert resolution["flag"]["deprecated"] is True
    assert resolution["effective"] == "FLUTTER_ASSETS_DIR"


@mark_cli
def test_resolve_ndjson_miss() -> None:
    """Machine output is still emitted on a miss, with exit status 1."""
    result = run_cli(["resolve", "--format", "ndjson", "non-existent-flag"])
    assert_NOT_FOUND(result)
    records = parse_ndjson_output(result)
    assert len(records) == 1
    assert records[0]["kind"] == "resolution"
    assert records[0]["resolution"]["found"] is False
