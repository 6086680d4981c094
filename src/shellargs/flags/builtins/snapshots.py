# topmark:header:start
#
#   project      : ShellArgs
#   file         : snapshots.py
#   file_relpath : src/shellargs/flags/builtins/snapshots.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Snapshot and asset location flags.

Exports:
    FLAGS: AOT shared library name, Flutter assets directory, snapshot asset
        path, VM and isolate snapshot data, plus the two loader-era spellings
        that were superseded by the ``io.flutter.embedding.android`` keys.

Notes:
    - The deprecated loader keys predate the common metadata namespace and are
      exempt from the prefix convention.
"""

from __future__ import annotations

from shellargs.flags.base import Flag

AOT_SHARED_LIBRARY_NAME = Flag(
    name="AOT_SHARED_LIBRARY_NAME",
    command_line_argument="--aot-shared-library-name=",
    metadata_key="io.flutter.embedding.android.AOTSharedLibraryName",
    intent_key_aliases=("aot-shared-library-name",),
    description="File name of the AOT compiled application library",
)

DEPRECATED_AOT_SHARED_LIBRARY_NAME = Flag(
    name="DEPRECATED_AOT_SHARED_LIBRARY_NAME",
    command_line_argument="--loader-aot-shared-library-name=",
    metadata_key="io.flutter.embedding.engine.loader.FlutterLoader.aot-shared-library-name",
    replacement=AOT_SHARED_LIBRARY_NAME,
    description="Loader-era spelling of AOT_SHARED_LIBRARY_NAME",
)

FLUTTER_ASSETS_DIR = Flag(
    name="FLUTTER_ASSETS_DIR",
    command_line_argument="--flutter-assets-dir=",
    metadata_key="io.flutter.embedding.android.FlutterAssetsDir",
    intent_key_aliases=("flutter-assets-dir",),
    description="Directory holding the bundled Flutter assets",
)

DEPRECATED_FLUTTER_ASSETS_DIR = Flag(
    name="DEPRECATED_FLUTTER_ASSETS_DIR",
    command_line_argument="--loader-flutter-assets-dir=",
    metadata_key="io.flutter.embedding.engine.loader.FlutterLoader.flutter-assets-dir",
    replacement=FLUTTER_ASSETS_DIR,
    description="Loader-era spelling of FLUTTER_ASSETS_DIR",
)

SNAPSHOT_ASSET_PATH = Flag(
    name="SNAPSHOT_ASSET_PATH",
    command_line_argument="--snapshot-asset-path=",
    metadata_key="io.flutter.embedding.android.SnapshotAssetPath",
    intent_key_aliases=("snapshot-asset-path",),
    description="Directory containing the snapshot blobs",
)

VM_SNAPSHOT_DATA = Flag(
    name="VM_SNAPSHOT_DATA",
    command_line_argument="--vm-snapshot-data=",
    metadata_key="io.flutter.embedding.android.VMSnapshotData",
    intent_key_aliases=("vm-snapshot-data",),
    description="File name of the VM snapshot data",
)

ISOLATE_SNAPSHOT_DATA = Flag(
    name="ISOLATE_SNAPSHOT_DATA",
    command_line_argument="--isolate-snapshot-data=",
    metadata_key="io.flutter.embedding.android.IsolateSnapshotData",
    intent_key_aliases=("isolate-snapshot-data",),
    description="File name of the isolate snapshot data",
)

FLAGS: list[Flag] = [
    AOT_SHARED_LIBRARY_NAME,
    DEPRECATED_AOT_SHARED_LIBRARY_NAME,
    FLUTTER_ASSETS_DIR,
    DEPRECATED_FLUTTER_ASSETS_DIR,
    SNAPSHOT_ASSET_PATH,
    VM_SNAPSHOT_DATA,
    ISOLATE_SNAPSHOT_DATA,
]
