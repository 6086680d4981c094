# topmark:header:start
#
#   project      : ShellArgs
#   file         : runtime.py
#   file_relpath : src/shellargs/flags/builtins/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dart VM and engine runtime flags.

Exports:
    FLAGS: heap and cache limits, Dart VM flags, VM service settings, test
        fonts, verbose logging, VM leaking, Flutter GPU and the merged
        platform/UI thread opt-out.

Notes:
    - ``VM_SERVICE_PORT`` keeps the historical ``observatory-port`` intent key
      as a second alias.
    - ``DISABLE_MERGED_PLATFORM_UI_THREAD`` is recognized but disabled by
      policy (see [`shellargs.flags.policy`][shellargs.flags.policy]).
"""

from __future__ import annotations

from shellargs.flags.base import Flag

OLD_GEN_HEAP_SIZE = Flag(
    name="OLD_GEN_HEAP_SIZE",
    command_line_argument="--old-gen-heap-size=",
    metadata_key="io.flutter.embedding.android.OldGenHeapSize",
    intent_key_aliases=("old-gen-heap-size",),
    description="Maximum old generation heap size in MB",
)

RESOURCE_CACHE_MAX_BYTES_THRESHOLD = Flag(
    name="RESOURCE_CACHE_MAX_BYTES_THRESHOLD",
    command_line_argument="--resource-cache-max-bytes-threshold=",
    metadata_key="io.flutter.embedding.android.ResourceCacheMaxBytesThreshold",
    description="Upper bound for the GPU resource cache in bytes",
)

DART_FLAGS = Flag(
    name="DART_FLAGS",
    command_line_argument="--dart-flags=",
    metadata_key="io.flutter.embedding.android.DartFlags",
    intent_key_aliases=("dart-flags",),
    description="Comma separated flags forwarded to the Dart VM",
)

VM_SERVICE_PORT = Flag(
    name="VM_SERVICE_PORT",
    command_line_argument="--vm-service-port=",
    metadata_key="io.flutter.embedding.android.VMServicePort",
    intent_key_aliases=("vm-service-port", "observatory-port"),
    description="Port the Dart VM service listens on",
)

DISABLE_SERVICE_AUTH_CODES = Flag(
    name="DISABLE_SERVICE_AUTH_CODES",
    command_line_argument="--disable-service-auth-codes",
    metadata_key="io.flutter.embedding.android.DisableServiceAuthCodes",
    intent_key_aliases=("disable-service-auth-codes",),
    description="Serve the VM service without authentication codes",
)

START_PAUSED = Flag(
    name="START_PAUSED",
    command_line_argument="--start-paused",
    metadata_key="io.flutter.embedding.android.StartPaused",
    intent_key_aliases=("start-paused",),
    description="Pause the isolate before running the entrypoint",
)

USE_TEST_FONTS = Flag(
    name="USE_TEST_FONTS",
    command_line_argument="--use-test-fonts",
    metadata_key="io.flutter.embedding.android.UseTestFonts",
    intent_key_aliases=("use-test-fonts",),
    description="Use the deterministic Ahem test font",
)

VERBOSE_LOGGING = Flag(
    name="VERBOSE_LOGGING",
    command_line_argument="--verbose-logging",
    metadata_key="io.flutter.embedding.android.VerboseLogging",
    intent_key_aliases=("verbose-logging",),
    description="Enable verbose engine logging",
)

LEAK_VM = Flag(
    name="LEAK_VM",
    command_line_argument="--leak-vm=",
    metadata_key="io.flutter.embedding.android.LeakVM",
    description="Keep the Dart VM alive after the last shell is destroyed",
)

ENABLE_FLUTTER_GPU = Flag(
    name="ENABLE_FLUTTER_GPU",
    command_line_argument="--enable-flutter-gpu",
    metadata_key="io.flutter.embedding.android.EnableFlutterGPU",
    description="Expose the experimental Flutter GPU API",
)

DISABLE_MERGED_PLATFORM_UI_THREAD = Flag(
    name="DISABLE_MERGED_PLATFORM_UI_THREAD",
    command_line_argument="--no-enable-merged-platform-ui-thread",
    metadata_key="io.flutter.embedding.android.DisableMergedPlatformUIThread",
    description="Run the UI task runner on its own thread (no longer supported)",
)

FLAGS: list[Flag] = [
    OLD_GEN_HEAP_SIZE,
    RESOURCE_CACHE_MAX_BYTES_THRESHOLD,
    DART_FLAGS,
    VM_SERVICE_PORT,
    DISABLE_SERVICE_AUTH_CODES,
    START_PAUSED,
    USE_TEST_FONTS,
    VERBOSE_LOGGING,
    LEAK_VM,
    ENABLE_FLUTTER_GPU,
    DISABLE_MERGED_PLATFORM_UI_THREAD,
]
