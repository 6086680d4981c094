# topmark:header:start
#
#   project      : ShellArgs
#   file         : tracing.py
#   file_relpath : src/shellargs/flags/builtins/tracing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tracing and profiling flags.

Exports:
    FLAGS: startup tracing, trace buffering and destinations, Skia tracing,
        and Dart profiling switches.
"""

from __future__ import annotations

from shellargs.flags.base import Flag

TRACE_STARTUP = Flag(
    name="TRACE_STARTUP",
    command_line_argument="--trace-startup",
    metadata_key="io.flutter.embedding.android.TraceStartup",
    intent_key_aliases=("trace-startup",),
    description="Trace engine startup and write the timeline on exit",
)

ENDLESS_TRACE_BUFFER = Flag(
    name="ENDLESS_TRACE_BUFFER",
    command_line_argument="--endless-trace-buffer",
    metadata_key="io.flutter.embedding.android.EndlessTraceBuffer",
    intent_key_aliases=("endless-trace-buffer",),
    description="Keep every trace event instead of a ring buffer",
)

TRACE_SKIA = Flag(
    name="TRACE_SKIA",
    command_line_argument="--trace-skia",
    metadata_key="io.flutter.embedding.android.TraceSkia",
    intent_key_aliases=("trace-skia",),
    description="Include Skia trace events in the timeline",
)

TRACE_SKIA_ALLOWLIST = Flag(
    name="TRACE_SKIA_ALLOWLIST",
    command_line_argument="--trace-skia-allowlist=",
    metadata_key="io.flutter.embedding.android.TraceSkiaAllowList",
    intent_key_aliases=("trace-skia-allowlist",),
    description="Comma separated Skia trace categories to keep",
)

TRACE_SYSTRACE = Flag(
    name="TRACE_SYSTRACE",
    command_line_argument="--trace-systrace",
    metadata_key="io.flutter.embedding.android.TraceSystrace",
    intent_key_aliases=("trace-systrace",),
    description="Forward trace events to the platform systrace",
)

TRACE_TO_FILE = Flag(
    name="TRACE_TO_FILE",
    command_line_argument="--trace-to-file=",
    metadata_key="io.flutter.embedding.android.TraceToFile",
    intent_key_aliases=("trace-to-file",),
    description="Write trace events to the given file",
)

PROFILE_STARTUP = Flag(
    name="PROFILE_STARTUP",
    command_line_argument="--profile-startup",
    metadata_key="io.flutter.embedding.android.ProfileStartup",
    intent_key_aliases=("profile-startup",),
    description="Collect CPU samples during startup",
)

PROFILE_MICROTASKS = Flag(
    name="PROFILE_MICROTASKS",
    command_line_argument="--profile-microtasks",
    metadata_key="io.flutter.embedding.android.ProfileMicrotasks",
    intent_key_aliases=("profile-microtasks",),
    description="Record microtask execution in the timeline",
)

ENABLE_DART_PROFILING = Flag(
    name="ENABLE_DART_PROFILING",
    command_line_argument="--enable-dart-profiling",
    metadata_key="io.flutter.embedding.android.EnableDartProfiling",
    intent_key_aliases=("enable-dart-profiling",),
    description="Enable the Dart VM sampling profiler",
)

FLAGS: list[Flag] = [
    TRACE_STARTUP,
    ENDLESS_TRACE_BUFFER,
    TRACE_SKIA,
    TRACE_SKIA_ALLOWLIST,
    TRACE_SYSTRACE,
    TRACE_TO_FILE,
    PROFILE_STARTUP,
    PROFILE_MICROTASKS,
    ENABLE_DART_PROFILING,
]
