# topmark:header:start
#
#   project      : ShellArgs
#   file         : rendering.py
#   file_relpath : src/shellargs/flags/builtins/rendering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering backend and GPU flags.

Exports:
    FLAGS: Impeller selection and tuning, Vulkan validation, GPU tracing,
        SurfaceControl, software rendering and shader cache switches.

Notes:
    - ``ENABLE_IMPELLER`` takes an explicit value so a manifest can opt out
      (``--enable-impeller=false``) as well as in.
"""

from __future__ import annotations

from shellargs.flags.base import Flag

ENABLE_IMPELLER = Flag(
    name="ENABLE_IMPELLER",
    command_line_argument="--enable-impeller=",
    metadata_key="io.flutter.embedding.android.EnableImpeller",
    intent_key_aliases=("enable-impeller",),
    description="Select the Impeller renderer (true/false)",
)

IMPELLER_BACKEND = Flag(
    name="IMPELLER_BACKEND",
    command_line_argument="--impeller-backend=",
    metadata_key="io.flutter.embedding.android.ImpellerBackend",
    intent_key_aliases=("impeller-backend",),
    description="Impeller backend to use (vulkan, opengles)",
)

IMPELLER_LAZY_SHADER_MODE = Flag(
    name="IMPELLER_LAZY_SHADER_MODE",
    command_line_argument="--impeller-lazy-shader-mode=",
    metadata_key="io.flutter.embedding.android.ImpellerLazyShaderMode",
    description="Compile Impeller shaders on first use",
)

IMPELLER_ANTIALIAS_LINES = Flag(
    name="IMPELLER_ANTIALIAS_LINES",
    command_line_argument="--impeller-antialias-lines",
    metadata_key="io.flutter.embedding.android.ImpellerAntialiasLines",
    description="Antialias line primitives in Impeller",
)

ENABLE_VULKAN_VALIDATION = Flag(
    name="ENABLE_VULKAN_VALIDATION",
    command_line_argument="--enable-vulkan-validation",
    metadata_key="io.flutter.embedding.android.EnableVulkanValidation",
    intent_key_aliases=("enable-vulkan-validation",),
    description="Load the Vulkan validation layers",
)

ENABLE_OPENGL_GPU_TRACING = Flag(
    name="ENABLE_OPENGL_GPU_TRACING",
    command_line_argument="--enable-opengl-gpu-tracing",
    metadata_key="io.flutter.embedding.android.EnableOpenGLGPUTracing",
    description="Emit GPU timing events for the OpenGL ES backend",
)

ENABLE_VULKAN_GPU_TRACING = Flag(
    name="ENABLE_VULKAN_GPU_TRACING",
    command_line_argument="--enable-vulkan-gpu-tracing",
    metadata_key="io.flutter.embedding.android.EnableVulkanGPUTracing",
    description="Emit GPU timing events for the Vulkan backend",
)

ENABLE_SURFACE_CONTROL = Flag(
    name="ENABLE_SURFACE_CONTROL",
    command_line_argument="--enable-surface-control",
    metadata_key="io.flutter.embedding.android.EnableSurfaceControl",
    description="Present frames through SurfaceControl",
)

ENABLE_SOFTWARE_RENDERING = Flag(
    name="ENABLE_SOFTWARE_RENDERING",
    command_line_argument="--enable-software-rendering",
    metadata_key="io.flutter.embedding.android.EnableSoftwareRendering",
    intent_key_aliases=("enable-software-rendering",),
    description="Rasterize on the CPU instead of the GPU",
)

SKIA_DETERMINISTIC_RENDERING = Flag(
    name="SKIA_DETERMINISTIC_RENDERING",
    command_line_argument="--skia-deterministic-rendering",
    metadata_key="io.flutter.embedding.android.SkiaDeterministicRendering",
    intent_key_aliases=("skia-deterministic-rendering",),
    description="Make Skia output reproducible across runs",
)

CACHE_SKSL = Flag(
    name="CACHE_SKSL",
    command_line_argument="--cache-sksl",
    metadata_key="io.flutter.embedding.android.CacheSkSL",
    intent_key_aliases=("cache-sksl",),
    description="Cache shaders as SkSL instead of binaries",
)

PURGE_PERSISTENT_CACHE = Flag(
    name="PURGE_PERSISTENT_CACHE",
    command_line_argument="--purge-persistent-cache",
    metadata_key="io.flutter.embedding.android.PurgePersistentCache",
    intent_key_aliases=("purge-persistent-cache",),
    description="Clear the persistent shader cache on startup",
)

DUMP_SKP_ON_SHADER_COMPILATION = Flag(
    name="DUMP_SKP_ON_SHADER_COMPILATION",
    command_line_argument="--dump-skp-on-shader-compilation",
    metadata_key="io.flutter.embedding.android.DumpSkpOnShaderCompilation",
    intent_key_aliases=("dump-skp-on-shader-compilation",),
    description="Write an SKP whenever a shader is compiled",
)

FLAGS: list[Flag] = [
    ENABLE_IMPELLER,
    IMPELLER_BACKEND,
    IMPELLER_LAZY_SHADER_MODE,
    IMPELLER_ANTIALIAS_LINES,
    ENABLE_VULKAN_VALIDATION,
    ENABLE_OPENGL_GPU_TRACING,
    ENABLE_VULKAN_GPU_TRACING,
    ENABLE_SURFACE_CONTROL,
    ENABLE_SOFTWARE_RENDERING,
    SKIA_DETERMINISTIC_RENDERING,
    CACHE_SKSL,
    PURGE_PERSISTENT_CACHE,
    DUMP_SKP_ON_SHADER_COMPILATION,
]
