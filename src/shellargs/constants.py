# topmark:header:start
#
#   project      : ShellArgs
#   file         : constants.py
#   file_relpath : src/shellargs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SHELLARGS: str = "shellargs"

SHELLARGS_VERSION: str = get_version("shellargs")

# Environment variable consulted by `shellargs.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV_VAR: str = "SHELLARGS_LOG_LEVEL"

# Namespace shared by the metadata keys of all non-deprecated flags.
METADATA_KEY_PREFIX: str = "io.flutter.embedding.android."

COMMAND_LINE_ARGUMENT_PREFIX: str = "--"

# Suffix marking a command-line argument that expects a value.
VALUE_SUFFIX: str = "="

# Standalone manifest switch read by `shellargs.host.metadata.is_content_sizing_enabled`.
ENABLE_CONTENT_SIZING_KEY: str = METADATA_KEY_PREFIX + "EnableContentSizing"
ENABLE_CONTENT_SIZING_DEFAULT: bool = False

# TOML tables holding application metadata in a manifest file.
MANIFEST_APPLICATION_TABLE: str = "application"
MANIFEST_METADATA_TABLE: str = "metadata"
MANIFEST_PACKAGE_KEY: str = "package"
