# topmark:header:start
#
#   project      : ShellArgs
#   file         : shell_args.py
#   file_relpath : src/shellargs/shell_args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Build engine command-line arguments from manifest metadata and intent extras.

This is the caller side of the resolver: every key is resolved to a flag,
deprecated flags are normalised to their replacement, disabled flags are
dropped, and the value is rendered onto the flag's command-line spelling.

Values are not validated; unknown keys are ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from shellargs.config.logging import get_logger
from shellargs.constants import METADATA_KEY_PREFIX
from shellargs.registry.flags import FlagRegistry

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from shellargs.config.logging import ShellargsLogger
    from shellargs.flags.base import Flag

logger: ShellargsLogger = get_logger(__name__)

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def is_truthy(value: object) -> bool:
    """Return True if ``value`` switches a bare flag on.

    Booleans are taken as-is, numbers are true when non-zero, and strings are
    true when they read as ``1``, ``true``, ``yes`` or ``on`` (case-insensitive).
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return False


def render_value(value: object) -> str:
    """Render a metadata/intent value for a ``--name=value`` argument."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_argument(flag: Flag, value: object) -> str | None:
    """Render ``flag`` with ``value`` as one command-line token.

    Args:
        flag (Flag): The flag to apply.
        value (object): The supplied value.

    Returns:
        str | None: The argument, or None if the flag should not be passed
        (a switch with a false value, or a missing value).
    """
    if value is None:
        return None
    if flag.takes_value:
        return flag.with_value(render_value(value))
    return flag.command_line_argument if is_truthy(value) else None


def _normalize(flag: Flag, *, key: str, source: str) -> Flag | None:
    """Apply deprecation indirection and policy to a resolved flag."""
    replacement: Flag | None = FlagRegistry.get_replacement_flag_if_deprecated(flag)
    if replacement is not None:
        logger.warning(
            "%s key %r is deprecated; use %r (%s) instead",
            source,
            key,
            replacement.metadata_key if source == "metadata" else replacement.name,
            replacement.command_line_argument,
        )
        flag = replacement
    if FlagRegistry.is_disabled(flag):
        logger.warning("%s key %r names disabled flag %s; ignoring", source, key, flag.name)
        return None
    return flag


def _apply(
    args: dict[Flag, str],
    entries: Mapping[str, object],
    *,
    source: str,
    lookup: Callable[[str], Flag | None],
) -> None:
    for key, value in entries.items():
        if value is None:
            continue
        flag: Flag | None = lookup(key)
        if flag is None:
            if source == "metadata" and key.startswith(METADATA_KEY_PREFIX):
                logger.debug("Ignoring unrecognized metadata key %r", key)
            continue
        effective: Flag | None = _normalize(flag, key=key, source=source)
        if effective is None:
            continue
        rendered: str | None = render_argument(effective, value)
        if rendered is None:
            # A false switch clears the same switch set by an earlier source.
            args.pop(effective, None)
            continue
        logger.trace("%s key %r -> %s", source, key, rendered)
        args[effective] = rendered


def build_shell_args(
    metadata: Mapping[str, object] | None = None,
    intent_extras: Mapping[str, object] | None = None,
) -> list[str]:
    """Translate manifest metadata and intent extras into engine arguments.

    Intent extras are applied after metadata, so an extra overrides the manifest
    for the same flag. Each flag contributes at most one argument; arguments
    keep the order in which their flag first appeared. A ``None`` value is
    ignored, so it never clears an argument set by metadata; a false switch
    does.

    Args:
        metadata (Mapping[str, object] | None): Manifest metadata (key -> value).
        intent_extras (Mapping[str, object] | None): Intent extras (key -> value).

    Returns:
        list[str]: Command-line arguments, e.g. ``["--enable-impeller=true"]``.
    """
    args: dict[Flag, str] = {}
    if metadata:
        _apply(args, metadata, source="metadata", lookup=FlagRegistry.get_flag_by_metadata_key)
    if intent_extras:
        _apply(args, intent_extras, source="intent", lookup=FlagRegistry.get_flag_from_intent_key)
    return list(args.values())
