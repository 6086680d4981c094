# topmark:header:start
#
#   project      : ShellArgs
#   file         : metadata.py
#   file_relpath : src/shellargs/host/metadata.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standalone boolean switches read from application-manifest metadata.

These accessors sit outside the flag catalog: they read one fixed metadata key
with one fixed default. A host that cannot provide its metadata (for example
because its package information cannot be resolved) never makes them fail;
the error is logged and the default is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from shellargs.config.logging import get_logger
from shellargs.constants import ENABLE_CONTENT_SIZING_DEFAULT, ENABLE_CONTENT_SIZING_KEY

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shellargs.config.logging import ShellargsLogger

logger: ShellargsLogger = get_logger(__name__)


class PackageInfoError(LookupError):
    """The host could not resolve the application's package information."""


@runtime_checkable
class HostContext(Protocol):
    """Minimal view of a host environment that exposes manifest metadata."""

    def get_application_context(self) -> HostContext:
        """Return the application-wide context for this host."""
        ...

    def get_application_metadata(self) -> Mapping[str, object] | None:
        """Return the application's manifest metadata.

        Raises:
            PackageInfoError: If the package information cannot be resolved.
        """
        ...


def read_boolean_metadata(context: HostContext, key: str, *, default: bool) -> bool:
    """Return the boolean stored under ``key`` in the application metadata.

    Args:
        context (HostContext): Any host context; its application context is used.
        key (str): Metadata key to read.
        default (bool): Value returned when the key is absent, not a boolean, or
            the metadata cannot be read.

    Returns:
        bool: The stored boolean, or ``default``.
    """
    try:
        app_context: HostContext = context.get_application_context()
        metadata: Mapping[str, object] | None = app_context.get_application_metadata()
    except Exception:
        logger.exception("Could not get metadata")
        return default

    if metadata is None:
        return default

    value: object = metadata.get(key, default)
    if not isinstance(value, bool):
        logger.debug("Metadata %s is not a boolean (%r); using default %s", key, value, default)
        return default
    return value


def is_content_sizing_enabled(context: HostContext) -> bool:
    """Return True if the application opted in to content-based view sizing."""
    return read_boolean_metadata(
        context,
        ENABLE_CONTENT_SIZING_KEY,
        default=ENABLE_CONTENT_SIZING_DEFAULT,
    )
