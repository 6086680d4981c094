# topmark:header:start
#
#   project      : ShellArgs
#   file         : flags.py
#   file_relpath : src/shellargs/registry/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public flag resolver.

[`FlagRegistry`][shellargs.registry.flags.FlagRegistry] is the query surface
over the process-wide catalog. It holds no state of its own: every method is a
pure read of the immutable catalog built by
[`shellargs.flags.instances.get_flag_catalog`][].

Lookups are exact-string matches. An unknown spelling is an ordinary outcome
and yields ``None``; nothing here raises on a miss.

Typical usage:
    ```python
    from shellargs.registry import FlagRegistry

    flag = FlagRegistry.get_flag_by_metadata_key(key)
    if flag is not None:
        flag = FlagRegistry.get_replacement_flag_if_deprecated(flag) or flag
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from shellargs.flags.instances import get_flag_catalog
from shellargs.flags.policy import DISABLED_FLAGS

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from shellargs.flags.base import Flag


class LookupKind(str, Enum):
    """The spelling space a key is looked up in."""

    ARGUMENT = "argument"
    METADATA = "metadata"
    INTENT = "intent"


@dataclass(frozen=True)
class FlagMeta:
    """Stable, serializable metadata about a registered Flag."""

    name: str
    command_line_argument: str
    metadata_key: str
    intent_key_aliases: tuple[str, ...] = ()
    takes_value: bool = False
    deprecated: bool = False
    replacement: str | None = None
    disabled: bool = False
    description: str = ""


class FlagRegistry:
    """Stateless facade answering point queries against the flag catalog."""

    @staticmethod
    def all_flags() -> tuple[Flag, ...]:
        """Return every registered flag in declaration order."""
        return get_flag_catalog().all_flags()

    @staticmethod
    def names() -> tuple[str, ...]:
        """Return all flag names in declaration order."""
        return tuple(f.name for f in get_flag_catalog().all_flags())

    @staticmethod
    def as_mapping() -> Mapping[str, Flag]:
        """Return a read-only ``name -> Flag`` mapping.

        Returns:
            Mapping[str, Flag]: A `MappingProxyType`; it must not be mutated.
        """
        return MappingProxyType({f.name: f for f in get_flag_catalog().all_flags()})

    @staticmethod
    def get_flag_by_command_line_argument(argument: str) -> Flag | None:
        """Return the flag spelled ``argument`` on the command line.

        Args:
            argument (str): Exact argument spelling, including any trailing ``=``.

        Returns:
            Flag | None: The matching flag, or ``None`` if unrecognized.
        """
        return get_flag_catalog().index.by_argument.get(argument)

    @staticmethod
    def get_flag_by_metadata_key(key: str) -> Flag | None:
        """Return the flag spelled ``key`` in application-manifest metadata.

        Args:
            key (str): Exact metadata key.

        Returns:
            Flag | None: The matching flag, or ``None`` if unrecognized.
        """
        return get_flag_catalog().index.by_metadata_key.get(key)

    @staticmethod
    def get_flag_from_intent_key(key: str) -> Flag | None:
        """Return the flag with an intent-extra alias equal to ``key``.

        Args:
            key (str): Exact intent-extra key.

        Returns:
            Flag | None: The matching flag, or ``None`` if unrecognized.
        """
        return get_flag_catalog().index.by_intent_key.get(key)

    @staticmethod
    def resolve(key: str, kind: LookupKind) -> Flag | None:
        """Dispatch ``key`` to the lookup for ``kind``."""
        if kind == LookupKind.ARGUMENT:
            return FlagRegistry.get_flag_by_command_line_argument(key)
        if kind == LookupKind.METADATA:
            return FlagRegistry.get_flag_by_metadata_key(key)
        return FlagRegistry.get_flag_from_intent_key(key)

    @staticmethod
    def get_replacement_flag_if_deprecated(flag: Flag) -> Flag | None:
        """Return the flag superseding ``flag``.

        Replacements are never deprecated themselves, so one call always yields
        the current flag. Callers that want to surface the substitution (e.g. warn)
        should check ``flag.is_deprecated`` themselves.

        Args:
            flag (Flag): Any flag.

        Returns:
            Flag | None: The replacement if ``flag`` is deprecated, else ``None``.
        """
        return flag.replacement if flag.is_deprecated else None

    @staticmethod
    def is_disabled(flag: Flag) -> bool:
        """Return True if ``flag`` is recognized but switched off by policy."""
        return flag in DISABLED_FLAGS

    @staticmethod
    def iter_meta() -> Iterator[FlagMeta]:
        """Iterate over stable metadata for registered flags.

        Yields:
            FlagMeta: Serializable metadata about each flag, in declaration order.
        """
        for flag in get_flag_catalog().all_flags():
            yield FlagMeta(
                name=flag.name,
                command_line_argument=flag.command_line_argument,
                metadata_key=flag.metadata_key,
                intent_key_aliases=flag.intent_key_aliases,
                takes_value=flag.takes_value,
                deprecated=flag.is_deprecated,
                replacement=flag.replacement.name if flag.replacement is not None else None,
                disabled=FlagRegistry.is_disabled(flag),
                description=flag.description,
            )


# Function-style aliases for callers that prefer module-level lookups.
get_flag_by_command_line_argument = FlagRegistry.get_flag_by_command_line_argument
get_flag_by_metadata_key = FlagRegistry.get_flag_by_metadata_key
get_flag_from_intent_key = FlagRegistry.get_flag_from_intent_key
get_replacement_flag_if_deprecated = FlagRegistry.get_replacement_flag_if_deprecated
is_disabled = FlagRegistry.is_disabled
all_flags = FlagRegistry.all_flags
