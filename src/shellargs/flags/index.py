# topmark:header:start
#
#   project      : ShellArgs
#   file         : index.py
#   file_relpath : src/shellargs/flags/index.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Point-lookup indices derived from a sequence of flags.

[`FlagIndex.build`][shellargs.flags.index.FlagIndex.build] derives three
exact-match mappings:

* ``by_argument``: command-line argument -> Flag
* ``by_metadata_key``: manifest metadata key -> Flag
* ``by_intent_key``: intent-extra alias -> Flag (one entry per alias)

Building fails fast with
[`DuplicateFlagKeyError`][shellargs.flags.errors.DuplicateFlagKeyError] when a
spelling is claimed twice. The resulting mappings are ``MappingProxyType``
views over dicts that are never mutated after construction, so concurrent
readers need no locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from shellargs.flags.errors import DuplicateFlagKeyError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from shellargs.flags.base import Flag

INDEX_ARGUMENT: str = "command-line argument"
INDEX_METADATA_KEY: str = "metadata key"
INDEX_INTENT_KEY: str = "intent key"


def _claim(registry: dict[str, Flag], *, index: str, key: str, flag: Flag) -> None:
    """Insert ``key -> flag`` into ``registry`` or raise on collision."""
    existing: Flag | None = registry.get(key)
    if existing is not None:
        raise DuplicateFlagKeyError(
            index=index,
            key=key,
            existing=existing.name,
            duplicate=flag.name,
        )
    registry[key] = flag


@dataclass(frozen=True)
class FlagIndex:
    """Read-only lookup tables for one catalog.

    Attributes:
        by_argument (Mapping[str, Flag]): Command-line argument -> Flag.
        by_metadata_key (Mapping[str, Flag]): Metadata key -> Flag.
        by_intent_key (Mapping[str, Flag]): Intent alias -> Flag.
    """

    by_argument: Mapping[str, Flag]
    by_metadata_key: Mapping[str, Flag]
    by_intent_key: Mapping[str, Flag]

    @classmethod
    def build(cls, flags: Iterable[Flag]) -> FlagIndex:
        """Build the three indices for ``flags``.

        Args:
            flags (Iterable[Flag]): Flags to index, in declaration order.

        Returns:
            FlagIndex: The populated, read-only indices.

        Raises:
            DuplicateFlagKeyError: If two flags share an argument, a metadata key
                or an intent alias (this also catches a flag registered twice).
        """
        by_argument: dict[str, Flag] = {}
        by_metadata_key: dict[str, Flag] = {}
        by_intent_key: dict[str, Flag] = {}

        for flag in flags:
            _claim(by_argument, index=INDEX_ARGUMENT, key=flag.command_line_argument, flag=flag)
            _claim(by_metadata_key, index=INDEX_METADATA_KEY, key=flag.metadata_key, flag=flag)
            for alias in flag.intent_key_aliases:
                _claim(by_intent_key, index=INDEX_INTENT_KEY, key=alias, flag=flag)

        return cls(
            by_argument=MappingProxyType(by_argument),
            by_metadata_key=MappingProxyType(by_metadata_key),
            by_intent_key=MappingProxyType(by_intent_key),
        )
