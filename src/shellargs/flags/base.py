# topmark:header:start
#
#   project      : ShellArgs
#   file         : base.py
#   file_relpath : src/shellargs/flags/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flag record shared by the catalog, the lookup indices and the resolver.

A [`Flag`][shellargs.flags.base.Flag] identifies one engine switch and the
three external spellings it may be supplied under:

* a command-line argument (``--flutter-assets-dir=``),
* an application-manifest metadata key
  (``io.flutter.embedding.android.FlutterAssetsDir``), and
* zero or more platform intent-extra keys (``flutter-assets-dir``).

Deprecation is modelled as an optional reference to the replacing flag on the
same record type; a flag is deprecated exactly when ``replacement`` is set.
Replacements never point at another deprecated flag, so resolving a deprecated
spelling is always a single hop.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shellargs.constants import COMMAND_LINE_ARGUMENT_PREFIX, VALUE_SUFFIX


@dataclass(frozen=True)
class Flag:
    """Immutable description of one configurable engine switch.

    Attributes:
        name (str): Identifier of the flag constant (e.g. ``"VM_SNAPSHOT_DATA"``).
        command_line_argument (str): Command-line spelling; a trailing ``=`` means
            the flag expects a value.
        metadata_key (str): Manifest metadata spelling.
        intent_key_aliases (tuple[str, ...]): Intent-extra spellings (may be empty).
        replacement (Flag | None): The flag superseding this one, or ``None`` when
            this flag is current.
        description (str): Human-readable summary used in listings.
    """

    name: str
    command_line_argument: str
    metadata_key: str
    intent_key_aliases: tuple[str, ...] = ()
    replacement: Flag | None = field(default=None, repr=False)
    description: str = ""

    def __post_init__(self) -> None:
        """Validate the record shape.

        Raises:
            ValueError: If a spelling is empty or malformed, an alias is repeated,
                or the replacement is itself deprecated.
        """
        if not self.name:
            raise ValueError("Flag.name is required.")
        if not self.command_line_argument.startswith(COMMAND_LINE_ARGUMENT_PREFIX):
            raise ValueError(
                f"Flag {self.name}: command-line argument must start with "
                f"'{COMMAND_LINE_ARGUMENT_PREFIX}' (got {self.command_line_argument!r})"
            )
        if not self.metadata_key:
            raise ValueError(f"Flag {self.name}: metadata key is required.")
        if any(not alias for alias in self.intent_key_aliases):
            raise ValueError(f"Flag {self.name}: intent key aliases must be non-empty.")
        if len(set(self.intent_key_aliases)) != len(self.intent_key_aliases):
            raise ValueError(f"Flag {self.name}: duplicate intent key alias.")
        if self.replacement is not None and self.replacement.is_deprecated:
            raise ValueError(
                f"Flag {self.name}: replacement {self.replacement.name} is itself deprecated."
            )

    @property
    def is_deprecated(self) -> bool:
        """Return True if this flag has been superseded by another flag."""
        return self.replacement is not None

    @property
    def takes_value(self) -> bool:
        """Return True if the command-line argument expects a value (``--name=``)."""
        return self.command_line_argument.endswith(VALUE_SUFFIX)

    def with_value(self, value: str) -> str:
        """Render this flag as a single command-line token.

        Args:
            value (str): Value appended to value-taking arguments. Ignored for switches.

        Returns:
            str: ``--name=value`` for value flags, the bare argument for switches.
        """
        if self.takes_value:
            return f"{self.command_line_argument}{value}"
        return self.command_line_argument
