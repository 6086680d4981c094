# topmark:header:start
#
#   project      : ShellArgs
#   file         : errors.py
#   file_relpath : src/shellargs/flags/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errors raised while building the flag catalog and its indices.

These signal programming errors in the declared catalog. They are raised at
construction time only; lookups against a built catalog never raise.
"""

from __future__ import annotations


class FlagCatalogError(ValueError):
    """The declared flags violate a catalog invariant."""


class DuplicateFlagKeyError(FlagCatalogError):
    """Two flags share a spelling within the same lookup index.

    Attributes:
        index (str): Name of the index where the collision occurred.
        key (str): The colliding spelling.
        existing (str): Name of the flag that already owns the key.
        duplicate (str): Name of the flag that tried to claim it.
    """

    def __init__(self, *, index: str, key: str, existing: str, duplicate: str) -> None:
        self.index = index
        self.key = key
        self.existing = existing
        self.duplicate = duplicate
        super().__init__(
            f"Duplicate {index} key {key!r}: already used by {existing}, "
            f"cannot register {duplicate}"
        )
