# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_flag_record.py
#   file_relpath : tests/flags/test_flag_record.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `Flag` record: validation, derived properties and rendering."""

from __future__ import annotations

import dataclasses

import pytest

from shellargs.flags.base import Flag
from shellargs.flags.builtins.runtime import OLD_GEN_HEAP_SIZE, START_PAUSED
from shellargs.flags.builtins.snapshots import (
    AOT_SHARED_LIBRARY_NAME,
    DEPRECATED_AOT_SHARED_LIBRARY_NAME,
)
from tests.conftest import parametrize


def test_value_flag_renders_value() -> None:
    """A trailing ``=`` marks a value flag; the value is appended verbatim."""
    assert OLD_GEN_HEAP_SIZE.takes_value
    assert OLD_GEN_HEAP_SIZE.with_value("512") == "--old-gen-heap-size=512"


def test_switch_ignores_value() -> None:
    """Switches render as the bare argument."""
    assert not START_PAUSED.takes_value
    assert START_PAUSED.with_value("anything") == "--start-paused"


def test_deprecation_is_derived_from_replacement() -> None:
    """A flag is deprecated exactly when it names a replacement."""
    assert DEPRECATED_AOT_SHARED_LIBRARY_NAME.is_deprecated
    assert DEPRECATED_AOT_SHARED_LIBRARY_NAME.replacement is AOT_SHARED_LIBRARY_NAME
    assert not AOT_SHARED_LIBRARY_NAME.is_deprecated


def test_flag_is_immutable() -> None:
    """Flags are frozen value objects."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        OLD_GEN_HEAP_SIZE.name = "OTHER"  # type: ignore[misc]


def test_flags_are_hashable_and_compare_by_value() -> None:
    """Equal declarations compare and hash equal."""
    a = Flag(name="X", command_line_argument="--x", metadata_key="io.flutter.embedding.android.X")
    b = Flag(name="X", command_line_argument="--x", metadata_key="io.flutter.embedding.android.X")
    assert a == b
    assert len({a, b}) == 1


@parametrize(
    "kwargs",
    [
        {"name": "", "command_line_argument": "--x", "metadata_key": "k"},
        {"name": "X", "command_line_argument": "x", "metadata_key": "k"},
        {"name": "X", "command_line_argument": "--x", "metadata_key": ""},
        {
            "name": "X",
            "command_line_argument": "--x",
            "metadata_key": "k",
            "intent_key_aliases": ("",),
        },
        {
            "name": "X",
            "command_line_argument": "--x",
            "metadata_key": "k",
            "intent_key_aliases": ("x", "x"),
        },
    ],
)
def test_malformed_records_are_rejected(kwargs: dict[str, object]) -> None:
    """Empty or malformed spellings fail at construction."""
    with pytest.raises(ValueError):
        Flag(**kwargs)  # type: ignore[arg-type]


def test_replacement_chain_is_rejected() -> None:
    """A replacement must not itself be deprecated."""
    with pytest.raises(ValueError, match="itself deprecated"):
        Flag(
            name="OLDER",
            command_line_argument="--older=",
            metadata_key="older",
            replacement=DEPRECATED_AOT_SHARED_LIBRARY_NAME,
        )
