# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_miss_property.py
#   file_relpath : tests/registry/test_miss_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests: arbitrary strings never make a lookup raise.

Any string that is not a declared spelling must miss; any declared spelling
must hit the flag that declares it.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shellargs.registry import FlagRegistry, LookupKind

ARGUMENTS: frozenset[str] = frozenset(f.command_line_argument for f in FlagRegistry.all_flags())
METADATA_KEYS: frozenset[str] = frozenset(f.metadata_key for f in FlagRegistry.all_flags())
INTENT_KEYS: frozenset[str] = frozenset(
    a for f in FlagRegistry.all_flags() for a in f.intent_key_aliases
)

KNOWN: dict[LookupKind, frozenset[str]] = {
    LookupKind.ARGUMENT: ARGUMENTS,
    LookupKind.METADATA: METADATA_KEYS,
    LookupKind.INTENT: INTENT_KEYS,
}

@settings(max_examples=200, deadline=None)
@given(key=st.text(max_size=64), kind=st.sampled_from(list(LookupKind)))
def test_lookup_is_total(key: str, kind: LookupKind) -> None:
    """Lookups return None exactly for undeclared spellings."""
    flag = FlagRegistry.resolve(key, kind)
    if key in KNOWN[kind]:
        assert flag is not None
    else:
        assert flag is None


@pytest.mark.hypothesis_slow
@settings(max_examples=1000, deadline=None)
@given(
    key=st.one_of(
        st.sampled_from(sorted(METADATA_KEYS)),
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz.-", min_size=1, max_size=40).map(
            "io.flutter.embedding.android.".__add__
        ),
    )
)
def test_metadata_namespace_lookup(key: str) -> None:
    """Namespaced keys hit only when declared, and hits redirect in one hop."""
    flag = FlagRegistry.get_flag_by_metadata_key(key)
    if flag is None:
        assert key not in METADATA_KEYS
        return
    assert flag.metadata_key == key
    effective = FlagRegistry.get_replacement_flag_if_deprecated(flag) or flag
    assert not effective.is_deprecated
