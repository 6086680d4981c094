# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_metadata_accessor.py
#   file_relpath : tests/host/test_metadata_accessor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Boolean metadata accessor: stored values, defaults and host failures."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from shellargs.constants import ENABLE_CONTENT_SIZING_KEY
from shellargs.host import (
    HostContext,
    PackageInfoError,
    is_content_sizing_enabled,
    read_boolean_metadata,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    from collections.abc import Mapping


class StubContext:
    """Host context returning a fixed metadata mapping through an application context."""

    def __init__(self, metadata: Mapping[str, object] | None) -> None:
        self.metadata = metadata
        self.app_context_calls = 0

    def get_application_context(self) -> StubContext:
        self.app_context_calls += 1
        return self

    def get_application_metadata(self) -> Mapping[str, object] | None:
        return self.metadata


class MissingPackageContext:
    """Host context whose package information cannot be resolved."""

    def get_application_context(self) -> MissingPackageContext:
        return self

    def get_application_metadata(self) -> Mapping[str, object] | None:
        raise PackageInfoError("com.example.app")


def test_stub_satisfies_protocol() -> None:
    """Any object with the two methods is a host context."""
    assert isinstance(StubContext({}), HostContext)


@parametrize(
    ("metadata", "expected"),
    [
        ({ENABLE_CONTENT_SIZING_KEY: True}, True),
        ({ENABLE_CONTENT_SIZING_KEY: False}, False),
        ({}, False),
        (None, False),
        ({ENABLE_CONTENT_SIZING_KEY: "true"}, False),
        ({ENABLE_CONTENT_SIZING_KEY: 1}, False),
    ],
)
def test_content_sizing(metadata: Mapping[str, object] | None, expected: bool) -> None:
    """Only a stored boolean overrides the ``False`` default."""
    assert is_content_sizing_enabled(StubContext(metadata)) is expected


def test_reads_through_application_context() -> None:
    """The accessor always asks for the application-wide context."""
    ctx = StubContext({ENABLE_CONTENT_SIZING_KEY: True})
    assert is_content_sizing_enabled(ctx)
    assert ctx.app_context_calls == 1


def test_custom_key_and_default() -> None:
    """Missing keys fall back to the supplied default."""
    ctx = StubContext({"io.flutter.embedding.android.Other": False})
    assert read_boolean_metadata(ctx, "io.flutter.embedding.android.Missing", default=True)
    assert not read_boolean_metadata(ctx, "io.flutter.embedding.android.Other", default=True)


def test_host_failure_returns_default_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Unresolvable package info is logged and never propagates."""
    with caplog.at_level(logging.ERROR):
        assert is_content_sizing_enabled(MissingPackageContext()) is False
        assert read_boolean_metadata(MissingPackageContext(), "k", default=True) is True

    messages: list[str] = [r.getMessage() for r in caplog.records]
    assert messages.count("Could not get metadata") == 2
    assert all(r.exc_info is not None for r in caplog.records)
