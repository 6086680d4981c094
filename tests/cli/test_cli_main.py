# topmark:header:start
#
#   project      : ShellArgs
#   file         : test_cli_main.py
#   file_relpath : tests/cli/test_cli_main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: group options, `version`, and environment handling."""

from __future__ import annotations

import json

import pytest

from shellargs.cli.errors import ShellargsUsageError
from shellargs.cli.exit_codes import ExitCode
from shellargs.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from shellargs.constants import SHELLARGS_VERSION
from shellargs.core.formats import OutputFormat
from tests.cli.conftest import assert_SUCCESS, parse_ndjson_output, run_cli
from tests.conftest import mark_cli, parametrize


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Bare invocation prints a hint followed by the group help."""
    result = run_cli([])
    assert_SUCCESS(result)
    assert "shellargs flags" in result.stdout
    assert "Commands:" in result.stdout


@mark_cli
def test_version_text() -> None:
    """`version` prints the installed version."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == SHELLARGS_VERSION


@mark_cli
def test_version_json() -> None:
    """`version --format json` returns the version under the ``version`` key."""
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout)["version"] == SHELLARGS_VERSION


@mark_cli
def test_version_ndjson() -> None:
    """`version --format ndjson` returns one ``version`` record."""
    result = run_cli(["version", "--format", "ndjson"])
    assert_SUCCESS(result)
    records = parse_ndjson_output(result)
    assert records[0]["kind"] == "version"


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """``-v`` with ``-q`` is a usage error."""
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output


def test_resolve_verbosity_rejects_both() -> None:
    """The verbosity resolver raises a usage error carrying exit code 64."""
    with pytest.raises(ShellargsUsageError, match="mutually exclusive") as excinfo:
        resolve_verbosity(1, 1)
    assert excinfo.value.exit_code == ExitCode.USAGE_ERROR == 64


@mark_cli
def test_env_log_level_routes_diagnostics_to_stderr() -> None:
    """Diagnostics go to stderr so machine output on stdout stays parseable."""
    result = run_cli(
        ["resolve", "--format", "json", "old-gen-heap-size"],
        env={"SHELLARGS_LOG_LEVEL": "DEBUG"},
    )
    assert_SUCCESS(result)
    assert json.loads(result.stdout)["resolution"]["effective"] == "OLD_GEN_HEAP_SIZE"
    assert "[DEBUG]" in result.stderr


@parametrize(
    ("verbose", "quiet", "expected"),
    [(0, 0, 0), (1, 0, 1), (5, 0, 2), (0, 1, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """Verbosity counts map to program-output levels."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_color_disabled_for_machine_formats() -> None:
    """Machine formats never get color, even when forced."""
    assert not resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.JSON)
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, output_format=OutputFormat.TEXT)
    assert not resolve_color_mode(cli_mode=ColorMode.NEVER, output_format=None)


def test_color_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR and NO_COLOR apply in auto mode."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=False)

    monkeypatch.delenv("FORCE_COLOR")
    monkeypatch.setenv("NO_COLOR", "1")
    assert not resolve_color_mode(cli_mode=ColorMode.AUTO, output_format=None, stdout_isatty=True)
