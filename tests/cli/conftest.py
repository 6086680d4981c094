# topmark:header:start
#
#   project      : ShellArgs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking ShellArgs through Click's `CliRunner`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Sequence, cast

from click.testing import CliRunner, Result

from shellargs.cli.exit_codes import ExitCode
from shellargs.cli.main import cli
from shellargs.config import logging

if TYPE_CHECKING:
    from collections.abc import Mapping


def run_cli(argv: str | Sequence[str] | None, *, env: Mapping[str, str] | None = None) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["flags"]``.
        env (Mapping[str, str] | None): Extra environment variables for the run.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    try:
        return runner.invoke(cli, argv, env=dict(env) if env else None)
    finally:
        # The CLI rebinds the root handler to the runner's captured stderr.
        logging.setup_logging(level=logging.TRACE_LEVEL)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_NOT_FOUND(result: Result) -> None:
    """Assert that the command exited with NOT_FOUND (code 1)."""
    # NOT_FOUND is a normal outcome; do not assert on exception.
    assert result.exit_code == ExitCode.NOT_FOUND, result.output


def parse_json_output(result: Result) -> dict[str, Any]:
    """Parse the stdout of a ``--format json`` run."""
    data: Any = json.loads(result.stdout)
    assert isinstance(data, dict)
    return cast("dict[str, Any]", data)


def parse_ndjson_output(result: Result) -> list[dict[str, Any]]:
    """Parse the stdout of a ``--format ndjson`` run, one record per line."""
    return [
        cast("dict[str, Any]", json.loads(line))
        for line in result.stdout.splitlines()
        if line.strip()
    ]
