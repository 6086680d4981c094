# topmark:header:start
#
#   project      : ShellArgs
#   file         : errors.py
#   file_relpath : src/shellargs/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for ShellArgs CLI.

Raise these exceptions in CLI commands to signal errors with standardized
messages and exit codes. They prefer the project console if one is present in
the Click context and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from shellargs.cli.exit_codes import ExitCode


class ShellargsError(click.ClickException):
    """Base class for all ShellArgs CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ShellargsUsageError(ShellargsError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ShellargsConfigError(ShellargsError):
    """Error for manifest errors (missing/unreadable/malformed)."""

    exit_code = ExitCode.CONFIG_ERROR
