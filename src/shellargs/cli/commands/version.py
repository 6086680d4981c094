# topmark:header:start
#
#   project      : ShellArgs
#   file         : version.py
#   file_relpath : src/shellargs/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs `version` command.

Prints the ShellArgs version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shellargs.cli.console import get_console
from shellargs.cli.options import output_format_option
from shellargs.cli.utils import get_effective_verbosity
from shellargs.constants import SHELLARGS_VERSION
from shellargs.core.formats import OutputFormat, is_machine_format
from shellargs.registry.machine import serialize_single
from shellargs.registry.machine.payloads import build_meta_payload
from shellargs.registry.machine.schemas import MachineKind

if TYPE_CHECKING:
    from shellargs.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ShellArgs.",
)
@output_format_option
def version_command(
    *,
    output_format: OutputFormat | None = None,
) -> None:
    """Show the current version of ShellArgs.

    Args:
        output_format (OutputFormat | None): Output format; text when omitted.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if is_machine_format(fmt):
        console.print(
            serialize_single(
                fmt=fmt,
                meta=build_meta_payload(),
                kind=MachineKind.VERSION,
                payload=SHELLARGS_VERSION,
            )
        )
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ShellArgs Version\n")
        console.print(f"**ShellArgs version: {SHELLARGS_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("ShellArgs version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SHELLARGS_VERSION, bold=True)}")
    else:
        console.print(console.styled(SHELLARGS_VERSION, bold=True))
