# topmark:header:start
#
#   project      : ShellArgs
#   file         : args.py
#   file_relpath : src/shellargs/cli/commands/args.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs `args` command.

Builds the engine command line a host would pass for a given manifest file
(and optional intent extras), one argument per line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shellargs.cli.cli_types import KeyValueParam
from shellargs.cli.console import get_console
from shellargs.cli.errors import ShellargsConfigError
from shellargs.cli.options import output_format_option
from shellargs.cli.utils import get_effective_verbosity
from shellargs.core.formats import OutputFormat, is_machine_format
from shellargs.host.manifest import ManifestFile
from shellargs.host.metadata import PackageInfoError, is_content_sizing_enabled
from shellargs.registry.machine import serialize_single
from shellargs.registry.machine.payloads import build_arguments_payload, build_meta_payload
from shellargs.registry.machine.schemas import MachineKind
from shellargs.shell_args import build_shell_args

if TYPE_CHECKING:
    from collections.abc import Mapping

    from shellargs.cli.console import ConsoleLike


@click.command(
    name="args",
    help="Print the engine arguments built from MANIFEST.",
    epilog="""
MANIFEST is a TOML file with an [application.metadata] table. Intent extras given
with --intent-extra are applied after the manifest and override it per flag.
""",
)
@click.argument(
    "manifest",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--intent-extra",
    "intent_extras",
    type=KeyValueParam(),
    multiple=True,
    metavar="KEY=VALUE",
    help="Intent extra to apply after the manifest (repeatable).",
)
@output_format_option
def args_command(
    *,
    manifest: Path,
    intent_extras: tuple[tuple[str, str], ...] = (),
    output_format: OutputFormat | None = None,
) -> None:
    """Build and print engine arguments.

    Args:
        manifest (Path): Manifest file to read metadata from.
        intent_extras (tuple[tuple[str, str], ...]): ``(key, value)`` pairs.
        output_format (OutputFormat | None): Output format; text when omitted.

    Raises:
        ShellargsConfigError: If the manifest cannot be read or parsed.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    host = ManifestFile(manifest)
    try:
        metadata: Mapping[str, object] = host.get_application_metadata() or {}
    except PackageInfoError as exc:
        raise ShellargsConfigError(str(exc)) from exc

    arguments: list[str] = build_shell_args(metadata, dict(intent_extras))

    if is_machine_format(fmt):
        console.print(
            serialize_single(
                fmt=fmt,
                meta=build_meta_payload(),
                kind=MachineKind.ARGUMENTS,
                payload=build_arguments_payload(source=str(manifest), arguments=arguments),
            )
        )
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# Engine arguments for `{manifest}`\n")
        console.print("```text")
        for argument in arguments:
            console.print(argument)
        console.print("```")
        return

    if get_effective_verbosity(ctx) > 0:
        title: str = f"Engine arguments for {host.package_name or manifest}:\n"
        console.print(console.styled(title, bold=True))
        sizing: str = "enabled" if is_content_sizing_enabled(host) else "disabled"
        console.print(console.styled(f"(content sizing {sizing})", dim=True))
    for argument in arguments:
        console.print(argument)
