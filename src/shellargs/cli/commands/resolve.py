# topmark:header:start
#
#   project      : ShellArgs
#   file         : resolve.py
#   file_relpath : src/shellargs/cli/commands/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs `resolve` command.

Looks a single key up as a command-line argument, a manifest metadata key or an
intent-extra key, and reports the flag it names together with its deprecation
and policy status. Exits with [`ExitCode.NOT_FOUND`][shellargs.cli.exit_codes.ExitCode]
when the key is not recognized.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shellargs.cli.cli_types import EnumChoiceParam
from shellargs.cli.console import get_console
from shellargs.cli.exit_codes import ExitCode
from shellargs.cli.options import output_format_option
from shellargs.config.logging import get_logger
from shellargs.constants import COMMAND_LINE_ARGUMENT_PREFIX
from shellargs.core.formats import OutputFormat, is_machine_format
from shellargs.registry.flags import FlagRegistry, LookupKind
from shellargs.registry.machine import serialize_single
from shellargs.registry.machine.payloads import build_meta_payload, build_resolution_payload
from shellargs.registry.machine.schemas import MachineKind

if TYPE_CHECKING:
    from shellargs.cli.console import ConsoleLike
    from shellargs.config.logging import ShellargsLogger
    from shellargs.flags.base import Flag

logger: ShellargsLogger = get_logger(__name__)


def infer_lookup_kind(key: str) -> LookupKind:
    """Guess which spelling space ``key`` belongs to.

    ``--...`` is a command-line argument, a dotted key is a manifest metadata key,
    anything else is an intent-extra key.
    """
    if key.startswith(COMMAND_LINE_ARGUMENT_PREFIX):
        return LookupKind.ARGUMENT
    if "." in key:
        return LookupKind.METADATA
    return LookupKind.INTENT


def _emit_text(console: ConsoleLike, *, key: str, kind: LookupKind, flag: Flag | None) -> None:
    if flag is None:
        console.error(f"No flag matches {kind.value} key '{key}'.")
        return

    console.print(console.styled(flag.name, bold=True))
    console.print(f"  argument     : {flag.command_line_argument}")
    console.print(f"  metadata key : {flag.metadata_key}")
    if flag.intent_key_aliases:
        console.print(f"  intent keys  : {', '.join(flag.intent_key_aliases)}")
    if flag.description:
        console.print(f"  description  : {flag.description}")

    replacement: Flag | None = FlagRegistry.get_replacement_flag_if_deprecated(flag)
    if replacement is not None:
        console.warn(
            f"  deprecated   : use {replacement.name} ({replacement.command_line_argument})"
        )
    effective: Flag = replacement or flag
    if FlagRegistry.is_disabled(effective):
        console.warn(f"  disabled     : {effective.name} is ignored by policy")


@click.command(
    name="resolve",
    help="Resolve KEY to the engine flag it names.",
    epilog="""
Without --kind, keys starting with '--' are looked up as command-line arguments,
dotted keys as manifest metadata keys, and anything else as intent-extra keys.
Exits with status 1 when KEY is not recognized.
""",
)
@click.argument("key")
@click.option(
    "--kind",
    "kind",
    type=EnumChoiceParam(LookupKind),
    default=None,
    help=f"Lookup kind ({', '.join(v.value for v in LookupKind)}); inferred when omitted.",
)
@output_format_option
def resolve_command(
    *,
    key: str,
    kind: LookupKind | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Resolve one key and report the flag, if any.

    Args:
        key (str): The spelling to look up (exact match).
        kind (LookupKind | None): Lookup kind; inferred from ``key`` when omitted.
        output_format (OutputFormat | None): Output format; text when omitted.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    lookup_kind: LookupKind = kind or infer_lookup_kind(key)

    flag: Flag | None = FlagRegistry.resolve(key, lookup_kind)
    logger.debug("resolve %s %r -> %s", lookup_kind.value, key, flag.name if flag else None)

    if is_machine_format(fmt):
        console.print(
            serialize_single(
                fmt=fmt,
                meta=build_meta_payload(),
                kind=MachineKind.RESOLUTION,
                payload=build_resolution_payload(key=key, kind=lookup_kind.value, flag=flag),
            )
        )
    elif fmt == OutputFormat.MARKDOWN:
        if flag is None:
            console.print(f"No flag matches {lookup_kind.value} key `{key}`.")
        else:
            console.print(f"# `{flag.name}`\n")
            console.print(f"- argument: `{flag.command_line_argument}`")
            console.print(f"- metadata key: `{flag.metadata_key}`")
            if flag.intent_key_aliases:
                aliases: str = ", ".join(f"`{k}`" for k in flag.intent_key_aliases)
                console.print(f"- intent keys: {aliases}")
            if flag.replacement is not None:
                console.print(f"- deprecated: use `{flag.replacement.name}`")
            if FlagRegistry.is_disabled(flag):
                console.print("- disabled")
    else:
        _emit_text(console, key=key, kind=lookup_kind, flag=flag)

    if flag is None:
        ctx.exit(ExitCode.NOT_FOUND)
