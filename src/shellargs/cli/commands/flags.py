# topmark:header:start
#
#   project      : ShellArgs
#   file         : flags.py
#   file_relpath : src/shellargs/cli/commands/flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs `flags` command.

Lists every engine flag the resolver knows, in declaration order, with its
command-line spelling and (with ``--long``) its metadata key, intent aliases,
deprecation and policy status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shellargs.cli.console import get_console
from shellargs.cli.options import output_format_option
from shellargs.cli.utils import get_effective_verbosity, render_markdown_table
from shellargs.constants import SHELLARGS_VERSION
from shellargs.core.formats import OutputFormat, is_machine_format
from shellargs.registry.flags import FlagRegistry
from shellargs.registry.machine import serialize_collection
from shellargs.registry.machine.payloads import build_flags_payload, build_meta_payload
from shellargs.registry.machine.schemas import MachineKind

if TYPE_CHECKING:
    from collections.abc import Iterator

    from shellargs.cli.console import ConsoleLike
    from shellargs.registry.flags import FlagMeta


def flag_status(meta: FlagMeta) -> str:
    """Return a short human status for a flag (empty when active)."""
    parts: list[str] = []
    if meta.deprecated:
        parts.append(f"deprecated, use {meta.replacement}")
    if meta.disabled:
        parts.append("disabled")
    return "; ".join(parts)


def _emit_markdown(console: ConsoleLike, *, show_details: bool) -> None:
    console.print(
        f"# Engine Flags\n\nShellArgs version **{SHELLARGS_VERSION}** recognizes "
        "the following flags:\n"
    )
    rows: list[list[str]] = []
    if show_details:
        headers: list[str] = [
            "Flag",
            "Argument",
            "Metadata key",
            "Intent keys",
            "Status",
            "Description",
        ]
        for meta in FlagRegistry.iter_meta():
            rows.append(
                [
                    f"`{meta.name}`",
                    f"`{meta.command_line_argument}`",
                    f"`{meta.metadata_key}`",
                    ", ".join(f"`{k}`" for k in meta.intent_key_aliases),
                    flag_status(meta),
                    meta.description,
                ]
            )
    else:
        headers = ["Flag", "Argument", "Description"]
        for meta in FlagRegistry.iter_meta():
            rows.append([f"`{meta.name}`", f"`{meta.command_line_argument}`", meta.description])
    console.print(render_markdown_table(headers, rows))


def _emit_text(console: ConsoleLike, *, show_details: bool, vlevel: int) -> None:
    metas: list[FlagMeta] = list(FlagRegistry.iter_meta())
    if vlevel > 0:
        console.print(console.styled("Engine flags:\n", bold=True, underline=True))

    num_width: int = len(str(len(metas)))
    name_width: int = max((len(m.name) for m in metas), default=1)
    for idx, meta in enumerate(metas, start=1):
        line: str = f"{idx:>{num_width}}. {meta.name:<{name_width}} {meta.command_line_argument}"
        if vlevel > 0 and meta.description:
            line += " " + console.styled(meta.description, dim=True)
        console.print(line)
        if show_details:
            for detail in _iter_details(meta):
                console.print(f"{' ' * (num_width + 2)}  {detail}")


def _iter_details(meta: FlagMeta) -> Iterator[str]:
    yield f"metadata key : {meta.metadata_key}"
    if meta.intent_key_aliases:
        yield f"intent keys  : {', '.join(meta.intent_key_aliases)}"
    yield f"takes value  : {'yes' if meta.takes_value else 'no'}"
    status: str = flag_status(meta)
    if status:
        yield f"status       : {status}"


@click.command(
    name="flags",
    help="List all known engine flags.",
    epilog="""
Lists every flag the resolver recognizes, in declaration order. Use --long to see
metadata keys, intent-extra aliases and deprecation/policy status.
""",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (metadata key, intent keys, status).",
)
def flags_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List the flag catalog.

    Args:
        show_details (bool): If True, include every spelling and status field.
        output_format (OutputFormat | None): Output format; text when omitted.
    """
    ctx: click.Context = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if is_machine_format(fmt):
        out: str | Iterator[str] = serialize_collection(
            fmt=fmt,
            meta=build_meta_payload(),
            kind=MachineKind.FLAG,
            container_key="flags",
            items=list(build_flags_payload(show_details=show_details)),
        )
        if isinstance(out, str):
            console.print(out)
        else:
            for line in out:
                console.print(line)
        return

    if fmt == OutputFormat.MARKDOWN:
        _emit_markdown(console, show_details=show_details)
        return

    _emit_text(console, show_details=show_details, vlevel=get_effective_verbosity(ctx))
