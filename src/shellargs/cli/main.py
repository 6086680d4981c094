# topmark:header:start
#
#   project      : ShellArgs
#   file         : main.py
#   file_relpath : src/shellargs/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs command-line entry point.

Group-level options are initialized once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output verbosity from ``-v`` / ``-q``.
- ``log_level``: internal logging level from ``SHELLARGS_LOG_LEVEL``.
- ``color_enabled`` / ``console``: the console used by every subcommand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shellargs.cli.commands.args import args_command
from shellargs.cli.commands.flags import flags_command
from shellargs.cli.commands.resolve import resolve_command
from shellargs.cli.commands.version import version_command
from shellargs.cli.console import ClickConsole
from shellargs.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from shellargs.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from shellargs.cli.console import ConsoleLike
    from shellargs.config.logging import ShellargsLogger

logger: ShellargsLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", ctx.obj["verbosity_level"], enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Resolve Flutter engine flags from arguments, manifest metadata and intent extras.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ShellArgs CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'shellargs flags' to list the known engine flags.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(flags_command)

cli.add_command(resolve_command)

cli.add_command(args_command)

if __name__ == "__main__":
    cli()
