# topmark:header:start
#
#   project      : ShellArgs
#   file         : logging.py
#   file_relpath : src/shellargs/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ShellArgs logging: a TRACE level below DEBUG and severity-colored stderr output.

Every module obtains its logger through [`get_logger`][shellargs.config.logging.get_logger],
which returns a [`ShellargsLogger`][shellargs.config.logging.ShellargsLogger] so that
``logger.trace(...)`` is available for per-key translation details. The level is taken
from the ``SHELLARGS_LOG_LEVEL`` environment variable when the CLI starts; logging is
silent (CRITICAL) otherwise, so normal output on stdout stays machine-readable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from shellargs.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ShellargsLogger(logging.Logger):
    """Logger with a ``trace`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ShellargsLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"

# Lowest level first; a record takes the style of the highest threshold it reaches.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (TRACE_LEVEL, chalk.blue),
    (logging.DEBUG, chalk.gray),
    (logging.INFO, chalk.green),
    (logging.WARNING, chalk.yellow),
    (logging.ERROR, chalk.red),
    (logging.CRITICAL, chalk.red_bright),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and apply the style for its level."""
        message: str = super().format(record)
        style: Callable[[str], str] = chalk.dim
        for threshold, level_style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                style = level_style
        return style(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SHELLARGS_LOG_LEVEL``, or None.

    Accepts a level name (case-insensitive, e.g. ``trace``) or a number (e.g. ``10``).
    Unset, empty and unrecognized values yield None.
    """
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    value: str = raw.strip().upper()
    if value.isdigit():
        return int(value)
    return _LEVEL_NAMES.get(value)


def setup_logging(level: int | None = None) -> None:
    """Send log records at ``level`` and above to stderr, replacing earlier handlers.

    Args:
        level (int | None): Logging level; when None the environment is consulted
            and CRITICAL is used if it names no level.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> ShellargsLogger:
    """Return the `ShellargsLogger` named ``name``."""
    return cast("ShellargsLogger", logging.getLogger(name))
