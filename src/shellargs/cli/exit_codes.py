# topmark:header:start
#
#   project      : ShellArgs
#   file         : exit_codes.py
#   file_relpath : src/shellargs/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for ShellArgs CLI.

ShellArgs aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. A lookup that does not match
any flag is an ordinary outcome and exits with `NOT_FOUND` (1).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ShellArgs CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        NOT_FOUND: The queried key does not name a recognized flag.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Manifest missing, unreadable or malformed. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    NOT_FOUND = 1

    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
