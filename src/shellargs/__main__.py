# topmark:header:start
#
#   project      : ShellArgs
#   file         : __main__.py
#   file_relpath : src/shellargs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for ShellArgs.

Examples:
    Resolve a manifest key using the module interface::

        python -m shellargs resolve --kind metadata io.flutter.embedding.android.EnableImpeller
"""

from __future__ import annotations

from shellargs.cli.main import cli

if __name__ == "__main__":
    cli()
