# topmark:header:start
#
#   project      : ShellArgs
#   file         : __init__.py
#   file_relpath : src/shellargs/flags/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flag model, built-in declarations and the process-wide catalog.

Integrators should prefer the resolver facade in
[`shellargs.registry`][shellargs.registry]; this package holds the data it
answers from.
"""

from __future__ import annotations

from .base import Flag
from .errors import DuplicateFlagKeyError, FlagCatalogError
from .index import FlagIndex
from .instances import FlagCatalog, get_flag_catalog

__all__ = [
    "Flag",
    "FlagCatalog",
    "FlagIndex",
    "FlagCatalogError",
    "DuplicateFlagKeyError",
    "get_flag_catalog",
]
