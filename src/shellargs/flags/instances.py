# topmark:header:start
#
#   project      : ShellArgs
#   file         : instances.py
#   file_relpath : src/shellargs/flags/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Flag catalog for ShellArgs.

Builds the process-wide catalog of [`shellargs.flags.base.Flag`][] objects from
the built-in topical modules. The catalog is constructed on first access,
exactly once, and cached for the lifetime of the process.

Construction verifies the catalog invariants and raises
[`FlagCatalogError`][shellargs.flags.errors.FlagCatalogError] on any violation:

* every module-level ``Flag`` constant of a built-in module is listed in that
  module's ``FLAGS`` (and every ``FLAGS`` entry is such a constant),
* every deprecated flag's replacement is itself registered,
* every non-deprecated flag's metadata key uses the reserved namespace, and
* no spelling is shared between flags (enforced by
  [`FlagIndex.build`][shellargs.flags.index.FlagIndex.build]).
"""

from __future__ import annotations

from importlib import import_module
from threading import Lock
from typing import TYPE_CHECKING, Any, Final

from shellargs.config.logging import ShellargsLogger, get_logger
from shellargs.constants import METADATA_KEY_PREFIX
from shellargs.flags.base import Flag
from shellargs.flags.errors import FlagCatalogError
from shellargs.flags.index import FlagIndex

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import ModuleType

logger: ShellargsLogger = get_logger(__name__)

BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "shellargs.flags.builtins.snapshots",
    "shellargs.flags.builtins.runtime",
    "shellargs.flags.builtins.tracing",
    "shellargs.flags.builtins.rendering",
)


def declared_flags(mod: ModuleType) -> dict[str, Flag]:
    """Return the module-level ``Flag`` constants of ``mod`` keyed by attribute name."""
    return {attr: obj for attr, obj in vars(mod).items() if isinstance(obj, Flag)}


def registered_flags(mod: ModuleType) -> list[Flag]:
    """Return the ``FLAGS`` list of a built-in module after checking it is complete.

    Args:
        mod (ModuleType): A built-in flag module.

    Returns:
        list[Flag]: The module's flags in declaration order.

    Raises:
        FlagCatalogError: If ``FLAGS`` is missing, holds non-Flag entries, omits a
            declared constant, or lists a flag that is not declared under its name.
    """
    modname: str = mod.__name__
    flags: Any = getattr(mod, "FLAGS", None)
    if not isinstance(flags, list):
        raise FlagCatalogError(f"Module {modname} has no FLAGS list")

    registered: list[Flag] = []
    for obj in flags:
        if not isinstance(obj, Flag):
            raise FlagCatalogError(f"Non-Flag entry in {modname}.FLAGS: {obj!r}")
        registered.append(obj)

    declared: dict[str, Flag] = declared_flags(mod)
    registered_ids: set[int] = {id(f) for f in registered}

    missing: list[str] = sorted(
        attr for attr, flag in declared.items() if id(flag) not in registered_ids
    )
    if missing:
        raise FlagCatalogError(
            f"Flags declared in {modname} but not listed in FLAGS "
            f"(they would be silently ignored): {', '.join(missing)}"
        )

    for flag in registered:
        if declared.get(flag.name) is not flag:
            raise FlagCatalogError(
                f"{modname}.FLAGS entry {flag.name} is not declared as {modname}.{flag.name}"
            )
    return registered


def _iter_builtin_flags() -> Iterable[Flag]:
    """Yield built-in flags module by module, in declaration order."""
    for modname in BUILTIN_MODULES:
        mod: ModuleType = import_module(modname)
        yield from registered_flags(mod)


class FlagCatalog:
    """Immutable, exhaustive collection of declared flags plus their lookup indices.

    Instances are normally obtained through
    [`get_flag_catalog`][shellargs.flags.instances.get_flag_catalog]; use
    [`from_flags`][shellargs.flags.instances.FlagCatalog.from_flags] to build an
    isolated catalog (e.g. in tests).
    """

    __slots__ = ("_flags", "_index")

    def __init__(self, flags: Sequence[Flag], index: FlagIndex) -> None:
        self._flags: tuple[Flag, ...] = tuple(flags)
        self._index: FlagIndex = index

    @classmethod
    def from_flags(cls, flags: Iterable[Flag]) -> FlagCatalog:
        """Validate ``flags`` and build their indices.

        Args:
            flags (Iterable[Flag]): The complete set of flags, in declaration order.

        Returns:
            FlagCatalog: The validated catalog.

        Raises:
            FlagCatalogError: If a replacement is not registered or a current flag
                uses a metadata key outside the reserved namespace.
            DuplicateFlagKeyError: If two flags share a spelling.
        """
        ordered: tuple[Flag, ...] = tuple(flags)
        index: FlagIndex = FlagIndex.build(ordered)

        for flag in ordered:
            if flag.replacement is not None:
                target: Flag | None = index.by_argument.get(
                    flag.replacement.command_line_argument
                )
                if target != flag.replacement:
                    raise FlagCatalogError(
                        f"Deprecated flag {flag.name} is replaced by unregistered "
                        f"flag {flag.replacement.name}"
                    )
            elif not flag.metadata_key.startswith(METADATA_KEY_PREFIX):
                raise FlagCatalogError(
                    f"Flag {flag.name}: metadata key {flag.metadata_key!r} must start "
                    f"with {METADATA_KEY_PREFIX!r}"
                )

        return cls(ordered, index)

    @property
    def index(self) -> FlagIndex:
        """Return the lookup indices for this catalog."""
        return self._index

    def all_flags(self) -> tuple[Flag, ...]:
        """Return every flag in declaration order."""
        return self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, flag: object) -> bool:
        return isinstance(flag, Flag) and self._index.by_argument.get(
            flag.command_line_argument
        ) == flag


_lock = Lock()
_catalog: FlagCatalog | None = None


def get_flag_catalog() -> FlagCatalog:
    """Return (and cache) the process-wide flag catalog.

    The first call builds and validates the catalog under a lock; every later
    call returns the same object.

    Raises:
        FlagCatalogError: If the built-in declarations violate a catalog invariant.
    """
    global _catalog
    if _catalog is None:
        with _lock:
            if _catalog is None:
                catalog: FlagCatalog = FlagCatalog.from_flags(_iter_builtin_flags())
                logger.debug("Loaded %d flags", len(catalog))
                _catalog = catalog
    return _catalog
