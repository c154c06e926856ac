"""Module identities and the name resolver.

// [LAW:one-source-of-truth] ModuleId declaration order IS the canonical
//   display/navigation order. Names are the member names.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import IntEnum
from types import MappingProxyType

from logdeck.core.errors import NameNotResolved


class ModuleId(IntEnum):
    """Fixed set of report panels, in canonical order."""

    VISITORS = 0
    REQUESTS = 1
    REQUESTS_STATIC = 2
    NOT_FOUND = 3
    HOSTS = 4
    OS = 5
    BROWSERS = 6
    VISIT_TIMES = 7
    VIRTUAL_HOSTS = 8
    REFERRERS = 9
    REFERRING_SITES = 10
    KEYPHRASES = 11
    GEO_LOCATION = 12
    STATUS_CODES = 13


TOTAL_MODULES = len(ModuleId)

# Position 0 of the canonical order; used whenever a "current module" is
# required but nothing is active.
DEFAULT_MODULE = ModuleId.VISITORS


class NameResolver:
    """Maps stable, case-sensitive module names to ModuleId values."""

    def __init__(self, modules: Iterable[ModuleId] = ModuleId):
        table = {m.name: m for m in modules}
        self._table: Mapping[str, ModuleId] = MappingProxyType(table)

    def resolve(self, name: str) -> ModuleId | None:
        """Return the identity for ``name``, or None when nothing matches exactly."""
        return self._table.get(name)

    def resolve_or_raise(self, name: str) -> ModuleId:
        module = self.resolve(name)
        if module is None:
            raise NameNotResolved(name)
        return module

    def names(self) -> tuple[str, ...]:
        return tuple(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table


# [LAW:one-source-of-truth] Built once at import; every consumer shares it.
DEFAULT_RESOLVER = NameResolver()


def get_module_enum(name: str) -> ModuleId | None:
    """Resolve ``name`` with the default resolver."""
    return DEFAULT_RESOLVER.resolve(name)
