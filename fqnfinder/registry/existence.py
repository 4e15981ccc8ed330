"""Two-step existence check for constructs."""

from __future__ import annotations

from fqnfinder.config import ConstructKind
from fqnfinder.registry.base import TypeRegistry


class ConstructExistenceChecker:
    """Asks a registry whether a name is a construct of an accepted kind.

    Already-loaded constructs are looked up first so that no load is paid for
    them; only on a miss is the registry allowed to load on demand. A name that
    fails both lookups is simply absent.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        kinds: ConstructKind = ConstructKind.ALL,
    ) -> None:
        self.registry = registry
        self.kinds = kinds

    def exists(self, name: str) -> bool:
        return self.kind_of(name) is not None

    def kind_of(self, name: str) -> ConstructKind | None:
        """Kind of an accepted construct called ``name``, or None."""
        for autoload in (False, True):
            kind = self.registry.construct_kind(name, autoload=autoload)
            if kind is not None and kind in self.kinds:
                return kind
        return None
