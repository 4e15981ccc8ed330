"""In-memory type registry for tests and for embedding without imports."""

from __future__ import annotations

from dataclasses import dataclass, field

from fqnfinder.config import ConstructKind


@dataclass
class Definition:
    name: str
    kind: ConstructKind = ConstructKind.CLASS
    bases: tuple[str, ...] = ()
    loaded: bool = False


class InMemoryRegistry:
    """Registry of declared constructs.

    A definition that is not ``loaded`` is invisible until a lookup asks for
    autoloading, which marks it loaded, mirroring an on-demand loader.
    """

    def __init__(self) -> None:
        self.definitions: dict[str, Definition] = {}
        self.load_count = 0

    def define(
        self,
        name: str,
        kind: ConstructKind = ConstructKind.CLASS,
        bases: tuple[str, ...] | list[str] = (),
        loaded: bool = False,
    ) -> Definition:
        defn = Definition(name=name, kind=kind, bases=tuple(bases), loaded=loaded)
        self.definitions[name] = defn
        return defn

    def construct_kind(self, name: str, autoload: bool) -> ConstructKind | None:
        defn = self.definitions.get(name)
        if defn is None:
            return None
        if not defn.loaded:
            if not autoload:
                return None
            defn.loaded = True
            self.load_count += 1
        return defn.kind

    def is_subtype(self, name: str, base: str) -> bool:
        if name == base or name not in self.definitions:
            return False
        seen: set[str] = set()
        pending = list(self.definitions[name].bases)
        while pending:
            current = pending.pop()
            if current == base:
                return True
            if current in seen:
                continue
            seen.add(current)
            parent = self.definitions.get(current)
            if parent:
                pending.extend(parent.bases)
        return False
