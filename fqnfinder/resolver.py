"""Resolve a namespace to its directories and the constructs defined there."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from fqnfinder.config import ConstructKind, ConstructRecord, ResolverConfig, load_config
from fqnfinder.errors import NoMatchingPrefixError
from fqnfinder.namespace import Namespace
from fqnfinder.paths import PathBuilder, construct_name_for, walk_source_files
from fqnfinder.prefixes import (
    PrefixTableProvider,
    StaticPrefixTable,
    SysPathPrefixTable,
    YamlPrefixTable,
)
from fqnfinder.registry import ConstructExistenceChecker, ImportlibRegistry, TypeRegistry

logger = logging.getLogger(__name__)


class Resolver:
    """Finds directories and constructs registered for a namespace.

    Example::

        resolver = Resolver("shop.models", {"shop": ["src/shop"]})
        resolver.find_directories()      # ["src/shop/models"]
        resolver.find_constructs()       # ["shop.models.Order", ...]

    Every call recomputes from the prefix table and the filesystem.
    """

    def __init__(
        self,
        namespace: Namespace | str,
        prefixes: PrefixTableProvider | Mapping[str, str | list[str]] | None = None,
        registry: TypeRegistry | None = None,
        config: ResolverConfig | None = None,
    ) -> None:
        self.set_namespace(namespace)
        if prefixes is None:
            prefixes = SysPathPrefixTable()
        elif isinstance(prefixes, Mapping):
            prefixes = StaticPrefixTable(prefixes)
        self.prefixes: PrefixTableProvider = prefixes
        self.registry: TypeRegistry = registry or ImportlibRegistry()
        self.config = config or ResolverConfig()

    @classmethod
    def from_config_file(
        cls,
        namespace: Namespace | str,
        path: str,
        registry: TypeRegistry | None = None,
    ) -> Resolver:
        """Build a resolver from a YAML file with `prefixes:` and `resolver:` sections."""
        config = ResolverConfig.from_mapping(load_config(path))
        return cls(namespace, YamlPrefixTable(path), registry, config)

    def set_namespace(self, namespace: Namespace | str) -> None:
        self._namespace = Namespace(namespace)

    def get_namespace(self) -> Namespace:
        return self._namespace

    def find_directories(self) -> list[str]:
        """Return existing directories mapped to the namespace, in table order."""
        table = self.prefixes.get_prefixes()
        match = _find_namespace_prefix(self._namespace, table)
        if match is None:
            raise NoMatchingPrefixError(str(self._namespace))

        key, prefix = match
        logger.debug("Namespace %r matched prefix %r", str(self._namespace), key)

        discovered: list[str] = []
        for base_path in table[key]:
            path = PathBuilder(base_path, prefix).resolve(self._namespace)
            path = os.path.abspath(path)
            if os.path.isdir(path):
                discovered.append(path)
            else:
                logger.debug("Skipping missing directory: %s", path)
        return discovered

    def find_constructs(
        self,
        instance_of: str | type | None = None,
        kinds: ConstructKind | None = None,
    ) -> list[str]:
        """Return the sorted names of constructs under the namespace.

        Args:
            instance_of: Optional dotted name or class; only strict subtypes
                of it are kept.
            kinds: Construct kinds to accept. Defaults to the configured kinds.
        """
        return [r.name for r in self.find_construct_records(instance_of, kinds)]

    def find_construct_records(
        self,
        instance_of: str | type | None = None,
        kinds: ConstructKind | None = None,
    ) -> list[ConstructRecord]:
        """Like find_constructs, but with each construct's kind and source file."""
        checker = ConstructExistenceChecker(
            self.registry, self.config.kinds if kinds is None else kinds
        )

        found: dict[str, ConstructRecord] = {}
        for directory in self.find_directories():
            for record in self._scan_directory(directory, checker):
                found.setdefault(record.name, record)

        records = [found[name] for name in sorted(found)]

        if instance_of is not None:
            base = _type_name(instance_of)
            if self.registry.construct_kind(base, autoload=True) is None:
                logger.warning("Filter type %s could not be resolved", base)
            records = [r for r in records if self.registry.is_subtype(r.name, base)]

        return records

    def _scan_directory(self, directory: str, checker: ConstructExistenceChecker):
        suffix = self.config.source_suffix
        for rel_path in walk_source_files(directory, suffix, self.config.exclude_dirs):
            name = construct_name_for(rel_path, self._namespace, suffix)
            kind = checker.kind_of(name)
            if kind is None:
                logger.debug("No construct named %s in %s", name, rel_path)
                continue
            yield ConstructRecord(
                name=name,
                kind=kind,
                path=os.path.abspath(os.path.join(directory, rel_path)),
            )


def _find_namespace_prefix(
    namespace: Namespace,
    table: Mapping[str, list[str]],
) -> tuple[str, Namespace] | None:
    """Pick the longest registered prefix of ``namespace``; first wins ties."""
    best: tuple[str, Namespace] | None = None
    for key in table:
        prefix = Namespace(key)
        if namespace.starts_with(prefix) and (
            best is None or prefix.length() > best[1].length()
        ):
            best = (key, prefix)
    return best


def _type_name(value: str | type) -> str:
    if isinstance(value, type):
        return f"{value.__module__}.{value.__qualname__}"
    return str(Namespace(value))
