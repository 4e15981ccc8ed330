"""Type registries answering "does this construct exist" and subtype queries."""

from fqnfinder.registry.base import TypeRegistry, classify
from fqnfinder.registry.existence import ConstructExistenceChecker
from fqnfinder.registry.importlib_registry import ImportlibRegistry
from fqnfinder.registry.memory import InMemoryRegistry

__all__ = [
    "ConstructExistenceChecker",
    "ImportlibRegistry",
    "InMemoryRegistry",
    "TypeRegistry",
    "classify",
]
