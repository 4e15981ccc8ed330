"""Type registry protocol and construct classification."""

from __future__ import annotations

import inspect
from typing import Protocol, runtime_checkable

from fqnfinder.config import ConstructKind


@runtime_checkable
class TypeRegistry(Protocol):
    """Protocol that every type registry must implement."""

    def construct_kind(self, name: str, autoload: bool) -> ConstructKind | None:
        """Return the kind of the construct called ``name``, or None.

        With ``autoload`` False the registry must only consult constructs that
        are already loaded.
        """
        ...

    def is_subtype(self, name: str, base: str) -> bool:
        """True if ``name`` strictly subclasses or implements ``base``."""
        ...


def classify(obj: object) -> ConstructKind | None:
    """Map a class object onto a construct kind; None for non-classes."""
    if not inspect.isclass(obj):
        return None
    if getattr(obj, "_is_protocol", False) or inspect.isabstract(obj):
        return ConstructKind.INTERFACE
    if obj.__name__.endswith("Mixin"):
        return ConstructKind.TRAIT
    return ConstructKind.CLASS
