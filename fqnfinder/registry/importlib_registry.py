"""Type registry backed by the Python import system."""

from __future__ import annotations

import importlib
import logging
import sys
from abc import ABCMeta
from types import ModuleType

from fqnfinder.config import ConstructKind
from fqnfinder.registry.base import classify

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_resolvable(parts: list[str]) -> bool:
    """Reject names that cannot be, or must not be, imported."""
    for part in parts:
        if not part.isidentifier():
            return False
        if part.startswith("__") and part.endswith("__"):
            return False
    return True


def _within(module_name: str, missing: str) -> bool:
    return module_name == missing or module_name.startswith(missing + ".")


def _lookup_attrs(obj: object, attrs: list[str]) -> object:
    for attr in attrs:
        obj = getattr(obj, attr, _MISSING)
        if obj is _MISSING:
            return _MISSING
    return obj


def _as_construct(obj: object, name: str) -> object:
    """Unwrap a module laid out as one construct per file.

    ``shop/User.py`` defining ``class User`` is reached as module
    ``shop.User``; the construct is its same-named attribute.
    """
    if isinstance(obj, ModuleType):
        return getattr(obj, name.rsplit(".", 1)[-1], _MISSING)
    return obj


class ImportlibRegistry:
    """Resolves dotted names through ``sys.modules`` and ``importlib``."""

    def resolve(self, name: str, autoload: bool = True) -> object | None:
        """Return the class ``name`` refers to, or None."""
        parts = name.split(".")
        if not name or not _is_resolvable(parts):
            logger.debug("Not a resolvable construct name: %s", name)
            return None

        obj = self._import(parts) if autoload else self._from_loaded(parts)
        obj = _as_construct(obj, name)
        if obj is _MISSING or classify(obj) is None:
            return None
        return obj

    def construct_kind(self, name: str, autoload: bool) -> ConstructKind | None:
        return classify(self.resolve(name, autoload=autoload))

    def is_subtype(self, name: str, base: str) -> bool:
        cls = self.resolve(name)
        base_cls = self.resolve(base)
        if cls is None or base_cls is None or cls is base_cls:
            return False
        if base_cls in cls.__mro__[1:]:
            return True
        # Protocols only match nominally; other ABCs may have virtual subclasses
        if isinstance(base_cls, ABCMeta) and not getattr(base_cls, "_is_protocol", False):
            return issubclass(cls, base_cls)
        return False

    def _from_loaded(self, parts: list[str]) -> object:
        for i in range(len(parts), 0, -1):
            module = sys.modules.get(".".join(parts[:i]))
            if module is not None:
                return _lookup_attrs(module, parts[i:])
        return _MISSING

    def _import(self, parts: list[str]) -> object:
        for i in range(len(parts), 0, -1):
            module_name = ".".join(parts[:i])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                # A missing dependency inside an existing module is a failure,
                # not a sign that the prefix is shorter
                if e.name is not None and not _within(module_name, e.name):
                    logger.warning("Failed to import %s: %s", module_name, e)
                    return _MISSING
                continue
            except (Exception, SystemExit) as e:
                # Scripts and stale files define no construct
                logger.warning("Failed to import %s: %s", module_name, e)
                return _MISSING
            return _lookup_attrs(module, parts[i:])
        return _MISSING
