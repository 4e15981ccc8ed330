"""Prefix table provider protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class PrefixTableProvider(Protocol):
    """Source of namespace-prefix -> base directory mappings."""

    def get_prefixes(self) -> dict[str, list[str]]:
        """Return every registered prefix with its ordered base directories."""
        ...


def normalise_table(mapping: Mapping[str, str | list[str]]) -> dict[str, list[str]]:
    """Copy a prefix table, promoting single paths to one-element lists."""
    table: dict[str, list[str]] = {}
    for prefix, paths in mapping.items():
        if isinstance(paths, str):
            paths = [paths]
        table[str(prefix)] = [str(p) for p in paths]
    return table
