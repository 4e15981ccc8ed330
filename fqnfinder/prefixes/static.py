"""Prefix table held in memory."""

from __future__ import annotations

from collections.abc import Mapping

from fqnfinder.prefixes.base import normalise_table


class StaticPrefixTable:
    def __init__(self, mapping: Mapping[str, str | list[str]]) -> None:
        self._table = normalise_table(mapping)

    def get_prefixes(self) -> dict[str, list[str]]:
        return normalise_table(self._table)
