"""Prefix table derived from the interpreter's import roots."""

from __future__ import annotations

import os
import sys


class SysPathPrefixTable:
    """Maps the root namespace to every directory on ``sys.path``.

    This is how the import system itself locates top-level packages, so a
    resolver using it sees what ``import`` would see.
    """

    def __init__(self, paths: list[str] | None = None) -> None:
        self.paths = paths

    def get_prefixes(self) -> dict[str, list[str]]:
        entries = sys.path if self.paths is None else self.paths
        directories: list[str] = []
        for entry in entries:
            if not entry or not os.path.isdir(entry):
                continue
            path = os.path.abspath(entry)
            if path not in directories:
                directories.append(path)
        return {"": directories}
