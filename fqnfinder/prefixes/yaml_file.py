"""Prefix table read from the ``prefixes:`` section of a YAML config file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fqnfinder.config import load_config
from fqnfinder.errors import ConfigError
from fqnfinder.prefixes.base import normalise_table

logger = logging.getLogger(__name__)


class YamlPrefixTable:
    """Reads prefixes from a config file on every call.

    Relative base directories are taken relative to the config file, so a
    checked-in config works from any working directory.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get_prefixes(self) -> dict[str, list[str]]:
        data = load_config(self.path)
        if not data:
            logger.debug("No prefix config at %s", self.path)
            return {}

        section = data.get("prefixes") or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'prefixes' in {self.path} must be a mapping")

        for prefix, paths in section.items():
            if isinstance(paths, str):
                continue
            if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
                raise ConfigError(
                    f"Prefix {prefix!r} in {self.path} must map to a path or a list of paths"
                )

        root = self.path.parent
        table = normalise_table({"" if k is None else k: v for k, v in section.items()})
        return {
            prefix: [os.path.normpath(root / p) for p in paths]
            for prefix, paths in table.items()
        }
