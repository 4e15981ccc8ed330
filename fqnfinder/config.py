"""Core data types and configuration for fqnfinder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Flag
from pathlib import Path
from typing import Any

import yaml

from fqnfinder.errors import ConfigError


class ConstructKind(Flag):
    CLASS = 1
    INTERFACE = 2
    TRAIT = 4
    ALL = CLASS | INTERFACE | TRAIT

    @classmethod
    def from_names(cls, names: list[str] | str) -> ConstructKind:
        """Combine kind names such as ``["class", "trait"]`` into one flag."""
        if isinstance(names, str):
            names = [names]
        kinds = cls(0)
        for name in names:
            try:
                kinds |= cls[str(name).upper()]
            except KeyError:
                raise ConfigError(f"Unknown construct kind: {name!r}") from None
        return kinds


@dataclass(frozen=True)
class ConstructRecord:
    """A construct confirmed to exist under the target namespace."""
    name: str
    kind: ConstructKind
    path: str


@dataclass
class ResolverConfig:
    source_suffix: str = ".py"
    exclude_dirs: list[str] = field(default_factory=list)
    kinds: ConstructKind = ConstructKind.ALL

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> ResolverConfig:
        """Build from the ``resolver:`` section of a loaded config file."""
        section = data.get("resolver") or {}
        if not isinstance(section, dict):
            raise ConfigError("'resolver' section must be a mapping")

        config = cls()
        if "source_suffix" in section:
            config.source_suffix = str(section["source_suffix"])
        if "exclude_dirs" in section:
            excluded = section["exclude_dirs"] or []
            if isinstance(excluded, str):
                excluded = [excluded]
            config.exclude_dirs = [str(d) for d in excluded]
        if "kinds" in section:
            config.kinds = ConstructKind.from_names(section["kinds"])
        return config


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML config file, or an empty dict if it does not exist."""
    config_path = Path(path)
    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")
    return data
