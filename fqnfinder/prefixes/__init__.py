"""Providers of the namespace-prefix -> base directory table."""

from fqnfinder.prefixes.base import PrefixTableProvider
from fqnfinder.prefixes.static import StaticPrefixTable
from fqnfinder.prefixes.sys_path import SysPathPrefixTable
from fqnfinder.prefixes.yaml_file import YamlPrefixTable

__all__ = [
    "PrefixTableProvider",
    "StaticPrefixTable",
    "SysPathPrefixTable",
    "YamlPrefixTable",
]
