"""fqnfinder - resolve namespaces to directories and the constructs they define."""

from fqnfinder.config import ConstructKind, ConstructRecord, ResolverConfig, load_config
from fqnfinder.errors import (
    ConfigError,
    InvalidRemainderError,
    NoMatchingPrefixError,
    ResolverError,
)
from fqnfinder.namespace import Namespace
from fqnfinder.resolver import Resolver

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "ConstructKind",
    "ConstructRecord",
    "InvalidRemainderError",
    "Namespace",
    "NoMatchingPrefixError",
    "Resolver",
    "ResolverConfig",
    "ResolverError",
    "load_config",
]
