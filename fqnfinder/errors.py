"""Exception types raised by fqnfinder."""

from __future__ import annotations


class ResolverError(Exception):
    """Base class for all fqnfinder errors."""


class NoMatchingPrefixError(ResolverError):
    """No registered prefix is an ancestor of the target namespace."""

    def __init__(self, namespace: str) -> None:
        self.namespace = namespace
        super().__init__(
            f"Could not find registered prefix that matches '{namespace}'"
        )


class InvalidRemainderError(ResolverError):
    """A path was built from a prefix that does not lead to the target."""

    def __init__(self, target: str, prefix: str) -> None:
        self.target = target
        self.prefix = prefix
        super().__init__(f"'{prefix}' is not a namespace prefix of '{target}'")


class ConfigError(ResolverError):
    """A configuration file or section has the wrong shape."""
