"""Translate a namespace into a directory below a registered base path."""

from __future__ import annotations

import os

from fqnfinder.errors import InvalidRemainderError
from fqnfinder.namespace import Namespace


class PathBuilder:
    """Builds directory paths for namespaces under one registered prefix.

    ``base_path`` is the directory registered for ``prefix``; any namespace
    below the prefix maps to ``base_path`` plus the remaining segments.
    """

    def __init__(self, base_path: str, prefix: Namespace | str) -> None:
        self.base_path = base_path
        self.prefix = Namespace(prefix)

    def resolve(self, namespace: Namespace | str) -> str:
        """Return the directory for ``namespace``. Existence is not checked."""
        target = Namespace(namespace)
        if not target.starts_with(self.prefix):
            raise InvalidRemainderError(str(target), str(self.prefix))

        remainder = target.remainder(self.prefix)
        if not remainder:
            return self.base_path
        return os.path.join(self.base_path, *remainder)
