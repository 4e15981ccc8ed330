"""Lazy recursive enumeration of source files below a directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from fqnfinder.namespace import Namespace

logger = logging.getLogger(__name__)


def walk_source_files(
    directory: str,
    suffix: str = ".py",
    exclude_dirs: Iterable[str] = (),
) -> Iterator[str]:
    """Yield paths, relative to ``directory``, of files ending in ``suffix``.

    The suffix match is case-insensitive. Every subdirectory is visited except
    those whose name is in ``exclude_dirs``.
    """
    suffix = suffix.lower()
    excluded = set(exclude_dirs)

    for dirpath, dirnames, filenames in os.walk(directory):
        # Filter excluded directories in-place
        dirnames[:] = [d for d in sorted(dirnames) if d not in excluded]

        rel_dir = os.path.relpath(dirpath, directory)
        if rel_dir == ".":
            rel_dir = ""

        for filename in sorted(filenames):
            if not filename.lower().endswith(suffix):
                continue
            if not os.path.isfile(os.path.join(dirpath, filename)):
                continue
            yield os.path.join(rel_dir, filename) if rel_dir else filename


def construct_name_for(
    relative_path: str,
    namespace: Namespace | str,
    suffix: str = ".py",
) -> str:
    """Derive the fully-qualified name a source file is expected to define.

    ``models/User.py`` under ``shop`` becomes ``shop.models.User``.
    """
    stem = relative_path[: -len(suffix)] if suffix else relative_path
    # Normalise path separators
    stem = stem.replace(os.sep, "/").replace("\\", "/")
    return str(Namespace(namespace).child(stem))
