"""Namespace-to-filesystem translation: path building and source walking."""

from fqnfinder.paths.builder import PathBuilder
from fqnfinder.paths.walker import construct_name_for, walk_source_files

__all__ = ["PathBuilder", "construct_name_for", "walk_source_files"]
