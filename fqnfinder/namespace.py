"""Immutable dotted namespace value with segment-aligned prefix checks."""

from __future__ import annotations

import re

_DELIMITERS = re.compile(r"[./\\]+")


class Namespace:
    """A namespace as an ordered tuple of segments.

    Accepts ``.``, ``/`` and ``\\`` as delimiters on input and always renders
    dot-joined. The empty string is the root namespace, which every other
    namespace starts with.
    """

    DELIMITER = "."

    __slots__ = ("_segments",)

    def __init__(self, value: str | Namespace = "") -> None:
        if isinstance(value, Namespace):
            self._segments: tuple[str, ...] = value.segments
        else:
            self._segments = tuple(
                part for part in _DELIMITERS.split(value.strip()) if part
            )

    @classmethod
    def from_segments(cls, segments: tuple[str, ...] | list[str]) -> Namespace:
        ns = cls()
        ns._segments = tuple(s for s in segments if s)
        return ns

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    def is_root(self) -> bool:
        return not self._segments

    def length(self) -> int:
        """Number of segments, used to rank competing prefixes."""
        return len(self._segments)

    def starts_with(self, other: Namespace | str) -> bool:
        """True if ``other``'s segments are a leading run of ours."""
        prefix = Namespace(other).segments
        return self._segments[: len(prefix)] == prefix

    def remainder(self, prefix: Namespace | str) -> tuple[str, ...]:
        """Segments left after stripping ``prefix``."""
        prefix = Namespace(prefix)
        if not self.starts_with(prefix):
            raise ValueError(f"'{prefix}' is not a prefix of '{self}'")
        return self._segments[prefix.length():]

    def child(self, relative: str | Namespace) -> Namespace:
        """Append the segments of a relative name."""
        return Namespace.from_segments(self._segments + Namespace(relative).segments)

    def __str__(self) -> str:
        return self.DELIMITER.join(self._segments)

    def __repr__(self) -> str:
        return f"Namespace({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Namespace):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)
