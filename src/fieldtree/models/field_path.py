"""Structured field paths.

A FieldPath is an immutable chain of elements pointing at a location inside a
validated object, e.g. ``spec.containers[0].image``. Paths are built from a
root with :meth:`FieldPath.new_path` and extended with :meth:`child`,
:meth:`index` and :meth:`key`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Rendering of a path with no (or only empty) elements.
EMPTY_PATH_STRING = ""


@dataclass(frozen=True)
class FieldPath:
    """One element of a field path, linked to its parent.

    Attributes:
        name: Field name of this element (empty for subscripts)
        subscript: Index or map key rendered as ``[subscript]``
        parent: Preceding element, or None for the root
    """

    name: str = ""
    subscript: str = ""
    parent: FieldPath | None = None

    @classmethod
    def new_path(cls, name: str, *more: str) -> FieldPath:
        """Create a root path, optionally followed by more named children."""
        root = cls(name=name)
        if not more:
            return root
        return root.child(more[0], *more[1:])

    @classmethod
    def from_segments(cls, segments: Sequence[str]) -> FieldPath:
        """Build a path from an ordered list of field names.

        An empty list yields the empty path.
        """
        if not segments:
            return cls()
        return cls.new_path(segments[0], *segments[1:])

    def child(self, name: str, *more: str) -> FieldPath:
        """Return a new path with the given names appended."""
        path = FieldPath(name=name, parent=self)
        for extra in more:
            path = FieldPath(name=extra, parent=path)
        return path

    def index(self, position: int) -> FieldPath:
        """Return a new path subscripted by a list index."""
        return FieldPath(subscript=str(position), parent=self)

    def key(self, map_key: str) -> FieldPath:
        """Return a new path subscripted by a map key."""
        return FieldPath(subscript=map_key, parent=self)

    def root(self) -> FieldPath:
        """Return the first element of this path."""
        element = self
        while element.parent is not None:
            element = element.parent
        return element

    def elements(self) -> list[FieldPath]:
        """Return all elements from the root to this one."""
        chain: list[FieldPath] = []
        element: FieldPath | None = self
        while element is not None:
            chain.append(element)
            element = element.parent
        chain.reverse()
        return chain

    def __str__(self) -> str:
        """Render the path with ``.`` separators and ``[...]`` subscripts."""
        parts: list[str] = []
        for position, element in enumerate(self.elements()):
            if element.subscript:
                parts.append(f"[{element.subscript}]")
                continue
            if position > 0 and element.name:
                parts.append(".")
            parts.append(element.name)
        return "".join(parts)
