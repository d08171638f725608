## augmented polygon contours for Weiler-Atherton clipping
## Copyright (c) 2026 polyclip contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Circular vertex sequences with stable handles.

A ``Contour`` stores its vertices in an append-only list (the arena)
and threads them into a circular doubly-linked sequence through the
``next``/``prev`` indices of each ``Vertex``.  A handle is simply the
arena index of a vertex.  Inserting a vertex appends to the arena and
splices links, so every handle taken before an insertion is still
valid after it.  The ``twin`` of an intersection vertex is a handle
into the *other* contour.

The original polygon vertices are allocated first, so the handle of
the start vertex of original edge ``i`` is ``i``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

from polyclip.errors import InvalidPolygon

Point = Tuple[float, float]


class Classification(Enum):
    """Entry/exit label of an intersection vertex."""
    NONE = "none"
    ENTRY = "entry"
    EXIT = "exit"

    def complement(self) -> "Classification":
        if self is Classification.ENTRY:
            return Classification.EXIT
        if self is Classification.EXIT:
            return Classification.ENTRY
        return Classification.NONE


@dataclass
class Vertex:
    position: Point
    is_intersection: bool = False
    classification: Classification = Classification.NONE
    visited: bool = False
    twin: Optional[int] = None
    edge: Optional[int] = None      # original edge this vertex lies on
    param: float = 0.0              # parametric position along that edge
    next: int = -1
    prev: int = -1


class Contour:
    """One polygon boundary, augmented in place with intersection vertices."""

    def __init__(self, role: str = 'subject'):
        self.role = role
        self._verts: List[Vertex] = []
        self._count = 0

    def __repr__(self):
        return f"Contour({self.role!r}, {self.points()})"

    @classmethod
    def build(cls, points: Sequence[Sequence[float]], role: str = 'subject') -> "Contour":
        """Wrap an ordered point list into a circular contour of plain vertices."""
        if len(points) < 3:
            raise InvalidPolygon(
                f'{role} polygon needs at least 3 points, got {len(points)}', role)
        c = cls(role)
        n = len(points)
        for i, p in enumerate(points):
            c._verts.append(Vertex(position=(float(p[0]), float(p[1])),
                                   edge=i,
                                   next=(i + 1) % n,
                                   prev=(i - 1) % n))
        c._count = n
        return c

    ## traversal primitives

    @property
    def head(self) -> int:
        return 0

    def __len__(self):
        return self._count

    def __getitem__(self, handle: int) -> Vertex:
        return self._verts[handle]

    def next(self, handle: int) -> int:
        return self._verts[handle].next

    def prev(self, handle: int) -> int:
        return self._verts[handle].prev

    def position_of(self, handle: int) -> Point:
        return self._verts[handle].position

    def twin_of(self, handle: int) -> Optional[int]:
        return self._verts[handle].twin

    def __iter__(self) -> Iterator[int]:
        """Iterate over handles in traversal order, starting at the head."""
        h = self.head
        for _ in range(self._count):
            yield h
            h = self._verts[h].next

    def points(self) -> List[Point]:
        return [self._verts[h].position for h in self]

    def original_count(self) -> int:
        return sum(1 for v in self._verts if not v.is_intersection)

    def intersections(self) -> List[int]:
        """Handles of intersection vertices, in traversal order."""
        return [h for h in self if self._verts[h].is_intersection]

    ## mutation

    def insert_after(self, handle: int, vertex: Vertex) -> int:
        """Splice ``vertex`` in immediately after ``handle``; return its handle.

        Several intersections on one edge must be inserted in increasing
        parametric order, each after the previously inserted one.
        """
        new = len(self._verts)
        succ = self._verts[handle].next
        vertex.prev = handle
        vertex.next = succ
        self._verts.append(vertex)
        self._verts[handle].next = new
        self._verts[succ].prev = new
        self._count += 1
        return new


def link_twins(a: Contour, ha: int, b: Contour, hb: int) -> None:
    """Make ``a[ha]`` and ``b[hb]`` mutual twins."""
    a[ha].twin = hb
    b[hb].twin = ha


__all__ = [
    'Classification',
    'Contour',
    'Point',
    'Vertex',
    'link_twins',
]
