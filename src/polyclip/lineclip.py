## segment clipping against boxes and convex polygons
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

"""Parametric segment clippers.

Both routines shrink the parameter window ``[0, 1]`` of the segment
``p0 -> p1`` one constraint at a time and give up as soon as the
window is empty.  ``liang_barsky()`` uses the slabs of an axis-aligned
box, in any number of dimensions; ``cyrus_beck()`` uses the edge
half-planes of a convex polygon.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from polyclip.errors import ClipError, InvalidPolygon
from polyclip.geom import dot, is_ccw, is_convex, mag, sub
from polyclip.weiler import validate_polygon

Segment = Tuple[Tuple[float, ...], Tuple[float, ...]]


def _along(p0, d, t):
    return tuple(a + t * b for a, b in zip(p0, d))


def liang_barsky(p0: Sequence[float], p1: Sequence[float],
                 box_min: Sequence[float], box_max: Sequence[float]) -> Optional[Segment]:
    """Clip segment ``p0 -> p1`` to the box ``[box_min, box_max]``.

    Returns the clipped endpoints, or ``None`` if no part of the segment
    lies inside the box.  All four arguments must have the same length.
    """
    dim = len(p0)
    if not (len(p1) == len(box_min) == len(box_max) == dim):
        raise ClipError('segment and box dimensions differ')
    for axis in range(dim):
        if box_min[axis] > box_max[axis]:
            raise ClipError(f'box min exceeds max on axis {axis}')

    d = [b - a for a, b in zip(p0, p1)]
    t0, t1 = 0.0, 1.0
    for axis in range(dim):
        lo = box_min[axis]
        hi = box_max[axis]
        q0 = p0[axis]
        if d[axis] != 0.0:
            ta = (lo - q0) / d[axis]
            tb = (hi - q0) / d[axis]
            if d[axis] < 0.0:
                ta, tb = tb, ta
            t0 = max(t0, ta)
            t1 = min(t1, tb)
            if t0 > t1:
                return None
        elif q0 < lo or q0 > hi:
            ## parallel to this slab and outside it
            return None
    return (_along(p0, d, t0), _along(p0, d, t1))


def cyrus_beck(p0: Sequence[float], p1: Sequence[float],
               polygon: Sequence[Sequence[float]], eps: float = 1e-6) -> Optional[Segment]:
    """Clip segment ``p0 -> p1`` to a convex polygon.

    The polygon may be wound either way; a non-convex polygon raises
    ``InvalidPolygon``.  Returns the clipped endpoints or ``None``.
    """
    poly: List[Tuple[float, float]] = validate_polygon(polygon, 'clip')
    if not is_convex(poly):
        raise InvalidPolygon('cyrus_beck requires a convex polygon', 'clip')
    if not is_ccw(poly):
        poly.reverse()

    p0 = (float(p0[0]), float(p0[1]))
    p1 = (float(p1[0]), float(p1[1]))
    d = sub(p1, p0)
    te, tl = 0.0, 1.0
    n = len(poly)
    for i in range(n):
        vi = poly[i]
        edge = sub(poly[(i + 1) % n], vi)
        ## outward normal of a counter-clockwise edge
        normal = (edge[1], -edge[0])
        num = dot(normal, sub(vi, p0))
        den = dot(normal, d)
        if abs(den) < eps * mag(normal):
            if num < 0.0:
                return None
            continue
        t = num / den
        if den < 0.0:
            te = max(te, t)
        else:
            tl = min(tl, t)
        if te > tl:
            return None
    return ((p0[0] + te * d[0], p0[1] + te * d[1]),
            (p0[0] + tl * d[0], p0[1] + tl * d[1]))


__all__ = ['cyrus_beck', 'liang_barsky']
