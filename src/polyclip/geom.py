## foundational 2D computational geometry kernel for polyclip
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

"""foundational 2D computational geometry kernel for **polyclip**

====================
OVERVIEW
====================

The polyclip.geom module provides the small set of planar operations
the clipping algorithms are built on: point and vector arithmetic,
segment-segment intersection in parameter space, even-odd inside
testing, and a few polygon predicates (signed area, winding,
convexity, collinear overlap).

points
======

Points are Python3 tuples of two floats, ``(x, y)``.  They are plain
values with no identity.  The ``point()`` convenience function will
make a point out of just about any plausible argument, and functions
in this module accept any indexable pair (lists, tuples, numpy rows),
but always return tuples.

segments
========

A segment from ``p`` to ``q`` is parameterized over `0 <= t <= 1`,
where `t=0` corresponds to ``p`` and `t=1` to ``q``.  Most functions
take a segment in "origin plus direction" form, ``p`` and ``r = q - p``,
so that a point on the segment is ``p + t*r``.

constants
=========

``epsilon`` is the default absolute tolerance used for the
cross-product parallel test and for coincidence tests.  It is passed
explicitly by callers that carry their own configuration, so the
functions here keep no mutable state and are safe to call from any
thread.

"""

from math import isfinite, sqrt

## constants
epsilon = 1e-9


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, eps=epsilon):
    """ are two scalars the same within ``eps``
    """
    return abs(a - b) < eps


## operations on points and vectors
## --------------------------------

def point(x, y=None):
    """Convenience function for making a 2D point, either from two
    scalars or from any indexable object with at least two elements"""
    if y is None:
        return (float(x[0]), float(x[1]))
    return (float(x), float(y))


def ispoint(x):
    """ is ``x`` an indexable pair of finite, non-boolean numbers?"""
    try:
        if len(x) < 2:
            return False
    except TypeError:
        return False
    return all(isgoodnum(c) and isfinite(c) for c in (x[0], x[1]))


def add(a, b):
    """ `a + b`"""
    return (a[0] + b[0], a[1] + b[1])


def sub(a, b):
    """ `a - b`"""
    return (a[0] - b[0], a[1] - b[1])


def scale(a, c):
    """ vector ``a`` times scalar ``c``"""
    return (a[0] * c, a[1] * c)


def dot(a, b):
    return a[0] * b[0] + a[1] * b[1]


## z component of the 3D cross product of two vectors in the XY plane
def cross(a, b):
    """ scalar 2D cross product, `a.x*b.y - a.y*b.x`"""
    return a[0] * b[1] - a[1] * b[0]


def mag(a):
    return sqrt(a[0] * a[0] + a[1] * a[1])


def dist(a, b):
    """ euclidean distance between points ``a`` and ``b``"""
    return mag(sub(a, b))


def vclose(a, b, eps=epsilon):
    """ are two points the same within ``eps``"""
    return dist(a, b) < eps


def lerp(p, q, t):
    """ point at parameter ``t`` along the segment from ``p`` to ``q``"""
    return (p[0] + t * (q[0] - p[0]), p[1] + t * (q[1] - p[1]))


## operations on segments
## ----------------------

## Solve p + t*r = q + u*s for (t, u).  Returns None when the edges are
## parallel or degenerate (|r x s| below eps).  The caller decides
## whether t and u fall inside the segments.
def segment_intersection(p, r, q, s, eps=epsilon):
    """Compute the parameter-space intersection of the segment ``p ->
    p+r`` and the segment ``q -> q+s``.

    Returns ``(t, u)`` such that ``p + t*r == q + u*s``, or ``None`` if
    the magnitude of the cross product ``r x s`` is below ``eps``.  No
    range check is made on ``t`` or ``u``: the result describes the
    intersection of the two infinite lines, and it is up to the caller
    to accept it only when both parameters lie within the segments.
    Collinear overlapping segments also return ``None``; use
    ``segments_overlap()`` to detect them.
    """
    rxs = cross(r, s)
    if abs(rxs) < eps:
        return None
    qp = sub(q, p)
    t = cross(qp, s) / rxs
    u = cross(qp, r) / rxs
    return (t, u)


def segments_overlap(a0, a1, b0, b1, eps=epsilon):
    """Determine if segments ``a0 -> a1`` and ``b0 -> b1`` are collinear
    and share a stretch of positive length (longer than ``eps``)."""
    r = sub(a1, a0)
    s = sub(b1, b0)
    lr = mag(r)
    ls = mag(s)
    if lr < eps or ls < eps:
        return False
    ## parallel?
    if abs(cross(r, s)) > eps * lr * ls:
        return False
    ## collinear?  distance of b0 from the line through a
    if abs(cross(r, sub(b0, a0))) / lr > eps:
        return False
    ## overlap of the projections onto a, in a's parameter space
    tb0 = dot(sub(b0, a0), r) / (lr * lr)
    tb1 = dot(sub(b1, a0), r) / (lr * lr)
    lo = max(0.0, min(tb0, tb1))
    hi = min(1.0, max(tb0, tb1))
    return (hi - lo) * lr > eps


## operations on polygons
## ----------------------

## Polygons are sequences of three or more points, implicitly closed
## (the last point connects back to the first).

## Count the crossings of a horizontal ray from pt towards +x.
## Inside only if the number of crossings is odd.  Points exactly on
## the boundary may be reported either way.
def point_in_polygon(pt, polygon):
    """
    Determine if point ``pt`` lies inside the implicitly closed polygon
    ``polygon`` by the even-odd ray crossing method.  Correct for any
    simple polygon; undefined for points lying exactly on the boundary.
    """
    x, y = pt[0], pt[1]
    inside = False
    n = len(polygon)
    if n < 3:
        return False
    j = n - 1
    for i in range(n):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        ## the straddle test excludes horizontal edges, so yj != yi below
        if (yi > y) != (yj > y):
            xcross = xi + (y - yi) * (xj - xi) / (yj - yi)
            if x < xcross:
                inside = not inside
        j = i
    return inside


def signed_area(polygon):
    """ signed area of an implicitly closed polygon, positive if
    counter-clockwise"""
    total = 0.0
    n = len(polygon)
    for i in range(n):
        x0, y0 = polygon[i][0], polygon[i][1]
        x1, y1 = polygon[(i + 1) % n][0], polygon[(i + 1) % n][1]
        total += x0 * y1 - x1 * y0
    return 0.5 * total


def is_ccw(polygon):
    """ is the polygon wound counter-clockwise?"""
    return signed_area(polygon) > 0.0


def is_convex(polygon, eps=epsilon):
    """ is the polygon convex?  Collinear vertices are tolerated, but
    the polygon must turn consistently in one direction"""
    n = len(polygon)
    if n < 3:
        return False
    sign = 0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        c = polygon[(i + 2) % n]
        z = cross(sub(b, a), sub(c, b))
        if abs(z) <= eps:
            continue
        s = 1 if z > 0 else -1
        if sign == 0:
            sign = s
        elif s != sign:
            return False
    return sign != 0


def polybbox(polygon):
    """ bounding box ``[(xmin, ymin), (xmax, ymax)]`` of a point list"""
    if not polygon:
        raise ValueError('empty point list passed to polybbox')
    xs = [p[0] for p in polygon]
    ys = [p[1] for p in polygon]
    return [(min(xs), min(ys)), (max(xs), max(ys))]
