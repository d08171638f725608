"""Ear-clipping triangulation of clip output, used for filled rendering.

Clip results are lists of rings; union and difference may produce
hole rings wound opposite to their outers, and the outers follow
the winding of the inputs.
``split_holes()`` pairs each hole with the outer that contains it and
``triangulate_polygon()`` hands one outer plus its holes to
``mapbox-earcut`` as a single flat vertex array.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut is required for filled drawing of clip results"
    ) from exc

from polyclip.geom import epsilon, point_in_polygon, signed_area

Point2D = Tuple[float, float]
Ring = Sequence[Sequence[float]]


def _clean_ring(ring: Ring, ccw: bool) -> np.ndarray:
    """Return ``ring`` as an ``(n, 2)`` array wound as requested.

    Repeated consecutive points and a closing duplicate are removed.
    """
    pts = np.asarray([(p[0], p[1]) for p in ring], dtype=np.float64).reshape(-1, 2)
    if len(pts) == 0:
        return pts
    keep = np.ones(len(pts), dtype=bool)
    keep[1:] = np.any(np.abs(np.diff(pts, axis=0)) > epsilon, axis=1)
    pts = pts[keep]
    if len(pts) > 1 and np.all(np.abs(pts[0] - pts[-1]) <= epsilon):
        pts = pts[:-1]
    if len(pts) >= 3 and (signed_area(pts.tolist()) > 0.0) != ccw:
        pts = pts[::-1]
    return pts


def triangulate_polygon(outer: Ring, holes: Iterable[Ring] | None = None
                        ) -> List[List[Point2D]]:
    """Triangles covering ``outer`` minus ``holes``, as lists of three points.

    Rings may be wound either way.  A degenerate outer ring yields no
    triangles and degenerate holes are skipped.
    """
    loops = [_clean_ring(outer, ccw=True)]
    if len(loops[0]) < 3:
        return []
    for hole in holes or ():
        loop = _clean_ring(hole, ccw=False)
        if len(loop) >= 3:
            loops.append(loop)

    vertices = np.vstack(loops)
    ring_ends = np.cumsum([len(loop) for loop in loops]).astype(np.uint32)
    tris = np.asarray(_earcut.triangulate_float64(vertices, ring_ends)).reshape(-1, 3)
    coords = [tuple(p) for p in vertices.tolist()]
    return [[coords[i] for i in tri] for tri in tris.tolist()]


def split_holes(rings: Sequence[Ring]) -> List[Tuple[Ring, List[Ring]]]:
    """Group clip output rings into ``(outer, holes)`` pairs.

    Outer rings share the winding of the largest ring, whichever way
    that is; each oppositely wound ring is a hole attached to the
    smallest outer ring containing it.
    """
    rings = [r for r in rings if len(r) >= 3]
    if not rings:
        return []
    areas = [signed_area(r) for r in rings]
    sign = 1.0 if max(areas, key=abs) > 0.0 else -1.0
    outers = sorted((r for r, a in zip(rings, areas) if a * sign > 0.0),
                    key=lambda r: abs(signed_area(r)))
    groups = [(o, []) for o in outers]
    for hole in (r for r, a in zip(rings, areas) if a * sign <= 0.0):
        for outer, hs in groups:
            if point_in_polygon(hole[0], outer) or \
               all(point_in_polygon(p, outer) for p in _midpoints(hole)):
                hs.append(hole)
                break
    return groups


def _midpoints(loop):
    n = len(loop)
    return [((loop[i][0] + loop[(i + 1) % n][0]) / 2.0,
             (loop[i][1] + loop[(i + 1) % n][1]) / 2.0) for i in range(n)]
