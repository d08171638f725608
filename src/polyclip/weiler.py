## Weiler-Atherton polygon clipping
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

"""Weiler-Atherton clipping of one simple polygon by another.

=====================
OVERVIEW
=====================

``clip(subject, clip_polygon)`` returns the list of polygons covering
the intersection of two simple, consistently wound polygons (union and
difference are available through the ``operation`` argument).  Each
output polygon is a list of ``(x, y)`` tuples forming an implicitly
closed ring.

The work is done in four phases, each available on its own:

1. ``validate_polygon()`` normalizes and checks the inputs and
   ``check_shared_edges()`` rejects polygons that share an edge.
2. ``find_intersections()`` and ``insert_intersections()`` augment
   both contours with one vertex per edge crossing, ordered along each
   edge by parametric position, and link the pairs as mutual twins.
3. ``classify_intersections()`` labels each subject intersection as
   entry or exit by probing just past it along the subject boundary;
   the clip twin gets the complementary label.  ``check_alternation()``
   verifies that labels alternate along the subject contour.
4. ``extract_polygons()`` walks the augmented contours from unvisited
   entry vertices, switching contours at each intersection, until the
   walk returns to its start.

Every call builds its own contours; nothing is shared between calls.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from itertools import groupby
from typing import Dict, List, Optional, Sequence, Tuple

from polyclip.config import DEFAULT_CONFIG, ClipConfig
from polyclip.contour import Classification, Contour, Point, Vertex, link_twins
from polyclip.errors import ClassificationInconsistency, InvalidPolygon
from polyclip.geom import (
    ispoint,
    lerp,
    point_in_polygon,
    segment_intersection,
    segments_overlap,
    sub,
    vclose,
)

logger = logging.getLogger(__name__)

OPERATIONS = ('intersection', 'union', 'difference')

SUBJECT = 0
CLIP = 1

## (invert subject labels, invert clip labels) per operation
_FLIPS = {
    'intersection': (False, False),
    'union': (True, True),
    'difference': (True, False),
}


@dataclass(frozen=True)
class InterRecord:
    """One meeting point of a subject edge and a clip edge."""
    subject_edge: int
    clip_edge: int
    t_subject: float
    t_clip: float
    point: Point


## Phase 0: input hygiene
## ----------------------

def validate_polygon(points: Sequence[Sequence[float]], role: str = 'subject',
                     eps: float = DEFAULT_CONFIG.endpoint_epsilon) -> List[Point]:
    """Return ``points`` as a list of ``(x, y)`` tuples, or raise ``InvalidPolygon``.

    Consecutive duplicates and an explicit closing point equal to the
    first are dropped.  Every point must carry finite coordinates.
    """
    if points is None:
        raise InvalidPolygon(f'{role} polygon is missing', role)
    try:
        items = list(points)
    except TypeError as exc:
        raise InvalidPolygon(f'{role} polygon is not a point list: {points!r}', role) from exc
    pts: List[Point] = []
    for idx, p in enumerate(items):
        if not ispoint(p):
            raise InvalidPolygon(f'bad point at index {idx} of {role} polygon: {p!r}', role)
        q = (float(p[0]), float(p[1]))
        if pts and vclose(pts[-1], q, eps):
            continue
        pts.append(q)
    if len(pts) > 1 and vclose(pts[0], pts[-1], eps):
        pts.pop()
    if len(pts) < 3:
        raise InvalidPolygon(
            f'{role} polygon needs at least 3 distinct points, got {len(pts)}', role)
    return pts


def _edges(points: Sequence[Point]):
    n = len(points)
    for i in range(n):
        yield i, points[i], points[(i + 1) % n]


def check_shared_edges(subject: Sequence[Point], clip_polygon: Sequence[Point],
                       eps: float = DEFAULT_CONFIG.endpoint_epsilon) -> None:
    """Raise ``InvalidPolygon`` if a subject edge and a clip edge overlap."""
    for i, a0, a1 in _edges(subject):
        for j, b0, b1 in _edges(clip_polygon):
            if segments_overlap(a0, a1, b0, b1, eps):
                raise InvalidPolygon(
                    f'subject edge {i} and clip edge {j} are collinear and overlap')


## Phase 1: intersections
## ----------------------

def find_intersections(subject: Sequence[Point], clip_polygon: Sequence[Point],
                       config: ClipConfig = DEFAULT_CONFIG) -> List[InterRecord]:
    """Compute every proper crossing between subject and clip edges.

    Crossings with a parameter within ``endpoint_epsilon`` of either end
    of either edge are excluded, as are parallel edges.
    """
    lo = config.endpoint_epsilon
    hi = 1.0 - config.endpoint_epsilon
    records: List[InterRecord] = []
    for i, p, p1 in _edges(subject):
        r = sub(p1, p)
        for j, q, q1 in _edges(clip_polygon):
            tu = segment_intersection(p, r, q, sub(q1, q), config.parallel_epsilon)
            if tu is None:
                continue
            t, u = tu
            if lo < t < hi and lo < u < hi:
                records.append(InterRecord(i, j, t, u, lerp(p, p1, t)))
    logger.debug('found %d intersection(s)', len(records))
    return records


def find_vertex_contacts(subject: Sequence[Point], clip_polygon: Sequence[Point],
                         config: ClipConfig = DEFAULT_CONFIG) -> List[InterRecord]:
    """Compute the edge contacts that ``find_intersections()`` excludes.

    A contact is a meeting of a subject edge and a clip edge within
    ``endpoint_epsilon`` of an end of either edge, that is a vertex of
    one polygon lying on the boundary of the other.  Such a vertex may
    be a mere touch or a place where the boundaries cross.
    """
    eps = config.endpoint_epsilon
    lo, hi = eps, 1.0 - eps
    contacts: List[InterRecord] = []
    for i, p, p1 in _edges(subject):
        r = sub(p1, p)
        for j, q, q1 in _edges(clip_polygon):
            tu = segment_intersection(p, r, q, sub(q1, q), config.parallel_epsilon)
            if tu is None:
                continue
            t, u = tu
            if not (-eps <= t <= 1.0 + eps and -eps <= u <= 1.0 + eps):
                continue
            if lo < t < hi and lo < u < hi:
                continue
            contacts.append(InterRecord(i, j, t, u, lerp(p, p1, t)))
    if contacts:
        logger.debug('found %d vertex contact(s)', len(contacts))
    return contacts


def _insert_sorted(contour: Contour, records: Sequence[InterRecord],
                   edge_of, param_of) -> Dict[int, int]:
    """Insert one vertex per record, ordered by edge then parameter.

    Returns a map from record index to the handle of its new vertex.
    """
    order = sorted(range(len(records)),
                   key=lambda k: (edge_of(records[k]), param_of(records[k])))
    handles: Dict[int, int] = {}
    for edge, group in groupby(order, key=lambda k: edge_of(records[k])):
        ## original vertex handles equal their edge index
        prev = edge
        for k in group:
            rec = records[k]
            prev = contour.insert_after(prev, Vertex(position=rec.point,
                                                     is_intersection=True,
                                                     edge=edge,
                                                     param=param_of(rec)))
            handles[k] = prev
    return handles


def insert_intersections(subject: Contour, clip_contour: Contour,
                         records: Sequence[InterRecord]) -> None:
    """Augment both contours with twinned intersection vertices."""
    shandles = _insert_sorted(subject, records,
                              lambda rec: rec.subject_edge,
                              lambda rec: rec.t_subject)
    chandles = _insert_sorted(clip_contour, records,
                              lambda rec: rec.clip_edge,
                              lambda rec: rec.t_clip)
    for k in range(len(records)):
        link_twins(subject, shandles[k], clip_contour, chandles[k])


def build_contours(subject: Sequence[Point], clip_polygon: Sequence[Point],
                   config: ClipConfig = DEFAULT_CONFIG) -> Tuple[Contour, Contour]:
    """Build the two augmented contours for already validated point lists."""
    scont = Contour.build(subject, 'subject')
    ccont = Contour.build(clip_polygon, 'clip')
    records = find_intersections(subject, clip_polygon, config)
    insert_intersections(scont, ccont, records)
    logger.debug('subject %d + %d vertices, clip %d + %d vertices',
                 scont.original_count(), len(scont) - scont.original_count(),
                 ccont.original_count(), len(ccont) - ccont.original_count())
    return scont, ccont


## Phase 2: classification
## -----------------------

def classify_intersections(subject: Contour, clip_contour: Contour,
                           config: ClipConfig = DEFAULT_CONFIG) -> None:
    """Label subject intersections entry/exit, and their twins the opposite.

    The probe point lies ``probe_fraction`` of the way from the
    intersection to its successor on the augmented subject contour, so
    no other crossing lies between the two.
    """
    clip_points = clip_contour.points()
    for h in subject.intersections():
        v = subject[h]
        succ = subject.position_of(subject.next(h))
        probe = lerp(v.position, succ, config.probe_fraction)
        if point_in_polygon(probe, clip_points):
            v.classification = Classification.ENTRY
        else:
            v.classification = Classification.EXIT
        clip_contour[v.twin].classification = v.classification.complement()
    logger.debug('subject labels: %s',
                 ' '.join(subject[h].classification.value for h in subject.intersections()))


def check_alternation(subject: Contour) -> None:
    """Raise ``ClassificationInconsistency`` unless entry and exit labels
    strictly alternate around the subject contour."""
    labels = [subject[h].classification for h in subject.intersections()]
    if not labels:
        return
    if Classification.NONE in labels:
        raise ClassificationInconsistency('unclassified intersection vertex', labels)
    if len(labels) % 2:
        raise ClassificationInconsistency(
            f'odd number of intersections ({len(labels)}) on subject contour', labels)
    for k, label in enumerate(labels):
        if label is labels[k - 1]:
            raise ClassificationInconsistency(
                f'labels do not alternate at intersection {k}: two consecutive '
                f'{label.value} labels', labels)


## Phase 3: traversal
## ------------------

def _is_entry(contour: Contour, handle: int, flip: bool) -> bool:
    return (contour[handle].classification is Classification.ENTRY) != flip


def extract_polygons(subject: Contour, clip_contour: Contour,
                     operation: str = 'intersection') -> List[List[Point]]:
    """Walk the classified contours and emit one ring per output polygon.

    For ``intersection`` every walk runs forward along both contours.
    For ``union`` and ``difference`` the labels are inverted on one or
    both contours, and after each switch the walk runs forward from an
    entry and backward from an exit.
    """
    if operation not in _FLIPS:
        raise ValueError(f'invalid operation: {operation!r}')
    flips = _FLIPS[operation]
    contours = (subject, clip_contour)
    limit = 2 * (len(subject) + len(clip_contour))

    rings: List[List[Point]] = []
    for start in subject.intersections():
        sv = subject[start]
        if sv.visited or not _is_entry(subject, start, flips[SUBJECT]):
            continue
        sv.visited = True
        clip_contour[sv.twin].visited = True

        ring: List[Point] = []
        side = SUBJECT
        current = start
        forward = True
        steps = 0
        while True:
            contour = contours[side]
            ring.append(contour.position_of(current))
            current = contour.next(current) if forward else contour.prev(current)
            steps += 1
            if steps > limit:
                raise ClassificationInconsistency(
                    f'traversal from {sv.position} did not close after {limit} steps')
            v = contour[current]
            if not v.is_intersection:
                continue
            if (side == SUBJECT and current == start) or \
               (side == CLIP and current == sv.twin):
                break
            v.visited = True
            other = contours[1 - side]
            other[v.twin].visited = True
            side = 1 - side
            current = v.twin
            forward = _is_entry(contours[side], current, flips[side])
        rings.append(ring)
    logger.debug('%s produced %d ring(s)', operation, len(rings))
    return rings


## containment when no edges cross
## -------------------------------

def _boundary_side(points: Sequence[Point], other: Sequence[Point],
                   cuts) -> Optional[bool]:
    """Which side of ``other`` the boundary of ``points`` lies on.

    Each edge is cut at the parameters in ``cuts[edge]`` and the midpoint
    of every piece is tested, so no test point lies on the boundary of
    ``other``.  Returns ``True`` (inside), ``False`` (outside) or
    ``None`` when the pieces disagree.
    """
    sides = set()
    for i, a, b in _edges(points):
        ts = sorted({0.0, 1.0, *(min(max(t, 0.0), 1.0) for t in cuts.get(i, ()))})
        for t0, t1 in zip(ts, ts[1:]):
            if t1 > t0:
                sides.add(point_in_polygon(lerp(a, b, 0.5 * (t0 + t1)), other))
    if len(sides) != 1:
        return None
    return sides.pop()


def _disjoint_result(subject: List[Point], clip_polygon: List[Point],
                     operation: str,
                     contacts: Sequence[InterRecord] = ()) -> List[List[Point]]:
    """Result of an operation on polygons whose boundaries never cross.

    The boundaries may still touch at the vertex ``contacts``; a
    boundary found on both sides of the other polygon crosses it at a
    vertex and raises ``ClassificationInconsistency``.
    """
    scuts = defaultdict(list)
    ccuts = defaultdict(list)
    for rec in contacts:
        scuts[rec.subject_edge].append(rec.t_subject)
        ccuts[rec.clip_edge].append(rec.t_clip)
    s_inside = _boundary_side(subject, clip_polygon, scuts)
    c_inside = _boundary_side(clip_polygon, subject, ccuts)
    if s_inside is None or c_inside is None:
        raise ClassificationInconsistency(
            'boundaries cross only at vertices; entry/exit labels are undefined')
    if s_inside:
        logger.debug('subject lies inside clip')
        return {'intersection': [subject],
                'union': [clip_polygon],
                'difference': []}[operation]
    if c_inside:
        logger.debug('clip lies inside subject')
        return {'intersection': [clip_polygon],
                'union': [subject],
                'difference': [subject, clip_polygon[::-1]]}[operation]
    logger.debug('subject and clip are disjoint')
    return {'intersection': [],
            'union': [subject, clip_polygon],
            'difference': [subject]}[operation]



## main entry point
## ----------------

def clip(subject: Sequence[Sequence[float]], clip_polygon: Sequence[Sequence[float]],
         operation: str = 'intersection', *,
         config: Optional[ClipConfig] = None) -> List[List[Point]]:
    """Clip ``subject`` by ``clip_polygon``.

    Both polygons must be simple and wound the same way.  ``operation``
    is one of ``"intersection"``, ``"union"`` or ``"difference"``
    (subject minus clip).  Returns a possibly empty list of rings, each
    a list of ``(x, y)`` tuples with the closing point implied.

    Raises ``InvalidPolygon`` for degenerate input and
    ``ClassificationInconsistency`` when entry/exit labels cannot be
    assigned consistently, which includes any boundary crossing at a
    vertex.  Polygons that meet only by touching at vertices, with no
    edge crossing, are handled.  No partial result is ever returned.
    """
    if operation not in OPERATIONS:
        raise ValueError(f'invalid operation passed to clip(): {operation!r}')
    config = config or DEFAULT_CONFIG

    spts = validate_polygon(subject, 'subject', config.endpoint_epsilon)
    cpts = validate_polygon(clip_polygon, 'clip', config.endpoint_epsilon)
    check_shared_edges(spts, cpts, config.endpoint_epsilon)

    scont, ccont = build_contours(spts, cpts, config)
    contacts = find_vertex_contacts(spts, cpts, config)
    if not scont.intersections():
        return _disjoint_result(spts, cpts, operation, contacts)
    if contacts:
        raise ClassificationInconsistency(
            f'{len(contacts)} vertex contact(s) alongside proper crossings, '
            f'first at {contacts[0].point}')

    classify_intersections(scont, ccont, config)
    check_alternation(scont)
    return extract_polygons(scont, ccont, operation)


def intersection(subject, clip_polygon, *, config=None):
    return clip(subject, clip_polygon, 'intersection', config=config)


def union(subject, clip_polygon, *, config=None):
    return clip(subject, clip_polygon, 'union', config=config)


def difference(subject, clip_polygon, *, config=None):
    return clip(subject, clip_polygon, 'difference', config=config)


__all__ = [
    'InterRecord',
    'OPERATIONS',
    'build_contours',
    'check_alternation',
    'check_shared_edges',
    'classify_intersections',
    'clip',
    'difference',
    'extract_polygons',
    'find_intersections',
    'find_vertex_contacts',
    'insert_intersections',
    'intersection',
    'union',
    'validate_polygon',
]
