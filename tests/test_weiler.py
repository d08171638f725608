import logging

import pytest

from polyclip.config import ClipConfig
from polyclip.contour import Classification, Contour, Vertex, link_twins
from polyclip.errors import ClassificationInconsistency, ClipError, InvalidPolygon
from polyclip.geom import signed_area, vclose
from polyclip.weiler import (
    InterRecord,
    build_contours,
    check_alternation,
    check_shared_edges,
    classify_intersections,
    clip,
    difference,
    extract_polygons,
    find_intersections,
    find_vertex_contacts,
    insert_intersections,
    intersection,
    union,
    validate_polygon,
)

"""Tests for Weiler-Atherton clipping"""

UNIT = [(0, 0), (1, 0), (1, 1), (0, 1)]
SHIFTED = [(0.5, 0.5), (1.5, 0.5), (1.5, 1.5), (0.5, 1.5)]

# horizontal strip crossed by both prongs of a U opening upwards
STRIP = [(0, 0), (4, 0), (4, 1), (0, 1)]
U_SHAPE = [(0.5, -1), (3.5, -1), (3.5, 2), (2.5, 2),
           (2.5, -0.5), (1.5, -0.5), (1.5, 2), (0.5, 2)]


def same_ring(a, b):
    """Are ``a`` and ``b`` the same ring up to a cyclic rotation?"""
    if len(a) != len(b):
        return False
    n = len(a)
    for shift in range(n):
        if all(vclose(a[(i + shift) % n], b[i], 1e-9) for i in range(n)):
            return True
    return False


def labels(contour):
    return [contour[h].classification for h in contour.intersections()]


class TestValidate:
    def test_normalizes(self):
        pts = validate_polygon([[0, 0], (1, 0), (1, 0), (1, 1), (0, 0)])
        assert pts == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]

    def test_too_few(self):
        with pytest.raises(InvalidPolygon):
            validate_polygon([(0, 0), (1, 1)])
        with pytest.raises(InvalidPolygon):
            validate_polygon([(0, 0), (1, 1), (0, 0)])

    def test_non_finite(self):
        with pytest.raises(InvalidPolygon):
            validate_polygon([(0, 0), (1, float('nan')), (1, 1)])
        with pytest.raises(InvalidPolygon):
            validate_polygon([(0, 0), (1, 0), ('x', 1)])

    def test_missing(self):
        with pytest.raises(InvalidPolygon):
            validate_polygon(None, 'clip')

    def test_shared_edge(self):
        with pytest.raises(InvalidPolygon):
            check_shared_edges(UNIT, [(1, 0), (2, 0), (2, 1), (1, 1)])
        check_shared_edges(UNIT, SHIFTED)


class TestIntersectionPhase:
    def test_scenario_a_records(self):
        recs = find_intersections(UNIT, SHIFTED)
        assert len(recs) == 2
        pts = sorted(r.point for r in recs)
        assert vclose(pts[0], (0.5, 1.0))
        assert vclose(pts[1], (1.0, 0.5))
        # on the subject's right (1) and top (2) edges
        assert sorted(r.subject_edge for r in recs) == [1, 2]
        for r in recs:
            assert 0.0 < r.t_subject < 1.0
            assert 0.0 < r.t_clip < 1.0

    def test_shared_vertices_excluded(self):
        # the clip corner sits exactly on the subject corner (1, 1)
        recs = find_intersections(UNIT, [(1, 1), (2, 1), (2, 2), (1, 2)])
        assert recs == []

    def test_twins_mutual(self):
        s, c = build_contours(STRIP, U_SHAPE)
        sh = s.intersections()
        ch = c.intersections()
        assert len(sh) == len(ch) == 8
        for h in sh:
            assert c.twin_of(s.twin_of(h)) == h
            assert vclose(s.position_of(h), c.position_of(s.twin_of(h)))
        for h in ch:
            assert s.twin_of(c.twin_of(h)) == h

    def test_edge_order_by_parameter(self):
        s, c = build_contours(STRIP, U_SHAPE)
        # the four crossings on the strip's bottom edge appear left to right
        bottom = []
        h = s.next(0)
        while s[h].is_intersection:
            bottom.append(s.position_of(h)[0])
            h = s.next(h)
        assert bottom == pytest.approx([0.5, 1.5, 2.5, 3.5])
        for contour in (s, c):
            params = {}
            for h in contour.intersections():
                params.setdefault(contour[h].edge, []).append(contour[h].param)
            for ps in params.values():
                assert ps == sorted(ps)

    def test_insertion_ignores_record_order(self):
        recs = find_intersections(STRIP, U_SHAPE)
        s1 = Contour.build(STRIP)
        c1 = Contour.build(U_SHAPE, 'clip')
        insert_intersections(s1, c1, recs)
        s2 = Contour.build(STRIP)
        c2 = Contour.build(U_SHAPE, 'clip')
        insert_intersections(s2, c2, list(reversed(recs)))
        assert s1.points() == s2.points()
        assert c1.points() == c2.points()


class TestClassification:
    def test_labels_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='polyclip.weiler')
        clip(UNIT, SHIFTED)
        assert 'subject labels: entry exit' in caplog.text
        assert 'subject 4 + 2 vertices, clip 4 + 2 vertices' in caplog.text

    def test_scenario_a(self):
        s, c = build_contours(UNIT, SHIFTED)
        classify_intersections(s, c)
        by_pos = {s.position_of(h): s[h].classification for h in s.intersections()}
        assert by_pos[(1.0, 0.5)] is Classification.ENTRY
        assert by_pos[(0.5, 1.0)] is Classification.EXIT
        for h in s.intersections():
            assert c[s.twin_of(h)].classification is s[h].classification.complement()

    def test_alternation(self):
        s, c = build_contours(STRIP, U_SHAPE)
        classify_intersections(s, c)
        check_alternation(s)
        ls = labels(s)
        for k in range(len(ls)):
            assert ls[k] is not ls[k - 1]

    def test_alternation_violation(self):
        s = Contour.build(UNIT)
        c = Contour.build(SHIFTED, 'clip')
        for edge, pos in ((1, (1.0, 0.5)), (2, (0.5, 1.0))):
            hs = s.insert_after(edge, Vertex(pos, is_intersection=True,
                                             classification=Classification.ENTRY))
            hc = c.insert_after(edge, Vertex(pos, is_intersection=True,
                                             classification=Classification.EXIT))
            link_twins(s, hs, c, hc)
        with pytest.raises(ClassificationInconsistency) as info:
            check_alternation(s)
        assert info.value.labels == [Classification.ENTRY, Classification.ENTRY]

    def test_unclassified(self):
        s, c = build_contours(UNIT, SHIFTED)
        with pytest.raises(ClassificationInconsistency):
            check_alternation(s)

    def test_crossing_through_vertex_is_reported(self):
        # one clip edge passes exactly through the subject corner (2, 0),
        # leaving a single accepted crossing on the right edge
        square = [(0, 0), (2, 0), (2, 2), (0, 2)]
        tri = [(1, 1), (3, -1), (3, 1.5)]
        with pytest.raises(ClassificationInconsistency):
            clip(square, tri)


class TestScenarios:
    def test_scenario_a_overlap(self):
        out = clip(UNIT, SHIFTED)
        assert len(out) == 1
        assert len(out[0]) == 4
        assert same_ring(out[0], [(0.5, 0.5), (1, 0.5), (1, 1), (0.5, 1)])

    def test_scenario_b_contained(self):
        subject = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
        big = [(-2, -2), (2, -2), (2, 2), (-2, 2)]
        s, c = build_contours(subject, big)
        assert s.intersections() == []
        out = clip(subject, big)
        assert len(out) == 1
        assert same_ring(out[0], subject)

    def test_scenario_c_disjoint(self):
        far = [(5, 5), (6, 5), (6, 6), (5, 6)]
        assert clip(UNIT, far) == []

    def test_clip_inside_subject(self):
        small = [(0.25, 0.25), (0.75, 0.25), (0.75, 0.75), (0.25, 0.75)]
        out = clip(UNIT, small)
        assert len(out) == 1
        assert same_ring(out[0], small)

    def test_two_regions(self):
        out = clip(STRIP, U_SHAPE)
        assert len(out) == 2
        expected = [
            [(0.5, 0), (1.5, 0), (1.5, 1), (0.5, 1)],
            [(2.5, 0), (3.5, 0), (3.5, 1), (2.5, 1)],
        ]
        for ring in expected:
            assert any(same_ring(ring, o) for o in out)

    def test_rings_closed_without_duplicates(self):
        for ring in clip(STRIP, U_SHAPE) + clip(UNIT, SHIFTED):
            assert not vclose(ring[0], ring[-1])
            for i in range(len(ring)):
                for j in range(i + 1, len(ring)):
                    assert not vclose(ring[i], ring[j])

    def test_symmetric_area(self):
        a = sum(signed_area(r) for r in clip(STRIP, U_SHAPE))
        b = sum(signed_area(r) for r in clip(U_SHAPE, STRIP))
        assert a == pytest.approx(2.0)
        assert b == pytest.approx(2.0)

    def test_triangle_through_square(self):
        tri = [(-0.5, -0.5), (2, -0.5), (-0.5, 2)]
        out = clip(UNIT, tri)
        assert len(out) == 1
        # the hypotenuse x+y=1.5 cuts the corner (1, 1) off the square
        assert same_ring(out[0], [(0.5, 1), (0, 1), (0, 0), (1, 0), (1, 0.5)])
        assert signed_area(out[0]) == pytest.approx(0.875)
        assert len(out[0]) == 5

    def test_closing_point_accepted(self):
        out = clip(UNIT + [(0, 0)], SHIFTED + [(0.5, 0.5)])
        assert same_ring(out[0], [(0.5, 0.5), (1, 0.5), (1, 1), (0.5, 1)])

    def test_does_not_mutate_input(self):
        subject = [[0, 0], [1, 0], [1, 1], [0, 1]]
        clip(subject, SHIFTED)
        assert subject == [[0, 0], [1, 0], [1, 1], [0, 1]]


class TestOperations:
    def test_union_overlap(self):
        out = union(UNIT, SHIFTED)
        assert len(out) == 1
        assert signed_area(out[0]) == pytest.approx(1.75)
        assert len(out[0]) == 8

    def test_difference_overlap(self):
        out = difference(UNIT, SHIFTED)
        assert len(out) == 1
        assert same_ring(out[0], [(0.5, 1), (0, 1), (0, 0), (1, 0), (1, 0.5), (0.5, 0.5)])

    def test_union_with_hole(self):
        out = union(STRIP, U_SHAPE)
        areas = sorted(signed_area(r) for r in out)
        assert areas == pytest.approx([-0.5, 9.0])

    def test_difference_splits(self):
        out = difference(STRIP, U_SHAPE)
        areas = sorted(signed_area(r) for r in out)
        assert areas == pytest.approx([0.5, 0.5, 1.0])

    def test_intersection_alias(self):
        assert intersection(UNIT, SHIFTED) == clip(UNIT, SHIFTED)

    def test_disjoint_cases(self):
        far = [(5, 5), (6, 5), (6, 6), (5, 6)]
        assert union(UNIT, far) == [validate_polygon(UNIT), validate_polygon(far)]
        assert difference(UNIT, far) == [validate_polygon(UNIT)]

    def test_contained_cases(self):
        big = [(-1, -1), (2, -1), (2, 2), (-1, 2)]
        assert difference(UNIT, big) == []
        assert union(UNIT, big) == [validate_polygon(big)]
        out = difference(big, UNIT)
        assert len(out) == 2
        assert sum(signed_area(r) for r in out) == pytest.approx(8.0)

    def test_bad_operation(self):
        with pytest.raises(ValueError):
            clip(UNIT, SHIFTED, 'xor')
        s, c = build_contours(UNIT, SHIFTED)
        with pytest.raises(ValueError):
            extract_polygons(s, c, 'xor')


class TestErrors:
    def test_invalid_subject(self):
        with pytest.raises(InvalidPolygon) as info:
            clip([(0, 0), (1, 0)], SHIFTED)
        assert info.value.role == 'subject'

    def test_invalid_clip(self):
        with pytest.raises(InvalidPolygon) as info:
            clip(UNIT, [(0, 0), (float('inf'), 0), (1, 1)])
        assert info.value.role == 'clip'

    def test_identical_polygons(self):
        with pytest.raises(InvalidPolygon):
            clip(UNIT, UNIT)

    def test_errors_are_value_errors(self):
        assert issubclass(InvalidPolygon, ClipError)
        assert issubclass(ClassificationInconsistency, ClipError)
        assert issubclass(ClipError, ValueError)


class TestConfig:
    def test_probe_fraction(self):
        cfg = ClipConfig(probe_fraction=0.01)
        out = clip(STRIP, U_SHAPE, config=cfg)
        assert len(out) == 2

    def test_record_is_value(self):
        r = InterRecord(0, 1, 0.5, 0.25, (1.0, 2.0))
        assert r == InterRecord(0, 1, 0.5, 0.25, (1.0, 2.0))


class TestVertexContacts:
    """polygons whose boundaries meet at vertices without a proper crossing"""

    # each triangle meets the unit square only at its corner (0, 0)
    BELOW = [(0, 0), (0.5, -1), (1, -1)]
    LEFT = [(0, 0), (-1, 1), (-1, 0)]
    # a hypotenuse running through the corners (1, 0) and (0, 1)
    HALF_CUT = [(-1, -1), (2, -1), (-1, 2)]
    # contains the unit square, touching it only at (0, 0)
    AROUND = [(0, 0), (2, -1), (3, 3), (-1, 2)]

    def test_contacts_found(self):
        contacts = find_vertex_contacts(UNIT, self.BELOW)
        assert contacts
        assert all(vclose(r.point, (0, 0), 1e-9) for r in contacts)
        assert find_intersections(UNIT, self.BELOW) == []
        assert find_vertex_contacts(UNIT, SHIFTED) == []

    def test_touching_corner_outside(self):
        for other in (self.BELOW, self.LEFT):
            assert clip(UNIT, other) == []
            assert clip(other, UNIT) == []
            assert union(UNIT, other) == [validate_polygon(UNIT), validate_polygon(other)]
            assert difference(UNIT, other) == [validate_polygon(UNIT)]

    def test_touching_corner_inside(self):
        assert intersection(UNIT, self.AROUND) == [validate_polygon(UNIT)]
        assert union(UNIT, self.AROUND) == [validate_polygon(self.AROUND)]
        assert difference(UNIT, self.AROUND) == []
        assert intersection(self.AROUND, UNIT) == [validate_polygon(UNIT)]

    def test_edge_through_two_vertices(self):
        for operation in ('intersection', 'union', 'difference'):
            with pytest.raises(ClassificationInconsistency):
                clip(UNIT, self.HALF_CUT, operation)
        with pytest.raises(ClassificationInconsistency):
            clip(self.HALF_CUT, UNIT)

    def test_contact_alongside_crossings(self):
        # overlaps the unit square and also touches its corner (0, 1)
        other = [(0.5, 0.5), (1.5, 0.5), (1.5, 2), (-1, 2), (0, 1), (0.5, 1.5)]
        assert find_intersections(UNIT, other)
        with pytest.raises(ClassificationInconsistency):
            clip(UNIT, other)
