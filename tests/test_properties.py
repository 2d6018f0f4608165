"""Algebraic invariants of Box2D, checked over a fixed set of sample boxes."""

import itertools

import pytest

from typed_geometry import Box2D, Size2D, point2, vec2


def _well_formed(box):
    return box.min.x <= box.max.x and box.min.y <= box.max.y


class TestBoxInvariants:
    def test_translate_preserves_size(self, sample_boxes):
        for b in sample_boxes:
            assert b.translate(vec2(3.5, -7.0)).size() == b.size()

    def test_uniform_scale_area(self, sample_boxes):
        for b in sample_boxes:
            for s in (0.0, 0.5, 2.0, 3.0):
                assert b.scale(s, s).area() == pytest.approx(b.area() * s * s)

    def test_intersection_and_union_commute(self, sample_boxes):
        for a, b in itertools.product(sample_boxes, repeat=2):
            assert a.intersection(b) == b.intersection(a)
            assert a.union(b) == b.union(a)

    def test_idempotence(self, sample_boxes):
        for a in sample_boxes:
            assert a.intersection(a) == a
            assert a.union(a) == a

    def test_contains_well_formed_intersection(self, sample_boxes):
        for a, b in itertools.product(sample_boxes, repeat=2):
            inter = a.intersection(b)
            if _well_formed(inter):
                assert a.contains_box(inter)
                assert b.contains_box(inter)

    def test_union_contains_operands(self, sample_boxes):
        for a, b in itertools.product(sample_boxes, repeat=2):
            u = a.union(b)
            assert u.contains_box(a)
            assert u.contains_box(b)

    def test_round_in_and_round_out_bounds(self):
        boxes = [
            Box2D.from_points([point2(-25.5, -40.4), point2(60.3, 36.5)]),
            Box2D(point2(0.1, 0.9), point2(7.9, 1.1)),
            Box2D(point2(-3.0, -3.0), point2(3.0, 3.0)),
            Box2D(point2(0.2, 0.0), point2(0.8, 5.0)),
        ]
        for a in boxes:
            inner = a.round_in()
            if _well_formed(inner):
                assert a.contains_box(inner)
            assert a.round_out().contains_box(a)

    def test_untyped_roundtrip(self, sample_boxes):
        for a in sample_boxes:
            assert Box2D.from_untyped(a.to_untyped()) == a

    def test_to_rect(self, sample_boxes):
        for a in sample_boxes:
            r = a.to_rect()
            assert r.origin == a.min
            assert r.size == a.size()

    def test_inflate_grows_size(self, sample_boxes):
        for a in sample_boxes:
            w, h = 1.5, 4.0
            assert a.inflate(w, h).size() == a.size() + Size2D(2 * w, 2 * h)

    def test_negative_boxes_are_sentinels(self, sample_boxes):
        # Chained intersections stay negative once disjoint.
        a, _, _, d, e, _ = sample_boxes
        chained = a.intersection(e).intersection(d)
        assert chained.is_negative()
        assert a.try_intersection(e) is None
