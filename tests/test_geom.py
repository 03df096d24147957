"""Unit tests for points, edges and input normalisation."""
import math

import numpy as np
import pytest

from cg2d.geom import BBox, Edge, Pt, as_points, bounding_box, centroid, unique_points


class TestPt:
    def test_exact_equality_and_hash(self):
        assert Pt(1.0, 2.0) == Pt(1.0, 2.0)
        assert len({Pt(1.0, 2.0), Pt(1.0, 2.0)}) == 1

    def test_equals_with_tolerance(self):
        p = Pt(1.0, 2.0)
        assert p.equals(Pt(1.0 + 5e-7, 2.0 - 5e-7))
        assert not p.equals(Pt(1.0 + 5e-6, 2.0))
        assert not p.equals(Pt(1.0 + 5e-7, 2.0), eps=1e-9)

    def test_distance(self):
        assert Pt(0, 0).distance(Pt(3, 4)) == pytest.approx(5.0)

    def test_immutable(self):
        p = Pt(0.0, 0.0)
        with pytest.raises(AttributeError):
            p.x = 1.0

    def test_unpacking(self):
        x, y = Pt(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)


class TestEdge:
    def test_order_independent_equals(self):
        a, b = Pt(0, 0), Pt(1, 1)
        assert Edge(a, b).equals(Edge(b, a))
        assert Edge(a, b) == Edge(b, a)
        assert hash(Edge(a, b)) == hash(Edge(b, a))

    def test_equals_within_tolerance(self):
        e = Edge(Pt(0, 0), Pt(1, 1))
        drifted = Edge(Pt(1 + 5e-7, 1), Pt(0, -5e-7))
        assert e.equals(drifted)
        assert not e.equals(drifted, eps=1e-9)
        assert e != drifted

    def test_shared_endpoint_is_not_enough(self):
        assert not Edge(Pt(0, 0), Pt(1, 0)).equals(Edge(Pt(0, 0), Pt(0, 1)))

    def test_length(self):
        assert Edge(Pt(0, 0), Pt(3, 4)).length() == pytest.approx(5.0)


class TestInput:
    def test_as_points_from_tuples(self):
        pts = as_points([(0, 0), (1, 2)])
        assert pts == [Pt(0.0, 0.0), Pt(1.0, 2.0)]

    def test_as_points_keeps_pt_instances(self):
        p = Pt(1.0, 1.0)
        assert as_points([p])[0] is p

    def test_as_points_from_array(self):
        arr = np.array([[0.0, 1.0], [2.0, 3.0]])
        assert as_points(arr) == [Pt(0.0, 1.0), Pt(2.0, 3.0)]

    def test_as_points_rejects_bad_shape(self):
        with pytest.raises(ValueError):
            as_points(np.zeros((3, 3)))

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_as_points_rejects_non_finite(self, bad):
        with pytest.raises(ValueError):
            as_points([(0.0, 0.0), (bad, 1.0)])
        with pytest.raises(ValueError):
            as_points(np.array([[0.0, bad]]))

    def test_unique_points_keeps_first_occurrence(self):
        pts = unique_points([(0, 0), (1, 0), (0, 0), (1, 1e-9)])
        assert pts == [Pt(0.0, 0.0), Pt(1.0, 0.0)]

    def test_bounding_box(self):
        box = bounding_box([Pt(1, 5), Pt(-2, 3), Pt(4, -1)])
        assert box == BBox(-2, -1, 4, 5)
        assert box.width == 6 and box.height == 6
        assert box.center == Pt(1.0, 2.0)

    def test_bounding_box_empty(self):
        with pytest.raises(ValueError):
            bounding_box([])

    def test_centroid(self):
        assert centroid([Pt(0, 0), Pt(3, 0), Pt(0, 3)]) == Pt(1.0, 1.0)
