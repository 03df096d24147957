import pytest

from cg2d.geom import Pt
from cg2d.predicates import (
    circumcenter, circumcircle, collinear, in_circumcircle, line_intersection, orient2d,
)


def test_orient2d_signs():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
    assert orient2d(a, b, c) > 0
    assert orient2d(a, c, b) < 0
    assert orient2d(a, b, Pt(2, 0)) == 0


def test_collinear_is_relative():
    assert collinear(Pt(0, 0), Pt(1, 0), Pt(2, 0))
    assert collinear(Pt(0, 0), Pt(0, 0), Pt(5, 5))
    assert not collinear(Pt(0, 0), Pt(1e-6, 0), Pt(0, 1e-6))
    assert not collinear(Pt(0, 0), Pt(1e6, 0), Pt(0, 1e6))


def test_line_intersection_parallel():
    assert line_intersection(Pt(0, 0), Pt(1, 1), Pt(0, 1), Pt(2, 2)) is None
    hit = line_intersection(Pt(0, 0), Pt(1, 0), Pt(2, -1), Pt(0, 1))
    assert hit == Pt(2.0, 0.0)


def test_circumcenter_right_triangle():
    c = circumcenter(Pt(0, 0), Pt(4, 0), Pt(0, 3))
    assert c.x == pytest.approx(2.0)
    assert c.y == pytest.approx(1.5)
    circle = circumcircle(Pt(0, 0), Pt(4, 0), Pt(0, 3))
    assert circle.radius == pytest.approx(2.5)


def test_circumcenter_equidistant():
    a, b, c = Pt(1.3, -0.2), Pt(7.1, 2.4), Pt(3.3, 5.9)
    center = circumcenter(a, b, c)
    ra, rb, rc = center.distance(a), center.distance(b), center.distance(c)
    assert ra == pytest.approx(rb) and rb == pytest.approx(rc)


def test_circumcenter_collinear_is_undefined():
    assert circumcenter(Pt(0, 0), Pt(1, 0), Pt(2, 0)) is None
    assert circumcircle(Pt(0, 0), Pt(1, 1), Pt(2, 2)) is None


def test_in_circumcircle_is_strict():
    a, b, c = Pt(0, 0), Pt(1, 0), Pt(0, 1)
    assert in_circumcircle(Pt(0.2, 0.2), a, b, c)
    # (1, 1) лежить рівно на колі
    assert not in_circumcircle(Pt(1, 1), a, b, c)
    assert not in_circumcircle(Pt(2, 2), a, b, c)


def test_in_circumcircle_degenerate_contains_nothing():
    assert not in_circumcircle(Pt(1, 0), Pt(0, 0), Pt(1, 0), Pt(2, 0))
    assert not in_circumcircle(Pt(1, 0.1), Pt(0, 0), Pt(1, 0), Pt(2, 0))



def test_package_exports_resolve():
    import cg2d
    import cg2d.predicates as predicates
    for name in cg2d.__all__:
        assert hasattr(cg2d, name), name
    assert "incircle" not in cg2d.__all__
    assert not hasattr(predicates, "incircle")
