# cg2d/predicates.py
from __future__ import annotations
from typing import Optional

from .geom import Pt, Circle, EPS_CIRCLE, EPS_COLLINEAR, sub, cross, dist, midpoint, norm

def orient2d(a: Pt, b: Pt, c: Pt) -> float:
    """>0 якщо a,b,c проти годинникової стрілки, <0 за годинниковою, 0 — колінеарні."""
    return cross(sub(b, a), sub(c, a))

def collinear(a: Pt, b: Pt, c: Pt, eps: float = EPS_COLLINEAR) -> bool:
    """Відносний тест: |orient2d| <= eps * |ab| * |ac| (нульова довжина — теж колінеарні)."""
    ab = sub(b, a)
    ac = sub(c, a)
    scale = norm(ab) * norm(ac)
    if scale == 0.0:
        return True
    return abs(cross(ab, ac)) <= eps * scale

def line_intersection(p0: Pt, d0: Pt, p1: Pt, d1: Pt, eps: float = EPS_COLLINEAR) -> Optional[Pt]:
    """
    Перетин прямих p0 + t*d0 та p1 + s*d1.
    None, якщо напрямки (майже) паралельні.
    """
    den = cross(d0, d1)
    scale = norm(d0) * norm(d1)
    if scale == 0.0 or abs(den) <= eps * scale:
        return None
    t = cross(sub(p1, p0), d1) / den
    return Pt(p0.x + t*d0.x, p0.y + t*d0.y)

def circumcenter(a: Pt, b: Pt, c: Pt, eps: float = EPS_COLLINEAR) -> Optional[Pt]:
    """
    Центр описаного кола як перетин серединних перпендикулярів до AB і AC.
    None для колінеарних вершин (перпендикуляри паралельні).
    """
    ab = sub(b, a)
    ac = sub(c, a)
    # поворот на 90°: (x, y) -> (-y, x)
    return line_intersection(midpoint(a, b), Pt(-ab.y, ab.x),
                             midpoint(a, c), Pt(-ac.y, ac.x), eps)

def circumcircle(a: Pt, b: Pt, c: Pt, eps: float = EPS_COLLINEAR) -> Optional[Circle]:
    center = circumcenter(a, b, c, eps)
    if center is None:
        return None
    return Circle(center, dist(center, a))

def in_circumcircle(p: Pt, a: Pt, b: Pt, c: Pt,
                    eps: float = EPS_CIRCLE, collinear_eps: float = EPS_COLLINEAR) -> bool:
    """
    Строго всередині: dist(p, center) < radius - eps.
    Точки на колі — ні; вироджений трикутник не містить нічого.
    """
    circle = circumcircle(a, b, c, collinear_eps)
    if circle is None:
        return False
    return dist(p, circle.center) < circle.radius - eps
