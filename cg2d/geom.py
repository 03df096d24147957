from __future__ import annotations
from dataclasses import dataclass
from math import hypot, isfinite
from typing import Iterable, List, NamedTuple, Sequence, Tuple, Union

import numpy as np

EPS_POINT = 1e-6       # рівність точок (абсолютна, на координату)
EPS_EDGE = 1e-6        # рівність ребер; координати тут «накопичують» похибку
EPS_CIRCLE = 1e-9      # строгий тест «всередині описаного кола»
EPS_COLLINEAR = 1e-12  # відносний поріг колінеарності (|cross| / (|u|*|v|))

@dataclass(frozen=True)
class Pt:
    x: float
    y: float

    def __iter__(self):
        yield self.x; yield self.y

    def distance(self, other: Pt) -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def equals(self, other: Pt, eps: float = EPS_POINT) -> bool:
        """Приблизна рівність (|dx| <= eps і |dy| <= eps). `==` лишається точним."""
        return abs(self.x - other.x) <= eps and abs(self.y - other.y) <= eps


class Circle(NamedTuple):
    center: Pt
    radius: float


class BBox(NamedTuple):
    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> Pt:
        return Pt((self.xmin + self.xmax) * 0.5, (self.ymin + self.ymax) * 0.5)


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Неорієнтоване ребро (a, b).
    `==` і hash не залежать від порядку кінців; `equals()` — те саме, але з допуском.
    """
    a: Pt
    b: Pt

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.a == other.a and self.b == other.b) or (self.a == other.b and self.b == other.a)

    def __hash__(self) -> int:
        return hash(frozenset((self.a, self.b)))

    def equals(self, other: Edge, eps: float = EPS_EDGE) -> bool:
        # обидва порядки перевіряються незалежно
        if self.a.equals(other.a, eps) and self.b.equals(other.b, eps):
            return True
        return self.a.equals(other.b, eps) and self.b.equals(other.a, eps)

    def length(self) -> float:
        return self.a.distance(self.b)

    def points(self) -> Tuple[Pt, Pt]:
        return self.a, self.b


PointLike = Union[Pt, Sequence[float]]

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y

def cross(a: Pt, b: Pt) -> float:
    """z-компонента векторного добутку."""
    return a.x*b.y - a.y*b.x

def norm(a: Pt) -> float:
    return hypot(a.x, a.y)

def dist(a: Pt, b: Pt) -> float:
    return hypot(a.x - b.x, a.y - b.y)

def midpoint(a: Pt, b: Pt) -> Pt:
    return Pt((a.x + b.x) * 0.5, (a.y + b.y) * 0.5)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv)

def as_points(points: Union[Iterable[PointLike], np.ndarray]) -> List[Pt]:
    """
    Нормалізує вхід до списку Pt: приймає Pt, пари (x, y) або масив форми (N, 2).
    Нескінченні/NaN координати відкидаються з ValueError.
    """
    if isinstance(points, np.ndarray):
        arr = np.asarray(points, dtype=float)
        if arr.size == 0:
            return []
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) array, got shape {arr.shape}")
        if not np.isfinite(arr).all():
            raise ValueError("non-finite coordinates in input")
        return [Pt(float(x), float(y)) for x, y in arr]

    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            q = p
        else:
            x, y = p
            q = Pt(float(x), float(y))
        if not (isfinite(q.x) and isfinite(q.y)):
            raise ValueError(f"non-finite coordinates: {q}")
        out.append(q)
    return out

def bounding_box(points: Iterable[Pt]) -> BBox:
    xs: List[float] = []
    ys: List[float] = []
    for p in points:
        xs.append(p.x); ys.append(p.y)
    if not xs:
        raise ValueError("empty set")
    return BBox(min(xs), min(ys), max(xs), max(ys))

def unique_points(points: Iterable[PointLike], scale: float = 1e6) -> List[Pt]:
    """
    Груба дедуплікація з квантуванням; порядок першої появи зберігається.
    `scale=1e6` ≈ EPS_POINT=1e-6 на координату.
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for p in as_points(points):
        key = (int(round(p.x*scale)), int(round(p.y*scale)))
        if key not in seen:
            seen[key] = p
    return list(seen.values())
