# cg2d/mesh.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from itertools import permutations
from math import sqrt
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from .config import DelaunayConfig
from .errors import DegenerateInputError, NoBadTriangleError
from .geom import (
    Pt, Edge, Circle, EPS_POINT, EPS_CIRCLE, EPS_COLLINEAR,
    as_points, bounding_box, centroid, dist,
)
from .logging_utils import get_logger
from .predicates import circumcircle, collinear, orient2d

log = get_logger(__name__)

TriKey = Tuple[int, int, int]  # трикутник як індекси вершин у вхідному списку

@dataclass(frozen=True, eq=False)
class Triangle:
    """
    Трикутник (a, b, c).
    Як множина вершин порядок не важливий (same_as), але ребра йдуть у фіксованому
    порядку AB, BC, CA. Описане коло кешується для кожного collinear_eps окремо.
    """
    a: Pt
    b: Pt
    c: Pt
    _circles: Dict[float, Optional[Circle]] = field(default_factory=dict, init=False, repr=False)

    def points(self) -> Tuple[Pt, Pt, Pt]:
        return self.a, self.b, self.c

    def edges(self) -> List[Edge]:
        return [Edge(self.a, self.b), Edge(self.b, self.c), Edge(self.c, self.a)]

    # ---- описане коло ----
    def circumcircle(self, eps: float = EPS_COLLINEAR) -> Optional[Circle]:
        if eps not in self._circles:
            self._circles[eps] = circumcircle(self.a, self.b, self.c, eps)
        return self._circles[eps]

    def circumcenter(self, eps: float = EPS_COLLINEAR) -> Optional[Pt]:
        circle = self.circumcircle(eps)
        return None if circle is None else circle.center

    def contains_in_circumcircle(self, p: Pt, eps: float = EPS_CIRCLE,
                                 collinear_eps: float = EPS_COLLINEAR) -> bool:
        """Строго всередині (точки на колі — ні). Вироджений трикутник не містить нічого."""
        circle = self.circumcircle(collinear_eps)
        if circle is None:
            return False
        return dist(p, circle.center) < circle.radius - eps

    # ---- вершини ----
    def has_vertex(self, p: Pt, eps: float = EPS_POINT) -> bool:
        return any(v.equals(p, eps) for v in self.points())

    def shares_vertex_with(self, other: Triangle, eps: float = EPS_POINT) -> bool:
        return any(other.has_vertex(v, eps) for v in self.points())

    def same_as(self, other: Triangle, eps: float = EPS_POINT) -> bool:
        """Рівність як невпорядкованих множин вершин (з допуском)."""
        if self is other:
            return True
        mine = self.points()
        return any(all(p.equals(q, eps) for p, q in zip(mine, perm))
                   for perm in permutations(other.points()))

    # ---- міри ----
    def signed_area(self) -> float:
        return 0.5 * orient2d(self.a, self.b, self.c)

    def area(self) -> float:
        return abs(self.signed_area())

    def centroid(self) -> Pt:
        return centroid(self.points())

    def is_degenerate(self, eps: float = EPS_COLLINEAR) -> bool:
        return collinear(self.a, self.b, self.c, eps)


class TriMesh:
    """
    Робоча множина трикутників під час тріангуляції.
    Впорядкований список без дублікатів; сітка одноосібно володіє трикутниками.
    Вершини — ті самі об'єкти Pt, що прийшли на вхід (спільні для сусідніх трикутників).
    """
    def __init__(self, config: Optional[DelaunayConfig] = None):
        self.config = config or DelaunayConfig()
        self.tris: List[Triangle] = []

    def __len__(self) -> int:
        return len(self.tris)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.tris)

    def triangles(self) -> List[Triangle]:
        return self.tris[:]

    # ---------- мутації ----------
    def add(self, tri: Triangle) -> None:
        self.tris.append(tri)

    def remove(self, tri: Triangle) -> bool:
        """Прибрати перший трикутник з тією ж множиною вершин. False, якщо такого немає."""
        for i, t in enumerate(self.tris):
            if t is tri:
                del self.tris[i]
                return True
        eps = self.config.point_eps
        for i, t in enumerate(self.tris):
            if t.same_as(tri, eps):
                del self.tris[i]
                return True
        return False

    def remove_all(self, tris: Iterable[Triangle]) -> int:
        removed = 0
        for t in tris:
            if self.remove(t):
                removed += 1
            else:
                log.warning("triangle %s not found in mesh", t)
        return removed

    def add_all(self, p: Pt, boundary: Iterable[Edge]) -> List[Triangle]:
        """Нові трикутники (edge.a, edge.b, p) для кожного ребра межі порожнини."""
        new_tris = [Triangle(e.a, e.b, p) for e in boundary]
        self.tris.extend(new_tris)
        return new_tris

    def remove_triangles_touching(self, super_tri: Triangle) -> int:
        """Прибрати всі трикутники зі спільною вершиною із super_tri. Повертає кількість."""
        eps = self.config.point_eps
        before = len(self.tris)
        self.tris = [t for t in self.tris if not t.shares_vertex_with(super_tri, eps)]
        return before - len(self.tris)

    # ---------- запити (без мутацій) ----------
    def find_bad(self, p: Pt) -> List[Triangle]:
        """Трикутники, чиє описане коло строго містить p."""
        cfg = self.config
        bad: List[Triangle] = []
        for t in self.tris:
            if t.circumcircle(cfg.collinear_eps) is None:
                log.debug("degenerate triangle %s is never bad", t)
                continue
            if t.contains_in_circumcircle(p, cfg.circle_eps, cfg.collinear_eps):
                bad.append(t)
        return bad

    def boundary_of(self, bad: Sequence[Triangle]) -> List[Edge]:
        """
        Межа порожнини: ребра, що належать рівно одному трикутнику з bad.
        Ребро, спільне для двох поганих трикутників, внутрішнє — відкидаємо.
        Порядок — порядок знаходження; кожне ребро один раз.
        """
        eps = self.config.edge_eps
        polygon: List[Edge] = []
        for t in bad:
            for e in t.edges():
                if _has_shared_edge(bad, t, e, eps):
                    continue
                if any(e.equals(q, eps) for q in polygon):
                    continue
                polygon.append(e)
        return polygon

    def edges(self) -> List[Edge]:
        """Усі ребра сітки без дублікатів (рівність ребер з допуском edge_eps)."""
        eps = self.config.edge_eps
        out: List[Edge] = []
        for t in self.tris:
            for e in t.edges():
                if not any(e.equals(q, eps) for q in out):
                    out.append(e)
        return out

    def vertices(self) -> List[Pt]:
        seen: Dict[Pt, None] = {}
        for t in self.tris:
            for v in t.points():
                seen.setdefault(v, None)
        return list(seen)

    def to_indexed(self, points: Sequence[Pt]) -> List[TriKey]:
        """Трикутники як трійки індексів у points (вершини мають бути саме з points)."""
        index: Dict[Pt, int] = {}
        for i, p in enumerate(points):
            index.setdefault(p, i)
        out: List[TriKey] = []
        for t in self.tris:
            try:
                out.append((index[t.a], index[t.b], index[t.c]))
            except KeyError as e:
                raise ValueError(f"vertex {e.args[0]} is not among the given points") from e
        return out

    # ---------- валідація сітки ----------
    def validate(self, points: Optional[Iterable[Pt]] = None,
                 forbidden: Optional[Triangle] = None) -> dict:
        """
        Швидка перевірка коректності трикутної сітки:
          - жодного виродженого (колінеарного) трикутника;
          - кожне ребро має рівно 1 (межа) або 2 (внутрішнє) інцидентних трикутники;
          - жодна точка з points (за замовчуванням — вершини сітки) не лежить строго
            всередині описаного кола трикутника, вершиною якого вона не є;
          - жоден трикутник не торкається вершин forbidden (супер-трикутник).
        Повертає словник з діагностикою (порожні списки = все ок).
        """
        cfg = self.config
        degenerate = [i for i, t in enumerate(self.tris) if t.is_degenerate(cfg.collinear_eps)]

        # вершини спільні за посиланням, тож точний hash Edge тут коректний
        edge_count: Dict[Edge, int] = {}
        for t in self.tris:
            for e in t.edges():
                edge_count[e] = edge_count.get(e, 0) + 1
        bad_edges = [(e, k) for e, k in edge_count.items() if k not in (1, 2)]

        pts = list(points) if points is not None else self.vertices()
        violations: List[Tuple[int, Pt]] = []
        for i, t in enumerate(self.tris):
            for p in pts:
                if t.has_vertex(p, cfg.point_eps):
                    continue
                if t.contains_in_circumcircle(p, cfg.circle_eps, cfg.collinear_eps):
                    violations.append((i, p))

        leaked: List[int] = []
        if forbidden is not None:
            leaked = [i for i, t in enumerate(self.tris) if t.shares_vertex_with(forbidden, cfg.point_eps)]

        return {
            "triangles": len(self.tris),
            "boundary_edges": sum(1 for k in edge_count.values() if k == 1),
            "interior_edges": sum(1 for k in edge_count.values() if k == 2),
            "degenerate": degenerate,
            "bad_edge_multiplicity": bad_edges,     # [(edge, count not in 1/2), ...]
            "delaunay_violations": violations,      # [(tri_idx, point), ...]
            "super_leakage": leaked,                # трикутники з вершиною супер-трикутника
        }


class State(Enum):
    PENDING = "pending"
    INITIALIZED = "initialized"
    INSERTING = "inserting"
    CLEANUP = "cleanup"
    DONE = "done"
    FAILED = "failed"


class Delaunay2D:
    """
    Інкрементальна 2D Делоне (Bowyer–Watson) з супер-трикутником.

    PENDING -> start() -> INITIALIZED -> insert()... -> INSERTING -> finish() -> CLEANUP -> DONE.
    Будь-яка помилка переводить у FAILED; часткового результату немає.
    """
    def __init__(self, points: Iterable, config: Optional[DelaunayConfig] = None):
        self.config = (config or DelaunayConfig()).validate()
        self.points: List[Pt] = as_points(points)
        self.mesh = TriMesh(self.config)
        self.super_tri: Optional[Triangle] = None
        self.state = State.PENDING
        self._inserted: List[Pt] = []
        self.skipped: List[int] = []  # індекси пропущених дублікатів

    # ---- супер-трикутник ----
    def _build_super_triangle(self) -> Triangle:
        """Рівносторонній трикутник з описаним радіусом R = super_margin * max(w, h) навколо bbox."""
        box = bounding_box(self.points)
        c = box.center
        R = self.config.super_margin * (max(box.width, box.height) or 1.0)
        h = R * sqrt(3.0) * 0.5
        return Triangle(
            Pt(c.x - h, c.y - 0.5*R),
            Pt(c.x + h, c.y - 0.5*R),
            Pt(c.x, c.y + R),
        )

    def _check_input(self) -> None:
        pts = self.points
        cfg = self.config
        if len(pts) < 3:
            raise DegenerateInputError(f"need at least 3 points, got {len(pts)}")
        p0 = pts[0]
        # найвіддаленіша від p0 точка задає пряму; шукаємо хоч одну точку поза нею
        p1 = max(pts, key=lambda q: dist(p0, q))
        if p0.equals(p1, cfg.point_eps):
            raise DegenerateInputError("fewer than 3 distinct points")
        if all(collinear(p0, p1, q, cfg.collinear_eps) for q in pts):
            raise DegenerateInputError("all points are collinear")

    def _fail(self, exc: Exception) -> None:
        self.state = State.FAILED
        log.error("triangulation failed: %s", exc)

    # ---- кроки ----
    def start(self) -> None:
        if self.state is not State.PENDING:
            raise RuntimeError(f"cannot start from state {self.state.value}")
        try:
            self._check_input()
        except DegenerateInputError as e:
            self._fail(e)
            raise
        self.super_tri = self._build_super_triangle()
        self.mesh.add(self.super_tri)
        self.state = State.INITIALIZED
        log.info("triangulating %d points", len(self.points))

    def insertion_order(self) -> List[Tuple[int, Pt]]:
        order = list(enumerate(self.points))
        if self.config.sort_points:
            order.sort(key=lambda ip: (ip[1].x, ip[1].y))
        return order

    def insert(self, p: Pt, index: int = -1) -> List[Triangle]:
        """
        Вставити одну точку. Повертає нові трикутники ([] для пропущеного дубліката).
        Спершу лише читаємо сітку (bad, boundary), потім змінюємо її.
        """
        if self.state not in (State.INITIALIZED, State.INSERTING):
            raise RuntimeError(f"cannot insert in state {self.state.value}")
        self.state = State.INSERTING
        cfg = self.config

        if any(p.equals(q, cfg.point_eps) for q in self._inserted):
            log.warning("point #%d %s duplicates an inserted point, skipped", index, p)
            self.skipped.append(index)
            return []

        # 1) сканування
        bad = self.mesh.find_bad(p)
        if not bad:
            err = NoBadTriangleError(p, index)
            self._fail(err)
            raise err
        boundary = self.mesh.boundary_of(bad)

        # 2) мутація
        self.mesh.remove_all(bad)
        new_tris = self.mesh.add_all(p, boundary)
        self._inserted.append(p)
        log.debug("point #%d: %d bad, %d boundary edges, %d triangles in mesh",
                  index, len(bad), len(boundary), len(self.mesh))
        return new_tris

    def finish(self) -> List[Triangle]:
        if self.state not in (State.INITIALIZED, State.INSERTING):
            raise RuntimeError(f"cannot finish from state {self.state.value}")
        if self.super_tri is None:
            raise RuntimeError("super-triangle is missing; start() was not completed")
        self.state = State.CLEANUP
        removed = self.mesh.remove_triangles_touching(self.super_tri)
        self.state = State.DONE
        log.info("%d triangles (%d removed with the super-triangle, %d duplicates skipped)",
                 len(self.mesh), removed, len(self.skipped))
        return self.mesh.triangles()

    def build(self) -> List[Triangle]:
        """Повний прогін: start, усі точки по черзі, finish."""
        self.start()
        for i, p in self.insertion_order():
            self.insert(p, i)
        return self.finish()

    # ---- результат ----
    def _require_done(self) -> None:
        if self.state is not State.DONE:
            raise RuntimeError(f"no result in state {self.state.value}")

    def triangles(self) -> List[Triangle]:
        self._require_done()
        return self.mesh.triangles()

    def edges(self) -> List[Edge]:
        self._require_done()
        return self.mesh.edges()

    def indexed(self) -> List[TriKey]:
        self._require_done()
        return self.mesh.to_indexed(self.points)

    def validate(self) -> dict:
        self._require_done()
        return self.mesh.validate(self.points, forbidden=self.super_tri)


def triangulate(points: Iterable, config: Optional[DelaunayConfig] = None) -> List[Triangle]:
    """Делоне-тріангуляція points. DegenerateInputError / NoBadTriangleError при невдачі."""
    return Delaunay2D(points, config).build()

def triangulate_edges(points: Iterable, config: Optional[DelaunayConfig] = None) -> List[Edge]:
    """Ребра тріангуляції без дублікатів."""
    d2 = Delaunay2D(points, config)
    d2.build()
    return d2.edges()


# ---------- утиліти ----------
def _has_shared_edge(tris: Sequence[Triangle], tri: Triangle, edge: Edge, eps: float) -> bool:
    """Чи має якийсь інший трикутник з tris ребро, рівне edge (з допуском eps)."""
    for t in tris:
        if t is tri:
            continue
        if any(e.equals(edge, eps) for e in t.edges()):
            return True
    return False
