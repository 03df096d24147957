from __future__ import annotations
from typing import Iterable, List, Sequence

from .errors import DegenerateInputError
from .geom import Pt, Edge, EPS_COLLINEAR, as_points
from .predicates import collinear, orient2d


class ConvexHull2D:
    """
    Опукла оболонка на площині (монотонний ланцюг Ендрю).

    Вхід: точки (мінімум 3, не всі колінеарні).
    Вихід: self.hull — індекси вершин у self.P проти годинникової стрілки,
    починаючи з лексикографічно найменшої. Точки всередині сторін до оболонки не входять.
    """

    def __init__(self, points: Iterable, eps: float = EPS_COLLINEAR):
        self.P: List[Pt] = as_points(points)
        self.eps = eps
        if len(self.P) < 3:
            raise DegenerateInputError("Need at least 3 points")
        self.hull: List[int] = self._build()
        if len(self.hull) < 3:
            raise DegenerateInputError("All points collinear: hull has no interior")

    # ---------------- Публічний API ----------------
    def indices(self) -> List[int]:
        return self.hull[:]

    def vertices(self) -> List[Pt]:
        return [self.P[i] for i in self.hull]

    def edges(self) -> List[Edge]:
        vs = self.vertices()
        return [Edge(vs[i], vs[(i + 1) % len(vs)]) for i in range(len(vs))]

    def area(self) -> float:
        vs = self.vertices()
        s = 0.0
        for i in range(len(vs)):
            a, b = vs[i], vs[(i + 1) % len(vs)]
            s += a.x*b.y - b.x*a.y
        return 0.5 * s

    def contains(self, p: Pt) -> bool:
        """Всередині або на межі (з допуском eps)."""
        for e in self.edges():
            if orient2d(e.a, e.b, p) < 0 and not collinear(e.a, e.b, p, self.eps):
                return False
        return True

    # ---------------- Внутрішні методи ----------------
    def _left_turn(self, i: int, j: int, k: int) -> bool:
        a, b, c = self.P[i], self.P[j], self.P[k]
        return orient2d(a, b, c) > 0 and not collinear(a, b, c, self.eps)

    def _chain(self, order: Sequence[int]) -> List[int]:
        chain: List[int] = []
        for i in order:
            while len(chain) >= 2 and not self._left_turn(chain[-2], chain[-1], i):
                chain.pop()
            chain.append(i)
        return chain

    def _build(self) -> List[int]:
        # точні дублікати відкидаємо, лишаючи перший індекс
        first: dict[Pt, int] = {}
        for i, p in enumerate(self.P):
            first.setdefault(p, i)
        order = sorted(first.values(), key=lambda i: (self.P[i].x, self.P[i].y))
        if len(order) < 3:
            return order

        lower = self._chain(order)
        upper = self._chain(order[::-1])
        # останні точки ланцюгів — початки один одного
        return lower[:-1] + upper[:-1]

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожна трійка послідовних вершин робить лівий поворот (опуклість, CCW);
          - усі вхідні точки всередині або на межі.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        n = len(self.hull)
        bad_turns = [self.hull[(i + 1) % n] for i in range(n)
                     if not self._left_turn(self.hull[i], self.hull[(i + 1) % n], self.hull[(i + 2) % n])]
        outside = [i for i, p in enumerate(self.P) if not self.contains(p)]
        return {
            "vertices": n,
            "bad_turns": bad_turns,
            "outside_points": outside,
        }
