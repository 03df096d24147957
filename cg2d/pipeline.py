from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

from .config import DelaunayConfig
from .geom import Pt, unique_points
from .hull import ConvexHull2D
from .logging_utils import get_logger
from .mesh import Delaunay2D

log = get_logger(__name__)


def triangulate_points(
    points: Iterable,
    backend: str = "internal",
    config: Optional[DelaunayConfig] = None,
) -> Tuple[List[Pt], List[int], List[Tuple[int, int, int]]]:
    """
    Повний пайплайн:
      - прибирає дублікати точок;
      - будує опуклу оболонку (ConvexHull2D) -> hull;
      - будує Делоне-тріангуляцію нашим Delaunay2D ("internal") або SciPy ("scipy").

    Повертає:
      pts       — список Pt у фінальному порядку;
      hull      — індекси вершин оболонки у pts (CCW);
      triangles — список трикутників (індекси у pts).
    """
    pts: List[Pt] = unique_points(points)

    # 1) опукла оболонка; заодно відсікає колінеарний вхід
    hull = ConvexHull2D(pts).indices()

    kind = backend.lower()
    if kind == "internal":
        d2 = Delaunay2D(pts, config)
        d2.build()
        triangles = d2.indexed()

    elif kind == "scipy":
        try:
            import numpy as np
            from scipy.spatial import Delaunay
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy; install scipy or use backend='internal'."
            ) from e

        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        dela = Delaunay(arr)
        triangles = [tuple(int(i) for i in simplex) for simplex in dela.simplices]

    else:
        raise ValueError(f"Unknown backend: {backend}")

    log.debug("%s backend: %d points, %d hull vertices, %d triangles",
              kind, len(pts), len(hull), len(triangles))
    return pts, hull, triangles
