"""Налаштування тріангуляції: допуски та розмір супер-трикутника."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from .geom import EPS_CIRCLE, EPS_COLLINEAR, EPS_EDGE, EPS_POINT


@dataclass(frozen=True)
class DelaunayConfig:
    """
    Усі допуски, які Delaunay2D протягує у порівняння.

    Attributes
    ----------
    point_eps : float
        Рівність точок (дублікати, вершини супер-трикутника).
    edge_eps : float
        Рівність ребер при побудові межі порожнини.
    circle_eps : float
        Запас для строгого тесту dist(p, center) < radius - circle_eps.
    collinear_eps : float
        Відносний поріг колінеарності для центру описаного кола.
    super_margin : float
        Відстань вершин супер-трикутника від центру bbox у розмірах bbox.
    sort_points : bool
        Вставляти точки в лексикографічному порядку (x, y), а не в порядку входу.
    """
    point_eps: float = EPS_POINT
    edge_eps: float = EPS_EDGE
    circle_eps: float = EPS_CIRCLE
    collinear_eps: float = EPS_COLLINEAR
    super_margin: float = 1000.0
    sort_points: bool = False

    def validate(self) -> "DelaunayConfig":
        for name in ("point_eps", "edge_eps", "circle_eps", "collinear_eps"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"{name} must be non-negative")
        # вписане коло супер-трикутника (R/2) має накривати bbox
        if self.super_margin < 2.0:
            raise ValueError("super_margin must be >= 2.0")
        return self

    def with_overrides(self, **overrides: Any) -> "DelaunayConfig":
        return replace(self, **overrides).validate()


__all__ = ["DelaunayConfig"]
