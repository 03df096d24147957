"""Помилки тріангуляції. Будь-яка з них перериває весь прогін: часткового результату немає."""
from __future__ import annotations

from typing import Optional

from .geom import Pt


class TriangulationError(ValueError):
    reason = "triangulation failed"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.reason)


class DegenerateInputError(TriangulationError):
    """Менше 3 різних точок або всі точки колінеарні — 2D тріангуляції не існує."""
    reason = "degenerate input"


class NoBadTriangleError(TriangulationError):
    """
    Жоден трикутник не містить точку в описаному колі.
    Означає, що супер-трикутник замалий або сітка вже зламана чисельно.
    """
    reason = "no bad triangle"

    def __init__(self, point: Pt, index: int):
        super().__init__(f"no triangle's circumcircle contains point #{index} {point}")
        self.point = point
        self.index = index


__all__ = ["TriangulationError", "DegenerateInputError", "NoBadTriangleError"]
