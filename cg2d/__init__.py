"""
cg2d — мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: інкрементальна Делоне-тріангуляція (Bowyer–Watson) + опукла оболонка.
"""

import logging as _logging

__version__ = "0.1.0"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from cg2d.geom import Pt, Edge, Circle, EPS_POINT, EPS_EDGE, EPS_CIRCLE, EPS_COLLINEAR, unique_points
from cg2d.predicates import orient2d, circumcenter, in_circumcircle
from cg2d.config import DelaunayConfig
from cg2d.errors import TriangulationError, DegenerateInputError, NoBadTriangleError
from cg2d.mesh import Triangle, TriMesh, Delaunay2D, State, triangulate, triangulate_edges
from cg2d.hull import ConvexHull2D
from cg2d.logging_utils import configure_logging, get_logger

__all__ = [
    "Pt", "Edge", "Circle", "EPS_POINT", "EPS_EDGE", "EPS_CIRCLE", "EPS_COLLINEAR", "unique_points",
    "orient2d", "circumcenter", "in_circumcircle",
    "DelaunayConfig",
    "TriangulationError", "DegenerateInputError", "NoBadTriangleError",
    "Triangle", "TriMesh", "Delaunay2D", "State", "triangulate", "triangulate_edges",
    "ConvexHull2D",
    "configure_logging", "get_logger", "__version__",
]
