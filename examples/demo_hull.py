from cg2d.geom import unique_points
from cg2d.hull import ConvexHull2D

if __name__ == "__main__":
    raw = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.2), (0.5, 0.0),
    ]
    pts = unique_points(raw)
    hull = ConvexHull2D(pts)

    report = hull.validate()
    print("VALIDATION:", report)
    print("hull:", [tuple(p) for p in hull.vertices()])
    print("area:", hull.area())
