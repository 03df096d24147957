# examples/demo_pipeline.py
from cg2d.pipeline import triangulate_points

if __name__ == "__main__":
    square = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.45), (0.2, 0.8), (0.8, 0.3),
    ]

    for backend in ("internal", "scipy"):
        pts, hull, tris = triangulate_points(square, backend=backend)
        print(f"[{backend}] vertices: {len(pts)}, hull: {len(hull)}, triangles: {len(tris)}")
