# examples/main.py
from __future__ import annotations

import numpy as np

from cg2d import ConvexHull2D, Delaunay2D, DelaunayConfig, configure_logging
from cg2d.pipeline import triangulate_points


def write_off_from_faces(path: str, pts, faces) -> None:
    """
    OFF для трикутної сітки на площині (z = 0), заданої вершинами pts (Pt) і списком граней faces.
    faces — список (i,j,k) з індексами у pts.
    """
    used = sorted({i for tri in faces for i in tri})
    remap = {old: new for new, old in enumerate(used)}

    lines = []
    lines.append("OFF")
    lines.append(f"{len(used)} {len(faces)} 0")

    # вершини
    for i in used:
        p = pts[i]
        lines.append(f"{p.x} {p.y} 0.0")

    # грані
    for (a, b, c) in faces:
        aa, bb, cc = remap[a], remap[b], remap[c]
        lines.append(f"3 {aa} {bb} {cc}")

    with open(path, "w", encoding="utf-8") as f:
        f.write("\n".join(lines))


def main():
    configure_logging("INFO")

    # --- 1) Вхідні дані ---
    # Можеш змінити на читання з файлу
    rng = np.random.default_rng(7)
    points = rng.uniform(0.0, 100.0, size=(60, 2))

    # --- 2) Наша тріангуляція ---
    d2 = Delaunay2D(points, DelaunayConfig(sort_points=True))
    d2.build()
    hull = ConvexHull2D(d2.points)

    n, h = len(d2.points), len(hull.indices())
    print(f"Вершини:          {n}")
    print(f"Вершин оболонки:  {h}")
    print(f"Трикутників:      {len(d2.triangles())}  (очікується 2n-h-2 = {2*n - h - 2})")

    # --- 3) Валідація ---
    report = d2.validate()
    print("VALIDATION:", {k: (v if isinstance(v, int) else len(v)) for k, v in report.items()})

    # --- 4) Порівняння з SciPy ---
    _, _, tris = triangulate_points(points, backend="scipy")
    print(f"SciPy трикутників: {len(tris)}")

    # --- 5) delaunay.off — для MeshLab/ParaView ---
    write_off_from_faces("delaunay.off", d2.points, d2.indexed())
    print("delaunay.off записано.")


if __name__ == "__main__":
    main()
