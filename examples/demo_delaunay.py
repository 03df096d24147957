# examples/demo_delaunay.py
from cg2d import Delaunay2D, configure_logging

if __name__ == "__main__":
    configure_logging("INFO")

    # квадрат + внутрішні точки
    raw = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.45), (0.2, 0.8), (0.8, 0.3), (0.3, 0.15),
    ]

    d2 = Delaunay2D(raw)
    d2.build()                    # супер-трикутник, вставка всіх точок, прибирання

    # простенька статистика
    print("triangles:", len(d2.triangles()))
    print("edges:", len(d2.edges()))

    report = d2.validate()
    print("VALIDATION:", report)
