import numpy as np
import pytest

from cg2d import Pt


@pytest.fixture
def unit_square():
    return [Pt(0.0, 0.0), Pt(1.0, 0.0), Pt(1.0, 1.0), Pt(0.0, 1.0)]


@pytest.fixture
def random_points():
    """Фабрика випадкових точок загального положення з фіксованим seed."""
    def make(n, seed=0, scale=100.0):
        rng = np.random.default_rng(seed)
        return [Pt(float(x), float(y)) for x, y in rng.uniform(0.0, scale, size=(n, 2))]
    return make
