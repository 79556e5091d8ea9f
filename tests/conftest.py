import itertools

import numpy as np
import pytest

from ndhull import DefaultVertex


@pytest.fixture
def tetrahedron():
    return [
        DefaultVertex((0.0, 0.0, 0.0)),
        DefaultVertex((1.0, 0.0, 0.0)),
        DefaultVertex((0.0, 1.0, 0.0)),
        DefaultVertex((0.0, 0.0, 1.0)),
    ]


@pytest.fixture
def cube_with_inner_points():
    corners = [tuple(float(c) for c in p) for p in itertools.product((0, 1), repeat=3)]
    inner = [(0.5, 0.5, 0.5), (0.2, 0.8, 0.3), (0.8, 0.2, 0.7)]
    return corners + inner


@pytest.fixture
def random_cloud():
    def make(n, d, seed=0):
        rng = np.random.default_rng(seed)
        return [tuple(p) for p in rng.standard_normal((n, d))]

    return make
