import numpy as np
import pytest


@pytest.fixture
def matrix():
    # 3 features x 5 observations
    return np.array([[2., 4., 6., 8., 10.],
                     [-1., 0., 3., 1., 2.],
                     [100., 250., 175., 130., 90.]])


@pytest.fixture
def degenerate_matrix():
    return np.array([[2., 4., 6.],
                     [5., 5., 5.]])


@pytest.fixture
def random_matrix():
    rng = np.random.default_rng(42)
    return rng.normal(loc=3.0, scale=10.0, size=(6, 40))
