import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from dense_layer import DenseLayer


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def identity_layer():
    """3 nodes x 4 weights, zero bias, identity-like weight rows."""
    layer = DenseLayer(3, 4, rng=0)
    layer.load_params([
        [0.0, 0.0, 0.0],
        [[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0]],
    ])
    return layer
