import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(20240601)


@pytest.fixture
def random_rgb(rng):
    """200 random unit RGB triples, shape (200, 3)."""
    return rng.random((200, 3))
