"""Shared fixtures: a seeded numpy generator and a fixed-value random source."""

import os

import numpy as np
import pytest


class FixedRandom:
    """Random source stub returning the same value on every draw."""

    def __init__(self, value: float):
        self.value = value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self.value


@pytest.fixture
def rng() -> np.random.Generator:
    """Deterministic numpy generator, seeded from TEST_RNG_SEED (default 0)."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture
def fixed_random():
    """Factory for FixedRandom stubs."""
    return FixedRandom
