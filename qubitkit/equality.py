"""
Exact and approximate comparison of amplitude vectors and gate matrices.
"""

import numpy as np

# Significant decimal digits required for approximate equality
ALMOST_EQUAL_DECIMALS = 15


def tolerance() -> float:
    """Absolute/relative tolerance derived from ALMOST_EQUAL_DECIMALS."""
    return 10.0 ** -ALMOST_EQUAL_DECIMALS


def exactly_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """True if a and b have the same shape and bit-identical entries."""
    return a.shape == b.shape and bool(np.array_equal(a, b))


def almost_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """True if a and b have the same shape and every entry pair is close."""
    if a.shape != b.shape:
        return False
    tol = tolerance()
    return bool(np.allclose(a, b, rtol=tol, atol=tol))
