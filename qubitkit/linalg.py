"""
Linear-algebra primitives for registers and gates.

Vectors and matrices are plain complex NumPy arrays. Kronecker products are
folded left-to-right, so the first operand occupies the most-significant bits.
"""

import numpy as np
from typing import Iterable

from .errors import DimensionError
from .numerics import next_power_of_two


def kron(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Kronecker (tensor) product of two vectors or two matrices.

    For vectors of lengths L1 and L2, entry i*L2 + j equals a[i] * b[j].
    """
    return np.kron(np.asarray(a, dtype=complex), np.asarray(b, dtype=complex))


def kron_n(operands: Iterable[np.ndarray], ndim: int = 1) -> np.ndarray:
    """
    Kronecker product of all operands evaluated left-to-right.

    The fold starts from the identity [1] (or [[1]] for ndim=2), so an empty
    iterable yields the degenerate length-1 result.

    Args:
        operands: Vectors (ndim=1) or matrices (ndim=2)
        ndim: Dimensionality of the operands

    Returns:
        The combined vector or matrix
    """
    result = np.ones((1,) * ndim, dtype=complex)
    for operand in operands:
        result = kron(result, operand)
    return result


def vector_from_integer(value: int, bit_count: int = 0) -> np.ndarray:
    """
    One-hot complex vector representing an integer.

    Args:
        value: Non-negative integer to encode
        bit_count: Number of bits; 0 picks the smallest order that fits value

    Returns:
        Vector of length 2^bit_count (or the next power of two above value)
        with a single 1 at index value
    """
    if value < 0 or bit_count < 0:
        raise DimensionError("Value and bit count must be non-negative.")

    if bit_count == 0:
        # At least one qubit: value 0 would otherwise give a length-1 vector
        order = max(next_power_of_two(value), 2)
    else:
        order = 1 << bit_count

    if order <= value:
        raise DimensionError(
            f"The value {value} cannot be stored on {bit_count} bits."
        )

    vector = np.zeros(order, dtype=complex)
    vector[value] = 1
    return vector
