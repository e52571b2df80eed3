"""
Small numeric helpers used throughout the simulator.

All functions here are pure and operate on Python ints and complex numbers.
"""

import numpy as np

# exp(i*x) at the quadrant boundaries, where np.exp leaves ~1e-16 residue
_QUADRANT_VALUES = {
    np.pi / 2: 1j,
    np.pi: -1 + 0j,
    3 * np.pi / 2: -1j,
    -np.pi / 2: -1j,
    -np.pi: -1 + 0j,
    -3 * np.pi / 2: 1j,
}


def complex_exp(value: complex) -> complex:
    """
    Complex exponential, exact at the quadrant boundaries.

    For purely imaginary arguments ±iπ/2, ±iπ and ±3iπ/2 the exact unit value
    is returned, so that e.g. P(π/2) contains exactly i.

    Args:
        value: Exponent

    Returns:
        exp(value) as a Python complex
    """
    value = complex(value)
    if value.real == 0 and value.imag in _QUADRANT_VALUES:
        return complex(_QUADRANT_VALUES[value.imag])
    return complex(np.exp(value))


def next_power_of_two(value: int) -> int:
    """
    Smallest power of two strictly greater than value.

    Args:
        value: Non-negative integer

    Returns:
        2^k with 2^k > value (1 for value == 0)
    """
    if value < 0:
        raise ValueError("value must be non-negative")
    return 1 << int(value).bit_length()


def is_power_of_two(value: int) -> bool:
    """True if value is 2^k for some k >= 0."""
    return value > 0 and (value & (value - 1)) == 0


def log2(value: int) -> int:
    """
    Integer binary logarithm (floor).

    Args:
        value: Positive integer

    Returns:
        k such that 2^k <= value < 2^(k+1)
    """
    if value <= 0:
        raise ValueError("log2 is only defined for positive integers")
    return int(value).bit_length() - 1

