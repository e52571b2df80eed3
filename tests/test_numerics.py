"""Tests for numeric helpers and linear-algebra primitives."""

import numpy as np
import pytest

from qubitkit import (
    DimensionError,
    complex_exp, next_power_of_two, is_power_of_two, log2,
    kron, kron_n, vector_from_integer,
)


class TestComplexExp:
    """Tests for the exact complex exponential."""

    def test_quadrant_boundaries_are_exact(self):
        """Multiples of pi/2 give exact units."""
        assert complex_exp(complex(0, np.pi / 2)) == 1j
        assert complex_exp(complex(0, np.pi)) == -1
        assert complex_exp(complex(0, 3 * np.pi / 2)) == -1j

    def test_negative_quadrant_boundaries_are_exact(self):
        """Negative multiples of pi/2 are exact too."""
        assert complex_exp(complex(0, -np.pi / 2)) == -1j
        assert complex_exp(complex(0, -np.pi)) == -1

    def test_other_values_match_numpy(self):
        """Everything else defers to numpy."""
        assert complex_exp(complex(0, 0.3)) == complex(np.exp(0.3j))
        assert complex_exp(1 + 1j) == complex(np.exp(1 + 1j))
        assert complex_exp(0) == 1


class TestPowersOfTwo:
    """Tests for power-of-two helpers."""

    def test_next_power_of_two_is_strictly_larger(self):
        """Powers of two map to the next one up."""
        assert next_power_of_two(0) == 1
        assert next_power_of_two(1) == 2
        assert next_power_of_two(27) == 32
        assert next_power_of_two(32) == 64

    def test_is_power_of_two(self):
        """Zero is not a power of two."""
        assert [n for n in range(20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]

    def test_log2(self):
        """log2 rounds down."""
        assert log2(1) == 0
        assert log2(2) == 1
        assert log2(32) == 5
        assert log2(33) == 5

    def test_log2_rejects_zero(self):
        """log2(0) is undefined."""
        with pytest.raises(ValueError):
            log2(0)


class TestKronecker:
    """Tests for Kronecker products."""

    def test_vector_product_ordering(self):
        """Entry i*L2 + j equals v1[i] * v2[j]."""
        v1 = np.array([1, 2])
        v2 = np.array([3, 5, 7, 11])
        product = kron(v1, v2)
        assert product.shape == (8,)
        for i in range(2):
            for j in range(4):
                assert product[i * 4 + j] == v1[i] * v2[j]

    def test_kron_n_of_nothing_is_identity(self):
        """An empty product is the multiplicative identity."""
        assert np.array_equal(kron_n([]), [1])
        assert np.array_equal(kron_n([], ndim=2), [[1]])

    def test_kron_n_first_operand_is_most_significant(self):
        """|1>|0>|0> sets index 4."""
        one = np.array([0, 1])
        zero = np.array([1, 0])
        assert np.argmax(np.abs(kron_n([one, zero, zero]))) == 4


class TestVectorFromInteger:
    """Tests for one-hot integer encoding."""

    def test_minimal_width(self):
        """15 needs four bits."""
        vector = vector_from_integer(15)
        assert vector.shape == (16,)
        assert vector[15] == 1
        assert np.count_nonzero(vector) == 1

    def test_explicit_width(self):
        """An explicit width pads with leading zeros."""
        vector = vector_from_integer(7, 4)
        assert vector.shape == (16,)
        assert vector[7] == 1

    def test_zero_uses_one_qubit(self):
        """0 still occupies one qubit."""
        assert np.array_equal(vector_from_integer(0), [1, 0])

    def test_value_too_large_for_width(self):
        """7 does not fit in two bits."""
        with pytest.raises(DimensionError):
            vector_from_integer(7, 2)

    def test_negative_value(self):
        """Negative values have no basis state."""
        with pytest.raises(DimensionError):
            vector_from_integer(-1)
