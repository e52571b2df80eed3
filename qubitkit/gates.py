"""
Quantum gates.

A gate is a square complex matrix whose order is a power of two. Gates are
immutable; applying a gate to a register returns a new register. Unitarity is
not checked.

This module also holds the standard gate library: single-qubit gates (Pauli,
Hadamard, phase shift, √NOT), two-qubit gates (CNOT, SWAP, √SWAP), three-qubit
gates (Toffoli, Fredkin) and the Quantum Fourier Transform.
"""

import numpy as np
from typing import Iterable, Union

from .equality import almost_equal, exactly_equal
from .errors import DimensionError
from .linalg import kron_n
from .logging import get_logger
from .numerics import complex_exp, is_power_of_two, log2
from .register import QuantumRegister

logger = get_logger(__name__)


class QuantumGate:
    """
    A quantum gate given by its matrix.

    Args:
        coefficients: Square 2-D array of complex coefficients whose order is
                      a power of two. The array is copied.
    """

    def __init__(self, coefficients: Union[np.ndarray, Iterable[Iterable[complex]]]):
        matrix = np.array(coefficients, dtype=complex)

        if (matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]
                or not is_power_of_two(matrix.shape[0])):
            raise DimensionError(
                "A quantum gate can only be initialized from a square matrix "
                f"whose order is a power of 2 (got shape {matrix.shape})."
            )

        matrix.setflags(write=False)
        self._matrix = matrix

    @classmethod
    def tensor(cls, *gates) -> "QuantumGate":
        """
        Tensor product of gates, first gate = most significant qubits.

        Accepts gates as separate arguments or as a single iterable.
        """
        if len(gates) == 1 and not isinstance(gates[0], QuantumGate):
            gates = tuple(gates[0])
        return cls(kron_n((gate._matrix for gate in gates), ndim=2))

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the gate matrix."""
        return self._matrix.view()

    @property
    def order(self) -> int:
        return self._matrix.shape[0]

    @property
    def qubit_count(self) -> int:
        return log2(self.order)

    def apply(self, register: QuantumRegister) -> QuantumRegister:
        """
        Apply the gate to a register.

        Args:
            register: Register whose length equals the gate order

        Returns:
            A new, normalized register
        """
        if register.length != self.order:
            raise DimensionError(
                f"A gate of order {self.order} cannot be applied to a register "
                f"of length {register.length}: dimension mismatch."
            )
        return QuantumRegister(self._matrix @ register.vector)

    def __matmul__(self, other):
        if isinstance(other, QuantumRegister):
            return self.apply(other)
        return NotImplemented

    def adjoint(self) -> "QuantumGate":
        """Conjugate transpose (the inverse of a unitary gate)."""
        return QuantumGate(self._matrix.conj().T)

    def __eq__(self, other):
        if not isinstance(other, QuantumGate):
            return NotImplemented
        return exactly_equal(self._matrix, other._matrix)

    def __hash__(self):
        return hash(tuple(self._matrix.ravel().tolist()))

    def almost_equals(self, other) -> bool:
        """Equality within ALMOST_EQUAL_DECIMALS significant digits."""
        if not isinstance(other, QuantumGate):
            return False
        return almost_equal(self._matrix, other._matrix)

    def __str__(self):
        return np.array2string(self._matrix, precision=15, suppress_small=True)

    def __repr__(self):
        return f"QuantumGate({self._matrix.tolist()!r})"


def apply_gate(gate: QuantumGate, register: QuantumRegister) -> QuantumRegister:
    """Apply gate to register, returning a new register."""
    return gate.apply(register)


# =============================================================================
# Single-qubit gates
# =============================================================================

X_gate = QuantumGate([[0, 1],       # Pauli X gate (NOT gate)
                      [1, 0]])

NOT_gate = X_gate

Y_gate = QuantumGate([[ 0, -1j],    # Pauli Y gate
                      [1j,   0]])

Z_gate = QuantumGate([[1,  0],      # Pauli Z gate = P(π)
                      [0, -1]])

H_gate = QuantumGate(np.array([[1,  1],     # Hadamard gate
                               [1, -1]]) / np.sqrt(2))

SQRT_NOT_gate = QuantumGate(np.array([[1 + 1j, 1 - 1j],   # √NOT, squares to X
                                      [1 - 1j, 1 + 1j]]) / 2)


def identity_gate(register_length: int = 1) -> QuantumGate:
    """Identity on register_length qubits."""
    if register_length < 0:
        raise DimensionError("Register length must be non-negative.")
    return QuantumGate(np.eye(1 << register_length, dtype=complex))


I_gate = identity_gate(1)


def hadamard_gate(register_length: int = 1) -> QuantumGate:
    """Hadamard gate applied to each of register_length qubits (H⊗...⊗H)."""
    if register_length < 1:
        raise DimensionError("A Hadamard gate needs at least one qubit.")
    return QuantumGate.tensor([H_gate] * register_length)


def P_gate(phase: float) -> QuantumGate:
    """Phase shift gate P(φ) = diag(1, e^{iφ})"""
    return QuantumGate([[1,                           0],
                        [0, complex_exp(complex(0, phase))]])


# =============================================================================
# Two-qubit gates
# =============================================================================

def controlled_gate(gate: QuantumGate) -> QuantumGate:
    """
    Controlled version of a single-qubit gate.

    The first qubit is the control: the result is the block matrix
    [[I, 0], [0, U]].

    Raises:
        DimensionError: If gate is not 2x2
    """
    if gate.order != 2:
        raise DimensionError("A controlled gate can only be created from a unary gate.")

    matrix = np.eye(4, dtype=complex)
    matrix[2:, 2:] = gate.matrix
    return QuantumGate(matrix)


CNOT_gate = controlled_gate(X_gate)

SWAP_gate = QuantumGate([[1, 0, 0, 0],   # Swap gate
                         [0, 0, 1, 0],
                         [0, 1, 0, 0],
                         [0, 0, 0, 1]])

SQRT_SWAP_gate = QuantumGate([[1,              0,              0, 0],   # √SWAP
                              [0, (1 + 1j) / 2, (1 - 1j) / 2, 0],
                              [0, (1 - 1j) / 2, (1 + 1j) / 2, 0],
                              [0,              0,              0, 1]])


# =============================================================================
# Three-qubit gates
# =============================================================================

TOFF_gate = QuantumGate([[1, 0, 0, 0, 0, 0, 0, 0],   # Toffoli gate (CCNOT)
                         [0, 1, 0, 0, 0, 0, 0, 0],
                         [0, 0, 1, 0, 0, 0, 0, 0],
                         [0, 0, 0, 1, 0, 0, 0, 0],
                         [0, 0, 0, 0, 1, 0, 0, 0],
                         [0, 0, 0, 0, 0, 1, 0, 0],
                         [0, 0, 0, 0, 0, 0, 0, 1],
                         [0, 0, 0, 0, 0, 0, 1, 0]])

FREDKIN_gate = QuantumGate([[1, 0, 0, 0, 0, 0, 0, 0],   # Fredkin gate (CSWAP)
                            [0, 1, 0, 0, 0, 0, 0, 0],
                            [0, 0, 1, 0, 0, 0, 0, 0],
                            [0, 0, 0, 1, 0, 0, 0, 0],
                            [0, 0, 0, 0, 1, 0, 0, 0],
                            [0, 0, 0, 0, 0, 0, 1, 0],
                            [0, 0, 0, 0, 0, 1, 0, 0],
                            [0, 0, 0, 0, 0, 0, 0, 1]])


# =============================================================================
# Quantum Fourier Transform
# =============================================================================

def _fourier_matrix(register_length: int, sign: int) -> np.ndarray:
    if register_length < 0:
        raise DimensionError("Register length must be non-negative.")

    order = 1 << register_length
    logger.debug("Building %d x %d Fourier matrix", order, order)

    # Only `order` distinct coefficients occur, indexed by (i*j) mod order
    coefficients = np.array(
        [complex_exp(complex(0, sign * 2 * np.pi * k / order)) for k in range(order)]
    ) / np.sqrt(order)

    indices = np.arange(order)
    return coefficients[np.outer(indices, indices) % order]


def QFT_gate(register_length: int) -> QuantumGate:
    """
    Quantum Fourier Transform on register_length qubits.

    The QFT maps the computational basis states as:
    |j⟩ → (1/√N) Σₖ exp(2πijk/N) |k⟩
    """
    return QuantumGate(_fourier_matrix(register_length, 1))


def QFT_inverse_gate(register_length: int) -> QuantumGate:
    """Inverse Quantum Fourier Transform, the adjoint of QFT_gate."""
    return QuantumGate(_fourier_matrix(register_length, -1))
