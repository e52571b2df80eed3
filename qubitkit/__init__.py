"""
qubitkit - quantum registers and gates as NumPy vectors and matrices.

Registers are normalized complex amplitude vectors of length 2^k; gates are
square complex matrices of order 2^k. Composition uses the Kronecker product
with the first operand as the most significant qubit.

Modules:
    register - QuantumRegister, collapse and value extraction
    qubit    - Qubit, with global-phase canonicalization
    gates    - QuantumGate and the standard gate library (H, X, CNOT, QFT, ...)
    linalg   - Kronecker products and integer encoding
    numerics - complex_exp, power-of-two helpers
    utils    - state comparison (global phase, fidelity)

Quick Start:
    >>> import random
    >>> from qubitkit import Qubit, QuantumRegister, H_gate, CNOT_gate, I_gate, QuantumGate
    >>> register = QuantumRegister.from_registers(Qubit.zero(), Qubit.zero())
    >>> register = CNOT_gate @ (QuantumGate.tensor(H_gate, I_gate) @ register)
    >>> register.collapse(random.Random())
    >>> register.get_value() in (0, 3)
    True
"""

# Errors
from .errors import (
    QuantumError,
    DimensionError,
    RangeError,
    PurityError,
    NormalizationError,
)

# States
from .register import QuantumRegister, RandomSource
from .qubit import Qubit

# Gates
from .gates import (
    QuantumGate,
    apply_gate,
    # Single-qubit gates
    I_gate,
    X_gate,
    NOT_gate,
    Y_gate,
    Z_gate,
    H_gate,
    SQRT_NOT_gate,
    P_gate,
    identity_gate,
    hadamard_gate,
    # Two-qubit gates
    controlled_gate,
    CNOT_gate,
    SWAP_gate,
    SQRT_SWAP_gate,
    # Three-qubit gates
    TOFF_gate,
    FREDKIN_gate,
    # QFT
    QFT_gate,
    QFT_inverse_gate,
)

# Numerics and linear algebra
from .numerics import (
    complex_exp,
    next_power_of_two,
    is_power_of_two,
    log2,
)
from .linalg import kron, kron_n, vector_from_integer
from .equality import ALMOST_EQUAL_DECIMALS

# Utilities
from .utils import allclose_up_to_global_phase, state_fidelity

__version__ = "0.1.0"
__all__ = [
    # Errors
    "QuantumError",
    "DimensionError",
    "RangeError",
    "PurityError",
    "NormalizationError",
    # States
    "QuantumRegister",
    "RandomSource",
    "Qubit",
    # Gates
    "QuantumGate",
    "apply_gate",
    "I_gate",
    "X_gate",
    "NOT_gate",
    "Y_gate",
    "Z_gate",
    "H_gate",
    "SQRT_NOT_gate",
    "P_gate",
    "identity_gate",
    "hadamard_gate",
    "controlled_gate",
    "CNOT_gate",
    "SWAP_gate",
    "SQRT_SWAP_gate",
    "TOFF_gate",
    "FREDKIN_gate",
    "QFT_gate",
    "QFT_inverse_gate",
    # Numerics
    "complex_exp",
    "next_power_of_two",
    "is_power_of_two",
    "log2",
    "kron",
    "kron_n",
    "vector_from_integer",
    "ALMOST_EQUAL_DECIMALS",
    # Utils
    "allclose_up_to_global_phase",
    "state_fidelity",
]
