"""
Single qubits.

A qubit is a two-amplitude register whose global phase is canonicalized:
after normalization the |0⟩ amplitude is always a non-negative real number.
Registers composed from qubits are not re-canonicalized.
"""

import numpy as np

from .numerics import complex_exp
from .register import QuantumRegister


class Qubit(QuantumRegister):
    """
    A single qubit α|0⟩ + β|1⟩.

    Args:
        zero_amplitude: Amplitude α of |0⟩
        one_amplitude: Amplitude β of |1⟩
    """

    def __init__(self, zero_amplitude: complex, one_amplitude: complex):
        super().__init__([zero_amplitude, one_amplitude])

    @classmethod
    def from_parts(cls, zero_real: float, zero_imaginary: float,
                   one_real: float, one_imaginary: float) -> "Qubit":
        """Qubit from the real and imaginary parts of both amplitudes."""
        return cls(complex(zero_real, zero_imaginary), complex(one_real, one_imaginary))

    @classmethod
    def from_bloch(cls, colatitude: float, longitude: float) -> "Qubit":
        """
        Qubit from Bloch sphere coordinates.

        cos(θ/2)|0⟩ + e^{iφ} sin(θ/2)|1⟩ with θ the colatitude and φ the
        longitude.
        """
        return cls(np.cos(colatitude / 2),
                   np.sin(colatitude / 2) * complex_exp(complex(0, longitude)))

    @classmethod
    def zero(cls) -> "Qubit":
        """|0⟩"""
        return cls(1, 0)

    @classmethod
    def one(cls) -> "Qubit":
        """|1⟩"""
        return cls(0, 1)

    @property
    def zero_amplitude(self) -> complex:
        return complex(self._vector[0])

    @property
    def one_amplitude(self) -> complex:
        return complex(self._vector[1])

    def _normalize(self):
        super()._normalize()

        # Rotate away the global phase, read from the normalized |0⟩ amplitude
        phase = np.angle(self._vector[0])
        if phase != 0:
            self._set_vector(self._vector * complex_exp(complex(0, -phase)))

    def __repr__(self):
        return f"Qubit({self.zero_amplitude!r}, {self.one_amplitude!r})"
