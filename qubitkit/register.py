"""
Quantum registers.

A register is a normalized complex amplitude vector of length 2^k, where k is
the number of simulated qubits. Index bits are read MSB first: the first qubit
of a composed register is the most significant bit of the amplitude index.

Registers are immutable except for collapse(), which replaces the amplitude
vector in place with a pure state.
"""

import numpy as np
from typing import Iterable, Protocol, Union

from .equality import almost_equal, exactly_equal
from .errors import DimensionError, NormalizationError, PurityError, RangeError
from .linalg import kron_n, vector_from_integer
from .logging import get_logger
from .numerics import is_power_of_two, log2

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Anything with a random() method returning a float in [0, 1)."""

    def random(self) -> float:
        ...


def _squared_magnitudes(vector: np.ndarray) -> np.ndarray:
    return vector.real ** 2 + vector.imag ** 2


def _format_part(x: float) -> str:
    return format(x, ".15g")


class QuantumRegister:
    """
    A register of qubits stored as a dense complex amplitude vector.

    Args:
        amplitudes: Probability amplitudes, as a list, generator or NumPy
                    vector. The count must be a power of two. The vector is
                    copied and normalized.
    """

    def __init__(self, amplitudes: Union[np.ndarray, Iterable[complex]]):
        if not isinstance(amplitudes, np.ndarray):
            amplitudes = list(amplitudes)
        vector = np.array(amplitudes, dtype=complex)

        if vector.ndim != 1:
            raise DimensionError("Amplitudes must form a one-dimensional vector.")
        if not is_power_of_two(vector.size):
            raise DimensionError(
                "A quantum register can only be initialized from a vector "
                f"whose dimension is a power of 2 (got {vector.size})."
            )

        self._set_vector(vector)
        self._normalize()

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_registers(cls, *registers) -> "QuantumRegister":
        """
        Tensor product of registers, first register = most significant bits.

        Accepts registers as separate arguments or as a single iterable.
        """
        if len(registers) == 1 and not isinstance(registers[0], QuantumRegister):
            registers = tuple(registers[0])
        if not registers:
            raise DimensionError("A register needs at least one sub-register.")
        return QuantumRegister(kron_n(register._vector for register in registers))

    @classmethod
    def from_integer(cls, value: int, bit_count: int = 0) -> "QuantumRegister":
        """
        Pure register holding an integer.

        Args:
            value: Non-negative integer
            bit_count: Register length in qubits; 0 uses the fewest qubits
                       that can hold value
        """
        return QuantumRegister(vector_from_integer(value, bit_count))

    # -------------------------------------------------------------------------
    # Named states
    # -------------------------------------------------------------------------

    @classmethod
    def epr_pair(cls) -> "QuantumRegister":
        """Einstein-Podolsky-Rosen pair (|00⟩ + |11⟩)/√2."""
        return QuantumRegister(np.array([1, 0, 0, 1], dtype=complex) / np.sqrt(2))

    @classmethod
    def w_state(cls, length: int = 3) -> "QuantumRegister":
        """W state: equal superposition of all states with a single 1 bit."""
        if length < 1:
            raise DimensionError("A W state needs at least one qubit.")
        vector = np.zeros(1 << length, dtype=complex)
        for i in range(length):
            vector[1 << i] = 1
        return QuantumRegister(vector / np.sqrt(length))

    @classmethod
    def ghz_state(cls, length: int = 3) -> "QuantumRegister":
        """Greenberger-Horne-Zeilinger state (|0...0⟩ + |1...1⟩)/√2."""
        if length < 1:
            raise DimensionError("A GHZ state needs at least one qubit.")
        vector = np.zeros(1 << length, dtype=complex)
        vector[0] = 1
        vector[-1] = 1
        return QuantumRegister(vector / np.sqrt(2))

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    def _set_vector(self, vector: np.ndarray):
        vector.setflags(write=False)
        self._vector = vector

    def _normalize(self):
        """Rescale the amplitudes so their squared magnitudes sum to 1."""
        magnitude = np.sqrt(np.sum(_squared_magnitudes(self._vector)))
        if magnitude == 0 or not np.isfinite(magnitude):
            raise NormalizationError(
                f"Cannot normalize an amplitude vector of norm {magnitude}."
            )
        if magnitude != 1:
            self._set_vector(self._vector / magnitude)

    @property
    def vector(self) -> np.ndarray:
        """Read-only view of the amplitude vector."""
        return self._vector.view()

    @property
    def length(self) -> int:
        """Number of amplitudes (2^qubit_count)."""
        return self._vector.size

    @property
    def qubit_count(self) -> int:
        return log2(self._vector.size)

    @property
    def probabilities(self) -> np.ndarray:
        """Measurement probability of each basis state."""
        return _squared_magnitudes(self._vector)

    @property
    def is_pure(self) -> bool:
        """True if exactly one amplitude is 1 and all others are 0."""
        return (np.count_nonzero(self._vector == 1) == 1
                and np.count_nonzero(self._vector) == 1)

    # -------------------------------------------------------------------------
    # Measurement
    # -------------------------------------------------------------------------

    def collapse(self, random_source: RandomSource):
        """
        Measure the register, collapsing it into a pure state in place.

        A threshold is drawn from random_source; the first basis state whose
        cumulative probability strictly exceeds it is selected. If rounding
        keeps the total mass at or below the threshold, the last basis state
        is selected.

        Args:
            random_source: Object whose random() returns a float in [0, 1)
        """
        threshold = random_source.random()
        cumulative = np.cumsum(_squared_magnitudes(self._vector))
        index = int(np.searchsorted(cumulative, threshold, side="right"))

        if index == cumulative.size:
            logger.warning(
                "Cumulative probability %r never exceeded threshold %r; "
                "collapsing to the last basis state", cumulative[-1], threshold
            )
            index = cumulative.size - 1

        logger.debug("Collapse with threshold %r selected index %d", threshold, index)

        collapsed = np.zeros(self._vector.size, dtype=complex)
        collapsed[index] = 1
        self._set_vector(collapsed)

    def get_value(self, portion_start: int = 0, portion_length: int = 0) -> int:
        """
        Classical value held by a pure register.

        Args:
            portion_start: Index of the first bit to read, 0 = most significant
            portion_length: Number of bits to read; 0 reads to the end

        Returns:
            The selected bits as an unsigned integer

        Raises:
            RangeError: If the portion does not fit in the register
            PurityError: If the register is not in a pure state
        """
        if portion_start < 0 or portion_length < 0:
            raise RangeError("Portion start and length must be non-negative.")

        register_length = self.qubit_count
        if portion_length == 0:
            portion_length = register_length - portion_start
        if portion_start > register_length or portion_length < 0:
            raise RangeError("The supplied portion overflows the quantum register.")

        trailing_bit_count = register_length - portion_start - portion_length
        if trailing_bit_count < 0:
            raise RangeError("The supplied portion overflows the quantum register.")

        indices = np.flatnonzero(self._vector == 1)
        if indices.size == 0:
            raise PurityError(
                "A value can only be extracted from a pure state quantum register."
            )

        index = int(indices[0]) >> trailing_bit_count
        if portion_start > 0:
            index &= (1 << portion_length) - 1
        return index

    # -------------------------------------------------------------------------
    # Comparison and display
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, QuantumRegister):
            return NotImplemented
        return exactly_equal(self._vector, other._vector)

    __hash__ = None

    def almost_equals(self, other) -> bool:
        """Equality within ALMOST_EQUAL_DECIMALS significant digits."""
        if not isinstance(other, QuantumRegister):
            return False
        return almost_equal(self._vector, other._vector)

    def __str__(self):
        """Ket notation, e.g. '0.707106781186548 |0> + 0.707106781186548 |11>'."""
        representation = ""

        for i, amplitude in enumerate(self._vector.tolist()):
            if amplitude == 0:
                continue

            term = ""
            if amplitude.real < 0 or (amplitude.real == 0 and amplitude.imag < 0):
                term += " - "
                amplitude = -amplitude
            elif representation:
                term += " + "

            if amplitude != 1:
                both = amplitude.real != 0 and amplitude.imag != 0
                if both:
                    term += "("
                if amplitude.real != 0:
                    term += _format_part(amplitude.real)
                if both:
                    term += " + " if amplitude.imag > 0 else " - "
                    term += _format_part(abs(amplitude.imag)) + " i"
                elif amplitude.imag != 0:
                    term += _format_part(amplitude.imag) + " i"
                if both:
                    term += ")"
                term += " "

            representation += term + "|" + format(i, "b") + ">"

        return representation.lstrip()

    def __repr__(self):
        return f"QuantumRegister({self._vector.tolist()!r})"
