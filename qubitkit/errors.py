"""
Exception types raised by qubitkit.

Every error derives from QuantumError, and also from the builtin exception
a caller would naturally catch for the same kind of problem.
"""


class QuantumError(Exception):
    """Base class for all qubitkit errors."""


class DimensionError(QuantumError, ValueError):
    """A vector or matrix has the wrong shape for the requested operation."""


class RangeError(QuantumError, ValueError):
    """A requested bit portion does not fit inside the register."""


class NormalizationError(QuantumError, ValueError):
    """An amplitude vector has no finite, non-zero norm."""


class PurityError(QuantumError, RuntimeError):
    """A classical value was requested from a register that is not pure."""
