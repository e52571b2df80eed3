"""
Utility functions for comparing quantum states.

Both functions accept registers or raw amplitude vectors.
"""

import numpy as np

from .register import QuantumRegister


def _as_vector(state) -> np.ndarray:
    if isinstance(state, QuantumRegister):
        return state.vector
    return np.asarray(state).reshape(-1)


def allclose_up_to_global_phase(v, w, atol: float = 1e-9) -> bool:
    """
    Check if two quantum states are equal up to a global phase.

    Global phase has no physical significance, so this is the right test for
    states produced by different gate sequences. Exact and approximate
    register equality are phase-sensitive.

    Args:
        v: First quantum state
        w: Second quantum state
        atol: Absolute tolerance for comparison

    Returns:
        True if states are equal up to global phase
    """
    v = _as_vector(v)
    w = _as_vector(w)
    if v.shape != w.shape:
        return False

    # Find a stable pivot amplitude in w
    idx = np.argmax(np.abs(w))
    if np.abs(w[idx]) < atol:
        return bool(np.allclose(v, w, atol=atol))

    phase = v[idx] / w[idx]
    return bool(np.allclose(v, phase * w, atol=atol))


def state_fidelity(v, w) -> float:
    """
    Fidelity |⟨v|w⟩|² between two pure quantum states, from 0 to 1.
    """
    v = _as_vector(v)
    w = _as_vector(w)
    return float(np.abs(np.vdot(v, w)) ** 2)
