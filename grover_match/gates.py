from __future__ import annotations

from typing import Iterable, Optional, Sequence

import numpy as np

from grover_match.errors import ConfigurationError
from grover_match.statevector import StateVector

INV_SQRT2 = 1.0 / np.sqrt(2.0)


def bit_flip(state: StateVector, position: int) -> StateVector:
    """X on one position: swaps amplitude pairs differing only in that bit."""
    state.ensure_live()
    lo, hi = state.pairs(state.check_position(position))
    state.data[lo], state.data[hi] = state.data[hi], state.data[lo]
    state.check_norm(f"bit_flip({position})")
    return state


def phase_flip(state: StateVector, position: int) -> StateVector:
    """Z on one position."""
    state.ensure_live()
    _, hi = state.pairs(state.check_position(position))
    state.data[hi] *= -1
    state.check_norm(f"phase_flip({position})")
    return state


def hadamard(state: StateVector, position: int) -> StateVector:
    state.ensure_live()
    lo, hi = state.pairs(state.check_position(position))
    a = state.data[lo]
    b = state.data[hi]
    state.data[lo] = (a + b) * INV_SQRT2
    state.data[hi] = (a - b) * INV_SQRT2
    state.check_norm(f"hadamard({position})")
    return state


def controlled_phase_flip(state: StateVector, controls: Sequence[int], target: int) -> StateVector:
    """Multi-controlled Z: negates every basis state with all controls and target set."""
    state.ensure_live()
    target = state.check_position(target)
    controls = [state.check_position(c) for c in controls]
    if target in controls:
        raise ConfigurationError(
            f"target {target} cannot also be a control ({controls})")
    if len(set(controls)) != len(controls):
        raise ConfigurationError(f"duplicate control positions: {controls}")
    if not controls:
        return phase_flip(state, target)

    want = state.mask(target)
    for c in controls:
        want |= state.mask(c)
    idx = np.arange(state.size)
    state.data[(idx & want) == want] *= -1
    state.check_norm(f"controlled_phase_flip({controls}, {target})")
    return state


def hadamard_all(state: StateVector, positions: Optional[Iterable[int]] = None) -> StateVector:
    for i in range(state.n) if positions is None else positions:
        hadamard(state, i)
    return state


def bit_flip_all(state: StateVector, positions: Optional[Iterable[int]] = None) -> StateVector:
    for i in range(state.n) if positions is None else positions:
        bit_flip(state, i)
    return state


def uniform_superposition(n_qubits: int, tolerance: float = 1e-9) -> StateVector:
    """|0...0> followed by H on every position: all amplitudes 1/sqrt(N)."""
    return hadamard_all(StateVector(n_qubits, tolerance))
