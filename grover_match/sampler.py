from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from grover_match.patterns import BitPattern, index_to_pattern, pattern_str
from grover_match.statevector import StateVector


def _weights(probs: np.ndarray) -> np.ndarray:
    # absorb float rounding so Generator.choice accepts the vector
    return probs / probs.sum()


def sample_index(state: StateVector, rng: Optional[np.random.Generator] = None) -> int:
    """Draws one basis index weighted by |amplitude|^2 and consumes the state."""
    state.ensure_live()
    state.check_norm("measurement")
    rng = rng if rng is not None else np.random.default_rng()
    index = int(rng.choice(state.size, p=_weights(state.probabilities())))
    state.consume()
    return index


def measure(state: StateVector, rng: Optional[np.random.Generator] = None) -> BitPattern:
    n = state.n
    pattern = index_to_pattern(sample_index(state, rng), n)
    logging.info(f"Measured {pattern_str(pattern)}")
    return pattern


def sample_counts(probabilities: np.ndarray, n: int, shots: int,
                  rng: Optional[np.random.Generator] = None) -> Dict[str, int]:
    """
    Shot histogram keyed by MSB-first bitstrings, the same shape as
    AerSimulator counts. Each shot stands for an independent full run.
    """
    rng = rng if rng is not None else np.random.default_rng()
    draws = rng.choice(len(probabilities), size=shots, p=_weights(np.asarray(probabilities)))
    idx, freq = np.unique(draws, return_counts=True)
    return {pattern_str(index_to_pattern(int(i), n)): int(f) for i, f in zip(idx, freq)}
