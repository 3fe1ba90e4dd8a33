"""
Created on 18/10/2026

@author: Aryan

Filename: oracle.py

Relative Path: grover_match/oracle.py
"""
from __future__ import annotations

import logging
from typing import Sequence

from grover_match.gates import bit_flip, bit_flip_all, controlled_phase_flip, hadamard_all
from grover_match.patterns import index_to_pattern, pattern_str, validate_pattern
from grover_match.statevector import StateVector


def _mcz_all(state: StateVector) -> None:
    controlled_phase_flip(state, list(range(state.n - 1)), state.n - 1)


def apply_oracle(state: StateVector, target: Sequence[int], reverse_undo: bool = False) -> StateVector:
    """
    Phase-flips exactly the basis state equal to `target`.

    Flip bits where target has 0, multi-controlled Z over the whole register,
    undo the flips. `reverse_undo` undoes them in reverse order; the result is
    the same either way.
    """
    state.ensure_live()
    bits = validate_pattern(target, state.n)
    zeros = [i for i, b in enumerate(bits) if b == 0]

    for i in zeros:
        bit_flip(state, i)
    _mcz_all(state)
    for i in (reversed(zeros) if reverse_undo else zeros):
        bit_flip(state, i)

    logging.debug(f"Applied oracle for {pattern_str(bits)}")
    return state


def apply_index_oracle(state: StateVector, index: int) -> StateVector:
    """Oracle marking the basis state at a pre-computed classical index."""
    return apply_oracle(state, index_to_pattern(index, state.n))


def apply_diffusion(state: StateVector) -> StateVector:
    """Inversion about the mean (up to a global -1 phase)."""
    state.ensure_live()
    hadamard_all(state)
    bit_flip_all(state)
    _mcz_all(state)
    bit_flip_all(state)
    hadamard_all(state)
    logging.debug("Applied diffuser")
    return state


def apply_oracle_set(state: StateVector, targets: Sequence[Sequence[int]]) -> StateVector:
    """Phase-flips every distinct pattern in `targets` once."""
    seen = set()
    for t in targets:
        bits = validate_pattern(t, state.n)
        if bits in seen:
            continue
        seen.add(bits)
        apply_oracle(state, bits)
    return state
