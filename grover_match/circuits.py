"""
Created on 18/10/2026

@author: Aryan

Filename: circuits.py

Relative Path: grover_match/circuits.py

Same oracle / diffuser as grover_match.oracle, expressed as qiskit circuits.
Register position i lives on qiskit qubit n-1-i, so qiskit's MSB..LSB
bitstrings and statevector indices read in register order.
"""
from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np
from qiskit import QuantumCircuit, transpile
from qiskit.quantum_info import Statevector
from qiskit_aer import AerSimulator

from grover_match.patterns import validate_pattern


def _qubit(position: int, n: int) -> int:
    return n - 1 - position


def _mcz(qc: QuantumCircuit, n: int) -> None:
    # multi-controlled Z via H + multi-controlled Toffoli
    if n == 1:
        qc.z(0)
        return
    qc.h(0)
    qc.mcx(list(range(1, n)), 0)
    qc.h(0)


def oracle_circuit(target: Sequence[int]) -> QuantumCircuit:
    """Marks the single basis state equal to `target` (register order)."""
    n = len(target)
    bits = validate_pattern(target, n)
    qc = QuantumCircuit(n, name="oracle")

    # Flip bits where target has 0
    zeros = [_qubit(i, n) for i, b in enumerate(bits) if b == 0]
    for q in zeros:
        qc.x(q)
    _mcz(qc, n)
    # Undo flips
    for q in zeros:
        qc.x(q)
    return qc


def diffuser_circuit(n: int) -> QuantumCircuit:
    """Standard Grover diffuser on n qubits."""
    qc = QuantumCircuit(n, name="diffuser")
    qc.h(range(n))
    qc.x(range(n))
    _mcz(qc, n)
    qc.x(range(n))
    qc.h(range(n))
    return qc


def grover_circuit(target: Sequence[int], iterations: int, measure: bool = True) -> QuantumCircuit:
    n = len(target)
    qc = QuantumCircuit(n)
    qc.h(range(n))
    oracle = oracle_circuit(target).to_gate()
    diff = diffuser_circuit(n).to_gate()
    for _ in range(iterations):
        qc.append(oracle, range(n))
        qc.append(diff, range(n))
    if measure:
        qc.measure_all()
    return qc


def circuit_statevector(qc: QuantumCircuit) -> np.ndarray:
    """Amplitudes of a measurement-free circuit, indexed like StateVector.data."""
    return np.asarray(Statevector.from_instruction(qc).data)


def run_and_measure(qc: QuantumCircuit, shots: int = 1024, seed: Optional[int] = None) -> Dict[str, int]:
    """
    Runs the quantum circuit and returns measured counts as a dict.
    """
    sim = AerSimulator(seed_simulator=seed) if seed is not None else AerSimulator()
    qc_trans = transpile(qc, sim)
    result = sim.run(qc_trans, shots=shots).result()
    return dict(result.get_counts(qc_trans))
