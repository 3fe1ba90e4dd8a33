from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from grover_match.errors import ConfigurationError, NormalizationError, StateConsumedError


class StateVector:
    """
    Dense amplitude buffer over an n-position binary register.

    Bit order conventions:
      - Position 0 is the most significant bit of the basis index.
      - Position n-1 is the least significant bit.
    So the basis index of a register reads its positions left to right,
    e.g. positions (0, 1, 0, 0) on n=4 is index 4.
    """

    def __init__(self, n_qubits: int, tolerance: float = 1e-9) -> None:
        if not isinstance(n_qubits, (int, np.integer)) or n_qubits < 1:
            raise ConfigurationError(
                f"register size must be a positive integer, got {n_qubits!r}")
        self.n = int(n_qubits)
        self.size = 1 << self.n
        self.tolerance = tolerance
        self.data = np.zeros(self.size, dtype=np.complex128)
        self.data[0] = 1.0 + 0.0j
        self.consumed = False
        self._pairs: Dict[int, Tuple[np.ndarray, np.ndarray]] = {}

    # ---------------- index helpers ----------------
    def mask(self, position: int) -> int:
        return 1 << (self.n - 1 - position)

    def check_position(self, position: int) -> int:
        if not isinstance(position, (int, np.integer)) or not 0 <= position < self.n:
            raise ConfigurationError(
                f"position {position!r} outside register of size {self.n}")
        return int(position)

    def pairs(self, position: int) -> Tuple[np.ndarray, np.ndarray]:
        """Index arrays (lo, hi) of basis states differing only at `position`."""
        if position not in self._pairs:
            bit = self.mask(position)
            idx = np.arange(self.size)
            lo = idx[(idx & bit) == 0]
            self._pairs[position] = (lo, lo | bit)
        return self._pairs[position]

    # ---------------- invariants ----------------
    def ensure_live(self) -> None:
        if self.consumed:
            raise StateConsumedError(
                "state vector was already measured; build a new one for another run")

    def norm(self) -> float:
        return float(np.vdot(self.data, self.data).real)

    def check_norm(self, operation: str = "") -> None:
        n2 = self.norm()
        if abs(1.0 - n2) > self.tolerance:
            raise NormalizationError(n2, self.tolerance, operation)

    def consume(self) -> None:
        self.ensure_live()
        self.consumed = True

    # ---------------- views ----------------
    def amplitude(self, index: int) -> complex:
        return complex(self.data[index])

    def probabilities(self) -> np.ndarray:
        return np.abs(self.data) ** 2

    def top_states(self, k: int = 5) -> List[Tuple[int, float]]:
        probs = self.probabilities()
        order = np.argsort(-probs, kind="stable")[:k]
        return [(int(i), float(probs[i])) for i in order]

    def copy(self) -> "StateVector":
        other = StateVector(self.n, self.tolerance)
        other.data = self.data.copy()
        other.consumed = self.consumed
        return other

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"StateVector(n={self.n}, consumed={self.consumed})"
