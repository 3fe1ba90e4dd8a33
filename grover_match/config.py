from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from grover_match.errors import ConfigurationError


@dataclass
class SearchConfig:
    n_qubits: int = 4
    tolerance: float = 1e-9
    precise_iterations: bool = False  # floor(pi/4*sqrt(N/M)) instead of the fixed-point M=1 formula
    iterations: Optional[int] = None  # explicit override of the planner
    seed: Optional[int] = None
    shots: int = 1024

    def __post_init__(self) -> None:
        if self.n_qubits < 1:
            raise ConfigurationError(
                f"n_qubits must be >= 1, got {self.n_qubits}")
        if not 0 < self.tolerance < 1:
            raise ConfigurationError(
                f"tolerance must be in (0, 1), got {self.tolerance}")
        if self.iterations is not None and self.iterations < 0:
            raise ConfigurationError(
                f"iterations must be >= 0, got {self.iterations}")
        if self.shots < 1:
            raise ConfigurationError(f"shots must be >= 1, got {self.shots}")
