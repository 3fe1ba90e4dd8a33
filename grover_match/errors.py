"""Exceptions and the no-match sentinel."""


class GroverMatchError(Exception):
    """Base class for every failure raised by the search engine."""


class ConfigurationError(GroverMatchError, ValueError):
    """Register size, pattern length or target does not fit the run."""


class NormalizationError(GroverMatchError, ArithmeticError):
    """Squared-amplitude sum drifted away from 1 after an operator."""

    def __init__(self, norm: float, tolerance: float, operation: str = "") -> None:
        self.norm = norm
        self.tolerance = tolerance
        self.operation = operation
        where = f" after {operation}" if operation else ""
        super().__init__(
            f"Normalization failed{where}: ||psi||^2={norm!r} (tol={tolerance})")


class StateConsumedError(GroverMatchError, RuntimeError):
    """The state vector was already measured and cannot be reused."""


class _NoMatch:
    """Sentinel returned when a sampled pattern maps to no record."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __reduce__(self):
        return (_NoMatch, ())


NO_MATCH = _NoMatch()
