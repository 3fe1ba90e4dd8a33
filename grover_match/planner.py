from __future__ import annotations

import logging
import math

from grover_match.errors import ConfigurationError

# pi/4 scaled by 10^6
PI_OVER_4_SCALED = 785398
SCALE = 1000000


def int_sqrt(n: int) -> int:
    """Largest k with k*k <= n."""
    if n < 0:
        raise ConfigurationError(f"int_sqrt of negative value {n}")
    return math.isqrt(n)


def grover_iterations_from_n(n_candidates: int) -> int:
    """floor(sqrt(N) * pi/4) with integer square root and fixed-point pi/4 (assumes M=1)."""
    return (int_sqrt(n_candidates) * PI_OVER_4_SCALED) // SCALE


def optimal_iterations(n_candidates: int, n_matches: int = 1) -> int:
    """floor(pi/4 * sqrt(N/M)); no marked states means nothing to amplify."""
    if n_candidates < 0 or n_matches < 0:
        raise ConfigurationError(
            f"invalid search size N={n_candidates}, M={n_matches}")
    if n_matches == 0 or n_candidates == 0:
        return 0
    return math.floor(math.pi / 4 * math.sqrt(n_candidates / n_matches))


def plan_iterations(n_candidates: int, n_matches: int = 1, precise: bool = False) -> int:
    if precise:
        k = optimal_iterations(n_candidates, n_matches)
        logging.info(
            f"Iterations: {k} (floor(pi/4*sqrt(N/M)), N={n_candidates}, M={n_matches})")
    else:
        k = grover_iterations_from_n(n_candidates)
        logging.info(
            f"Iterations: {k} (isqrt(N)*pi/4 fixed-point, N={n_candidates}, M=1 assumed)")
    return k
