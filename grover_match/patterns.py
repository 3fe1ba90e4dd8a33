"""
Bit-pattern helpers.

A BitPattern is a tuple of 0/1 ints read MSB first: pattern[0] is register
position 0 and the most significant bit of the basis index.
"""
from __future__ import annotations

import numbers
from typing import Sequence, Tuple

from grover_match.errors import ConfigurationError

BitPattern = Tuple[int, ...]


def validate_pattern(pattern: Sequence[int], n: int) -> BitPattern:
    if any(not isinstance(b, numbers.Integral) for b in pattern):
        raise ConfigurationError(f"pattern {tuple(pattern)} must contain integer bits")
    bits = tuple(int(b) for b in pattern)
    if len(bits) != n:
        raise ConfigurationError(
            f"pattern {bits} has length {len(bits)}, register has {n} positions")
    if any(b not in (0, 1) for b in bits):
        raise ConfigurationError(f"pattern {bits} must contain only 0/1")
    return bits


def index_to_pattern(index: int, n: int) -> BitPattern:
    if not 0 <= index < (1 << n):
        raise ConfigurationError(
            f"index {index} outside state space of size {1 << n}")
    return tuple((index >> (n - 1 - i)) & 1 for i in range(n))


def pattern_to_index(pattern: Sequence[int]) -> int:
    idx = 0
    for bit in pattern:
        idx = (idx << 1) | int(bit)
    return idx


def pattern_str(pattern: Sequence[int]) -> str:
    return ''.join(str(b) for b in pattern)
