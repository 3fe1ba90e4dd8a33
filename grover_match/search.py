"""
Pipeline:
 - Encode every record into an n-bit pattern
 - Prepare uniform superposition
 - Oracle + diffuser, planned number of times
 - Measure once, decode the pattern back to a record identifier
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from grover_match.config import SearchConfig
from grover_match.decoder import decode
from grover_match.errors import NO_MATCH, ConfigurationError, _NoMatch
from grover_match.gates import uniform_superposition
from grover_match.oracle import apply_diffusion, apply_index_oracle, apply_oracle_set
from grover_match.patterns import BitPattern, index_to_pattern, pattern_str, pattern_to_index, validate_pattern
from grover_match.planner import plan_iterations
from grover_match.records import Record
from grover_match.sampler import measure, sample_counts
from grover_match.statevector import StateVector

Encoder = Callable[[Sequence[int]], Sequence[int]]
Oracle = Callable[[StateVector], StateVector]
MODES = ('pattern', 'index')


@dataclass
class SearchResult:
    identifier: Union[str, _NoMatch]
    pattern: BitPattern  # raw measured pattern, kept for diagnostics
    targets: Tuple[BitPattern, ...]  # every pattern the oracle marked
    iterations: int
    probability: float  # exact probability of the target just before measurement

    @property
    def index(self) -> int:
        return pattern_to_index(self.pattern)

    @property
    def matched(self) -> bool:
        return self.identifier is not NO_MATCH


def find_record_index(records: Sequence[Record], fields: Sequence[int]) -> int:
    """Classical first-match lookup used by the index oracle mode."""
    want = tuple(int(f) for f in fields)
    for i, rec in enumerate(records):
        if tuple(rec.fields) == want:
            return i
    raise ConfigurationError(f"no record has fields {want}")


def _snapshot(label: str, state: StateVector, marked: Sequence[int]) -> None:
    if not logging.getLogger().isEnabledFor(logging.DEBUG):
        return
    probs = state.probabilities()
    p_any = float(sum(probs[i] for i in marked))
    top = ', '.join(
        f"{pattern_str(index_to_pattern(i, state.n))}:{p:.6f}" for i, p in state.top_states(4))
    logging.debug(f"Snapshot {label}: marked prob={p_any:.6f}, top=[{top}]")


class GroverSearch:
    """
    Amplitude-amplification lookup over an explicit record list.

    Records and the encoder are passed in, so the same engine can be reused
    for any dataset whose encodings fit the register.

    Two oracle modes:
      - pattern: marks encode(target_fields); samples decode through the
        record encodings.
      - index: marks the basis state at a classical record position; samples
        decode through record positions, so any record order works.
    """

    def __init__(self, records: Sequence[Record], encode: Encoder,
                 config: Optional[SearchConfig] = None) -> None:
        self.config = config if config is not None else SearchConfig()
        self.n = self.config.n_qubits
        self.records = list(records)
        if not self.records:
            raise ConfigurationError("record list is empty")
        if len(self.records) > (1 << self.n):
            raise ConfigurationError(
                f"{len(self.records)} records do not fit a {self.n}-bit register")
        self.encode = encode
        self.encodings: List[Tuple[str, BitPattern]] = [
            (rec.identifier, validate_pattern(encode(rec.fields), self.n)) for rec in self.records]
        self.position_encodings: List[Tuple[str, BitPattern]] = [
            (rec.identifier, index_to_pattern(i, self.n)) for i, rec in enumerate(self.records)]
        self.rng = np.random.default_rng(self.config.seed)
        logging.debug(
            f"GroverSearch init: n={self.n}, records={len(self.records)}, config={self.config}")

    # ---------------- planning ----------------
    def target_pattern(self, fields: Sequence[int]) -> BitPattern:
        return validate_pattern(self.encode(fields), self.n)

    def target_for(self, fields: Sequence[int], mode: str = 'pattern') -> BitPattern:
        """Basis state the oracle marks for `fields` in the given mode."""
        if mode not in MODES:
            raise ConfigurationError(f"unknown oracle mode {mode!r}, expected one of {MODES}")
        if mode == 'index':
            return index_to_pattern(find_record_index(self.records, fields), self.n)
        return self.target_pattern(fields)

    def encodings_for(self, mode: str = 'pattern') -> List[Tuple[str, BitPattern]]:
        if mode not in MODES:
            raise ConfigurationError(f"unknown oracle mode {mode!r}, expected one of {MODES}")
        return self.position_encodings if mode == 'index' else self.encodings

    def count_matches(self, pattern: Sequence[int]) -> int:
        bits = tuple(pattern)
        return sum(1 for _, enc in self.encodings if enc == bits)

    def iterations_for(self, targets: Sequence[BitPattern]) -> int:
        if self.config.iterations is not None:
            logging.info(f"Iterations: {self.config.iterations} (fixed by config)")
            return self.config.iterations
        if self.config.precise_iterations:
            # N is the register's state space, M the distinct marked basis states
            return plan_iterations(1 << self.n, len(set(targets)), precise=True)
        return plan_iterations(len(self.records))

    # ---------------- core ----------------
    def amplify(self, targets: Sequence[Sequence[int]], iterations: Optional[int] = None,
                oracle: Optional[Oracle] = None) -> StateVector:
        """
        Uniform superposition, then `iterations` rounds of oracle + diffuser.
        `oracle` defaults to phase-flipping every pattern in `targets`.
        """
        patterns = [validate_pattern(t, self.n) for t in targets]
        if not patterns:
            raise ConfigurationError("at least one target pattern is required")
        k = self.iterations_for(patterns) if iterations is None else iterations
        marked = sorted({pattern_to_index(p) for p in patterns})
        if oracle is None:
            def oracle(state: StateVector) -> StateVector:
                return apply_oracle_set(state, patterns)

        state = uniform_superposition(self.n, self.config.tolerance)
        _snapshot("init/hadamard", state, marked)
        for i in range(k):
            oracle(state)
            _snapshot(f"oracle_{i + 1}", state, marked)
            apply_diffusion(state)
            _snapshot(f"diffuser_{i + 1}", state, marked)
        return state

    def _run(self, targets: Sequence[BitPattern], encodings: Sequence[Tuple[str, BitPattern]],
             oracle: Optional[Oracle] = None) -> SearchResult:
        k = self.iterations_for(targets)
        state = self.amplify(targets, k, oracle)
        probs = state.probabilities()
        p_target = float(sum(probs[i] for i in {pattern_to_index(t) for t in targets}))
        sampled = measure(state, self.rng)
        identifier = decode(sampled, encodings)
        if identifier is NO_MATCH:
            logging.info(f"Pattern {pattern_str(sampled)} matches no record")
        else:
            logging.info(f"Pattern {pattern_str(sampled)} -> {identifier}")
        return SearchResult(identifier=identifier, pattern=sampled, targets=tuple(targets),
                            iterations=k, probability=p_target)

    # ---------------- entry points ----------------
    def run(self, target_fields: Sequence[int]) -> SearchResult:
        """Pattern mode: the oracle marks the encoding of `target_fields`."""
        pattern = self.target_pattern(target_fields)
        if not self.count_matches(pattern):
            logging.warning(f"No record encodes {pattern_str(pattern)}; expect NO_MATCH")
        return self._run([pattern], self.encodings)

    def run_any(self, targets: Sequence[Sequence[int]]) -> SearchResult:
        """Pattern mode with several acceptable field tuples."""
        return self._run([self.target_pattern(f) for f in targets], self.encodings)

    def run_index(self, index: int) -> SearchResult:
        """Index mode: the oracle marks the basis state at a classical record index."""
        if not 0 <= index < len(self.records):
            raise ConfigurationError(
                f"index {index} outside record list of size {len(self.records)}")

        def oracle(state: StateVector) -> StateVector:
            return apply_index_oracle(state, index)

        return self._run([index_to_pattern(index, self.n)], self.position_encodings, oracle)

    def run_for_fields_by_index(self, target_fields: Sequence[int]) -> SearchResult:
        return self.run_index(find_record_index(self.records, target_fields))

    # ---------------- diagnostics ----------------
    def success_probability(self, target_fields: Sequence[int]) -> float:
        pattern = self.target_pattern(target_fields)
        state = self.amplify([pattern])
        return float(state.probabilities()[pattern_to_index(pattern)])

    def sample_many(self, target: Sequence[int], shots: Optional[int] = None) -> Dict[str, int]:
        """
        Shot histogram for the distribution amplified towards the basis state
        `target` (see `target_for`). Amplification is deterministic, so one
        final state stands in for `shots` fresh runs.
        """
        state = self.amplify([target])
        return sample_counts(state.probabilities(), self.n,
                             shots if shots is not None else self.config.shots, self.rng)
