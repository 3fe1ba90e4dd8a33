from grover_match.config import SearchConfig
from grover_match.decoder import decode
from grover_match.errors import (
    NO_MATCH,
    ConfigurationError,
    GroverMatchError,
    NormalizationError,
    StateConsumedError,
)
from grover_match.gates import (
    bit_flip,
    controlled_phase_flip,
    hadamard,
    phase_flip,
    uniform_superposition,
)
from grover_match.oracle import apply_diffusion, apply_index_oracle, apply_oracle, apply_oracle_set
from grover_match.patterns import index_to_pattern, pattern_to_index
from grover_match.planner import grover_iterations_from_n, int_sqrt, optimal_iterations
from grover_match.records import Record, demo_records, encode_fields
from grover_match.sampler import measure, sample_index
from grover_match.search import GroverSearch, SearchResult, find_record_index
from grover_match.statevector import StateVector

__version__ = "0.1.0"
