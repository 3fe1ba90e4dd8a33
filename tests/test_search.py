import logging

import pytest

from grover_match import (
    NO_MATCH,
    ConfigurationError,
    GroverSearch,
    Record,
    SearchConfig,
    demo_records,
    encode_fields,
    find_record_index,
)

TARGET = (2, 1)


def test_target_resolves_to_fifth_invoice(search):
    assert search.target_pattern(TARGET) == (0, 1, 0, 0)
    assert find_record_index(search.records, TARGET) == 4


def test_reference_iteration_count(search):
    assert search.iterations_for([(0, 1, 0, 0)]) == 3


def test_success_probability_after_three_rounds(search):
    assert search.success_probability(TARGET) == pytest.approx(0.9613, abs=1e-3)


def test_end_to_end_success_rate(search):
    trials = 1000
    hits = 0
    for _ in range(trials):
        result = search.run(TARGET)
        assert result.iterations == 3
        if result.identifier == "INV-2026-005":
            hits += 1
    assert hits / trials > 0.9


def test_index_mode_finds_same_record(search):
    hits = sum(search.run_for_fields_by_index(TARGET).identifier == "INV-2026-005"
               for _ in range(200))
    assert hits / 200 > 0.85


def test_result_carries_raw_pattern(search):
    result = search.run(TARGET)
    assert len(result.pattern) == 4
    assert result.targets == ((0, 1, 0, 0),)
    assert result.matched == (result.identifier is not NO_MATCH)
    assert 0 <= result.index < 16


def test_sample_many_histogram(search):
    counts = search.sample_many(search.target_for(TARGET), shots=2000)
    assert sum(counts.values()) == 2000
    assert max(counts, key=counts.get) == "0100"


def test_missing_pattern_yields_no_match():
    # only three records: most of the register decodes to nothing
    records = [Record("A", (1, 1)), Record("B", (1, 2)), Record("C", (1, 3))]
    search = GroverSearch(records, encode_fields, SearchConfig(seed=5, iterations=0))
    outcomes = {search.run((4, 4)).identifier for _ in range(200)}
    assert NO_MATCH in outcomes
    assert outcomes <= {NO_MATCH, "A", "B", "C"}


def test_precise_iterations_use_register_size():
    search = GroverSearch(demo_records(), encode_fields, SearchConfig(precise_iterations=True))
    assert search.iterations_for([(0, 1, 0, 0)]) == 3
    assert search.iterations_for([(0, 1, 0, 0), (1, 1, 1, 1)]) == 2


def test_run_any_marks_several_targets():
    search = GroverSearch(demo_records(), encode_fields,
                          SearchConfig(seed=9, precise_iterations=True))
    hits = sum(search.run_any([(1, 1), (4, 4)]).identifier in ("INV-2026-001", "INV-2026-016")
               for _ in range(100))
    assert hits / 100 > 0.85


def test_encoding_length_mismatch_rejected():
    with pytest.raises(ConfigurationError):
        GroverSearch(demo_records(), encode_fields, SearchConfig(n_qubits=3))


def test_too_many_records_rejected():
    records = demo_records() + [Record("EXTRA", (1, 1))]
    with pytest.raises(ConfigurationError):
        GroverSearch(records, encode_fields)


def test_empty_records_rejected():
    with pytest.raises(ConfigurationError):
        GroverSearch([], encode_fields)


def test_index_out_of_range(search):
    with pytest.raises(ConfigurationError):
        search.run_index(16)


def test_unknown_fields_in_index_mode():
    records = demo_records()[:4]
    search = GroverSearch(records, encode_fields)
    with pytest.raises(ConfigurationError):
        search.run_for_fields_by_index((3, 3))


@pytest.mark.parametrize("kwargs", [dict(n_qubits=0), dict(tolerance=0), dict(iterations=-1), dict(shots=0)])
def test_invalid_config(kwargs):
    with pytest.raises(ConfigurationError):
        SearchConfig(**kwargs)


def test_snapshots_logged_at_debug(search, caplog):
    with caplog.at_level(logging.DEBUG):
        search.amplify([(0, 1, 0, 0)])
    labels = [r.getMessage() for r in caplog.records if "Snapshot" in r.getMessage()]
    assert len(labels) == 1 + 2 * 3
    assert labels[0].startswith("Snapshot init/hadamard")


def test_index_mode_with_reordered_records():
    records = list(reversed(demo_records()))
    search = GroverSearch(records, encode_fields, SearchConfig(seed=21))
    # (4, 4) is now the first record although it encodes to 1111
    assert find_record_index(records, (4, 4)) == 0
    outcomes = [search.run_for_fields_by_index((4, 4)).identifier for _ in range(200)]
    assert outcomes.count("INV-2026-016") > 180


def test_index_mode_marks_record_position():
    records = list(reversed(demo_records()))
    search = GroverSearch(records, encode_fields, SearchConfig(seed=4))
    result = search.run_index(3)
    assert result.targets == ((0, 0, 1, 1),)
    assert search.target_for((4, 1), mode='index') == (0, 0, 1, 1)
    assert search.target_for((4, 1)) == (1, 1, 0, 0)


def test_index_mode_histogram_follows_position():
    records = list(reversed(demo_records()))
    search = GroverSearch(records, encode_fields, SearchConfig(seed=8))
    counts = search.sample_many(search.target_for((4, 4), mode='index'), shots=1000)
    assert max(counts, key=counts.get) == "0000"


def test_unknown_mode_rejected(search):
    with pytest.raises(ConfigurationError):
        search.target_for(TARGET, mode='linear')


def test_run_any_keeps_every_target():
    search = GroverSearch(demo_records(), encode_fields, SearchConfig(seed=2))
    result = search.run_any([(1, 1), (4, 4)])
    assert result.targets == ((0, 0, 0, 0), (1, 1, 1, 1))
