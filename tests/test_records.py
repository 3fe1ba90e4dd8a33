import pytest

from grover_match import ConfigurationError, demo_records, encode_fields
from grover_match.records import load_records_csv


def test_demo_records_layout():
    records = demo_records()
    assert len(records) == 16
    assert records[0].identifier == "INV-2026-001"
    assert records[4] == ("INV-2026-005", (2, 1))
    assert records[15].fields == (4, 4)


def test_demo_encoding_equals_position():
    for i, rec in enumerate(demo_records()):
        bits = encode_fields(rec.fields)
        assert int(''.join(map(str, bits)), 2) == i


def test_encode_target():
    assert encode_fields((2, 1)) == (0, 1, 0, 0)
    assert encode_fields((4, 3)) == (1, 1, 1, 0)


@pytest.mark.parametrize("fields", [(0, 1), (5, 1), (1, 9), (1,), (1, 2, 3)])
def test_encode_rejects_bad_fields(fields):
    with pytest.raises(ConfigurationError):
        encode_fields(fields)


def test_load_records_csv(tmp_path):
    path = tmp_path / "invoices.csv"
    path.write_text("id,amount,date\nX-1,1,2\nX-2,3,4\n")
    records = load_records_csv(str(path))
    assert [r.identifier for r in records] == ["X-1", "X-2"]
    assert records[1].fields == (3, 4)


def test_load_records_csv_missing_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("id,amount\nX-1,1\n")
    with pytest.raises(ConfigurationError):
        load_records_csv(str(path))
