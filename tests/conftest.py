import pytest

from grover_match import GroverSearch, SearchConfig, demo_records, encode_fields


@pytest.fixture
def records():
    return demo_records()


@pytest.fixture
def search(records):
    return GroverSearch(records, encode_fields, SearchConfig(seed=1234))
