from __future__ import annotations

import logging
from typing import List, NamedTuple, Sequence, Tuple

import pandas as pd

from grover_match.errors import ConfigurationError
from grover_match.patterns import BitPattern

REQUIRED_COLS = ['id', 'amount', 'date']
FIELD_BITS = 2
FIELD_RANGE = range(1, (1 << FIELD_BITS) + 1)  # 1..4


class Record(NamedTuple):
    identifier: str
    fields: Tuple[int, ...]


def _field_bits(value: int, name: str) -> List[int]:
    if value not in FIELD_RANGE:
        raise ConfigurationError(
            f"{name}={value} outside {FIELD_RANGE.start}..{FIELD_RANGE.stop - 1}")
    v = value - 1
    return [(v >> (FIELD_BITS - 1 - i)) & 1 for i in range(FIELD_BITS)]


def encode_fields(fields: Sequence[int]) -> BitPattern:
    """(amount, date) -> 4 bits, each field as value-1 in 2 bits MSB-first."""
    if len(fields) != 2:
        raise ConfigurationError(
            f"expected (amount, date), got {tuple(fields)}")
    amount, date = (int(f) for f in fields)
    return tuple(_field_bits(amount, 'amount') + _field_bits(date, 'date'))


def demo_records() -> List[Record]:
    """16 invoices covering every (amount, date) pair, amount-major."""
    return [Record(f"INV-2026-{i + 1:03d}", (i // 4 + 1, i % 4 + 1)) for i in range(16)]


def _require_cols(df: pd.DataFrame, cols: Sequence[str], path: str) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ConfigurationError(f"{path}: missing required columns: {missing}")


def load_records_csv(path: str) -> List[Record]:
    df = pd.read_csv(path)
    _require_cols(df, REQUIRED_COLS, path)
    df = df.dropna(subset=REQUIRED_COLS)
    records = [Record(str(row['id']), (int(row['amount']), int(row['date'])))
               for _, row in df.iterrows()]
    logging.info(f"Loaded {len(records)} records from {path}")
    return records
