"""
Created on 18/10/2026

@author: Aryan

Filename: main.py

Relative Path: grover_match/main.py
"""
from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Sequence

import matplotlib.pyplot as plt
from qiskit.visualization import plot_histogram

from grover_match.circuits import grover_circuit, run_and_measure
from grover_match.config import SearchConfig
from grover_match.decoder import decode
from grover_match.errors import NO_MATCH, GroverMatchError
from grover_match.patterns import pattern_str
from grover_match.records import Record, demo_records, encode_fields, load_records_csv
from grover_match.search import GroverSearch


def print_top(counts: Dict[str, int], encodings, k: int = 5) -> None:
    print("Top results:")
    for bits, v in sorted(counts.items(), key=lambda x: -x[1])[:k]:
        ident = decode([int(b) for b in bits], encodings)
        print(f"{int(bits, 2)} ({bits}): {v} times -> {ident}")


def save_histogram(counts: Dict[str, int], path: str) -> None:
    fig = plot_histogram(counts)
    fig.savefig(path, bbox_inches='tight')
    plt.close(fig)
    logging.info(f"Histogram written to {path}")


def run_numpy(search: GroverSearch, fields: Sequence[int], mode: str, shots: int) -> Dict[str, int]:
    counts = search.sample_many(search.target_for(fields, mode), shots)
    print_top(counts, search.encodings_for(mode))
    if mode == 'index':
        result = search.run_for_fields_by_index(fields)
    else:
        result = search.run(fields)
    print(f"Single run: measured {pattern_str(result.pattern)} "
          f"(p_target={result.probability:.4f}, iterations={result.iterations})")
    if result.identifier is NO_MATCH:
        print("No matching record.")
    else:
        print(f"Found: {result.identifier}")
    return counts


def run_aer(search: GroverSearch, fields: Sequence[int], mode: str, shots: int,
            seed: Optional[int]) -> Dict[str, int]:
    target = search.target_for(fields, mode)
    k = search.iterations_for([target])
    qc = grover_circuit(target, k)
    counts = run_and_measure(qc, shots=shots, seed=seed)
    print_top(counts, search.encodings_for(mode))
    best = max(counts.items(), key=lambda kv: kv[1])[0]
    ident = decode([int(b) for b in best], search.encodings_for(mode))
    print("No matching record." if ident is NO_MATCH else f"Found: {ident}")
    return counts


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Grover amplitude-amplification record lookup")
    ap.add_argument('--amount', type=int, default=2, help='Target amount (1..4)')
    ap.add_argument('--date', type=int, default=1, help='Target date (1..4)')
    ap.add_argument('--mode', choices=['pattern', 'index'], default='pattern',
                    help='Oracle built from the encoded target or from the classical record index')
    ap.add_argument('--csv', type=str, default=None,
                    help='CSV with id,amount,date columns (default: built-in 16 invoices)')
    ap.add_argument('--shots', type=int, default=1024)
    ap.add_argument('--seed', type=int, default=None)
    ap.add_argument('--precise', action='store_true',
                    help='Use floor(pi/4*sqrt(N/M)) instead of the fixed-point formula')
    ap.add_argument('--iterations', type=int, default=None,
                    help='Override the planned iteration count')
    ap.add_argument('--backend', choices=['numpy', 'aer'], default='numpy')
    ap.add_argument('--plot', type=str, default=None,
                    help='Save a histogram of the shot counts to this path')
    ap.add_argument('--verbose', action='store_true')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s: %(message)s")

    try:
        records: List[Record] = load_records_csv(args.csv) if args.csv else demo_records()
        config = SearchConfig(precise_iterations=args.precise, iterations=args.iterations,
                              seed=args.seed, shots=args.shots)
        search = GroverSearch(records, encode_fields, config)
        fields = (args.amount, args.date)
        print(f"Searching {len(records)} records for amount={args.amount}, date={args.date} "
              f"(marked {pattern_str(search.target_for(fields, args.mode))}, mode={args.mode})")
        if args.backend == 'aer':
            counts = run_aer(search, fields, args.mode, args.shots, args.seed)
        else:
            counts = run_numpy(search, fields, args.mode, args.shots)
    except GroverMatchError as e:
        logging.error(str(e))
        return 2

    if args.plot:
        save_histogram(counts, args.plot)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
