#!/usr/bin/env python3
"""
Time smiles_parser.parse() against RDKit's Chem.MolFromSmiles.

Usage:
    python benchmarks/bench_parse.py [iterations]

RDKit is optional; without it only smiles_parser is timed.
"""

import sys
import time

from smiles_parser import parse

MOLECULES = {
    "ether": "CCOCC",
    "ibuprofen": "CC(C)Cc1ccc(cc1)C(C)C(=O)O",
    "cholesterol": "CC(C)CCC[C@@H](C)[C@H]1CC[C@@H]2[C@@]1(CC[C@H]3[C@H]2CC=C4[C@@]3(CC[C@@H](C4)O)C)C",
    "imatinib": "Cc1ccc(cc1Nc2nccc(n2)c3cccnc3)NC(=O)c4ccc(cc4)CN5CCN(CC5)C",
    "cisplatin": "N.N.Cl[Pt]Cl",
}

DEFAULT_ITERATIONS = 1000


def time_calls(func, smiles: str, iterations: int) -> float:
    """Milliseconds per call of func(smiles)."""
    func(smiles)
    start = time.perf_counter()
    for _ in range(iterations):
        func(smiles)
    return (time.perf_counter() - start) / iterations * 1000


def rdkit_parser():
    """RDKit's parser with logging silenced, or None if RDKit is missing."""
    try:
        from rdkit import Chem, RDLogger
    except ImportError:
        return None
    RDLogger.DisableLog("rdApp.*")
    return Chem.MolFromSmiles


def main():
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ITERATIONS
    rdkit_parse = rdkit_parser()

    print(f"Iterations per molecule: {iterations}")
    print(f"{'Molecule':<12} {'Atoms':>6} {'ours ms':>10} {'RDKit ms':>10} {'Ratio':>8}")
    print("-" * 50)

    for name, smiles in MOLECULES.items():
        ours = time_calls(parse, smiles, iterations)
        atoms = parse(smiles).num_atoms
        if rdkit_parse is None:
            print(f"{name:<12} {atoms:>6} {ours:>10.4f} {'N/A':>10} {'N/A':>8}")
            continue
        theirs = time_calls(rdkit_parse, smiles, iterations)
        print(f"{name:<12} {atoms:>6} {ours:>10.4f} {theirs:>10.4f} {ours / theirs:>7.2f}x")


if __name__ == "__main__":
    main()
