#!/usr/bin/env python3
"""
Regression check against a CSV of reference results.

Each data row holds the 17 inputs of ``SpaParams.from_sequence`` followed by
the reference zenith, azimuth_astro, azimuth, incidence, sun transit, sunrise
and sunset. The first row is a header and is skipped.
"""
from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from solarspa import SpaParams, calculate

N_INPUTS = 17
OUTPUT_COLUMNS = ("zenith", "azimuth_astro", "azimuth", "incidence", "sun_transit", "sunrise", "sunset")


@dataclass(frozen=True)
class Mismatch:
    line: int
    column: str
    expected: float
    got: Optional[float]


def check_row(row: Sequence[str], line: int, tol: float) -> List[Mismatch]:
    values = [float(x) for x in row]
    params = SpaParams.from_sequence(values[:N_INPUTS])
    res = calculate(params)

    out: List[Mismatch] = []
    for i, name in enumerate(OUTPUT_COLUMNS):
        expected = values[N_INPUTS + i]
        got = getattr(res, name)
        if got is None or abs(got - expected) >= tol:
            out.append(Mismatch(line=line, column=name, expected=expected, got=got))
    return out


def check_rows(rows: Iterable[Sequence[str]], tol: float = 1e-6) -> tuple[int, List[Mismatch]]:
    """Check data rows (header already removed). Returns (rows checked, mismatches)."""
    n = 0
    bad: List[Mismatch] = []
    for n, row in enumerate(rows, start=1):
        if not row:
            continue
        # line numbers are 1-based and count the header
        bad.extend(check_row(row, n + 1, tol))
    return n, bad


def check_file(path: Path, tol: float = 1e-6) -> tuple[int, List[Mismatch]]:
    with path.open(newline="") as f:
        reader = csv.reader(f)
        next(reader, None)
        return check_rows(reader, tol)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate solarspa against a CSV of reference results.")
    p.add_argument("csv", type=Path, help="dataset file (header row + 24 columns per row)")
    p.add_argument("--tol", type=float, default=1e-6, help="absolute tolerance per output")
    p.add_argument("--max-report", type=int, default=20, help="mismatches to print")
    args = p.parse_args(argv)

    if not args.csv.exists():
        raise SystemExit(f"{args.csv}: no such file")

    n, bad = check_file(args.csv, tol=args.tol)
    for m in bad[: args.max_report]:
        print(f"line {m.line}: {m.column} expected {m.expected!r} but got {m.got!r}")
    if len(bad) > args.max_report:
        print(f"... {len(bad) - args.max_report} more")
    print(f"{n} rows checked, {len(bad)} mismatches (tol={args.tol:g})")
    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
