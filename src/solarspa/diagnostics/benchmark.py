#!/usr/bin/env python3
from __future__ import annotations

import argparse
import math
import time
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from solarspa import SpaParams, calculate


# 2019-07-04 04:00 UTC, Detroit
_T0 = datetime(2019, 7, 4, 4, 0, 0, tzinfo=timezone.utc)
_LON = -83.0458
_LAT = 42.3314


def run_round(count: int) -> Tuple[float, int]:
    """
    Compute ``count`` positions spread evenly over one day.

    Returns (microseconds per calculation, checksum). The checksum folds every
    output into 16 bits so runs can be compared across platforms.
    """
    checksum = 0
    t0 = time.perf_counter()
    for i in range(count):
        res = calculate(SpaParams.from_datetime(
            _T0 + timedelta(days=i / count),
            longitude=_LON,
            latitude=_LAT,
            elevation=100,
        ))
        for v in (res.zenith, res.azimuth_astro, res.azimuth, res.incidence,
                  res.sun_transit, res.sunrise, res.sunset):
            checksum = (checksum + math.floor(v * 100)) % 65536
    t1 = time.perf_counter()
    return (t1 - t0) * 1e6 / count, checksum


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Benchmark solarspa.calculate.")
    p.add_argument("--count", type=int, default=10000, help="calculations per round")
    p.add_argument("--no-warmup", action="store_true", help="skip the warm-up round")
    args = p.parse_args(argv)

    if args.count <= 0:
        raise SystemExit("--count must be positive")

    if not args.no_warmup:
        run_round(args.count)

    us, checksum = run_round(args.count)
    print(f"Result: {math.floor(1e6 / us)} spa/s | {math.floor(us)} μs/spa")
    print(f"Checksum: {checksum}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
