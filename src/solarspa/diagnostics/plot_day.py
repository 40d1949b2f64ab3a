#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import replace
from typing import List, Optional

from solarspa import SpaParams, SpaOptions, calculate


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "solarspa[diagnostics]"') from e


def day_track(base: SpaParams, step_minutes: int = 10) -> tuple[List[float], List[float], List[float], List[float]]:
    """
    (local hours, zenith, azimuth, incidence) sampled over the local day of ``base``.
    Sun events are skipped: they do not change within the day.
    """
    opts = SpaOptions(sun_events=False)
    hours: List[float] = []
    zen: List[float] = []
    az: List[float] = []
    inc: List[float] = []
    for k in range(0, 24 * 60, step_minutes):
        p = replace(base, hour=k // 60, minute=k % 60, second=0.0)
        res = calculate(p, opts)
        hours.append(k / 60.0)
        zen.append(res.zenith)
        az.append(res.azimuth)
        inc.append(res.incidence)
    return hours, zen, az, inc


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot zenith, azimuth and incidence over one local day.")
    p.add_argument("--date", default="2003-10-17", help="local date YYYY-MM-DD")
    p.add_argument("--tz", type=float, default=-7.0, help="UTC offset in hours")
    p.add_argument("--lat", type=float, default=39.742476)
    p.add_argument("--lon", type=float, default=-105.1786)
    p.add_argument("--elevation", type=float, default=1830.14)
    p.add_argument("--slope", type=float, default=30.0)
    p.add_argument("--azm-rotation", type=float, default=-10.0)
    p.add_argument("--step", type=int, default=10, help="sampling step in minutes")
    p.add_argument("--out", default="sun_day.png", help="output image filename")
    args = p.parse_args(argv)

    plt = _need_matplotlib()

    y, m, d = map(int, args.date.split("-"))
    base = SpaParams(
        year=y, month=m, day=d, timezone=args.tz,
        latitude=args.lat, longitude=args.lon, elevation=args.elevation,
        slope=args.slope, azm_rotation=args.azm_rotation,
    )
    sun = calculate(base)
    hours, zen, az, inc = day_track(base, args.step)

    fig, axs = plt.subplots(2, 1, figsize=(10, 7), sharex=True)
    axs[0].plot(hours, zen, linewidth=2, label="zenith")
    axs[0].plot(hours, inc, linewidth=1.5, linestyle="--", label="incidence")
    axs[0].axhline(90.0, color="gray", alpha=0.5)
    if sun.has_sun_events:
        for t in (sun.sunrise, sun.sun_transit, sun.sunset):
            axs[0].axvline(t, color="orange", alpha=0.6)
    axs[0].set_ylabel("degrees")
    axs[0].legend()
    axs[0].grid(True, alpha=0.3)

    axs[1].plot(hours, az, linewidth=2, color="green")
    axs[1].set_ylabel("azimuth (deg from north)")
    axs[1].set_xlabel("local time (h)")
    axs[1].grid(True, alpha=0.3)

    fig.suptitle(f"Sun on {args.date} at ({args.lat:.4f}, {args.lon:.4f})")
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
