#!/usr/bin/env python3
from __future__ import annotations

import argparse
from datetime import datetime
from typing import List, Optional

from solarspa import SpaParams, calculate
from solarspa.reference.time_scales import hours_to_hms


# (name, IANA zone, latitude, longitude)
CITIES = (
    ("Anchorage", "America/Anchorage", 61.2181, -149.9003),
    ("Mountain View", "America/Los_Angeles", 37.3861, -122.0839),
    ("Detroit", "America/Detroit", 42.3314, -83.0458),
    ("New York City", "America/New_York", 40.7128, -74.006),
    ("Reykjavik", "Atlantic/Reykjavik", 64.9631, -19.0208),
    ("Frankfurt", "Europe/Berlin", 50.1109, 8.6821),
    ("Moscow", "Europe/Moscow", 55.7558, 37.6173),
    ("New Delhi", "Asia/Kolkata", 28.6139, 77.2090),
    ("Hong Kong", "Asia/Hong_Kong", 22.3193, 114.1694),
    ("Tokyo", "Asia/Tokyo", 35.6804, 139.7690),
    ("Melbourne", "Australia/Melbourne", -37.8136, 144.9631),
)


def _need_pytz():
    try:
        import pytz
        return pytz
    except ImportError as e:
        raise RuntimeError('Need pytz. Install: pip install "solarspa[diagnostics]"') from e


def _fmt_hhmm(hours: Optional[float]) -> str:
    if hours is None or hours < 0:
        return "  --:--"
    h, m, _ = hours_to_hms(hours)
    return f"{h:>4d}:{m:02d}"


def city_line(name: str, zone: str, lat: float, lon: float, when_utc: datetime) -> str:
    pytz = _need_pytz()
    local = when_utc.astimezone(pytz.timezone(zone))
    res = calculate(SpaParams.from_datetime(local, latitude=lat, longitude=lon))
    return (
        f"{name:<13} | {local:%H:%M} | "
        f"Zenith: {res.zenith:6.2f}° | "
        f"Sunrise: {_fmt_hhmm(res.sunrise)} | "
        f"Transit: {_fmt_hhmm(res.sun_transit)} | "
        f"Sunset: {_fmt_hhmm(res.sunset)}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Sun position and rise/transit/set for a few world cities.")
    p.add_argument("--utc", default=None, help="UTC instant 'YYYY-MM-DD HH:MM' (default: now)")
    args = p.parse_args(argv)

    pytz = _need_pytz()
    if args.utc:
        when = pytz.utc.localize(datetime.strptime(args.utc, "%Y-%m-%d %H:%M"))
    else:
        when = datetime.now(pytz.utc)

    for name, zone, lat, lon in CITIES:
        print(city_line(name, zone, lat, lon, when))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
