from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^-?\d{1,4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{1,2}(?:\.\d*)?))?$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise SystemExit(f"bad date {s!r}, expected YYYY-MM-DD")
    neg = s.startswith("-")
    y, m, d = map(int, s.lstrip("-").split("-"))
    return (-y if neg else y), m, d


def _parse_hms(s: str) -> tuple[int, int, float]:
    mt = _TIME_RE.match(s)
    if not mt:
        raise SystemExit(f"bad time {s!r}, expected HH:MM[:SS.s]")
    return int(mt.group(1)), int(mt.group(2)), float(mt.group(3) or 0.0)


def _fmt_time(h: float) -> str:
    from solarspa.reference.time_scales import hours_to_hms

    h_int, m_int, s = hours_to_hms(h)
    return f"{h_int:02d}:{m_int:02d}:{s:05.2f}"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_instant_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--date", required=True, help="local date YYYY-MM-DD (astronomical year numbering)")
    p.add_argument("--time", default="12:00", help="local time HH:MM[:SS.s] (default 12:00)")
    p.add_argument("--tz", type=float, default=0.0, help="UTC offset in hours (default 0)")
    p.add_argument("--delta-ut1", type=float, default=0.0, help="UT1-UTC in seconds")
    p.add_argument("--delta-t", type=float, default=0.0, help="TT-UT1 in seconds")


def cmd_position(argv: list[str]) -> int:
    from solarspa import InputRangeError, SpaIntermediate, SpaOptions, SpaParams, calculate, NO_EVENT

    p = argparse.ArgumentParser(prog="solarspa position", description="Sun position, incidence and rise/transit/set.")
    _add_instant_args(p)
    p.add_argument("--lat", type=float, required=True, help="Observer latitude in degrees")
    p.add_argument("--lon", type=float, required=True, help="Observer longitude in degrees (positive East)")
    p.add_argument("--elevation", type=float, default=0.0, help="metres")
    p.add_argument("--pressure", type=float, default=1013.0, help="millibars")
    p.add_argument("--temperature", type=float, default=15.0, help="degrees Celsius")
    p.add_argument("--slope", type=float, default=0.0, help="surface slope from horizontal (degrees)")
    p.add_argument("--azm-rotation", type=float, default=0.0, help="surface azimuth rotation from south, negative east")
    p.add_argument("--atmos-refract", type=float, default=0.5667, help="refraction at the horizon (degrees)")
    p.add_argument("--no-incidence", action="store_true")
    p.add_argument("--no-sun-events", action="store_true")
    p.add_argument("--no-validate", action="store_true")
    p.add_argument("--intermediate", action="store_true", help="also print the intermediate values")
    args = p.parse_args(argv)

    y, mo, d = _parse_ymd(args.date)
    hh, mm, ss = _parse_hms(args.time)
    params = SpaParams(
        year=y, month=mo, day=d, hour=hh, minute=mm, second=ss,
        timezone=args.tz, delta_ut1=args.delta_ut1, delta_t=args.delta_t,
        longitude=args.lon, latitude=args.lat, elevation=args.elevation,
        pressure=args.pressure, temperature=args.temperature,
        slope=args.slope, azm_rotation=args.azm_rotation, atmos_refract=args.atmos_refract,
    )
    opts = SpaOptions(
        incidence=not args.no_incidence,
        sun_events=not args.no_sun_events,
        validate=not args.no_validate,
    )
    it = SpaIntermediate() if args.intermediate else None

    try:
        res = calculate(params, opts, intermediate=it)
    except InputRangeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print("Solar Position (degrees):")
    print(f"  Zenith                 = {res.zenith:.6f}")
    print(f"  Azimuth (astronomers)  = {res.azimuth_astro:.6f}")
    print(f"  Azimuth (navigators)   = {res.azimuth:.6f}")
    if res.incidence is not None:
        print(f"  Incidence              = {res.incidence:.6f}")
    if res.sun_transit is not None:
        print()
        print("Sun Events (local time):")
        if res.sun_transit == NO_EVENT:
            print("  Sun does not rise or set.")
        else:
            print(f"  Sunrise : {_fmt_time(res.sunrise)}")
            print(f"  Transit : {_fmt_time(res.sun_transit)}")
            print(f"  Sunset  : {_fmt_time(res.sunset)}")

    if it is not None:
        print()
        print("Intermediate values:")
        for name, value in vars(it).items():
            if value is not None:
                print(f"  {name:<12} = {value}")

    return 0


def cmd_julian(argv: list[str]) -> int:
    from solarspa.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="solarspa julian", description="Print the Julian time scales of an instant.")
    _add_instant_args(p)
    args = p.parse_args(argv)

    y, mo, d = _parse_ymd(args.date)
    hh, mm, ss = _parse_hms(args.time)
    jd = ts.julian_day(y, mo, d, hh, mm, ss, args.tz, args.delta_ut1)
    t = ts.time_scales(jd, args.delta_t)

    print(f"JD  = {t.jd:.6f}")
    print(f"JC  = {t.jc:.12f}")
    print(f"JDE = {t.jde:.6f}")
    print(f"JCE = {t.jce:.12f}")
    print(f"JME = {t.jme:.12f}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="solarspa", description="NREL Solar Position Algorithm toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("position", help="Sun zenith/azimuth/incidence and rise/transit/set", add_help=False)
    sub.add_parser("julian", help="Julian day / century / ephemeris scales", add_help=False)

    # diagnostics
    sub.add_parser("bench", help="Benchmark calculate()", add_help=False)
    sub.add_parser("validate-csv", help="Compare against a CSV of reference results", add_help=False)
    sub.add_parser("cities", help="Sun for a few world cities (needs pytz)", add_help=False)
    sub.add_parser("plot-day", help="Plot the sun over one day (needs matplotlib)", add_help=False)

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "position":
        return cmd_position(rest)

    if args.cmd == "julian":
        return cmd_julian(rest)

    tool_map = {
        "bench": "solarspa.diagnostics.benchmark",
        "validate-csv": "solarspa.diagnostics.validate_csv",
        "cities": "solarspa.diagnostics.cities",
        "plot-day": "solarspa.diagnostics.plot_day",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
