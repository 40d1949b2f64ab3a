from __future__ import annotations

from dataclasses import dataclass
import math


# ============================================================
# Julian Day from calendar date/time (Meeus ch. 7)
# ============================================================

J2000 = 2451545.0  # JD at 2000-01-01 12:00 TT
GREGORIAN_REFORM_JD = 2299160.0  # last JD of the Julian calendar (1582-10-04)


def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    tz_hours: float = 0.0,
    dut1: float = 0.0,
) -> float:
    """
    Civil date/time at a fixed UTC offset -> JD (UT1).

      JD = INT(365.25 (Y + 4716)) + INT(30.6001 (M + 1)) + D + B - 1524.5

    with January/February counted as months 13/14 of the previous year and the
    Gregorian correction B = 2 - A + INT(A/4), A = INT(Y/100), applied only after
    the 1582 reform. ``dut1`` is UT1-UTC in seconds.
    """
    day_dec = day + (hour - tz_hours + (minute + (second + dut1) / 60.0) / 60.0) / 24.0

    if month < 3:
        month += 12
        year -= 1

    jd = (
        math.floor(365.25 * (year + 4716.0))
        + math.floor(30.6001 * (month + 1))
        + day_dec
        - 1524.5
    )

    if jd > GREGORIAN_REFORM_JD:
        a = int(year / 100)
        jd += 2 - a + a // 4

    return jd


def julian_day_0h(year: int, month: int, day: int) -> float:
    """JD at 0h UT of a calendar date."""
    return julian_day(year, month, day)


# ============================================================
# Derived scales
# ============================================================

def julian_century(jd: float) -> float:
    """JC = (JD - 2451545) / 36525"""
    return (jd - J2000) / 36525.0


def julian_ephemeris_day(jd: float, delta_t: float) -> float:
    """JDE = JD + ΔT/86400, ΔT = TT - UT1 in seconds."""
    return jd + delta_t / 86400.0


def julian_ephemeris_century(jde: float) -> float:
    return (jde - J2000) / 36525.0


def julian_ephemeris_millennium(jce: float) -> float:
    return jce / 10.0


@dataclass(frozen=True)
class TimeScales:
    """All time arguments used by the reduction, for one instant."""
    jd: float
    jc: float
    jde: float
    jce: float
    jme: float


def time_scales(jd: float, delta_t: float) -> TimeScales:
    jde = julian_ephemeris_day(jd, delta_t)
    jce = julian_ephemeris_century(jde)
    return TimeScales(
        jd=jd,
        jc=julian_century(jd),
        jde=jde,
        jce=jce,
        jme=julian_ephemeris_millennium(jce),
    )


# ============================================================
# Clock formatting helper
# ============================================================

def hours_to_hms(hours: float) -> tuple[int, int, float]:
    """Decimal hours -> (h, m, s)."""
    h = int(hours)
    m_dec = (hours - h) * 60.0
    m = int(m_dec)
    s = (m_dec - m) * 60.0
    return h, m, s
