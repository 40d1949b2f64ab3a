# tests/test_time_scales.py

import pytest
import random

from solarspa.reference import time_scales as ts


def test_meeus_example_7a():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 7.a.
    1957 October 4.81 (Sputnik launch) -> JD 2436116.31
    """
    assert ts.julian_day(1957, 10, 4, 19, 26, 24.0) == pytest.approx(2436116.31, abs=1e-6)


def test_meeus_example_7b_julian_calendar():
    """333 January 27.5 (Julian calendar) -> JD 1842713.0"""
    assert ts.julian_day(333, 1, 27, 12) == pytest.approx(1842713.0, abs=1e-9)


def test_known_epochs():
    # J2000.0
    assert ts.julian_day(2000, 1, 1, 12) == 2451545.0
    # Start of the Julian Day count
    assert ts.julian_day(-4712, 1, 1, 12) == pytest.approx(0.0, abs=1e-9)


def test_gregorian_reform_boundary():
    """Thursday 1582-10-04 (Julian) is followed by Friday 1582-10-15 (Gregorian)."""
    assert ts.julian_day(1582, 10, 4) == pytest.approx(2299159.5, abs=1e-9)
    assert ts.julian_day(1582, 10, 15) == pytest.approx(2299160.5, abs=1e-9)


def test_timezone_and_dut1_shift():
    # NREL SPA example: 2003-10-17 12:30:30 at UTC-7
    jd = ts.julian_day(2003, 10, 17, 12, 30, 30.0, -7.0)
    assert jd == pytest.approx(2452930.312847, abs=1e-6)

    # Same instant expressed in UTC
    assert ts.julian_day(2003, 10, 17, 19, 30, 30.0) == pytest.approx(jd, abs=1e-9)

    # UT1-UTC adds seconds
    jd_dut = ts.julian_day(2003, 10, 17, 12, 30, 30.0, -7.0, 0.5)
    assert (jd_dut - jd) * 86400.0 == pytest.approx(0.5, abs=1e-4)


def test_derived_scales():
    jd = ts.julian_day(2003, 10, 17, 12, 30, 30.0, -7.0)
    t = ts.time_scales(jd, 67.0)

    assert t.jd == jd
    assert t.jde == pytest.approx(2452930.313623, abs=1e-6)
    assert t.jc == pytest.approx((jd - 2451545.0) / 36525.0, abs=1e-15)
    assert t.jce == pytest.approx((t.jde - 2451545.0) / 36525.0, abs=1e-15)
    assert t.jme == pytest.approx(t.jce / 10.0, abs=1e-15)
    assert t.jc == pytest.approx(0.0379277987, abs=1e-9)


def test_consecutive_days_differ_by_one():
    random.seed(42)
    for _ in range(1000):
        y = random.randint(-2000, 6000)
        m = random.randint(1, 12)
        d = random.randint(1, 27)
        a = ts.julian_day(y, m, d)
        b = ts.julian_day(y, m, d + 1)
        # Only the reform gap (10 days) breaks the +1 rule
        if not (a <= ts.GREGORIAN_REFORM_JD < b):
            assert b - a == pytest.approx(1.0, abs=1e-9)


def test_hours_to_hms():
    h, m, s = ts.hours_to_hms(6.0 + 12.0 / 60.0 + 43.5 / 3600.0)
    assert (h, m) == (6, 12)
    assert s == pytest.approx(43.5, abs=1e-6)
