# tests/test_sunrise.py

import pytest
from unittest.mock import patch

from solarspa.reference import geocentric as geo
from solarspa.reference import sun_events as ev
from solarspa.reference import time_scales as ts

# --- NREL SPA Test Case (Appendix A.5) ---
# Date: October 17, 2003
# Time Zone: -7 hours
# Longitude: -105.1786 deg (West)
# Latitude: 39.742476 deg (North)
# Delta T: 67 seconds
#
# Targets:
# EOT = 14.641503 min
# Sunrise = 06:12:43.46 local
# Sunset  = 17:20:19.19 local

LON = -105.1786
LAT = 39.742476


def _hours(h, m, s):
    return h + m / 60.0 + s / 3600.0


@pytest.fixture(scope="module")
def nrel_rts():
    return ev.rise_transit_set(2003, 10, 17, longitude=LON, latitude=LAT, delta_t=67.0, timezone=-7.0)


def test_nrel_spa_equation_of_time():
    jd = ts.julian_day(2003, 10, 17, 12, 30, 30.0, -7.0)
    g = geo.geocentric_sun(jd, 67.0)
    assert ev.equation_of_time_minutes(g) == pytest.approx(14.641503, abs=1e-5)


def test_nrel_spa_sunrise_sunset(nrel_rts):
    assert nrel_rts.has_events
    assert nrel_rts.sunrise == pytest.approx(_hours(6, 12, 43.46), abs=2e-4)
    assert nrel_rts.sunset == pytest.approx(_hours(17, 20, 19.19), abs=2e-4)


def test_nrel_spa_transit(nrel_rts):
    # local apparent noon: 12h - EOT + 4 min per degree west of the -105 meridian
    expected = 12.0 - 14.64 / 60.0 + 4.0 * (-105.0 - LON) / 60.0
    assert nrel_rts.sun_transit == pytest.approx(expected, abs=2e-3)
    assert nrel_rts.sunrise < nrel_rts.sun_transit < nrel_rts.sunset


def test_rise_set_hour_angles_are_symmetric(nrel_rts):
    assert nrel_rts.srha_deg < 0.0 < nrel_rts.ssha_deg
    assert abs(nrel_rts.srha_deg + nrel_rts.ssha_deg) < 1.0
    # transit altitude ~ 90 - lat + dec for mid October
    assert nrel_rts.sta_deg == pytest.approx(90.0 - LAT - 9.4, abs=0.5)


def test_polar_night_and_day():
    night = ev.rise_transit_set(2019, 12, 21, longitude=0.0, latitude=89.0)
    assert not night.has_events
    assert night == ev.POLAR
    assert night.sunrise == ev.NO_EVENT and night.sunset == ev.NO_EVENT and night.sta_deg == ev.NO_EVENT

    day = ev.rise_transit_set(2019, 6, 21, longitude=0.0, latitude=89.0)
    assert day == ev.POLAR


def test_hour_angle_sentinel():
    assert ev.sun_hour_angle_at_rise_set(89.0, -23.4, -0.83337) == ev.NO_EVENT
    h0 = ev.sun_hour_angle_at_rise_set(0.0, 0.0, 0.0)
    assert h0 == pytest.approx(90.0, abs=1e-9)


def test_events_sample_geocentric_sun_without_delta_t():
    calls = []
    real = ev.geocentric_sun

    def spy(jd, delta_t):
        calls.append((jd, delta_t))
        return real(jd, delta_t)

    with patch("solarspa.reference.sun_events.geocentric_sun", side_effect=spy):
        ev.sample_three_days(2003, 10, 17)

    jd0 = ts.julian_day(2003, 10, 17)
    assert calls == [(jd0 - 1.0, 0.0), (jd0, 0.0), (jd0 + 1.0, 0.0)]


def test_interpolate_day_triple():
    v = ev.DayTriple(1.0, 2.0, 3.0)
    assert ev.interpolate_day_triple(v, 0.0) == 2.0
    assert ev.interpolate_day_triple(v, 0.5) == pytest.approx(2.5, abs=1e-12)

    # quadratic through (-1, 0), (0, 0.5), (1, 1.5) hits the outer samples
    q = ev.DayTriple(0.0, 0.5, 1.5)
    assert ev.interpolate_day_triple(q, 1.0) == pytest.approx(1.5, abs=1e-12)
    assert ev.interpolate_day_triple(q, -1.0) == pytest.approx(0.0, abs=1e-12)

    # a first difference of 2 or more is folded to its fractional part
    assert ev.interpolate_day_triple(ev.DayTriple(0.0, 1.0, 4.0), 1.0) == pytest.approx(1.0, abs=1e-12)


def test_interpolate_day_triple_across_360():
    # right ascension wraps between the first two samples
    v = ev.DayTriple(359.4, 0.386, 1.372)
    assert ev.interpolate_day_triple(v, 0.5) == pytest.approx(0.386 + 0.493, abs=1e-9)


def test_equation_of_time_window():
    # a raw value one day off folds back into the window
    e = ev.equation_of_time(359.9, 0.1, 0.0, 23.44)
    assert e == pytest.approx(4.0 * (359.9 - 0.0057183 - 0.1) - 1440.0, abs=1e-9)
    assert -20.0 <= e <= 20.0


def test_eot_bounded_over_a_year():
    jd0 = ts.julian_day(2021, 1, 1)
    for k in range(0, 366, 5):
        g = geo.geocentric_sun(jd0 + k, 69.0)
        assert -17.0 < ev.equation_of_time_minutes(g) < 17.0
